import unittest
from unittest.mock import MagicMock

from catalog.db import InMemoryCatalogStore, UpdateOutcome
from catalog.service import CatalogService


def _photos():
    return [
        {"id": 1, "title": "A", "description": "B", "tags": ["sun"], "albums": [10]},
        {"id": 2, "title": "C", "description": "D", "tags": [], "albums": [20]},
        {"id": 3, "title": "E", "description": "F", "tags": [], "albums": [10, 20]},
    ]


class CatalogServiceTests(unittest.TestCase):
    def setUp(self):
        self.store = MagicMock(
            wraps=InMemoryCatalogStore(_photos(), [{"id": 10, "name": "Summer"}])
        )
        self.service = CatalogService(self.store)

    def test_get_photo_by_id(self):
        self.assertEqual(self.service.get_photo_by_id(1).title, "A")
        for missing in (0, 4, -1, 1000):
            self.assertIsNone(self.service.get_photo_by_id(missing))

    def test_update_photo_description_only(self):
        outcome = self.service.update_photo(1, "", "New desc")
        self.assertTrue(outcome)
        photo = self.service.get_photo_by_id(1)
        self.assertEqual(photo.title, "A")
        self.assertEqual(photo.description, "New desc")
        self.store.update_photo_by_id.assert_called_once_with(1, {"description": "New desc"})

    def test_update_photo_nothing_to_change(self):
        for title, description in ((None, None), ("", ""), ("", None), (None, "")):
            outcome = self.service.update_photo(1, title, description)
            self.assertIs(outcome, UpdateOutcome.NO_OP)
            self.assertFalse(outcome)
        self.store.update_photo_by_id.assert_not_called()

    def test_update_unknown_photo(self):
        outcome = self.service.update_photo(99, "T", "D")
        self.assertIs(outcome, UpdateOutcome.NOT_FOUND)
        self.assertFalse(outcome)

    def test_add_tag_scenario(self):
        self.assertFalse(self.service.add_tag(1, "Sun"))
        self.assertEqual(self.service.get_photo_by_id(1).tags, ["sun"])

        self.assertTrue(self.service.add_tag(1, "beach"))
        self.assertEqual(self.service.get_photo_by_id(1).tags, ["sun", "beach"])

    def test_add_tag_case_variants_are_idempotent(self):
        self.assertTrue(self.service.add_tag(2, "Beach"))
        for variant in ("beach", "BEACH", "bEaCh", "  beach  "):
            self.assertIs(self.service.add_tag(2, variant), UpdateOutcome.NO_OP)
        self.assertEqual(self.service.get_photo_by_id(2).tags, ["Beach"])

    def test_add_tag_rejects_blank(self):
        for tag in (None, "", "   ", "\t\n"):
            self.assertIs(self.service.add_tag(1, tag), UpdateOutcome.INVALID)
        self.store.add_tag_to_photo.assert_not_called()
        self.assertEqual(self.service.get_photo_by_id(1).tags, ["sun"])

    def test_add_tag_trims_whitespace(self):
        self.assertTrue(self.service.add_tag(2, "  pier "))
        self.store.add_tag_to_photo.assert_called_once_with(2, "pier")
        self.assertEqual(self.service.get_photo_by_id(2).tags, ["pier"])

    def test_add_tag_unknown_photo(self):
        self.assertIs(self.service.add_tag(99, "x"), UpdateOutcome.NOT_FOUND)

    def test_list_albums(self):
        albums = self.service.list_albums()
        self.assertEqual([(a.id, a.name) for a in albums], [(10, "Summer")])
        self.assertEqual(self.service.get_album(10).name, "Summer")
        self.assertIsNone(self.service.get_album(11))

    def test_list_photos_by_album(self):
        self.assertEqual({p.id for p in self.service.list_photos_by_album(10)}, {1, 3})
        self.assertEqual({p.id for p in self.service.list_photos_by_album(20)}, {2, 3})
        self.assertEqual(self.service.list_photos_by_album(30), [])

    def test_scalar_albums_field_in_memory(self):
        store = InMemoryCatalogStore([{"id": 7, "title": "H", "albums": 20}])
        service = CatalogService(store)
        self.assertEqual([p.id for p in service.list_photos_by_album(20)], [7])
        self.assertEqual(service.get_photo_by_id(7).albums, [20])


if __name__ == "__main__":
    unittest.main()
