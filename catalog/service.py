"""
Business rules shared by the web front end and the CLI.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from catalog.db import AlbumRecord, CatalogStore, PhotoRecord, UpdateOutcome

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Validates caller input, decides which photo fields may change and
    forwards to the store. Holds no storage-specific logic.
    """

    def __init__(self, store: CatalogStore):
        self._store = store

    def get_photo_by_id(self, photo_id: int) -> Optional[PhotoRecord]:
        return self._store.find_photo_by_id(photo_id)

    def update_photo(
        self,
        photo_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> UpdateOutcome:
        """
        Update a photo's title and/or description.

        Args:
            photo_id (int): Photo ID
            title (Optional[str]): New title; empty or None leaves it untouched
            description (Optional[str]): New description; empty or None leaves it untouched

        Returns:
            UpdateOutcome: NO_OP when neither field was supplied, otherwise the
            store's outcome
        """
        updates = {}
        if title:
            updates["title"] = title
        if description:
            updates["description"] = description
        if not updates:
            logger.info("Nothing to update for photo %s", photo_id)
            return UpdateOutcome.NO_OP

        outcome = self._store.update_photo_by_id(photo_id, updates)
        if not outcome:
            logger.info("Update of photo %s not applied: %s", photo_id, outcome.value)
        return outcome

    def add_tag(self, photo_id: int, tag: Optional[str]) -> UpdateOutcome:
        """
        Add a tag to a photo, trimmed of surrounding whitespace.

        Returns INVALID for a missing or blank tag and NO_OP when the photo
        already carries the tag under any casing.
        """
        if not tag or not tag.strip():
            return UpdateOutcome.INVALID

        outcome = self._store.add_tag_to_photo(photo_id, tag.strip())
        if not outcome:
            logger.info("Tag %r not added to photo %s: %s", tag, photo_id, outcome.value)
        return outcome

    def list_albums(self) -> List[AlbumRecord]:
        return self._store.get_all_albums()

    def get_album(self, album_id: int) -> Optional[AlbumRecord]:
        return self._store.find_album_by_id(album_id)

    def list_photos_by_album(self, album_id: int) -> List[PhotoRecord]:
        return self._store.get_photos_by_album(album_id)
