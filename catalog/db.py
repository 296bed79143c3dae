"""
Document-store access for photos and albums: MongoDB and an in-memory test implementation.
"""

from __future__ import annotations

import copy
import enum
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Protocol

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import WriteError

logger = logging.getLogger(__name__)

PHOTOS_COLLECTION = "photos"
ALBUMS_COLLECTION = "albums"


class UpdateOutcome(enum.Enum):
    """Result kind of a photo mutation. Only APPLIED is truthy."""

    APPLIED = "applied"
    NO_OP = "no-op"
    NOT_FOUND = "not-found"
    INVALID = "invalid"
    STORE_ERROR = "store-error"

    def __bool__(self) -> bool:
        return self is UpdateOutcome.APPLIED


class CatalogStore(Protocol):
    """Interface for photo and album persistence."""

    def find_photo_by_id(self, photo_id: int) -> Optional["PhotoRecord"]:
        ...

    def update_photo_by_id(
        self, photo_id: int, updates: Dict[str, Any]
    ) -> UpdateOutcome:
        ...

    def add_tag_to_photo(self, photo_id: int, tag: str) -> UpdateOutcome:
        ...

    def get_all_albums(self) -> List["AlbumRecord"]:
        ...

    def find_album_by_id(self, album_id: int) -> Optional["AlbumRecord"]:
        ...

    def get_photos_by_album(self, album_id: int) -> List["PhotoRecord"]:
        ...

    def close(self) -> None:
        ...


def album_ids(value: Any) -> List[int]:
    """Normalize a stored `albums` field; a single scalar id counts as one membership."""
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


@dataclass
class PhotoRecord:
    id: int
    title: str = ""
    description: str = ""
    tags: List[str] = field(default_factory=list)
    albums: List[int] = field(default_factory=list)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "PhotoRecord":
        tags = doc.get("tags")
        return cls(
            id=doc["id"],
            title=doc.get("title") or "",
            description=doc.get("description") or "",
            tags=[str(t) for t in tags] if isinstance(tags, list) else [],
            albums=album_ids(doc.get("albums")),
        )

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "tags": list(self.tags),
            "albums": list(self.albums),
        }


@dataclass
class AlbumRecord:
    id: int
    name: str = ""

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "AlbumRecord":
        return cls(id=doc["id"], name=doc.get("name") or "")

    def as_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


def merge_tag(tags: Iterable[Any], tag: str) -> Optional[List[str]]:
    """
    Return ``tags`` with ``tag`` appended, or None when an existing entry
    already matches it case-insensitively.
    """
    current = [str(t) for t in tags]
    folded = tag.casefold()
    if any(t.casefold() == folded for t in current):
        return None
    current.append(tag)
    return current


class InMemoryCatalogStore:
    """Simple in-memory document store for development and tests."""

    def __init__(
        self,
        photos: Optional[Iterable[Dict[str, Any]]] = None,
        albums: Optional[Iterable[Dict[str, Any]]] = None,
    ):
        self.photos: Dict[int, Dict[str, Any]] = {}
        self.albums: Dict[int, Dict[str, Any]] = {}
        for doc in photos or []:
            self.photos[doc["id"]] = copy.deepcopy(doc)
        for doc in albums or []:
            self.albums[doc["id"]] = copy.deepcopy(doc)

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        self.photos.clear()
        self.albums.clear()

    def find_photo_by_id(self, photo_id: int) -> Optional[PhotoRecord]:
        doc = self.photos.get(photo_id)
        return PhotoRecord.from_document(doc) if doc else None

    def update_photo_by_id(
        self, photo_id: int, updates: Dict[str, Any]
    ) -> UpdateOutcome:
        doc = self.photos.get(photo_id)
        if doc is None:
            return UpdateOutcome.NOT_FOUND
        doc.update(copy.deepcopy(updates))
        return UpdateOutcome.APPLIED

    def add_tag_to_photo(self, photo_id: int, tag: str) -> UpdateOutcome:
        doc = self.photos.get(photo_id)
        if doc is None:
            return UpdateOutcome.NOT_FOUND
        tags = doc.get("tags") if isinstance(doc.get("tags"), list) else []
        merged = merge_tag(tags, tag)
        if merged is None:
            return UpdateOutcome.NO_OP
        return self.update_photo_by_id(photo_id, {"tags": merged})

    def get_all_albums(self) -> List[AlbumRecord]:
        return [AlbumRecord.from_document(doc) for doc in self.albums.values()]

    def find_album_by_id(self, album_id: int) -> Optional[AlbumRecord]:
        doc = self.albums.get(album_id)
        return AlbumRecord.from_document(doc) if doc else None

    def get_photos_by_album(self, album_id: int) -> List[PhotoRecord]:
        return [
            PhotoRecord.from_document(doc)
            for doc in self.photos.values()
            if album_id in album_ids(doc.get("albums"))
        ]

    def close(self) -> None:
        return None


class MongoCatalogStore:
    """
    pymongo-backed implementation. The client is created on first use and
    reused for every later call; pass ``client`` to supply one directly
    (e.g. a mongomock client in tests).
    """

    def __init__(
        self,
        mongo_url: Optional[str] = None,
        db_name: str = "infs3201_fall2025",
        client: Optional[MongoClient] = None,
    ):
        if not mongo_url and client is None:
            raise ValueError("MONGO_URL is required for MongoCatalogStore")
        self.mongo_url = mongo_url
        self.db_name = db_name
        self._client = client
        self._client_lock = threading.Lock()

    @property
    def client(self) -> MongoClient:
        if self._client is None:
            with self._client_lock:
                if self._client is None:
                    logger.info("Connecting to MongoDB database %s", self.db_name)
                    self._client = MongoClient(self.mongo_url)
        return self._client

    def _photos(self) -> Collection:
        return self.client[self.db_name][PHOTOS_COLLECTION]

    def _albums(self) -> Collection:
        return self.client[self.db_name][ALBUMS_COLLECTION]

    def find_photo_by_id(self, photo_id: int) -> Optional[PhotoRecord]:
        doc = self._photos().find_one({"id": photo_id})
        return PhotoRecord.from_document(doc) if doc else None

    def update_photo_by_id(
        self, photo_id: int, updates: Dict[str, Any]
    ) -> UpdateOutcome:
        try:
            result = self._photos().update_one({"id": photo_id}, {"$set": updates})
        except WriteError as exc:
            logger.warning("Write rejected for photo %s: %s", photo_id, exc)
            return UpdateOutcome.STORE_ERROR
        if result.matched_count == 1:
            return UpdateOutcome.APPLIED
        return UpdateOutcome.NOT_FOUND

    def add_tag_to_photo(self, photo_id: int, tag: str) -> UpdateOutcome:
        # Read then write; a concurrent addition between the two can be lost.
        doc = self._photos().find_one({"id": photo_id}, {"tags": 1})
        if not doc:
            return UpdateOutcome.NOT_FOUND
        tags = doc.get("tags") if isinstance(doc.get("tags"), list) else []
        merged = merge_tag(tags, tag)
        if merged is None:
            return UpdateOutcome.NO_OP
        return self.update_photo_by_id(photo_id, {"tags": merged})

    def get_all_albums(self) -> List[AlbumRecord]:
        return [AlbumRecord.from_document(doc) for doc in self._albums().find({})]

    def find_album_by_id(self, album_id: int) -> Optional[AlbumRecord]:
        doc = self._albums().find_one({"id": album_id})
        return AlbumRecord.from_document(doc) if doc else None

    def get_photos_by_album(self, album_id: int) -> List[PhotoRecord]:
        return [
            PhotoRecord.from_document(doc)
            for doc in self._photos().find({"albums": album_id})
        ]

    def close(self) -> None:
        with self._client_lock:
            if self._client is not None:
                self._client.close()
                self._client = None
