"""
Dependency wiring for the web app and the CLI.
"""

from __future__ import annotations

import threading

from catalog.config import get_settings
from catalog.db import CatalogStore, InMemoryCatalogStore, MongoCatalogStore
from catalog.service import CatalogService

_catalog_store: CatalogStore | None = None
_catalog_service: CatalogService | None = None
_lock = threading.Lock()


def get_catalog_store() -> CatalogStore:
    """
    Return a singleton store so one MongoDB client serves the whole process.
    """
    global _catalog_store
    if _catalog_store:
        return _catalog_store

    with _lock:
        if _catalog_store:
            return _catalog_store
        settings = get_settings()
        if settings.use_in_memory_backends or not settings.mongo_url:
            _catalog_store = InMemoryCatalogStore()
        else:
            _catalog_store = MongoCatalogStore(
                settings.mongo_url, db_name=settings.mongo_db_name
            )
    return _catalog_store


def get_catalog_service() -> CatalogService:
    global _catalog_service
    if _catalog_service:
        return _catalog_service

    store = get_catalog_store()
    with _lock:
        if not _catalog_service:
            _catalog_service = CatalogService(store)
    return _catalog_service


def close_catalog_store() -> None:
    """Release the store's connection and forget the singletons."""
    global _catalog_store, _catalog_service
    with _lock:
        if _catalog_store is not None:
            _catalog_store.close()
        _catalog_store = None
        _catalog_service = None
