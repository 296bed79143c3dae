"""
Interactive command-line front end for the catalog.

Presents a menu to list albums, find a photo by ID, update a photo's title
and description, and add tags. Everything goes through the service layer.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from catalog.config import get_settings
from catalog.dependencies import close_catalog_store, get_catalog_service
from catalog.service import CatalogService

logger = logging.getLogger(__name__)

MENU = "\n1. List albums\n2. Find Photo by ID\n3. Update Photo\n4. Add Tag\n5. Exit"


def _parse_id(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def run(
    service: CatalogService,
    prompt: Callable[[str], str] = input,
    echo: Callable[..., None] = print,
) -> None:
    """
    Blocking read-evaluate loop. Returns on the exit choice or end of input;
    any other exception propagates to the caller.
    """
    echo("Digital Media Catalog CLI")

    while True:
        echo(MENU)
        try:
            choice = prompt("Select: ").strip()
        except EOFError:
            choice = "5"

        if choice == "1":
            for album in service.list_albums():
                echo(f"- {album.id}: {album.name}")
        elif choice == "2":
            photo_id = _parse_id(prompt("Photo ID: "))
            photo = service.get_photo_by_id(photo_id) if photo_id is not None else None
            echo(photo.as_dict() if photo else "Not found")
        elif choice == "3":
            photo_id = _parse_id(prompt("Photo ID: "))
            title = prompt("New title (blank = keep): ")
            description = prompt("New description (blank = keep): ")
            ok = False
            if photo_id is not None:
                ok = service.update_photo(photo_id, title or None, description or None)
            echo("Updated" if ok else "Not updated")
        elif choice == "4":
            photo_id = _parse_id(prompt("Photo ID: "))
            tag = prompt("Tag: ")
            ok = service.add_tag(photo_id, tag) if photo_id is not None else False
            echo("Tag added" if ok else "Duplicate or invalid")
        elif choice == "5":
            echo("Goodbye!")
            return
        else:
            echo("Invalid choice")


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(levelname)s:%(message)s",
    )
    try:
        run(get_catalog_service())
    except Exception as exc:
        print("CLI Error:", exc)
        logger.debug("CLI terminated", exc_info=True)
        return 1
    finally:
        close_catalog_store()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
