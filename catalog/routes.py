"""
Server-rendered HTML routes for albums and photos.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from catalog.dependencies import get_catalog_service
from catalog.service import CatalogService

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()

MISSING_FIELDS_ERROR = "Title and description are required"
UPDATE_FAILED_ERROR = "Could not update"


def _parse_id(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None


def _photo_not_found(photo_id: str) -> PlainTextResponse:
    logger.info("Photo %s not found", photo_id)
    return PlainTextResponse("Photo not found", status_code=404)


@router.get("/")
def list_albums(
    request: Request, service: CatalogService = Depends(get_catalog_service)
):
    albums = service.list_albums()
    return templates.TemplateResponse(request, "albums.html", {"albums": albums})


@router.get("/albums/{album_id}")
def show_album(
    request: Request,
    album_id: str,
    service: CatalogService = Depends(get_catalog_service),
):
    parsed_id = _parse_id(album_id)
    if parsed_id is None:
        album, photos = None, []
    else:
        album = service.get_album(parsed_id)
        photos = service.list_photos_by_album(parsed_id)
    return templates.TemplateResponse(
        request,
        "album.html",
        {
            "album_id": album_id if parsed_id is None else parsed_id,
            "album": album,
            "photos": photos,
            "count": len(photos),
        },
    )


@router.get("/photos/{photo_id}")
def show_photo(
    request: Request,
    photo_id: str,
    service: CatalogService = Depends(get_catalog_service),
):
    parsed_id = _parse_id(photo_id)
    photo = service.get_photo_by_id(parsed_id) if parsed_id is not None else None
    if not photo:
        return _photo_not_found(photo_id)
    return templates.TemplateResponse(request, "photo.html", {"photo": photo})


@router.get("/photos/{photo_id}/edit")
def edit_photo_form(
    request: Request,
    photo_id: str,
    service: CatalogService = Depends(get_catalog_service),
):
    parsed_id = _parse_id(photo_id)
    photo = service.get_photo_by_id(parsed_id) if parsed_id is not None else None
    if not photo:
        return _photo_not_found(photo_id)
    return templates.TemplateResponse(request, "edit.html", {"photo": photo})


@router.post("/photos/{photo_id}/edit")
def submit_photo_edit(
    request: Request,
    photo_id: str,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    service: CatalogService = Depends(get_catalog_service),
):
    """
    Post-redirect-get: re-render the form with the submitted values on
    failure, redirect to the photo page on success.
    """
    parsed_id = _parse_id(photo_id)
    submitted = {"id": photo_id, "title": title or "", "description": description or ""}

    if not title or not description:
        return templates.TemplateResponse(
            request,
            "edit.html",
            {"photo": submitted, "error": MISSING_FIELDS_ERROR},
        )

    outcome = None
    if parsed_id is not None:
        outcome = service.update_photo(parsed_id, title, description)
    if not outcome:
        logger.info("Edit of photo %s rejected: %s", photo_id, outcome)
        return templates.TemplateResponse(
            request,
            "edit.html",
            {"photo": submitted, "error": UPDATE_FAILED_ERROR},
        )

    return RedirectResponse(url=f"/photos/{parsed_id}", status_code=302)
