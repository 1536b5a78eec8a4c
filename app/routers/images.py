# =============================================================================
# app/routers/images.py - Product Image Upload Endpoints
# =============================================================================
# POST /api/upload/image          -> store an image from a multipart `file` part
# GET  /api/upload/image/{key...} -> serve a stored image
# =============================================================================

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, StreamingResponse
from starlette.datastructures import UploadFile

from app.auth import IMAGES_UPLOAD, require_capability
from app.dependencies import ConfigDep, ImageServiceDep
from app.exceptions import NoFileProvidedError
from core.services.image_service import DEFAULT_IMAGE_TYPE

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/image",
    status_code=201,
    dependencies=[Depends(require_capability(IMAGES_UPLOAD))],
)
async def upload_image(request: Request, service: ImageServiceDep):
    """
    Upload a product image.

    This endpoint:
    1. Reads the `file` part of the multipart form
    2. Validates the type (JPEG, PNG, GIF, WebP) and size (5MB by default)
    3. Stores it under a generated products/ key

    Returns the key and the URL the image is served from.
    """
    form = await request.form()
    file = form.get("file")

    if not isinstance(file, UploadFile):
        raise NoFileProvidedError()

    content = await file.read()
    filename = file.filename or ""

    logger.info(f"Processing image upload: {filename} ({len(content)} bytes, {file.content_type})")

    result = service.store_image(
        filename=filename,
        content_type=file.content_type,
        body=content,
    )

    return {"success": True, "data": result.model_dump()}


@router.get("/image/{key:path}")
async def get_image(key: str, service: ImageServiceDep, config: ConfigDep):
    """
    Serve a stored image.

    The key may contain slashes (e.g. products/1736937000000-k3j9x2.png).
    Empty path segments are ignored.
    """
    key = "/".join(part for part in key.split("/") if part)
    if not key:
        return JSONResponse(status_code=404, content={"error": "Not found"})

    stored = service.fetch_image(key)

    if stored is None:
        logger.info(f"Image not found: {key}")
        return PlainTextResponse("Image not found", status_code=404)

    headers = {
        "Cache-Control": config.IMAGE_CACHE_CONTROL,
        "Content-Length": str(stored.size),
    }
    if stored.etag:
        headers["ETag"] = stored.etag

    return StreamingResponse(
        stored.iter_chunks(),
        media_type=stored.content_type or DEFAULT_IMAGE_TYPE,
        headers=headers,
    )
