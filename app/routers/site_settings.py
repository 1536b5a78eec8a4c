# =============================================================================
# app/routers/site_settings.py - Site Settings Endpoints
# =============================================================================
# GET  /api/settings  -> current settings document (or built-in defaults)
# POST /api/settings  -> replace the settings document
# =============================================================================

import logging

from fastapi import APIRouter, Depends, Request

from app.auth import SETTINGS_WRITE, require_capability
from app.dependencies import SettingsServiceDep
from app.exceptions import InvalidRequestBodyError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def get_settings(service: SettingsServiceDep):
    """
    Get the site settings.

    Returns the stored document verbatim, or the built-in defaults
    (without updated_at) if nothing has been saved yet.
    """
    return {"success": True, "data": service.get_document()}


@router.post("", dependencies=[Depends(require_capability(SETTINGS_WRITE))])
async def update_settings(request: Request, service: SettingsServiceDep):
    """
    Replace the site settings.

    The body is a JSON object with any of: site_name, site_description,
    company_intro, email, phone, address, linkedin, facebook, twitter.
    Missing fields are reset to their defaults; updated_at is set by the server.
    """
    try:
        submission = await request.json()
    except ValueError as e:
        raise InvalidRequestBodyError(str(e))

    if not isinstance(submission, dict):
        raise InvalidRequestBodyError("expected a JSON object")

    document = service.save_settings(submission)

    return {
        "success": True,
        "message": "Settings saved successfully",
        "data": document.to_document(),
    }
