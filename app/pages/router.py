# =============================================================================
# app/pages/router.py - Page Routes
# =============================================================================
# Maps URL paths to page renderers and wraps the result in the layout.
# Anything not matched here (or by the API routers) is answered with a
# plain-text 404 by the HTTP exception handler in app/exceptions.py.
# =============================================================================

import logging
import mimetypes
from pathlib import Path
from typing import Callable

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, HTMLResponse, PlainTextResponse

from app.config import settings
from app.dependencies import ClockDep, SettingsRepositoryDep
from app.pages import renderers
from app.pages.layout import PageLayout, render_layout
from core.models import DEFAULT_SETTINGS, SiteSettings
from core.services import SettingsRepository

logger = logging.getLogger(__name__)

router = APIRouter(include_in_schema=False)

PAGE_METHODS = ["GET", "HEAD"]


def load_site_settings(repository: SettingsRepository) -> SiteSettings:
    """
    Settings for rendering. Pages still render with the defaults when the
    store is unavailable.
    """
    try:
        return repository.get()
    except Exception as e:
        logger.warning(f"Rendering with default settings: {e}")
        return DEFAULT_SETTINGS.model_copy()


def render_page(
    request: Request,
    repository: SettingsRepository,
    clock,
    renderer: Callable[..., PageLayout],
    *args,
) -> HTMLResponse:
    site = load_site_settings(repository)
    page = renderer(site, *args)
    html = render_layout(page, site=site, year=clock.now().year, active_path=request.url.path)
    return HTMLResponse(html)


# =============================================================================
# Public Pages
# =============================================================================

@router.api_route("/", methods=PAGE_METHODS)
@router.api_route("/home", methods=PAGE_METHODS)
async def home(request: Request, repository: SettingsRepositoryDep, clock: ClockDep):
    return render_page(request, repository, clock, renderers.home_page)


@router.api_route("/products", methods=PAGE_METHODS)
async def products(request: Request, repository: SettingsRepositoryDep, clock: ClockDep):
    return render_page(request, repository, clock, renderers.products_page)


@router.api_route("/products/{product_id:path}", methods=PAGE_METHODS)
async def product_detail(
    product_id: str,
    request: Request,
    repository: SettingsRepositoryDep,
    clock: ClockDep,
):
    return render_page(request, repository, clock, renderers.product_detail_page, product_id)


@router.api_route("/about", methods=PAGE_METHODS)
async def about(request: Request, repository: SettingsRepositoryDep, clock: ClockDep):
    return render_page(request, repository, clock, renderers.about_page)


@router.api_route("/contact", methods=PAGE_METHODS)
async def contact(request: Request, repository: SettingsRepositoryDep, clock: ClockDep):
    return render_page(request, repository, clock, renderers.contact_page)


# =============================================================================
# Admin Pages
# =============================================================================

@router.api_route("/admin", methods=PAGE_METHODS)
@router.api_route("/admin/login", methods=PAGE_METHODS)
async def admin_login(request: Request, repository: SettingsRepositoryDep, clock: ClockDep):
    return render_page(request, repository, clock, renderers.admin_login_page)


@router.api_route("/admin/dashboard", methods=PAGE_METHODS)
async def admin_dashboard(request: Request, repository: SettingsRepositoryDep, clock: ClockDep):
    return render_page(request, repository, clock, renderers.admin_dashboard_page)


# =============================================================================
# Static Images
# =============================================================================

@router.api_route("/images/{path:path}", methods=PAGE_METHODS)
async def static_image(path: str):
    """Serve a file from STATIC_IMAGES_DIR, refusing paths that escape it."""
    base = Path(settings.STATIC_IMAGES_DIR).resolve()
    target = (base / path).resolve()

    if not target.is_relative_to(base) or not target.is_file():
        return PlainTextResponse("Page not found", status_code=404)

    media_type, _ = mimetypes.guess_type(target.name)
    return FileResponse(str(target), media_type=media_type or "application/octet-stream")
