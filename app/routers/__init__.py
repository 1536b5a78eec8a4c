# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoint
# - site_settings.py: Site settings read/write
# - images.py: Product image upload and serving
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import site_settings
from . import images

__all__ = [
    "health",
    "site_settings",
    "images",
]
