# =============================================================================
# app/auth/ - Authorization Hook
# =============================================================================

from app.auth.authorization import (
    IMAGES_UPLOAD,
    SETTINGS_WRITE,
    AllowAllAuthorizer,
    Authorizer,
    get_authorizer,
    require_capability,
)

__all__ = [
    "IMAGES_UPLOAD",
    "SETTINGS_WRITE",
    "AllowAllAuthorizer",
    "Authorizer",
    "get_authorizer",
    "require_capability",
]
