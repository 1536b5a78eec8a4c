# =============================================================================
# app/auth/authorization.py - Capability Checks for Mutating Endpoints
# =============================================================================
# Saving settings and uploading images are gated by named capabilities.
# This module does not decide who may do what: the Authorizer is injected,
# and the default one allows every request. Deployments that need access
# control override `get_authorizer` with their own policy.
#
# Usage:
#   @router.post("", dependencies=[Depends(require_capability(SETTINGS_WRITE))])
#
#   app.dependency_overrides[get_authorizer] = lambda: MyAuthorizer()
# =============================================================================

import logging
from typing import Protocol

from fastapi import Depends, Request

from app.exceptions import PermissionDeniedError

logger = logging.getLogger(__name__)

# Capabilities
SETTINGS_WRITE = "settings:write"
IMAGES_UPLOAD = "images:upload"


class Authorizer(Protocol):
    def is_allowed(self, request: Request, capability: str) -> bool:
        ...


class AllowAllAuthorizer:
    """Permits everything. No authentication is configured by default."""

    def is_allowed(self, request: Request, capability: str) -> bool:
        logger.debug(f"Allowing {capability} for {request.method} {request.url.path} (no authorizer configured)")
        return True


_default_authorizer = AllowAllAuthorizer()


def get_authorizer() -> Authorizer:
    """Dependency returning the active authorizer."""
    return _default_authorizer


def require_capability(capability: str):
    """
    Build a dependency that rejects the request with 403 when the
    authorizer denies `capability`.
    """

    async def check(request: Request, authorizer: Authorizer = Depends(get_authorizer)) -> None:
        if not authorizer.is_allowed(request, capability):
            raise PermissionDeniedError(capability)

    return check
