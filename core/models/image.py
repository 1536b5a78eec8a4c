# =============================================================================
# core/models/image.py - Uploaded Image Schemas
# =============================================================================

from pydantic import BaseModel, Field


class ImageUploadResult(BaseModel):
    """
    Returned by POST /api/upload/image.

    Example:
        {
            "url": "/api/upload/image/products/1736937000000-k3j9x2.png",
            "key": "products/1736937000000-k3j9x2.png",
            "size": 102400,
            "type": "image/png"
        }
    """

    url: str = Field(..., description="Path the image can be fetched from")
    key: str = Field(..., description="Object store key")
    size: int = Field(..., ge=0, description="Size in bytes")
    type: str = Field(..., description="MIME content type")
