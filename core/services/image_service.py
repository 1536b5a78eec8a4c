# =============================================================================
# core/services/image_service.py - Product Image Storage
# =============================================================================
# Validates, names, stores and fetches uploaded product images.
#
# Keys look like: products/<epoch-ms>-<random>.<ext>
# The random part is short, so two uploads in the same millisecond can
# collide. The format is kept as-is because clients already store these keys.
# =============================================================================

import logging
import secrets
import string

from app.config import Settings
from app.exceptions import (
    FileTooLargeError,
    InvalidFileTypeError,
    StorageDownloadError,
    StorageUploadError,
)
from core.models import ImageUploadResult
from lib.clock import Clock, to_epoch_millis
from lib.object_store import ObjectStore, StoredObject

logger = logging.getLogger(__name__)

# Route the images are served from
IMAGE_URL_PREFIX = "/api/upload/image"

# Default content type when the stored object has none
DEFAULT_IMAGE_TYPE = "image/jpeg"

_KEY_ALPHABET = string.digits + string.ascii_lowercase
_KEY_RANDOM_LENGTH = 6


def file_extension(filename: str) -> str:
    """
    Text after the last dot, verbatim.

    A name without a dot is returned whole.
    """
    return filename.rsplit(".", 1)[-1]


def normalize_content_type(content_type: str | None) -> str:
    """MIME types compare case-insensitively; the lowercase form is canonical."""
    return (content_type or "").lower()


class ImageService:
    """
    Service for product image uploads.

    Stores raw bytes with the client's content type as metadata.
    """

    def __init__(self, store: ObjectStore, clock: Clock, config: Settings):
        self.store = store
        self.clock = clock
        self.config = config

    def validate(self, content_type: str | None, size: int) -> None:
        """
        Check type first, then size.

        Raises:
            InvalidFileTypeError: If content_type is not in the allow-list
            FileTooLargeError: If size exceeds MAX_IMAGE_SIZE_BYTES
        """
        allowed = self.config.allowed_image_types_list
        if normalize_content_type(content_type) not in allowed:
            raise InvalidFileTypeError(content_type, allowed)

        if size > self.config.MAX_IMAGE_SIZE_BYTES:
            raise FileTooLargeError(size, self.config.max_image_size_mb)

    def generate_key(self, filename: str) -> str:
        timestamp = to_epoch_millis(self.clock.now())
        random_part = "".join(secrets.choice(_KEY_ALPHABET) for _ in range(_KEY_RANDOM_LENGTH))
        return f"{self.config.IMAGE_KEY_PREFIX}/{timestamp}-{random_part}.{file_extension(filename)}"

    def store_image(self, filename: str, content_type: str, body: bytes) -> ImageUploadResult:
        """
        Validate and store an image.

        Args:
            filename: Client-supplied filename (only its extension is used)
            content_type: Client-supplied MIME type, stored lowercased
            body: File bytes

        Returns:
            ImageUploadResult with the URL the image is served from

        Raises:
            InvalidFileTypeError, FileTooLargeError: On validation failure
            StorageUploadError: If the store write fails
        """
        content_type = normalize_content_type(content_type)
        self.validate(content_type, len(body))

        key = self.generate_key(filename)

        try:
            self.store.put(key, body, content_type)
        except Exception as e:
            logger.error(f"Upload error: {e}")
            raise StorageUploadError(key, str(e))

        logger.info(f"Stored image {key} ({len(body)} bytes, {content_type})")

        return ImageUploadResult(
            url=f"{IMAGE_URL_PREFIX}/{key}",
            key=key,
            size=len(body),
            type=content_type,
        )

    def fetch_image(self, key: str) -> StoredObject | None:
        """
        Fetch an image by exact key.

        Returns:
            The stored object, or None if the key doesn't exist

        Raises:
            StorageDownloadError: If the store read fails
        """
        try:
            return self.store.get(key)
        except Exception as e:
            logger.error(f"Get image error: {e}")
            raise StorageDownloadError(key, str(e))
