# =============================================================================
# tests/test_services.py - Service Layer Tests
# =============================================================================
# Unit tests for the settings repository/service and the image service,
# using in-memory stores and fixed clocks.
#
# Run with: pytest tests/test_services.py -v
# =============================================================================

import json
import re
from datetime import datetime, timezone

import pytest

from app.config import Settings
from app.exceptions import (
    FileTooLargeError,
    InvalidFileTypeError,
    SettingsStoreError,
    StorageDownloadError,
    StorageUploadError,
)
from core.models import DEFAULT_SETTINGS, SiteSettings
from core.services import ImageService, KeyValueSettingsRepository, SettingsService
from core.services.image_service import file_extension
from lib.clock import FixedClock
from lib.kv_store import InMemoryKeyValueStore
from lib.object_store import InMemoryObjectStore

NOW = datetime(2030, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def config():
    return Settings(STORAGE_BACKEND="memory")


# =============================================================================
# Settings Repository
# =============================================================================

class TestKeyValueSettingsRepository:

    def test_get_returns_defaults_when_empty(self):
        repository = KeyValueSettingsRepository(InMemoryKeyValueStore(), "website_settings")

        document = repository.get()

        assert document == DEFAULT_SETTINGS
        assert document is not DEFAULT_SETTINGS

    def test_put_writes_json_under_fixed_key(self):
        store = InMemoryKeyValueStore()
        repository = KeyValueSettingsRepository(store, "website_settings")

        repository.put(SiteSettings(site_name="Acme", updated_at="t"))

        stored = json.loads(store.get("website_settings"))
        assert stored["site_name"] == "Acme"
        assert stored["updated_at"] == "t"

    def test_put_then_get(self):
        repository = KeyValueSettingsRepository(InMemoryKeyValueStore(), "k")
        document = SiteSettings(site_name="Acme", email="a@b.com", updated_at="t")

        repository.put(document)

        assert repository.get() == document

    def test_invalid_json_raises(self):
        store = InMemoryKeyValueStore({"k": "[1, 2"})
        with pytest.raises(SettingsStoreError):
            KeyValueSettingsRepository(store, "k").get()

    def test_non_object_json_is_returned_as_is(self):
        store = InMemoryKeyValueStore({"k": "[1, 2]"})
        repository = KeyValueSettingsRepository(store, "k")

        assert repository.get_document() == [1, 2]
        assert repository.get() == SiteSettings()

    def test_get_document_is_verbatim(self):
        stored = {"site_name": "Stored", "linkedin": None, "theme": "dark"}
        store = InMemoryKeyValueStore({"k": json.dumps(stored)})

        assert KeyValueSettingsRepository(store, "k").get_document() == stored

    def test_get_document_defaults_when_empty(self):
        repository = KeyValueSettingsRepository(InMemoryKeyValueStore(), "k")
        assert repository.get_document() == DEFAULT_SETTINGS.to_document()

    def test_get_defaults_null_and_non_string_fields(self):
        stored = {"site_name": "Stored", "linkedin": None, "phone": 5551234}
        store = InMemoryKeyValueStore({"k": json.dumps(stored)})

        document = KeyValueSettingsRepository(store, "k").get()

        assert document.site_name == "Stored"
        assert document.linkedin == ""
        assert document.phone == ""


class TestSettingsService:

    def test_save_stamps_updated_at(self):
        repository = KeyValueSettingsRepository(InMemoryKeyValueStore(), "k")
        service = SettingsService(repository, FixedClock(NOW))

        document = service.save_settings({"site_name": "Acme"})

        assert document.updated_at == "2030-06-01T12:00:00.000Z"
        assert service.get_settings() == document

    def test_save_is_full_replace(self):
        repository = KeyValueSettingsRepository(InMemoryKeyValueStore(), "k")
        service = SettingsService(repository, FixedClock(NOW))

        service.save_settings({"site_name": "Acme", "phone": "123"})
        document = service.save_settings({"site_name": "Acme"})

        assert document.phone == ""
        assert service.get_settings().phone == ""


# =============================================================================
# Image Service
# =============================================================================

class TestImageService:

    def test_generate_key_format(self, config):
        service = ImageService(InMemoryObjectStore(), FixedClock(NOW), config)

        key = service.generate_key("photo.webp")

        millis = int(NOW.timestamp() * 1000)
        assert re.fullmatch(rf"products/{millis}-[0-9a-z]{{6}}\.webp", key)

    def test_generated_keys_differ(self, config):
        service = ImageService(InMemoryObjectStore(), FixedClock(NOW), config)
        keys = {service.generate_key("a.png") for _ in range(50)}
        assert len(keys) > 1

    @pytest.mark.parametrize("filename, expected", [
        ("photo.png", "png"),
        ("archive.tar.gz", "gz"),
        ("UPPER.JPG", "JPG"),
        ("noextension", "noextension"),
        ("trailing.", ""),
    ])
    def test_file_extension(self, filename, expected):
        assert file_extension(filename) == expected

    def test_validate_type_before_size(self, config):
        service = ImageService(InMemoryObjectStore(), FixedClock(NOW), config)
        with pytest.raises(InvalidFileTypeError):
            service.validate("application/pdf", config.MAX_IMAGE_SIZE_BYTES + 1)

    def test_validate_size(self, config):
        service = ImageService(InMemoryObjectStore(), FixedClock(NOW), config)
        with pytest.raises(FileTooLargeError) as exc_info:
            service.validate("image/png", config.MAX_IMAGE_SIZE_BYTES + 1)
        assert exc_info.value.status_code == 400

    def test_validate_missing_type(self, config):
        service = ImageService(InMemoryObjectStore(), FixedClock(NOW), config)
        with pytest.raises(InvalidFileTypeError):
            service.validate(None, 10)

    def test_custom_allow_list(self):
        config = Settings(STORAGE_BACKEND="memory", ALLOWED_IMAGE_TYPES="image/png")
        service = ImageService(InMemoryObjectStore(), FixedClock(NOW), config)

        with pytest.raises(InvalidFileTypeError) as exc_info:
            service.validate("image/jpeg", 10)

        assert exc_info.value.message == "Invalid file type. Only PNG are allowed."

    def test_store_and_fetch(self, config):
        store = InMemoryObjectStore()
        service = ImageService(store, FixedClock(NOW), config)

        result = service.store_image("shot.gif", "image/gif", b"GIF89a")
        fetched = service.fetch_image(result.key)

        assert result.url == f"/api/upload/image/{result.key}"
        assert result.size == 6
        assert fetched.body == b"GIF89a"
        assert fetched.content_type == "image/gif"

    def test_store_normalizes_content_type(self, config):
        store = InMemoryObjectStore()
        service = ImageService(store, FixedClock(NOW), config)

        result = service.store_image("shot.gif", "Image/GIF", b"GIF89a")

        assert result.type == "image/gif"
        assert store.get(result.key).content_type == "image/gif"

    def test_fetch_missing_returns_none(self, config):
        service = ImageService(InMemoryObjectStore(), FixedClock(NOW), config)
        assert service.fetch_image("products/nope.png") is None

    def test_store_errors_are_wrapped(self, config):
        class Broken:
            def put(self, key, body, content_type):
                raise OSError("disk full")

            def get(self, key):
                raise OSError("timeout")

        service = ImageService(Broken(), FixedClock(NOW), config)

        with pytest.raises(StorageUploadError) as upload_error:
            service.store_image("a.png", "image/png", b"x")
        with pytest.raises(StorageDownloadError) as download_error:
            service.fetch_image("products/a.png")

        assert upload_error.value.message == "disk full"
        assert download_error.value.message == "timeout"
