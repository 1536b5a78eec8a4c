# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends(), and tests swap
# them out through app.dependency_overrides.
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from core.services import (
    ImageService,
    KeyValueSettingsRepository,
    SettingsRepository,
    SettingsService,
)
from lib.clock import Clock, SystemClock
from lib.kv_store import InMemoryKeyValueStore, KeyValueStore, SupabaseKeyValueStore
from lib.object_store import InMemoryObjectStore, ObjectStore, SupabaseObjectStore


@lru_cache
def get_key_value_store() -> KeyValueStore:
    """
    Get the process-wide key-value store.

    Cached so the in-memory backend keeps its contents between requests.
    """
    config = get_settings()
    if config.STORAGE_BACKEND == "memory":
        return InMemoryKeyValueStore()
    return SupabaseKeyValueStore(config.SETTINGS_TABLE)


@lru_cache
def get_object_store() -> ObjectStore:
    """Get the process-wide object store."""
    config = get_settings()
    if config.STORAGE_BACKEND == "memory":
        return InMemoryObjectStore()
    return SupabaseObjectStore(config.IMAGES_BUCKET)


def get_clock() -> Clock:
    return SystemClock()


def get_settings_repository(
    store: KeyValueStore = Depends(get_key_value_store),
    config: Settings = Depends(get_settings),
) -> SettingsRepository:
    return KeyValueSettingsRepository(store, config.SETTINGS_KEY)


def get_settings_service(
    repository: SettingsRepository = Depends(get_settings_repository),
    clock: Clock = Depends(get_clock),
) -> SettingsService:
    return SettingsService(repository, clock)


def get_image_service(
    store: ObjectStore = Depends(get_object_store),
    clock: Clock = Depends(get_clock),
    config: Settings = Depends(get_settings),
) -> ImageService:
    return ImageService(store, clock, config)


# Type aliases for dependency injection
ConfigDep = Annotated[Settings, Depends(get_settings)]
ClockDep = Annotated[Clock, Depends(get_clock)]
SettingsRepositoryDep = Annotated[SettingsRepository, Depends(get_settings_repository)]
SettingsServiceDep = Annotated[SettingsService, Depends(get_settings_service)]
ImageServiceDep = Annotated[ImageService, Depends(get_image_service)]
