# =============================================================================
# core/services/settings_service.py - Settings Repository
# =============================================================================
# Reads and writes the site settings document.
#
# There is exactly one settings document per deployment. The repository
# interface has no key parameter: get_document() returns that document
# exactly as stored (or the built-in defaults when nothing has been saved
# yet), get() reads it leniently into a SiteSettings for page rendering,
# and put() replaces it.
# =============================================================================

import json
import logging
from typing import Any, Protocol

from app.exceptions import SettingsStoreError
from core.models import DEFAULT_SETTINGS, SiteSettings
from lib.clock import Clock, to_iso
from lib.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


class SettingsRepository(Protocol):
    """Access to the deployment's single settings document."""

    def get_document(self) -> Any:
        ...

    def get(self) -> SiteSettings:
        ...

    def put(self, document: SiteSettings) -> None:
        ...


class KeyValueSettingsRepository:
    """
    Settings repository backed by a key-value store.

    The document is stored as a JSON string under one fixed key.
    """

    def __init__(self, store: KeyValueStore, key: str):
        self.store = store
        self.key = key

    def get_document(self) -> Any:
        """
        Load the settings document as stored.

        The parsed JSON is returned untouched: no fields are added, and
        nulls or unknown keys written by other tools come back as they are.

        Returns:
            The parsed document, or DEFAULT_SETTINGS as a dict if none exists

        Raises:
            SettingsStoreError: If the store fails or the stored text is not JSON
        """
        try:
            raw = self.store.get(self.key)
        except Exception as e:
            logger.error(f"Error getting settings: {e}")
            raise SettingsStoreError(str(e))

        if raw is None:
            logger.debug("No settings stored, using defaults")
            return DEFAULT_SETTINGS.to_document()

        try:
            return json.loads(raw)
        except ValueError as e:
            logger.error(f"Stored settings are not valid JSON: {e}")
            raise SettingsStoreError(str(e))

    def get(self) -> SiteSettings:
        """Load the settings document into a SiteSettings, defaulting bad fields."""
        return SiteSettings.from_stored(self.get_document())

    def put(self, document: SiteSettings) -> None:
        """
        Replace the settings document.

        Raises:
            SettingsStoreError: If the store write fails
        """
        try:
            self.store.put(self.key, json.dumps(document.to_document()))
        except Exception as e:
            logger.error(f"Error updating settings: {e}")
            raise SettingsStoreError(str(e))

        logger.info(f"Saved settings (updated_at={document.updated_at})")


class SettingsService:
    """Read/merge/write cycle used by the settings endpoints."""

    def __init__(self, repository: SettingsRepository, clock: Clock):
        self.repository = repository
        self.clock = clock

    def get_document(self) -> Any:
        return self.repository.get_document()

    def get_settings(self) -> SiteSettings:
        return self.repository.get()

    def save_settings(self, submission: dict) -> SiteSettings:
        """
        Build a new document from a submission and store it.

        The write is a full replace: fields missing from the submission
        fall back to their defaults rather than keeping the stored value.
        """
        document = SiteSettings.from_submission(submission, updated_at=to_iso(self.clock.now()))
        self.repository.put(document)
        return document
