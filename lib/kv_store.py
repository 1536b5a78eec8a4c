# =============================================================================
# lib/kv_store.py - Key-Value Store Backends
# =============================================================================
# A durable string -> string mapping. The site keeps exactly one entry in it
# (the settings document), but the store itself knows nothing about that.
#
# Backends:
# - InMemoryKeyValueStore: process-local dict (development and tests)
# - SupabaseKeyValueStore: a two-column table (key text primary key, value text)
# =============================================================================

from __future__ import annotations

import logging
from typing import Protocol

from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal contract the settings repository relies on."""

    def get(self, key: str) -> str | None:
        ...

    def put(self, key: str, value: str) -> None:
        ...


class InMemoryKeyValueStore:
    """Dict-backed store. Values live as long as the process does."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def put(self, key: str, value: str) -> None:
        self._data[key] = value


class SupabaseKeyValueStore:
    """
    Key-value store on top of a Supabase table.

    Expected schema:
        create table kv_store (key text primary key, value text not null);

    Errors from the client propagate unchanged; the caller decides how to
    surface them.
    """

    def __init__(self, table: str):
        self.table = table

    def get(self, key: str) -> str | None:
        client = SupabaseClient.get_client()
        response = (
            client.table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        rows = response.data or []
        if not rows:
            logger.debug(f"Key not found in {self.table}: {key}")
            return None
        return rows[0]["value"]

    def put(self, key: str, value: str) -> None:
        client = SupabaseClient.get_client()
        client.table(self.table).upsert({"key": key, "value": value}).execute()
        logger.info(f"Stored key in {self.table}: {key}")
