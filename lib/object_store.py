# =============================================================================
# lib/object_store.py - Object Store Backends
# =============================================================================
# Durable blob storage addressed by string key. Each object carries its raw
# bytes plus one piece of metadata: the MIME content type.
#
# Backends:
# - InMemoryObjectStore: process-local dict (development and tests)
# - SupabaseObjectStore: a Supabase Storage bucket
# =============================================================================

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import Iterator, Protocol

from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

# Chunk size used when streaming an object body back to a client
CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class StoredObject:
    """An object fetched from the store."""

    key: str
    body: bytes
    content_type: str | None
    etag: str | None

    @property
    def size(self) -> int:
        return len(self.body)

    def iter_chunks(self, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
        """Yield the body in fixed-size chunks."""
        for start in range(0, len(self.body), chunk_size):
            yield self.body[start:start + chunk_size]


class ObjectStore(Protocol):
    """Contract used by the image service."""

    def put(self, key: str, body: bytes, content_type: str) -> None:
        ...

    def get(self, key: str) -> StoredObject | None:
        ...


def compute_etag(body: bytes) -> str:
    """Quoted MD5 hex digest, the same form S3-style stores return."""
    return f'"{hashlib.md5(body).hexdigest()}"'


class InMemoryObjectStore:
    """Dict-backed object store."""

    def __init__(self):
        self._objects: dict[str, StoredObject] = {}

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, key: object) -> bool:
        return key in self._objects

    def put(self, key: str, body: bytes, content_type: str) -> None:
        self._objects[key] = StoredObject(
            key=key,
            body=bytes(body),
            content_type=content_type,
            etag=compute_etag(body),
        )

    def get(self, key: str) -> StoredObject | None:
        return self._objects.get(key)


class SupabaseObjectStore:
    """
    Object store on a Supabase Storage bucket.

    Storage's download call returns bytes only, so metadata (mimetype, eTag)
    comes from listing the parent folder filtered by the object name.
    """

    def __init__(self, bucket: str):
        self.bucket = bucket

    def put(self, key: str, body: bytes, content_type: str) -> None:
        client = SupabaseClient.get_client()
        client.storage.from_(self.bucket).upload(
            path=key,
            file=body,
            file_options={"content-type": content_type},
        )
        logger.info(f"Uploaded object to bucket {self.bucket}: {key}")

    def _find_metadata(self, key: str) -> dict | None:
        folder, _, name = key.rpartition("/")
        client = SupabaseClient.get_client()
        entries = client.storage.from_(self.bucket).list(folder, {"search": name}) or []
        for entry in entries:
            if entry.get("name") == name:
                return entry.get("metadata") or {}
        return None

    def get(self, key: str) -> StoredObject | None:
        metadata = self._find_metadata(key)
        if metadata is None:
            logger.debug(f"Object not found in bucket {self.bucket}: {key}")
            return None

        client = SupabaseClient.get_client()
        body = client.storage.from_(self.bucket).download(key)

        return StoredObject(
            key=key,
            body=body,
            content_type=metadata.get("mimetype"),
            etag=metadata.get("eTag"),
        )
