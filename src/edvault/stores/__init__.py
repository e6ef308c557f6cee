"""Concrete Provider implementations and config-driven selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from edvault.constants import DatabaseType
from edvault.stores.couchdb import CouchDBProvider, CouchDBStore
from edvault.stores.memory import MemProvider, MemStore

if TYPE_CHECKING:
    from edvault.config import EdvConfig
    from edvault.storage_backend import Provider


def create_provider(config: EdvConfig) -> Provider:
    """Instantiate the Provider named by ``config.database_type``.

    ``memstore`` is matched case-insensitively. ``couchdb`` requires
    ``config.database_url``.
    """
    db_type = (config.database_type or "").strip().lower()
    if db_type == DatabaseType.MEMSTORE.value:
        return MemProvider()
    if db_type == DatabaseType.COUCHDB.value:
        if not config.database_url:
            raise ValueError("database_url is required for the couchdb database type")
        return CouchDBProvider(config.database_url, timeout=config.timeout)
    supported = ", ".join(t.value for t in DatabaseType)
    raise ValueError(
        f"unsupported database type {config.database_type!r} (supported: {supported})"
    )


__all__ = [
    "CouchDBProvider",
    "CouchDBStore",
    "MemProvider",
    "MemStore",
    "create_provider",
]
