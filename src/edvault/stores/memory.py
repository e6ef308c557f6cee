"""In-memory Provider: a process-local arena of stores, no persistence.

Useful for demos and tests. Closing a store (or the provider) wipes its
data, so a handle kept across a close reads as empty.
"""

from __future__ import annotations

import logging
import threading

from edvault.errors import StoreNotFoundError, ValueNotFoundError

logger = logging.getLogger(__name__)


class MemStore:
    """Dict-backed store with its own lock for concurrent writers."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._db: dict[str, bytes] = {}
        self._lock = threading.Lock()

    async def put(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        with self._lock:
            self._db[key] = bytes(value)

    async def get(self, key: str) -> bytes:
        """Return the value for ``key`` or raise ValueNotFoundError."""
        with self._lock:
            try:
                return self._db[key]
            except KeyError:
                raise ValueNotFoundError(key) from None

    def _wipe(self) -> None:
        with self._lock:
            self._db = {}

    def __len__(self) -> int:
        return len(self._db)


class MemProvider:
    """Registry of MemStore instances indexed by name.

    The registry is owned by this instance; registry mutations are
    serialized by a provider-level lock, independent of each store's lock.
    """

    def __init__(self) -> None:
        self._stores: dict[str, MemStore] = {}
        self._lock = threading.Lock()

    async def open_store(self, name: str) -> MemStore:
        """Return the store for ``name``, creating an empty one if needed."""
        with self._lock:
            store = self._stores.get(name)
            if store is None:
                store = MemStore(name)
                self._stores[name] = store
                logger.debug("Created in-memory store %s.", name)
            return store

    async def store_exists(self, name: str) -> bool:
        with self._lock:
            return name in self._stores

    async def close_store(self, name: str) -> None:
        """Drop ``name`` from the registry and wipe its data."""
        with self._lock:
            store = self._stores.pop(name, None)
        if store is None:
            raise StoreNotFoundError(name)
        store._wipe()
        logger.debug("Closed in-memory store %s.", name)

    async def close(self) -> None:
        """Wipe and forget every store. Safe to call repeatedly."""
        with self._lock:
            stores = list(self._stores.values())
            self._stores = {}
        for store in stores:
            store._wipe()

    @property
    def size(self) -> int:
        """Number of stores currently open."""
        return len(self._stores)
