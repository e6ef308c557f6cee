"""Abstract storage interface for vault data.

Defines the Store and Provider Protocols that VaultCollection depends on.
Concrete implementations (MemProvider, CouchDBProvider) live in
``edvault.stores``. Nothing outside a backend module may depend on
backend-specific types.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Store(Protocol):
    """Key/value surface for a single namespace.

    ``get`` raises ``ValueNotFoundError`` for an absent key. ``put``
    overwrites; whether overwriting is allowed is decided by the caller.
    """

    async def put(self, key: str, value: bytes) -> None: ...

    async def get(self, key: str) -> bytes: ...


@runtime_checkable
class Provider(Protocol):
    """Factory and registry of Stores by name.

    - ``open_store`` creates the physical resource on first use and
      returns the same logical Store on repeated calls.
    - ``store_exists`` must not provision anything.
    - ``close_store`` raises ``StoreNotFoundError`` for an unknown name.
    - ``close`` releases every open Store and is idempotent.
    """

    async def open_store(self, name: str) -> Store: ...

    async def store_exists(self, name: str) -> bool: ...

    async def close_store(self, name: str) -> None: ...

    async def close(self) -> None: ...
