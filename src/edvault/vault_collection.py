"""Vault and document management over any storage Provider.

VaultCollection enforces the rules no Provider enforces on its own:

- a vault must be created explicitly before use, exactly once;
- a document id is write-once within its vault.

Both rules are check-then-act sequences (``store_exists`` then
``open_store``; ``get`` then ``put``). They are made atomic with a
per-vault asyncio lock, so concurrent coroutines sharing one collection
cannot both create the same vault or both store the same document id.
The locks belong to a single event loop: a collection must only be
used from the loop that first awaited it, never from several threads
or loops at once. Several processes writing to one shared CouchDB
server are NOT coordinated either; deployments must route each vault's
writes through a single collection.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from edvault.errors import (
    DocumentNotFoundError,
    DuplicateDocumentError,
    DuplicateVaultError,
    ValueNotFoundError,
    VaultNotFoundError,
)

if TYPE_CHECKING:
    from edvault.document import StructuredDocument
    from edvault.storage_backend import Provider, Store

logger = logging.getLogger(__name__)


class VaultCollection:
    """Create vaults, store documents and retrieve them through a Provider."""

    def __init__(self, provider: Provider) -> None:
        self._provider = provider
        self._locks: dict[str, asyncio.Lock] = {}

    @property
    def provider(self) -> Provider:
        return self._provider

    def _get_lock(self, vault_id: str) -> asyncio.Lock:
        """Get or create a per-vault lock."""
        if vault_id not in self._locks:
            self._locks[vault_id] = asyncio.Lock()
        return self._locks[vault_id]

    async def _open_existing(self, vault_id: str) -> Store:
        if not await self._provider.store_exists(vault_id):
            raise VaultNotFoundError(vault_id)
        return await self._provider.open_store(vault_id)

    async def create_vault(self, vault_id: str) -> None:
        """Provision a new vault. Raises DuplicateVaultError if it already exists."""
        if not vault_id:
            raise ValueError("vault id must be non-empty")
        async with self._get_lock(vault_id):
            if await self._provider.store_exists(vault_id):
                raise DuplicateVaultError(vault_id)
            await self._provider.open_store(vault_id)
        logger.info("Created vault %s.", vault_id)

    async def store_document(self, vault_id: str, document: StructuredDocument) -> None:
        """Write ``document`` into an existing vault, refusing to overwrite.

        Raises VaultNotFoundError or DuplicateDocumentError; any other
        store failure propagates unchanged.
        """
        if not vault_id:
            raise ValueError("vault id must be non-empty")
        if not document.id:
            raise ValueError("document id must be non-empty")
        async with self._get_lock(vault_id):
            vault = await self._open_existing(vault_id)
            try:
                await vault.get(document.id)
            except ValueNotFoundError:
                pass
            else:
                raise DuplicateDocumentError(vault_id, document.id)
            await vault.put(document.id, document.to_json())
        logger.info("Stored document %s in vault %s.", document.id, vault_id)

    async def retrieve_document(self, vault_id: str, doc_id: str) -> bytes:
        """Return the serialized document ``doc_id`` from ``vault_id``.

        Raises VaultNotFoundError or DocumentNotFoundError.
        """
        if not vault_id:
            raise ValueError("vault id must be non-empty")
        if not doc_id:
            raise ValueError("document id must be non-empty")
        vault = await self._open_existing(vault_id)
        try:
            data = await vault.get(doc_id)
        except ValueNotFoundError:
            raise DocumentNotFoundError(vault_id, doc_id) from None
        logger.debug("Retrieved document %s from vault %s.", doc_id, vault_id)
        return data
