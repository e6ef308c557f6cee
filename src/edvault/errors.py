"""Error taxonomy shared by the storage layer and the vault collection."""

from __future__ import annotations


class EdvError(Exception):
    """Base exception for all edvault operations."""


# ---------------------------------------------------------------------------
# Storage-level (Store / Provider)
# ---------------------------------------------------------------------------


class StorageError(EdvError):
    """Base exception for Store and Provider contract violations."""


class ValueNotFoundError(StorageError):
    """Key is absent from a store."""

    def __init__(self, key: str) -> None:
        super().__init__(f"value not found for key {key!r}")
        self.key = key


class StoreNotFoundError(StorageError):
    """Store name was never opened (or was already closed) on this provider."""

    def __init__(self, name: str) -> None:
        super().__init__(f"store {name!r} not found")
        self.name = name


# ---------------------------------------------------------------------------
# Domain-level (VaultCollection)
# ---------------------------------------------------------------------------


class VaultNotFoundError(EdvError):
    """Operation targets a vault that was never created."""

    def __init__(self, vault_id: str) -> None:
        super().__init__("specified vault does not exist")
        self.vault_id = vault_id


class DocumentNotFoundError(EdvError):
    """Document id is absent from an existing vault."""

    def __init__(self, vault_id: str, doc_id: str) -> None:
        super().__init__("specified document does not exist")
        self.vault_id = vault_id
        self.doc_id = doc_id


class DuplicateVaultError(EdvError):
    """Vault already exists."""

    def __init__(self, vault_id: str) -> None:
        super().__init__("vault already exists")
        self.vault_id = vault_id


class DuplicateDocumentError(EdvError):
    """A document with the same id is already stored in the vault."""

    def __init__(self, vault_id: str, doc_id: str) -> None:
        super().__init__("a document with the given id already exists")
        self.vault_id = vault_id
        self.doc_id = doc_id


class InvalidDocumentError(EdvError):
    """Payload is not a well-formed structured document."""


# ---------------------------------------------------------------------------
# Backend passthrough
# ---------------------------------------------------------------------------


class BackendError(EdvError):
    """Unclassified I/O failure reported by a remote backend."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class BackendConnectionError(BackendError):
    """Network/DNS failure reaching the backend."""


class BackendTimeoutError(BackendError):
    """Backend did not answer within the configured timeout."""
