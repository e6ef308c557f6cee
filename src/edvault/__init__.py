"""edvault: encrypted data vault storage.

Named, isolated document vaults over a swappable storage backend
(in-memory or CouchDB).
"""

__version__ = "0.1.0"

from edvault.config import EdvConfig
from edvault.constants import DatabaseType
from edvault.document import StructuredDocument
from edvault.errors import (
    BackendConnectionError,
    BackendError,
    BackendTimeoutError,
    DocumentNotFoundError,
    DuplicateDocumentError,
    DuplicateVaultError,
    EdvError,
    InvalidDocumentError,
    StorageError,
    StoreNotFoundError,
    ValueNotFoundError,
    VaultNotFoundError,
)
from edvault.storage_backend import Provider, Store
from edvault.stores import CouchDBProvider, MemProvider, create_provider
from edvault.vault_collection import VaultCollection

__all__ = [
    "EdvConfig",
    "DatabaseType",
    "StructuredDocument",
    "VaultCollection",
    "Provider",
    "Store",
    "MemProvider",
    "CouchDBProvider",
    "create_provider",
    "EdvError",
    "StorageError",
    "ValueNotFoundError",
    "StoreNotFoundError",
    "VaultNotFoundError",
    "DocumentNotFoundError",
    "DuplicateVaultError",
    "DuplicateDocumentError",
    "InvalidDocumentError",
    "BackendError",
    "BackendConnectionError",
    "BackendTimeoutError",
]
