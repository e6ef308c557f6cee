"""Vault request tools: create_vault, store_document, retrieve_document.

Framework-free handlers. The host web framework decodes the request
body, extracts path identifiers, calls these, and turns the returned
dict into a response using its ``status`` field.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

from edvault.constants import VAULTS_PATH
from edvault.document import StructuredDocument
from edvault.errors import (
    BackendError,
    DocumentNotFoundError,
    DuplicateVaultError,
    EdvError,
)
from edvault.vault_collection import VaultCollection

logger = logging.getLogger(__name__)


def _failure(status: int, prefix: str, exc: Exception | str) -> dict[str, Any]:
    return {"success": False, "status": status, "error": f"{prefix}: {exc}"}


def _log_failure(action: str, exc: Exception) -> None:
    if isinstance(exc, BackendError):
        logger.warning("%s failed on backend: %s", action, exc)
    else:
        logger.info("%s rejected: %s", action, exc)


async def create_vault_tool(
    collection: VaultCollection,
    body: Any,
    host: str = "",
) -> dict[str, Any]:
    """Create a data vault from a ``{"referenceId": "..."}`` body.

    Returns dict with:
        success / status: True and 201 on creation.
        vault_id: The reference id of the new vault.
        location: ``{host}/encrypted-data-vaults/{vault_id}``.

    Errors: 409 if the vault already exists, 400 for a malformed body or
    any other failure.
    """
    prefix = "Data vault creation failed"
    if not isinstance(body, dict):
        return _failure(400, prefix, "request body must be a JSON object")
    vault_id = body.get("referenceId")
    if not isinstance(vault_id, str) or not vault_id:
        return _failure(400, prefix, "referenceId must be a non-empty string")

    try:
        await collection.create_vault(vault_id)
    except DuplicateVaultError as e:
        _log_failure("Vault creation", e)
        return _failure(409, prefix, e)
    except (EdvError, ValueError) as e:
        _log_failure("Vault creation", e)
        return _failure(400, prefix, e)

    return {
        "success": True,
        "status": 201,
        "vault_id": vault_id,
        "location": f"{host}{VAULTS_PATH}/{quote(vault_id, safe='')}",
    }


async def store_document_tool(
    collection: VaultCollection,
    vault_id: str,
    body: Any,
    host: str = "",
) -> dict[str, Any]:
    """Store a structured document (``{"id", "meta", "content"}``) in a vault.

    Returns 201 with ``location`` ``{host}/encrypted-data-vaults/{vault}/docs/{doc}``
    on success and 400 for every failure, duplicates and unknown vaults
    included.
    """
    prefix = "Failed to store document"
    try:
        document = StructuredDocument.from_dict(body)
        await collection.store_document(vault_id, document)
    except (EdvError, ValueError) as e:
        _log_failure("Document storage", e)
        return _failure(400, prefix, e)

    return {
        "success": True,
        "status": 201,
        "vault_id": vault_id,
        "document_id": document.id,
        "location": (
            f"{host}{VAULTS_PATH}/{quote(vault_id, safe='')}"
            f"/docs/{quote(document.id, safe='')}"
        ),
    }


async def retrieve_document_tool(
    collection: VaultCollection,
    vault_id: str,
    doc_id: str,
) -> dict[str, Any]:
    """Fetch a document by id.

    Returns 200 with ``body`` (the stored bytes) and ``document`` (the
    decoded JSON object). 404 if the document does not exist, 400 for
    any other failure.
    """
    prefix = "Failed to retrieve document"
    try:
        data = await collection.retrieve_document(vault_id, doc_id)
    except DocumentNotFoundError as e:
        _log_failure("Document retrieval", e)
        return _failure(404, prefix, e)
    except (EdvError, ValueError) as e:
        _log_failure("Document retrieval", e)
        return _failure(400, prefix, e)

    return {
        "success": True,
        "status": 200,
        "body": data,
        "document": json.loads(data),
    }
