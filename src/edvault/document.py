"""Structured document model.

Pure data model, no I/O. ``content`` is whatever the client encrypted
(typically a JWE object); it is carried through untouched.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from edvault.errors import InvalidDocumentError


@dataclass
class StructuredDocument:
    """A document as submitted to a vault: identifier, metadata, opaque content."""

    id: str
    meta: dict[str, Any] = field(default_factory=dict)
    content: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "meta": self.meta, "content": self.content}

    def to_json(self) -> bytes:
        """Serialize to compact UTF-8 JSON, the form persisted by every backend."""
        return json.dumps(self.to_dict(), separators=(",", ":")).encode("utf-8")

    @classmethod
    def from_dict(cls, data: Any) -> StructuredDocument:
        """Build from a decoded JSON body. Raises InvalidDocumentError on bad shape."""
        if not isinstance(data, dict):
            raise InvalidDocumentError("document must be a JSON object")
        doc_id = data.get("id")
        if not isinstance(doc_id, str) or not doc_id:
            raise InvalidDocumentError("document id must be a non-empty string")
        meta = data.get("meta") or {}
        if not isinstance(meta, dict):
            raise InvalidDocumentError("document meta must be a JSON object")
        return cls(id=doc_id, meta=meta, content=data.get("content"))

    @classmethod
    def from_json(cls, data: str | bytes) -> StructuredDocument:
        try:
            obj = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as exc:
            raise InvalidDocumentError(f"document is not valid JSON: {exc}") from exc
        return cls.from_dict(obj)
