from __future__ import annotations

import base64
import hashlib
import json
from typing import Any

from .spec import TargetRequest


def canonical_json_dumps(data: Any) -> str:
    """Serialize JSON with sorted keys and compact separators."""
    return json.dumps(
        data,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


def sha256_bytes(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def request_hash(request: TargetRequest) -> str:
    canonical = canonical_json_dumps(request.to_payload())
    return sha256_bytes(canonical.encode("utf-8"))


def document_id(request: TargetRequest) -> str:
    """Short, filename-safe identifier derived from the request hash."""
    digest = bytes.fromhex(request_hash(request))
    encoded = base64.b32encode(digest).decode("ascii").lower().rstrip("=")
    return encoded[:12]
