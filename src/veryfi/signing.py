"""HMAC-SHA256 request signing.

The canonical string is ``timestamp:<ms>`` followed by ``,<key>:<value>`` for
every parameter in the order the caller built the mapping. The server rebuilds
the same string, so keys are never sorted here.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import time
from typing import Any, Dict, Mapping, Optional

from .constants import SIGNATURE_HEADER, TIMESTAMP_HEADER
from .exceptions import ConfigurationError


def generate_timestamp() -> int:
    """Current Unix time in milliseconds."""

    return int(time.time() * 1000)


def canonical_payload(params: Mapping[str, Any], timestamp_millis: int) -> str:
    parts = [f"timestamp:{timestamp_millis}"]
    for key, value in params.items():
        parts.append(f"{key}:{value}")
    return ",".join(parts)


def sign(params: Mapping[str, Any], timestamp_millis: int, secret: Optional[str]) -> str:
    """Return the base64 HMAC-SHA256 signature of ``params`` at ``timestamp_millis``."""

    if not secret:
        raise ConfigurationError("Cannot sign a request without a client secret.")
    message = canonical_payload(params, timestamp_millis)
    digest = hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def signature_headers(
    params: Mapping[str, Any],
    secret: Optional[str],
    timestamp_millis: Optional[int] = None,
) -> Dict[str, str]:
    if timestamp_millis is None:
        timestamp_millis = generate_timestamp()
    return {
        TIMESTAMP_HEADER: str(timestamp_millis),
        SIGNATURE_HEADER: sign(params, timestamp_millis, secret),
    }


__all__ = ["generate_timestamp", "canonical_payload", "sign", "signature_headers"]
