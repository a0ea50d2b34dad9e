from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any, Optional


class VeryfiClientError(Exception):
    """Base error for everything raised by the client."""


class ConfigurationError(VeryfiClientError, ValueError):
    """Raised when credentials are malformed or signing has no secret."""


class ValidationError(VeryfiClientError, ValueError):
    """Raised when call arguments violate a required-field contract."""


class SerializationError(VeryfiClientError, ValueError):
    """Raised when a payload cannot be encoded or a response cannot be decoded."""


class AsyncClientUnavailableError(VeryfiClientError, RuntimeError):
    """Raised when async methods are used without httpx installed."""


class TransportError(VeryfiClientError, RuntimeError):
    """Raised when HTTP client transport fails."""


class RequestTimeoutError(TransportError):
    """Raised when HTTP request exceeds timeout."""


class ApiError(VeryfiClientError):
    """Base API HTTP error for any non-success status."""

    def __init__(self, status_code: int, message: str, raw_body: Optional[str] = None) -> None:
        self.status_code = status_code
        self.message = message
        self.raw_body = raw_body
        super().__init__(f"HTTP {status_code}: {message}")

    @classmethod
    def from_response(cls, response: Any) -> "ApiError":
        """Build the matching error subclass for an httpx or requests response."""

        status_code = int(response.status_code)
        raw_body = response.text or None
        message = _error_message(raw_body) or _reason(response, status_code)

        if status_code == HTTPStatus.BAD_REQUEST:
            error_cls = BadRequestError
        elif status_code == HTTPStatus.UNAUTHORIZED:
            error_cls = UnauthorizedError
        elif status_code == HTTPStatus.FORBIDDEN:
            error_cls = ForbiddenError
        elif status_code == HTTPStatus.NOT_FOUND:
            error_cls = NotFoundError
        elif HTTPStatus.INTERNAL_SERVER_ERROR <= status_code <= 599:
            error_cls = ServerError
        else:
            error_cls = cls
        return error_cls(status_code, message, raw_body)


class BadRequestError(ApiError):
    """Raised for HTTP 400."""


class UnauthorizedError(ApiError):
    """Raised for HTTP 401."""


class ForbiddenError(ApiError):
    """Raised for HTTP 403."""


class NotFoundError(ApiError):
    """Raised for HTTP 404."""


class ServerError(ApiError):
    """Raised for HTTP 5xx."""


def _error_message(raw_body: Optional[str]) -> Optional[str]:
    if not raw_body or not raw_body.strip():
        return None
    try:
        payload = json.loads(raw_body)
    except ValueError:
        return raw_body.strip()
    if isinstance(payload, dict):
        for key in ("error", "message", "detail"):
            if payload.get(key):
                return str(payload[key])
    return raw_body.strip()


def _reason(response: Any, status_code: int) -> str:
    reason = getattr(response, "reason_phrase", None) or getattr(response, "reason", None)
    if reason:
        return str(reason)
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown error"


__all__ = [
    "VeryfiClientError",
    "ConfigurationError",
    "ValidationError",
    "SerializationError",
    "AsyncClientUnavailableError",
    "TransportError",
    "RequestTimeoutError",
    "ApiError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ServerError",
]
