from __future__ import annotations

from .client import Client, httpx, requests
from .constants import API_TIMEOUT, API_VERSION, BASE_URL, CATEGORIES, SUCCESS_STATUSES
from .credentials import ApiKeyCredentials, Credentials, SigningCredentials, make_credentials
from .exceptions import (
    ApiError,
    AsyncClientUnavailableError,
    BadRequestError,
    ConfigurationError,
    ForbiddenError,
    NotFoundError,
    RequestTimeoutError,
    SerializationError,
    ServerError,
    TransportError,
    UnauthorizedError,
    ValidationError,
    VeryfiClientError,
)
from .headers import build_headers
from .signing import canonical_payload, generate_timestamp, sign, signature_headers
from .structures import RequestArgs, RequestParams, SignedRequest

__all__ = [
    "Client",
    "ApiKeyCredentials",
    "SigningCredentials",
    "Credentials",
    "make_credentials",
    "build_headers",
    "sign",
    "canonical_payload",
    "generate_timestamp",
    "signature_headers",
    "RequestArgs",
    "RequestParams",
    "SignedRequest",
    "BASE_URL",
    "API_VERSION",
    "API_TIMEOUT",
    "CATEGORIES",
    "SUCCESS_STATUSES",
    "httpx",
    "requests",
    "VeryfiClientError",
    "ConfigurationError",
    "ValidationError",
    "SerializationError",
    "TransportError",
    "RequestTimeoutError",
    "ApiError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ServerError",
    "AsyncClientUnavailableError",
]
