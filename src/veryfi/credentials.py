from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ApiKeyCredentials:
    """Client identity with an optional username/API key pair, sent unsigned."""

    client_id: str
    username: Optional[str] = None
    api_key: Optional[str] = field(default=None, repr=False)

    signs_requests = False

    def __post_init__(self) -> None:
        if not isinstance(self.client_id, str) or not self.client_id:
            raise ConfigurationError("client_id must be a non-empty str")
        if bool(self.username) != bool(self.api_key):
            raise ConfigurationError("username and api_key must be given together")

    @property
    def has_api_key(self) -> bool:
        return bool(self.username and self.api_key)


@dataclass(frozen=True)
class SigningCredentials(ApiKeyCredentials):
    """Credentials holding a client secret; every request gets signed."""

    client_secret: str = field(default="", repr=False)

    signs_requests = True

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.client_secret:
            raise ConfigurationError("client_secret cannot be empty for signed requests")


Credentials = Union[ApiKeyCredentials, SigningCredentials]


def make_credentials(
    client_id: str,
    client_secret: Optional[str] = None,
    username: Optional[str] = None,
    api_key: Optional[str] = None,
) -> Credentials:
    """Pick the credential variant: signed when a secret is given, api-key-only otherwise."""

    if client_secret:
        return SigningCredentials(
            client_id=client_id,
            username=username,
            api_key=api_key,
            client_secret=client_secret,
        )
    return ApiKeyCredentials(client_id=client_id, username=username, api_key=api_key)


__all__ = ["ApiKeyCredentials", "SigningCredentials", "Credentials", "make_credentials"]
