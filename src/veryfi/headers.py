from __future__ import annotations

from typing import Dict

from .constants import USER_AGENT
from .credentials import Credentials


def build_headers(has_files: bool, credentials: Credentials) -> Dict[str, str]:
    """Base header set for a request.

    File-bearing requests leave ``Content-Type`` out so the transport can set
    the multipart boundary itself.
    """

    headers = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
        "Client-Id": credentials.client_id,
    }
    if not has_files:
        headers["Content-Type"] = "application/json"
    if credentials.has_api_key:
        headers["Authorization"] = f"apikey {credentials.username}:{credentials.api_key}"
    return headers


__all__ = ["build_headers"]
