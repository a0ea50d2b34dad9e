from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

RequestParams = Dict[str, Any]

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")


class RequestArgs(dict):
    """Keyword arguments for one executor call, validated on construction."""

    def __init__(
        self,
        *,
        path: str,
        params: RequestParams,
        method: str = "GET",
        has_files: bool = False,
        files: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not isinstance(path, str):
            raise TypeError("path must be str")
        if not isinstance(params, dict):
            raise TypeError("params must be dict")
        if method not in HTTP_METHODS:
            raise ValueError(f"method must be one of {', '.join(HTTP_METHODS)}")
        if files is not None and not isinstance(files, dict):
            raise TypeError("files must be dict or None")
        super().__init__(path=path, params=params, method=method)
        if has_files:
            self["has_files"] = True
        if files is not None:
            self["files"] = files


@dataclass(frozen=True)
class SignedRequest:
    """Fully assembled request, ready for the transport."""

    method: str
    url: str
    headers: Dict[str, str]
    body: bytes = b""
    data: Optional[Dict[str, Any]] = None
    files: Optional[Dict[str, Any]] = field(default=None, repr=False)

    @property
    def is_multipart(self) -> bool:
        return self.files is not None


__all__ = ["RequestParams", "RequestArgs", "SignedRequest", "HTTP_METHODS"]
