from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Dict, List, Optional, Sequence

from .constants import API_TIMEOUT, API_VERSION, BASE_URL, CATEGORIES, MAX_FILE_SIZE_MB, SUCCESS_STATUSES
from .credentials import Credentials, make_credentials
from .exceptions import (
    ApiError,
    AsyncClientUnavailableError,
    ConfigurationError,
    RequestTimeoutError,
    TransportError,
    ValidationError,
)
from .headers import build_headers
from .signing import generate_timestamp, signature_headers
from .structures import RequestArgs, RequestParams, SignedRequest
from .utils import form_fields, from_json, read_file_data, to_json

try:
    import httpx
except ImportError:  # pragma: no cover - depends on installed extra
    httpx = None  # type: ignore[assignment]

try:
    import requests
except ImportError:  # pragma: no cover - depends on installed extra
    requests = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)


@dataclass
class Client:
    """Veryfi partner API client with sync and async methods.

    One transport handle is opened at construction and shared by every sync
    call; use the client as a context manager or call :meth:`close` to release
    it.
    """

    client_id: str
    client_secret: Optional[str] = field(default=None, repr=False)
    username: Optional[str] = None
    api_key: Optional[str] = field(default=None, repr=False)
    base_url: str = BASE_URL
    api_version: str = API_VERSION
    timeout: float = API_TIMEOUT
    credentials: Credentials = field(init=False, repr=False)
    _session: Any = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        self.credentials = make_credentials(self.client_id, self.client_secret, self.username, self.api_key)
        self._session = self._create_session()

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Client":
        """Build a client from ``VERYFI_*`` environment variables."""

        client_id = os.environ.get("VERYFI_CLIENT_ID")
        if not client_id:
            raise ConfigurationError("VERYFI_CLIENT_ID is not set")
        options: Dict[str, Any] = {
            "client_id": client_id,
            "client_secret": os.environ.get("VERYFI_CLIENT_SECRET") or None,
            "username": os.environ.get("VERYFI_USERNAME") or None,
            "api_key": os.environ.get("VERYFI_API_KEY") or None,
        }
        base_url = os.environ.get("VERYFI_BASE_URL")
        if base_url:
            options["base_url"] = base_url
        options.update(kwargs)
        return cls(**options)

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    def close(self) -> None:
        session, self._session = self._session, None
        if session is not None:
            session.close()

    @staticmethod
    def _ensure_sync_backend() -> None:
        if httpx is None and requests is None:
            raise RuntimeError("No HTTP client is installed. Install veryfi-client[httpx] or veryfi-client[requests].")

    def _create_session(self) -> Any:
        self._ensure_sync_backend()
        if httpx is not None:
            return httpx.Client(timeout=self.timeout)
        return requests.Session()  # type: ignore[union-attr]

    def _build_url(self, path: str) -> str:
        if not isinstance(path, str):
            raise TypeError("path must be str")
        return f"{self.base_url.rstrip('/')}/{self.api_version}/partner{path}"

    def _prepare(
        self,
        path: str,
        *,
        method: str = "GET",
        params: Optional[RequestParams] = None,
        has_files: bool = False,
        files: Optional[Dict[str, Any]] = None,
    ) -> SignedRequest:
        params = {} if params is None else params
        # Multipart uploads are signed over the form values as transmitted.
        payload = form_fields(params) if has_files else params
        headers = build_headers(has_files, self.credentials)
        if self.credentials.signs_requests:
            headers.update(signature_headers(payload, self.credentials.client_secret, generate_timestamp()))

        url = self._build_url(path)
        logger.debug("Prepared %s %s (signed=%s)", method, url, self.credentials.signs_requests)
        if has_files:
            return SignedRequest(method=method, url=url, headers=headers, data=payload, files=files or {})
        return SignedRequest(method=method, url=url, headers=headers, body=to_json(params))

    @staticmethod
    def _raise_for_status(request: SignedRequest, response: Any) -> None:
        status_code = int(response.status_code)
        logger.debug("%s %s -> HTTP %s", request.method, request.url, status_code)
        if status_code in SUCCESS_STATUSES:
            return
        error = ApiError.from_response(response)
        logger.warning("Veryfi API rejected %s %s: %s", request.method, request.url, error)
        raise error

    def _send(self, request: SignedRequest) -> Any:
        session = self._session
        if session is None:
            raise TransportError("Client is closed.")

        if httpx is not None:
            try:
                if request.is_multipart:
                    return session.request(
                        request.method, request.url, data=request.data, files=request.files, headers=request.headers
                    )
                return session.request(request.method, request.url, content=request.body, headers=request.headers)
            except httpx.TimeoutException as exc:
                logger.error("Timeout on %s %s", request.method, request.url)
                raise RequestTimeoutError("HTTP request timeout exceeded.") from exc
            except httpx.HTTPError as exc:
                logger.error("Transport failure on %s %s: %s", request.method, request.url, exc)
                raise TransportError("HTTP transport error in httpx client.") from exc

        try:
            return session.request(
                request.method,
                request.url,
                data=request.data if request.is_multipart else request.body,
                files=request.files,
                headers=request.headers,
                timeout=self.timeout,
            )
        except requests.Timeout as exc:  # type: ignore[union-attr]
            logger.error("Timeout on %s %s", request.method, request.url)
            raise RequestTimeoutError("HTTP request timeout exceeded.") from exc
        except requests.RequestException as exc:  # type: ignore[union-attr]
            logger.error("Transport failure on %s %s: %s", request.method, request.url, exc)
            raise TransportError("HTTP transport error in requests client.") from exc

    def _request(
        self,
        path: str,
        *,
        method: str = "GET",
        params: Optional[RequestParams] = None,
        has_files: bool = False,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        request = self._prepare(path, method=method, params=params, has_files=has_files, files=files)
        response = self._send(request)
        self._raise_for_status(request, response)
        return from_json(response.text)

    async def _request_async(
        self,
        path: str,
        *,
        method: str = "GET",
        params: Optional[RequestParams] = None,
        has_files: bool = False,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        if httpx is None:
            raise AsyncClientUnavailableError("Async methods require httpx. Install veryfi-client[httpx].")
        if self._session is None:
            raise TransportError("Client is closed.")

        request = self._prepare(path, method=method, params=params, has_files=has_files, files=files)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                if request.is_multipart:
                    response = await client.request(
                        request.method, request.url, data=request.data, files=request.files, headers=request.headers
                    )
                else:
                    response = await client.request(
                        request.method, request.url, content=request.body, headers=request.headers
                    )
        except httpx.TimeoutException as exc:
            logger.error("Timeout on %s %s", request.method, request.url)
            raise RequestTimeoutError("HTTP request timeout exceeded.") from exc
        except httpx.HTTPError as exc:
            logger.error("Transport failure on %s %s: %s", request.method, request.url, exc)
            raise TransportError("HTTP transport error in httpx client.") from exc

        self._raise_for_status(request, response)
        return from_json(response.text)

    @staticmethod
    def _categories(categories: Optional[Sequence[str]]) -> List[str]:
        if not categories:
            return list(CATEGORIES)
        return list(categories)

    @staticmethod
    def _get_documents_props() -> RequestArgs:
        return RequestArgs(path="/documents/", params={})

    def get_documents(self) -> Any:
        """List previously processed documents."""

        return self._request(**self._get_documents_props())

    async def get_documents_async(self) -> Any:
        return await self._request_async(**self._get_documents_props())

    @staticmethod
    def _get_document_props(document_id: Any) -> RequestArgs:
        return RequestArgs(path=f"/documents/{document_id}/", params={"id": document_id})

    def get_document(self, document_id: Any) -> Any:
        """Retrieve the data extracted from one document."""

        return self._request(**self._get_document_props(document_id))

    async def get_document_async(self, document_id: Any) -> Any:
        return await self._request_async(**self._get_document_props(document_id))

    def _process_document_props(
        self,
        file_path: str,
        categories: Optional[Sequence[str]],
        delete_after_processing: bool,
        extra: Dict[str, Any],
    ) -> RequestArgs:
        file_name, file_data = read_file_data(file_path, MAX_FILE_SIZE_MB)
        params: Dict[str, Any] = {
            "file_name": file_name,
            "file_data": file_data,
            "categories": self._categories(categories),
            "auto_delete": delete_after_processing,
        }
        params.update(extra)
        return RequestArgs(path="/documents/", method="POST", params=params)

    def process_document(
        self,
        file_path: str,
        categories: Optional[Sequence[str]] = None,
        delete_after_processing: bool = False,
        **kwargs: Any,
    ) -> Any:
        """Submit a local file, base64-embedded in the JSON body, for extraction.

        Extra keyword arguments are sent as additional request fields.
        """

        return self._request(**self._process_document_props(file_path, categories, delete_after_processing, kwargs))

    async def process_document_async(
        self,
        file_path: str,
        categories: Optional[Sequence[str]] = None,
        delete_after_processing: bool = False,
        **kwargs: Any,
    ) -> Any:
        return await self._request_async(
            **self._process_document_props(file_path, categories, delete_after_processing, kwargs)
        )

    def _process_document_url_props(
        self,
        file_url: Optional[str],
        file_urls: Optional[Sequence[str]],
        categories: Optional[Sequence[str]],
        delete_after_processing: bool,
        max_pages_to_process: Optional[int],
        boost_mode: bool,
        external_id: Optional[str],
    ) -> RequestArgs:
        if not file_url and not file_urls:
            raise ValidationError("Either file_url or file_urls is required.")
        params: Dict[str, Any] = {}
        if file_url:
            params["file_url"] = file_url
        if file_urls:
            params["file_urls"] = list(file_urls)
        params["categories"] = self._categories(categories)
        params["auto_delete"] = delete_after_processing
        params["boost_mode"] = boost_mode
        if external_id is not None:
            params["external_id"] = external_id
        if max_pages_to_process is not None:
            params["max_pages_to_process"] = max_pages_to_process
        return RequestArgs(path="/documents/", method="POST", params=params)

    def process_document_url(
        self,
        file_url: Optional[str] = None,
        file_urls: Optional[Sequence[str]] = None,
        categories: Optional[Sequence[str]] = None,
        delete_after_processing: bool = False,
        max_pages_to_process: Optional[int] = None,
        boost_mode: bool = False,
        external_id: Optional[str] = None,
    ) -> Any:
        """Ask the service to fetch and process a document from one or more URLs."""

        return self._request(
            **self._process_document_url_props(
                file_url, file_urls, categories, delete_after_processing, max_pages_to_process, boost_mode, external_id
            )
        )

    async def process_document_url_async(
        self,
        file_url: Optional[str] = None,
        file_urls: Optional[Sequence[str]] = None,
        categories: Optional[Sequence[str]] = None,
        delete_after_processing: bool = False,
        max_pages_to_process: Optional[int] = None,
        boost_mode: bool = False,
        external_id: Optional[str] = None,
    ) -> Any:
        return await self._request_async(
            **self._process_document_url_props(
                file_url, file_urls, categories, delete_after_processing, max_pages_to_process, boost_mode, external_id
            )
        )

    def _process_document_stream_props(
        self,
        file: BinaryIO,
        file_name: str,
        categories: Optional[Sequence[str]],
        delete_after_processing: bool,
    ) -> RequestArgs:
        if not file_name:
            raise ValidationError("file_name is required for stream uploads.")
        params: Dict[str, Any] = {
            "file_name": file_name,
            "categories": self._categories(categories),
            "auto_delete": delete_after_processing,
        }
        return RequestArgs(
            path="/documents/",
            method="POST",
            params=params,
            has_files=True,
            files={"file": (file_name, file)},
        )

    def process_document_stream(
        self,
        file: BinaryIO,
        file_name: str,
        categories: Optional[Sequence[str]] = None,
        delete_after_processing: bool = False,
    ) -> Any:
        """Upload an open binary stream as a multipart file part."""

        return self._request(
            **self._process_document_stream_props(file, file_name, categories, delete_after_processing)
        )

    async def process_document_stream_async(
        self,
        file: BinaryIO,
        file_name: str,
        categories: Optional[Sequence[str]] = None,
        delete_after_processing: bool = False,
    ) -> Any:
        return await self._request_async(
            **self._process_document_stream_props(file, file_name, categories, delete_after_processing)
        )

    @staticmethod
    def _update_document_props(document_id: Any, fields: Dict[str, Any]) -> RequestArgs:
        if not fields:
            raise ValidationError("fields to update cannot be empty")
        return RequestArgs(path=f"/documents/{document_id}/", method="PUT", params=dict(fields))

    def update_document(self, document_id: Any, fields: Dict[str, Any]) -> Any:
        return self._request(**self._update_document_props(document_id, fields))

    async def update_document_async(self, document_id: Any, fields: Dict[str, Any]) -> Any:
        return await self._request_async(**self._update_document_props(document_id, fields))

    @staticmethod
    def _delete_document_props(document_id: Any) -> RequestArgs:
        return RequestArgs(path=f"/documents/{document_id}/", method="DELETE", params={"id": document_id})

    def delete_document(self, document_id: Any) -> Any:
        return self._request(**self._delete_document_props(document_id))

    async def delete_document_async(self, document_id: Any) -> Any:
        return await self._request_async(**self._delete_document_props(document_id))


__all__ = ["Client", "httpx", "requests"]
