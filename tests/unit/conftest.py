import httpx
import pytest

from veryfi import client as veryfi_client


class SyncClientStub:
    def __init__(self, response, calls):
        self.response = response
        self.calls = calls
        self.closed = False

    def request(self, method, url, content=None, data=None, files=None, headers=None):
        self.calls.append(
            {"method": method, "url": url, "content": content, "data": data, "files": files, "headers": headers}
        )
        return self.response

    def close(self):
        self.closed = True


class AsyncClientStub:
    def __init__(self, response, calls):
        self.response = response
        self.calls = calls

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def request(self, method, url, content=None, data=None, files=None, headers=None):
        self.calls.append(
            {"method": method, "url": url, "content": content, "data": data, "files": files, "headers": headers}
        )
        return self.response


class RequestsSessionStub:
    def __init__(self, response, calls):
        self.response = response
        self.calls = calls

    def request(self, method, url, data=None, files=None, headers=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "content": data,
                "files": files,
                "headers": headers,
                "timeout": timeout,
            }
        )
        return self.response

    def close(self):
        pass


@pytest.fixture
def response_factory():
    def _factory(status_code, text="", url="https://api.veryfi.com/api/v7/partner/documents/"):
        return httpx.Response(status_code, text=text, request=httpx.Request("GET", url))

    return _factory


@pytest.fixture
def mock_sync_client(monkeypatch):
    def _install(response):
        calls = []

        def client_factory(*_args, **_kwargs):
            return SyncClientStub(response, calls)

        monkeypatch.setattr(veryfi_client.httpx, "Client", client_factory)
        return calls

    return _install


@pytest.fixture
def mock_async_client(monkeypatch):
    def _install(response):
        calls = []

        def async_client_factory(*_args, **_kwargs):
            return AsyncClientStub(response, calls)

        monkeypatch.setattr(veryfi_client.httpx, "AsyncClient", async_client_factory)
        return calls

    return _install


@pytest.fixture
def mock_requests_session(monkeypatch):
    def _install(response):
        if veryfi_client.requests is None:
            pytest.skip("requests is not installed")
        calls = []

        def session_factory(*_args, **_kwargs):
            return RequestsSessionStub(response, calls)

        monkeypatch.setattr(veryfi_client.requests, "Session", session_factory)
        return calls

    return _install


@pytest.fixture
def fixed_timestamp(monkeypatch):
    timestamp = 1700000000000
    monkeypatch.setattr(veryfi_client, "generate_timestamp", lambda: timestamp)
    return timestamp
