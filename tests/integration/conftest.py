from __future__ import annotations

import json
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Dict, Iterator, List

import pytest

PARTNER_PREFIX = "/api/v7/partner"


class RecordingHandler(BaseHTTPRequestHandler):
    received: List[Dict[str, Any]] = []

    def _read_body(self) -> bytes:
        length = int(self.headers.get("Content-Length") or 0)
        return self.rfile.read(length) if length else b""

    def _reply(self, status: int, payload: Any = None) -> None:
        body = b"" if payload is None else json.dumps(payload).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _handle(self) -> None:
        body = self._read_body()
        headers = {key.lower(): value for key, value in self.headers.items()}
        self.received.append({"method": self.command, "path": self.path, "headers": headers, "body": body})
        path = self.path[len(PARTNER_PREFIX):] if self.path.startswith(PARTNER_PREFIX) else self.path

        if path.startswith("/documents/forbidden/"):
            self._reply(403, {"error": "invalid key"})
            return
        if path.startswith("/documents/missing/"):
            self._reply(404, {"detail": "Not found."})
            return
        if path.startswith("/documents/slow/"):
            time.sleep(0.5)
            self._reply(200, {})
            return
        if self.command == "DELETE":
            self._reply(204)
            return
        if path == "/documents/" and self.command == "GET":
            self._reply(200, {"documents": []})
            return
        payload = json.loads(body) if body and self.headers.get("Content-Type") == "application/json" else {}
        self._reply(201 if self.command == "POST" else 200, {"echo": payload})

    do_GET = _handle
    do_POST = _handle
    do_PUT = _handle
    do_DELETE = _handle

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A003
        return


@pytest.fixture
def local_veryfi_server() -> Iterator[Dict[str, Any]]:
    received: List[Dict[str, Any]] = []
    handler = type("Handler", (RecordingHandler,), {"received": received})
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = server.server_address[:2]
        yield {"base_url": f"http://{host}:{port}/api/", "received": received}
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=1)
