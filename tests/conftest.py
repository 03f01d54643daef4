"""Shared fixtures: a fake VideoConvert node served through httpx.MockTransport."""

from __future__ import annotations

import base64
import json
import socket

import httpx
import pytest

from nsivideoconvert import Client, reset_configuration

USER = "test"
PASSWORD = "test"


class FakeNode:
    """Minimal stand-in for a nsi.videoconvert node."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_checks: dict[str, int] = {}
        self.forced_response: httpx.Response | None = None

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.forced_response is not None:
            return self.forced_response

        expected = "Basic " + base64.b64encode(f"{USER}:{PASSWORD}".encode()).decode()
        if request.headers.get("authorization") != expected:
            return httpx.Response(401)

        try:
            body = json.loads(request.content)
        except ValueError:
            return httpx.Response(400)

        if request.method == "POST":
            return self._convert(body)
        return self._done(body)

    def _convert(self, body: dict) -> httpx.Response:
        if body.get("filename") == "queue error":
            return httpx.Response(503)
        if "video_link" in body:
            filename = body["video_link"].rsplit("/", 1)[-1]
        else:
            filename = body["filename"]

        key = f"key for video {filename}"
        self.status_checks.setdefault(key, 0)
        result = {"key": key}
        for field in ("callback", "verb"):
            if field in body:
                result[field] = body[field]
        return httpx.Response(200, json=result)

    def _done(self, body: dict) -> httpx.Response:
        key = body.get("key")
        if key not in self.status_checks:
            return httpx.Response(404)
        # pending on the first check, done afterwards
        self.status_checks[key] += 1
        return httpx.Response(200, json={"done": self.status_checks[key] > 1})


@pytest.fixture(autouse=True)
def clean_configuration():
    reset_configuration()
    yield
    reset_configuration()


@pytest.fixture
def fake_node():
    return FakeNode()


@pytest.fixture
def client(fake_node):
    return Client(user=USER, password=PASSWORD, host="localhost", port="9886",
                  transport=fake_node.transport)


@pytest.fixture
def closed_port():
    """A local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return str(port)
