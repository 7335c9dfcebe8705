from __future__ import annotations

import httpx
import pytest

VMS_XML = "<vms><vm><name>vm1</name></vm></vms>"


class FakeHttp:
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.client_kwargs: list[dict] = []
        self.handler = lambda request: httpx.Response(200, text=VMS_XML)

    def respond(self, status_code: int, text: str) -> None:
        self.handler = lambda request: httpx.Response(status_code, text=text)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def fake_http(monkeypatch) -> FakeHttp:
    fake = FakeHttp()
    real_client = httpx.Client

    def _client(**kwargs):
        fake.client_kwargs.append(kwargs)
        kwargs = dict(kwargs)
        kwargs.pop("verify", None)
        kwargs["trust_env"] = False
        return real_client(transport=httpx.MockTransport(fake._handle), **kwargs)

    monkeypatch.setattr(httpx, "Client", _client)
    return fake


@pytest.fixture
def insecure_options() -> dict:
    return {
        "url": "https://host/api",
        "username": "admin@internal",
        "password": "x",
        "insecure": 1,
    }
