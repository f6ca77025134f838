import json
import os

import pytest

# Settings are read once and cached; set test values before the app is imported
os.environ.setdefault("FIXER_API_KEY", "test-key")
os.environ.setdefault("FIXER_BASE_URL", "http://fixer.test/api/")
os.environ.setdefault("LOG_LEVEL", "debug")


SNAPSHOT = {
    "success": True,
    "timestamp": 1387929599,
    "historical": True,
    "base": "GBP",
    "date": "2013-12-24",
    "rates": {"USD": 1.636492, "EUR": 1.196476, "CAD": 1.739516},
}


class FakeTransport:
    """Records requested URLs and answers every call with the same body."""

    def __init__(self, body=None, exc=None):
        self.body = json.dumps(SNAPSHOT) if body is None else body
        self.exc = exc
        self.calls = []

    def __call__(self, url):
        self.calls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.body


class TextResponse:
    def __init__(self, text):
        self.text = text


@pytest.fixture()
def snapshot():
    return json.loads(json.dumps(SNAPSHOT))


@pytest.fixture()
def transport():
    return FakeTransport()


@pytest.fixture()
def fixer(transport):
    from fixer_client import ExchangeRateClient

    return ExchangeRateClient("secret", transport)


@pytest.fixture(scope="session")
def app():
    from fixer_client.main import app as fastapi_app

    return fastapi_app


@pytest.fixture()
def service(app, transport):
    from starlette.testclient import TestClient
    from fixer_client.api import get_transport

    app.dependency_overrides[get_transport] = lambda: transport
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
