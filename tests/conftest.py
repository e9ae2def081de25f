import httpx
import pytest
from fastapi.testclient import TestClient

from aggregator.main import app
from aggregator.upstream import get_client


class FakeUpstream:
    """Canned third-party responses keyed by URL prefix."""

    def __init__(self):
        self.routes = []
        self.requests = []

    def on(self, prefix, response):
        self.routes.append((prefix, response))

    def handler(self, request: httpx.Request):
        self.requests.append(request)
        for prefix, response in self.routes:
            if str(request.url).startswith(prefix):
                if isinstance(response, Exception):
                    raise response
                return response
        return httpx.Response(404, json={"message": "no fake route"})


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def client(upstream):
    def fake_client():
        with httpx.Client(transport=httpx.MockTransport(upstream.handler)) as c:
            yield c

    app.dependency_overrides[get_client] = fake_client
    yield TestClient(app)
    app.dependency_overrides.clear()
