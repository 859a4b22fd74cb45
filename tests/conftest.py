from typing import Any, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from score_gateway.app import create_app
from score_gateway.core import StoreSettings, get_http_client, get_store_settings


class FakeAirtable:
    """Stands in for the Airtable API; replies are served in queue order."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._replies: List[Any] = []

    def reply(self, status_code: int = 200, json: Any = None, text: Optional[str] = None):
        if text is not None:
            self._replies.append(httpx.Response(status_code, text=text))
        else:
            self._replies.append(httpx.Response(status_code, json=json))

    def fail(self, exc: Exception):
        self._replies.append(exc)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def settings():
    return StoreSettings(
        base_id="appBase123",
        table_id="tblScores",
        api_key="key-secret",
        view_id="viwTopScores",
    )


@pytest.fixture
def airtable():
    return FakeAirtable()


@pytest.fixture
def app(settings, airtable):
    app = create_app()

    async def _client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(airtable.handler)) as client:
            yield client

    app.dependency_overrides[get_store_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = _client
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
