"""
Shared fixtures for the Sheeter tool tests.

The Sheeter API is replaced by an httpx.MockTransport so tests exercise the
real client and can inspect every outgoing request.
"""
import os
import sys

import httpx
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from core.api_client import SheeterClient  # noqa: E402
from core.config import SheeterConfig  # noqa: E402

TEST_API_KEY = "test-api-key"
TEST_BASE_URL = "https://sheeter.test"


@pytest.fixture
def sheeter_api():
    """
    Factory returning (client, sent_requests) for a canned API response.

    Usage:
        client, sent = sheeter_api({"clearedRange": "Sheet1!A1:B2"})
        client, sent = sheeter_api(status_code=404, text="Not Found")
    """

    def factory(json_body=None, status_code=200, text=None):
        sent = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(
                status_code, json=json_body if json_body is not None else {}
            )

        client = SheeterClient(
            SheeterConfig(api_key=TEST_API_KEY, base_url=TEST_BASE_URL),
            transport=httpx.MockTransport(handler),
        )
        return client, sent

    return factory
