"""
Sheeter API Client

Performs one authenticated HTTP exchange per call against the Sheeter API.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from core.config import SheeterConfig
from core.errors import ApiCallError

logger = logging.getLogger(__name__)


def sheet_path(sheet_id: str, suffix: str = "") -> str:
    """Build an /api/sheets/{id}... path with the spreadsheet ID percent-encoded."""
    return f"/api/sheets/{quote(sheet_id, safe='')}{suffix}"


class SheeterClient:
    """
    Thin async client for the Sheeter API.

    A new httpx.AsyncClient is opened per request; nothing is shared between
    concurrent calls except the read-only configuration.
    """

    def __init__(
        self,
        config: SheeterConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        json_body: Any = None,
        params: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Send a request and return the parsed JSON body.

        Args:
            endpoint: Path relative to the configured base URL (e.g. "/api/sheets/create")
            method: HTTP method
            json_body: Optional JSON-serializable request body
            params: Optional query parameters
            headers: Optional headers, applied over the defaults

        Returns:
            The decoded JSON response, or {} for an empty body.

        Raises:
            ApiCallError: If the API responds with a non-2xx status.
        """
        url = f"{self.config.base_url}{endpoint}"
        request_headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
            **(headers or {}),
        }

        logger.debug(f"Sheeter API request: {method} {endpoint} params={params}")

        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self.config.timeout,
            follow_redirects=True,
        ) as client:
            response = await client.request(
                method,
                url,
                headers=request_headers,
                json=json_body,
                params=params,
            )

        if not response.is_success:
            raise ApiCallError(response.status_code, response.reason_phrase, response.text)

        if not response.content:
            return {}
        return response.json()
