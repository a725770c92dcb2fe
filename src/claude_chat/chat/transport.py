import logging
from typing import Dict, Optional

import httpx

logger = logging.getLogger("transport")

ANTHROPIC_API_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"


class TransportError(Exception):
    """Raised when the request could not be delivered or its body could not be read."""


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "x-api-key": api_key,
        "anthropic-version": ANTHROPIC_VERSION,
        "content-type": "application/json",
    }


class AnthropicTransport:
    """
    One POST per turn to the Messages endpoint.

    The client and its headers are built once and never mutated. No timeout is
    set, so a stalled connection blocks the caller until the peer gives up.
    """

    def __init__(self, api_key: str, client: Optional[httpx.AsyncClient] = None) -> None:
        self.headers = build_headers(api_key)
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(headers=self.headers, timeout=None)

    async def send(self, body: bytes) -> str:
        """
        Deliver one request body.

        :param body: encoded JSON request
        :returns: the response text; the HTTP status is not inspected
        :raises TransportError: on connection, TLS or protocol failure
        """
        logger.debug("POST %s (%d bytes)", ANTHROPIC_API_URL, len(body))
        try:
            response = await self.client.post(
                ANTHROPIC_API_URL, content=body, headers=self.headers
            )
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", ANTHROPIC_API_URL, exc)
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        logger.debug("Response status=%s", response.status_code)
        return response.text

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "AnthropicTransport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
