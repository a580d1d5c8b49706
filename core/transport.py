# =============================================================================
# core/transport.py  —  The one HTTP capability the TMDB client needs
# =============================================================================
#
# The client only ever issues GETs and looks at two things in the answer:
# the status code and the body bytes.  HttpTransport captures exactly that,
# so tests can hand the client a stub and never touch the network.
#
# HttpxTransport is the real implementation: one shared httpx.AsyncClient,
# non-blocking, with a bounded timeout on every request.  A hung upstream
# call surfaces as NetworkError instead of hanging the tool call forever.
# =============================================================================

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol

import httpx

from core.errors import NetworkError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """Status code plus raw body of one HTTP exchange."""

    status: int
    content: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Decode the body as JSON, raising NetworkError if it isn't."""
        try:
            return json.loads(self.content)
        except ValueError as e:
            raise NetworkError(f"Response body is not valid JSON: {e}") from e


class HttpTransport(Protocol):
    async def get(
        self,
        url: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> HttpResponse: ...

    async def aclose(self) -> None: ...


class HttpxTransport:
    """HttpTransport backed by httpx.AsyncClient."""

    def __init__(self, timeout: float, client: Optional[httpx.AsyncClient] = None):
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def get(
        self,
        url: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> HttpResponse:
        logger.debug("GET %s params=%s", url, dict(params or {}))
        try:
            response = await self._client.get(url, params=params, headers=headers)
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request to {url} timed out") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e
        return HttpResponse(status=response.status_code, content=response.content)

    async def aclose(self) -> None:
        await self._client.aclose()
