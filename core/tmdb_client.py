# =============================================================================
# core/tmdb_client.py  —  The Movie Database (TMDB) API client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps every outbound call to TMDB and turns each JSON response into a
#   typed record from core/models.py (or None when nothing matched).
#
# ENDPOINTS USED:
#   GET /search/person?query=<name>&language=en-US   → actor id lookup
#   GET /person/{id}                                 → ActorDetails
#   GET /discover/movie?with_cast=<id>               → list[MovieSummary]
#   GET https://image.tmdb.org/t/p/w92<path>         → raw image bytes
#
# FAILURE POLICY:
#   Anything that goes wrong on the wire (transport error, timeout, non-2xx
#   status, a body that isn't JSON or doesn't have the expected shape) is
#   raised as NetworkError.  There are no retries and no caching: a transient
#   upstream failure surfaces immediately to the tool that asked.
#
# AUTH:
#   Every request carries "Authorization: Bearer <token>" and
#   "Accept: application/json".  The token comes from TmdbConfig, never from
#   the environment directly.
# =============================================================================

import base64
import logging
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from core.config import TmdbConfig
from core.errors import NetworkError
from core.models import ActorDetails, ActorSearchResult, MoviePage, MovieSummary
from core.transport import HttpResponse, HttpTransport, HttpxTransport

logger = logging.getLogger(__name__)

# Built once; validating straight from bytes also catches malformed JSON.
_ACTOR_DETAILS = TypeAdapter(ActorDetails)
_MOVIE_PAGE = TypeAdapter(MoviePage)


class TmdbClient:
    """Async client for the handful of TMDB endpoints the tools need."""

    def __init__(self, config: TmdbConfig, transport: Optional[HttpTransport] = None):
        self._config = config
        self._transport = transport or HttpxTransport(timeout=config.timeout)
        self._headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {config.token}",
        }

    async def aclose(self) -> None:
        await self._transport.aclose()

    # -------------------------------------------------------------------------
    # Plumbing
    # -------------------------------------------------------------------------
    async def _get(self, url: str, params: Optional[dict[str, str]] = None) -> HttpResponse:
        response = await self._transport.get(url, params=params, headers=self._headers)
        if not response.ok:
            raise NetworkError(f"TMDB request to {url} failed with HTTP status {response.status}")
        return response

    async def _get_api(self, path: str, params: Optional[dict[str, str]] = None) -> HttpResponse:
        return await self._get(f"{self._config.api_base_url}{path}", params)

    # -------------------------------------------------------------------------
    # Actors
    # -------------------------------------------------------------------------
    async def find_actor(self, name: str) -> Optional[ActorSearchResult]:
        """Search people by name and return the first hit, if any.

        Only the first result (in TMDB's relevance order) is ever considered;
        there is no disambiguation between namesakes.
        """
        response = await self._get_api(
            "/search/person",
            {"query": name, "language": self._config.language},
        )
        payload = response.json()
        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list):
            return None

        for item in results:
            actor_id = _int_id(item)
            if actor_id is not None:
                return ActorSearchResult(id=actor_id)
        return None

    async def find_actor_id_by_name(self, name: str) -> Optional[int]:
        hit = await self.find_actor(name)
        return hit.id if hit is not None else None

    async def fetch_actor_by_id(self, actor_id: int) -> ActorDetails:
        response = await self._get_api(f"/person/{actor_id}")
        try:
            return _ACTOR_DETAILS.validate_json(response.content)
        except ValidationError as e:
            raise NetworkError(f"Unexpected person record for id {actor_id}: {_summarize(e)}") from e

    async def fetch_actor_details(self, name: str) -> Optional[ActorDetails]:
        """Resolve a name to an id, then fetch that person's full record.

        Returns None when the search finds nobody.
        """
        actor_id = await self.find_actor_id_by_name(name)
        if actor_id is None:
            logger.debug("No TMDB person matches %r", name)
            return None
        return await self.fetch_actor_by_id(actor_id)

    # -------------------------------------------------------------------------
    # Movies
    # -------------------------------------------------------------------------
    async def fetch_movies_by_actor(self, actor_id: int) -> list[MovieSummary]:
        """Movies featuring the given actor, in TMDB's order.  May be empty."""
        response = await self._get_api("/discover/movie", {"with_cast": str(actor_id)})
        try:
            page = _MOVIE_PAGE.validate_json(response.content)
        except ValidationError as e:
            raise NetworkError(f"Unexpected movie list for actor {actor_id}: {_summarize(e)}") from e
        return list(page.results)

    # -------------------------------------------------------------------------
    # Images
    # -------------------------------------------------------------------------
    def resolve_image_url(self, relative_path: str) -> str:
        """Full image URL for a TMDB relative path such as "/abc.jpg"."""
        return f"{self._config.image_base_url}/{self._config.image_size}{relative_path}"

    async def fetch_image_as_base64(self, relative_path: str) -> str:
        """Download an image and return it base64-encoded.

        The bytes are passed through untouched; the content type is not
        checked.
        """
        response = await self._get(self.resolve_image_url(relative_path))
        return base64.b64encode(response.content).decode("ascii")


def _int_id(item: Any) -> Optional[int]:
    if not isinstance(item, dict):
        return None
    value = item.get("id")
    # bool is an int subclass; a JSON true is not an id.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _summarize(error: ValidationError) -> str:
    """One-line "field: problem" list, without pydantic's help-link footer."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
        for err in error.errors()
    )
