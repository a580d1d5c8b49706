from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

import pytest

from core.config import TmdbConfig
from core.tmdb_client import TmdbClient
from core.transport import HttpResponse

TEST_TOKEN = "test-token-123"
API = "https://api.themoviedb.org/3"
IMAGES = "https://image.tmdb.org/t/p/w92"

STALLONE_ID = 16483
STALLONE_PROFILE = "/qDRGPAcQoW8Wuig9bvoLpHwf1gU.jpg"


@dataclass
class RecordedCall:
    url: str
    params: dict[str, str]
    headers: dict[str, str]


@dataclass
class StubTransport:
    """HttpTransport that answers from a url → response table."""

    routes: dict[str, Union[HttpResponse, Exception]] = field(default_factory=dict)
    calls: list[RecordedCall] = field(default_factory=list)
    closed: bool = False

    def add(self, url: str, outcome: Union[HttpResponse, Exception]) -> None:
        self.routes[url] = outcome

    def add_json(self, url: str, payload: Any, status: int = 200) -> None:
        self.routes[url] = HttpResponse(status=status, content=json.dumps(payload).encode())

    async def get(
        self,
        url: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> HttpResponse:
        self.calls.append(RecordedCall(url, dict(params or {}), dict(headers or {})))
        if url not in self.routes:
            raise AssertionError(f"unexpected GET {url}")
        outcome = self.routes[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def aclose(self) -> None:
        self.closed = True


def make_person(**overrides: Any) -> dict[str, Any]:
    person = {
        "adult": False,
        "also_known_as": ["Sly Stallone", "Michael Sylvester Gardenzio Stallone"],
        "biography": "An American actor and filmmaker.",
        "birthday": "1946-07-06",
        "deathday": None,
        "gender": 2,
        "homepage": None,
        "id": STALLONE_ID,
        "imdb_id": "nm0000230",
        "known_for_department": "Acting",
        "name": "Sylvester Stallone",
        "place_of_birth": "New York City, New York, USA",
        "popularity": 35.2,
        "profile_path": STALLONE_PROFILE,
    }
    person.update(overrides)
    return person


def make_movie(movie_id: int, title: str, release_date: str = "", **overrides: Any) -> dict[str, Any]:
    movie = {
        "adult": False,
        "backdrop_path": None,
        "genre_ids": [18],
        "id": movie_id,
        "original_language": "en",
        "original_title": title,
        "overview": f"{title} overview.",
        "popularity": 12.5,
        "poster_path": f"/{movie_id}.jpg",
        "release_date": release_date,
        "title": title,
        "video": False,
        "vote_average": 7.1,
        "vote_count": 4200,
    }
    movie.update(overrides)
    return movie


@pytest.fixture
def config() -> TmdbConfig:
    return TmdbConfig(token=TEST_TOKEN)


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def client(config: TmdbConfig, transport: StubTransport) -> TmdbClient:
    return TmdbClient(config, transport=transport)


@pytest.fixture
def stallone(transport: StubTransport) -> StubTransport:
    """A TMDB that knows exactly one Sylvester Stallone, picture included."""
    transport.add_json(f"{API}/search/person", {"page": 1, "results": [{"id": STALLONE_ID, "name": "Sylvester Stallone"}]})
    transport.add_json(f"{API}/person/{STALLONE_ID}", make_person())
    transport.add(f"{IMAGES}{STALLONE_PROFILE}", HttpResponse(status=200, content=b"\xff\xd8\xff\xe0jpeg"))
    return transport
