# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every record that flows from the
# TMDB API into the tools.  They carry no behavior beyond a sanity check on
# construction; formatting lives in core/formatting.py.
#
# WHY FROZEN DATACLASSES?
#   A record is built once from an API response and then only read.  Freezing
#   it means a tool can't accidentally mutate what the client handed back.
#
# FIELD NAMES MATCH THE TMDB JSON KEYS:
#   The client validates raw JSON straight into these classes (see
#   core/tmdb_client.py), so a field name here IS the wire key.  Keys we
#   don't model are ignored.
# =============================================================================

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class Gender(IntEnum):
    """TMDB person gender codes."""

    UNKNOWN = 0
    FEMALE = 1
    MALE = 2
    NON_BINARY = 3

    @classmethod
    def _missing_(cls, value):
        # TMDB may add codes; an unrecognised one reads as UNKNOWN.
        return cls.UNKNOWN


# -----------------------------------------------------------------------------
# ActorSearchResult: one hit from /search/person
# -----------------------------------------------------------------------------
# Only the id matters: it chains a name search into a detail lookup and is
# discarded right after.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ActorSearchResult:
    id: int


# -----------------------------------------------------------------------------
# ActorDetails: the full /person/{id} record
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ActorDetails:
    """Detailed information about one person on TMDB."""

    id: int                            # TMDB person id
    name: str                          # Primary display name
    biography: str                     # Often sourced from Wikipedia
    gender: Gender
    known_for_department: str          # "Acting", "Directing", ...
    popularity: float                  # Higher = more popular

    also_known_as: tuple[str, ...] = ()    # Alternate names / scripts
    birthday: Optional[str] = None         # "YYYY-MM-DD"
    deathday: Optional[str] = None         # None while alive
    homepage: Optional[str] = None
    imdb_id: Optional[str] = None          # "nm" prefixed
    place_of_birth: Optional[str] = None
    profile_path: Optional[str] = None     # Relative image path, e.g. "/abc.jpg"
    adult: bool = False

    def __post_init__(self):
        if self.id < 0:
            raise ValueError(f"actor id must be non-negative, got {self.id}")


# -----------------------------------------------------------------------------
# MovieSummary: one entry of a /discover/movie page
# -----------------------------------------------------------------------------
# Order is whatever TMDB returned (relevance); we never sort.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class MovieSummary:
    """One movie as listed by the discovery endpoint."""

    id: int
    title: str
    original_title: str
    original_language: str             # ISO 639-1, e.g. "en"
    overview: str
    popularity: float
    vote_average: float
    vote_count: int

    backdrop_path: Optional[str] = None
    poster_path: Optional[str] = None
    release_date: str = ""             # "YYYY-MM-DD", or "" when unknown
    genre_ids: tuple[int, ...] = ()
    adult: bool = False
    video: bool = False


@dataclass(frozen=True)
class MoviePage:
    """The /discover/movie envelope.  Only the results array is used."""

    results: tuple[MovieSummary, ...] = field(default_factory=tuple)
