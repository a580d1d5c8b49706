# =============================================================================
# core/formatting.py  —  Text rendering for tool output
# =============================================================================
#
# The tools return plain text blocks to the LLM.  These templates are fixed
# so the output is predictable and easy to test.
# =============================================================================

from typing import Iterable, Optional

from core.models import ActorDetails, MovieSummary


def format_actor_details(actor: ActorDetails) -> str:
    """Render the actor text block.

    Missing birth date or birthplace render as an empty value, not "None".
    """
    return (
        f"ID: {actor.id}\n"
        f"Name: {actor.name}\n"
        f"Date of Birth: {actor.birthday or ''}\n"
        f"Place of Birth: {actor.place_of_birth or ''}\n"
        f"Biography: {actor.biography}"
    )


def release_year(release_date: str) -> Optional[str]:
    """"1993-11-19" → "1993"; anything shorter than 4 characters → None."""
    if len(release_date) < 4:
        return None
    return release_date[:4]


def format_movie(movie: MovieSummary) -> str:
    year = release_year(movie.release_date)
    if year is None:
        return movie.title
    return f"{movie.title} ({year})"


def format_movie_list(movies: Iterable[MovieSummary]) -> str:
    """One line per movie, numbered from 0: "0. Rocky (1976)"."""
    return "\n".join(f"{index}. {format_movie(movie)}" for index, movie in enumerate(movies))
