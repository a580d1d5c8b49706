# =============================================================================
# tools/tmdb_tools.py  —  The two tool implementations
# =============================================================================
#
# Each tool is pure orchestration: call the TMDB client, format the outcome
# with core/formatting.py, hand back MCP content blocks.
#
# "Nothing matched" is raised as NotFound; wire failures arrive as
# NetworkError from the client.  Neither is caught here: mapper.call_tool()
# turns both into MCP error results in one place.
# =============================================================================

import logging

from mcp.types import ContentBlock, ImageContent, TextContent

from core.errors import NotFound
from core.formatting import format_actor_details, format_movie_list
from core.tmdb_client import TmdbClient
from tools.requests import GetActorInfo, GetMoviesByActor

logger = logging.getLogger(__name__)

# TMDB serves profile images as JPEG.
PROFILE_IMAGE_MIME_TYPE = "image/jpeg"


async def get_actor_info(request: GetActorInfo, client: TmdbClient) -> list[ContentBlock]:
    """Actor profile as a text block, plus the profile picture when TMDB has one."""
    actor = await client.fetch_actor_details(request.actor_name)
    if actor is None:
        raise NotFound(f'No actors matching the name "{request.actor_name}" were found')

    content: list[ContentBlock] = [TextContent(type="text", text=format_actor_details(actor))]

    # No picture on file: the profile text stands on its own.
    if not actor.profile_path:
        logger.info("Actor %s has no profile image", actor.id)
        return content

    image_data = await client.fetch_image_as_base64(actor.profile_path)
    content.append(ImageContent(type="image", data=image_data, mimeType=PROFILE_IMAGE_MIME_TYPE))
    return content


async def get_movies_by_actor(request: GetMoviesByActor, client: TmdbClient) -> list[ContentBlock]:
    movies = await client.fetch_movies_by_actor(request.actor_id)
    if not movies:
        raise NotFound("No movies were found!")
    return [TextContent(type="text", text=format_movie_list(movies))]
