# =============================================================================
# tools/requests.py  —  The closed set of tool requests
# =============================================================================
#
# One pydantic model per tool.  Each model is BOTH:
#   - the validator for an incoming tool call's argument bag, and
#   - the source of the JSON schema advertised in tools/list.
# So what we advertise and what we accept can't drift apart.
#
# ToolRequest is the union of all of them.  A value of this type only ever
# comes out of mapper.decode_request(); a malformed call never reaches a
# tool implementation.
# =============================================================================

from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class GetActorInfo(BaseModel):
    """Arguments of the get_actor_info tool."""

    model_config = ConfigDict(frozen=True)

    actor_name: Annotated[
        StrictStr,
        Field(min_length=1, description="The name of the actor."),
    ]


class GetMoviesByActor(BaseModel):
    """Arguments of the get_movies_by_actor tool."""

    model_config = ConfigDict(frozen=True)

    # StrictInt: "1234" and 12.5 are rejected rather than coerced.
    actor_id: Annotated[
        StrictInt,
        Field(description="Required filter: return movies for this actor ID"),
    ]


ToolRequest = Union[GetActorInfo, GetMoviesByActor]
