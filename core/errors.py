# =============================================================================
# core/errors.py  —  Error taxonomy
# =============================================================================
#
# Three failure kinds come out of core/:
#   StartupConfigError  → the server can't start (missing TMDB token, ...)
#   NetworkError        → TMDB couldn't be reached or answered nonsense
#   NotFound            → TMDB answered, but there is nothing to show
#
# The tools layer turns NetworkError and NotFound into MCP error *results*.
# StartupConfigError never reaches a tool: main.py exits on it.
# =============================================================================


class TmdbServerError(Exception):
    """Base class for every error this project raises."""


class StartupConfigError(TmdbServerError):
    """Required configuration is missing or malformed."""


class NetworkError(TmdbServerError):
    """Transport failure, non-2xx status, or an unparseable response body."""


class NotFound(TmdbServerError):
    """The query was valid but matched nothing."""
