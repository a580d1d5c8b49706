# =============================================================================
# core/config.py  —  TMDB client configuration
# =============================================================================
#
# The bearer token is read ONCE, at startup, into an immutable TmdbConfig
# that is handed to the client.  Nothing else in the project touches
# os.environ, so tests can build a config with a fake token directly.
#
# ENVIRONMENT VARIABLES:
#   TMDB_TOKEN    (required)  TMDB "API Read Access Token" (v4 bearer token)
#   TMDB_TIMEOUT  (optional)  Per-request timeout in seconds (default: 10)
#
# main.py calls load_dotenv() before from_env(), so both can live in .env.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from core.errors import StartupConfigError

TOKEN_ENV_VAR = "TMDB_TOKEN"
TIMEOUT_ENV_VAR = "TMDB_TIMEOUT"

DEFAULT_API_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
DEFAULT_IMAGE_SIZE = "w92"             # Smallest profile size TMDB serves
DEFAULT_LANGUAGE = "en-US"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class TmdbConfig:
    """Everything the TMDB client needs to know, fixed at construction."""

    token: str
    api_base_url: str = DEFAULT_API_BASE_URL
    image_base_url: str = DEFAULT_IMAGE_BASE_URL
    image_size: str = DEFAULT_IMAGE_SIZE
    language: str = DEFAULT_LANGUAGE
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __repr__(self) -> str:
        # Keep the credential out of logs and tracebacks.
        return (
            f"TmdbConfig(token='***', api_base_url={self.api_base_url!r}, "
            f"image_size={self.image_size!r}, timeout={self.timeout!r})"
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TmdbConfig":
        """Build a config from environment variables.

        Raises:
            StartupConfigError: TMDB_TOKEN is unset or blank, or TMDB_TIMEOUT
                is not a positive number.
        """
        env = os.environ if environ is None else environ

        token = env.get(TOKEN_ENV_VAR, "").strip()
        if not token:
            raise StartupConfigError(f"{TOKEN_ENV_VAR} must be set in environment")

        timeout = DEFAULT_TIMEOUT_SECONDS
        raw_timeout = env.get(TIMEOUT_ENV_VAR)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise StartupConfigError(
                    f"{TIMEOUT_ENV_VAR} must be a number of seconds, got {raw_timeout!r}"
                ) from None
            if timeout <= 0:
                raise StartupConfigError(
                    f"{TIMEOUT_ENV_VAR} must be positive, got {raw_timeout!r}"
                )

        return cls(token=token, timeout=timeout)
