import pytest

from core.config import DEFAULT_TIMEOUT_SECONDS, TmdbConfig
from core.errors import StartupConfigError


def test_from_env_reads_token():
    config = TmdbConfig.from_env({"TMDB_TOKEN": "abc"})
    assert config.token == "abc"
    assert config.api_base_url == "https://api.themoviedb.org/3"
    assert config.image_size == "w92"
    assert config.timeout == DEFAULT_TIMEOUT_SECONDS


@pytest.mark.parametrize("environ", [{}, {"TMDB_TOKEN": ""}, {"TMDB_TOKEN": "   "}])
def test_missing_token_fails_fast(environ):
    with pytest.raises(StartupConfigError, match="TMDB_TOKEN"):
        TmdbConfig.from_env(environ)


def test_timeout_override():
    config = TmdbConfig.from_env({"TMDB_TOKEN": "abc", "TMDB_TIMEOUT": "2.5"})
    assert config.timeout == 2.5


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_bad_timeout_rejected(raw):
    with pytest.raises(StartupConfigError, match="TMDB_TIMEOUT"):
        TmdbConfig.from_env({"TMDB_TOKEN": "abc", "TMDB_TIMEOUT": raw})


def test_repr_hides_token():
    assert "secret" not in repr(TmdbConfig(token="secret"))


def test_config_is_immutable():
    config = TmdbConfig(token="abc")
    with pytest.raises(AttributeError):
        config.token = "other"
