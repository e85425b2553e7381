import pytest

from config import settings
from config.settings import BreakpointConfigError, load_env_breakpoints


def test_constants():
    assert settings.SENTINEL_MAX == 9999
    assert settings.MEDIA_QUERY_TEMPLATE.format(max=640) == "@media (max-width: 640px)"
    assert settings.BREAKPOINTS_ENV_VAR == "DEVICE_SIZES_BREAKPOINTS"


def test_env_breakpoints_missing_or_blank():
    assert load_env_breakpoints({}) == {}
    assert load_env_breakpoints({"DEVICE_SIZES_BREAKPOINTS": "   "}) == {}


def test_env_breakpoints_parsed():
    env = {"DEVICE_SIZES_BREAKPOINTS": '{"small": 500, "medium": "800"}'}
    assert load_env_breakpoints(env) == {"small": 500, "medium": "800"}


def test_env_breakpoints_reads_process_environment(monkeypatch):
    monkeypatch.setenv("DEVICE_SIZES_BREAKPOINTS", '{"xsmall": 300}')
    assert load_env_breakpoints() == {"xsmall": 300}


@pytest.mark.parametrize("raw", ["{not json", "[500, 800]", "42"])
def test_env_breakpoints_invalid(raw):
    with pytest.raises(BreakpointConfigError):
        load_env_breakpoints({"DEVICE_SIZES_BREAKPOINTS": raw})


@pytest.mark.parametrize("raw,expected", [("info", 20), (" DEBUG ", 10), ("warn", 30), ("15", 15)])
def test_parse_log_level(raw, expected):
    assert settings.parse_log_level(raw) == expected


@pytest.mark.parametrize("raw", ["verbose", "", "loud"])
def test_parse_log_level_unknown(raw):
    assert settings.parse_log_level(raw) is None
