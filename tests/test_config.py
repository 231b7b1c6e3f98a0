"""Tests for configuration adapter."""

from datetime import timedelta
from pathlib import Path

import pytest

from mvg_home.adapters.config import AppConfig, ConnectionConfigurationLoader, parse_duration
from mvg_home.adapters.config.paths import default_cache_file, default_config_file
from mvg_home.domain.errors import ConfigurationError
from mvg_home.domain.models import DesiredConnection


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from the user's environment and .env files."""
    for name in ("CONFIG_FILE", "CACHE_FILE", "TIMEZONE", "LOG_LEVEL", "MVG_API_TIMEOUT"):
        monkeypatch.delenv(f"MVG_HOME_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


def write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "home.toml"
    path.write_text(content, encoding="utf-8")
    return path


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.mvg_api_base_url == "https://www.mvg.de/api/fib/v2/"
    assert config.mvg_api_timeout == 10
    assert config.timezone == "Europe/Berlin"
    assert config.log_level == "ERROR"
    assert config.config_path == default_config_file()
    assert config.cache_path == default_cache_file()


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("MVG_HOME_MVG_API_TIMEOUT", "3")
    monkeypatch.setenv("MVG_HOME_LOG_LEVEL", "debug")
    monkeypatch.setenv("MVG_HOME_CACHE_FILE", "/tmp/connections.json")

    config = AppConfig()

    assert config.mvg_api_timeout == 3
    assert config.log_level == "DEBUG"
    assert config.cache_path == Path("/tmp/connections.json")


def test_config_validates_timezone() -> None:
    """Given an unknown timezone, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="timezone must be an IANA timezone name"):
        AppConfig(timezone="Mars/Olympus_Mons")


def test_config_validates_log_level() -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig(log_level="chatty")


def test_default_paths_follow_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Given XDG variables on Linux, when resolving default paths, then they are used."""
    monkeypatch.setattr("platform.system", lambda: "Linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))

    assert default_config_file() == tmp_path / "config" / "de.swsnr.home" / "home.toml"
    assert default_cache_file() == tmp_path / "cache" / "de.swsnr.home" / "connections.json"


def test_config_parses_connections_from_toml(tmp_path: Path) -> None:
    """Given a valid TOML config file, when loading connections, then they are parsed in order."""
    path = write_config(
        tmp_path,
        """
[[connections]]
start = "Waldfriedhof"
destination = "Schwanthaler Höhe"
walk_to_start = "5m"

[[connections]]
start = "Harras"
destination = "Marienplatz"
walk_to_start = "12min"
ignore_starting_with = ["S20", 134]
""",
    )

    connections = ConnectionConfigurationLoader.load(AppConfig(config_file=str(path)))

    assert connections == [
        DesiredConnection(
            start="Waldfriedhof",
            destination="Schwanthaler Höhe",
            walk_to_start=timedelta(minutes=5),
        ),
        DesiredConnection(
            start="Harras",
            destination="Marienplatz",
            walk_to_start=timedelta(minutes=12),
            ignore_starting_with=frozenset({"S20", "134"}),
        ),
    ]


def test_config_without_connections_is_empty(tmp_path: Path) -> None:
    """Given a config file without connections, when loading, then no connections are returned."""
    path = write_config(tmp_path, "")

    assert ConnectionConfigurationLoader.load(AppConfig(config_file=str(path))) == []


def test_config_raises_error_when_file_not_found(tmp_path: Path) -> None:
    """Given a non-existent config file, when loading, then ConfigurationError is raised."""
    config = AppConfig(config_file=str(tmp_path / "nonexistent.toml"))

    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        config.get_connections_config()


def test_config_raises_error_on_invalid_toml(tmp_path: Path) -> None:
    """Given a file that is not TOML, when loading, then ConfigurationError is raised."""
    path = write_config(tmp_path, "[[connections]\nstart = ")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration"):
        AppConfig(config_file=str(path)).get_connections_config()


def test_config_raises_error_when_connections_is_not_a_list(tmp_path: Path) -> None:
    """Given connections as a single table, when loading, then ConfigurationError is raised."""
    path = write_config(tmp_path, '[connections]\nstart = "A"\n')

    with pytest.raises(ConfigurationError, match="must be a list"):
        AppConfig(config_file=str(path)).get_connections_config()


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ({"destination": "B", "walk_to_start": "5m"}, r"connections\[0\]\.start"),
        ({"start": "A", "destination": "", "walk_to_start": "5m"}, r"\.destination"),
        ({"start": "A", "destination": "B"}, r"walk_to_start must be a duration"),
        ({"start": "A", "destination": "B", "walk_to_start": "five"}, r"Invalid duration"),
        (
            {"start": "A", "destination": "B", "walk_to_start": "5m", "ignore_starting_with": "S2"},
            r"ignore_starting_with must be a list",
        ),
        (
            {"start": "A", "destination": "B", "walk_to_start": "5m", "ignore_starting_with": [True]},
            r"ignore_starting_with must contain line labels, got True",
        ),
        (
            {"start": "A", "destination": "B", "walk_to_start": "5m", "ignore_starting_with": [1.5]},
            r"ignore_starting_with must contain line labels, got 1.5",
        ),
        ("A to B", r"must be a table"),
    ],
)
def test_loader_rejects_invalid_connections(data: object, message: str) -> None:
    """Given an invalid connection table, when parsing, then ConfigurationError names the field."""
    with pytest.raises(ConfigurationError, match=message):
        ConnectionConfigurationLoader.parse(data)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("5m", timedelta(minutes=5)),
        ("5min", timedelta(minutes=5)),
        ("90s", timedelta(seconds=90)),
        ("1h 5m", timedelta(hours=1, minutes=5)),
        (" 2 minutes ", timedelta(minutes=2)),
        ("0s", timedelta(0)),
    ],
)
def test_parse_duration(text: str, expected: timedelta) -> None:
    """Given a human readable duration, when parsing, then the timedelta is returned."""
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["", "5", "m", "5 parsecs", "5m later", "-5m"])
def test_parse_duration_rejects_invalid_text(text: str) -> None:
    """Given invalid duration text, when parsing, then ValueError is raised."""
    with pytest.raises(ValueError):
        parse_duration(text)
