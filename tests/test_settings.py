from pathlib import Path
import sys

# Add repository root to sys.path so tests can import local modules without installation.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import json
import logging
import os

import pytest

from battleship import DEFAULT_RULES, GameState
from infra.logger import configure_logging
from infra.settings import Settings, load_settings


def test_defaults_from_empty_environment():
    settings = load_settings(env={})

    assert settings == Settings()
    assert settings.rules() == DEFAULT_RULES
    assert settings.codec().base_url == "www.shinobicontrols.com/battleship"


def test_values_from_environment():
    settings = load_settings(env={
        "BATTLESHIP_BASE_URL": "https://example.test/b",
        "BATTLESHIP_TOTAL_SHIPS": "3",
        "BATTLESHIP_INCORRECT_ATTEMPTS": "4",
        "BATTLESHIP_LOG_LEVEL": "debug",
        "BATTLESHIP_LOG_JSON": "true",
        "BATTLESHIP_LOG_FILE": "/tmp/battleship.log",
    })

    rules = settings.rules()
    assert rules.total_ship_count == 3
    assert rules.incorrect_attempts_allowed == 4
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True
    assert settings.log_file == Path("/tmp/battleship.log")

    url = settings.codec().encode(GameState(frozenset({1, 2, 3})))
    assert url.startswith("https://example.test/b?")


@pytest.mark.parametrize("value", ["two", "0", "-1"])
def test_invalid_numbers_rejected(value):
    with pytest.raises(ValueError):
        load_settings(env={"BATTLESHIP_TOTAL_SHIPS": value})


def test_env_file_is_loaded(tmp_path, monkeypatch):
    monkeypatch.delenv("BATTLESHIP_INCORRECT_ATTEMPTS", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("BATTLESHIP_INCORRECT_ATTEMPTS=5\n", encoding="utf-8")

    try:
        settings = load_settings(env_file=env_file)
        assert settings.incorrect_attempts_allowed == 5
    finally:
        os.environ.pop("BATTLESHIP_INCORRECT_ATTEMPTS", None)


def test_configure_logging_writes_file(tmp_path):
    logfile = tmp_path / "logs" / "battleship.log"
    configure_logging("DEBUG", logfile=logfile)

    logging.getLogger("battleship.test").debug("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "hello" in logfile.read_text(encoding="utf-8")
    configure_logging("INFO")


def test_json_logging_escapes_quotes_and_newlines(tmp_path):
    logfile = tmp_path / "battleship.jsonl"
    configure_logging("INFO", json=True, logfile=logfile)

    logging.getLogger("battleship.test").info('ship "alpha"\nsunk')
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = logfile.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["msg"] == 'ship "alpha"\nsunk'
    assert entry["level"] == "INFO"
    assert entry["logger"] == "battleship.test"
    configure_logging("INFO")
