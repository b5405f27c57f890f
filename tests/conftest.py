"""Shared fixtures for passcraft tests."""

import logging

import pytest

from passcraft.core.entropy import SecureRandom

WORDS = [
    "alpha", "bravo", "charlie", "delta", "echo", "foxtrot",
    "golf", "hotel", "india", "juliet", "kilo", "lima",
]


class ScriptedRandom(SecureRandom):
    """SecureRandom replacement returning a fixed sequence of draws."""

    def __init__(self, values):
        super().__init__()
        self.values = list(values)
        self.calls = []

    def uniform_int(self, max_exclusive: int) -> int:
        self.calls.append(max_exclusive)
        if not self.values:
            raise AssertionError(f"scripted draws exhausted (max_exclusive={max_exclusive})")
        value = self.values.pop(0)
        assert 0 <= value < max_exclusive, (value, max_exclusive)
        return value


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def wordlist_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "config.json"


@pytest.fixture(autouse=True)
def _no_wordlist_env(monkeypatch):
    monkeypatch.delenv("PASSCRAFT_WORDLIST", raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger = logging.getLogger("passcraft")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
