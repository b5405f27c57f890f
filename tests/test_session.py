"""Tests for the generation session."""

import pytest

from passcraft.core.errors import EmptySelection, SourceNotReady
from passcraft.core.generator import PasswordSpec
from passcraft.core.params import GenerationOptions, parse_params
from passcraft.core.passphrase import PassphraseFormat
from passcraft.core.session import GeneratorSession
from passcraft.core.wordlist import WordSource

from conftest import WORDS


@pytest.fixture
def session(wordlist_file):
    return GeneratorSession(WordSource.from_file(wordlist_file))


def test_password_generation_reports_strength(session):
    result = session.generate(parse_params("length=20"))
    assert len(result.secret) == 20
    assert result.strength.label == "Strong"
    assert result.feedback == f"Strength: Strong ({result.strength.entropy_bits} bits)"
    assert session.last is result


def test_passphrase_generation(session):
    result = session.generate(parse_params("mode=passphrase&words=3&sep=-"))
    words = result.secret.split("-")
    assert len(words) == 3
    assert set(words) <= set(WORDS)
    assert result.strength.entropy_bits == 38
    assert result.strength.label == "Weak"


def test_failed_generation_keeps_previous_secret(session):
    good = session.generate(parse_params("length=12"))
    bad = GenerationOptions(mode="password", password=PasswordSpec(length=12))
    with pytest.raises(EmptySelection):
        session.generate(bad)
    assert session.last is good


def test_passphrase_without_word_list():
    session = GeneratorSession()
    previous = session.generate(parse_params(""))
    with pytest.raises(SourceNotReady):
        session.generate(parse_params("mode=passphrase"))
    assert session.last is previous


def test_update_passphrase_keeps_words(session):
    first = session.generate(parse_params("mode=passphrase&words=4&sep=space"))
    words = first.secret.split(" ")

    grown = session.update_passphrase(6, PassphraseFormat(separator="space"))
    assert grown.secret.split(" ")[:4] == words
    assert grown.strength.entropy_bits == 77

    shrunk = session.update_passphrase(2, PassphraseFormat(separator="-"))
    assert shrunk.secret == "-".join(words[:2])
    assert session.last is shrunk


def test_update_passphrase_before_generate(session):
    assert session.update_passphrase(5, PassphraseFormat()) is None
    assert session.last is None


def test_check_strips_whitespace():
    assert GeneratorSession.check("  password \n").entropy_bits == 37


def test_sessions_do_not_share_draws(wordlist_file):
    source = WordSource.from_file(wordlist_file)
    a = GeneratorSession(source)
    b = GeneratorSession(source)
    a.generate(parse_params("mode=passphrase&words=2"))
    assert b.update_passphrase(2, PassphraseFormat()) is None
