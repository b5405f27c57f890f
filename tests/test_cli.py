"""Tests for the command-line interface."""

import json
import string

import pytest

from passcraft.cli import build_parser, main, resolve_options
from passcraft.config import Config

from conftest import WORDS


@pytest.fixture
def run(config_file, capsys):
    def _run(*argv):
        code = main(["--config", str(config_file), *argv])
        out, err = capsys.readouterr()
        return code, out, err
    return _run


def test_default_quiet_password(run):
    code, out, err = run("-q")
    assert code == 0
    lines = out.splitlines()
    assert len(lines) == 1
    assert len(lines[0]) == 16
    assert err == ""


def test_count_and_length(run):
    code, out, _ = run("-q", "-l", "20", "-n", "3")
    assert code == 0
    lines = out.splitlines()
    assert len(lines) == 3
    assert all(len(line) == 20 for line in lines)


def test_length_is_clamped(run):
    _, out, _ = run("-q", "-l", "3")
    assert len(out.strip()) == 8


def test_lowercase_only(run):
    _, out, _ = run("-q", "--no-upper", "--no-numbers", "--no-symbols", "-l", "12")
    assert set(out.strip()) <= set(string.ascii_lowercase)


def test_no_classes_is_an_error(run):
    code, out, err = run("-q", "--no-lower", "--no-upper", "--no-numbers", "--no-symbols")
    assert code == 1
    assert out == ""
    assert "ERROR: Select at least one character set" in err


def test_verbose_output_shows_strength(run):
    code, out, _ = run("-l", "16")
    assert code == 0
    assert "PASSCRAFT" in out
    assert "Strength: " in out
    assert "bits)" in out


def test_passphrase_with_wordlist(run, wordlist_file):
    code, out, _ = run("-q", "-p", "-w", "4", "-s", "-", "--wordlist", str(wordlist_file))
    assert code == 0
    words = out.strip().split("-")
    assert len(words) == 4
    assert set(words) <= set(WORDS)


def test_passphrase_decorations(run, wordlist_file):
    code, out, _ = run(
        "-q", "-p", "-w", "3", "-s", "space", "--capitalize", "first",
        "--number-pos", "end", "--number-word", "last",
        "--wordlist", str(wordlist_file),
    )
    assert code == 0
    words = out.strip().split(" ")
    assert len(words) == 3
    assert words[0][0].isupper()
    assert words[2].rstrip(string.digits).lower() in WORDS
    assert words[2][-1].isdigit()


def test_passphrase_from_env_wordlist(run, wordlist_file, monkeypatch):
    monkeypatch.setenv("PASSCRAFT_WORDLIST", str(wordlist_file))
    code, out, _ = run("-q", "--params", "mode=passphrase&words=2&sep=none")
    assert code == 0
    assert out.strip()[0].islower()


def test_passphrase_without_wordlist_fails(run):
    code, out, err = run("-q", "-p")
    assert code == 1
    assert out == ""
    assert "No word list configured" in err


def test_missing_wordlist_file_fails(run, tmp_path):
    code, _, err = run("-q", "-p", "--wordlist", str(tmp_path / "nope.txt"))
    assert code == 1
    assert "Failed to load word list" in err


def test_check(run):
    code, out, _ = run("--check", "password")
    assert code == 0
    assert out.strip() == "Strength: Weak (37 bits)"


def test_check_quiet_prints_bits(run):
    _, out, _ = run("-q", "--check", "abcd1234efgh5678")
    assert out.strip() == "82"


def test_print_params(run):
    code, out, _ = run("--print-params", "-p", "-w", "6", "-s", "space", "--add-symbol")
    assert code == 0
    assert out.strip() == (
        "mode=passphrase&words=6&sep=space&capitalize=0&capitalizePos=all"
        "&addNumber=0&numberPos=random&numberWord=random"
        "&addSymbol=1&symbolPos=random&symbolWord=random"
    )


def test_flags_override_params(config_file):
    args = build_parser().parse_args(["--params", "length=30&upper=0", "-l", "40"])
    options = resolve_options(args, Config(config_file))
    assert options.password.length == 40
    assert options.password.use_upper is False


def test_params_override_config(config_file):
    config_file.write_text(json.dumps({"password": {"length": 24, "numbers": False}}))
    args = build_parser().parse_args(["--params", "length=30"])
    options = resolve_options(args, Config(config_file))
    assert options.password.length == 30
    assert options.password.use_numbers is False


def test_all_symbols_flag(config_file):
    args = build_parser().parse_args(["--all-symbols"])
    spec = resolve_options(args, Config(config_file)).password
    assert spec.use_all_symbols is True
    assert spec.use_simple_symbols is False


def test_save_config(run, config_file):
    code, out, _ = run("--save-config", "-l", "28", "-p", "-w", "7", "--print-params")
    assert code == 0
    assert "Config saved" in out
    saved = json.loads(config_file.read_text())
    assert saved["password"]["length"] == 28
    assert saved["passphrase"]["words"] == 7


def test_log_file(run, tmp_path, wordlist_file):
    log_file = tmp_path / "passcraft.log"
    code, out, _ = run("-q", "-v", "--log-file", str(log_file), "-p", "--wordlist", str(wordlist_file))
    assert code == 0
    secret = out.strip()
    text = log_file.read_text()
    assert "Loaded 12 words" in text
    assert secret not in text


def test_unknown_config_log_level_is_reported(run, config_file, tmp_path):
    config_file.write_text(json.dumps({"logging": {"level": "loud"}}), encoding="utf-8")
    code, out, err = run("-q", "--log-file", str(tmp_path / "passcraft.log"))
    assert code == 1
    assert out == ""
    assert "Unknown log level 'loud'" in err


def test_config_log_level_name_applies_to_log_file(run, config_file, tmp_path, wordlist_file):
    config_file.write_text(json.dumps({"logging": {"level": "info"}}), encoding="utf-8")
    log_file = tmp_path / "passcraft.log"
    code, _, _ = run("-q", "--log-file", str(log_file), "-p", "--wordlist", str(wordlist_file))
    assert code == 0
    assert "INFO: Loaded 12 words" in log_file.read_text()
