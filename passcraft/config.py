"""
passcraft persistent configuration.

Loads/saves default generation options from ~/.passcraft/config.json.
Secrets themselves are never written here.
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Optional

from passcraft.core.log import get_logger

logger = get_logger('config')


DEFAULTS = {
    "password": {
        "length": 16,
        "lower": True,
        "upper": True,
        "numbers": True,
        "simple_symbols": True,
        "all_symbols": False,
        "count": 1,
    },
    "passphrase": {
        "words": 5,
        "separator": ".",
        "capitalize": False,
        "capitalize_position": "all",
        "add_number": False,
        "number_position": "random",
        "number_word": "random",
        "add_symbol": False,
        "symbol_position": "random",
        "symbol_word": "random",
        "wordlist": None,
    },
    "logging": {
        "level": "WARNING",
    },
}

CONFIG_DIR = Path.home() / ".passcraft"
CONFIG_FILE = CONFIG_DIR / "config.json"
WORDLIST_ENV = "PASSCRAFT_WORDLIST"

# Config keys (section, key) -> query-string key
_QUERY_KEYS = {
    ("password", "length"): "length",
    ("password", "lower"): "lower",
    ("password", "upper"): "upper",
    ("password", "numbers"): "numbers",
    ("password", "simple_symbols"): "simpleSymbols",
    ("password", "all_symbols"): "allSymbols",
    ("passphrase", "words"): "words",
    ("passphrase", "separator"): "sep",
    ("passphrase", "capitalize"): "capitalize",
    ("passphrase", "capitalize_position"): "capitalizePos",
    ("passphrase", "add_number"): "addNumber",
    ("passphrase", "number_position"): "numberPos",
    ("passphrase", "number_word"): "numberWord",
    ("passphrase", "add_symbol"): "addSymbol",
    ("passphrase", "symbol_position"): "symbolPos",
    ("passphrase", "symbol_word"): "symbolWord",
}


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge override into base, returning a new dict."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Persistent configuration with deep-merge defaults."""

    def __init__(self, config_file: Optional[Path] = None):
        self._file = Path(config_file) if config_file else CONFIG_FILE
        self._data = self._load()

    @property
    def path(self) -> Path:
        return self._file

    def _load(self) -> dict:
        """Load config from file, deep-merged with defaults."""
        if self._file.exists():
            try:
                with open(self._file, 'r') as f:
                    user_data = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self._file, e)
            else:
                if isinstance(user_data, dict):
                    return _deep_merge(DEFAULTS, user_data)
                logger.warning("Ignoring config %s: top level is not an object", self._file)
        return copy.deepcopy(DEFAULTS)

    def get(self, section: str, key: str) -> Any:
        """Get a config value."""
        return self._data.get(section, {}).get(key)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a config value."""
        if section not in self._data:
            self._data[section] = {}
        self._data[section][key] = value

    def save(self) -> None:
        """Save config to file."""
        self._file.parent.mkdir(parents=True, exist_ok=True)
        with open(self._file, 'w') as f:
            json.dump(self._data, f, indent=2)
        logger.info("Saved config to %s", self._file)

    def wordlist_path(self) -> Optional[str]:
        """Word list path; the PASSCRAFT_WORDLIST environment variable wins."""
        return os.environ.get(WORDLIST_ENV) or self.get("passphrase", "wordlist")

    def to_params(self) -> dict:
        """Stored defaults as query-string keys and string values."""
        params = {}
        for (section, key), name in _QUERY_KEYS.items():
            value = self.get(section, key)
            if value is None:
                continue
            if isinstance(value, bool):
                value = "1" if value else "0"
            elif name == "sep" and value == "":
                value = "none"
            params[name] = str(value)
        return params

    def update_from_options(self, options) -> None:
        """Store decoded GenerationOptions as the new defaults."""
        spec = options.password
        fmt = options.format
        self.set("password", "length", spec.length)
        self.set("password", "lower", spec.use_lower)
        self.set("password", "upper", spec.use_upper)
        self.set("password", "numbers", spec.use_numbers)
        self.set("password", "simple_symbols", spec.use_simple_symbols)
        self.set("password", "all_symbols", spec.use_all_symbols)
        self.set("passphrase", "words", options.words)
        self.set("passphrase", "separator", fmt.separator)
        self.set("passphrase", "capitalize", fmt.capitalize)
        self.set("passphrase", "capitalize_position", fmt.capitalize_position)
        self.set("passphrase", "add_number", fmt.add_number)
        self.set("passphrase", "number_position", fmt.number_position)
        self.set("passphrase", "number_word", fmt.number_word)
        self.set("passphrase", "add_symbol", fmt.add_symbol)
        self.set("passphrase", "symbol_position", fmt.symbol_position)
        self.set("passphrase", "symbol_word", fmt.symbol_word)
