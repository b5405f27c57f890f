"""
passcraft Params - Flat string-keyed option encoding (query strings).

Every generation request can be written as, and read back from, a query
string such as ``mode=passphrase&words=6&sep=-&capitalize=1``. Missing keys
take documented defaults and numeric fields are clamped rather than rejected.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Sequence, Union
from urllib.parse import parse_qs, urlencode

from passcraft.core.constants import (
    CAPITALIZE_POSITIONS,
    INSERT_POSITIONS,
    PASSPHRASE_WORDS_RANGE,
    PASSWORD_LENGTH_RANGE,
    WORD_SELECTORS,
)
from passcraft.core.generator import PasswordSpec
from passcraft.core.passphrase import PassphraseFormat

DEFAULT_PARAMS = {
    "mode": "password",
    "bare": False,
    # Password options
    "length": 16,
    "lower": True,
    "upper": True,
    "numbers": True,
    "simpleSymbols": True,
    "allSymbols": False,
    # Passphrase options
    "words": 5,
    "sep": ".",
    "capitalize": False,
    "capitalizePos": "all",
    "addNumber": False,
    "numberPos": "random",
    "numberWord": "random",
    "addSymbol": False,
    "symbolPos": "random",
    "symbolWord": "random",
}

MODES = ("password", "passphrase")
MODE_ALIASES = {"phrase": "passphrase"}
SEPARATOR_ALIASES = {"hyphen": "-"}

_INT_PREFIX = re.compile(r'\s*([+-]?\d+)')

ParamSource = Union[str, Mapping[str, Union[str, Sequence[str]]]]


@dataclass(frozen=True)
class GenerationOptions:
    """A decoded generation request for either mode."""
    mode: str = "password"
    password: PasswordSpec = field(default_factory=lambda: PasswordSpec(
        length=16, use_lower=True, use_upper=True, use_numbers=True,
        use_simple_symbols=True,
    ))
    words: int = 5
    format: PassphraseFormat = field(default_factory=PassphraseFormat)
    bare: bool = False


def parse_boolean(value: Optional[str], default: bool) -> bool:
    """'1', 'true' and 'yes' (any case) are true; any other present value is false."""
    if value is None:
        return default
    return value.lower() in ('1', 'true', 'yes')


def parse_int(value: Optional[str], default: int) -> int:
    """Parse a leading integer; missing, unparsable or zero values give default."""
    if value is None:
        return default
    match = _INT_PREFIX.match(value)
    if not match:
        return default
    return int(match.group(1)) or default


def clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


def _choice(value: Optional[str], allowed: Sequence[str], default: str) -> str:
    return value if value in allowed else default


def flatten_params(source: ParamSource) -> Dict[str, str]:
    """Flatten a query string or mapping into single string values per key."""
    if isinstance(source, str):
        parsed = parse_qs(source.lstrip('?'), keep_blank_values=True)
        return {key: values[0] for key, values in parsed.items()}

    flat = {}
    for key, value in source.items():
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = value[0]
        flat[key] = str(value)
    return flat


def parse_params(source: ParamSource) -> GenerationOptions:
    """
    Decode a query string (or mapping) into GenerationOptions.

    Args:
        source: Query string, with or without a leading '?', or a mapping of
                keys to a string or a list of strings

    Returns:
        Decoded options with defaults applied and numeric fields clamped
    """
    params = flatten_params(source)
    get = params.get
    d = DEFAULT_PARAMS

    mode = get("mode") or d["mode"]
    mode = MODE_ALIASES.get(mode, mode)
    if mode not in MODES:
        mode = d["mode"]

    all_symbols = parse_boolean(get("allSymbols"), d["allSymbols"])
    password = PasswordSpec(
        length=clamp(parse_int(get("length"), d["length"]), *PASSWORD_LENGTH_RANGE),
        use_lower=parse_boolean(get("lower"), d["lower"]),
        use_upper=parse_boolean(get("upper"), d["upper"]),
        use_numbers=parse_boolean(get("numbers"), d["numbers"]),
        use_simple_symbols=parse_boolean(get("simpleSymbols"), d["simpleSymbols"]) and not all_symbols,
        use_all_symbols=all_symbols,
    )

    separator = get("sep") or d["sep"]
    fmt = PassphraseFormat(
        separator=SEPARATOR_ALIASES.get(separator, separator),
        capitalize=parse_boolean(get("capitalize"), d["capitalize"]),
        capitalize_position=_choice(get("capitalizePos"), CAPITALIZE_POSITIONS, d["capitalizePos"]),
        add_number=parse_boolean(get("addNumber"), d["addNumber"]),
        number_position=_choice(get("numberPos"), INSERT_POSITIONS, d["numberPos"]),
        number_word=_choice(get("numberWord"), WORD_SELECTORS, d["numberWord"]),
        add_symbol=parse_boolean(get("addSymbol"), d["addSymbol"]),
        symbol_position=_choice(get("symbolPos"), INSERT_POSITIONS, d["symbolPos"]),
        symbol_word=_choice(get("symbolWord"), WORD_SELECTORS, d["symbolWord"]),
    )

    return GenerationOptions(
        mode=mode,
        password=password,
        words=clamp(parse_int(get("words"), d["words"]), *PASSPHRASE_WORDS_RANGE),
        format=fmt,
        bare=parse_boolean(get("bare"), d["bare"]),
    )


def _flag(value: bool) -> str:
    return '1' if value else '0'


def build_params(options: GenerationOptions) -> str:
    """
    Encode the fields of the options' mode as a query string (no leading '?').
    """
    items = [("mode", options.mode)]

    if options.mode == "password":
        spec = options.password
        items += [
            ("length", str(spec.length)),
            ("lower", _flag(spec.use_lower)),
            ("upper", _flag(spec.use_upper)),
            ("numbers", _flag(spec.use_numbers)),
            ("simpleSymbols", _flag(spec.use_simple_symbols and not spec.use_all_symbols)),
            ("allSymbols", _flag(spec.use_all_symbols)),
        ]
    else:
        fmt = options.format
        items += [
            ("words", str(options.words)),
            # empty sep decodes as the default, so send the sentinel
            ("sep", fmt.separator or "none"),
            ("capitalize", _flag(fmt.capitalize)),
            ("capitalizePos", fmt.capitalize_position),
            ("addNumber", _flag(fmt.add_number)),
            ("numberPos", fmt.number_position),
            ("numberWord", fmt.number_word),
            ("addSymbol", _flag(fmt.add_symbol)),
            ("symbolPos", fmt.symbol_position),
            ("symbolWord", fmt.symbol_word),
        ]

    if options.bare:
        items.append(("bare", "1"))

    return urlencode(items)
