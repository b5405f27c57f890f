#!/usr/bin/env python3
"""
passcraft CLI - Command-line interface for password and passphrase generation.
"""

import argparse
import logging
import sys

from passcraft.config import Config
from passcraft.core.constants import (
    CAPITALIZE_POSITIONS,
    INSERT_POSITIONS,
    WORD_SELECTORS,
)
from passcraft.core.entropy import default_source
from passcraft.core.errors import PasscraftError, SourceNotReady
from passcraft.core.log import setup_logging
from passcraft.core.params import GenerationOptions, build_params, flatten_params, parse_params
from passcraft.core.session import GeneratorSession
from passcraft.core.wordlist import WordSource


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passcraft",
        description="passcraft - secure password and passphrase generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                               # One 16-character password
  %(prog)s -l 24 --all-symbols -n 3      # Three 24-character passwords
  %(prog)s -p --wordlist words.txt       # Five-word passphrase
  %(prog)s -p -w 6 -s - --capitalize first --add-number
  %(prog)s --params "mode=passphrase&words=7&sep=space"
  %(prog)s --check 'correct horse battery staple'
        """
    )

    # Generation options
    gen_group = parser.add_argument_group('Generation')
    gen_group.add_argument("-p", "--passphrase", action="store_true",
                           help="Generate passphrases instead of passwords")
    gen_group.add_argument("-n", "--count", type=int, default=None,
                           help="Number of secrets (default: 1)")
    gen_group.add_argument("--params", metavar="QUERY",
                           help="Options as a query string (e.g. 'length=20&upper=0')")

    # Password options
    pw_group = parser.add_argument_group('Password')
    pw_group.add_argument("-l", "--length", type=int, default=None,
                          help="Password length, clamped to 8-128 (default: 16)")
    pw_group.add_argument("--no-lower", action="store_true",
                          help="Exclude lowercase letters")
    pw_group.add_argument("--no-upper", action="store_true",
                          help="Exclude uppercase letters")
    pw_group.add_argument("--no-numbers", action="store_true",
                          help="Exclude digits")
    pw_group.add_argument("--no-symbols", action="store_true",
                          help="Exclude symbols")
    pw_group.add_argument("--all-symbols", action="store_true",
                          help="Use all printable symbols instead of the simple set")

    # Passphrase options
    pp_group = parser.add_argument_group('Passphrase')
    pp_group.add_argument("-w", "--words", type=int, default=None,
                          help="Number of words, clamped to 1-12 (default: 5)")
    pp_group.add_argument("-s", "--sep", default=None,
                          help="Separator: literal text, 'space' or 'none' (default: .)")
    pp_group.add_argument("--capitalize", nargs="?", const="all", choices=CAPITALIZE_POSITIONS,
                          help="Capitalize first, last or all words (default: all)")
    pp_group.add_argument("--add-number", action="store_true",
                          help="Add a number (0-99)")
    pp_group.add_argument("--number-pos", choices=INSERT_POSITIONS,
                          help="Number position within words, or random = appended")
    pp_group.add_argument("--number-word", choices=WORD_SELECTORS,
                          help="Word receiving the number")
    pp_group.add_argument("--add-symbol", action="store_true",
                          help="Add a symbol")
    pp_group.add_argument("--symbol-pos", choices=INSERT_POSITIONS,
                          help="Symbol position within words, or random = appended")
    pp_group.add_argument("--symbol-word", choices=WORD_SELECTORS,
                          help="Word receiving the symbol")
    pp_group.add_argument("--wordlist", metavar="FILE",
                          help="Word list file (or env PASSCRAFT_WORDLIST)")

    # Strength
    strength_group = parser.add_argument_group('Strength')
    strength_group.add_argument("--check", metavar="SECRET",
                                help="Estimate the strength of an existing secret")

    # Output options
    out_group = parser.add_argument_group('Output')
    out_group.add_argument("-q", "--quiet", action="store_true",
                           help="Quiet mode (secrets only)")
    out_group.add_argument("--print-params", action="store_true",
                           help="Print the resolved options as a query string and exit")
    out_group.add_argument("-v", "--verbose", action="store_true",
                           help="Debug logging to stderr")
    out_group.add_argument("--log-file", metavar="FILE",
                           help="Also write logs to FILE")
    out_group.add_argument("--config", metavar="FILE",
                           help="Config file (default: ~/.passcraft/config.json)")
    out_group.add_argument("--save-config", action="store_true",
                           help="Save the resolved options as new defaults")

    return parser


def resolve_options(args, config: Config) -> GenerationOptions:
    """
    Merge config defaults, --params and explicit flags (in that order).
    """
    params = config.to_params()
    if args.params:
        params.update(flatten_params(args.params))

    if args.passphrase:
        params["mode"] = "passphrase"
    if args.quiet:
        params["bare"] = "1"

    if args.length is not None:
        params["length"] = str(args.length)
    if args.no_lower:
        params["lower"] = "0"
    if args.no_upper:
        params["upper"] = "0"
    if args.no_numbers:
        params["numbers"] = "0"
    if args.no_symbols:
        params["simpleSymbols"] = "0"
        params["allSymbols"] = "0"
    elif args.all_symbols:
        params["allSymbols"] = "1"

    if args.words is not None:
        params["words"] = str(args.words)
    if args.sep is not None:
        params["sep"] = args.sep or "none"
    if args.capitalize:
        params["capitalize"] = "1"
        params["capitalizePos"] = args.capitalize
    if args.add_number or args.number_pos or args.number_word:
        params["addNumber"] = "1"
    if args.number_pos:
        params["numberPos"] = args.number_pos
    if args.number_word:
        params["numberWord"] = args.number_word
    if args.add_symbol or args.symbol_pos or args.symbol_word:
        params["addSymbol"] = "1"
    if args.symbol_pos:
        params["symbolPos"] = args.symbol_pos
    if args.symbol_word:
        params["symbolWord"] = args.symbol_word

    return parse_params(params)


def _load_word_source(args, config: Config) -> WordSource:
    path = args.wordlist or config.wordlist_path()
    if not path:
        raise SourceNotReady(
            "No word list configured. Use --wordlist FILE or set PASSCRAFT_WORDLIST."
        )
    return WordSource.from_file(path)


def _handle_check(args) -> int:
    """Handle --check command."""
    report = GeneratorSession.check(args.check)
    if args.quiet:
        print(report.entropy_bits)
    else:
        print(f"Strength: {report.label} ({report.entropy_bits} bits)")
    return 0


def _handle_generation(args, options: GenerationOptions, config: Config) -> int:
    """Handle normal password/passphrase generation."""
    quiet = options.bare
    count = args.count if args.count is not None else config.get("password", "count") or 1
    count = max(1, count)

    word_source = _load_word_source(args, config) if options.mode == "passphrase" else None
    session = GeneratorSession(word_source)

    if not quiet:
        print("=" * 60)
        print("PASSCRAFT - SECURE PASSWORD GENERATOR")
        print("=" * 60)
        if options.mode == "passphrase":
            print(f"Passphrases ({options.words} words, {len(word_source):,}-word list):")
        else:
            classes = ','.join(options.password.classes()) or 'none'
            print(f"Passwords ({options.password.length} chars, classes={classes}):")
        print("-" * 60)

    for _ in range(count):
        result = session.generate(options)
        if quiet:
            print(result.secret)
        else:
            print(f"  {result.secret}")
            print(f"    {result.feedback}")

    if not quiet:
        print("=" * 60)
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = Config(args.config)

    try:
        if args.verbose:
            setup_logging(logging.DEBUG, args.log_file)
        elif args.log_file:
            setup_logging(config.get("logging", "level") or logging.WARNING, args.log_file)

        if args.check is not None:
            return _handle_check(args)

        options = resolve_options(args, config)

        if args.save_config:
            config.update_from_options(options)
            if args.wordlist:
                config.set("passphrase", "wordlist", args.wordlist)
            config.save()
            if not options.bare:
                print(f"Config saved: {config.path}")

        if args.print_params:
            print(build_params(options))
            return 0

        return _handle_generation(args, options, config)

    except PasscraftError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nUser interrupt", file=sys.stderr)
        return 130
    finally:
        default_source().close()


if __name__ == "__main__":
    sys.exit(main())
