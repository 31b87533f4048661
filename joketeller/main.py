"""CLI entry point for joketeller.

Usage:
    joketeller joke [options]
    joketeller url [options]
    python -m joketeller.main joke -c programming -b nsfw -a 3
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import api
from .config import Settings, load_settings
from .errors import ApiFailure, JokeError, ValidationError
from .options import BlacklistFlag, Category, JokeType, Language, MAX_AMOUNT, parse_option
from .responses import JokeResult
from .selection import Selection

logger = logging.getLogger(__name__)


def _choices(enum_cls) -> List[str]:
    return [m.value.lower() for m in enum_cls]


def _add_selection_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("-c", "--category", action="append", default=[], type=str.lower,
                   choices=_choices(Category), help="Joke category (repeatable, default: any)")
    p.add_argument("-b", "--blacklist", action="append", default=[], type=str.lower,
                   choices=_choices(BlacklistFlag), help="Flag to exclude (repeatable)")
    p.add_argument("-t", "--type", type=str.lower, choices=_choices(JokeType), help="Joke type")
    p.add_argument("-l", "--lang", type=str.lower, choices=_choices(Language), help="Language code")
    p.add_argument("-i", "--id-range", help="Single ID ('42') or range ('0-100')")
    p.add_argument("-s", "--search", help="Only jokes containing this text")
    p.add_argument("-a", "--amount", type=int, help=f"Number of jokes (1-{MAX_AMOUNT})")
    p.add_argument("-m", "--safe-mode", action="store_true",
                   help="Only safe jokes (overrides --blacklist)")
    p.add_argument("-v", "--verbose", action="store_true", help="INFO logging")
    p.add_argument("-vv", "--debug", action="store_true", help="DEBUG logging")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="joketeller",
        description="Fetch jokes from JokeAPI (https://jokeapi.dev).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_joke = sub.add_parser("joke", help="Fetch and print jokes")
    _add_selection_args(p_joke)

    p_url = sub.add_parser("url", help="Print the request URL without fetching")
    _add_selection_args(p_url)

    return parser


def setup_logging(settings: Settings, verbose: bool = False, debug: bool = False) -> None:
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.getLevelName(settings.log_level)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _parse_id_range(text: str) -> tuple:
    lower, sep, upper = text.partition("-")
    try:
        if not sep:
            return int(lower), None
        return (int(lower) if lower else None), int(upper)
    except ValueError:
        raise ValidationError(f"Invalid ID range {text!r}, expected 'N' or 'A-B'") from None


def selection_from_args(args: argparse.Namespace) -> Selection:
    """Translate parsed CLI options into a Selection.

    Raises:
        ValidationError: On a malformed ID range or an out-of-range amount.
    """
    sel = Selection()
    sel.add_categories(parse_option(Category, c) for c in args.category)
    sel.add_blacklist_flags(parse_option(BlacklistFlag, b) for b in args.blacklist)
    if args.type:
        sel.set_joke_type(parse_option(JokeType, args.type))
    if args.lang:
        sel.set_language(parse_option(Language, args.lang))
    if args.id_range:
        sel.set_id_range(*_parse_id_range(args.id_range))
    if args.search:
        sel.set_search_string(args.search)
    if args.amount is not None:
        sel.set_amount(args.amount)
    if args.safe_mode:
        sel.set_safe_mode(True)
    return sel


def _print_joke(joke: JokeResult) -> None:
    if joke.type is JokeType.TWOPART:
        print(f"- {joke.setup}")
        print(f"- {joke.delivery}")
    else:
        print(joke.joke)


def _cmd_joke(joker: api.Joker) -> int:
    jokes = joker.get_jokes()
    if len(jokes) == 1:
        _print_joke(jokes[0])
        return 0
    for i, joke in enumerate(jokes, start=1):
        print(f"Joke #{i}:")
        _print_joke(joke)
        print()
    return 0


def _cmd_url(joker: api.Joker) -> int:
    print(joker.build_url())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    setup_logging(settings, verbose=args.verbose, debug=args.debug)

    try:
        joker = api.Joker(selection_from_args(args), settings=settings)
        if args.command == "joke":
            return _cmd_joke(joker)
        if args.command == "url":
            return _cmd_url(joker)
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except ApiFailure as e:
        logger.error("JokeAPI refused the request: %s", e)
        for cause in e.caused_by:
            logger.error("  caused by: %s", cause)
        return 1
    except JokeError as e:
        logger.error("Failed to get joke: %s", e)
        return 1

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
