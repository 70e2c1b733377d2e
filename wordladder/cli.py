"""
Word Ladder CLI - find word ladders and explore word-ladder components.

Usage:
    wordladder words.txt cold warm      # shortest ladder from COLD to WARM
    wordladder words.txt cold           # explore the component of COLD
    wordladder words.msgpack cold warm --json

The mode is picked by the number of positional arguments: three for a
ladder, two for an exploration. Query words have their ASCII
letters uppercased; dictionary entries are used exactly as stored.

Exit codes:
    0  success (including "No word ladder found.")
    1  wrong number of arguments
    2  dictionary file unreadable
    3  begin or end word not in dictionary
    4  begin and end words differ in length
"""

from __future__ import annotations

import argparse
import json
import logging
import string
import sys

from wordladder.config import EXIT_OK, LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL
from wordladder.data.loader import load_dictionary
from wordladder.errors import ConfigurationError, PreconditionError, WordLadderError
from wordladder.search import ComponentExplorer, ShortestPathSearch, format_path
from wordladder.search.results import ComponentResult, LadderResult

logger = logging.getLogger(__name__)

LADDER_ARGS = 3
EXPLORE_ARGS = 2

# Case mapping for query words: ASCII letters only
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with argparse's code 2."""

    def error(self, message: str):
        raise ConfigurationError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="wordladder",
        description="Find word ladders and explore word-ladder components",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "positional",
        nargs="*",
        metavar="ARG",
        help="Dictionary file, begin word and optional end word",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def parse_args(
    argv: list[str] | None = None, parser: ArgumentParser | None = None
) -> argparse.Namespace:
    """
    Parse command line arguments.

    Raises:
        ConfigurationError: If options are malformed or the positional
            argument count matches neither mode
    """
    parser = parser or build_parser()
    args = parser.parse_intermixed_args(argv)
    if len(args.positional) not in (LADDER_ARGS, EXPLORE_ARGS):
        raise ConfigurationError("Invalid number of arguments.")
    return args


def to_upper(word: str) -> str:
    """Uppercase ASCII letters, leaving every other character as is."""
    return word.translate(_ASCII_UPPER)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVEL,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def print_ladder(result: LadderResult, as_json: bool = False) -> None:
    if as_json:
        print(json.dumps(result.to_dict()))
    elif result.found:
        print(format_path(result.path))
    else:
        print("No word ladder found.")


def print_component(result: ComponentResult, as_json: bool = False) -> None:
    if as_json:
        print(json.dumps(result.to_dict()))
        return
    print(f"Connected component of {result.start} has {result.size} elements.")
    print(
        f"A longest path starting from {result.start}: "
        f"{format_path(result.longest_path)} is of length {result.length}"
    )


def ladder(dictionary_path: str, begin: str, end: str, as_json: bool = False) -> int:
    """Ladder mode: print a shortest ladder from begin to end."""
    words = load_dictionary(dictionary_path)
    result = ShortestPathSearch(words).run(to_upper(begin), to_upper(end))
    print_ladder(result, as_json)
    return EXIT_OK


def explore(dictionary_path: str, begin: str, as_json: bool = False) -> int:
    """Explore mode: print the component size and a longest BFS path."""
    words = load_dictionary(dictionary_path)
    result = ComponentExplorer(words).run(to_upper(begin))
    print_component(result, as_json)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    try:
        args = parse_args(argv, parser)
    except ConfigurationError as e:
        print(e.message, file=sys.stderr)
        parser.print_usage(sys.stderr)
        return e.exit_code

    setup_logging(args.verbose)

    try:
        if len(args.positional) == LADDER_ARGS:
            return ladder(*args.positional, as_json=args.json)
        return explore(*args.positional, as_json=args.json)
    except PreconditionError as e:
        # User-facing query problems go to stdout
        print(e.message)
        return e.exit_code
    except WordLadderError as e:
        print(e.message, file=sys.stderr)
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
