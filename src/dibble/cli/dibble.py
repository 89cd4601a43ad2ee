#!/usr/bin/env python3
"""
dibble - Quick and local word definitions.

Looks up a word in the locally installed dictionary shards and prints its
definition. Shards are searched in ./dict, the per-user data directory and
/usr/share/dibble/dict, in that order.

Exit status:
  0  definition printed, or the word is not in the dictionary
  1  invalid word, missing dictionary file or unreadable dictionary file
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console

from dibble import __version__
from dibble.errors import DibbleError
from dibble.loader import load_shard, lookup
from dibble.locator import (
    APP,
    VENDOR,
    is_valid_word,
    read_shard,
    resolve_data_root,
    search_roots,
    shard_path,
)
from dibble.render import make_console, render_definition, render_invalid, render_not_found

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def run(word: str, show_examples: bool, roots: Sequence[Path], console: Console) -> int:
    """Look up `word` and print it. Returns the process exit status.

    File and parse failures are raised to the caller.
    """
    if not is_valid_word(word):
        render_invalid(console)
        return 1

    relative = shard_path(word)
    logger.debug(f"Shard for {word!r}: {relative}")

    shard = load_shard(read_shard(relative, roots))

    # The shard is keyed by the word as typed, not the lowercased form
    definition = lookup(shard, word)
    if definition is None:
        render_not_found(word, console)
        return 0

    render_definition(definition, show_examples, console)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dibble',
        description='Quick and local word definitions',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Definition with example sentences
  dibble serendipity

  # Senses only
  dibble cat --no-examples
        """
    )

    parser.add_argument(
        'word',
        help='The word to define'
    )

    parser.add_argument(
        '-n', '--no-examples',
        action='store_true',
        help="Don't show example sentences"
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    console = make_console()

    # Nothing touches the filesystem until the word is known to be valid
    if not is_valid_word(args.word):
        render_invalid(console)
        return 1

    roots = search_roots(resolve_data_root(VENDOR, APP))
    logger.debug("Search roots: " + ", ".join(str(r) for r in roots))

    try:
        return run(args.word, not args.no_examples, roots, console)
    except (DibbleError, OSError, UnicodeDecodeError) as e:
        logger.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
