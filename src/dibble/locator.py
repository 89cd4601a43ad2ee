"""
Find the shard file that holds a word.

Shards are split by lowercase prefix: "cat" lives in c/ca.json and the
one-letter word "a" in a/a.json. This layout is shared with existing
dictionary installs and must not change.

Roots are searched in priority order:
  1. ./dict (development checkout)
  2. <user data dir>/dict (per-user install)
  3. /usr/share/dibble/dict (system-wide install)
"""

import logging
from pathlib import Path
from typing import List, Sequence

from platformdirs import user_data_dir

from dibble.errors import InvalidWordError, ShardNotFoundError

logger = logging.getLogger(__name__)

VENDOR = "com.taranathan.dibble"
APP = "dibble"

LOCAL_ROOT = Path("dict")
SYSTEM_ROOT = Path("/usr/share/dibble/dict")


def is_valid_word(word: str) -> bool:
    """True if the word is non-empty and purely alphabetic (Unicode-aware)."""
    return bool(word) and all(c.isalpha() for c in word)


def shard_path(word: str) -> Path:
    """Relative path of the shard holding `word`.

    >>> shard_path("Cat")
    PosixPath('c/ca.json')
    >>> shard_path("a")
    PosixPath('a/a.json')
    """
    if not is_valid_word(word):
        raise InvalidWordError(word)

    lowered = word.lower()
    first = lowered[0]
    if len(lowered) == 1:
        return Path(first) / f"{first}.json"
    return Path(first) / f"{first}{lowered[1]}.json"


def resolve_data_root(vendor: str, app: str) -> Path:
    """Per-user application data directory for this platform."""
    return Path(user_data_dir(appname=app, appauthor=vendor))


def search_roots(data_root: Path) -> List[Path]:
    """Dictionary roots in search order: local, user, system."""
    return [LOCAL_ROOT, data_root / "dict", SYSTEM_ROOT]


def read_shard(relative: Path, roots: Sequence[Path]) -> str:
    """Return the contents of the first `root / relative` that can be opened.

    A root whose file cannot be opened is skipped. Errors raised while
    reading an opened file are not caught.
    """
    searched = []
    for root in roots:
        candidate = root / relative
        searched.append(candidate)
        try:
            f = open(candidate, 'r', encoding='utf-8')
        except OSError as e:
            logger.debug(f"Skipping {candidate}: {e.strerror or e}")
            continue

        with f:
            contents = f.read()
        logger.debug(f"Read {len(contents):,} characters from {candidate}")
        return contents

    raise ShardNotFoundError(relative, searched)
