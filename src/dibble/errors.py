"""Exceptions raised while locating, loading and looking up dictionary shards."""

from pathlib import Path
from typing import List


class DibbleError(Exception):
    """Base class for all dibble failures."""


class InvalidWordError(DibbleError):
    """The requested word is empty or contains non-alphabetic characters."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Invalid word {word!r}: must contain only alphabetic characters")


class ShardNotFoundError(DibbleError):
    """None of the candidate roots holds the shard for a word."""

    def __init__(self, relative: Path, searched: List[Path]):
        self.relative = relative
        self.searched = list(searched)
        lines = ["Dictionary file not found. Searched:"]
        lines.extend(f"  - {path}" for path in self.searched)
        super().__init__("\n".join(lines))


class ShardParseError(DibbleError):
    """A shard file is not valid JSON or does not match the dictionary schema."""
