"""Deserialize shard text into Definition objects."""

import logging
from typing import Optional

import orjson

from dibble.errors import ShardParseError
from dibble.schema import Definition, DictionaryShard

logger = logging.getLogger(__name__)


def load_shard(text: str) -> DictionaryShard:
    """Parse a shard file's contents.

    Raises ShardParseError if the text is not JSON, the top level is not an
    object, or any entry does not match the Definition schema.
    """
    try:
        data = orjson.loads(text)
    except orjson.JSONDecodeError as e:
        raise ShardParseError(f"Invalid JSON in dictionary file: {e}") from e

    if not isinstance(data, dict):
        raise ShardParseError(
            f"Dictionary file must contain a JSON object, got {type(data).__name__}"
        )

    shard = {word: Definition.from_dict(entry, word) for word, entry in data.items()}
    logger.debug(f"Loaded {len(shard):,} entries")
    return shard


def lookup(shard: DictionaryShard, word: str) -> Optional[Definition]:
    """Exact, case-sensitive lookup: "Apple" and "apple" are different keys."""
    return shard.get(word)
