"""
In-memory representation of a dictionary shard.

A shard file is a JSON object mapping each word to a definition:

    {
      "cat": {
        "word": "cat",
        "etymologies": [
          {"partsOfSpeech": [
            {"partOfSpeech": "Noun",
             "senses": [{"sense": "...", "date": "...", "examples": ["..."]}]}
          ]}
        ]
      }
    }

`date` is optional and `examples` defaults to an empty list. Keys not listed
here are ignored. Sequence order is display order and is kept as-is.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from dibble.errors import ShardParseError


def _require(data: Dict[str, Any], key: str, kind: type, where: str) -> Any:
    if key not in data:
        raise ShardParseError(f"{where}: missing field '{key}'")
    value = data[key]
    if not isinstance(value, kind):
        raise ShardParseError(
            f"{where}.{key}: expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _require_object(data: Any, where: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ShardParseError(f"{where}: expected object, got {type(data).__name__}")
    return data


def _string_list(values: List[Any], where: str) -> List[str]:
    for i, value in enumerate(values):
        if not isinstance(value, str):
            raise ShardParseError(f"{where}[{i}]: expected str, got {type(value).__name__}")
    return list(values)


@dataclass(frozen=True)
class Sense:
    """One meaning within a part-of-speech grouping."""

    sense: str
    date: Optional[str] = None
    examples: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, where: str) -> 'Sense':
        data = _require_object(data, where)
        sense = _require(data, 'sense', str, where)

        date = data.get('date')
        if date is not None and not isinstance(date, str):
            raise ShardParseError(f"{where}.date: expected str, got {type(date).__name__}")

        examples: List[str] = []
        if 'examples' in data:
            raw = _require(data, 'examples', list, where)
            examples = _string_list(raw, f"{where}.examples")

        return cls(sense=sense, date=date, examples=examples)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {'sense': self.sense}
        if self.date is not None:
            result['date'] = self.date
        result['examples'] = list(self.examples)
        return result


@dataclass(frozen=True)
class PartOfSpeech:
    """A part-of-speech label ("Noun", "Verb", ...) and its senses."""

    part_of_speech: str
    senses: List[Sense] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, where: str) -> 'PartOfSpeech':
        data = _require_object(data, where)
        label = _require(data, 'partOfSpeech', str, where)
        senses = _require(data, 'senses', list, where)
        return cls(
            part_of_speech=label,
            senses=[Sense.from_dict(s, f"{where}.senses[{i}]") for i, s in enumerate(senses)],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'partOfSpeech': self.part_of_speech,
            'senses': [s.to_dict() for s in self.senses],
        }


@dataclass(frozen=True)
class Etymology:
    """One historical origin of a word, grouping its parts of speech."""

    parts_of_speech: List[PartOfSpeech] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, where: str) -> 'Etymology':
        data = _require_object(data, where)
        parts = _require(data, 'partsOfSpeech', list, where)
        return cls(
            parts_of_speech=[
                PartOfSpeech.from_dict(p, f"{where}.partsOfSpeech[{i}]")
                for i, p in enumerate(parts)
            ]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'partsOfSpeech': [p.to_dict() for p in self.parts_of_speech]}


@dataclass(frozen=True)
class Definition:
    """A word and its etymologies, in display order."""

    word: str
    etymologies: List[Etymology] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, where: str = 'definition') -> 'Definition':
        data = _require_object(data, where)
        word = _require(data, 'word', str, where)
        etymologies = _require(data, 'etymologies', list, where)
        return cls(
            word=word,
            etymologies=[
                Etymology.from_dict(e, f"{where}.etymologies[{i}]")
                for i, e in enumerate(etymologies)
            ],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word,
            'etymologies': [e.to_dict() for e in self.etymologies],
        }


# Word (as stored, case-sensitive) -> Definition
DictionaryShard = Dict[str, Definition]
