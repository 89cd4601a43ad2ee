"""Pytest configuration and shared fixtures."""
import io
import json
import pytest
from pathlib import Path

from rich.console import Console


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def cat_entry():
    """A single-etymology entry with dated and undated senses."""
    return {
        "word": "cat",
        "etymologies": [
            {
                "partsOfSpeech": [
                    {
                        "partOfSpeech": "Noun",
                        "senses": [
                            {
                                "sense": "A small domesticated carnivorous mammal.",
                                "examples": ["The cat sat on the mat."]
                            },
                            {
                                "sense": "A person, especially a cool man.",
                                "date": "1920s slang",
                                "examples": ["He's a real cool cat.", "Hey, cat."]
                            }
                        ]
                    }
                ]
            }
        ]
    }


@pytest.fixture
def bank_entry():
    """A two-etymology entry; the second has two parts of speech."""
    return {
        "word": "bank",
        "etymologies": [
            {
                "partsOfSpeech": [
                    {
                        "partOfSpeech": "Noun",
                        "senses": [
                            {"sense": "Sloping ground beside a river.", "date": "Middle English"}
                        ]
                    }
                ]
            },
            {
                "partsOfSpeech": [
                    {
                        "partOfSpeech": "Noun",
                        "senses": [
                            {"sense": "An institution that keeps money.",
                             "examples": ["She went to the bank."]}
                        ]
                    },
                    {
                        "partOfSpeech": "Verb",
                        "senses": [
                            {"sense": "To deposit in a bank.", "date": ""}
                        ]
                    }
                ]
            }
        ]
    }


@pytest.fixture
def ca_shard(cat_entry):
    """Contents of c/ca.json: lowercase and capitalized keys side by side."""
    capital = {
        "word": "Cat",
        "etymologies": [
            {"partsOfSpeech": [
                {"partOfSpeech": "Proper noun",
                 "senses": [{"sense": "A surname."}]}
            ]}
        ]
    }
    return {"cat": cat_entry, "Cat": capital}


@pytest.fixture
def write_shard():
    """Write a shard dict to <root>/<relative> and return the file path."""
    def _write(root: Path, relative: str, shard) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        text = shard if isinstance(shard, str) else json.dumps(shard, ensure_ascii=False)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def roots(temp_dir):
    """Three empty search roots: local, user, system."""
    return [temp_dir / "local", temp_dir / "user" / "dict", temp_dir / "system"]


@pytest.fixture
def console():
    """Plain-text console that records everything printed to it."""
    return Console(file=io.StringIO(), color_system=None, width=200,
                   highlight=False, soft_wrap=True)


@pytest.fixture
def output(console):
    """Return what has been printed to the `console` fixture so far."""
    return lambda: console.file.getvalue()
