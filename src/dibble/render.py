"""
Rich-based terminal output for definitions.

Layout for a word with two etymologies:

    bank
    Etymology 1:
      Noun
        1. Sloping ground beside a river.
           [Middle English]
           "We sat on the bank."

    Etymology 2:
      ...

The "Etymology N:" header is only shown when there is more than one.
Dictionary text is wrapped in Text objects so it is never parsed as markup.
"""

from rich.console import Console
from rich.text import Text

from dibble.schema import Definition

WORD_STYLE = "bold cyan"
ETYMOLOGY_STYLE = "bold yellow"
POS_STYLE = "bold green"
DATE_STYLE = "italic dim"
EXAMPLE_STYLE = "dim"
ALERT_STYLE = "red"

POS_INDENT = "  "
SENSE_INDENT = "    "
DETAIL_INDENT = "       "


def make_console(**kwargs) -> Console:
    """Console used for definitions; long senses are not re-wrapped."""
    kwargs.setdefault("highlight", False)
    kwargs.setdefault("soft_wrap", True)
    return Console(**kwargs)


def render_definition(definition: Definition, show_examples: bool, console: Console):
    """Print a definition with optional example sentences."""
    console.print(Text(definition.word, style=WORD_STYLE))

    numbered = len(definition.etymologies) > 1
    for etym_idx, etymology in enumerate(definition.etymologies, start=1):
        if numbered:
            console.print(Text(f"Etymology {etym_idx}:", style=ETYMOLOGY_STYLE))

        for pos in etymology.parts_of_speech:
            console.print(Text.assemble(POS_INDENT, (pos.part_of_speech, POS_STYLE)))

            for sense_idx, sense in enumerate(pos.senses, start=1):
                console.print(Text.assemble(
                    SENSE_INDENT, (f"{sense_idx}.", "bold"), " ", sense.sense
                ))

                if sense.date:
                    console.print(Text.assemble(DETAIL_INDENT, (f"[{sense.date}]", DATE_STYLE)))

                if show_examples:
                    for example in sense.examples:
                        console.print(Text.assemble(DETAIL_INDENT, (f'"{example}"', EXAMPLE_STYLE)))

        console.print()


def render_not_found(word: str, console: Console):
    console.print(Text(f"Word not found: {word}", style=ALERT_STYLE))


def render_invalid(console: Console):
    console.print(Text(
        "Invalid input: Word must contain only alphabetic characters.", style=ALERT_STYLE
    ))
