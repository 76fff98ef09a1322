"""Template line tokenizer.

A template line mixes literal text with brace-delimited fields:
    "Playing {game} on {platform}"
    -> "Playing ", {game}, " on ", {platform}, ""

There is no escape syntax, so a literal brace can never appear in a line.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from presencekit.templates.errors import TemplateSyntaxError


class PartKind(Enum):
    """What a LinePart holds."""

    LITERAL = auto()  # Text copied verbatim
    FIELD = auto()  # Field name, resolved at render time


@dataclass(frozen=True)
class LinePart:
    """One token of a parsed template line."""

    value: str  # Literal text, or field name without braces
    kind: PartKind = PartKind.LITERAL

    @property
    def is_field(self) -> bool:
        return self.kind is PartKind.FIELD


def parse_line(line: str) -> Iterator[LinePart]:
    """Lazily split a template line into parts.

    A literal part is emitted before every field and once at the end of
    input, so literal parts may be empty and the last part is always a
    literal.

    Raises:
        TemplateSyntaxError: On "{" inside a field, "}" outside a field,
            or a field still open at end of input.
    """
    buffer: list[str] = []
    kind = PartKind.LITERAL

    for char in line:
        if char == "{":
            # Fields can't nest
            if kind is PartKind.FIELD:
                raise TemplateSyntaxError("Unexpected {")
            yield LinePart("".join(buffer), kind)
            buffer = []
            kind = PartKind.FIELD
        elif char == "}":
            if kind is PartKind.LITERAL:
                raise TemplateSyntaxError("Unexpected }")
            yield LinePart("".join(buffer), kind)
            buffer = []
            kind = PartKind.LITERAL
        else:
            buffer.append(char)

    if kind is PartKind.FIELD:
        raise TemplateSyntaxError("Unclosed field")
    yield LinePart("".join(buffer), kind)


def tokenize(line: str) -> list[LinePart]:
    """Parse a template line into a list of parts."""
    return list(parse_line(line))


def field_names(line: str) -> list[str]:
    """Get field names in order of appearance (duplicates kept)."""
    return [part.value for part in parse_line(line) if part.is_field]
