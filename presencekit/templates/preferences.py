"""User customization preferences.

A Preferences record holds the chosen icon, the two template lines and the
checked checkboxes. It is stored as a small line-oriented text format:

    1                 <- format version
    Playing {game}    <- line one
    on {platform}     <- line two
    rocket            <- icon
    show_elapsed,art  <- comma-separated checked checkboxes

Nothing is escaped, so lines must not contain newlines and checkbox names
must not contain commas.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from presencekit.templates.errors import SerializationFormatError
from presencekit.templates.line import LinePart, tokenize
from presencekit.templates.resolver import FieldLookup, resolve
from presencekit.templates.validator import ValidationResult, validate

if TYPE_CHECKING:
    from presencekit.templates.customizer import CustomizerContext

logger = logging.getLogger(__name__)

SERIALIZATION_VERSION = "1"

# version, line one, line two, icon, checkboxes
_V1_LINE_COUNT = 5


@dataclass
class Preferences:
    """A user's customization preferences for one presence."""

    icon: str = ""
    line_one: str = ""
    line_two: str = ""
    checked_checkboxes: list[str] = field(default_factory=list)

    # Customizer these preferences belong to (not part of the stored data)
    customizer: CustomizerContext | None = field(default=None, compare=False, repr=False)

    def validate(self) -> ValidationResult:
        """Validate against the associated customizer.

        Raises:
            ValueError: If no customizer is associated.
        """
        if self.customizer is None:
            raise ValueError("Preferences have no customizer to validate against")
        return validate(self, self.customizer)

    def parse_lines(self) -> tuple[list[LinePart], list[LinePart]]:
        """Tokenize both lines."""
        return tokenize(self.line_one), tokenize(self.line_two)

    def fill_fields(self, lookup: FieldLookup) -> tuple[str, str]:
        """Resolve both lines using a field lookup function."""
        return resolve(self, lookup)

    def serialize(self) -> str:
        return serialize(self)

    @classmethod
    def deserialize(cls, data: str, customizer: CustomizerContext | None = None) -> Preferences:
        return deserialize(data, customizer)


def serialize(prefs: Preferences) -> str:
    """Convert preferences to their text representation."""
    return "\n".join(
        [
            SERIALIZATION_VERSION,
            prefs.line_one,
            prefs.line_two,
            prefs.icon,
            ",".join(prefs.checked_checkboxes),
        ]
    )


def deserialize(data: str, customizer: CustomizerContext | None = None) -> Preferences:
    """Build preferences from text created by serialize().

    An empty checkbox line reads back as [""], not [].

    Raises:
        SerializationFormatError: On an unknown version or missing lines.
    """
    lines = data.replace("\r", "").split("\n")

    version = lines[0]
    if version != SERIALIZATION_VERSION:
        logger.warning("[PREFS] Unknown serialization version %r", version)
        raise SerializationFormatError("Unknown serialization version")

    if len(lines) < _V1_LINE_COUNT:
        raise SerializationFormatError("Truncated serialized preferences")

    return Preferences(
        line_one=lines[1],
        line_two=lines[2],
        icon=lines[3],
        checked_checkboxes=lines[4].split(","),
        customizer=customizer,
    )
