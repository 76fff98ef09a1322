"""Template field resolver.

Fills {field} placeholders in template lines using a lookup function
supplied by the host at render time:
    resolve_line("Playing {game}", {"game": "Chess"}.get)
    # -> "Playing Chess"

A lookup returning None means the field is unknown, which is an error:
a validated line should only name fields the host can fill.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from presencekit.templates.errors import UnknownFieldError
from presencekit.templates.line import parse_line

if TYPE_CHECKING:
    from presencekit.templates.preferences import Preferences

logger = logging.getLogger(__name__)

# Field name -> current value, or None if the field is unknown
FieldLookup = Callable[[str], "str | None"]


def resolve_line(line: str, lookup: FieldLookup) -> str:
    """Replace every field in a line with its looked-up value.

    Raises:
        TemplateSyntaxError: If the line is malformed.
        UnknownFieldError: If lookup returns None for a field.
    """
    resolved: list[str] = []
    for part in parse_line(line):
        if not part.is_field:
            resolved.append(part.value)
            continue

        value = lookup(part.value)
        if value is None:
            logger.warning("[RESOLVE] No value for field %r", part.value)
            raise UnknownFieldError(part.value)
        resolved.append(value)

    return "".join(resolved)


def resolve(prefs: Preferences, lookup: FieldLookup) -> tuple[str, str]:
    """Resolve both lines of a preferences record.

    Returns:
        Tuple of (line one, line two). Fails as a whole if either line fails.
    """
    return resolve_line(prefs.line_one, lookup), resolve_line(prefs.line_two, lookup)


def mapping_lookup(values: Mapping[str, str]) -> FieldLookup:
    """Build a lookup backed by a dict of current field values."""
    return values.get
