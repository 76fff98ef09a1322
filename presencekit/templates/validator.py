"""Preference validation.

Checks preferences against a customizer: the icon must exist, both lines
must parse, and every field in them must be one the customizer defines.
Field names are matched exactly (case-sensitive).
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from dataclasses import dataclass
from typing import TYPE_CHECKING

from presencekit.templates.errors import PreferencesValidationError, TemplateSyntaxError
from presencekit.templates.line import tokenize

if TYPE_CHECKING:
    from presencekit.templates.customizer import CustomizerContext
    from presencekit.templates.preferences import Preferences

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation check. Truthy when valid."""

    ok: bool
    message: str | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, message: str) -> ValidationResult:
        return cls(ok=False, message=message)


def validate_line(line: str, valid_field_names: Collection[str]) -> ValidationResult:
    """Check that one line parses and only uses known fields."""
    try:
        parts = tokenize(line)
    except TemplateSyntaxError as e:
        return ValidationResult.failure(str(e))

    for part in parts:
        if part.is_field and part.value not in valid_field_names:
            return ValidationResult.failure(
                f"Unknown field {part.value}. Check your spelling and capitalization!"
            )

    return ValidationResult.success()


def validate(prefs: Preferences, customizer: CustomizerContext) -> ValidationResult:
    """Validate preferences against a customizer.

    Stops at the first problem, checking the icon, then line one,
    then line two.
    """
    if prefs.icon not in customizer.valid_icons:
        result = ValidationResult.failure(f'"{prefs.icon}" is not a valid icon')
    else:
        field_names = customizer.valid_field_names
        result = validate_line(prefs.line_one, field_names)
        if result:
            result = validate_line(prefs.line_two, field_names)

    if not result:
        logger.debug("[VALIDATE] Rejected preferences: %s", result.message)
    return result


def ensure_valid(prefs: Preferences, customizer: CustomizerContext) -> None:
    """Raise if preferences are invalid.

    Raises:
        PreferencesValidationError: With the validation message.
    """
    result = validate(prefs, customizer)
    if not result:
        raise PreferencesValidationError(result.message)
