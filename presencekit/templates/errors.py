"""Customization error types.

Every message is written to be shown to the user as-is.
"""


class CustomizationError(Exception):
    """Base class for all template and preference errors."""


class TemplateSyntaxError(CustomizationError):
    """A template line is malformed (stray or unclosed brace)."""


class PreferencesValidationError(CustomizationError):
    """Preferences reference an unknown icon or field."""


class UnknownFieldError(CustomizationError):
    """A field had no value at render time."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Unknown field {field_name}")


class SerializationFormatError(CustomizationError):
    """Serialized preferences could not be read."""
