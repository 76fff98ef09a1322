"""Presence template module.

Template lines mix literal text with named fields, like:
    "Playing {game} on {platform}" -> "Playing Chess on PC"

Lines are tokenized into parts, validated against a customizer's known
fields and icons, and resolved with a field lookup at render time.
"""

from presencekit.templates.customizer import (
    Customizer,
    CustomizerContext,
    TextField,
    load_customizer,
)
from presencekit.templates.errors import (
    CustomizationError,
    PreferencesValidationError,
    SerializationFormatError,
    TemplateSyntaxError,
    UnknownFieldError,
)
from presencekit.templates.line import LinePart, PartKind, field_names, parse_line, tokenize
from presencekit.templates.preferences import (
    SERIALIZATION_VERSION,
    Preferences,
    deserialize,
    serialize,
)
from presencekit.templates.resolver import FieldLookup, mapping_lookup, resolve, resolve_line
from presencekit.templates.validator import (
    ValidationResult,
    ensure_valid,
    validate,
    validate_line,
)

__all__ = [
    # Customizer
    "Customizer",
    "CustomizerContext",
    "TextField",
    "load_customizer",
    # Errors
    "CustomizationError",
    "PreferencesValidationError",
    "SerializationFormatError",
    "TemplateSyntaxError",
    "UnknownFieldError",
    # Tokenizer
    "LinePart",
    "PartKind",
    "field_names",
    "parse_line",
    "tokenize",
    # Preferences
    "SERIALIZATION_VERSION",
    "Preferences",
    "deserialize",
    "serialize",
    # Resolver
    "FieldLookup",
    "mapping_lookup",
    "resolve",
    "resolve_line",
    # Validator
    "ValidationResult",
    "ensure_valid",
    "validate",
    "validate_line",
]
