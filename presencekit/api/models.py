"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field

from presencekit.templates import LinePart, Preferences

# =============================================================================
# Customizer
# =============================================================================


class TextFieldResponse(BaseModel):
    name: str
    description: str = ""


class CustomizerResponse(BaseModel):
    """Icons, text fields and checkboxes available for customization."""

    icons: list[str]
    text_fields: list[TextFieldResponse]
    checkboxes: list[str]


# =============================================================================
# Preferences
# =============================================================================


class PreferencesModel(BaseModel):
    """A preferences record as sent over the API."""

    icon: str
    line_one: str = ""
    line_two: str = ""
    checked_checkboxes: list[str] = Field(default_factory=list)

    def to_preferences(self) -> Preferences:
        return Preferences(
            icon=self.icon,
            line_one=self.line_one,
            line_two=self.line_two,
            checked_checkboxes=list(self.checked_checkboxes),
        )

    @classmethod
    def from_preferences(cls, prefs: Preferences) -> "PreferencesModel":
        return cls(
            icon=prefs.icon,
            line_one=prefs.line_one,
            line_two=prefs.line_two,
            checked_checkboxes=list(prefs.checked_checkboxes),
        )


class ValidationResponse(BaseModel):
    valid: bool
    error: str | None = None


class LinePartModel(BaseModel):
    kind: str  # "literal" or "field"
    value: str

    @classmethod
    def from_part(cls, part: LinePart) -> "LinePartModel":
        return cls(kind=part.kind.name.lower(), value=part.value)


class ParseResponse(BaseModel):
    line_one: list[LinePartModel]
    line_two: list[LinePartModel]


class PreviewRequest(PreferencesModel):
    """Preferences plus current field values to render with."""

    values: dict[str, str] = Field(default_factory=dict)


class PreviewResponse(BaseModel):
    line_one: str
    line_two: str


class SerializedPreferences(BaseModel):
    data: str
