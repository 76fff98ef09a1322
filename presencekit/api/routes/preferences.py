"""Preferences API endpoints.

Validation, parsing, preview rendering and (de)serialization of
preferences records. Nothing is stored here.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from presencekit.api.dependencies import get_customizer
from presencekit.api.models import (
    LinePartModel,
    ParseResponse,
    PreferencesModel,
    PreviewRequest,
    PreviewResponse,
    SerializedPreferences,
    ValidationResponse,
)
from presencekit.templates import (
    Customizer,
    Preferences,
    SerializationFormatError,
    TemplateSyntaxError,
    UnknownFieldError,
    mapping_lookup,
    tokenize,
    validate,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/validate", response_model=ValidationResponse)
def validate_preferences(
    body: PreferencesModel,
    customizer: Customizer = Depends(get_customizer),
):
    """Check preferences against the customizer.

    Invalid preferences are not an HTTP error; the response carries
    valid=false and a message to show the user.
    """
    result = validate(body.to_preferences(), customizer)
    return ValidationResponse(valid=result.ok, error=result.message)


@router.post("/parse", response_model=ParseResponse)
def parse_preferences(body: PreferencesModel):
    """Split both lines into literal and field parts."""
    try:
        line_one = tokenize(body.line_one)
        line_two = tokenize(body.line_two)
    except TemplateSyntaxError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from None

    return ParseResponse(
        line_one=[LinePartModel.from_part(p) for p in line_one],
        line_two=[LinePartModel.from_part(p) for p in line_two],
    )


@router.post("/preview", response_model=PreviewResponse)
def preview_preferences(body: PreviewRequest):
    """Render both lines with the supplied field values."""
    prefs = body.to_preferences()
    try:
        line_one, line_two = prefs.fill_fields(mapping_lookup(body.values))
    except (TemplateSyntaxError, UnknownFieldError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from None

    return PreviewResponse(line_one=line_one, line_two=line_two)


@router.post("/serialize", response_model=SerializedPreferences)
def serialize_preferences(body: PreferencesModel):
    """Convert preferences to their stored text form."""
    return SerializedPreferences(data=body.to_preferences().serialize())


@router.post("/deserialize", response_model=PreferencesModel)
def deserialize_preferences(body: SerializedPreferences):
    """Read preferences back from their stored text form."""
    try:
        prefs = Preferences.deserialize(body.data)
    except SerializationFormatError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None

    logger.debug("[PREFS] Deserialized preferences icon=%s", prefs.icon)
    return PreferencesModel.from_preferences(prefs)
