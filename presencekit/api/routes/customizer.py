"""Customizer catalog endpoint for the field/icon picker."""

from fastapi import APIRouter, Depends

from presencekit.api.dependencies import get_customizer
from presencekit.api.models import CustomizerResponse, TextFieldResponse
from presencekit.templates import Customizer

router = APIRouter()


@router.get("/customizer", response_model=CustomizerResponse)
def get_customizer_catalog(customizer: Customizer = Depends(get_customizer)):
    """Get the icons, text fields and checkboxes users can pick from."""
    return CustomizerResponse(
        icons=customizer.icons,
        text_fields=[
            TextFieldResponse(name=f.name, description=f.description)
            for f in customizer.text_fields
        ],
        checkboxes=customizer.checkboxes,
    )
