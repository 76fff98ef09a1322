"""Shared fixtures."""

import pytest

from presencekit.templates import Customizer, Preferences, TextField


@pytest.fixture
def customizer():
    return Customizer(
        icons=["rocket", "star"],
        text_fields=[
            TextField("game", "Name of the game"),
            TextField("platform", "Platform"),
        ],
        checkboxes=["show_elapsed", "show_party"],
    )


@pytest.fixture
def prefs(customizer):
    return Preferences(
        icon="rocket",
        line_one="Playing {game}",
        line_two="on {platform}",
        checked_checkboxes=["show_elapsed"],
        customizer=customizer,
    )
