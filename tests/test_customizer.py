"""Tests for the customizer catalog."""

import json

import pytest

from presencekit.templates import Customizer, TextField, load_customizer


class TestCustomizer:
    def test_valid_sets(self, customizer):
        assert customizer.valid_icons == {"rocket", "star"}
        assert customizer.valid_field_names == {"game", "platform"}

    def test_get_field(self, customizer):
        assert customizer.get_field("game") == TextField("game", "Name of the game")
        assert customizer.get_field("Game") is None


class TestFromDict:
    def test_names_and_objects(self):
        customizer = Customizer.from_dict(
            {
                "icons": ["rocket"],
                "text_fields": ["game", {"name": "platform", "description": "Where"}],
                "checkboxes": ["show_elapsed"],
            }
        )
        assert customizer.text_fields == [TextField("game"), TextField("platform", "Where")]
        assert customizer.icons == ["rocket"]
        assert customizer.checkboxes == ["show_elapsed"]

    def test_missing_sections_default_empty(self):
        customizer = Customizer.from_dict({})
        assert customizer.valid_icons == frozenset()
        assert customizer.valid_field_names == frozenset()

    def test_round_trip_through_dict(self, customizer):
        assert Customizer.from_dict(customizer.to_dict()) == customizer

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"icons": "rocket"},
            {"icons": [1]},
            {"text_fields": [42]},
            {"text_fields": [{"description": "no name"}]},
            {"text_fields": "game"},
            {"text_fields": None},
        ],
    )
    def test_invalid(self, data):
        with pytest.raises(ValueError):
            Customizer.from_dict(data)


class TestLoadCustomizer:
    def test_load(self, tmp_path):
        path = tmp_path / "customizer.json"
        path.write_text(json.dumps({"icons": ["star"], "text_fields": ["game"]}))
        customizer = load_customizer(path)
        assert customizer.valid_icons == {"star"}
        assert customizer.valid_field_names == {"game"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_customizer(tmp_path / "missing.json")

    def test_bad_json(self, tmp_path):
        path = tmp_path / "customizer.json"
        path.write_text("{not json")
        with pytest.raises(ValueError):
            load_customizer(path)
