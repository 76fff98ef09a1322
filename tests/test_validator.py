"""Tests for preference validation."""

import pytest

from presencekit.templates import (
    Customizer,
    Preferences,
    PreferencesValidationError,
    TextField,
    ValidationResult,
    ensure_valid,
    validate,
    validate_line,
)


class TestValidateLine:
    def test_known_fields(self):
        assert validate_line("Playing {game}", {"game"}) == ValidationResult.success()

    def test_no_fields(self):
        assert validate_line("just text", set())

    def test_unknown_field_named_in_message(self):
        result = validate_line("{unknown}", {"game"})
        assert not result
        assert result.message == (
            "Unknown field unknown. Check your spelling and capitalization!"
        )

    def test_case_sensitive(self):
        result = validate_line("{Game}", {"game"})
        assert not result.ok
        assert "Game" in result.message

    def test_syntax_error_message_passed_through(self):
        assert validate_line("{game", {"game"}).message == "Unclosed field"
        assert validate_line("game}", {"game"}).message == "Unexpected }"
        assert validate_line("{{game}}", {"game"}).message == "Unexpected {"

    def test_first_unknown_field_reported(self):
        result = validate_line("{game} {bad1} {bad2}", {"game"})
        assert "bad1" in result.message


class TestValidate:
    """Test whole-record validation against a customizer."""

    def test_valid(self, prefs, customizer):
        result = validate(prefs, customizer)
        assert result.ok
        assert result.message is None

    def test_unknown_field_scenario(self):
        customizer = Customizer(icons=["rocket", "star"], text_fields=[TextField("game")])
        prefs = Preferences(icon="rocket", line_one="{unknown}", line_two="")
        result = validate(prefs, customizer)
        assert not result.ok
        assert "unknown" in result.message

    def test_invalid_icon(self, prefs, customizer):
        prefs.icon = "moon"
        result = validate(prefs, customizer)
        assert result.message == '"moon" is not a valid icon'

    def test_icon_checked_before_lines(self, customizer):
        prefs = Preferences(icon="moon", line_one="{broken", line_two="{nope}")
        assert "icon" in validate(prefs, customizer).message

    def test_line_one_checked_before_line_two(self, customizer):
        prefs = Preferences(icon="star", line_one="{one}", line_two="{two}")
        assert "one" in validate(prefs, customizer).message

    def test_line_two_checked(self, customizer):
        prefs = Preferences(icon="star", line_one="{game}", line_two="on {platfrom}")
        assert "platfrom" in validate(prefs, customizer).message

    def test_syntax_error_in_line_two(self, customizer):
        prefs = Preferences(icon="star", line_one="ok", line_two="{game")
        assert validate(prefs, customizer).message == "Unclosed field"

    def test_checkboxes_not_validated(self, prefs, customizer):
        prefs.checked_checkboxes = ["anything", ""]
        assert validate(prefs, customizer)

    def test_accepts_any_customizer_context(self, prefs):
        class Catalog:
            valid_icons = frozenset({"rocket"})
            valid_field_names = frozenset({"game", "platform"})

        assert validate(prefs, Catalog())

    def test_does_not_modify_record(self, prefs, customizer):
        before = (prefs.icon, prefs.line_one, prefs.line_two, list(prefs.checked_checkboxes))
        validate(prefs, customizer)
        after = (prefs.icon, prefs.line_one, prefs.line_two, list(prefs.checked_checkboxes))
        assert before == after


class TestEnsureValid:
    def test_valid_passes(self, prefs, customizer):
        ensure_valid(prefs, customizer)

    def test_invalid_raises_with_message(self, prefs, customizer):
        prefs.line_one = "{nope}"
        with pytest.raises(PreferencesValidationError, match="Unknown field nope"):
            ensure_valid(prefs, customizer)


class TestPreferencesValidate:
    def test_uses_associated_customizer(self, prefs):
        assert prefs.validate().ok

    def test_without_customizer(self):
        with pytest.raises(ValueError):
            Preferences(icon="rocket").validate()
