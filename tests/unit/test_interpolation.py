"""Tests for hgts.interpolation module."""

from decimal import Decimal

import pytest

from hgts.interpolation import format_value, interpolate


@pytest.mark.unit
class TestInterpolate:
    """Tests for interpolate()."""

    def test_substitutes_known_names(self):
        """Known placeholders are replaced."""
        assert interpolate("Welcome, {{name}}!", {"name": "John"}) == "Welcome, John!"

    def test_unknown_placeholder_left_intact(self):
        """Unknown placeholders stay as written."""
        assert interpolate("{{x}}", {}) == "{{x}}"
        assert interpolate("Hi {{name}} {{other}}", {"name": "Ana"}) == "Hi Ana {{other}}"

    def test_numbers_are_stringified(self):
        """Numbers render with decimal stringification."""
        assert interpolate("{{x}}", {"x": 5}) == "5"
        assert interpolate("{{x}}", {"x": 2.5}) == "2.5"
        assert interpolate("{{x}}", {"x": Decimal("3.10")}) == "3.10"

    def test_repeated_placeholder(self):
        """Every occurrence of a placeholder is replaced."""
        assert interpolate("{{a}}-{{a}}", {"a": "x"}) == "x-x"

    def test_no_recursive_interpolation(self):
        """Substituted values are not scanned again."""
        result = interpolate("{{a}}", {"a": "{{b}}", "b": "nope"})
        assert result == "{{b}}"

    def test_only_exact_syntax_matches(self):
        """Single braces, spaces and non-word names are not placeholders."""
        params = {"name": "John"}
        assert interpolate("{name}", params) == "{name}"
        assert interpolate("{{ name }}", params) == "{{ name }}"
        assert interpolate("{{na-me}}", params) == "{{na-me}}"
        assert interpolate("{{}}", params) == "{{}}"

    def test_names_are_ascii_word_characters(self):
        """Non-ASCII letters are not part of placeholder names."""
        assert interpolate("{{café}}", {"café": "x"}) == "{{café}}"
        assert interpolate("{{user_1}}", {"user_1": "u"}) == "u"

    def test_template_without_placeholders(self):
        """Templates without placeholders are returned unchanged."""
        assert interpolate("Plain text", {"x": 1}) == "Plain text"


@pytest.mark.unit
class TestFormatValue:
    """Tests for format_value()."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("text", "text"),
            (5, "5"),
            (-3, "-3"),
            (5.0, "5"),
            (0.5, "0.5"),
            (float("nan"), "NaN"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
            (True, "true"),
            (False, "false"),
        ],
    )
    def test_format_value(self, value, expected):
        """Values render the way translation strings expect."""
        assert format_value(value) == expected
