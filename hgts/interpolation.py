"""Placeholder interpolation for translated strings."""

import math
import re
from typing import Any, Mapping

# {{name}} with an ASCII word-character name
PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}", re.ASCII)


def format_value(value: Any) -> str:
    """Render an interpolation value as text.

    Integral floats drop the trailing ".0" so a count of 5.0 reads "5".
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
    return str(value)


def interpolate(template: str, params: Mapping[str, Any]) -> str:
    """Replace {{name}} placeholders in template with values from params.

    Unknown names are left in place, braces included. Substituted values are
    not scanned again and there is no escape syntax.

    Args:
        template: String with {{name}} placeholders.
        params: Name -> value to substitute.

    Returns:
        The interpolated string.
    """

    def replace(match: re.Match) -> str:
        name = match.group(1)
        if name in params:
            return format_value(params[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, template)
