"""{{placeholder}} interpolation for instruction templates."""

import json
import re
from typing import Any, Mapping, Tuple

# ASCII word characters only, like the JavaScript \w
PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}", re.ASCII)


def to_json(value: Any) -> str:
    """
    Compact JSON text for ``value``.

    Raises TypeError if it is not JSON-like, and ValueError for NaN or
    infinity, which have no JSON form.
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def replace_template_variables(template: str, values: Mapping[str, Any]) -> str:
    """
    Replace {{name}} placeholders with the JSON form of ``values[name]``.

    Placeholders whose name is not in ``values`` are kept as-is, so a
    template can be filled in several passes. The inserted text is not
    XML-escaped.

    Args:
        template: Instruction text containing {{name}} placeholders
        values: Mapping of placeholder names to JSON-like values

    Returns:
        The interpolated template
    """

    def _substitute(match: "re.Match[str]") -> str:
        key = match.group(1)
        if key in values:
            return to_json(values[key])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_substitute, template)


def extract_placeholders(template: str) -> Tuple[str, ...]:
    """Return placeholder names in order of first appearance, without repeats."""
    return tuple(dict.fromkeys(PLACEHOLDER_PATTERN.findall(template)))
