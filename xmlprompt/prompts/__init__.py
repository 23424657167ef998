"""Prompt formatting modules.

This package provides the low-level helpers used to turn values into
structured prompts using XML-like tags.
"""

from xmlprompt.prompts.parser import (
    DEFAULT_MAX_DEPTH,
    escape_xml,
    object_to_xml,
    simple_xml_tag,
)
from xmlprompt.prompts.template import (
    extract_placeholders,
    replace_template_variables,
    to_json,
)

__all__ = [
    # XML utilities
    "DEFAULT_MAX_DEPTH",
    "escape_xml",
    "object_to_xml",
    "simple_xml_tag",
    # Template interpolation
    "extract_placeholders",
    "replace_template_variables",
    "to_json",
]
