"""xmlprompt: build XML-structured LLM prompts from plain Python data."""

from xmlprompt.core.errors import (
    MissingPromptValuesError,
    PromptError,
    SerializationDepthError,
)
from xmlprompt.prompts import (
    escape_xml,
    extract_placeholders,
    object_to_xml,
    replace_template_variables,
)
from xmlprompt.core.configs import PromptSettings, get_default_settings, get_settings
from xmlprompt.core.prompt_builder import Example, PromptBuilder, prompt_builder

__version__ = "0.1.0"

__all__ = [
    "Example",
    "MissingPromptValuesError",
    "PromptBuilder",
    "PromptError",
    "PromptSettings",
    "SerializationDepthError",
    "escape_xml",
    "extract_placeholders",
    "get_default_settings",
    "get_settings",
    "object_to_xml",
    "prompt_builder",
    "replace_template_variables",
]
