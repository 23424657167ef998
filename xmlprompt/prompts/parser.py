"""XML formatting utilities for prompt construction.

Converts JSON-like values (strings, numbers, booleans, None, lists and
mappings) into flat XML-like markup that models can read back easily.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, Optional

from xmlprompt.core.errors import SerializationDepthError

DEFAULT_MAX_DEPTH = 64


def escape_xml(text: str) -> str:
    """
    Escape special XML characters in content.

    Args:
        text: Raw text that may contain XML special characters

    Returns:
        Text with &, <, >, " and ' replaced by their entities

    Note:
        Order matters: & must be escaped first to avoid double-escaping
    """
    return (text
            .replace('&', '&amp;')   # Must be first
            .replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace('"', '&quot;')
            .replace("'", '&apos;'))


def simple_xml_tag(tag: str, content: str, index: Optional[int] = None) -> str:
    """
    Create a simple single-line XML element.

    Args:
        tag: Tag name (without angle brackets)
        content: Already formatted content
        index: Optional position, rendered as an index="N" attribute

    Returns:
        Single-line XML element
    """
    attrs = f' index="{index}"' if index is not None else ""
    return f"<{tag}{attrs}>{content}</{tag}>"


def _format_scalar(value: Any) -> str:
    # bool is checked first since it subclasses int
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_mapping(obj: Any) -> Optional[Mapping]:
    if isinstance(obj, Mapping):
        return obj
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    return None


def object_to_xml(
    obj: Any,
    index: Optional[int] = None,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    _depth: int = 0,
) -> str:
    """
    Serialize a JSON-like value into XML-like markup.

    Strings are escaped, numbers and booleans are rendered literally and None
    renders as nothing. Lists contribute only their items, each serialized
    with its position as ``index``. Mappings produce one element per key; when
    ``index`` is given, every element of that mapping gets an ``index="N"``
    attribute. The index is not forwarded to nested values.

    Args:
        obj: Value to serialize
        index: Position of ``obj`` within an enclosing list, if any
        max_depth: Maximum nesting depth before giving up

    Returns:
        Markup string (empty for None, empty lists and empty mappings)

    Raises:
        SerializationDepthError: If nesting exceeds ``max_depth``, which is
            what a cyclic value ends up doing
    """
    if isinstance(obj, str):
        return escape_xml(obj)

    if isinstance(obj, (bool, int, float)):
        return _format_scalar(obj)

    if obj is None:
        return ""

    if isinstance(obj, (list, tuple)):
        if _depth >= max_depth:
            raise SerializationDepthError(max_depth)
        return "".join(
            object_to_xml(item, i, max_depth=max_depth, _depth=_depth + 1)
            for i, item in enumerate(obj)
        )

    mapping = _as_mapping(obj)
    if mapping is not None:
        if _depth >= max_depth:
            raise SerializationDepthError(max_depth)
        return "".join(
            simple_xml_tag(
                str(key),
                object_to_xml(value, max_depth=max_depth, _depth=_depth + 1),
                index,
            )
            for key, value in mapping.items()
        )

    return escape_xml(str(obj))
