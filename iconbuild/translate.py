"""Maps SVG attribute names and values onto their React equivalents."""

from __future__ import annotations

import re
from typing import Dict, Mapping, Tuple

from .models import MarkupNode

# Attributes whose plain name collides with a reserved JavaScript/React identifier.
RESERVED_ATTRIBUTES: Dict[str, str] = {
    "class": "className",
    "for": "htmlFor",
}

COLOR_ATTRIBUTES = frozenset({"fill", "stroke"})
CURRENT_COLOR = "currentColor"

_SEPARATOR_PATTERN = re.compile(r"[-:]+([A-Za-z0-9]?)")


def camelize(name: str) -> str:
    """Drop hyphens and namespace colons, upper-casing the following character."""
    return _SEPARATOR_PATTERN.sub(lambda match: match.group(1).upper(), name)


def translate_attribute(name: str, value: str) -> Tuple[str, str]:
    """Return the React attribute name/value pair for an SVG attribute."""
    if "-" in name or ":" in name:
        return camelize(name), value
    if name in RESERVED_ATTRIBUTES:
        return RESERVED_ATTRIBUTES[name], value
    if name in COLOR_ATTRIBUTES:
        if value and value != "none":
            return name, CURRENT_COLOR
        return name, value
    return name, value


def translate_attributes(attributes: Mapping[str, str]) -> Dict[str, str]:
    translated: Dict[str, str] = {}
    for name, value in attributes.items():
        new_name, new_value = translate_attribute(name, value)
        translated[new_name] = new_value
    return translated


def translate_tree(node: MarkupNode) -> MarkupNode:
    """Translate attributes on ``node`` and every descendant, keeping child order."""
    return MarkupNode(
        tag=node.tag,
        attributes=translate_attributes(node.attributes),
        children=[translate_tree(child) for child in node.children],
        text=node.text,
        tail=node.tail,
    )


__all__ = [
    "COLOR_ATTRIBUTES",
    "CURRENT_COLOR",
    "RESERVED_ATTRIBUTES",
    "camelize",
    "translate_attribute",
    "translate_attributes",
    "translate_tree",
]
