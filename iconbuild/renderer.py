"""Renders optimized SVG markup as React component source."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from jinja2 import Environment, FileSystemLoader

from .markup import parse_markup
from .models import ComponentModule, MarkupNode
from .translate import camelize, translate_tree

SIZE_FALLBACK = "'1em'"
_NUMERIC_PATTERN = re.compile(r"^-?(\d+\.?\d*|\.\d+)$")
_TEMPLATE_NAME = "component.j2"


def js_string(value: str) -> str:
    """Quote ``value`` as a single-quoted JavaScript string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


def size_literal(value: Optional[str]) -> str:
    """Return the JavaScript literal a declared width/height is bound to."""
    if value is None:
        return "undefined"
    stripped = value.strip()
    if _NUMERIC_PATTERN.match(stripped):
        return stripped
    return js_string(stripped)


def style_object(style: str) -> str:
    """Convert an inline CSS declaration list into a JSX style object expression."""
    entries: List[str] = []
    for declaration in style.split(";"):
        if ":" not in declaration:
            continue
        prop, value = declaration.split(":", 1)
        prop = prop.strip()
        value = value.strip()
        if not prop:
            continue
        key = js_string(prop) if prop.startswith("--") else camelize(prop)
        entries.append(f"{key}: {js_string(value)}")
    return "{{" + ", ".join(entries) + "}}"


class ComponentRenderer:
    """Turns optimized markup into the source of a default-exported component."""

    def __init__(self, *, typescript: bool = False, templates_dir: Path | None = None) -> None:
        self.typescript = typescript
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(self, identifier: str, optimized_markup: str) -> str:
        """Return component source for ``identifier``; raises ParseError on bad markup."""
        root = translate_tree(parse_markup(optimized_markup))
        width, height = self._pop_dimensions(root)
        template = self._env.get_template(_TEMPLATE_NAME)
        return template.render(
            identifier=identifier,
            typescript=self.typescript,
            width=size_literal(width),
            height=size_literal(height),
            fallback=SIZE_FALLBACK,
            body=self._serialize_root(root),
        )

    def render_module(self, identifier: str, optimized_markup: str) -> ComponentModule:
        return ComponentModule(
            identifier=identifier,
            source=self.render(identifier, optimized_markup),
            typescript=self.typescript,
        )

    @staticmethod
    def _pop_dimensions(root: MarkupNode) -> Tuple[Optional[str], Optional[str]]:
        width = root.attributes.pop("width", None)
        height = root.attributes.pop("height", None)
        return width, height

    def _serialize_root(self, root: MarkupNode) -> str:
        extra = ["width={widthFromSvg}", "height={heightFromSvg}", "{...props}"]
        return self._serialize(root, extra)

    def _serialize(self, node: MarkupNode, extra: Optional[List[str]] = None) -> str:
        parts = [node.tag]
        parts.extend(self._serialize_attributes(node.attributes))
        if extra:
            parts.extend(extra)
        opening = " ".join(parts)

        inner: List[str] = []
        if node.text:
            inner.append("{" + js_string(node.text) + "}")
        for child in node.children:
            inner.append(self._serialize(child))
            if child.tail:
                inner.append("{" + js_string(child.tail) + "}")
        if not inner:
            return f"<{opening} />"
        return f"<{opening}>{''.join(inner)}</{node.tag}>"

    @staticmethod
    def _serialize_attributes(attributes: Dict[str, str]) -> List[str]:
        rendered: List[str] = []
        for name, value in attributes.items():
            if name == "style":
                rendered.append(f"style={style_object(value)}")
            elif '"' in value or "\n" in value:
                rendered.append(f"{name}={{{js_string(value)}}}")
            else:
                rendered.append(f'{name}="{value}"')
        return rendered


__all__ = ["ComponentRenderer", "js_string", "size_literal", "style_object"]
