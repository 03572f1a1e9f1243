"""Tests for iconbuild.translate."""

from __future__ import annotations

import pytest

from iconbuild.models import MarkupNode
from iconbuild.translate import camelize, translate_attribute, translate_attributes, translate_tree


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("first-attr", "firstAttr"),
        ("stroke-linejoin", "strokeLinejoin"),
        ("xlink:href", "xlinkHref"),
        ("xml:space", "xmlSpace"),
        ("xmlns:xlink", "xmlnsXlink"),
        ("viewBox", "viewBox"),
    ],
)
def test_camelize(name: str, expected: str) -> None:
    assert camelize(name) == expected


def test_translate_attribute_rewrites_names() -> None:
    assert translate_attribute("stroke-width", "2") == ("strokeWidth", "2")
    assert translate_attribute("xlink:href", "link") == ("xlinkHref", "link")
    assert translate_attribute("class", "class") == ("className", "class")
    assert translate_attribute("for", "label") == ("htmlFor", "label")


def test_translate_attribute_replaces_colors_with_current_color() -> None:
    assert translate_attribute("fill", "#000000") == ("fill", "currentColor")
    assert translate_attribute("stroke", "#FFF") == ("stroke", "currentColor")
    assert translate_attribute("fill", "url(#gradient)") == ("fill", "currentColor")


def test_translate_attribute_keeps_none_and_empty_colors() -> None:
    assert translate_attribute("fill", "none") == ("fill", "none")
    assert translate_attribute("stroke", "none") == ("stroke", "none")
    assert translate_attribute("fill", "") == ("fill", "")


def test_translate_attribute_passes_unknown_attributes_through() -> None:
    assert translate_attribute("d", "M0 0h24") == ("d", "M0 0h24")
    assert translate_attribute("fillRule", "evenodd") == ("fillRule", "evenodd")


def test_translate_attribute_is_idempotent_on_target_names() -> None:
    once = translate_attribute("stroke-width", "2")
    assert translate_attribute(*once) == once
    assert translate_attribute("className", "a") == ("className", "a")


def test_translate_attributes_preserves_order() -> None:
    translated = translate_attributes({"class": "a", "fill-rule": "evenodd", "fill": "red"})
    assert list(translated) == ["className", "fillRule", "fill"]
    assert translated["fill"] == "currentColor"


def test_translate_tree_applies_at_every_depth() -> None:
    tree = MarkupNode(
        tag="svg",
        attributes={"xmlns:xlink": "http://www.w3.org/1999/xlink"},
        children=[
            MarkupNode(
                tag="g",
                attributes={"first-attr": "val1"},
                children=[
                    MarkupNode(tag="g", attributes={"second-attr": "val2"}),
                    MarkupNode(tag="use", attributes={"xlink:href": "#a"}),
                ],
            )
        ],
    )

    result = translate_tree(tree)

    assert result.attributes == {"xmlnsXlink": "http://www.w3.org/1999/xlink"}
    group = result.children[0]
    assert group.attributes == {"firstAttr": "val1"}
    assert [child.tag for child in group.children] == ["g", "use"]
    assert group.children[0].attributes == {"secondAttr": "val2"}
    assert group.children[1].attributes == {"xlinkHref": "#a"}
    assert tree.children[0].attributes == {"first-attr": "val1"}
