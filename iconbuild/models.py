"""Core data models shared across iconbuild components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Sequence


@dataclass(frozen=True)
class IconSource:
    """One discovered icon file and its raw markup."""

    path: Path
    identifier: str
    markup: str


@dataclass
class MarkupNode:
    """Parsed markup element with ordered attributes and children."""

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["MarkupNode"] = field(default_factory=list)
    text: str = ""
    # Character data after this element's end tag, up to the next sibling.
    tail: str = ""


@dataclass(frozen=True)
class ComponentModule:
    """Generated component source for a single icon."""

    identifier: str
    source: str
    typescript: bool = False

    @property
    def filename(self) -> str:
        suffix = ".tsx" if self.typescript else ".js"
        return f"{self.identifier}{suffix}"


@dataclass(frozen=True)
class IndexModule:
    """Re-exports every component module in discovery order."""

    identifiers: Sequence[str]
    typescript: bool = False

    @property
    def filename(self) -> str:
        return "index.ts" if self.typescript else "index.js"

    def render(self) -> str:
        lines = [
            f"export {{default as {name}}} from './components/{name}';\n"
            for name in self.identifiers
        ]
        return "".join(lines) or "\n"
