# parsers/models.py

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal

HeadingLevel = Literal[1, 2, 3]


def heading_id(title: str) -> str:
    """Anchor id for a heading: lowercased, whitespace runs collapsed to '-'."""
    return re.sub(r"\s+", "-", title.lower())


@dataclass(frozen=True)
class HeadingBlock:
    kind: ClassVar[str] = "heading"

    level: HeadingLevel
    text: str

    @property
    def anchor(self) -> str:
        return heading_id(self.text)


@dataclass(frozen=True)
class ParagraphBlock:
    kind: ClassVar[str] = "paragraph"

    html: str


@dataclass(frozen=True)
class MathBlock:
    """Display-mode math. `latex` is the raw source, never escaped."""

    kind: ClassVar[str] = "math"

    latex: str


@dataclass(frozen=True)
class CodeBlock:
    kind: ClassVar[str] = "code"

    language: str
    source: str


@dataclass(frozen=True)
class ListBlock:
    kind: ClassVar[str] = "list"

    ordered: bool
    items: list[str]


ContentBlock = HeadingBlock | ParagraphBlock | MathBlock | CodeBlock | ListBlock


@dataclass(frozen=True)
class ParsedDocument:
    title: str
    read_time: str
    content: list[ContentBlock]
    description: str | None = None
    category: str | None = None
    date: str | None = None
    tags: list[str] = field(default_factory=list)


def block_to_dict(block: ContentBlock) -> dict[str, Any]:
    """JSON-friendly form of a block, tagged with its kind under "type"."""
    if isinstance(block, HeadingBlock):
        return {"type": block.kind, "level": block.level, "text": block.text}
    if isinstance(block, ParagraphBlock):
        return {"type": block.kind, "html": block.html}
    if isinstance(block, MathBlock):
        return {"type": block.kind, "latex": block.latex}
    if isinstance(block, CodeBlock):
        return {"type": block.kind, "language": block.language, "source": block.source}
    if isinstance(block, ListBlock):
        return {"type": block.kind, "ordered": block.ordered, "items": list(block.items)}
    raise TypeError(f"Unknown content block: {type(block).__name__}")
