from collections.abc import Iterable
from dataclasses import dataclass

from latex_kit.parsers.models import (
    CodeBlock,
    ContentBlock,
    HeadingBlock,
    ListBlock,
    MathBlock,
    ParagraphBlock,
)


@dataclass(frozen=True)
class TocEntry:
    id: str
    title: str
    level: int


def build_toc(blocks: Iterable[ContentBlock], max_level: int = 3) -> list[TocEntry]:
    """Navigation entries for every heading up to `max_level`, in document order.

    Ids are not deduplicated; repeated titles yield repeated ids.
    """
    entries: list[TocEntry] = []
    for block in blocks:
        if isinstance(block, HeadingBlock):
            if block.level <= max_level:
                entries.append(
                    TocEntry(id=block.anchor, title=block.text, level=block.level)
                )
        elif not isinstance(block, (ParagraphBlock, MathBlock, CodeBlock, ListBlock)):
            raise TypeError(f"Unknown content block: {type(block).__name__}")
    return entries
