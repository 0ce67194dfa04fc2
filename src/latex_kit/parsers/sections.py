# parsers/sections.py

import re
from dataclasses import dataclass

from .models import HeadingLevel

SECTION_LEVELS: dict[str, HeadingLevel] = {
    "section": 1,
    "subsection": 2,
    "subsubsection": 3,
}

# A segment ends at the next marker of any level, at \end{document} or at
# the end of the string, whichever comes first.
SECTION_PATTERN = re.compile(
    r"\\(section|subsection|subsubsection)\{([^}]+)\}"
    r"([\s\S]*?)"
    r"(?=\\(?:section|subsection|subsubsection)\{|\\end\{document\}|\Z)"
)
DOCUMENT_BODY_PATTERN = re.compile(r"\\begin\{document\}([\s\S]*?)\\end\{document\}")


@dataclass(frozen=True)
class Segment:
    level: HeadingLevel
    title: str
    content: str


def split_sections(text: str) -> list[Segment]:
    return [
        Segment(
            level=SECTION_LEVELS[match.group(1)],
            title=match.group(2),
            content=match.group(3).strip(),
        )
        for match in SECTION_PATTERN.finditer(text)
    ]


def extract_body(text: str) -> str | None:
    """Interior of the document environment, or None when it is missing."""
    match = DOCUMENT_BODY_PATTERN.search(text)
    return match.group(1) if match else None
