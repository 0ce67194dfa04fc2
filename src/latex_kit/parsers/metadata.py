# parsers/metadata.py

"""Title, metadata and read-time extraction.

Each marker is searched independently over the whole document and the first
occurrence wins. Captures are verbatim: no inline cleaning is applied and a
literal `}` ends a brace argument.
"""

import math
import re
from dataclasses import dataclass, field

TITLE_PATTERN = re.compile(r"\\title\{([^}]+)\}")
DATE_PATTERN = re.compile(r"\\date\{([^}]+)\}")
CATEGORY_PATTERN = re.compile(r"\\category\{([^}]+)\}")
KEYWORDS_PATTERN = re.compile(r"\\keywords\{([^}]+)\}")
ABSTRACT_PATTERN = re.compile(r"\\begin\{abstract\}([\s\S]*?)\\end\{abstract\}")


@dataclass(frozen=True)
class Metadata:
    description: str | None = None
    date: str | None = None
    category: str | None = None
    tags: list[str] = field(default_factory=list)


def _first_group(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    return match.group(1) if match else None


def extract_title(text: str) -> str | None:
    return _first_group(TITLE_PATTERN, text)


def extract_description(text: str) -> str | None:
    match = ABSTRACT_PATTERN.search(text)
    return match.group(1).strip() if match else None


def extract_date(text: str) -> str | None:
    return _first_group(DATE_PATTERN, text)


def extract_category(text: str) -> str | None:
    return _first_group(CATEGORY_PATTERN, text)


def extract_tags(text: str) -> list[str]:
    keywords = _first_group(KEYWORDS_PATTERN, text)
    if keywords is None:
        return []
    return [tag.strip() for tag in keywords.split(",")]


def extract_metadata(text: str) -> Metadata:
    return Metadata(
        description=extract_description(text),
        date=extract_date(text),
        category=extract_category(text),
        tags=extract_tags(text),
    )


def estimate_read_time(text: str, words_per_minute: int = 200) -> str:
    """Minutes to read the raw source, rounded up: "<n> min read".

    Words are the pieces left by splitting on whitespace runs, so markup
    counts too and an empty string still counts as one word.
    """
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be > 0")
    word_count = len(re.split(r"\s+", text))
    minutes = math.ceil(word_count / words_per_minute)
    return f"{minutes} min read"
