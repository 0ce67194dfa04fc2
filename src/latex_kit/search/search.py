"""Exact-match search over parsed tutorials."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from time import monotonic

from latex_kit.observability import names
from latex_kit.observability.base import MetricsHook, NoOpMetricsHook
from latex_kit.parsers.models import (
    CodeBlock,
    ContentBlock,
    HeadingBlock,
    ListBlock,
    MathBlock,
    ParagraphBlock,
)
from latex_kit.tutorials.tutorial import Tutorial

logger = logging.getLogger(__name__)

TITLE_WEIGHT = 10.0
DESCRIPTION_WEIGHT = 5.0
TAG_WEIGHT = 3.0
CATEGORY_WEIGHT = 3.0
BODY_OCCURRENCE_WEIGHT = 1.0

HTML_TAG_PATTERN = re.compile(r"<[^>]+>")


@dataclass(frozen=True)
class SearchResult:
    url: str
    title: str
    relevance: float
    description: str
    category: str
    tags: list[str] = field(default_factory=list)
    section_title: str | None = None
    match_context: str | None = None


def block_text(block: ContentBlock) -> str:
    """Searchable plain text of a block."""
    if isinstance(block, HeadingBlock):
        return block.text
    if isinstance(block, ParagraphBlock):
        return HTML_TAG_PATTERN.sub("", block.html)
    if isinstance(block, MathBlock):
        return block.latex
    if isinstance(block, CodeBlock):
        return block.source
    if isinstance(block, ListBlock):
        return "\n".join(HTML_TAG_PATTERN.sub("", item) for item in block.items)
    raise TypeError(f"Unknown content block: {type(block).__name__}")


def _snippet(text: str, start: int, length: int, context_chars: int) -> str:
    left = max(0, start - context_chars)
    right = min(len(text), start + length + context_chars)
    snippet = " ".join(text[left:right].split())
    if left > 0:
        snippet = "..." + snippet
    if right < len(text):
        snippet = snippet + "..."
    return snippet


def _score_tutorial(
    tutorial: Tutorial, needle: str, context_chars: int
) -> SearchResult | None:
    relevance = 0.0
    if needle in tutorial.title.lower():
        relevance += TITLE_WEIGHT
    if needle in tutorial.description.lower():
        relevance += DESCRIPTION_WEIGHT
    relevance += TAG_WEIGHT * sum(1 for tag in tutorial.tags if needle in tag.lower())
    if needle in tutorial.category.lower():
        relevance += CATEGORY_WEIGHT

    section_title: str | None = None
    match_context: str | None = None
    current_heading: str | None = None
    # Offsets must come from the original text; lower() can change its length.
    pattern = re.compile(re.escape(needle), re.IGNORECASE)

    for block in tutorial.content:
        text = block_text(block)
        matches = list(pattern.finditer(text))
        occurrences = len(matches)

        if matches and match_context is None:
            # A heading that matches is its own section.
            section_title = text if isinstance(block, HeadingBlock) else current_heading
            first = matches[0]
            match_context = _snippet(
                text, first.start(), first.end() - first.start(), context_chars
            )

        relevance += BODY_OCCURRENCE_WEIGHT * occurrences
        if isinstance(block, HeadingBlock):
            current_heading = block.text

    if relevance == 0:
        return None

    return SearchResult(
        url=tutorial.url,
        title=tutorial.title,
        relevance=relevance,
        description=tutorial.description,
        category=tutorial.category,
        tags=list(tutorial.tags),
        section_title=section_title,
        match_context=match_context,
    )


def search_tutorials(
    tutorials: Iterable[Tutorial],
    query: str,
    *,
    limit: int | None = None,
    context_chars: int = 60,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[SearchResult]:
    """Case-insensitive exact-substring search, best match first.

    Args:
        tutorials: Tutorials to search, e.g. `TutorialStore.all()`.
        query: Free text. Surrounding whitespace is ignored; blank gives [].
        limit: Maximum number of results. None returns all matches.
        context_chars: Characters kept either side of the first body hit.

    Returns:
        Results ordered by relevance (highest first), then by title.

    Raises:
        ValueError: If limit or context_chars is negative.
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must be >= 0")
    if context_chars < 0:
        raise ValueError("context_chars must be >= 0")

    needle = query.strip().lower()
    if not needle:
        return []

    start = monotonic()
    results = [
        result
        for result in (
            _score_tutorial(tutorial, needle, context_chars) for tutorial in tutorials
        )
        if result is not None
    ]
    results.sort(key=lambda r: (-r.relevance, r.title))
    if limit is not None:
        results = results[:limit]

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.SEARCH_DURATION, elapsed_ms)
    metrics_hook.increment(names.SEARCH_QUERIES_TOTAL)
    metrics_hook.record_gauge(names.SEARCH_RESULTS_RETURNED, len(results))

    logger.debug(
        "Search: query=%r, results=%d, latency=%.0fms", query, len(results), elapsed_ms
    )
    return results
