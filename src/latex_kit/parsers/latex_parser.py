# parsers/latex_parser.py

import logging
import re
from collections import Counter
from time import monotonic

from latex_kit.observability import names
from latex_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .config import ParserConfig
from .environments import extract_code, extract_list, extract_math
from .inline import clean_latex_text
from .metadata import estimate_read_time, extract_metadata, extract_title
from .models import ContentBlock, HeadingBlock, ParagraphBlock, ParsedDocument
from .sections import extract_body, split_sections

logger = logging.getLogger(__name__)

CHUNK_SEPARATOR = re.compile(r"\n\s*\n")

MATH_OPENERS = ("\\begin{equation}", "\\begin{align}", "\\[")
CODE_OPENERS = ("\\begin{verbatim}", "\\begin{lstlisting}", "\\begin{minted}")
LIST_OPENERS = ("\\begin{itemize}", "\\begin{enumerate}")


def classify_chunks(
    content: str, config: ParserConfig | None = None
) -> list[ContentBlock]:
    """Split segment content on blank lines and turn each chunk into a block.

    Only the start of a chunk is inspected (plus `$$` anywhere), in priority
    order math, code, list, paragraph. Environment chunks whose payload is
    empty produce no block.
    """
    config = config or ParserConfig()
    blocks: list[ContentBlock] = []

    for raw_chunk in CHUNK_SEPARATOR.split(content):
        chunk = raw_chunk.strip()
        if not chunk:
            continue

        block: ContentBlock | None
        if chunk.startswith(MATH_OPENERS) or "$$" in chunk:
            block = extract_math(chunk)
        elif chunk.startswith(CODE_OPENERS):
            block = extract_code(chunk, default_language=config.default_code_language)
        elif chunk.startswith(LIST_OPENERS):
            block = extract_list(chunk)
        else:
            block = ParagraphBlock(html=clean_latex_text(chunk))

        if block is not None:
            blocks.append(block)

    return blocks


class LatexParser(DocumentParser):
    """
    Heuristic LaTeX parser.
    - Regex rules, no LaTeX grammar
    - Sections become headings followed by their classified chunks
    - Falls back to the document body when there are no sections
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or ParserConfig()
        self.metrics_hook = metrics_hook

    def parse(self, source: str | bytes) -> ParsedDocument:
        start = monotonic()
        text = (
            source.decode("utf-8", errors="replace")
            if isinstance(source, bytes)
            else source
        )

        metadata = extract_metadata(text)
        content = self._extract_content(text)

        document = ParsedDocument(
            title=extract_title(text) or self.config.untitled_title,
            description=metadata.description,
            category=metadata.category,
            tags=metadata.tags,
            date=metadata.date,
            read_time=estimate_read_time(text, self.config.words_per_minute),
            content=content,
        )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.LATEX_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.LATEX_DOCUMENTS_PARSED_TOTAL)
        for kind, count in Counter(block.kind for block in content).items():
            self.metrics_hook.increment(
                names.LATEX_BLOCKS_CREATED, count, labels={"kind": kind}
            )

        logger.info(
            "Parsed LaTeX document: title=%r, blocks=%d, latency=%.0fms",
            document.title,
            len(content),
            elapsed_ms,
        )
        return document

    def _extract_content(self, text: str) -> list[ContentBlock]:
        content: list[ContentBlock] = []

        segments = split_sections(text)
        for segment in segments:
            content.append(HeadingBlock(level=segment.level, text=segment.title))
            content.extend(classify_chunks(segment.content, self.config))

        if not segments:
            body = extract_body(text)
            if body is not None:
                logger.debug("No section markers, using document body")
                content.extend(classify_chunks(body, self.config))

        if not content:
            logger.debug("No content extracted, using placeholder paragraph")
            self.metrics_hook.increment(names.LATEX_PLACEHOLDER_CONTENT_TOTAL)
            content.append(ParagraphBlock(html=self.config.empty_content_message))

        return content


def parse_latex(source: str | bytes, config: ParserConfig | None = None) -> ParsedDocument:
    return LatexParser(config=config).parse(source)
