# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    CodeBlock,
    ContentBlock,
    DocumentParser,
    HeadingBlock,
    LatexParser,
    ListBlock,
    MathBlock,
    ParagraphBlock,
    ParsedDocument,
    ParserConfig,
    block_to_dict,
    clean_latex_text,
    escape_dollars,
    load_parser_config,
    parse_latex,
)

# Search
from .search import SearchResult, search_tutorials

# Table of contents
from .toc import TocEntry, build_toc

# Tutorials
from .tutorials import Tutorial, TutorialStore

__all__ = [
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DocumentParser",
    "LatexParser",
    "parse_latex",
    "ParserConfig",
    "load_parser_config",
    "clean_latex_text",
    "escape_dollars",
    "ParsedDocument",
    "ContentBlock",
    "HeadingBlock",
    "ParagraphBlock",
    "MathBlock",
    "CodeBlock",
    "ListBlock",
    "block_to_dict",
    # Search
    "SearchResult",
    "search_tutorials",
    # Table of contents
    "TocEntry",
    "build_toc",
    # Tutorials
    "Tutorial",
    "TutorialStore",
]
