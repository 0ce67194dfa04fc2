"""Heuristic LaTeX to content-block conversion.

Example:
    >>> from latex_kit.parsers import parse_latex
    >>>
    >>> doc = parse_latex(r"\\title{Graphs}\\section{Intro}Hello \\textbf{world}.")
    >>> doc.title
    'Graphs'
    >>> [block.kind for block in doc.content]
    ['heading', 'paragraph']
"""

from .base import DocumentParser
from .config import ParserConfig, load_parser_config
from .inline import clean_latex_text, escape_dollars
from .latex_parser import LatexParser, classify_chunks, parse_latex
from .models import (
    CodeBlock,
    ContentBlock,
    HeadingBlock,
    ListBlock,
    MathBlock,
    ParagraphBlock,
    ParsedDocument,
    block_to_dict,
    heading_id,
)

__all__ = [
    # Parser
    "DocumentParser",
    "LatexParser",
    "parse_latex",
    "classify_chunks",
    # Config
    "ParserConfig",
    "load_parser_config",
    # Inline text
    "clean_latex_text",
    "escape_dollars",
    # Types
    "ParsedDocument",
    "ContentBlock",
    "HeadingBlock",
    "ParagraphBlock",
    "MathBlock",
    "CodeBlock",
    "ListBlock",
    "block_to_dict",
    "heading_id",
]
