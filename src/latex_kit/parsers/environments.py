# parsers/environments.py

"""Extractors for math, code and list environments.

A chunk reaches an extractor once the classifier has decided its category.
Each extractor re-checks which concrete environment is present, because the
classifier only looks at the start of the chunk. The payload is whatever the
extractor's own pattern captures; text after the closing tag is dropped.
"""

import logging
import re
from collections.abc import Callable

from .inline import clean_latex_text
from .models import CodeBlock, ListBlock, MathBlock

logger = logging.getLogger(__name__)

# Checked in order; the first marker present in the chunk decides the variant.
MATH_VARIANTS: list[tuple[str, re.Pattern[str]]] = [
    ("\\begin{equation}", re.compile(r"\\begin\{equation\}([\s\S]*?)\\end\{equation\}")),
    ("\\begin{align}", re.compile(r"\\begin\{align\}([\s\S]*?)\\end\{align\}")),
    ("\\[", re.compile(r"\\\[([\s\S]*?)\\\]")),
    ("$$", re.compile(r"\$\$([\s\S]*?)\$\$")),
]

VERBATIM_PATTERN = re.compile(r"\\begin\{verbatim\}([\s\S]*?)\\end\{verbatim\}")
LSTLISTING_PATTERN = re.compile(
    r"\\begin\{lstlisting\}(?:\[([^\]]*)\])?([\s\S]*?)\\end\{lstlisting\}"
)
LSTLISTING_LANGUAGE_PATTERN = re.compile(r"language=(\w+)")
MINTED_PATTERN = re.compile(r"\\begin\{minted\}\{([^}]*)\}([\s\S]*?)\\end\{minted\}")

LIST_ITEM_PATTERN = re.compile(
    r"\\item\s+([\s\S]*?)(?=\\item|\\end\{(?:itemize|enumerate)\})"
)


def extract_math(chunk: str) -> MathBlock | None:
    for marker, pattern in MATH_VARIANTS:
        if marker not in chunk:
            continue
        match = pattern.search(chunk)
        latex = match.group(1).strip() if match else ""
        if not latex:
            logger.debug("Skipping empty or unclosed math (%s)", marker)
            return None
        return MathBlock(latex=latex)
    return None


def extract_code(chunk: str, default_language: str = "text") -> CodeBlock | None:
    language = default_language
    source = ""

    if "\\begin{verbatim}" in chunk:
        match = VERBATIM_PATTERN.search(chunk)
        if match:
            source = match.group(1).strip()
    elif "\\begin{lstlisting}" in chunk:
        match = LSTLISTING_PATTERN.search(chunk)
        if match:
            source = match.group(2).strip()
            options = match.group(1)
            language_match = (
                LSTLISTING_LANGUAGE_PATTERN.search(options) if options else None
            )
            if language_match:
                language = language_match.group(1)
    elif "\\begin{minted}" in chunk:
        match = MINTED_PATTERN.search(chunk)
        if match:
            language = match.group(1).strip() or default_language
            source = match.group(2).strip()

    if not source:
        logger.debug("Skipping empty or unclosed code environment")
        return None
    return CodeBlock(language=language, source=source)


def extract_list(
    chunk: str,
    clean: Callable[[str], str] = clean_latex_text,
) -> ListBlock | None:
    ordered = "\\begin{enumerate}" in chunk
    items = [clean(match.group(1).strip()) for match in LIST_ITEM_PATTERN.finditer(chunk)]

    if not items:
        logger.debug("Skipping list environment without items")
        return None
    return ListBlock(ordered=ordered, items=items)
