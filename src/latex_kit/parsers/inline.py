# parsers/inline.py

"""Inline LaTeX markup to display HTML.

Applied to paragraph text and list items only. Math and code payloads are
passed through verbatim by their extractors.
"""

import re

# (pattern, replacement, count); count=0 replaces every occurrence.
INLINE_RULES: list[tuple[re.Pattern[str], str, int]] = [
    (re.compile(r"\\textbf\{([^}]+)\}"), r"<strong>\1</strong>", 0),
    (re.compile(r"\\textit\{([^}]+)\}"), r"<em>\1</em>", 0),
    (re.compile(r"\\emph\{([^}]+)\}"), r"<em>\1</em>", 0),
    (re.compile(r"\\underline\{([^}]+)\}"), r"<u>\1</u>", 0),
    (re.compile(r"\\cite\{([^}]+)\}"), r"[Citation: \1]", 0),
    (re.compile(r"\\ref\{([^}]+)\}"), r"[Ref: \1]", 0),
    (re.compile(r"\\url\{([^}]+)\}"), r"<a href='\1'>\1</a>", 0),
    (re.compile(r"\\href\{([^}]+)\}\{([^}]+)\}"), r"<a href='\1'>\2</a>", 0),
    (re.compile(r"\\footnote\{([^}]+)\}"), "", 0),
    # Only the first explicit line break becomes <br>.
    (re.compile(r"\\\\"), "<br>", 1),
    (re.compile(r"~"), " ", 0),
    (re.compile(r"\\%"), "%", 0),
    (re.compile(r"\\&"), "&", 0),
    (re.compile(r"\\_"), "_", 0),
    (re.compile(r"\\#"), "#", 0),
    (re.compile(r"\\\{"), "{", 0),
    (re.compile(r"\\\}"), "}", 0),
    (re.compile(r"\*\*([^*]+)\*\*"), r"<strong>\1</strong>", 0),
]

LATEX_COMMAND_PATTERN = re.compile(r"\\[a-zA-Z]+(\{[^}]*\})?")

# Swallows the whole backslash run in front of a command, so removal never
# leaves a stray backslash next to the letters that follow.
STRIP_COMMAND_PATTERN = re.compile(r"(?<!\\)\\+[a-zA-Z]+(\{[^}]*\})?")


def clean_latex_text(text: str) -> str:
    for pattern, replacement, count in INLINE_RULES:
        text = pattern.sub(replacement, text, count=count)
    return STRIP_COMMAND_PATTERN.sub("", text).strip()


def escape_dollars(text: str) -> str:
    """Escape `$` for markup where a renderer treats it as a math delimiter."""
    return text.replace("$", "&#36;")
