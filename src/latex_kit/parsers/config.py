# parsers/config.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ParserConfig(BaseModel):
    """Placeholders and constants used by LatexParser.

    Explicit. No values are read from the environment.
    """

    untitled_title: str = Field(default="Untitled Tutorial", min_length=1)
    empty_content_message: str = Field(
        default="No content could be extracted from this LaTeX document.",
        min_length=1,
    )
    default_code_language: str = Field(default="text", min_length=1)
    words_per_minute: int = Field(default=200, gt=0)

    class Config:
        extra = "forbid"
        frozen = True


def load_parser_config(path: str | Path) -> ParserConfig:
    """Load a ParserConfig from a YAML mapping. An empty file gives defaults.

    Raises:
        pydantic.ValidationError: On unknown keys or invalid values.
    """
    logger.debug("Loading parser config from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return ParserConfig(**data)
