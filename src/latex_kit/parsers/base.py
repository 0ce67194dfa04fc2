# parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedDocument


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, source: str | bytes) -> ParsedDocument:
        """
        Convert document source into title, metadata and ordered content blocks.

        Requirements:
        - Total: never raises for str or bytes input
        - Deterministic output for same input
        - Content is never empty
        """
        raise NotImplementedError
