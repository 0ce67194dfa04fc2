from .toc import TocEntry, build_toc

__all__ = [
    "TocEntry",
    "build_toc",
]
