from .search import SearchResult, block_text, search_tutorials

__all__ = [
    "SearchResult",
    "block_text",
    "search_tutorials",
]
