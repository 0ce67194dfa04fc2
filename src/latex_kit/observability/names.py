# src/latex_kit/observability/names.py

"""Metric names emitted by latex-kit.

Durations are milliseconds; the metrics backend owns unit conversion.
"""

# ============================================================================
# LaTeX parsing
# ============================================================================

LATEX_PARSE_DURATION = "latex_parse_duration"

LATEX_DOCUMENTS_PARSED_TOTAL = "latex_documents_parsed_total"
# Labelled with kind=heading|paragraph|math|code|list
LATEX_BLOCKS_CREATED = "latex_blocks_created"
# Documents where nothing was extracted and the placeholder paragraph was used
LATEX_PLACEHOLDER_CONTENT_TOTAL = "latex_placeholder_content_total"


# ============================================================================
# Tutorial store
# ============================================================================

TUTORIALS_LOADED_TOTAL = "tutorials_loaded_total"
TUTORIALS_NOT_FOUND_TOTAL = "tutorials_not_found_total"


# ============================================================================
# Search
# ============================================================================

SEARCH_DURATION = "search_duration"
SEARCH_QUERIES_TOTAL = "search_queries_total"
SEARCH_RESULTS_RETURNED = "search_results_returned"
