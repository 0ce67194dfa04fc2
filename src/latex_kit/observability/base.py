from typing import Protocol


class MetricsHook(Protocol):
    """Sink for parser, store and search metrics.

    Callers and what they report (names live in `observability.names`):

    - `LatexParser.parse`: `latex_parse_duration` latency, one
      `latex_documents_parsed_total`, `latex_blocks_created` per block kind
      (labelled `kind`), and `latex_placeholder_content_total` when no
      content was found.
    - `TutorialStore.get`: `tutorials_loaded_total` on success,
      `tutorials_not_found_total` for a missing file or a slug outside the
      store directory.
    - `search_tutorials`: `search_duration` latency, one
      `search_queries_total`, and `search_results_returned` as a gauge.

    Durations are reported in milliseconds. Hooks are called synchronously on
    the caller's thread and must not raise; an exception propagates out of
    the parse, load or search that reported it.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook. Drops every measurement."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        return None

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        return None

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        return None
