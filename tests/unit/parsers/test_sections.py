from latex_kit.parsers.models import heading_id
from latex_kit.parsers.sections import Segment, extract_body, split_sections


class TestSplitSections:
    def test_levels_follow_marker_kind(self) -> None:
        text = r"\section{A}\subsection{B}\subsubsection{C}"

        segments = split_sections(text)

        assert [(s.level, s.title) for s in segments] == [(1, "A"), (2, "B"), (3, "C")]

    def test_content_runs_to_next_marker(self) -> None:
        text = "\\section{One}\nFirst body.\n\\subsection{Two}\nSecond body.\n"

        segments = split_sections(text)

        assert segments == [
            Segment(level=1, title="One", content="First body."),
            Segment(level=2, title="Two", content="Second body."),
        ]

    def test_content_stops_at_end_document(self) -> None:
        text = "\\section{Only}\nBody.\n\\end{document}\nTrailing junk."

        assert split_sections(text)[0].content == "Body."

    def test_content_runs_to_end_of_string(self) -> None:
        text = "\\section{Last}\nBody line one.\n\nBody line two.\n"

        assert split_sections(text)[0].content == "Body line one.\n\nBody line two."

    def test_no_markers_gives_no_segments(self) -> None:
        assert split_sections("plain \\textbf{text}") == []

    def test_starred_sections_are_not_markers(self) -> None:
        assert split_sections(r"\section*{Hidden} text") == []


class TestExtractBody:
    def test_returns_document_interior(self) -> None:
        text = "\\documentclass{article}\n\\begin{document}\nHello\n\\end{document}"

        assert extract_body(text) == "\nHello\n"

    def test_missing_document_environment(self) -> None:
        assert extract_body("Hello") is None


class TestHeadingId:
    def test_lowercases_and_hyphenates(self) -> None:
        assert heading_id("Graph  Representation\tBasics") == "graph-representation-basics"

    def test_punctuation_is_preserved(self) -> None:
        assert heading_id("What's New?") == "what's-new?"

    def test_identical_titles_share_ids(self) -> None:
        assert heading_id("Intro") == heading_id("intro")
