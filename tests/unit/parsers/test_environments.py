from latex_kit.parsers.environments import extract_code, extract_list, extract_math
from latex_kit.parsers.models import CodeBlock, ListBlock, MathBlock


class TestExtractMath:
    def test_equation(self) -> None:
        assert extract_math(r"\begin{equation}x=1\end{equation}") == MathBlock(latex="x=1")

    def test_empty_equation_gives_nothing(self) -> None:
        assert extract_math(r"\begin{equation}\end{equation}") is None

    def test_whitespace_only_equation_gives_nothing(self) -> None:
        assert extract_math("\\begin{equation}\n   \n\\end{equation}") is None

    def test_align_interior_is_verbatim(self) -> None:
        chunk = "\\begin{align}\na &= b \\\\\nc &= d\n\\end{align}"

        assert extract_math(chunk) == MathBlock(latex="a &= b \\\\\nc &= d")

    def test_display_brackets(self) -> None:
        assert extract_math(r"\[ E = mc^2 \]") == MathBlock(latex="E = mc^2")

    def test_double_dollars_anywhere(self) -> None:
        assert extract_math("So we get $$a+b$$ as shown.") == MathBlock(latex="a+b")

    def test_equation_beats_other_variants(self) -> None:
        chunk = r"$$ignored$$ \begin{equation}kept\end{equation}"

        assert extract_math(chunk) == MathBlock(latex="kept")

    def test_unclosed_equation_gives_nothing(self) -> None:
        assert extract_math(r"\begin{equation} x = 1") is None

    def test_trailing_text_is_dropped(self) -> None:
        chunk = "\\[ y \\]\nwhich completes the proof."

        assert extract_math(chunk) == MathBlock(latex="y")


class TestExtractCode:
    def test_verbatim_defaults_to_text(self) -> None:
        chunk = "\\begin{verbatim}\nls -la\n\\end{verbatim}"

        assert extract_code(chunk) == CodeBlock(language="text", source="ls -la")

    def test_lstlisting_language_option(self) -> None:
        chunk = "\\begin{lstlisting}[language=python]\nprint(1)\n\\end{lstlisting}"

        block = extract_code(chunk)

        assert block is not None
        assert block.language == "python"
        assert "print(1)" in block.source

    def test_lstlisting_language_among_other_options(self) -> None:
        chunk = "\\begin{lstlisting}[caption=Demo, language=Java]\nint x;\n\\end{lstlisting}"

        assert extract_code(chunk) == CodeBlock(language="Java", source="int x;")

    def test_lstlisting_without_options(self) -> None:
        chunk = "\\begin{lstlisting}\nfoo()\n\\end{lstlisting}"

        assert extract_code(chunk) == CodeBlock(language="text", source="foo()")

    def test_minted_argument_is_language(self) -> None:
        chunk = "\\begin{minted}{scheme}\n(+ 1 2)\n\\end{minted}"

        assert extract_code(chunk) == CodeBlock(language="scheme", source="(+ 1 2)")

    def test_source_keeps_indentation_inside(self) -> None:
        chunk = "\\begin{verbatim}\ndef f():\n    return 1\n\\end{verbatim}"

        block = extract_code(chunk)

        assert block is not None
        assert block.source == "def f():\n    return 1"

    def test_empty_code_gives_nothing(self) -> None:
        assert extract_code("\\begin{verbatim}\n\\end{verbatim}") is None

    def test_custom_default_language(self) -> None:
        chunk = "\\begin{verbatim}x\\end{verbatim}"

        assert extract_code(chunk, default_language="plain") == CodeBlock(
            language="plain", source="x"
        )


class TestExtractList:
    def test_itemize(self) -> None:
        chunk = r"\begin{itemize}\item one\item two\end{itemize}"

        assert extract_list(chunk) == ListBlock(ordered=False, items=["one", "two"])

    def test_enumerate_is_ordered(self) -> None:
        chunk = "\\begin{enumerate}\n\\item First\n\\item Second\n\\end{enumerate}"

        assert extract_list(chunk) == ListBlock(ordered=True, items=["First", "Second"])

    def test_items_are_cleaned(self) -> None:
        chunk = "\\begin{itemize}\n\\item \\textbf{Atoms}: basic units\n\\end{itemize}"

        block = extract_list(chunk)

        assert block is not None
        assert block.items == ["<strong>Atoms</strong>: basic units"]

    def test_empty_list_gives_nothing(self) -> None:
        assert extract_list("\\begin{itemize}\n\\end{itemize}") is None

    def test_custom_cleaner(self) -> None:
        chunk = r"\begin{itemize}\item a\item b\end{itemize}"

        block = extract_list(chunk, clean=str.upper)

        assert block is not None
        assert block.items == ["A", "B"]
