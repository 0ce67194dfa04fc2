from pathlib import Path

import pytest

from latex_kit.parsers.latex_parser import LatexParser
from latex_kit.parsers.models import ParsedDocument

GRAPH_TUTORIAL = r"""\documentclass{article}
\title{Introduction to Graph Algorithms}
\date{May 15, 2023}
\category{Algorithms}
\keywords{Graphs, BFS, DFS}

\begin{document}
\maketitle

\begin{abstract}
Learn the fundamentals of graph theory and common algorithms.
\end{abstract}

\section{Introduction to Graph Algorithms}
Graphs are mathematical structures used to model \emph{pairwise} relations
between objects~\cite{west2001}.

\subsection{Basic Definitions}
A graph $G$ is an ordered pair $G = (V, E)$ where:

\begin{itemize}
  \item $V$ is a set of \textbf{vertices}
  \item $E$ is a set of \textbf{edges}
\end{itemize}

\subsubsection{Types of Graphs}
\begin{enumerate}
  \item Undirected graphs
  \item Directed graphs
\end{enumerate}

\subsection{Graph Representation}
\begin{equation}
A_{ij} = \begin{cases} 1 & (i,j) \in E \\ 0 & \text{otherwise} \end{cases}
\end{equation}

\begin{lstlisting}[language=python]
graph = {
    'A': ['B', 'C'],
    'B': ['A'],
}
\end{lstlisting}

See \href{https://en.wikipedia.org/wiki/Graph_theory}{Wikipedia} and Section~\ref{sec:bfs}.

\end{document}
"""

SECTIONLESS_NOTE = r"""\documentclass{article}
\begin{document}
A short note with 50\% less \LaTeX.

\[ e^{i\pi} + 1 = 0 \]

\begin{verbatim}
echo hello
\end{verbatim}
\end{document}
"""


@pytest.fixture(scope="module")
def tex_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Write sample LaTeX sources once per module."""
    dir_path: Path = tmp_path_factory.mktemp("tex")

    (dir_path / "graphs.tex").write_text(GRAPH_TUTORIAL, encoding="utf-8")
    (dir_path / "note.tex").write_text(SECTIONLESS_NOTE, encoding="utf-8")

    return dir_path


@pytest.fixture(scope="module")
def parsed_graphs(tex_dir: Path) -> ParsedDocument:
    """Parse the graph tutorial once, reuse across tests."""
    return LatexParser().parse((tex_dir / "graphs.tex").read_text(encoding="utf-8"))


@pytest.fixture(scope="module")
def parsed_note(tex_dir: Path) -> ParsedDocument:
    """Parse the sectionless note once, reuse across tests."""
    return LatexParser().parse((tex_dir / "note.tex").read_bytes())
