"""Plain text term list loader.

Simple format: one qualified term per line.
Supports comments with # and empty lines. An inline comment must be
preceded by whitespace, so "C#@en" is read as a term.

    # Earth in a few languages
    earth@en
    terre@fr
    Erde@de     # inline comment
    identifier

Each term is indexed in a TermMap with the line numbers it appears on.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from .term import Term
from .termmap import TermMap


@dataclass
class TermListResult:
    """Result of loading a term list."""

    terms: TermMap[int]
    source_path: str
    total_raw: int = 0          # Non-comment lines read
    total_duplicates: int = 0   # Lines repeating an earlier term

    def __repr__(self) -> str:
        return (
            f"TermListResult({self.source_path}: "
            f"{self.terms.get_num_key_terms()}/{self.total_raw} distinct, "
            f"{self.total_duplicates} dupes)"
        )


def parse(
    filepath: Path | str,
    comment_char: str = "#",
    default_language: Optional[str] = None,
) -> Iterator[tuple[Term, int]]:
    """Parse a term list.

    Args:
        filepath: Path to text file.
        comment_char: Character that starts a comment.
        default_language: Language given to terms written without one.

    Yields:
        Tuples of (term, line_number).
    """
    with open(filepath, "r", encoding="utf-8", errors="ignore") as f:
        for line_num, line in enumerate(f, start=1):
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith(comment_char):
                continue

            # Handle inline comments: "term@en # comment".
            line = re.split(rf"\s+{re.escape(comment_char)}", line, maxsplit=1)[0]

            if not line:
                continue

            term = Term.parse(line)
            if term.language is None and default_language is not None:
                term = Term(term.string, default_language)
            yield term, line_num


def load(
    filepath: Path | str,
    comment_char: str = "#",
    default_language: Optional[str] = None,
) -> TermListResult:
    """Load a term list into a TermMap of term -> line numbers.

    Args:
        filepath: Path to text file.
        comment_char: Character that starts a comment.
        default_language: Language given to terms written without one.

    Returns:
        TermListResult with the indexed terms.
    """
    filepath = Path(filepath)
    terms: TermMap[int] = TermMap()
    total_raw = 0
    duplicates = 0

    for term, line_num in parse(filepath, comment_char, default_language):
        total_raw += 1
        if terms.contains_key_term(term):
            duplicates += 1
        terms.put(term, line_num)

    return TermListResult(
        terms=terms,
        source_path=str(filepath.resolve()),
        total_raw=total_raw,
        total_duplicates=duplicates,
    )
