"""termkit - Language-tagged term utilities.

A small toolkit for working with multilingual terms.

Core concepts:
    - A Term is a string value with an optional language ("earth@en")
    - A Multimap associates zero or more values with each key
    - A TermMap associates values with Terms, bucketed by string then language

Example:
    TermMap: earth@en -> [1], earth@fr -> [2], mer -> [3]
    get_num_key_terms() == 3, get_languages() == {"en", "fr", None}

Usage:
    from termkit import Term, TermMap, compare_strings

    labels = TermMap()
    labels.put(Term.parse("earth@en"), "http://example.org/earth")
    labels.put(Term("terre", "fr"), "http://example.org/earth")
    labels.get_value(Term("earth", "en"))

    compare_strings("France", "French")  # 0.4
"""

from .language import Language
from .matcher import compare_strings
from .multimap import Multimap
from .term import Term
from .termmap import TermMap

__version__ = "0.1.0"

__all__ = [
    "Language",
    "Multimap",
    "Term",
    "TermMap",
    "compare_strings",
]
