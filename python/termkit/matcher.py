"""Lexical string similarity.

Scores two strings by the overlap of their adjacent character pairs
(bigrams), taken word by word and case-insensitively:

    similarity = 2 * |pairs(a) & pairs(b)| / (|pairs(a)| + |pairs(b)|)

"FRANCE" -> FR RA AN NC CE, "FRENCH" -> FR RE EN NC CH:
    2 * 2 / (5 + 5) = 0.4
"""

import re
from collections import Counter
from typing import Optional

WHITESPACE_PATTERN = re.compile(r"\s", re.ASCII)


def letter_pairs(word: str) -> list[str]:
    """Get the adjacent letter pairs of a single word.

    Args:
        word: Word without whitespace.

    Returns:
        Pairs in order; empty for words shorter than 2 characters.
    """
    return [word[i:i + 2] for i in range(len(word) - 1)]


def word_letter_pairs(text: str) -> list[str]:
    """Get the letter pairs of every whitespace-separated word of text.

    Pairs never span a word boundary.
    """
    pairs = []
    for word in WHITESPACE_PATTERN.split(text):
        pairs.extend(letter_pairs(word))
    return pairs


def compare_strings(first: Optional[str], second: Optional[str]) -> float:
    """Compute the bigram similarity of two strings.

    Args:
        first: First string.
        second: Second string.

    Returns:
        Similarity in [0, 1]. 0.0 if either string is None or neither
        has a letter pair.
    """
    if first is None or second is None:
        return 0.0

    pairs1 = word_letter_pairs(first.upper())
    pairs2 = word_letter_pairs(second.upper())
    total = len(pairs1) + len(pairs2)
    if total == 0:
        return 0.0

    intersection = sum((Counter(pairs1) & Counter(pairs2)).values())
    return 2.0 * intersection / total
