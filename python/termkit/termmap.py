"""Term-keyed one-to-many container.

A TermMap associates values with Terms. Internally it maps each term
string to a Multimap of language -> values:

    {"earth": Multimap({"en": [1], "fr": [2]}),
     "mer":   Multimap({None: [3]})}

A term without a language lives in the None language bucket of its
string, and a None term lives under the None string with the None
language. A string entry exists only while it holds at least one value.
"""

from typing import Any, Generic, Optional, TypeVar

from .multimap import Multimap
from .term import Term

V = TypeVar("V")


def _split(term: Optional[Term]) -> tuple[Optional[str], Optional[str]]:
    """Get the (string, language) bucket identity of a term."""
    if term is None:
        return None, None
    return term.string, term.language


class TermMap(Generic[V]):
    """Maps key terms to zero or more values."""

    def __init__(self) -> None:
        self._entries: dict[Optional[str], Multimap[Optional[str], V]] = {}

    def _bucket(self, string: Optional[str]) -> Multimap[Optional[str], V]:
        """Get the multimap of a term string, creating it if needed."""
        if string not in self._entries:
            self._entries[string] = Multimap()
        return self._entries[string]

    def _prune(self, string: Optional[str]) -> None:
        bucket = self._entries.get(string)
        if bucket is not None and bucket.is_empty():
            del self._entries[string]

    # Modification

    def put(self, term: Optional[Term], value: V) -> None:
        """Associate value with term."""
        string, language = _split(term)
        self._bucket(string).put(language, value)

    def put_if_absent(self, term: Optional[Term], value: V) -> bool:
        """Associate value with term unless the pair is already stored.

        Returns:
            True if the pair was added.
        """
        string, language = _split(term)
        return self._bucket(string).put_if_absent(language, value)

    def put_only(self, term: Optional[Term], value: V) -> None:
        """Make value the only value associated with term."""
        string, language = _split(term)
        self._bucket(string).put_only(language, value)

    def remove(self, term: Optional[Term], value: V) -> bool:
        """Remove the first occurrence of value under term.

        Returns:
            True if the map changed.
        """
        string, language = _split(term)
        bucket = self._entries.get(string)
        if bucket is None:
            return False
        removed = bucket.remove(language, value)
        self._prune(string)
        return removed

    def remove_all(self, term: Optional[Term]) -> list[V]:
        """Remove every value of term.

        Returns:
            The removed values, empty if there were none.
        """
        string, language = _split(term)
        bucket = self._entries.get(string)
        if bucket is None:
            return []
        removed = bucket.remove_all(language)
        self._prune(string)
        return removed

    def remove_all_by_string(
        self, string: Optional[str]
    ) -> Optional[Multimap[Optional[str], V]]:
        """Remove every language and value of a term string.

        Returns:
            The removed language -> values multimap, or None if the string
            was not present.
        """
        return self._entries.pop(string, None)

    def clear(self) -> None:
        self._entries.clear()

    # Lookup

    def get_value(self, term: Optional[Term]) -> Optional[V]:
        """Get the first value associated with term, or None."""
        string, language = _split(term)
        bucket = self._entries.get(string)
        if bucket is None:
            return None
        return bucket.get(language)

    def get_non_null_value(self, term: Optional[Term]) -> Optional[V]:
        """Get the first value of term that is not None."""
        string, language = _split(term)
        bucket = self._entries.get(string)
        if bucket is None:
            return None
        return bucket.get_non_null(language)

    def get_values(self, term: Optional[Term]) -> list[V]:
        """Get a copy of the values of term (empty list if none)."""
        string, language = _split(term)
        bucket = self._entries.get(string)
        if bucket is None:
            return []
        return bucket.get_all(language)

    def get_values_by_string(self, string: Optional[str]) -> Multimap[Optional[str], V]:
        """Get a copy of the language -> values multimap of a term string.

        An empty Multimap is returned when the string is not present.
        """
        result: Multimap[Optional[str], V] = Multimap()
        bucket = self._entries.get(string)
        if bucket is not None:
            for language, values in bucket.as_map().items():
                result.put_all(language, values)
        return result

    def contains_key_term(self, term: Optional[Term]) -> bool:
        string, language = _split(term)
        bucket = self._entries.get(string)
        return bucket is not None and bucket.contains_key(language)

    def contains_key_string(self, string: Optional[str]) -> bool:
        """Check if any language of the term string holds a value."""
        bucket = self._entries.get(string)
        return bucket is not None and not bucket.is_empty()

    def contains_entry(self, term: Optional[Term], value: V) -> bool:
        string, language = _split(term)
        bucket = self._entries.get(string)
        return bucket is not None and bucket.contains_entry(language, value)

    def contains_string_entry(self, string: Optional[str], value: V) -> bool:
        """Check if value is associated with the term string in any language."""
        bucket = self._entries.get(string)
        return bucket is not None and bucket.contains_value(value)

    # Derived views

    def get_key_term_languages(self, string: Optional[str]) -> list[Optional[str]]:
        """Get the languages registered under a term string."""
        bucket = self._entries.get(string)
        if bucket is None:
            return []
        return list(bucket.key_set())

    def get_languages(self) -> set[Optional[str]]:
        """Get the distinct languages used anywhere in the map."""
        languages: set[Optional[str]] = set()
        for bucket in self._entries.values():
            languages.update(bucket.key_set())
        return languages

    def get_key_terms(self) -> set[Optional[Term]]:
        """Get every distinct term that holds at least one value.

        The bucket of a None term comes back as None, so every returned
        key addresses its own values.
        """
        return {
            None if string is None else Term(string, language)
            for string, bucket in self._entries.items()
            for language in bucket.key_set()
        }

    def get_num_key_terms(self) -> int:
        """Get the number of distinct key terms (compare get_size())."""
        return sum(len(bucket.key_set()) for bucket in self._entries.values())

    def get_key_term_strings(self) -> set[Optional[str]]:
        return set(self._entries)

    def get_size(self) -> int:
        """Get the number of values stored, counted over all key terms."""
        return sum(bucket.size() for bucket in self._entries.values())

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return self.get_size()

    def __contains__(self, term: Any) -> bool:
        if term is not None and not isinstance(term, Term):
            return False
        return self.contains_key_term(term)

    def __repr__(self) -> str:
        return f"TermMap({self._entries!r})"
