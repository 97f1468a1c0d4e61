"""One-to-many associative container.

A Multimap maps each key to an ordered list of values:
    - Insertion order within a key's list is preserved
    - Duplicate values under one key are allowed (see put_if_absent)
    - A key is present if and only if it has at least one value

Example:
    m = Multimap()
    m.put("en", "earth")
    m.put("en", "world")
    m.get("en")      -> "earth"
    m.get_all("en")  -> ["earth", "world"]
    m.size()         -> 2
"""

from typing import Any, Generic, Iterable, Iterator, KeysView, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Multimap(Generic[K, V]):
    """A map where zero or more values may be associated with a key.

    ``None`` is an ordinary key and an ordinary value.

    Only key_set() is a live view. Every other accessor returns a copy,
    so mutating a returned list never changes the multimap (mutating the
    contained objects does).
    """

    def __init__(self) -> None:
        # key -> non-empty list of values
        self._entries: dict[K, list[V]] = {}

    def size(self) -> int:
        """Get the number of key-value pairs (not the number of distinct keys)."""
        return sum(len(values) for values in self._entries.values())

    def is_empty(self) -> bool:
        """Check if the multimap holds no key-value pair."""
        return not self._entries

    def contains_key(self, key: K) -> bool:
        """Check if at least one value is associated with key."""
        return key in self._entries

    def contains_value(self, value: V) -> bool:
        """Check if value is associated with any key."""
        return any(value in values for values in self._entries.values())

    def contains_entry(self, key: K, value: V) -> bool:
        """Check if the exact key-value pair is stored."""
        values = self._entries.get(key)
        return values is not None and value in values

    # Modification

    def put(self, key: K, value: V) -> None:
        """Append value to the values of key."""
        self._entries.setdefault(key, []).append(value)

    def put_if_absent(self, key: K, value: V) -> bool:
        """Store a key-value pair unless it is already present.

        Returns:
            True if the pair was added.
        """
        if self.contains_entry(key, value):
            return False
        self.put(key, value)
        return True

    def put_only(self, key: K, value: V) -> None:
        """Make value the only value associated with key."""
        self.remove_all(key)
        self.put(key, value)

    def put_all(self, key: K, values: Optional[Iterable[V]]) -> bool:
        """Append each of values to the values of key.

        Args:
            key: Key for the values to add.
            values: Values to add. None or empty is a no-op.

        Returns:
            True if the multimap changed.
        """
        if values is None:
            return False
        values = list(values)
        if not values:
            return False
        self._entries.setdefault(key, []).extend(values)
        return True

    def remove(self, key: K, value: V) -> bool:
        """Remove the first occurrence of value under key.

        The key is dropped when its last value goes.

        Returns:
            True if a pair was removed.
        """
        values = self._entries.get(key)
        if values is None:
            return False
        try:
            values.remove(value)
        except ValueError:
            return False
        if not values:
            del self._entries[key]
        return True

    def remove_all(self, key: K) -> list[V]:
        """Remove key and return its values (empty list if key was absent)."""
        return self._entries.pop(key, [])

    def clear(self) -> None:
        """Remove every key-value pair."""
        self._entries.clear()

    # Views

    def get(self, key: K) -> Optional[V]:
        """Get the first value of key, or None.

        None is also returned when the first stored value is None itself;
        use contains_key() to tell the two apart.
        """
        values = self._entries.get(key)
        if values:
            return values[0]
        return None

    def get_non_null(self, key: K) -> Optional[V]:
        """Get the first value of key that is not None."""
        for value in self._entries.get(key, ()):
            if value is not None:
                return value
        return None

    def get_all(self, key: K) -> list[V]:
        """Get a copy of the values of key (empty list if absent)."""
        return list(self._entries.get(key, ()))

    def key_set(self) -> KeysView[K]:
        """Get a live, read-only view of the distinct keys."""
        return self._entries.keys()

    def values(self) -> list[V]:
        """Get every value of every key, key by key, without collapsing duplicates."""
        return [value for values in self._entries.values() for value in values]

    def as_map(self) -> dict[K, list[V]]:
        """Get a snapshot dict of key -> list of values."""
        return {key: list(values) for key, values in self._entries.items()}

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multimap):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Multimap({self._entries!r})"
