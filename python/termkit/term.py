"""Language-tagged term value.

A term is a (string, language) pair written in qualified form as
``value@lang``:
    "earth@en"  -> Term("earth", "en")
    "earth"     -> Term("earth", None)     no language
    "earth@"    -> Term("earth", "")       empty language code
    "a@b@fr"    -> Term("a@b", "fr")       split at the last "@"
"""

from dataclasses import dataclass
from typing import Optional

from .language import Language

LANG_SEPARATOR = "@"


@dataclass(frozen=True)
class Term:
    """An immutable string value with an optional language code.

    Terms order by language first (no language sorts as ""), then by string.
    Term("a") and Term("a", "") are unequal yet share a sort position:
    <= and >= both hold between them, < and > do not.
    """

    string: str = ""
    language: Optional[str] = None

    def __post_init__(self):
        if self.string is None:
            object.__setattr__(self, "string", "")

    @classmethod
    def parse(cls, qualified: Optional[str]) -> "Term":
        """Parse a qualified term string.

        Args:
            qualified: Text in ``value@lang`` or ``value`` form. None yields
                an empty term with no language.

        Returns:
            Parsed Term.
        """
        if qualified is None:
            return cls("", None)
        string, sep, language = qualified.rpartition(LANG_SEPARATOR)
        if not sep:
            return cls(qualified, None)
        return cls(string, language)

    @property
    def qualified(self) -> str:
        """Qualified form, ``value@lang`` or just ``value`` when there is no language."""
        if self.language is not None:
            return f"{self.string}{LANG_SEPARATOR}{self.language}"
        return self.string

    def language_enum(self) -> Optional[Language]:
        """Get the catalog Language for this term's code, if recognized."""
        return Language.from_code(self.language)

    def sort_key(self) -> tuple[str, str]:
        return (self.language or "", self.string)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Term):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    def __str__(self) -> str:
        return self.qualified
