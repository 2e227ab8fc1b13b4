"""
Naming utilities for safe code generation.

Field names are already identifiers, but a name may still collide with a
keyword of the target language. Each language escapes such names in its
own way.
"""

from typing import Set, Dict


class NameSanitizer:
    """Escapes member names that collide with reserved words."""

    def __init__(
        self,
        reserved_words: Set[str] = None,
        escape_format: str = "{name}_",
        case_sensitive: bool = True,
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            escape_format: Format applied to reserved names, with a ``name`` placeholder
            case_sensitive: Whether keyword matching honors case
        """
        self.case_sensitive = case_sensitive
        self.reserved_words = {
            self._key(word) for word in (reserved_words or set())
        }
        self.escape_format = escape_format
        self._name_cache: Dict[str, str] = {}

    def _key(self, name: str) -> str:
        return name if self.case_sensitive else name.lower()

    def is_reserved(self, name: str) -> bool:
        return self._key(name) in self.reserved_words

    def sanitize_name(self, name: str) -> str:
        """
        Return ``name`` in a form usable as a member name.

        Args:
            name: Identifier to check

        Returns:
            The name, escaped if it is a reserved word
        """
        if name in self._name_cache:
            return self._name_cache[name]

        final_name = self.escape_format.format(name=name) if self.is_reserved(name) else name
        self._name_cache[name] = final_name
        return final_name
