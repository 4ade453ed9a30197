"""
Identifier normalization for safe code generation.

Turns arbitrary strings coming from a schema or design description into
camelCase or PascalCase identifiers, keeping initialisms (``ID``, ``HTTP``)
in one case and escaping reserved words of the target language.
"""

import unicodedata
from typing import Iterator, List, Optional

from ..logging_config import get_logger
from .config import NamingConfig

logger = get_logger(__name__)


def _upper(ch: str) -> str:
    # Keep one code point per character so the word length never changes
    # (e.g. "ß".upper() is "SS").
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def _lower(ch: str) -> str:
    lower = ch.lower()
    return lower if len(lower) == 1 else ch


def upper_word(word: str) -> str:
    return "".join(_upper(ch) for ch in word)


def _lower_word(word: str) -> str:
    return "".join(_lower(ch) for ch in word)


class IdentifierNormalizer:
    """Builds identifiers out of arbitrary strings."""

    def __init__(self, config: Optional[NamingConfig] = None):
        """
        Initialize the normalizer.

        Args:
            config: Initialisms and reserved words of the target language
        """
        self.config = config or NamingConfig()

    # Character classes

    def is_valid(self, ch: str) -> bool:
        """Whether a character may appear in an identifier."""
        if self.config.allow_unicode:
            return ch.isalpha() or ch.isdecimal()
        return ch.isascii() and ch.isalnum()

    def is_lower(self, ch: str) -> bool:
        """Whether a character is a lowercase letter."""
        if self.config.allow_unicode:
            return unicodedata.category(ch) == "Ll"
        return "a" <= ch <= "z"

    # Segmentation

    def _spans(self, chars: str) -> Iterator[List[str]]:
        """
        Yield the words of ``chars`` as lists of accepted characters.

        The scan reads the input once. A word ends on the last accepted
        character, before a run of underscores, or on a lowercase letter
        whose raw successor is not lowercase. Invalid characters are dropped
        without ending a word on their own.
        """
        end = len(chars)
        while end > 0 and not self.is_valid(chars[end - 1]):
            end -= 1

        word: List[str] = []
        for i in range(end):
            ch = chars[i]
            if not self.is_valid(ch):
                continue

            word.append(ch)
            if i + 1 == end:
                eow = True
            else:
                nxt = chars[i + 1]
                eow = nxt == "_" or (self.is_lower(ch) and not self.is_lower(nxt))

            if eow:
                yield word
                word = []

    def segment(self, name: str) -> List[str]:
        """
        Split a name into its words, before any casing is applied.

        >>> IdentifierNormalizer().segment("httpStatus_code")
        ['http', 'Status', 'code']
        """
        return ["".join(word) for word in self._spans(name)]

    # Casing

    def _case_word(self, word: str, first: bool, capitalize_first: bool) -> str:
        upper = upper_word(word)
        if self.config.is_initialism(upper):
            if first and not capitalize_first:
                word = _lower_word(upper)
            else:
                word = upper
        elif _lower_word(word) == word and (not first or capitalize_first):
            word = _upper(word[0]) + word[1:]

        if first and not capitalize_first:
            word = _lower(word[0]) + word[1:]
        return word

    def normalize(self, name: str, capitalize_first: bool = True) -> str:
        """
        Make a valid identifier out of any string.

        Args:
            name: Raw name, any Unicode text
            capitalize_first: Produce PascalCase when True, camelCase otherwise

        Returns:
            The identifier, possibly empty when ``name`` has no letter or digit
        """
        parts = [
            self._case_word(word, index == 0, capitalize_first)
            for index, word in enumerate(self.segment(name))
        ]
        return self.fix_reserved("".join(parts))

    def fix_reserved(self, name: str) -> str:
        """Append an underscore to reserved identifiers."""
        if self.config.is_reserved(name):
            logger.debug("Escaping reserved identifier: %s", name)
            return name + "_"
        return name

    # Convenience wrappers

    def pascal(self, name: str) -> str:
        """PascalCase identifier, e.g. for exported type names."""
        return self.normalize(name, True)

    def camel(self, name: str) -> str:
        """camelCase identifier, e.g. for locals and parameters."""
        return self.normalize(name, False)
