"""
Naming strategies that turn raw member names into display labels.

A grid holds one strategy for field labels and one for method labels.
Swapping a strategy only affects the next build; labels already on a
surface are never rewritten.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum

# lower/digit followed by upper: "portTo" -> "port To"
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
# acronym followed by a word: "HTTPServer" -> "HTTP Server"
_ACRONYM_BOUNDARY = re.compile(r"(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[_\-\s]+")


class NamingStrategy(ABC):
    """Maps a raw member name to a display label."""

    @abstractmethod
    def to_label(self, raw_name: str) -> str:
        pass

    def __call__(self, raw_name: str) -> str:
        return self.to_label(raw_name)


class VerbatimNaming(NamingStrategy):
    """Uses the member name as-is."""

    def to_label(self, raw_name: str) -> str:
        return raw_name

    def __repr__(self) -> str:
        return "VerbatimNaming()"


class SplitToCapitalizedWords(NamingStrategy):
    """
    Splits a name into words and capitalizes each one.

    Word boundaries are underscores, hyphens, whitespace and lower-to-upper
    case transitions::

        portToSendTo    -> Port To Send To
        port_to_send_to -> Port To Send To
        Port To Send To -> Port To Send To
    """

    def to_label(self, raw_name: str) -> str:
        spaced = _CAMEL_BOUNDARY.sub(" ", raw_name)
        spaced = _ACRONYM_BOUNDARY.sub(" ", spaced)
        words = [word for word in _SEPARATORS.split(spaced) if word]
        return " ".join(word[0].upper() + word[1:] for word in words)

    def __repr__(self) -> str:
        return "SplitToCapitalizedWords()"


class DefaultNamingStrategy(Enum):
    """Built-in naming strategies."""
    VERBATIM = "verbatim"
    SPLIT_TO_CAPITALIZED_WORDS = "split_to_capitalized_words"

    @property
    def strategy(self) -> NamingStrategy:
        return _DEFAULT_STRATEGIES[self]()


_DEFAULT_STRATEGIES = {
    DefaultNamingStrategy.VERBATIM: VerbatimNaming,
    DefaultNamingStrategy.SPLIT_TO_CAPITALIZED_WORDS: SplitToCapitalizedWords,
}
