"""Locale-aware hyphenation oracle.

The oracle answers a single question for the breakpoint inserter: where is
the nearest valid hyphenation point before a given grapheme index? All
linguistic knowledge lives behind this interface. The default implementation
uses pyphen and the LibreOffice hyphenation dictionaries bundled with it.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from bisect import bisect_left
from functools import lru_cache
from typing import NamedTuple, Optional, Tuple

import pyphen
import regex

from hyphenable.common import normalize_locale
from hyphenable.grapheme import grapheme_length, grapheme_offsets

logger = logging.getLogger(__name__)

# letters and combining marks, no digits and no underscore
_WORD_PATTERN = regex.compile(r"[^\W\d_]+")


class HyphenationError(Exception):
    """Base exception for hyphenation-related errors."""


class UnsupportedLanguageError(HyphenationError):
    """Raised when a dictionary is requested for an unsupported language."""


class TextRange(NamedTuple):
    """A range of grapheme clusters, given as start location and length."""

    location: int
    length: int

    @property
    def end(self) -> int:
        """Index one past the last grapheme cluster of the range."""
        return self.location + self.length

    @classmethod
    def whole(cls, text: str) -> TextRange:
        """Return the range covering every grapheme cluster of text."""
        return cls(0, grapheme_length(text))


class HyphenationOracle(ABC):
    """Abstract adapter for a locale-aware hyphenation service.

    Implementations must be pure functions of their inputs and reentrant,
    because a single oracle is shared by every hyphenation call.
    """

    @abstractmethod
    def is_hyphenation_supported(self, locale: str) -> bool:
        """Return True if hyphenation is available for the locale."""

    @abstractmethod
    def next_break_before_index(
        self,
        text: str,
        index: int,
        search_range: TextRange,
        locale: str,
    ) -> Optional[int]:
        """Find the nearest hyphenation point strictly before index.

        Args:
            text: The unmodified text.
            index: Grapheme index to search backwards from.
            search_range: Only break positions strictly inside this range
                are considered.
            locale: Locale tag, e.g. 'en_US'.

        Returns:
            The grapheme index before which a hyphen may be inserted, or None
            if there is no such position.
        """


class PyphenOracle(HyphenationOracle):
    """Hyphenation oracle backed by pyphen.

    Every alphabetic run inside the search range is hyphenated as one word.
    Pyphen reports code point positions; those are converted to grapheme
    indices and positions inside a grapheme cluster are dropped.

    Example:
        >>> oracle = PyphenOracle()
        >>> text = "information"
        >>> oracle.next_break_before_index(text, 11, TextRange.whole(text), "en_US")
        7
    """

    def __init__(self, left: int = 2, right: int = 2, cache_size: int = 256) -> None:
        """Initialize the oracle.

        Args:
            left: Minimum number of characters before the first break of a word.
            right: Minimum number of characters after the last break of a word.
            cache_size: Number of (text, range, language) results kept in memory.
        """
        self.left = left
        self.right = right
        self._dictionaries: dict[str, pyphen.Pyphen] = {}
        self._lock = threading.Lock()
        self._break_positions = lru_cache(maxsize=cache_size)(self._compute_break_positions)

    @staticmethod
    def supported_languages() -> list[str]:
        """Return a sorted list of language codes supported by pyphen."""
        return sorted(pyphen.LANGUAGES.keys())

    @staticmethod
    def resolve_language(locale: str) -> Optional[str]:
        """Return the pyphen language used for a locale tag, or None."""
        tag = normalize_locale(locale or "")
        if not tag:
            return None
        return pyphen.language_fallback(tag)

    def is_hyphenation_supported(self, locale: str) -> bool:
        return self.resolve_language(locale) is not None

    def dictionary(self, locale: str) -> pyphen.Pyphen:
        """Get the pyphen dictionary for a locale, loading it on first use.

        Args:
            locale: Locale tag, e.g. 'en_US' or 'de-DE'.

        Returns:
            A pyphen.Pyphen instance for the locale.

        Raises:
            UnsupportedLanguageError: If pyphen has no dictionary for the locale.
        """
        language = self.resolve_language(locale)
        if language is None:
            supported = ", ".join(self.supported_languages()[:10])
            raise UnsupportedLanguageError(
                f"Locale '{locale}' is not supported by pyphen. Supported languages include: {supported}..."
            )

        with self._lock:
            dictionary = self._dictionaries.get(language)
            if dictionary is None:
                dictionary = pyphen.Pyphen(lang=language, left=self.left, right=self.right)
                self._dictionaries[language] = dictionary
                logger.debug("Loaded pyphen dictionary '%s' for locale '%s'", language, locale)
        return dictionary

    def break_positions(self, text: str, search_range: TextRange, locale: str) -> Tuple[int, ...]:
        """Return every break position inside search_range in ascending order.

        Unsupported locales yield an empty tuple.
        """
        language = self.resolve_language(locale)
        if language is None:
            return ()
        return self._break_positions(text, search_range.location, search_range.end, language)

    def next_break_before_index(
        self,
        text: str,
        index: int,
        search_range: TextRange,
        locale: str,
    ) -> Optional[int]:
        positions = self.break_positions(text, search_range, locale)
        slot = bisect_left(positions, index)
        if slot == 0:
            return None
        return positions[slot - 1]

    def _compute_break_positions(self, text: str, start: int, end: int, language: str) -> Tuple[int, ...]:
        offsets = grapheme_offsets(text)
        start = max(0, start)
        end = min(end, len(offsets) - 1)
        if end - start < 2:
            return ()

        dictionary = self.dictionary(language)
        to_index = {offset: grapheme for grapheme, offset in enumerate(offsets)}

        positions: list[int] = []
        for match in _WORD_PATTERN.finditer(text, offsets[start], offsets[end]):
            for position in dictionary.positions(match.group()):
                grapheme = to_index.get(match.start() + int(position))
                if grapheme is not None and start < grapheme < end:
                    positions.append(grapheme)
        return tuple(positions)


@lru_cache(maxsize=1)
def default_oracle() -> PyphenOracle:
    """Return the process-wide shared pyphen oracle."""
    return PyphenOracle()
