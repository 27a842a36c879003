"""Soft hyphenation of arbitrary text.

This module inserts soft hyphens (U+00AD) at every linguistically valid
hyphenation point of a text. Soft hyphens stay invisible unless a renderer
breaks the line at that position, so the transformation is fully reversible
by removing the markers again.

The break positions come from a HyphenationOracle (pyphen by default). The
algorithm works in two passes over the grapheme clusters of the text:

1. Collect: ask the oracle for the nearest break before every index of the
   unmodified text and record each answer in a list of booleans.
2. Insert: walk the list from the end to the start and insert a marker
   before every recorded index. Walking backwards keeps the indices that are
   still to be processed valid.
"""

from __future__ import annotations

import logging
from typing import Optional

from hyphenable.common import SOFT_HYPHEN, WORD_DELIMITER, HyphenationSettings
from hyphenable.grapheme import grapheme_length, split_into_graphemes
from hyphenable.oracle import (  # pylint: disable=unused-import
    HyphenationError,
    HyphenationOracle,
    TextRange,
    UnsupportedLanguageError,
    default_oracle,
)

logger = logging.getLogger(__name__)


class Hyphenator:
    """Inserts soft hyphens into text for one locale.

    A Hyphenator never raises for unsupported locales or failing oracle
    queries; the worst outcome is text without markers.

    Example:
        >>> Hyphenator("en_US").hyphenate_text("information").replace(SOFT_HYPHEN, "|")
        'in|for|ma|tion'
        >>> Hyphenator("xx_XX").hyphenate_text("information")
        'information'
    """

    def __init__(
        self,
        locale: str,
        oracle: Optional[HyphenationOracle] = None,
        marker: str = SOFT_HYPHEN,
    ) -> None:
        """Initialize the hyphenator.

        Args:
            locale: Locale tag passed to the oracle, e.g. 'en_US'.
            oracle: Source of break positions. Defaults to the shared pyphen oracle.
            marker: String inserted at every break position.
        """
        self.locale = locale
        self.oracle = oracle if oracle is not None else default_oracle()
        self.marker = marker

    @classmethod
    def from_settings(
        cls,
        settings: HyphenationSettings,
        oracle: Optional[HyphenationOracle] = None,
    ) -> Hyphenator:
        """Create a hyphenator for the locale and marker of the given settings."""
        return cls(settings.locale, oracle=oracle, marker=settings.marker)

    def is_supported(self) -> bool:
        """Check whether the oracle can hyphenate this hyphenator's locale.

        Returns:
            True if hyphenation is available, False otherwise. An oracle
            failure counts as not supported.
        """
        try:
            return self.oracle.is_hyphenation_supported(self.locale)
        except HyphenationError as exc:
            logger.warning("Hyphenation support check failed for locale '%s': %s", self.locale, exc)
            return False

    def break_set(self, text: str) -> list[bool]:
        """Collect the break positions of text.

        The oracle is queried once for every grapheme index, always against
        the unmodified text and the whole text as search range. Answers at
        the very start or at/after the end are discarded, so no leading or
        trailing marker can appear.

        Args:
            text: The unmodified text.

        Returns:
            One flag per grapheme cluster; True means a marker goes
            immediately before that cluster.
        """
        length = grapheme_length(text)
        breaks = [False] * length
        search_range = TextRange(0, length)

        for index in range(length):
            try:
                position = self.oracle.next_break_before_index(text, index, search_range, self.locale)
            except HyphenationError as exc:
                logger.warning("Hyphenation query failed at index %d: %s", index, exc)
                continue
            if position is not None and 0 < position < length:
                breaks[position] = True

        return breaks

    def hyphenate_text(self, text: str) -> str:
        """Insert a marker at every hyphenation point of text.

        Args:
            text: The text to hyphenate. It is treated as a whole; use
                hyphenate_words() to apply a minimum word length.

        Returns:
            The text with markers inserted. Removing all markers gives back
            the input exactly.
        """
        if not text:
            return text

        if not self.is_supported():
            logger.debug("Hyphenation not available for locale '%s'", self.locale)
            return text

        breaks = self.break_set(text)
        graphemes = split_into_graphemes(text)

        # descending, so lower indices stay valid while inserting
        for index in range(len(graphemes) - 1, -1, -1):
            if breaks[index]:
                graphemes.insert(index, self.marker)

        logger.debug("Inserted %d markers for locale '%s'", breaks.count(True), self.locale)
        return "".join(graphemes)

    def hyphenate_words(self, text: str, minimum_word_length: int = 0) -> str:
        """Hyphenate every space-delimited word that is long enough.

        Words are separated by U+0020 only. Empty words from leading,
        trailing or repeated spaces are kept, so the output contains exactly
        the same spaces as the input.

        Args:
            text: The text to hyphenate.
            minimum_word_length: Words with fewer grapheme clusters are left
                unchanged. Values below 1 hyphenate every word.

        Returns:
            The text with markers inserted inside the qualifying words.
        """
        if not text or not self.is_supported():
            return text

        words = text.split(WORD_DELIMITER)
        hyphenated = [
            self.hyphenate_text(word) if grapheme_length(word) >= minimum_word_length else word for word in words
        ]
        return WORD_DELIMITER.join(hyphenated)


def hyphenate(
    text: str,
    locale: str,
    marker: str = SOFT_HYPHEN,
    oracle: Optional[HyphenationOracle] = None,
) -> str:
    """Insert a marker at every hyphenation point of text.

    Args:
        text: The text to hyphenate.
        locale: Locale tag, e.g. 'en_US'. Unsupported locales return text unchanged.
        marker: String to insert. Defaults to the soft hyphen.
        oracle: Source of break positions. Defaults to the shared pyphen oracle.

    Returns:
        The hyphenated text.
    """
    return Hyphenator(locale, oracle=oracle, marker=marker).hyphenate_text(text)


def hyphenate_by_word(
    text: str,
    locale: str,
    minimum_word_length: int = 0,
    oracle: Optional[HyphenationOracle] = None,
) -> str:
    """Hyphenate every space-delimited word of at least minimum_word_length clusters.

    Args:
        text: The text to hyphenate.
        locale: Locale tag, e.g. 'en_US'. Unsupported locales return text unchanged.
        minimum_word_length: Shorter words stay unchanged.
        oracle: Source of break positions. Defaults to the shared pyphen oracle.

    Returns:
        The hyphenated text.
    """
    return Hyphenator(locale, oracle=oracle).hyphenate_words(text, minimum_word_length)


def strip_soft_hyphens(text: str, marker: str = SOFT_HYPHEN) -> str:
    """Remove every marker from text, reversing hyphenate()."""
    if not marker:
        return text
    return text.replace(marker, "")


def sample_texts() -> list[str]:
    """Return sample sentences full of long words."""
    return [
        "Antidisestablishmentarianism juxtaposed with ultramicroscopic-silicovolcanoconiosis "
        "presents an inextricable conundrum of lexical intricacy.",
        "Cryptococcus neoformans serotype B manifesting pneumonoultramicroscopicsilicovolcanoconiosis "
        "perplexes pulmonologists worldwide.",
        "Supercalifragilisticexpialidocious intergalactic hypernova cataclysmic cosmogenesis "
        "defies conventional astrophysical comprehension.",
    ]


def main() -> None:
    """Print the sample sentences with their hyphenation points made visible."""
    settings = HyphenationSettings.from_env()
    hyphenator = Hyphenator.from_settings(settings)

    print(f"Locale: {settings.locale} (supported: {hyphenator.is_supported()})")
    print("-" * 50)
    for sample in sample_texts():
        hyphenated = hyphenator.hyphenate_words(sample, settings.minimum_word_length)
        print(hyphenated.replace(settings.marker, "|"))
        print()
    print("-" * 50)


if __name__ == "__main__":
    main()
