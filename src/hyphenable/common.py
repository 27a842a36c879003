"""Central module containing constants, enums and settings for hyphenation."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum, auto

logger = logging.getLogger(__name__)

###############################################################################
# Enums and Consts
###############################################################################


SOFT_HYPHEN = "\u00ad"  # invisible unless the renderer breaks the line here
WORD_DELIMITER = " "  # only U+0020 separates words, tabs and newlines do not
DEFAULT_LOCALE = "en_US"

ENV_LOCALE = "HYPHENABLE_LOCALE"
ENV_MINIMUM_WORD_LENGTH = "HYPHENABLE_MINIMUM_WORD_LENGTH"
_SYSTEM_LOCALE_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


class Align(Enum):
    """Enum to define horizontal text alignment options."""

    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


###############################################################################
# Settings
###############################################################################


def normalize_locale(locale: str) -> str:
    """Normalize a locale tag to the underscore form used by dictionaries.

    Encodings and modifiers as found in POSIX locale variables are removed.

    Args:
        locale: A tag such as 'en-US', 'de_DE.UTF-8' or 'sr_RS@latin'.

    Returns:
        The normalized tag, e.g. 'en_US'. Empty input gives an empty string.
    """
    tag = locale.strip().split(".", 1)[0].split("@", 1)[0]
    return tag.replace("-", "_")


def _system_locale() -> str:
    for name in _SYSTEM_LOCALE_VARS:
        value = normalize_locale(os.environ.get(name, ""))
        if value and value not in ("C", "POSIX"):
            return value
    return DEFAULT_LOCALE


@dataclass(frozen=True)
class HyphenationSettings:
    """Explicit configuration for hyphenating text.

    Attributes:
        locale: Locale tag handed to the hyphenation oracle.
        minimum_word_length: Words shorter than this (in grapheme clusters)
            are left untouched by the word segmenter.
        marker: The string inserted at each break position.
    """

    locale: str = DEFAULT_LOCALE
    minimum_word_length: int = 0
    marker: str = SOFT_HYPHEN

    @classmethod
    def from_env(cls) -> HyphenationSettings:
        """Build settings from environment variables.

        HYPHENABLE_LOCALE wins over the POSIX locale variables. An invalid
        HYPHENABLE_MINIMUM_WORD_LENGTH is ignored with a warning.

        Returns:
            HyphenationSettings: the resulting settings.
        """
        locale = normalize_locale(os.environ.get(ENV_LOCALE, "")) or _system_locale()

        minimum_word_length = 0
        raw_minimum = os.environ.get(ENV_MINIMUM_WORD_LENGTH, "").strip()
        if raw_minimum:
            try:
                minimum_word_length = max(0, int(raw_minimum))
            except ValueError:
                logger.warning("Ignoring invalid %s=%r", ENV_MINIMUM_WORD_LENGTH, raw_minimum)

        return cls(locale=locale, minimum_word_length=minimum_word_length)


###############################################################################
# Functions
###############################################################################


def main() -> None:
    """Display the settings derived from the environment.

    This function prints the Python path, the effective settings and
    demonstrates the Align enum values.
    """
    print("sys.path:  ", sys.path)
    print()
    print("Settings:  ", HyphenationSettings.from_env())
    print()

    for align in Align:
        print(align, align.value)

    print()


if __name__ == "__main__":
    main()
