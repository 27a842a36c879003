"""Grapheme cluster utilities.

Indices handed to the hyphenation oracle and used for marker insertion count
user-perceived characters (extended grapheme clusters), not code points, so
that an insertion never separates a base letter from its combining marks.
"""

from __future__ import annotations

from typing import List

import regex

_GRAPHEME_PATTERN = regex.compile(r"\X")


def split_into_graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters using regex \\X.

    Args:
        text: Any string.

    Returns:
        The grapheme clusters in order. Joining them gives back ``text``.
    """
    if not text:
        return []
    return _GRAPHEME_PATTERN.findall(text)


def grapheme_length(text: str) -> int:
    """Return the number of grapheme clusters in text."""
    return len(split_into_graphemes(text))


def grapheme_offsets(text: str) -> List[int]:
    """Return the code point offset at which every grapheme cluster starts.

    The list has one extra trailing entry equal to ``len(text)``, so that
    cluster ``i`` spans ``text[offsets[i]:offsets[i + 1]]``.

    Args:
        text: Any string.

    Returns:
        A list of ``grapheme_length(text) + 1`` ascending offsets.
    """
    offsets = [0]
    for cluster in split_into_graphemes(text):
        offsets.append(offsets[-1] + len(cluster))
    return offsets
