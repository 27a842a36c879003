"""Test module for hyphenable.grapheme

The tests are run using pytest.
"""

from hyphenable.grapheme import grapheme_length, grapheme_offsets, split_into_graphemes


def test_split_into_graphemes_empty():
    """Empty text has no clusters."""
    assert split_into_graphemes("") == []


def test_split_into_graphemes_ascii():
    """ASCII letters are one cluster each."""
    assert split_into_graphemes("hello") == ["h", "e", "l", "l", "o"]


def test_split_into_graphemes_combining():
    """Combining marks stay with their base letter."""
    assert split_into_graphemes("cafe\u0301") == ["c", "a", "f", "e\u0301"]


def test_split_into_graphemes_emoji():
    """Flag sequences and CRLF are single clusters."""
    assert split_into_graphemes("\U0001F1E9\U0001F1EA\r\n") == ["\U0001F1E9\U0001F1EA", "\r\n"]


def test_grapheme_length():
    """Length counts clusters, not code points."""
    assert grapheme_length("cafe\u0301") == 4
    assert grapheme_length("") == 0


def test_grapheme_offsets():
    """Offsets mark the start of every cluster plus the end of the text."""
    assert grapheme_offsets("ae\u0301b") == [0, 1, 3, 4]
    assert grapheme_offsets("") == [0]
