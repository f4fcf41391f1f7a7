"""Sentence start detection (UNO: single function)."""

from ._scripts import SENTENCE_END


def is_sentence_start(body: str, offset: int) -> bool:
    """True at the body start, after a newline, or after sentence punctuation and spaces."""
    pos = offset - 1
    while pos >= 0 and body[pos] in " \t":
        pos -= 1
    return pos < 0 or body[pos] in SENTENCE_END
