"""Word boundary predicate (UNO: single function)."""

from ._scripts import CJK_CHAR, WORD_CHAR


def is_word_boundary(ch: str | None) -> bool:
    """True at string edges, on Han/Hiragana/Katakana, and outside ``[letter digit _ / -]``."""
    if ch is None:
        return True
    if CJK_CHAR.match(ch):
        return True
    return WORD_CHAR.match(ch) is None
