"""Unicode script patterns used while scanning."""

import re

import regex

CJK_CHAR = regex.compile(r"[\p{Script=Han}\p{Script=Hiragana}\p{Script=Katakana}]")
CJK_CANDIDATE = regex.compile(r"[\p{Script=Han}\p{Script=Hiragana}\p{Script=Katakana}\p{Script=Hangul}\s\d]+")
KOREAN = regex.compile(r"\p{Script=Hangul}+")
JAPANESE = regex.compile(r"[\p{Script=Han}\p{Script=Hiragana}\p{Script=Katakana}\s\d]+")
WORD_CHAR = regex.compile(r"[\p{L}\p{N}_/-]")

JAPANESE_PARTICLE = re.compile(r"が|は|を|に|で|と|から|まで|より|へ|の|や|も")
KOREAN_COPULA = re.compile(r"이다\.?")
KOREAN_TOPIC_PARTICLE = re.compile(r"는|은")

URL = re.compile(r"https?://[^\s]+")
DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
DATE_PREFIX = re.compile(r"\d{4}-\d{2}-$")
TWO_DIGITS = re.compile(r"\d{2}")
MONTH_NOTE = re.compile(r"[0-9]{1,2}")
SENTENCE_END = frozenset(".!?。\n")


def is_cjk_candidate(text: str) -> bool:
    return CJK_CANDIDATE.fullmatch(text) is not None


def is_korean(text: str) -> bool:
    return KOREAN.fullmatch(text) is not None


def is_japanese(text: str) -> bool:
    return JAPANESE.fullmatch(text) is not None and not is_korean(text)


def is_month_note(text: str) -> bool:
    return MONTH_NOTE.fullmatch(text) is not None and 1 <= int(text) <= 12


def is_date(text: str) -> bool:
    return DATE.fullmatch(text) is not None
