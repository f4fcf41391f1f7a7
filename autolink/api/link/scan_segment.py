"""Link bare mentions inside one unprotected segment (UNO: single function)."""

import logging

from ..registry.Candidate import Candidate
from ..registry.FallbackIndex import FallbackEntry
from ..registry.strip_base_dir import strip_base_dir
from ._scripts import (
    DATE,
    DATE_PREFIX,
    JAPANESE_PARTICLE,
    KOREAN_COPULA,
    KOREAN_TOPIC_PARTICLE,
    TWO_DIGITS,
    URL,
    is_cjk_candidate,
    is_date,
    is_japanese,
    is_korean,
    is_month_note,
)
from .is_sentence_start import is_sentence_start
from .is_word_boundary import is_word_boundary
from .render_link import render_link
from .resolve_nearest_candidate import resolve_nearest_candidate
from .ScanContext import ScanContext

logger = logging.getLogger(__name__)

MAX_FALLBACK_LENGTH = 64

Step = tuple[str, int]


def _is_script_run(matched: str) -> bool:
    """CJK/Hangul runs link without word boundaries; bare numbers still need them."""
    return is_cjk_candidate(matched) and not matched.isdigit()


def _after_date_prefix(word: str, pos: int, body: str) -> bool:
    """True for a two-digit day right after ``YYYY-MM-``."""
    return TWO_DIGITS.fullmatch(word) is not None and DATE_PREFIX.search(body, max(0, pos - 8), pos) is not None


def _literal_date(text: str, i: int) -> Step | None:
    """A whole ``YYYY-MM-DD`` token starting at ``i``."""
    if i > 0 and not is_word_boundary(text[i - 1]):
        return None
    date = DATE.match(text, i)
    if date is None or not is_word_boundary(text[date.end()] if date.end() < len(text) else None):
        return None
    return date.group(0), date.end()


def _descend(text: str, i: int, ctx: ScanContext, first: str | None = None) -> tuple[str, int] | None:
    """Longest acceptable key starting at ``i`` as ``(key, length)``."""
    ignore_case = ctx.registry.ignore_case
    node = ctx.registry.trie
    found = None
    for j in range(i, len(text)):
        ch = first if j == i and first is not None else text[j]
        node = node.children.get(ch.lower() if ignore_case else ch)
        if node is None:
            break
        if node.key is not None:
            following = text[j + 1] if j + 1 < len(text) else None
            if _is_script_run(text[i : j + 1]) or is_word_boundary(following):
                found = (node.key, j + 1 - i)
    return found


def _trie_match(text: str, i: int, start: int, ctx: ScanContext) -> tuple[str, int] | None:
    found = _descend(text, i, ctx)
    if (
        ctx.settings.match_sentence_case
        and not ctx.registry.ignore_case
        and text[i].isupper()
        and is_sentence_start(ctx.body, start + i)
    ):
        lowered = _descend(text, i, ctx, first=text[i].lower())
        if lowered is not None and (found is None or lowered[1] > found[1]):
            found = lowered
    return found


def _scoped_out(candidate: Candidate, ctx: ScanContext) -> bool:
    return ctx.settings.namespace_resolution and candidate.scoped and candidate.namespace != ctx.namespace


def _is_self_link(candidate: Candidate, ctx: ScanContext) -> bool:
    if not ctx.settings.prevent_self_linking:
        return False
    target = strip_base_dir(candidate.path, ctx.settings.base_dir)
    current = strip_base_dir(ctx.file_path, ctx.settings.base_dir)
    if ctx.settings.ignore_case:
        return target.lower() == current.lower()
    return target == current


def _choose(entries: tuple[FallbackEntry, ...], ctx: ScanContext) -> Candidate | None:
    allowed = [entry for entry in entries if not _scoped_out(entry[1], ctx)]
    if not allowed:
        return None
    if len(allowed) == 1:
        return allowed[0][1]
    return resolve_nearest_candidate(allowed, ctx.file_path, ctx.settings.base_dir)[1]


def _select(candidate: Candidate, key: str, ctx: ScanContext) -> Candidate | None:
    """Final target for a trie hit, or None to leave the text as is."""
    if candidate.kind == "shorthand":
        entries = ctx.fallback.get(key)
        if len(entries) > 1:
            if not ctx.settings.namespace_resolution:
                return None
            return _choose(entries, ctx)
    if _scoped_out(candidate, ctx):
        return None
    return candidate


def _link_trie_match(text: str, i: int, start: int, ctx: ScanContext) -> Step | None:
    found = _trie_match(text, i, start, ctx)
    if found is None:
        return None
    key, length = found
    end = i + length
    matched = text[i:end]

    if ctx.settings.ignore_date_formats and is_date(matched):
        return matched, end
    if is_month_note(matched):
        return matched, end
    if _after_date_prefix(matched, start + i, ctx.body):
        return matched, end

    candidate = ctx.registry.candidate_map.get(key)
    if candidate is None:
        return None

    korean = is_korean(matched)
    if korean and KOREAN_TOPIC_PARTICLE.match(text, end):
        return text[i], i + 1

    if not _is_script_run(matched):
        left = text[i - 1] if i > 0 else None
        right = text[end] if end < len(text) else None
        if not (is_word_boundary(left) and is_word_boundary(right)):
            return text[i], i + 1
    elif is_japanese(matched) and JAPANESE_PARTICLE.match(text, end):
        logger.debug("Japanese particle follows %r at %d", matched, start + i)

    target = _select(candidate, key, ctx)
    if target is None or _is_self_link(target, ctx):
        return matched, end

    link = render_link(target, matched, ctx.settings, ctx.tables.contains(start + i))
    if korean:
        copula = KOREAN_COPULA.match(text, end)
        if copula:
            return link + copula.group(0), copula.end()
    return link, end


def _link_fallback_match(text: str, i: int, start: int, ctx: ScanContext) -> Step | None:
    """Longest shorthand of the fallback index starting at a word boundary."""
    if i > 0 and not is_word_boundary(text[i - 1]):
        return None

    index = ctx.fallback
    limit = min(len(text), i + min(MAX_FALLBACK_LENGTH, index.max_key_length))
    best: tuple[str, tuple[FallbackEntry, ...]] | None = None
    for end in range(i + 1, limit + 1):
        if not is_word_boundary(text[end] if end < len(text) else None):
            continue
        word = text[i:end]
        entries = index.get(word)
        if not entries:
            continue
        if ctx.settings.ignore_date_formats and is_date(word):
            continue
        if is_month_note(word):
            continue
        if _after_date_prefix(word, start + i, ctx.body):
            continue
        best = (word, entries)

    if best is None:
        return None
    word, entries = best
    candidate = _choose(entries, ctx)
    if candidate is None or _is_self_link(candidate, ctx):
        return None
    return render_link(candidate, word, ctx.settings, ctx.tables.contains(start + i)), i + len(word)


def scan_segment(text: str, start: int, ctx: ScanContext) -> str:
    """Rewrite known mentions in ``text``, which begins at ``start`` in the body.

    Each position tries a raw URL, then a whole date (when dates are ignored),
    then the trie, then the shorthand fallback (only with namespace
    resolution), and otherwise copies one character.
    """
    out: list[str] = []
    i = 0
    while i < len(text):
        url = URL.match(text, i)
        if url:
            out.append(url.group(0))
            i = url.end()
            continue

        step = _literal_date(text, i) if ctx.settings.ignore_date_formats else None
        if step is None:
            step = _link_trie_match(text, i, start, ctx)
        if step is None and ctx.settings.namespace_resolution:
            step = _link_fallback_match(text, i, start, ctx)
        if step is None:
            step = (text[i], i + 1)
        out.append(step[0])
        i = step[1]
    return "".join(out)
