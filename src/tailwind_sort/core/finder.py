"""Locate class-bearing string literals inside content sections."""

import logging
import re
from collections.abc import Collection, Iterable
from functools import lru_cache

from tailwind_sort.models import ContentSection, MatchSpan

logger = logging.getLogger(__name__)

_ATTRIBUTE_QUOTES = "\"'"
_LITERAL_QUOTES = "\"'`"
# Markers of interpolated or computed content; such literals are left alone.
_INTERPOLATION_CHARS = frozenset("${}")
# Code literals may also hold escapes; reordering would detach them.
_CODE_SKIP_CHARS = _INTERPOLATION_CHARS | {"\\"}

_Literal = tuple[int, int, str]


@lru_cache(maxsize=64)
def _attribute_pattern(names: tuple[str, ...]) -> re.Pattern[str]:
    alternation = "|".join(re.escape(n) for n in names)
    return re.compile(rf"(?<![\w\-:.@$])(?:{alternation})\s*=\s*(?=[\"'{{])")


@lru_cache(maxsize=64)
def _call_pattern(names: tuple[str, ...]) -> re.Pattern[str]:
    alternation = "|".join(re.escape(n) for n in names)
    return re.compile(rf"(?<![\w$])(?:{alternation})\s*\(")


def _ordered(names: Collection[str]) -> tuple[str, ...]:
    # Longest first so a name never shadows a longer one sharing its prefix.
    return tuple(sorted({n for n in names if n}, key=lambda n: (-len(n), n)))


def _literal_end(text: str, start: int, quote: str) -> int:
    """Index of the quote closing the literal whose interior starts at ``start``."""
    pos = start
    while pos < len(text):
        ch = text[pos]
        if ch == "\\":
            pos += 2
            continue
        if ch == quote:
            return pos
        pos += 1
    return -1


def _scan_group(text: str, start: int, opener: str, closer: str) -> tuple[list[_Literal], int] | None:
    """Collect string literals from ``start`` up to the closer matching an already consumed opener.

    Returns the literals as ``(interior_start, interior_end, quote)`` plus the
    index just past the closer, or ``None`` when the group never closes.
    """
    literals: list[_Literal] = []
    depth = 1
    pos = start
    while pos < len(text):
        ch = text[pos]
        if ch in _LITERAL_QUOTES:
            end = _literal_end(text, pos + 1, ch)
            if end == -1:
                return None
            literals.append((pos + 1, end, ch))
            pos = end + 1
            continue
        if text.startswith("//", pos):
            newline = text.find("\n", pos)
            pos = len(text) if newline == -1 else newline + 1
            continue
        if text.startswith("/*", pos):
            close = text.find("*/", pos + 2)
            pos = len(text) if close == -1 else close + 2
            continue
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return literals, pos + 1
        pos += 1
    return None


def _is_candidate(value: str, skip: frozenset[str] = _INTERPOLATION_CHARS) -> bool:
    return bool(value.strip()) and not (skip & set(value))


def _to_spans(
    section: ContentSection,
    literals: Iterable[_Literal],
    skip: frozenset[str] = _INTERPOLATION_CHARS,
) -> list[MatchSpan]:
    text = section.text
    base = section.base_offset
    return [
        MatchSpan(start=base + start, end=base + end, raw_value=text[start:end], quote_char=quote)
        for start, end, quote in literals
        if _is_candidate(text[start:end], skip)
    ]


def _find_attribute_matches(section: ContentSection, names: tuple[str, ...]) -> list[MatchSpan]:
    text = section.text
    markup: list[_Literal] = []
    code: list[_Literal] = []
    for match in _attribute_pattern(names).finditer(text):
        pos = match.end()
        opener = text[pos]
        if opener in _ATTRIBUTE_QUOTES:
            end = text.find(opener, pos + 1)
            if end != -1:
                markup.append((pos + 1, end, opener))
        else:
            scanned = _scan_group(text, pos + 1, "{", "}")
            if scanned is not None:
                code.extend(scanned[0])
    return _to_spans(section, markup) + _to_spans(section, code, _CODE_SKIP_CHARS)


def _find_call_matches(section: ContentSection, names: tuple[str, ...]) -> list[MatchSpan]:
    text = section.text
    literals: list[_Literal] = []
    for match in _call_pattern(names).finditer(text):
        scanned = _scan_group(text, match.end(), "(", ")")
        if scanned is not None:
            literals.extend(scanned[0])
    return _to_spans(section, literals, _CODE_SKIP_CHARS)


def _merge(spans: Iterable[MatchSpan]) -> list[MatchSpan]:
    """Order spans by position, dropping duplicates and anything nested in an earlier span."""
    merged: list[MatchSpan] = []
    for span in sorted(spans, key=lambda s: (s.start, -s.end)):
        if merged and span.start < merged[-1].end:
            continue
        merged.append(span)
    return merged


def find_matches(
    section: ContentSection,
    attributes: Collection[str],
    functions: Collection[str],
) -> list[MatchSpan]:
    spans: list[MatchSpan] = []
    attribute_names = _ordered(attributes)
    function_names = _ordered(functions)
    if attribute_names:
        spans.extend(_find_attribute_matches(section, attribute_names))
    if function_names:
        spans.extend(_find_call_matches(section, function_names))
    return _merge(spans)


def find_all(
    sections: Iterable[ContentSection],
    attributes: Collection[str],
    functions: Collection[str],
) -> list[MatchSpan]:
    spans: list[MatchSpan] = []
    for section in sections:
        spans.extend(find_matches(section, attributes, functions))
    merged = _merge(spans)
    logger.debug("Found %d class literal(s)", len(merged))
    return merged
