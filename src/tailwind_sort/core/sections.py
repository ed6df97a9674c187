"""Split a document into the ranges that may hold class tokens.

Each dialect hides code and style differently; the handlers below return the
ranges that remain once those regions are cut away. Excluded text is never
handed to the token finder.
"""

import logging
from collections.abc import Callable, Sequence
from types import MappingProxyType

from tailwind_sort.core.dialects import Dialect
from tailwind_sort.models import ContentSection

logger = logging.getLogger(__name__)

_WRAPPER_TAG = "template"
_BLOCK_TAGS = ("script", "style")
_FRONTMATTER_FENCE = "---"
_TAG_NAME_END = frozenset(" \t\r\n\f>/")


def _whole(text: str) -> list[ContentSection]:
    return _section(text, 0, len(text))


def _section(text: str, start: int, end: int) -> list[ContentSection]:
    if start >= end:
        return []
    return [ContentSection(base_offset=start, text=text[start:end])]


def _find_tag_open(text: str, tag: str, pos: int) -> int:
    """Index of the next ``<tag`` whose name is not a prefix of a longer name."""
    needle = f"<{tag}"
    while True:
        idx = text.find(needle, pos)
        if idx == -1:
            return -1
        after = idx + len(needle)
        if after == len(text) or text[after] in _TAG_NAME_END:
            return idx
        pos = after


def _tag_end(text: str, start: int) -> int:
    """Index just past the ``>`` closing the tag that starts at ``start``, or -1."""
    idx = text.find(">", start)
    return -1 if idx == -1 else idx + 1


def _extract_flat(text: str) -> list[ContentSection]:
    return _whole(text)


def _extract_wrapped(text: str) -> list[ContentSection]:
    open_start = _find_tag_open(text, _WRAPPER_TAG, 0)
    if open_start == -1:
        return _whole(text)
    interior_start = _tag_end(text, open_start)
    if interior_start == -1 or text[interior_start - 2] == "/":
        return _whole(text)

    close_needle = f"</{_WRAPPER_TAG}"
    depth = 1
    pos = interior_start
    while True:
        next_close = text.find(close_needle, pos)
        if next_close == -1:
            return _whole(text)
        next_open = _find_tag_open(text, _WRAPPER_TAG, pos)
        if next_open != -1 and next_open < next_close:
            open_end = _tag_end(text, next_open)
            if open_end == -1:
                return _whole(text)
            if text[open_end - 2] != "/":
                depth += 1
            pos = open_end
            continue
        depth -= 1
        if depth == 0:
            return _section(text, interior_start, next_close)
        close_end = _tag_end(text, next_close)
        if close_end == -1:
            return _whole(text)
        pos = close_end


def _block_exclusions(text: str) -> list[tuple[int, int]]:
    exclusions: list[tuple[int, int]] = []
    pos = 0
    while pos < len(text):
        found = [(idx, tag) for tag in _BLOCK_TAGS if (idx := _find_tag_open(text, tag, pos)) != -1]
        if not found:
            break
        start, tag = min(found)
        open_end = _tag_end(text, start)
        if open_end == -1:
            exclusions.append((start, len(text)))
            break
        if text[open_end - 2] == "/":
            exclusions.append((start, open_end))
            pos = open_end
            continue
        close_start = text.find(f"</{tag}", open_end)
        close_end = -1 if close_start == -1 else _tag_end(text, close_start)
        end = len(text) if close_end == -1 else close_end
        exclusions.append((start, end))
        pos = end
    return exclusions


def _extract_freeform(text: str) -> list[ContentSection]:
    exclusions = sorted(_block_exclusions(text))
    if not exclusions:
        return _whole(text)
    sections: list[ContentSection] = []
    cursor = 0
    for start, end in exclusions:
        sections.extend(_section(text, cursor, start))
        cursor = max(cursor, end)
    sections.extend(_section(text, cursor, len(text)))
    return sections


def _extract_frontmatter(text: str) -> list[ContentSection]:
    lines = text.splitlines(keepends=True)
    offset = 0
    index = 0
    while index < len(lines) and not lines[index].strip():
        offset += len(lines[index])
        index += 1
    if index == len(lines) or lines[index].strip() != _FRONTMATTER_FENCE:
        return _whole(text)
    offset += len(lines[index])
    for line in lines[index + 1 :]:
        offset += len(line)
        if line.strip() == _FRONTMATTER_FENCE:
            return _section(text, offset, len(text))
    return _whole(text)


_HANDLERS: MappingProxyType[Dialect, Callable[[str], list[ContentSection]]] = MappingProxyType(
    {
        Dialect.FLAT: _extract_flat,
        Dialect.WRAPPED_TEMPLATE: _extract_wrapped,
        Dialect.FREEFORM_COMPONENT: _extract_freeform,
        Dialect.FRONTMATTER_PREFIXED: _extract_frontmatter,
        Dialect.UNKNOWN: _extract_flat,
    }
)


def extract_sections(text: str, dialect: Dialect) -> list[ContentSection]:
    sections = _HANDLERS[dialect](text)
    logger.debug("Extracted %d section(s) for dialect %s", len(sections), dialect.value)
    return sections


def excluded_ranges(text: str, sections: Sequence[ContentSection]) -> list[tuple[int, int]]:
    """Return the ``(start, end)`` ranges not covered by ``sections``."""
    ranges: list[tuple[int, int]] = []
    cursor = 0
    for section in sections:
        if section.base_offset > cursor:
            ranges.append((cursor, section.base_offset))
        cursor = section.end_offset
    if cursor < len(text):
        ranges.append((cursor, len(text)))
    return ranges
