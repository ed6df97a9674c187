import logging
from collections.abc import Sequence

from tailwind_sort.models import MatchSpan

logger = logging.getLogger(__name__)


def rewrite(document: str, replacements: Sequence[tuple[MatchSpan, str]]) -> str | None:
    """Substitute each span's interior with its sorted string in one linear pass.

    Spans must be non-overlapping and increasing by start, all computed against
    ``document``. Returns ``None`` when no replacement differs from its raw value.
    """
    parts: list[str] = []
    cursor = 0
    changed = 0
    for span, sorted_value in replacements:
        if span.start < cursor or span.end < span.start or span.end > len(document):
            raise ValueError(f"Invalid or overlapping span {span.start}:{span.end} (cursor at {cursor})")
        parts.append(document[cursor : span.start])
        parts.append(sorted_value)
        cursor = span.end
        if sorted_value != span.raw_value:
            changed += 1

    if not changed:
        return None
    parts.append(document[cursor:])
    logger.debug("Rewrote %d of %d class literal(s)", changed, len(replacements))
    return "".join(parts)
