from collections.abc import Sequence

from tailwind_sort.core.priority import sort_key
from tailwind_sort.core.tokens import parse_class_string
from tailwind_sort.models import ClassToken


def sort_tokens(tokens: Sequence[ClassToken]) -> list[ClassToken]:
    keyed = sorted((sort_key(token, index), token) for index, token in enumerate(tokens))
    return [token for _, token in keyed]


def sort_class_string(raw: str) -> str:
    """Sort a class list and join it with single spaces; token text is never altered."""
    return " ".join(token.raw for token in sort_tokens(parse_class_string(raw)))
