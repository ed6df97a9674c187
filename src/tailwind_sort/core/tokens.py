from tailwind_sort.core.priority import match_property
from tailwind_sort.models import ClassToken, ImportantPosition

_OPENERS = "[("
_CLOSERS = "])"


def _split_variants(token: str) -> list[str]:
    """Split on ``:`` outside brackets and parentheses."""
    parts: list[str] = []
    depth = 0
    start = 0
    for index, ch in enumerate(token):
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth = max(depth - 1, 0)
        elif ch == ":" and depth == 0:
            parts.append(token[start:index])
            start = index + 1
    parts.append(token[start:])
    return parts


def _arbitrary_start(core: str) -> int:
    """Index of the ``[`` opening a trailing bracket group, or -1."""
    if not core.endswith("]"):
        return -1
    depth = 0
    for index in range(len(core) - 1, -1, -1):
        ch = core[index]
        if ch == "]":
            depth += 1
        elif ch == "[":
            depth -= 1
            if depth == 0:
                return index
    return -1


def parse_class_token(raw: str) -> ClassToken:
    segments = _split_variants(raw)
    important_position: ImportantPosition | None = None
    if len(segments) > 1 and raw.startswith("!"):
        important_position = "prefix"
        segments[0] = segments[0][1:]

    variants = tuple(segments[:-1])
    core = segments[-1]
    if important_position is None:
        if core.startswith("!"):
            important_position = "core"
            core = core[1:]
        elif len(core) > 1 and core.endswith("!"):
            important_position = "suffix"
            core = core[:-1]

    negative = core.startswith("-")
    if negative:
        core = core[1:]

    value: str | None = None
    arbitrary: str | None = None
    dashed = False
    bracket = _arbitrary_start(core)
    if bracket != -1:
        prop = core[:bracket]
        arbitrary = core[bracket + 1 : -1]
        dashed = prop.endswith("-")
        if dashed:
            prop = prop[:-1]
    else:
        known = match_property(core)
        prop = core
        if known is not None and known != core:
            prop = known
            value = core[len(known) + 1 :]
            dashed = True

    return ClassToken(
        raw=raw,
        variants=variants,
        important=important_position is not None,
        negative=negative,
        property=prop,
        value=value,
        arbitrary=arbitrary,
        important_position=important_position,
        dashed=dashed,
    )


def parse_class_string(raw: str) -> list[ClassToken]:
    """Parse a whitespace-separated class list, keeping the original order."""
    return [parse_class_token(token) for token in raw.split()]
