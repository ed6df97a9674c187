"""Fixed rank tables and sort keys for class tokens.

The tables are built once at import time and exposed read-only, so they can be
shared freely between documents processed in parallel.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import NamedTuple

from tailwind_sort.models import ClassToken


class Category(IntEnum):
    LAYOUT = 100
    LAYOUT_FLOW = 110
    FLEXBOX = 200
    GRID = 210
    MARGIN = 300
    PADDING = 310
    SPACE = 320
    SIZING = 400
    SIZING_BOUNDS = 410
    POSITION = 500
    INSET = 510
    Z_INDEX = 520
    TYPOGRAPHY = 600
    TEXT_FLOW = 610
    BACKGROUND = 700
    BORDER = 800
    RADIUS = 810
    EFFECTS = 900
    FILTERS = 1000
    TABLES = 1100
    TRANSITIONS = 1200
    TRANSFORMS = 1300
    INTERACTIVITY = 1400
    SVG = 1500
    ACCESSIBILITY = 1600
    OTHER = 9999


class VariantRank(IntEnum):
    SM = 100
    MD = 110
    LG = 120
    XL = 130
    XXL = 140
    DARK = 200
    HOVER = 300
    FOCUS = 310
    ACTIVE = 320
    VISITED = 330
    DISABLED = 340
    ENABLED = 350
    GROUP = 400
    PEER = 410
    FIRST = 500
    LAST = 510
    ODD = 520
    EVEN = 530
    CONTAINER = 600
    DATA_ARIA = 700
    PRINT = 800
    UNRECOGNIZED = 9999


_CATEGORY_WORDS: dict[Category, tuple[str, ...]] = {
    Category.LAYOUT: ("container", "box", "block", "inline", "hidden"),
    Category.LAYOUT_FLOW: ("float", "clear", "object", "overflow", "overscroll"),
    Category.FLEXBOX: ("flex", "grow", "shrink", "basis", "order"),
    Category.GRID: ("grid", "col", "row", "gap", "auto", "justify", "items", "content", "place"),
    Category.MARGIN: ("m", "mx", "my", "mt", "mr", "mb", "ml", "margin"),
    Category.PADDING: ("p", "px", "py", "pt", "pr", "pb", "pl", "padding"),
    Category.SPACE: ("space",),
    Category.SIZING: ("w", "width", "h", "height"),
    Category.SIZING_BOUNDS: ("min", "max"),
    Category.POSITION: ("position", "static", "fixed", "absolute", "relative", "sticky"),
    Category.INSET: ("top", "right", "bottom", "left", "inset"),
    Category.Z_INDEX: ("z",),
    Category.TYPOGRAPHY: ("font", "text", "tracking", "leading", "list", "align"),
    Category.TEXT_FLOW: ("whitespace", "break", "truncate"),
    Category.BACKGROUND: ("bg", "from", "via", "to"),
    Category.BORDER: ("border", "divide", "outline", "ring"),
    Category.RADIUS: ("rounded",),
    Category.EFFECTS: ("shadow", "opacity", "mix", "blur"),
    Category.FILTERS: ("filter", "backdrop", "brightness", "contrast", "grayscale"),
    Category.TABLES: ("caption", "table"),
    Category.TRANSITIONS: ("transition", "duration", "ease", "delay", "animate"),
    Category.TRANSFORMS: ("transform", "origin", "scale", "rotate", "translate", "skew"),
    Category.INTERACTIVITY: ("cursor", "select", "resize", "pointer", "appearance"),
    Category.SVG: ("fill", "stroke"),
    Category.ACCESSIBILITY: ("sr", "screen"),
}

# Multi-segment properties; each ranks with its first segment.
_COMPOUND_PROPERTIES = (
    "auto-cols",
    "auto-rows",
    "backdrop-blur",
    "backdrop-brightness",
    "backdrop-contrast",
    "backdrop-grayscale",
    "backdrop-opacity",
    "border-b",
    "border-l",
    "border-r",
    "border-t",
    "border-x",
    "border-y",
    "col-end",
    "col-span",
    "col-start",
    "divide-x",
    "divide-y",
    "gap-x",
    "gap-y",
    "grid-cols",
    "grid-flow",
    "grid-rows",
    "inset-x",
    "inset-y",
    "justify-items",
    "justify-self",
    "max-h",
    "max-w",
    "min-h",
    "min-w",
    "mix-blend",
    "outline-offset",
    "overflow-x",
    "overflow-y",
    "overscroll-x",
    "overscroll-y",
    "place-content",
    "place-items",
    "place-self",
    "pointer-events",
    "ring-offset",
    "rounded-b",
    "rounded-bl",
    "rounded-br",
    "rounded-l",
    "rounded-r",
    "rounded-t",
    "rounded-tl",
    "rounded-tr",
    "row-end",
    "row-span",
    "row-start",
    "scale-x",
    "scale-y",
    "skew-x",
    "skew-y",
    "space-x",
    "space-y",
    "translate-x",
    "translate-y",
)


def _build_property_table() -> MappingProxyType[str, Category]:
    table = {word: category for category, words in _CATEGORY_WORDS.items() for word in words}
    for compound in _COMPOUND_PROPERTIES:
        table[compound] = table[compound.split("-", 1)[0]]
    return MappingProxyType(table)


PROPERTY_CATEGORIES = _build_property_table()

VARIANT_RANKS: MappingProxyType[str, VariantRank] = MappingProxyType(
    {
        "sm": VariantRank.SM,
        "md": VariantRank.MD,
        "lg": VariantRank.LG,
        "xl": VariantRank.XL,
        "2xl": VariantRank.XXL,
        "dark": VariantRank.DARK,
        "hover": VariantRank.HOVER,
        "focus": VariantRank.FOCUS,
        "active": VariantRank.ACTIVE,
        "visited": VariantRank.VISITED,
        "disabled": VariantRank.DISABLED,
        "enabled": VariantRank.ENABLED,
        "group": VariantRank.GROUP,
        "peer": VariantRank.PEER,
        "first": VariantRank.FIRST,
        "last": VariantRank.LAST,
        "odd": VariantRank.ODD,
        "even": VariantRank.EVEN,
        "print": VariantRank.PRINT,
    }
)

# Parameterised variants (group-hover, peer-checked, @lg, data-[state=open], ...).
_VARIANT_PREFIX_RANKS: tuple[tuple[tuple[str, ...], VariantRank], ...] = (
    (("group-", "group/"), VariantRank.GROUP),
    (("peer-", "peer/"), VariantRank.PEER),
    (("@",), VariantRank.CONTAINER),
    (("data-", "aria-"), VariantRank.DATA_ARIA),
)


class SortKey(NamedTuple):
    important_rank: int
    category_rank: int
    variant_ranks: tuple[int, ...]
    negative_rank: int
    arbitrary_rank: int
    original_index: int


def match_property(core: str) -> str | None:
    """Longest known property that ``core`` starts with, on ``-`` boundaries."""
    segments = core.split("-")
    for count in range(len(segments), 0, -1):
        candidate = "-".join(segments[:count])
        if candidate in PROPERTY_CATEGORIES:
            return candidate
    return None


def category_rank(prop: str) -> Category:
    matched = match_property(prop)
    if matched is None:
        return Category.OTHER
    return PROPERTY_CATEGORIES[matched]


def variant_rank(variant: str) -> VariantRank:
    rank = VARIANT_RANKS.get(variant)
    if rank is not None:
        return rank
    for prefixes, prefixed_rank in _VARIANT_PREFIX_RANKS:
        if variant.startswith(prefixes):
            return prefixed_rank
    return VariantRank.UNRECOGNIZED


def sort_key(token: ClassToken, index: int) -> SortKey:
    return SortKey(
        important_rank=int(token.important),
        category_rank=int(category_rank(token.property)),
        variant_ranks=tuple(int(variant_rank(v)) for v in token.variants),
        negative_rank=int(token.negative),
        arbitrary_rank=int(token.arbitrary is not None),
        original_index=index,
    )
