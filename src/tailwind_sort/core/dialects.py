from collections.abc import Collection
from enum import Enum
from pathlib import Path


class Dialect(str, Enum):
    FLAT = "flat"
    WRAPPED_TEMPLATE = "wrapped-template"
    FREEFORM_COMPONENT = "freeform-component"
    FRONTMATTER_PREFIXED = "frontmatter-prefixed"
    UNKNOWN = "unknown"


_DIALECT_ALIASES = {
    "astro": "frontmatter-prefixed",
    "flat": "flat",
    "freeform": "freeform-component",
    "freeform-component": "freeform-component",
    "frontmatter": "frontmatter-prefixed",
    "frontmatter-prefixed": "frontmatter-prefixed",
    "htm": "flat",
    "html": "flat",
    "js": "flat",
    "jsx": "flat",
    "svelte": "freeform-component",
    "ts": "flat",
    "tsx": "flat",
    "unknown": "unknown",
    "vue": "wrapped-template",
    "wrapped": "wrapped-template",
    "wrapped-template": "wrapped-template",
}

_EXTENSION_DIALECT_MAP = {
    ".astro": Dialect.FRONTMATTER_PREFIXED,
    ".cjs": Dialect.FLAT,
    ".htm": Dialect.FLAT,
    ".html": Dialect.FLAT,
    ".js": Dialect.FLAT,
    ".jsx": Dialect.FLAT,
    ".md": Dialect.FLAT,
    ".mdx": Dialect.FLAT,
    ".mjs": Dialect.FLAT,
    ".svelte": Dialect.FREEFORM_COMPONENT,
    ".ts": Dialect.FLAT,
    ".tsx": Dialect.FLAT,
    ".vue": Dialect.WRAPPED_TEMPLATE,
}

# Files handled by other formatters; never touched here.
_NEVER_FORMAT = frozenset({".json", ".jsonc", ".yaml", ".yml"})
_DEFER_TO_OTHERS = frozenset({".json", ".jsonc", ".toml", ".yaml", ".yml"})


def normalize_dialect(dialect: str | Dialect) -> Dialect:
    if isinstance(dialect, Dialect):
        return dialect
    normalized = dialect.strip().lower()
    resolved = _DIALECT_ALIASES.get(normalized)
    if resolved is None:
        raise ValueError(f"Unsupported dialect '{dialect}'. Supported: {sorted(d.value for d in Dialect)}")
    return Dialect(resolved)


def detect_dialect_from_path(file_path: Path) -> Dialect:
    return _EXTENSION_DIALECT_MAP.get(file_path.suffix.lower(), Dialect.UNKNOWN)


def resolve_dialect(dialect: str | Dialect | None, file_path: Path | None) -> Dialect:
    if dialect:
        return normalize_dialect(dialect)
    if file_path:
        return detect_dialect_from_path(file_path)
    return Dialect.UNKNOWN


def should_format(file_path: Path) -> bool:
    return file_path.suffix.lower() not in _NEVER_FORMAT


def should_defer(file_path: Path) -> bool:
    return file_path.suffix.lower() in _DEFER_TO_OTHERS


def has_extension(file_path: Path, extensions: Collection[str]) -> bool:
    """True when the suffix, without its dot, is one of ``extensions``."""
    return file_path.suffix.lower().lstrip(".") in {e.lower().lstrip(".") for e in extensions}
