from tailwind_sort.config import Configuration, load_config, resolve_config
from tailwind_sort.core.dialects import Dialect, detect_dialect_from_path, normalize_dialect, resolve_dialect
from tailwind_sort.core.format import (
    DocumentDecodeError,
    decode_document,
    format_document,
    format_file,
    format_paths,
    format_text,
)
from tailwind_sort.core.sorter import sort_class_string
from tailwind_sort.models import ClassToken, ContentSection, FileResult, MatchSpan

__all__ = [
    "ClassToken",
    "Configuration",
    "ContentSection",
    "Dialect",
    "DocumentDecodeError",
    "FileResult",
    "MatchSpan",
    "decode_document",
    "detect_dialect_from_path",
    "format_document",
    "format_file",
    "format_paths",
    "format_text",
    "load_config",
    "normalize_dialect",
    "resolve_config",
    "resolve_dialect",
    "sort_class_string",
]
