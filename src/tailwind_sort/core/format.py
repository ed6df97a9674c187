import logging
import os
from collections.abc import Collection, Iterable, Iterator
from pathlib import Path

from tailwind_sort.config import FILE_EXTENSIONS, Configuration
from tailwind_sort.core.dialects import (
    Dialect,
    detect_dialect_from_path,
    has_extension,
    normalize_dialect,
    resolve_dialect,
    should_format,
)
from tailwind_sort.core.finder import find_all
from tailwind_sort.core.rewriter import rewrite
from tailwind_sort.core.sections import extract_sections
from tailwind_sort.core.sorter import sort_class_string
from tailwind_sort.models import FileResult, MatchSpan

logger = logging.getLogger(__name__)

_SKIPPED_DIRECTORIES = frozenset({"node_modules", "dist", "build", "__pycache__"})


class DocumentDecodeError(ValueError):
    """Document bytes are not valid UTF-8."""


def decode_document(data: bytes, source: str | None = None) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentDecodeError(f"Cannot decode {source or 'document'} as UTF-8: {exc}") from exc


def plan_document(
    text: str,
    dialect: Dialect,
    attributes: Collection[str],
    functions: Collection[str],
) -> list[tuple[MatchSpan, str]]:
    """Pair every class literal in ``text`` with its sorted replacement."""
    sections = extract_sections(text, dialect)
    spans = find_all(sections, attributes, functions)
    return [(span, sort_class_string(span.raw_value)) for span in spans]


def format_document(
    text: str,
    dialect: Dialect,
    attributes: Collection[str],
    functions: Collection[str],
) -> str | None:
    """Sort every class list in ``text``. Returns ``None`` when nothing changes."""
    return rewrite(text, plan_document(text, dialect, attributes, functions))


def format_text(text: str, dialect: str | Dialect, config: Configuration | None = None) -> str | None:
    config = config or Configuration()
    if not config.enabled:
        return None
    return format_document(text, normalize_dialect(dialect), config.tailwind_attributes, config.tailwind_functions)


def format_file(
    path: str | Path,
    config: Configuration | None = None,
    dialect: str | Dialect | None = None,
    write: bool = True,
) -> FileResult:
    file_path = Path(path)
    resolved_dialect = resolve_dialect(dialect, file_path)

    try:
        data = file_path.read_bytes()
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None

    formatted = format_text(decode_document(data, str(file_path)), resolved_dialect, config)
    if formatted is None:
        return FileResult(path=file_path, dialect=resolved_dialect, changed=False)

    if write:
        file_path.write_bytes(formatted.encode("utf-8"))
        logger.info("Formatted %s", file_path)
    return FileResult(path=file_path, dialect=resolved_dialect, changed=True, written=write)


def iter_source_files(
    paths: Iterable[str | Path],
    extensions: Collection[str] = FILE_EXTENSIONS,
) -> Iterator[Path]:
    """Yield formattable files.

    Explicitly named files are kept unless another formatter owns them; directories
    are walked for files whose extension is in ``extensions``.
    """
    for entry in paths:
        path = Path(entry)
        if not path.is_dir():
            if should_format(path):
                yield path
            continue
        for root, dirs, files in os.walk(path):
            dirs[:] = sorted(d for d in dirs if not d.startswith(".") and d not in _SKIPPED_DIRECTORIES)
            for name in sorted(files):
                candidate = Path(root) / name
                if has_extension(candidate, extensions):
                    yield candidate


def format_paths(
    paths: Iterable[str | Path],
    config: Configuration | None = None,
    dialect: str | Dialect | None = None,
    write: bool = True,
    extensions: Collection[str] = FILE_EXTENSIONS,
) -> list[FileResult]:
    """Format every file under ``paths``; a failure in one file never stops the rest."""
    forced_dialect = normalize_dialect(dialect) if dialect else None
    results: list[FileResult] = []
    for file_path in iter_source_files(paths, extensions):
        try:
            results.append(format_file(file_path, config, forced_dialect, write))
        except (OSError, DocumentDecodeError) as exc:
            logger.exception("Failed to format %s", file_path)
            results.append(
                FileResult(
                    path=file_path,
                    dialect=forced_dialect or detect_dialect_from_path(file_path),
                    changed=False,
                    error=str(exc),
                )
            )
    return results
