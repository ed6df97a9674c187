"""Watch mode backed by ``watchfiles``.

``MarkupFilter`` decides which filesystem events matter, ``WatchfilesWatcher``
turns them into batches of paths, and ``FormatOnChange`` sorts classes in each
batch on a worker thread so the event loop keeps receiving changes.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Collection, Sequence
from pathlib import Path

from watchfiles import Change, DefaultFilter, awatch

from tailwind_sort.config import FILE_EXTENSIONS, Configuration
from tailwind_sort.core.dialects import Dialect, has_extension
from tailwind_sort.core.format import format_paths
from tailwind_sort.core.ports.watcher import ChangeHandler
from tailwind_sort.models import FileResult

logger = logging.getLogger(__name__)

ResultReporter = Callable[[FileResult], None]


class MarkupFilter(DefaultFilter):
    """Accept additions and edits of files with a formatted extension.

    Deletions are dropped, and so is everything ``DefaultFilter`` ignores
    (``.git``, ``node_modules``, editor swap files).
    """

    def __init__(self, extensions: Collection[str] = FILE_EXTENSIONS) -> None:
        self.extensions = tuple(extensions)
        super().__init__()

    def __call__(self, change: Change, path: str) -> bool:
        return (
            change != Change.deleted
            and has_extension(Path(path), self.extensions)
            and super().__call__(change, path)
        )


class WatchfilesWatcher:
    """Implements ``FileWatcherPort`` on top of ``watchfiles.awatch``."""

    def __init__(
        self,
        directory: str | Path,
        on_change: ChangeHandler,
        extensions: Collection[str] = FILE_EXTENSIONS,
    ) -> None:
        self._directory = Path(directory)
        self._on_change = on_change
        self._filter = MarkupFilter(extensions)
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watching %s for %s files", self._directory, ", ".join(self._filter.extensions))

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Stopped watching %s", self._directory)

    async def wait(self) -> None:
        if self._task is not None:
            await self._task

    async def _watch(self) -> None:
        async for changes in awatch(self._directory, watch_filter=self._filter):
            paths = {Path(p) for _, p in changes}
            if not paths:
                continue
            logger.info("Detected changes in %d markup file(s)", len(paths))
            try:
                await self._on_change(paths)
            except Exception:
                logger.exception("Failed to handle changes in %s", self._directory)


class FormatOnChange:
    """Change handler that sorts classes in every changed file that still exists."""

    def __init__(
        self,
        config: Configuration,
        dialect: Dialect | None = None,
        report: ResultReporter | None = None,
    ) -> None:
        self._config = config
        self._dialect = dialect
        self._report = report

    async def __call__(self, paths: set[Path]) -> list[FileResult]:
        if not self._config.enabled:
            logger.debug("Formatting disabled, ignoring %d change(s)", len(paths))
            return []
        results = await asyncio.to_thread(self._format, sorted(paths))
        if self._report is not None:
            for result in results:
                self._report(result)
        return results

    def _format(self, paths: Sequence[Path]) -> list[FileResult]:
        # A file can vanish between the event and this call.
        existing = [p for p in paths if p.is_file()]
        return format_paths(existing, self._config, self._dialect)
