from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, Protocol

# Receives the markup files that changed in one batch.
ChangeHandler = Callable[[set[Path]], Awaitable[Any]]


class FileWatcherPort(Protocol):
    """Source of file-change batches for watch mode."""

    async def start(self) -> None: ...

    async def stop(self) -> None: ...

    async def wait(self) -> None:
        """Block until the watcher stops on its own."""
        ...
