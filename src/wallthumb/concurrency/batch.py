"""Windowed async batch scheduler for thumbnail generation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

_DEFAULT_WINDOW_SIZE = 3


class BatchScheduler:
    """Runs an async per-path function over many paths, a window at a time.

    Each window of at most ``window_size`` paths runs concurrently and is
    awaited in full before the next one starts. A path whose call raises
    maps to itself; the batch always completes.
    """

    def __init__(self, window_size: int = _DEFAULT_WINDOW_SIZE) -> None:
        if window_size < 1:
            raise ValueError("window_size must be at least 1")
        self._window_size = window_size

    @property
    def window_size(self) -> int:
        return self._window_size

    async def run(
        self,
        fn: Callable[[Path], Awaitable[Path]],
        paths: Iterable[str | Path],
    ) -> dict[Path, Path]:
        """Apply ``fn`` to every distinct path.

        Args:
            fn: Async callable(path) -> resulting path.
            paths: Source paths; duplicates are processed once.

        Returns a mapping of source path to result, in input order.
        """
        unique = list(dict.fromkeys(Path(p) for p in paths))
        results: dict[Path, Path] = {}

        for start in range(0, len(unique), self._window_size):
            window = unique[start:start + self._window_size]
            outcomes = await asyncio.gather(*(fn(p) for p in window), return_exceptions=True)

            for path, outcome in zip(window, outcomes, strict=True):
                if isinstance(outcome, BaseException):
                    if not isinstance(outcome, Exception):
                        raise outcome
                    logger.error("Thumbnail for %s failed: %s", path, outcome)
                    results[path] = path
                else:
                    results[path] = outcome

        return results
