"""Watch mode: re-scan files whenever their modification time changes."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Callable

from stylesweep.model import ScanReport
from stylesweep.scanner import StyleScanner

logger = logging.getLogger(__name__)


class PollingWatcher:
    """Polls a file or directory and re-scans what changed.

    After a change is detected the watcher waits ``settle_delay`` seconds
    so editors that write in several steps are seen once, then scans only
    the changed files and hands the report to ``on_change``.
    """

    def __init__(
        self,
        scanner: StyleScanner,
        target: str | Path,
        on_change: Callable[[ScanReport], None],
        settle_delay: float | None = None,
        poll_interval: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.scanner = scanner
        self.target = Path(target)
        self.on_change = on_change
        config = scanner.config
        self.settle_delay = config.settle_delay if settle_delay is None else settle_delay
        self.poll_interval = config.poll_interval if poll_interval is None else poll_interval
        self._sleep = sleep
        self._mtimes: dict[str, int] = {}

    def snapshot(self) -> dict[str, int]:
        """Modification times (ns) of every file currently in scope."""
        mtimes: dict[str, int] = {}
        for path in self.scanner.collect_files(self.target):
            try:
                mtimes[path] = os.stat(path).st_mtime_ns
            except OSError:
                continue
        return mtimes

    def start(self) -> ScanReport:
        """Record the initial state and return a full scan of it."""
        self._mtimes = self.snapshot()
        return self.scanner.scan_paths(sorted(self._mtimes))

    def _diff(self, current: dict[str, int]) -> tuple[list[str], list[str]]:
        changed = sorted(p for p, m in current.items() if self._mtimes.get(p) != m)
        removed = sorted(p for p in self._mtimes if p not in current)
        return changed, removed

    def changed_files(self) -> tuple[list[str], list[str]]:
        """Return ``(changed, removed)`` relative to the last snapshot."""
        return self._diff(self.snapshot())

    def poll(self) -> list[str]:
        """Run one polling iteration; returns the files that were re-scanned.

        The first snapshot only decides whether anything happened. After the
        settle delay a second snapshot is compared with the previous state,
        so files saved during the delay are scanned in the same iteration.
        """
        current = self.snapshot()
        changed, removed = self._diff(current)
        if not changed and not removed:
            return []
        if self.settle_delay > 0:
            self._sleep(self.settle_delay)
            current = self.snapshot()
            changed, removed = self._diff(current)
        self._mtimes = current
        for path in removed:
            logger.info("removed: %s", path)
            self.scanner.cache.invalidate(path)
        if not changed:
            return []
        for path in changed:
            logger.info("changed: %s", path)
            self.scanner.cache.invalidate(path)
        self.on_change(self.scanner.scan_paths(changed))
        return changed

    def run(self, max_polls: int | None = None) -> None:
        """Poll until interrupted (or *max_polls* iterations have run)."""
        count = 0
        while max_polls is None or count < max_polls:
            self._sleep(self.poll_interval)
            self.poll()
            count += 1
