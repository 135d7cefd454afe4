"""Count terminations of monitored processes by symbolic name.

A small companion to the suffix engine for services that run worker
processes (or threads) and want to know how often each of them died.
Anything exposing ``wait()`` (``subprocess.Popen``) or ``join()``
(``threading.Thread``, ``multiprocessing.Process``) can be monitored.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExitStats:
    name: str
    exits: int
    last_exit_code: int | None = None


def _wait_for(process: Any) -> int | None:
    if hasattr(process, "wait"):
        return process.wait()
    process.join()
    # multiprocessing.Process has an exit code, threads do not
    return getattr(process, "exitcode", None)


class ExitMonitor:
    """Watch processes on daemon threads and keep per-name exit counts."""

    def __init__(self):
        self._lock = threading.Lock()
        self._stats: dict[str, ExitStats] = {}

    def monitor(
        self,
        process: Any,
        name: str,
        on_exit: Callable[[], None] | None = None,
    ) -> threading.Thread:
        """Start watching ``process`` under ``name``.

        ``on_exit`` runs on the watcher thread after the exit is recorded.
        Returns the watcher thread so callers can join it.
        """
        if not (hasattr(process, "wait") or hasattr(process, "join")):
            raise TypeError(
                f"Cannot monitor {type(process).__name__}: expected wait() or join()"
            )
        watcher = threading.Thread(
            target=self._watch,
            args=(process, name, on_exit),
            name=f"exit-monitor-{name}",
            daemon=True,
        )
        watcher.start()
        return watcher

    def _watch(
        self, process: Any, name: str, on_exit: Callable[[], None] | None
    ) -> None:
        exit_code = _wait_for(process)
        self._record(name, exit_code)
        logger.info(f"Monitored process '{name}' exited (code={exit_code})")
        if on_exit is None:
            return
        try:
            on_exit()
        except Exception:
            logger.exception(f"Exit callback for '{name}' failed")

    def _record(self, name: str, exit_code: int | None) -> None:
        with self._lock:
            previous = self._stats.get(name)
            exits = previous.exits + 1 if previous else 1
            self._stats[name] = ExitStats(name, exits, exit_code)

    def stats(self) -> list[ExitStats]:
        """Statistics for every name that has exited at least once."""
        with self._lock:
            return sorted(self._stats.values(), key=lambda s: s.name)

    def stats_for(self, name: str) -> ExitStats | None:
        """Statistics for ``name``; ``None`` while it has never exited."""
        with self._lock:
            return self._stats.get(name)

    def reset(self) -> None:
        with self._lock:
            self._stats.clear()


__all__ = ["ExitMonitor", "ExitStats"]
