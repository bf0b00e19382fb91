"""Telemetry - logging and metrics entry point

Log format: <time> <level> [module] msg
Metric examples: tmux.commands{subcommand=list-panes}, tmux.errors
"""

import logging
import sys

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_logging(level: str | int = "INFO") -> None:
    """Route log records to stderr.

    stdout carries the MCP stdio transport, so nothing may be logged there.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr, force=True)


class Metrics:
    """In-memory counter facade.

    Counts tmux invocations and failures so they can be inspected while
    debugging or asserted in tests.
    """

    def __init__(self):
        self._counters: dict[str, int] = {}

    def inc(self, name: str, labels: dict[str, str] | None = None, value: int = 1) -> None:
        """Increment a counter.

        Args:
            name: Metric name (e.g. "tmux.errors")
            labels: Optional labels (e.g. {"subcommand": "list-panes"})
            value: Increment, default 1
        """
        key = self._make_key(name, labels)
        self._counters[key] = self._counters.get(key, 0) + value

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        """Get a counter value (used by tests)"""
        return self._counters.get(self._make_key(name, labels), 0)

    def get_all_counters(self) -> dict[str, int]:
        return dict(self._counters)

    def summary(self) -> str:
        """One-line "key=value" rendering of every counter, sorted by key"""
        if not self._counters:
            return "no tmux commands run"
        return ", ".join(f"{key}={value}" for key, value in sorted(self._counters.items()))

    def reset(self) -> None:
        """Clear all counters (used by tests)"""
        self._counters.clear()

    def _make_key(self, name: str, labels: dict[str, str] | None) -> str:
        if not labels:
            return name
        label_str = ",".join(f"{k}={v}" for k, v in sorted(labels.items()))
        return f"{name}{{{label_str}}}"


# Global metrics instance
metrics = Metrics()
