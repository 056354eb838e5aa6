"""Simulation event log.

The logger records structured entries for events that happen during a
simulation run: which domain resolved and when.  Entries
are stamped with *simulated* time, not wall-clock time, so two replays
of the same timeline produce identical logs.

The log lives in memory and is thrown away with the run.  Components
write to it under a short source tag (the cache uses ``"dns"``), and
callers read it back by severity or by tag.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """How much an event matters; higher values are more severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """One event, stamped with the simulated instant it happened at."""

    level: LogLevel
    message: str
    source: str
    timestamp: float = 0.0

    def __str__(self) -> str:
        """Format as ``[LEVEL] @timestamp source: message``."""
        return f"[{self.level.name}] @{self.timestamp:g} {self.source}: {self.message}"


class Logger:
    """Collects entries in arrival order and answers simple queries over them."""

    def __init__(self, *, min_level: LogLevel = LogLevel.DEBUG) -> None:
        """Create an empty logger.

        Args:
            min_level: Entries below this level are dropped on arrival.

        """
        self._entries: list[LogEntry] = []
        self._min_level = min_level

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in the order they were logged."""
        return list(self._entries)

    @property
    def min_level(self) -> LogLevel:
        """Return the lowest level this logger keeps."""
        return self._min_level

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        timestamp: float = 0.0,
    ) -> None:
        """Record an event, unless it falls below the logger's minimum level."""
        if level < self._min_level:
            return
        self._entries.append(
            LogEntry(level=level, message=message, source=source, timestamp=timestamp)
        )

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return a new list of entries at or above *min_level* and from *source*.

        Either criterion may be omitted.
        """
        return [
            entry
            for entry in self._entries
            if (min_level is None or entry.level >= min_level)
            and (source is None or entry.source == source)
        ]

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)
