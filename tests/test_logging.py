"""Tests for the simulation event log.

The logger keeps structured, simulated-time-stamped entries in memory
so a run can be inspected after the fact.
"""

from py_netsim.logging import LogEntry, Logger, LogLevel

EXPECTED_ENTRIES = 2
TIMESTAMP = 1.5


class TestLogLevel:
    """Verify log level ordering."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR


class TestLogEntry:
    """Verify log entry structure."""

    def test_entry_has_fields(self) -> None:
        """A log entry stores level, message, source, and timestamp."""
        entry = LogEntry(level=LogLevel.INFO, message="hello", source="test", timestamp=TIMESTAMP)
        assert entry.level is LogLevel.INFO
        assert entry.message == "hello"
        assert entry.source == "test"
        assert entry.timestamp == TIMESTAMP

    def test_entry_str(self) -> None:
        """String form includes level, timestamp, source, and message."""
        entry = LogEntry(level=LogLevel.WARNING, message="slow", source="dns", timestamp=150)
        assert str(entry) == "[WARNING] @150 dns: slow"


class TestLogger:
    """Verify logging, filtering, and clearing."""

    def test_starts_empty(self) -> None:
        """A new logger has no entries."""
        assert Logger().entries == []

    def test_log_appends(self) -> None:
        """Logged events appear in order."""
        logger = Logger()
        logger.log(LogLevel.INFO, "one", source="a")
        logger.log(LogLevel.ERROR, "two", source="b")
        assert [e.message for e in logger.entries] == ["one", "two"]

    def test_min_level_drops_low_entries(self) -> None:
        """Entries below the logger's minimum level are discarded."""
        logger = Logger(min_level=LogLevel.INFO)
        logger.log(LogLevel.DEBUG, "noise", source="dns")
        logger.log(LogLevel.INFO, "kept", source="dns")
        assert [e.message for e in logger.entries] == ["kept"]

    def test_filter_by_level(self) -> None:
        """Filtering by level keeps entries at or above it."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "d", source="a")
        logger.log(LogLevel.WARNING, "w", source="a")
        logger.log(LogLevel.ERROR, "e", source="a")
        assert len(logger.filter(min_level=LogLevel.WARNING)) == EXPECTED_ENTRIES

    def test_filter_by_source(self) -> None:
        """Filtering by source keeps only that component's entries."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="dns")
        logger.log(LogLevel.INFO, "y", source="tcp")
        assert [e.message for e in logger.filter(source="dns")] == ["x"]

    def test_filter_returns_copy(self) -> None:
        """Mutating a filter result does not touch the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="dns")
        logger.filter().clear()
        assert len(logger) == 1

    def test_clear(self) -> None:
        """Clear empties the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="dns")
        logger.clear()
        assert len(logger) == 0
