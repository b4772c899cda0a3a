"""Domain models for the activity log and reminder tasks."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

from flock_tracker.domain.validation import as_utc, check_aware, check_text, clean_text


@dataclass(frozen=True)
class LogEntry:
    """Immutable activity log line."""

    id: UUID
    date: datetime
    description: str

    def __post_init__(self) -> None:
        check_aware(self.date, "Log date")


@dataclass(frozen=True)
class ReminderTask:
    """A dated reminder that can be ticked off."""

    id: UUID
    title: str
    date: datetime
    done: bool

    def __post_init__(self) -> None:
        check_text(self.title, "Task title")
        check_aware(self.date, "Task date")


def new_log_entry(date: datetime, description: str) -> LogEntry:
    """Create a log entry."""
    return LogEntry(id=uuid4(), date=as_utc(date), description=description)


def new_task(title: str, date: datetime) -> ReminderTask:
    """Create an open reminder task. A naive ``date`` is taken to be UTC."""
    return ReminderTask(
        id=uuid4(), title=clean_text(title, "Task title"), date=as_utc(date), done=False
    )


def display_order(logs: Iterable[LogEntry]) -> list[LogEntry]:
    """Return logs newest first."""
    return sorted(logs, key=lambda entry: entry.date, reverse=True)
