"""Activity log and reminder task service."""

from dataclasses import dataclass
from datetime import datetime
from functools import partial
from uuid import UUID

from flock_tracker.domain.journal import (
    LogEntry,
    ReminderTask,
    display_order,
    new_log_entry,
    new_task,
)
from flock_tracker.domain.state import Collection, find_by_id
from flock_tracker.services import commands
from flock_tracker.services.clock import Clock
from flock_tracker.services.store import FlockStore


@dataclass
class JournalService:
    """Service for the activity log and reminders."""

    store: FlockStore
    clock: Clock

    def record(self, description: str) -> LogEntry:
        """Append a log entry stamped with the current time."""
        entry = new_log_entry(self.clock.now(), description)
        self.store.mutate(Collection.LOGS, partial(commands.append_log, entry=entry))
        return entry

    def list_logs(self) -> list[LogEntry]:
        """Return the log newest first."""
        return display_order(self.store.state.logs)

    def add_task(self, title: str, due: datetime) -> ReminderTask:
        """Create a reminder task and log it."""
        task = new_task(title, due)
        self.store.mutate(Collection.TASKS, partial(commands.append_task, task=task))
        self.record(f"New task added: {task.title}")
        return task

    def toggle_task_done(self, task_id: UUID) -> ReminderTask | None:
        """Flip a task's done flag."""
        if find_by_id(self.store.state.tasks, task_id) is None:
            return None
        result = self.store.mutate(
            Collection.TASKS, partial(commands.toggle_task_done, task_id=task_id)
        )
        return find_by_id(result.state.tasks, task_id)

    def list_tasks(self) -> list[ReminderTask]:
        """Return tasks in the order they were added."""
        return list(self.store.state.tasks)
