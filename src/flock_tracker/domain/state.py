"""In-memory snapshot of every persisted collection."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, TypeVar
from uuid import UUID

from flock_tracker.domain.flock import Chick, Hen
from flock_tracker.domain.incubation import DEFAULT_ENVIRONMENT, Egg, EnvironmentReading
from flock_tracker.domain.journal import LogEntry, ReminderTask


class Collection(StrEnum):
    """Names of the independently persisted collections."""

    EGGS = "eggs"
    CHICKS = "chicks"
    HENS = "hens"
    ENVIRONMENT = "environment"
    LOGS = "logs"
    TASKS = "tasks"


@dataclass(frozen=True)
class FlockState:
    """All collections at one point in time."""

    eggs: tuple[Egg, ...] = ()
    chicks: tuple[Chick, ...] = ()
    hens: tuple[Hen, ...] = ()
    environment: EnvironmentReading = DEFAULT_ENVIRONMENT
    logs: tuple[LogEntry, ...] = ()
    tasks: tuple[ReminderTask, ...] = ()

    def get(self, collection: Collection) -> object:
        """Return the value held for a collection."""
        return getattr(self, collection.value)


class _Identified(Protocol):
    @property
    def id(self) -> UUID: ...


RecordT = TypeVar("RecordT", bound=_Identified)


def find_by_id(records: tuple[RecordT, ...], record_id: UUID) -> RecordT | None:
    """Return the record with the given id, if present."""
    for record in records:
        if record.id == record_id:
            return record
    return None
