"""Pure collection updates applied through ``FlockStore.mutate``.

Every function takes the current collection and returns a new one; nothing
here touches storage. Functions that address a record by id return the
collection unchanged when the id is unknown.
"""

from dataclasses import replace
from datetime import time
from uuid import UUID

from flock_tracker.domain.flock import Chick, ChickWeight, Hen
from flock_tracker.domain.incubation import Egg, EnvironmentReading
from flock_tracker.domain.journal import LogEntry, ReminderTask


def append_egg(eggs: tuple[Egg, ...], egg: Egg) -> tuple[Egg, ...]:
    return (*eggs, egg)


def toggle_turned(eggs: tuple[Egg, ...], egg_id: UUID) -> tuple[Egg, ...]:
    return tuple(
        replace(egg, turned_today=not egg.turned_today) if egg.id == egg_id else egg
        for egg in eggs
    )


def mark_hatched(eggs: tuple[Egg, ...], egg_id: UUID) -> tuple[Egg, ...]:
    return tuple(
        replace(egg, hatched=True) if egg.id == egg_id else egg for egg in eggs
    )


def append_chick(chicks: tuple[Chick, ...], chick: Chick) -> tuple[Chick, ...]:
    return (*chicks, chick)


def record_chick_update(
    chicks: tuple[Chick, ...],
    chick_id: UUID,
    weight: ChickWeight,
    health_status: str | None = None,
) -> tuple[Chick, ...]:
    """Append one weight entry and optionally replace the health status."""

    def apply(chick: Chick) -> Chick:
        return replace(
            chick,
            weight_history=(*chick.weight_history, weight),
            health_status=health_status or chick.health_status,
        )

    return tuple(apply(chick) if chick.id == chick_id else chick for chick in chicks)


def append_hen(hens: tuple[Hen, ...], hen: Hen) -> tuple[Hen, ...]:
    return (*hens, hen)


def update_hen(
    hens: tuple[Hen, ...],
    hen_id: UUID,
    egg_count: int | None = None,
    feed_time: time | None = None,
    health_status: str | None = None,
) -> tuple[Hen, ...]:
    """Replace the editable fields of one hen; ``None`` keeps a field."""

    def apply(hen: Hen) -> Hen:
        return replace(
            hen,
            egg_count=hen.egg_count if egg_count is None else egg_count,
            feed_time=hen.feed_time if feed_time is None else feed_time,
            health_status=health_status or hen.health_status,
        )

    return tuple(apply(hen) if hen.id == hen_id else hen for hen in hens)


def replace_environment(
    _current: EnvironmentReading, reading: EnvironmentReading
) -> EnvironmentReading:
    return reading


def append_log(logs: tuple[LogEntry, ...], entry: LogEntry) -> tuple[LogEntry, ...]:
    return (*logs, entry)


def append_task(
    tasks: tuple[ReminderTask, ...], task: ReminderTask
) -> tuple[ReminderTask, ...]:
    return (*tasks, task)


def toggle_task_done(
    tasks: tuple[ReminderTask, ...], task_id: UUID
) -> tuple[ReminderTask, ...]:
    return tuple(
        replace(task, done=not task.done) if task.id == task_id else task
        for task in tasks
    )
