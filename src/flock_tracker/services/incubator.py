"""Incubator service: eggs and the environment reading."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from functools import partial
from uuid import UUID

from flock_tracker.domain.incubation import (
    DEFAULT_INCUBATION_DAYS,
    Egg,
    EnvironmentReading,
    new_egg,
    new_environment,
)
from flock_tracker.domain.state import Collection, find_by_id
from flock_tracker.services import commands
from flock_tracker.services.journal import JournalService
from flock_tracker.services.store import FlockStore


@dataclass
class IncubatorService:
    """Application service for incubator actions."""

    store: FlockStore
    journal: JournalService

    def add_egg(
        self, start_date: datetime, incubation_days: int = DEFAULT_INCUBATION_DAYS
    ) -> Egg:
        """Add an egg and log its expected hatch date."""
        egg = new_egg(start_date, incubation_days)
        self.store.mutate(Collection.EGGS, partial(commands.append_egg, egg=egg))
        self.journal.record(
            f"Egg added, hatch expected {egg.expected_hatch_date:%Y-%m-%d}"
        )
        return egg

    def toggle_turned(self, egg_id: UUID) -> Egg | None:
        """Flip the turned-today flag. There is no automatic daily reset."""
        return self._update_egg(egg_id, commands.toggle_turned)

    def mark_hatched(self, egg_id: UUID) -> Egg | None:
        """Mark an egg as hatched."""
        egg = self._update_egg(egg_id, commands.mark_hatched)
        if egg is not None:
            self.journal.record("Egg hatched")
        return egg

    def list_eggs(self) -> list[Egg]:
        return list(self.store.state.eggs)

    def environment(self) -> EnvironmentReading:
        return self.store.state.environment

    def update_environment(
        self, temperature: float, humidity: float
    ) -> EnvironmentReading:
        """Replace the environment reading and log the new values."""
        reading = new_environment(temperature, humidity)
        self.store.mutate(
            Collection.ENVIRONMENT,
            partial(commands.replace_environment, reading=reading),
        )
        self.journal.record(
            f"Environment updated: Temp {reading.temperature}°C, "
            f"Humidity {reading.humidity}%"
        )
        return reading

    def _update_egg(
        self, egg_id: UUID, command: Callable[..., tuple[Egg, ...]]
    ) -> Egg | None:
        if find_by_id(self.store.state.eggs, egg_id) is None:
            return None
        result = self.store.mutate(Collection.EGGS, partial(command, egg_id=egg_id))
        return find_by_id(result.state.eggs, egg_id)
