"""Derived views over the flock: ages, countdowns and summaries."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from flock_tracker.domain.flock import Chick
from flock_tracker.domain.incubation import Egg
from flock_tracker.services.clock import Clock
from flock_tracker.services.store import FlockStore


@dataclass(frozen=True)
class GrowthPoint:
    """One point of a chick's growth curve."""

    date: datetime
    weight: float


@dataclass(frozen=True)
class GrowthSeries:
    """Weight history of a single chick."""

    chick_id: UUID
    name: str
    points: list[GrowthPoint]


@dataclass
class StatsService:
    """Read-only computations for display."""

    store: FlockStore
    clock: Clock

    def days_left(self, egg: Egg) -> int:
        """Whole days of incubation remaining, never below zero."""
        elapsed = (self.clock.now() - egg.start_date).days
        return max(0, egg.incubation_days - elapsed)

    def chick_age_days(self, chick: Chick) -> int:
        return (self.clock.now() - chick.hatch_date).days

    def chick_health_summary(self) -> str:
        statuses = [chick.health_status for chick in self.store.state.chicks]
        return _health_summary(statuses, "chick")

    def hen_health_summary(self) -> str:
        statuses = [hen.health_status for hen in self.store.state.hens]
        return _health_summary(statuses, "hen")

    def growth_series(self) -> list[GrowthSeries]:
        """Return every chick's weights in recording order."""
        return [
            GrowthSeries(
                chick_id=chick.id,
                name=chick.name,
                points=[
                    GrowthPoint(date=entry.date, weight=entry.weight)
                    for entry in chick.weight_history
                ],
            )
            for chick in self.store.state.chicks
        ]

    def weekly_egg_total(self) -> int:
        """Sum of the hens' manually entered weekly egg counts."""
        return sum(hen.egg_count for hen in self.store.state.hens)


def is_healthy(status: str) -> bool:
    lowered = status.lower()
    return "healthy" in lowered and "unhealthy" not in lowered


def _health_summary(statuses: Iterable[str], noun: str) -> str:
    attention = sum(1 for status in statuses if not is_healthy(status))
    if attention == 0:
        return "All healthy"
    return f"{attention} {noun}(s) need attention"
