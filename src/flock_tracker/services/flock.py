"""Flock service: chicks and laying hens."""

from dataclasses import dataclass, replace
from datetime import datetime, time
from functools import partial
from uuid import UUID

from flock_tracker.domain.flock import (
    DEFAULT_CHICK_WEIGHT_KG,
    DEFAULT_HEALTH_STATUS,
    Chick,
    Hen,
    new_chick,
    new_chick_weight,
    new_hen,
)
from flock_tracker.domain.state import Collection, find_by_id
from flock_tracker.domain.validation import check_non_negative
from flock_tracker.services import commands
from flock_tracker.services.clock import Clock
from flock_tracker.services.journal import JournalService
from flock_tracker.services.photos import ImageStorage
from flock_tracker.services.store import FlockStore


@dataclass
class FlockService:
    """Application service for chick and hen records."""

    store: FlockStore
    journal: JournalService
    clock: Clock
    images: ImageStorage

    def add_chick(  # noqa: PLR0913
        self,
        name: str,
        hatch_date: datetime,
        initial_weight: float = DEFAULT_CHICK_WEIGHT_KG,
        health_status: str = DEFAULT_HEALTH_STATUS,
        photo: bytes | None = None,
    ) -> Chick:
        """Add a chick, storing its photo first when one is given."""
        chick = new_chick(
            name=name,
            hatch_date=hatch_date,
            initial_weight=initial_weight,
            health_status=health_status,
        )
        if photo is not None:
            chick = replace(chick, photo_name=self.images.save(photo))
        self.store.mutate(
            Collection.CHICKS, partial(commands.append_chick, chick=chick)
        )
        self.journal.record(f"{chick.name} chick added")
        return chick

    def record_chick_update(
        self, chick_id: UUID, weight: float, health_status: str | None = None
    ) -> Chick | None:
        """Append a weighing and, if given, a new health status."""
        chick = find_by_id(self.store.state.chicks, chick_id)
        if chick is None:
            return None
        entry = new_chick_weight(self.clock.now(), weight)
        result = self.store.mutate(
            Collection.CHICKS,
            partial(
                commands.record_chick_update,
                chick_id=chick_id,
                weight=entry,
                health_status=_clean(health_status),
            ),
        )
        self.journal.record(f"{chick.name} status/weight updated")
        return find_by_id(result.state.chicks, chick_id)

    def list_chicks(self) -> list[Chick]:
        return list(self.store.state.chicks)

    def add_hen(  # noqa: PLR0913
        self,
        name: str,
        breed: str,
        egg_count: int = 0,
        health_status: str = DEFAULT_HEALTH_STATUS,
        feed_time: time | None = None,
        photo: bytes | None = None,
    ) -> Hen:
        """Add a hen, storing its photo first when one is given."""
        hen = new_hen(
            name=name,
            breed=breed,
            egg_count=egg_count,
            health_status=health_status,
            feed_time=feed_time,
        )
        if photo is not None:
            hen = replace(hen, photo_name=self.images.save(photo))
        self.store.mutate(Collection.HENS, partial(commands.append_hen, hen=hen))
        self.journal.record(f"Hen {hen.name} added")
        return hen

    def update_hen(
        self,
        hen_id: UUID,
        egg_count: int | None = None,
        feed_time: time | None = None,
        health_status: str | None = None,
    ) -> Hen | None:
        """Edit a hen's weekly egg count, feed time or health status."""
        hen = find_by_id(self.store.state.hens, hen_id)
        if hen is None:
            return None
        if egg_count is not None:
            check_non_negative(egg_count, "Egg count")
        result = self.store.mutate(
            Collection.HENS,
            partial(
                commands.update_hen,
                hen_id=hen_id,
                egg_count=egg_count,
                feed_time=feed_time,
                health_status=_clean(health_status),
            ),
        )
        self.journal.record(f"Hen {hen.name} updated")
        return find_by_id(result.state.hens, hen_id)

    def list_hens(self) -> list[Hen]:
        return list(self.store.state.hens)

    def load_photo(self, name: str) -> bytes | None:
        """Return the image bytes behind a photo reference."""
        return self.images.load(name)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None
