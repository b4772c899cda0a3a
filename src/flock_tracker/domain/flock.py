"""Domain models for chicks and laying hens."""

from dataclasses import dataclass
from datetime import datetime, time
from uuid import UUID, uuid4

from flock_tracker.domain.errors import InvalidRecordError
from flock_tracker.domain.validation import (
    as_utc,
    check_aware,
    check_non_negative,
    check_positive,
    check_text,
    clean_text,
)

DEFAULT_HEALTH_STATUS = "Healthy"
DEFAULT_CHICK_WEIGHT_KG = 0.05


@dataclass(frozen=True)
class ChickWeight:
    """A single weighing, in kilograms."""

    id: UUID
    date: datetime
    weight: float

    def __post_init__(self) -> None:
        check_aware(self.date, "Weighing date")
        check_positive(self.weight, "Weight")


@dataclass(frozen=True)
class Chick:
    """A chick with its growth history."""

    id: UUID
    name: str
    hatch_date: datetime
    weight_history: tuple[ChickWeight, ...]
    health_status: str
    photo_name: str | None = None

    def __post_init__(self) -> None:
        check_text(self.name, "Chick name")
        check_aware(self.hatch_date, "Hatch date")
        if not self.weight_history:
            raise InvalidRecordError("Weight history must hold the hatch weight")


@dataclass(frozen=True)
class Hen:
    """A laying hen. ``egg_count`` is the manually entered count for this week."""

    id: UUID
    name: str
    egg_count: int
    feed_time: time | None
    health_status: str
    breed: str
    photo_name: str | None = None

    def __post_init__(self) -> None:
        check_text(self.name, "Hen name")
        check_text(self.breed, "Breed")
        check_non_negative(self.egg_count, "Egg count")


def new_chick_weight(date: datetime, weight: float) -> ChickWeight:
    """Create a weight entry."""
    return ChickWeight(id=uuid4(), date=as_utc(date), weight=float(weight))


def new_chick(
    name: str,
    hatch_date: datetime,
    initial_weight: float = DEFAULT_CHICK_WEIGHT_KG,
    health_status: str = DEFAULT_HEALTH_STATUS,
    photo_name: str | None = None,
) -> Chick:
    """Create a chick whose history starts with its hatch weight."""
    hatched = as_utc(hatch_date)
    return Chick(
        id=uuid4(),
        name=clean_text(name, "Chick name"),
        hatch_date=hatched,
        weight_history=(new_chick_weight(hatched, initial_weight),),
        health_status=health_status,
        photo_name=photo_name,
    )


def new_hen(  # noqa: PLR0913
    name: str,
    breed: str,
    egg_count: int = 0,
    health_status: str = DEFAULT_HEALTH_STATUS,
    feed_time: time | None = None,
    photo_name: str | None = None,
) -> Hen:
    """Create a hen record."""
    return Hen(
        id=uuid4(),
        name=clean_text(name, "Hen name"),
        egg_count=egg_count,
        feed_time=feed_time,
        health_status=health_status,
        breed=clean_text(breed, "Breed"),
        photo_name=photo_name,
    )
