"""Domain models for egg incubation."""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID, uuid4

from flock_tracker.domain.errors import InvalidRecordError
from flock_tracker.domain.validation import as_utc, check_aware

MIN_INCUBATION_DAYS = 18
MAX_INCUBATION_DAYS = 24
DEFAULT_INCUBATION_DAYS = 21
MAX_HUMIDITY = 100.0


@dataclass(frozen=True)
class Egg:
    """An egg placed in the incubator."""

    id: UUID
    start_date: datetime
    incubation_days: int
    turned_today: bool
    expected_hatch_date: datetime
    hatched: bool

    def __post_init__(self) -> None:
        if not MIN_INCUBATION_DAYS <= self.incubation_days <= MAX_INCUBATION_DAYS:
            raise InvalidRecordError(
                f"Incubation days must be between {MIN_INCUBATION_DAYS} "
                f"and {MAX_INCUBATION_DAYS}, got {self.incubation_days}"
            )
        check_aware(self.start_date, "Start date")
        check_aware(self.expected_hatch_date, "Expected hatch date")
        if self.expected_hatch_date != self.start_date + timedelta(
            days=self.incubation_days
        ):
            raise InvalidRecordError(
                "Expected hatch date must be the start date plus incubation days"
            )


@dataclass(frozen=True)
class EnvironmentReading:
    """Current incubator temperature (°C) and relative humidity (%)."""

    temperature: float
    humidity: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.temperature):
            raise InvalidRecordError("Temperature must be a finite number")
        if not math.isfinite(self.humidity) or not (
            0.0 <= self.humidity <= MAX_HUMIDITY
        ):
            raise InvalidRecordError("Humidity must be between 0 and 100 percent")


DEFAULT_ENVIRONMENT = EnvironmentReading(temperature=37.5, humidity=55.0)


def new_egg(
    start_date: datetime, incubation_days: int = DEFAULT_INCUBATION_DAYS
) -> Egg:
    """Create an egg with its hatch date fixed at creation time.

    A naive ``start_date`` is taken to be UTC.
    """
    start = as_utc(start_date)
    return Egg(
        id=uuid4(),
        start_date=start,
        incubation_days=incubation_days,
        turned_today=False,
        expected_hatch_date=start + timedelta(days=incubation_days),
        hatched=False,
    )


def new_environment(temperature: float, humidity: float) -> EnvironmentReading:
    return EnvironmentReading(temperature=float(temperature), humidity=float(humidity))
