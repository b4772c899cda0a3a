"""Tests for the incubator service."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from flock_tracker.domain.errors import InvalidRecordError
from flock_tracker.domain.incubation import EnvironmentReading
from flock_tracker.services.incubator import IncubatorService
from flock_tracker.services.store import FlockStore
from tests.conftest import FixedClock, InMemoryKeyValueStore


def test_add_egg_fixes_hatch_date_from_start(
    incubator_service: IncubatorService, clock: FixedClock
) -> None:
    start = datetime(2023, 12, 30, tzinfo=UTC)

    egg = incubator_service.add_egg(start, incubation_days=21)
    clock.advance(days=40)

    assert egg.expected_hatch_date == datetime(2024, 1, 20, tzinfo=UTC)
    assert egg.turned_today is False
    assert egg.hatched is False
    assert incubator_service.list_eggs()[0].expected_hatch_date == (
        start + timedelta(days=21)
    )


def test_add_egg_logs_expected_date(
    incubator_service: IncubatorService, store: FlockStore
) -> None:
    incubator_service.add_egg(datetime(2024, 3, 1, tzinfo=UTC))

    assert [entry.description for entry in store.state.logs] == [
        "Egg added, hatch expected 2024-03-22"
    ]


@pytest.mark.parametrize("days", [17, 25])
def test_add_egg_rejects_days_out_of_range(
    incubator_service: IncubatorService, store: FlockStore, days: int
) -> None:
    with pytest.raises(InvalidRecordError):
        incubator_service.add_egg(datetime(2024, 3, 1, tzinfo=UTC), days)

    assert store.state.eggs == ()
    assert store.state.logs == ()


def test_toggle_turned_twice_restores_flag(
    incubator_service: IncubatorService,
) -> None:
    egg = incubator_service.add_egg(datetime(2024, 3, 1, tzinfo=UTC))

    first = incubator_service.toggle_turned(egg.id)
    second = incubator_service.toggle_turned(egg.id)

    assert first is not None and first.turned_today is True
    assert second is not None and second.turned_today is False
    assert incubator_service.list_eggs()[0] == egg


def test_toggle_turned_unknown_egg_writes_nothing(
    incubator_service: IncubatorService, backend: InMemoryKeyValueStore
) -> None:
    assert incubator_service.toggle_turned(uuid4()) is None
    assert backend.writes == []


def test_mark_hatched_keeps_hatch_date(
    incubator_service: IncubatorService, store: FlockStore
) -> None:
    egg = incubator_service.add_egg(datetime(2024, 3, 1, tzinfo=UTC), 19)

    hatched = incubator_service.mark_hatched(egg.id)

    assert hatched is not None
    assert hatched.hatched is True
    assert hatched.expected_hatch_date == egg.expected_hatch_date
    assert store.state.logs[-1].description == "Egg hatched"


def test_environment_defaults_then_updates(
    incubator_service: IncubatorService, store: FlockStore
) -> None:
    assert incubator_service.environment() == EnvironmentReading(37.5, 55.0)

    reading = incubator_service.update_environment(37.8, 62)

    assert reading == EnvironmentReading(37.8, 62.0)
    assert store.state.environment == reading
    assert store.state.logs[-1].description == (
        "Environment updated: Temp 37.8°C, Humidity 62.0%"
    )


def test_environment_update_survives_reload(
    incubator_service: IncubatorService, backend: InMemoryKeyValueStore
) -> None:
    incubator_service.update_environment(38.1, 50.0)

    reloaded = FlockStore(backend).initialize()

    assert reloaded.environment == EnvironmentReading(38.1, 50.0)


@pytest.mark.parametrize(
    ("temperature", "humidity"),
    [(float("nan"), 55.0), (37.5, -1.0), (37.5, 101.0)],
)
def test_environment_rejects_invalid_values(
    incubator_service: IncubatorService, temperature: float, humidity: float
) -> None:
    with pytest.raises(InvalidRecordError):
        incubator_service.update_environment(temperature, humidity)

    assert incubator_service.environment() == EnvironmentReading(37.5, 55.0)
