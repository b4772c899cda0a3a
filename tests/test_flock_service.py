"""Tests for the chick and hen service."""

from datetime import UTC, datetime, time
from uuid import uuid4

import pytest

from flock_tracker.domain.errors import InvalidRecordError
from flock_tracker.services.flock import FlockService
from flock_tracker.services.store import FlockStore
from tests.conftest import NOW, FixedClock, InMemoryImageStorage

HATCH = datetime(2024, 3, 1, 6, 0, tzinfo=UTC)


def test_add_chick_seeds_history_with_hatch_weight(
    flock_service: FlockService, store: FlockStore
) -> None:
    chick = flock_service.add_chick("  Nugget ", HATCH, initial_weight=0.04)

    assert chick.name == "Nugget"
    assert chick.health_status == "Healthy"
    assert len(chick.weight_history) == 1
    assert chick.weight_history[0].date == HATCH
    assert chick.weight_history[0].weight == 0.04
    assert store.state.logs[-1].description == "Nugget chick added"


def test_add_chick_rejects_blank_name(
    flock_service: FlockService, store: FlockStore
) -> None:
    with pytest.raises(InvalidRecordError):
        flock_service.add_chick("   ", HATCH)

    assert store.state.chicks == ()


def test_add_chick_stores_photo(
    flock_service: FlockService, images: InMemoryImageStorage
) -> None:
    chick = flock_service.add_chick("Pip", HATCH, photo=b"jpeg-bytes")

    assert chick.photo_name in images.files
    assert flock_service.load_photo(chick.photo_name) == b"jpeg-bytes"


def test_weight_history_is_append_only(
    flock_service: FlockService, clock: FixedClock
) -> None:
    chick = flock_service.add_chick("Pip", HATCH)
    weights = [0.06, 0.08, 0.11]

    for weight in weights:
        clock.advance(days=1)
        flock_service.record_chick_update(chick.id, weight)

    updated = flock_service.list_chicks()[0]
    assert len(updated.weight_history) == len(weights) + 1
    assert [entry.weight for entry in updated.weight_history] == [0.05, *weights]
    assert updated.weight_history[0] == chick.weight_history[0]
    assert updated.weight_history[-1].date == clock.now()


def test_record_update_changes_health_only_when_given(
    flock_service: FlockService, store: FlockStore
) -> None:
    chick = flock_service.add_chick("Pip", HATCH)

    after_blank = flock_service.record_chick_update(chick.id, 0.07, "  ")
    after_sick = flock_service.record_chick_update(chick.id, 0.07, "Limping")

    assert after_blank is not None and after_blank.health_status == "Healthy"
    assert after_sick is not None and after_sick.health_status == "Limping"
    assert store.state.logs[-1].description == "Pip status/weight updated"


def test_record_update_rejects_non_positive_weight(
    flock_service: FlockService,
) -> None:
    chick = flock_service.add_chick("Pip", HATCH)

    with pytest.raises(InvalidRecordError):
        flock_service.record_chick_update(chick.id, 0.0)

    assert len(flock_service.list_chicks()[0].weight_history) == 1


def test_record_update_unknown_chick(flock_service: FlockService) -> None:
    assert flock_service.record_chick_update(uuid4(), 0.1) is None


def test_add_hen_and_update_fields(
    flock_service: FlockService, store: FlockStore
) -> None:
    hen = flock_service.add_hen("Dot", "Leghorn", egg_count=3)

    updated = flock_service.update_hen(
        hen.id, egg_count=5, feed_time=time(7, 15), health_status="Molting"
    )

    assert updated is not None
    assert updated.egg_count == 5
    assert updated.feed_time == time(7, 15)
    assert updated.health_status == "Molting"
    assert updated.breed == "Leghorn"
    assert [entry.description for entry in store.state.logs] == [
        "Hen Dot added",
        "Hen Dot updated",
    ]


def test_update_hen_keeps_unspecified_fields(flock_service: FlockService) -> None:
    hen = flock_service.add_hen("Dot", "Leghorn", egg_count=3, feed_time=time(6, 0))

    updated = flock_service.update_hen(hen.id, egg_count=0)

    assert updated is not None
    assert updated.egg_count == 0
    assert updated.feed_time == time(6, 0)
    assert updated.health_status == "Healthy"


@pytest.mark.parametrize(
    ("name", "breed", "egg_count"),
    [("", "Sussex", 0), ("Dot", " ", 0), ("Dot", "Sussex", -1)],
)
def test_add_hen_rejects_invalid_fields(
    flock_service: FlockService, name: str, breed: str, egg_count: int
) -> None:
    with pytest.raises(InvalidRecordError):
        flock_service.add_hen(name, breed, egg_count=egg_count)

    assert flock_service.list_hens() == []


def test_update_hen_rejects_negative_egg_count(flock_service: FlockService) -> None:
    hen = flock_service.add_hen("Dot", "Leghorn")

    with pytest.raises(InvalidRecordError):
        flock_service.update_hen(hen.id, egg_count=-2)

    assert flock_service.list_hens()[0].egg_count == 0


def test_log_entries_use_clock(flock_service: FlockService, store: FlockStore) -> None:
    flock_service.add_hen("Dot", "Leghorn")

    assert store.state.logs[0].date == NOW
