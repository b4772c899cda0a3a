"""Command-line front end for Flock Tracker."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, time
from functools import update_wrapper
from pathlib import Path
from typing import Any, TypeVar
from uuid import UUID

import click

from flock_tracker.app_logging import configure_logging
from flock_tracker.config import Settings
from flock_tracker.containers import AppContainer, build_container
from flock_tracker.domain.errors import InvalidRecordError
from flock_tracker.domain.incubation import (
    DEFAULT_INCUBATION_DAYS,
    MAX_INCUBATION_DAYS,
    MIN_INCUBATION_DAYS,
)
from flock_tracker.services.store import MutationResult

_DATE = click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%d %H:%M"])
_TIME_OF_DAY = click.DateTime(formats=["%H:%M"])

RecordT = TypeVar("RecordT")


@dataclass
class _Session:
    """Per-invocation state; the container is built on first use."""

    settings: Settings
    container: AppContainer | None = None


def _load_container(ctx: click.Context) -> AppContainer:
    session = ctx.find_object(_Session)
    if session is None:
        raise RuntimeError("flock-tracker commands must run under the cli group")
    if session.container is None:
        container = build_container(session.settings)
        container.store.subscribe(_warn_if_unsaved)
        ctx.find_root().call_on_close(container.close_resources)
        session.container = container
    return session.container


def pass_container(f: Callable[..., Any]) -> Callable[..., Any]:
    """Pass the application container as the first argument, building it lazily."""

    @click.pass_context
    def new_func(ctx: click.Context, /, *args: Any, **kwargs: Any) -> Any:
        return ctx.invoke(f, _load_container(ctx), *args, **kwargs)

    return update_wrapper(new_func, f)


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the database and photos",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None) -> None:
    """Track incubating eggs, chicks, hens and reminders."""
    settings = Settings(data_dir=data_dir) if data_dir else Settings()
    configure_logging(settings.log_level)
    ctx.obj = _Session(settings)


@cli.command()
@pass_container
def status(container: AppContainer) -> None:
    """Show an overview of the flock and incubator."""
    stats = container.stats_service
    reading = container.incubator_service.environment()
    incubating = [
        egg for egg in container.incubator_service.list_eggs() if not egg.hatched
    ]
    click.echo(f"Temperature: {reading.temperature:.1f} °C")
    click.echo(f"Humidity: {reading.humidity:.0f} %")
    click.echo(f"Eggs incubating: {len(incubating)}")
    click.echo(f"Chicks: {len(container.flock_service.list_chicks())}")
    click.echo(f"Hens: {len(container.flock_service.list_hens())}")
    click.echo(f"Eggs laid this week: {stats.weekly_egg_total()}")
    click.echo(f"Chicks Health Summary: {stats.chick_health_summary()}")
    click.echo(f"Hens Health Summary: {stats.hen_health_summary()}")


@cli.group()
def eggs() -> None:
    """Manage incubating eggs."""


@eggs.command("add")
@click.option("--start", "start_date", type=_DATE, default=None, help="Start date")
@click.option(
    "--days",
    type=click.IntRange(MIN_INCUBATION_DAYS, MAX_INCUBATION_DAYS),
    default=DEFAULT_INCUBATION_DAYS,
    show_default=True,
    help="Incubation length in days",
)
@pass_container
def eggs_add(container: AppContainer, start_date: datetime | None, days: int) -> None:
    """Add an egg to the incubator."""
    start = _as_utc(start_date) if start_date else datetime.now(tz=UTC)
    egg = _guard(lambda: container.incubator_service.add_egg(start, days))
    click.echo(f"Added egg {egg.id}, hatch expected {egg.expected_hatch_date:%Y-%m-%d}")


@eggs.command("turn")
@click.argument("egg_id", type=click.UUID)
@pass_container
def eggs_turn(container: AppContainer, egg_id: UUID) -> None:
    """Toggle whether an egg was turned today."""
    egg = _require(container.incubator_service.toggle_turned(egg_id), "egg", egg_id)
    click.echo(f"Turned today: {'Yes' if egg.turned_today else 'No'}")


@eggs.command("hatch")
@click.argument("egg_id", type=click.UUID)
@pass_container
def eggs_hatch(container: AppContainer, egg_id: UUID) -> None:
    """Mark an egg as hatched."""
    _require(container.incubator_service.mark_hatched(egg_id), "egg", egg_id)
    click.echo("Hatched")


@eggs.command("list")
@pass_container
def eggs_list(container: AppContainer) -> None:
    """List eggs with their countdowns."""
    eggs_in_incubator = container.incubator_service.list_eggs()
    if not eggs_in_incubator:
        click.echo("No eggs yet")
        return
    for egg in eggs_in_incubator:
        if egg.hatched:
            state = "Hatched"
        else:
            turned = "Yes" if egg.turned_today else "No"
            state = f"Turned Today: {turned}"
        click.echo(
            f"{egg.id}  days left: {container.stats_service.days_left(egg):<3} "
            f"expected: {egg.expected_hatch_date:%Y-%m-%d}  {state}"
        )


@cli.group()
def chicks() -> None:
    """Manage chicks."""


@chicks.command("add")
@click.argument("name")
@click.option("--hatched", "hatch_date", type=_DATE, default=None, help="Hatch date")
@click.option("--weight", type=float, default=0.05, show_default=True, help="kg")
@click.option("--health", default="Healthy", show_default=True)
@click.option(
    "--photo", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@pass_container
def chicks_add(  # noqa: PLR0913
    container: AppContainer,
    name: str,
    hatch_date: datetime | None,
    weight: float,
    health: str,
    photo: Path | None,
) -> None:
    """Add a chick."""
    hatched = _as_utc(hatch_date) if hatch_date else datetime.now(tz=UTC)
    chick = _guard(
        lambda: container.flock_service.add_chick(
            name=name,
            hatch_date=hatched,
            initial_weight=weight,
            health_status=health,
            photo=photo.read_bytes() if photo else None,
        )
    )
    click.echo(f"Added chick {chick.name} ({chick.id})")


@chicks.command("update")
@click.argument("chick_id", type=click.UUID)
@click.option("--weight", type=float, required=True, help="Current weight in kg")
@click.option("--health", default=None, help="New health status")
@pass_container
def chicks_update(
    container: AppContainer, chick_id: UUID, weight: float, health: str | None
) -> None:
    """Record a weighing and optionally a new health status."""
    chick = _require(
        _guard(
            lambda: container.flock_service.record_chick_update(
                chick_id, weight, health
            )
        ),
        "chick",
        chick_id,
    )
    click.echo(f"{chick.name}: {chick.weight_history[-1].weight:.2f} kg")


@chicks.command("list")
@pass_container
def chicks_list(container: AppContainer) -> None:
    """List chicks with age, health and latest weight."""
    flock = container.flock_service.list_chicks()
    if not flock:
        click.echo("No Chicks Yet")
        return
    for chick in flock:
        latest = chick.weight_history[-1].weight
        click.echo(
            f"{chick.id}  {chick.name}  age: "
            f"{container.stats_service.chick_age_days(chick)} days  "
            f"health: {chick.health_status}  weight: {latest:.2f} kg"
        )


@cli.group()
def hens() -> None:
    """Manage laying hens."""


@hens.command("add")
@click.argument("name")
@click.option("--breed", required=True)
@click.option("--eggs", "egg_count", type=click.IntRange(min=0), default=0)
@click.option("--health", default="Healthy", show_default=True)
@click.option("--feed-time", type=_TIME_OF_DAY, default=None, help="HH:MM")
@click.option(
    "--photo", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@pass_container
def hens_add(  # noqa: PLR0913
    container: AppContainer,
    name: str,
    breed: str,
    egg_count: int,
    health: str,
    feed_time: datetime | None,
    photo: Path | None,
) -> None:
    """Add a hen."""
    hen = _guard(
        lambda: container.flock_service.add_hen(
            name=name,
            breed=breed,
            egg_count=egg_count,
            health_status=health,
            feed_time=_time_of_day(feed_time),
            photo=photo.read_bytes() if photo else None,
        )
    )
    click.echo(f"Added hen {hen.name} ({hen.id})")


@hens.command("update")
@click.argument("hen_id", type=click.UUID)
@click.option("--eggs", "egg_count", type=click.IntRange(min=0), default=None)
@click.option("--feed-time", type=_TIME_OF_DAY, default=None, help="HH:MM")
@click.option("--health", default=None)
@pass_container
def hens_update(
    container: AppContainer,
    hen_id: UUID,
    egg_count: int | None,
    feed_time: datetime | None,
    health: str | None,
) -> None:
    """Edit a hen's weekly egg count, feed time or health."""
    hen = _require(
        _guard(
            lambda: container.flock_service.update_hen(
                hen_id,
                egg_count=egg_count,
                feed_time=_time_of_day(feed_time),
                health_status=health,
            )
        ),
        "hen",
        hen_id,
    )
    click.echo(f"Updated hen {hen.name}")


@hens.command("list")
@pass_container
def hens_list(container: AppContainer) -> None:
    """List hens."""
    for hen in container.flock_service.list_hens():
        feed = f"{hen.feed_time:%H:%M}" if hen.feed_time else "-"
        click.echo(
            f"{hen.id}  {hen.name} ({hen.breed})  eggs this week: {hen.egg_count}  "
            f"feed: {feed}  health: {hen.health_status}"
        )


@cli.group()
def env() -> None:
    """Incubator environment."""


@env.command("show")
@pass_container
def env_show(container: AppContainer) -> None:
    """Show the current reading."""
    reading = container.incubator_service.environment()
    click.echo(f"Temperature: {reading.temperature:.1f} °C")
    click.echo(f"Humidity: {reading.humidity:.0f} %")


@env.command("set")
@click.option("--temperature", type=float, required=True, help="Degrees Celsius")
@click.option("--humidity", type=float, required=True, help="Relative humidity")
@pass_container
def env_set(container: AppContainer, temperature: float, humidity: float) -> None:
    """Replace the environment reading."""
    service = container.incubator_service
    _guard(lambda: service.update_environment(temperature, humidity))
    click.echo("Environment updated")


@cli.group()
def tasks() -> None:
    """Reminder tasks."""


@tasks.command("add")
@click.argument("title")
@click.option("--due", type=_DATE, required=True, help="YYYY-MM-DD [HH:MM]")
@pass_container
def tasks_add(container: AppContainer, title: str, due: datetime) -> None:
    """Add a reminder task."""
    task = _guard(lambda: container.journal_service.add_task(title, _as_utc(due)))
    click.echo(f"Added task {task.id}")


@tasks.command("done")
@click.argument("task_id", type=click.UUID)
@pass_container
def tasks_done(container: AppContainer, task_id: UUID) -> None:
    """Toggle a task's done flag."""
    task = _require(
        container.journal_service.toggle_task_done(task_id), "task", task_id
    )
    click.echo(f"{task.title}: {'done' if task.done else 'open'}")


@tasks.command("list")
@pass_container
def tasks_list(container: AppContainer) -> None:
    """List reminder tasks."""
    for task in container.journal_service.list_tasks():
        mark = "x" if task.done else " "
        click.echo(f"[{mark}] {task.date:%Y-%m-%d %H:%M}  {task.title}  ({task.id})")


@cli.command("log")
@pass_container
def log_cmd(container: AppContainer) -> None:
    """Show the activity log, newest first."""
    entries = container.journal_service.list_logs()
    if not entries:
        click.echo("No log entries")
        return
    for entry in entries:
        click.echo(f"{entry.date:%Y-%m-%d %H:%M}  {entry.description}")


def main() -> None:
    """Console script entry point."""
    cli()


def _warn_if_unsaved(result: MutationResult) -> None:
    if not result.persisted:
        click.echo(
            f"Warning: {result.collection.value} could not be saved", err=True
        )


def _guard(action: Callable[[], RecordT]) -> RecordT:
    try:
        return action()
    except InvalidRecordError as exc:
        raise click.ClickException(str(exc)) from exc


def _require(record: RecordT | None, kind: str, record_id: UUID) -> RecordT:
    if record is None:
        raise click.ClickException(f"No {kind} with id {record_id}")
    return record


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=UTC)


def _time_of_day(value: datetime | None) -> time | None:
    return value.time() if value else None
