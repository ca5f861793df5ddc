from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from faker import Faker

from .config import SeedSettings
from .generator import InvalidArgument, generate_tasks
from .labels import build_label_pool
from .store import delete_tasks, insert_tasks, parse_table


@dataclass
class SeedResult:
    deleted: int
    inserted: int
    batches: int


def make_faker(seed: Optional[int] = None) -> Faker:
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def plan_summary(settings: SeedSettings) -> str:
    total = settings.batches * settings.batch_size
    return (
        f"table={settings.table} batches={settings.batches} batch_size={settings.batch_size} "
        f"total={total} kinds={settings.kinds} queues={settings.queues} "
        f"seed={settings.seed} with_ids={settings.include_ids}"
    )


def check_settings(settings: SeedSettings) -> None:
    """Reject settings that would fail halfway, before anything touches the table."""
    parse_table(settings.table)
    if settings.batches < 0:
        raise InvalidArgument(f"batches must be >= 0, got: {settings.batches}")
    if settings.batch_size < 0:
        raise InvalidArgument(f"batch_size must be >= 0, got: {settings.batch_size}")
    if settings.kinds < 0 or settings.queues < 0:
        raise InvalidArgument(f"pool sizes must be >= 0, got: kinds={settings.kinds} queues={settings.queues}")
    if settings.batch_size > 0 and (settings.kinds == 0 or settings.queues == 0):
        raise InvalidArgument("kinds and queues must be > 0 when batch_size > 0")


def seed_tasks(
    conn,
    settings: SeedSettings,
    fake: Optional[Faker] = None,
    log: Callable[[str], None] = print,
) -> SeedResult:
    """
    Wipe settings.table and refill it with settings.batches random batches.
    Commits after the delete and after every batch, so an interrupted run keeps what was inserted.
    """
    check_settings(settings)
    if fake is None:
        fake = make_faker(settings.seed)

    kinds = build_label_pool(settings.kinds, fake=fake)
    queues = build_label_pool(settings.queues, fake=fake)

    log("Delete current tasks")
    deleted = delete_tasks(conn, settings.table)
    conn.commit()

    inserted = 0
    for i in range(settings.batches):
        tasks = generate_tasks(kinds, queues, settings.batch_size, fake=fake)
        log(f"Insert Batch: {i + 1}/{settings.batches}")
        inserted += insert_tasks(conn, settings.table, tasks, include_ids=settings.include_ids)
        conn.commit()

    return SeedResult(deleted=deleted, inserted=inserted, batches=settings.batches)
