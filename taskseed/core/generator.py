from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Sequence

from faker import Faker

MAX_ATTEMPTS_RANGE = (3, 5)
PRIORITY_RANGE = (1, 6)

# scheduled_at has no meaningful bound, any wide window will do
SCHEDULE_START = datetime(1970, 1, 1, tzinfo=timezone.utc)
SCHEDULE_END = datetime(2100, 1, 1, tzinfo=timezone.utc)

# draw in [0, DEPENDENCY_DIE] and link when > DEPENDENCY_THRESHOLD (2 in 6)
DEPENDENCY_DIE = 5
DEPENDENCY_THRESHOLD = 3


class InvalidArgument(ValueError):
    pass


@dataclass
class TaskRecord:
    id: uuid.UUID
    max_attempts: int
    scheduled_at: datetime
    priority: int
    kind: str
    queue: str
    # previous record of the same batch, kept as-is for compatibility with old seed data
    args: Optional[TaskRecord] = field(default=None, repr=False, compare=False)
    attempted_by: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    depends_on: Optional[uuid.UUID] = None
    dependend_id: Optional[uuid.UUID] = None


def pick_label(pool: Sequence[str], fake: Faker) -> str:
    if not pool:
        raise InvalidArgument("cannot pick a label from an empty pool")
    return fake.random.choice(pool)


def _pick_dependency(batch: list[TaskRecord], fake: Faker) -> Optional[uuid.UUID]:
    """
    Backward reference only: batch holds records [0, i-1] while record i
    is being built, so the result is never the record itself.
    """
    if not batch:
        return None
    if fake.random.randint(0, DEPENDENCY_DIE) <= DEPENDENCY_THRESHOLD:
        return None
    return batch[fake.random.randint(0, len(batch) - 1)].id


def generate_tasks(
    kinds: Sequence[str],
    queues: Sequence[str],
    batch_size: int,
    fake: Optional[Faker] = None,
) -> list[TaskRecord]:
    """
    Build one batch of synthetic tasks.

    kinds/queues: label pools, picked uniformly with replacement
    fake: random source (seed it with fake.seed_instance(...) for repeatable output)

    Every record's args is the record generated right before it (None for the first one).
    """
    if batch_size < 0:
        raise InvalidArgument(f"batch_size must be >= 0, got: {batch_size}")
    if batch_size == 0:
        return []
    if not kinds:
        raise InvalidArgument("kind pool is empty")
    if not queues:
        raise InvalidArgument("queue pool is empty")

    if fake is None:
        fake = Faker()
    batch: list[TaskRecord] = []

    for i in range(batch_size):
        task = TaskRecord(
            id=fake.uuid4(cast_to=None),
            max_attempts=fake.random.randint(*MAX_ATTEMPTS_RANGE),
            scheduled_at=fake.date_time_between(
                start_date=SCHEDULE_START, end_date=SCHEDULE_END, tzinfo=timezone.utc
            ),
            priority=fake.random.randint(*PRIORITY_RANGE),
            args=batch[i - 1] if i > 0 else None,
            attempted_by=[],
            kind=pick_label(kinds, fake),
            queue=pick_label(queues, fake),
            tags=[],
            depends_on=_pick_dependency(batch, fake),
            dependend_id=_pick_dependency(batch, fake),
        )
        batch.append(task)

    return batch
