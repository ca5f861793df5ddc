"""Tests for the delete + batch insert loop."""

import pytest

from taskseed.core.config import SeedSettings
from taskseed.core.generator import InvalidArgument
from taskseed.core.seeding import make_faker, plan_summary, seed_tasks


def small_settings(**overrides):
    values = dict(table="chang.tasks", batches=3, batch_size=4, kinds=5, queues=2, seed=11)
    values.update(overrides)
    return SeedSettings(**values)


def test_seed_deletes_then_inserts_batches(conn):
    messages = []
    result = seed_tasks(conn, small_settings(), log=messages.append)

    assert result.deleted == 42
    assert result.inserted == 12
    assert result.batches == 3
    assert "DELETE FROM" in repr(conn.executed[0][0])
    assert len(conn.executed) == 4
    # delete + one per batch
    assert conn.commits == 4
    assert messages == [
        "Delete current tasks",
        "Insert Batch: 1/3",
        "Insert Batch: 2/3",
        "Insert Batch: 3/3",
    ]


def test_seed_labels_come_from_small_pools(conn):
    seed_tasks(conn, small_settings(kinds=2, queues=1), log=lambda _: None)

    rows = [row for _, params in conn.executed[1:] for row in params[0].obj]
    assert len({r["kind"] for r in rows}) <= 2
    assert len({r["queue"] for r in rows}) == 1


def test_seeded_runs_match(make_conn):
    first, second = make_conn(), make_conn()
    seed_tasks(first, small_settings(), log=lambda _: None)
    seed_tasks(second, small_settings(), log=lambda _: None)

    assert [p[0].obj for _, p in first.executed[1:]] == [p[0].obj for _, p in second.executed[1:]]


def test_with_ids(conn):
    seed_tasks(conn, small_settings(include_ids=True, batches=1), log=lambda _: None)
    rows = conn.executed[1][1][0].obj
    assert all("id" in r for r in rows)


def test_zero_batches_only_deletes(conn):
    result = seed_tasks(conn, small_settings(batches=0), log=lambda _: None)
    assert result.inserted == 0
    assert len(conn.executed) == 1


def test_make_faker_seeded():
    assert make_faker(5).uuid4() == make_faker(5).uuid4()


def test_plan_summary():
    text = plan_summary(small_settings())
    assert "table=chang.tasks" in text
    assert "total=12" in text


@pytest.mark.parametrize(
    "overrides",
    [
        dict(kinds=0),
        dict(queues=0),
        dict(kinds=-1),
        dict(batch_size=-1),
        dict(batches=-1),
        dict(table="a.b.c"),
    ],
)
def test_bad_settings_leave_table_alone(conn, overrides):
    messages = []
    with pytest.raises(InvalidArgument):
        seed_tasks(conn, small_settings(**overrides), log=messages.append)

    assert conn.executed == []
    assert conn.commits == 0
    assert messages == []


def test_empty_pools_allowed_when_nothing_is_generated(conn):
    result = seed_tasks(conn, small_settings(batch_size=0, kinds=0, queues=0), log=lambda _: None)
    assert result.inserted == 0
    assert conn.commits == 1 + 3
