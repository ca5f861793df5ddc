from __future__ import annotations

from typing import Any, Iterable

from psycopg import sql
from psycopg.types.json import Json

from .generator import InvalidArgument, TaskRecord

# column -> type used in jsonb_to_recordset(...)
# id is left to the server-side default unless include_ids=True
INSERT_COLUMNS = [
    ("max_attempts", "smallint"),
    ("scheduled_at", "timestamptz"),
    ("priority", "smallint"),
    ("args", "jsonb"),
    ("attempted_by", "text[]"),
    ("kind", "text"),
    ("queue", "text"),
    ("tags", "text[]"),
    ("depends_on", "uuid"),
    ("dependend_id", "uuid"),
]
ID_COLUMN = ("id", "uuid")


def parse_table(name: str) -> sql.Identifier:
    parts = name.split(".")
    if not 1 <= len(parts) <= 2 or not all(parts):
        raise InvalidArgument(f"table must be 'table' or 'schema.table', got: {name!r}")
    return sql.Identifier(*parts)


def to_row(task: TaskRecord, include_ids: bool = False, nested: bool = True) -> dict[str, Any]:
    """
    JSON-ready row for jsonb_to_recordset.

    args holds the previous record one level deep (its own args is dropped).
    Older seed data stored the full chain of previous records here; that is
    intentionally not reproduced, since every row would carry the whole batch before it.
    """
    row: dict[str, Any] = {}
    if include_ids or not nested:
        row["id"] = str(task.id)
    row["max_attempts"] = task.max_attempts
    row["scheduled_at"] = task.scheduled_at.isoformat()
    row["priority"] = task.priority
    if nested:
        row["args"] = to_row(task.args, nested=False) if task.args is not None else None
    row["attempted_by"] = list(task.attempted_by)
    row["kind"] = task.kind
    row["queue"] = task.queue
    row["tags"] = list(task.tags)
    row["depends_on"] = str(task.depends_on) if task.depends_on is not None else None
    row["dependend_id"] = str(task.dependend_id) if task.dependend_id is not None else None
    return row


def build_insert_sql(table: str, include_ids: bool = False) -> sql.Composed:
    columns = ([ID_COLUMN] if include_ids else []) + INSERT_COLUMNS
    return sql.SQL(
        "INSERT INTO {table} ({columns}) "
        "SELECT * FROM jsonb_to_recordset(%s::jsonb) AS x({recordset})"
    ).format(
        table=parse_table(table),
        columns=sql.SQL(", ").join(sql.Identifier(c) for c, _ in columns),
        recordset=sql.SQL(", ").join(
            sql.SQL("{} {}").format(sql.Identifier(c), sql.SQL(t)) for c, t in columns
        ),
    )


def count_tasks(conn, table: str) -> int:
    with conn.cursor() as cur:
        cur.execute(sql.SQL("SELECT count(*) AS cnt FROM {}").format(parse_table(table)))
        return cur.fetchone()["cnt"]


def delete_tasks(conn, table: str) -> int:
    with conn.cursor() as cur:
        cur.execute(sql.SQL("DELETE FROM {}").format(parse_table(table)))
        return cur.rowcount


def insert_tasks(conn, table: str, tasks: Iterable[TaskRecord], include_ids: bool = False) -> int:
    rows = [to_row(t, include_ids=include_ids) for t in tasks]
    if not rows:
        return 0
    with conn.cursor() as cur:
        cur.execute(build_insert_sql(table, include_ids=include_ids), (Json(rows),))
        return cur.rowcount
