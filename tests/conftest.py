"""Pytest configuration and fixtures."""

import pytest
from faker import Faker


@pytest.fixture
def fake():
    """Faker seeded with a fixed value so every test run sees the same data."""
    f = Faker()
    f.seed_instance(1234)
    return f


class RecordingCursor:
    def __init__(self, conn):
        self.conn = conn
        self.rowcount = -1

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, query, params=None):
        self.conn.executed.append((query, params))
        if params:
            self.rowcount = len(params[0].obj)
        else:
            self.rowcount = self.conn.existing

    def fetchone(self):
        return {"cnt": self.conn.existing}


class RecordingConnection:
    """Stands in for a psycopg connection: keeps every statement and commit."""

    def __init__(self, existing=0):
        self.existing = existing
        self.executed = []
        self.commits = 0

    def cursor(self):
        return RecordingCursor(self)

    def commit(self):
        self.commits += 1


@pytest.fixture
def conn():
    return RecordingConnection(existing=42)


@pytest.fixture
def make_conn():
    return RecordingConnection
