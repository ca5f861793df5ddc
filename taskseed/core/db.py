from contextlib import contextmanager

import psycopg
from psycopg.rows import dict_row

from .config import get_database_url


@contextmanager
def get_conn():
    """One connection for the whole seeding run (DATABASE_URL from env/.env)."""
    conn = psycopg.connect(get_database_url(), row_factory=dict_row)
    try:
        yield conn
    finally:
        conn.close()
