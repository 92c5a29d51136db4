"""SQLite connection and schema helpers."""

import sqlite3
from pathlib import Path

_SCHEMA = """
CREATE TABLE IF NOT EXISTS meals (
    id     INTEGER PRIMARY KEY AUTOINCREMENT,
    date   TEXT NOT NULL,
    time   TEXT NOT NULL,
    band   TEXT NOT NULL,
    name   TEXT,
    kcal   REAL,
    p      REAL,
    f      REAL,
    c      REAL,
    fiber  REAL,
    sodium REAL
);

CREATE TABLE IF NOT EXISTS settings (
    key   TEXT PRIMARY KEY,
    value TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS workouts (
    id    INTEGER PRIMARY KEY AUTOINCREMENT,
    date  TEXT NOT NULL,
    type  TEXT NOT NULL,
    unit  TEXT NOT NULL,
    qty   REAL NOT NULL,
    kcal  REAL NOT NULL
);
"""


def connect(db_path: Path | str) -> sqlite3.Connection:
    """Open a connection that returns rows addressable by column name."""
    if str(db_path) != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Create tables if they do not exist yet."""
    conn.execute("PRAGMA journal_mode = WAL;")
    conn.executescript(_SCHEMA)
    conn.commit()


def list_tables(conn: sqlite3.Connection) -> list[str]:
    """Return the names of existing tables."""
    rows = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name"
    ).fetchall()
    return [row["name"] for row in rows]
