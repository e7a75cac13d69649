from __future__ import annotations

import sqlite3
from typing import Dict, Iterable, Mapping, Optional, Set


class SQLiteLineStore:
    """
    Persistent line source.
    - text_lines: one row per (key, line) pair; duplicates are ignored.
    Feeds VariantStore through load_line_pairs().
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._init_schema()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS text_lines (
                    key TEXT NOT NULL,
                    line TEXT NOT NULL,
                    created_at TEXT NOT NULL DEFAULT (datetime('now')),
                    PRIMARY KEY (key, line)
                );
                """
            )
            conn.commit()

    def upsert_line(self, key: str, line: str) -> None:
        self.upsert_lines(key, [line])

    def upsert_lines(self, key: str, lines: Iterable[str]) -> int:
        rows = [(key, line) for line in set(lines)]
        with self._connect() as conn:
            before = conn.total_changes
            conn.executemany(
                "INSERT OR IGNORE INTO text_lines(key, line) VALUES(?, ?);",
                rows,
            )
            conn.commit()
            return conn.total_changes - before

    def upsert_line_pairs(self, line_pairs: Mapping[str, Iterable[str]]) -> int:
        """Returns how many new (key, line) rows were written."""
        return sum(self.upsert_lines(key, lines) for key, lines in line_pairs.items())

    def load_line_pairs(self) -> Dict[str, Set[str]]:
        line_pairs: Dict[str, Set[str]] = {}
        with self._connect() as conn:
            for row in conn.execute("SELECT key, line FROM text_lines;"):
                line_pairs.setdefault(row["key"], set()).add(row["line"])
        return line_pairs

    def count_lines(self, key: Optional[str] = None) -> int:
        with self._connect() as conn:
            if key is None:
                row = conn.execute("SELECT COUNT(*) AS n FROM text_lines;").fetchone()
            else:
                row = conn.execute(
                    "SELECT COUNT(*) AS n FROM text_lines WHERE key = ?;",
                    (key,),
                ).fetchone()
        return int(row["n"])
