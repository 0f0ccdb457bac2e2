"""Stored texts: curses, cp stories, jokes, book reviews and essays."""

from __future__ import annotations

import hashlib
import sqlite3
import threading

MIN_LEVEL = "min"
MAX_LEVEL = "max"
HENTAI_ID = -3802576048116006195
TABLES = ("curse", "cp_story", "jokes", "bookreview", "text")

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS curse (id INTEGER PRIMARY KEY, text TEXT, level TEXT)",
    "CREATE TABLE IF NOT EXISTS cp_story "
    "(id INTEGER PRIMARY KEY, gong TEXT, shou TEXT, story TEXT)",
    "CREATE TABLE IF NOT EXISTS jokes (id INTEGER PRIMARY KEY, text TEXT)",
    "CREATE TABLE IF NOT EXISTS bookreview (id INTEGER PRIMARY KEY, bookreview TEXT)",
    "CREATE TABLE IF NOT EXISTS text (id INTEGER PRIMARY KEY, data TEXT)",
)


def text_id(text: str) -> int:
    """Identifier of an essay: the first 8 MD5 bytes as a signed little-endian integer."""
    return int.from_bytes(hashlib.md5(text.encode("utf-8")).digest()[:8], "little", signed=True)


def fill_story(story: str, gong: str, shou: str, name_gong: str, name_shou: str) -> str:
    """Put two names into a cp story whose characters are gong and shou."""
    text = story.replace("<攻>", name_gong)
    text = text.replace("<受>", name_shou)
    text = text.replace(gong, name_gong)
    return text.replace(shou, name_gong)


def fill_joke(text: str, name: str) -> str:
    """Put a name into a joke."""
    return text.replace("%name", name)


class Corpus:
    """SQLite database of the stored texts."""

    def __init__(self, path=":memory:"):
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            for sql in _SCHEMA:
                self._conn.execute(sql)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _row(self, sql: str, args=()):
        with self._lock:
            return self._conn.execute(sql, args).fetchone()

    def random_curse(self, level: str) -> str:
        """A random curse of a level, or an empty string."""
        row = self._row("SELECT text FROM curse WHERE level = ? ORDER BY RANDOM() LIMIT 1",
                        (level,))
        return row[0] or "" if row else ""

    def random_story(self) -> tuple[str, str, str]:
        """A random (story, gong, shou), empty strings when there is none."""
        row = self._row("SELECT story, gong, shou FROM cp_story ORDER BY RANDOM() LIMIT 1")
        if row is None:
            return "", "", ""
        return tuple(v or "" for v in row)

    def random_joke(self) -> str:
        """A random joke."""
        row = self._row("SELECT text FROM jokes ORDER BY RANDOM() LIMIT 1")
        if row is None:
            raise LookupError("no joke stored")
        return row[0] or ""

    def review_by_keyword(self, keyword: str) -> str:
        """A book review containing the keyword, or an empty string."""
        row = self._row("SELECT bookreview FROM bookreview WHERE bookreview LIKE ? LIMIT 1",
                        ("%" + keyword + "%",))
        return row[0] or "" if row else ""

    def random_review(self) -> str:
        """A random book review, or an empty string."""
        row = self._row("SELECT bookreview FROM bookreview ORDER BY RANDOM() LIMIT 1")
        return row[0] or "" if row else ""

    def add_text(self, text: str) -> int:
        """Store an essay and return its identifier."""
        tid = text_id(text)
        with self._lock, self._conn:
            self._conn.execute("REPLACE INTO text (id, data) VALUES (?, ?)", (tid, text))
        return tid

    def random_text(self) -> str:
        """A random essay."""
        row = self._row("SELECT data FROM text ORDER BY RANDOM() LIMIT 1")
        if row is None:
            raise LookupError("no text stored")
        return row[0] or ""

    def hentai_text(self) -> str:
        """The one essay kept for the fit."""
        row = self._row("SELECT data FROM text WHERE id = ?", (HENTAI_ID,))
        if row is None:
            raise LookupError("no such text")
        return row[0] or ""

    def count(self, table: str) -> int:
        """Number of rows in one of the tables."""
        if table not in TABLES:
            raise ValueError(f"no such table: {table}")
        return self._row(f"SELECT COUNT(*) FROM {table}")[0]

    def close(self) -> None:
        self._conn.close()