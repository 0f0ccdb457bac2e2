"""Turning Chinese text into emoji by pronunciation."""

from __future__ import annotations

import sqlite3
import threading


class AbstractDB:
    """SQLite tables mapping characters to pinyin and pinyin to emoji."""

    def __init__(self, path):
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS pinyin "
                "(word TEXT PRIMARY KEY NOT NULL, pronunciation TEXT NOT NULL)"
            )
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS emoji "
                "(pronunciation TEXT PRIMARY KEY NOT NULL, emoji TEXT NOT NULL)"
            )

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _one(self, sql: str, arg: str) -> str:
        with self._lock:
            row = self._conn.execute(sql, (arg,)).fetchone()
        return row[0] if row and row[0] is not None else ""

    def pinyin(self, word: str) -> str:
        """Pronunciation of a character, or an empty string."""
        return self._one("SELECT pronunciation FROM pinyin WHERE word = ? LIMIT 1", word)

    def emoji(self, pronunciation: str) -> str:
        """Emoji sounding like a pronunciation, or an empty string."""
        return self._one("SELECT emoji FROM emoji WHERE pronunciation = ? LIMIT 1",
                         pronunciation)

    def translate(self, text: str) -> str:
        """Replace character pairs, then single characters, by emoji where possible."""
        chars = list(text)
        out = []
        i = 0
        while i < len(chars):
            if i < len(chars) - 1:
                pair = self.emoji(self.pinyin(chars[i]) + self.pinyin(chars[i + 1]))
                if pair:
                    out.append(pair)
                    i += 2
                    continue
            single = self.emoji(self.pinyin(chars[i]))
            out.append(single if single else chars[i])
            i += 1
        return "".join(out)

    def close(self) -> None:
        self._conn.close()