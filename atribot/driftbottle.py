"""Drift bottles: messages thrown into channels and picked up by others."""

from __future__ import annotations

import re
import sqlite3
import threading
from dataclasses import dataclass, field

DEFAULT_CHANNEL = "global"

_POLY_ISO = 0xD800000000000000
_MASK64 = 0xFFFFFFFFFFFFFFFF
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _make_table(poly: int) -> tuple[int, ...]:
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            crc = (crc >> 1) ^ poly if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _make_table(_POLY_ISO)

_THROW_RE = re.compile(r"^(在群\d+)?丢漂流瓶(到频道\w+)?\s+(.*)\Z", re.ASCII)
_FETCH_RE = re.compile(r"^(从频道\w+)?捡漂流瓶\Z", re.ASCII)
_JUMP_RE = re.compile(r"^跳入(\w+)?海中\Z", re.ASCII)


def crc64_iso(data) -> int:
    """CRC-64 with the ISO polynomial, as an unsigned 64-bit value."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    crc = _MASK64
    for byte in data:
        crc = _TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ _MASK64


def _signed64(value: int) -> int:
    return value - 2**64 if value >= 2**63 else value


@dataclass
class Bottle:
    """A message in a bottle; grp limits who may pick it up (0 for anyone)."""

    qq: int
    grp: int
    name: str
    msg: str
    id: int = field(init=False)

    def __post_init__(self):
        self.id = _signed64(crc64_iso(f"{self.qq}_{self.grp}_{self.name}_{self.msg}"))


def _quote(channel: str) -> str:
    return '"' + channel.replace('"', '""') + '"'


class Sea:
    """SQLite store holding one table of bottles per channel."""

    def __init__(self, path=":memory:"):
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.RLock()
        self.create_channel(DEFAULT_CHANNEL)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _exists(self, channel: str) -> bool:
        row = self._conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?", (channel,)
        ).fetchone()
        return row is not None

    def _require(self, channel: str) -> None:
        if not self._exists(channel):
            raise LookupError(f"no such channel: {channel}")

    def create_channel(self, channel: str) -> None:
        """Create a channel unless it exists."""
        if not channel:
            raise ValueError("频道名为空!")
        with self._lock, self._conn:
            self._conn.execute(
                f"CREATE TABLE IF NOT EXISTS {_quote(channel)} "
                "(id INTEGER PRIMARY KEY, qq INTEGER, grp INTEGER, name TEXT, msg TEXT)"
            )

    def throw(self, channel: str, bottle: Bottle) -> None:
        """Put a bottle into a channel, replacing an identical one."""
        with self._lock, self._conn:
            self._require(channel)
            self._conn.execute(
                f"REPLACE INTO {_quote(channel)} (id, qq, grp, name, msg) VALUES (?, ?, ?, ?, ?)",
                (bottle.id, bottle.qq, bottle.grp, bottle.name, bottle.msg),
            )

    def fetch(self, channel: str, grp: int) -> Bottle:
        """A random bottle open to everyone or meant for grp."""
        with self._lock:
            self._require(channel)
            row = self._conn.execute(
                f"SELECT id, qq, grp, name, msg FROM {_quote(channel)} "
                "WHERE grp = 0 OR grp = ? ORDER BY RANDOM() LIMIT 1",
                (grp,),
            ).fetchone()
        if row is None:
            raise LookupError("no bottle in the sea")
        bottle = Bottle(row[1], row[2], row[3] or "", row[4] or "")
        bottle.id = row[0]
        return bottle

    def destroy(self, channel: str, bottle: Bottle) -> None:
        """Remove a bottle from a channel."""
        with self._lock, self._conn:
            self._require(channel)
            self._conn.execute(f"DELETE FROM {_quote(channel)} WHERE id = ?", (bottle.id,))

    def count(self, channel: str) -> int:
        """Number of bottles in a channel."""
        with self._lock:
            self._require(channel)
            return self._conn.execute(f"SELECT COUNT(*) FROM {_quote(channel)}").fetchone()[0]

    def close(self) -> None:
        self._conn.close()


def parse_throw(text: str, group_id: int) -> tuple[int, str, str]:
    """Parse a throw command into (group, channel, message)."""
    m = _THROW_RE.match(text)
    if m is None:
        raise ValueError("not a throw command")
    grp = group_id
    if m.group(1):
        grp = int(m.group(1)[2:])
        if not _INT64_MIN <= grp <= _INT64_MAX:
            raise ValueError("群号非法!")
    channel = m.group(2)[3:] if m.group(2) else DEFAULT_CHANNEL
    msg = m.group(3)
    if not msg:
        raise ValueError("消息为空!")
    return grp, channel, msg


def parse_fetch(text: str) -> str:
    """The channel named in a pick-up command."""
    m = _FETCH_RE.match(text)
    if m is None:
        raise ValueError("not a fetch command")
    return m.group(1)[3:] if m.group(1) else DEFAULT_CHANNEL


def parse_jump(text: str) -> str:
    """The channel named in a jump-into-the-sea command."""
    m = _JUMP_RE.match(text)
    if m is None:
        raise ValueError("not a jump command")
    return m.group(1) or DEFAULT_CHANNEL