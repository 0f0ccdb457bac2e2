"""Bilibili user lookups: search, fan data, followings, medals and the vup table."""

from __future__ import annotations

import json
import re
import sqlite3
import threading
from dataclasses import dataclass, field
from typing import Iterable, Sequence
from urllib.parse import quote

import requests

SEARCH_URL = "http://api.bilibili.com/x/web-interface/search/type?search_type=bili_user&keyword="
FANS_URL = "https://api.vtbs.moe/v1/detail/"
FOLLOWINGS_URL = "https://api.bilibili.com/x/relation/same/followings?vmid="
CARD_URL = "https://account.bilibili.com/api/member/getCardByMid?mid="
MEDALWALL_URL = "https://api.live.bilibili.com/xlive/web-ucenter/user/MedalWall?target_id="
VTB_URLS = (
    "https://api.vtbs.moe/v1/short",
    "https://api.tokyo.vtbs.moe/v1/short",
    "https://vtbs.musedash.moe/v1/short",
)
COOKIE_KEY = "bilbili_cookie"
GENDERS = ("", "男", "女", "未知")
TIMEOUT = 30

_UID = re.compile(r"[0-9]+")
_CHUNK = 500


class BilibiliError(Exception):
    """An error reported by a bilibili API."""


class NeedCookieError(BilibiliError):
    """The API needs a login cookie."""

    def __init__(self):
        super().__init__(
            '该api需要设置b站cookie，请发送命令设置cookie，例如"设置b站cookie SESSDATA=placeholder"'
        )


def _json(data):
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8")
    if isinstance(data, str):
        return json.loads(data)
    return data


def _int(value) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(float(value))
        except ValueError:
            return 0
    return 0


def _str(value) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _get(url: str, headers=None) -> bytes:
    return requests.get(url, headers=headers, timeout=TIMEOUT).content


@dataclass
class SearchResult:
    """One user found by a name search."""

    mid: int
    uname: str
    gender: int = 0
    usign: str = ""
    level: int = 0

    @property
    def sex(self) -> str:
        return GENDERS[self.gender] if 0 <= self.gender < len(GENDERS) else ""


@dataclass
class Follower:
    """Fan statistics of a virtual streamer."""

    mid: int = 0
    uname: str = ""
    video: int = 0
    roomid: int = 0
    rise: int = 0
    follower: int = 0
    guard_num: int = 0
    area_rank: int = 0


@dataclass
class UserInfo:
    """The member card of a user."""

    name: str = ""
    mid: str = ""
    face: str = ""
    fans: int = 0
    regtime: int = 0
    attentions: list[int] = field(default_factory=list)


@dataclass
class Medal:
    """A fan medal worn by a user."""

    mid: int
    uname: str
    medal_name: str = ""
    level: int = 0
    color_start: int = 0
    color_end: int = 0
    color_border: int = 0


@dataclass
class Vup:
    """A known virtual streamer."""

    mid: int
    uname: str
    roomid: int = 0


class VupDB:
    """SQLite store of known vups and configuration values."""

    def __init__(self, path):
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS vup "
                "(mid INTEGER PRIMARY KEY, uname TEXT, roomid INTEGER)"
            )
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS config (key TEXT PRIMARY KEY, value TEXT)"
            )

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def insert_vup(self, mid: int, uname: str, roomid: int) -> None:
        """Add a vup unless one with that mid is stored already."""
        with self._lock, self._conn:
            self._conn.execute(
                "INSERT OR IGNORE INTO vup (mid, uname, roomid) VALUES (?, ?, ?)",
                (mid, uname, roomid),
            )

    def filter_vups(self, ids: Iterable[int]) -> list[Vup]:
        """The stored vups whose mid is among ids, ordered by mid."""
        wanted = list(dict.fromkeys(ids))
        found: list[Vup] = []
        with self._lock:
            for start in range(0, len(wanted), _CHUNK):
                chunk = wanted[start:start + _CHUNK]
                marks = ",".join("?" * len(chunk))
                rows = self._conn.execute(
                    f"SELECT mid, uname, roomid FROM vup WHERE mid IN ({marks})", chunk
                )
                found.extend(Vup(mid, uname or "", roomid or 0) for mid, uname, roomid in rows)
        found.sort(key=lambda v: v.mid)
        return found

    def set_cookie(self, cookie: str) -> None:
        """Store the login cookie."""
        with self._lock, self._conn:
            self._conn.execute(
                "INSERT INTO config (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (COOKIE_KEY, cookie),
            )

    def get_cookie(self) -> str:
        """The stored login cookie, or an empty string."""
        with self._lock:
            row = self._conn.execute(
                "SELECT value FROM config WHERE key = ?", (COOKIE_KEY,)
            ).fetchone()
        return row[0] if row and row[0] is not None else ""

    def close(self) -> None:
        self._conn.close()


def _check_code(obj) -> None:
    code = _int(obj.get("code"))
    if code == -101:
        raise NeedCookieError()
    if code != 0:
        raise BilibiliError(_str(obj.get("message")))


def parse_search(data) -> list[SearchResult]:
    """Users from a search response; raises when nobody was found."""
    d = (_json(data) or {}).get("data") or {}
    if _int(d.get("numResults")) == 0:
        raise BilibiliError("查无此人")
    return [
        SearchResult(
            mid=_int(r.get("mid")),
            uname=_str(r.get("uname")),
            gender=_int(r.get("gender")),
            usign=_str(r.get("usign")),
            level=_int(r.get("level")),
        )
        for r in d.get("result") or []
    ]


def parse_card(data) -> UserInfo:
    """The member card from a card response."""
    c = (_json(data) or {}).get("card") or {}
    return UserInfo(
        name=_str(c.get("name")),
        mid=_str(c.get("mid")),
        face=_str(c.get("face")),
        fans=_int(c.get("fans")),
        regtime=_int(c.get("regtime")),
        attentions=[_int(a) for a in c.get("attentions") or []],
    )


def parse_medals(data) -> list[Medal]:
    """Medals from a medal wall response."""
    obj = _json(data) or {}
    _check_code(obj)
    medals = []
    for item in ((obj.get("data") or {}).get("list")) or []:
        info = item.get("medal_info") or {}
        medals.append(Medal(
            mid=_int(info.get("target_id")),
            uname=_str(item.get("target_name")),
            medal_name=_str(info.get("medal_name")),
            level=_int(info.get("level")),
            color_start=_int(info.get("medal_color_start")),
            color_end=_int(info.get("medal_color_end")),
            color_border=_int(info.get("medal_color_border")),
        ))
    return medals


def parse_followings(data) -> list[str]:
    """Names of the followed users from a same-followings response."""
    obj = _json(data) or {}
    _check_code(obj)
    items = ((obj.get("data") or {}).get("list")) or []
    return [_str(item.get("uname")) for item in items if isinstance(item, dict)]


def search(keyword: str) -> list[SearchResult]:
    """Search users by nickname."""
    return parse_search(_get(SEARCH_URL + quote(keyword)))


def fans(uid: str) -> Follower:
    """Fan statistics of a streamer."""
    obj = _json(_get(FANS_URL + str(uid))) or {}
    return Follower(
        mid=_int(obj.get("mid")),
        uname=_str(obj.get("uname")),
        video=_int(obj.get("video")),
        roomid=_int(obj.get("roomid")),
        rise=_int(obj.get("rise")),
        follower=_int(obj.get("follower")),
        guard_num=_int(obj.get("guardNum")),
        area_rank=_int(obj.get("areaRank")),
    )


def card(uid: str) -> UserInfo:
    """The member card of a user."""
    return parse_card(_get(CARD_URL + str(uid)))


def medalwall(uid: str, cookie: str) -> list[Medal]:
    """The fan medals of a user; needs a login cookie."""
    return parse_medals(_get(MEDALWALL_URL + str(uid), headers={"cookie": cookie}))


def followings(uid: str, cookie: str) -> list[str]:
    """Users followed by both the logged-in account and uid."""
    return parse_followings(_get(FOLLOWINGS_URL + str(uid), headers={"cookie": cookie}))


def update_vups(db: VupDB, urls: Sequence[str] = VTB_URLS) -> None:
    """Fill the vup table from the vtbs lists."""
    for url in urls:
        items = _json(_get(url))
        if isinstance(items, dict):
            items = list(items.values())
        for value in items or []:
            if not isinstance(value, dict):
                continue
            db.insert_vup(_int(value.get("mid")), _str(value.get("uname")),
                          _int(value.get("roomid")))


def int2rgb(value: int) -> tuple[int, int, int]:
    """Split a packed 0xRRGGBB colour into (r, g, b)."""
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def merge_vups(vups: Sequence[Vup], medals: Sequence[Medal]):
    """Put medal owners first, by medal level, then the other vups.

    Returns the merged list and a map from mid to medal.
    """
    ordered = sorted(medals, key=lambda m: m.level, reverse=True)
    medal_map = {m.mid: m for m in ordered}
    front = [Vup(m.mid, m.uname) for m in ordered]
    rest = [v for v in vups if v.mid not in medal_map]
    return front + rest, medal_map


def is_uid(keyword: str) -> bool:
    """True if the keyword is made of digits only."""
    return _UID.fullmatch(keyword) is not None