"""Daily fortune: background kinds and the vertical text layout of the slip."""

from __future__ import annotations

from typing import MutableMapping

TABLE = (
    "车万", "DC4", "爱因斯坦", "星空列车", "樱云之恋", "富婆妹", "李清歌", "公主连结",
    "原神", "明日方舟", "碧蓝航线", "碧蓝幻想", "战双", "阴阳师", "赛马娘", "东方归言录",
    "奇异恩典", "夏日口袋", "ASoul",
)
DEFAULT_KIND = TABLE[0]
_INDEX = {name: i for i, name in enumerate(TABLE)}

COLUMN = 9
X_BASE = 115
Y_BASE = 320.0


def offset(total: int, now: int, distance: float) -> float:
    """Offset of item now (from 1) among total items spaced by distance."""
    if total % 2 == 0:
        return (now - total // 2 - 1) * distance
    return (now - total // 2 - 1.5) * distance


def rows_num(total: int, div: int) -> int:
    """Number of columns of height div needed for total items."""
    return -(-total // div)


def layout(text: str, char_width: float, char_height: float) -> list[tuple[str, float, float]]:
    """Position (char, x, y) of each character, written in columns right to left.

    char_width and char_height are the spacing between characters.
    """
    chars = list(text)
    n = len(chars)
    xsum = rows_num(n, COLUMN)
    out = []
    if xsum == 2:
        div = rows_num(n, 2)
        for i, ch in enumerate(chars):
            xnow = rows_num(i + 1, div)
            ysum = min(n - (xnow - 1) * div, div)
            ynow = i % div + 1
            x = -offset(xsum, xnow, char_width) + X_BASE
            if xnow == 1:
                y = offset(COLUMN, ynow, char_height) + Y_BASE
            else:
                y = offset(COLUMN, ynow + (COLUMN - ysum), char_height) + Y_BASE
            out.append((ch, x, y))
        return out
    for i, ch in enumerate(chars):
        xnow = rows_num(i + 1, COLUMN)
        ysum = min(n - (xnow - 1) * COLUMN, COLUMN)
        ynow = i % COLUMN + 1
        out.append((ch, -offset(xsum, xnow, char_width) + X_BASE,
                    offset(ysum, ynow, char_height) + Y_BASE))
    return out


def kind_for(store, gid: int) -> str:
    """Background kind chosen for a session, or the default one."""
    if store is not None:
        v = store.get(gid, 0) & 0xFF
        if v < len(TABLE):
            return TABLE[v]
    return DEFAULT_KIND


def set_kind(store: MutableMapping[int, int], gid: int, name: str) -> int:
    """Choose the background kind of a session; returns its index."""
    try:
        index = _INDEX[name]
    except KeyError:
        raise ValueError("没有这个底图哦～") from None
    if store is None:
        raise LookupError("找不到插件")
    store[gid] = index & 0xFF
    return index