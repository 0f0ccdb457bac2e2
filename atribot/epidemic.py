"""City epidemic statistics from the public news API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Optional

import requests

TX_URL = (
    "https://api.inews.qq.com/newsqa/v1/query/inner/publish/modules/list"
    "?modules=statisGradeCityDetail,diseaseh5Shelf"
)
TIMEOUT = 30


def _int(value) -> int:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return int(value)
    return 0


def _str(value) -> str:
    return value if isinstance(value, str) else ""


def _any_str(value) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class Area:
    """Epidemic figures of a region and its sub-regions."""

    name: str
    today_confirm: int = 0
    today_wzz_add: object = None
    now_confirm: int = 0
    confirm: int = 0
    dead: int = 0
    heal: int = 0
    grade: str = ""
    wzz: int = 0
    children: list["Area"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Area":
        today = data.get("today") or {}
        total = data.get("total") or {}
        return cls(
            name=_str(data.get("name")),
            today_confirm=_int(today.get("confirm")),
            today_wzz_add=today.get("wzz_add"),
            now_confirm=_int(total.get("nowConfirm")),
            confirm=_int(total.get("confirm")),
            dead=_int(total.get("dead")),
            heal=_int(total.get("heal")),
            grade=_str(total.get("grade")),
            wzz=_int(total.get("wzz")),
            children=[cls.from_dict(c) for c in data.get("children") or [] if isinstance(c, dict)],
        )


def parse_areas(data) -> tuple[list[Area], str]:
    """The area tree and the time of the last update from an API response."""
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8")
    if isinstance(data, str):
        data = json.loads(data)
    shelf = ((data or {}).get("data") or {}).get("diseaseh5Shelf") or {}
    areas = [Area.from_dict(a) for a in shelf.get("areaTree") or [] if isinstance(a, dict)]
    return areas, _str(shelf.get("lastUpdateTime"))


def find_city(area: Optional[Area], name: str) -> Optional[Area]:
    """Depth-first search for the region called name."""
    if area is None:
        return None
    if area.name == name:
        return area
    for child in area.children:
        if child.name == name:
            return child
        found = find_city(child, name)
        if found is not None:
            return found
    return None


def format_city(area: Area, update_time: str) -> str:
    """The report sent for one region."""
    return (
        f"【{area.name}】疫情数据\n"
        f"新增人数：{area.today_confirm}\n"
        f"现有确诊：{area.now_confirm}\n"
        f"累计确诊：{area.confirm}\n"
        f"治愈人数：{area.heal}\n"
        f"死亡人数：{area.dead}\n"
        f"无症状人数：{area.wzz}\n"
        f"新增无症状：{_any_str(area.today_wzz_add)}\n"
        f"更新时间：\n『{update_time}』"
    )


def query(city: str) -> tuple[Optional[Area], str]:
    """Fetch the figures of a city; the area is None when it is not found."""
    resp = requests.get(TX_URL, timeout=TIMEOUT)
    areas, update_time = parse_areas(resp.content)
    if not areas:
        raise LookupError("no epidemic data")
    return find_city(areas[0], city), update_time