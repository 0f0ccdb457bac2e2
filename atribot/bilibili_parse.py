"""Summaries of bilibili videos from their av or BV id."""

from __future__ import annotations

import json
import re

import requests

VIDEO_API = "https://api.bilibili.com/x/web-interface/view?"
CARD_API = "http://api.bilibili.com/x/web-interface/card?"
ORIGIN = "https://www.bilibili.com/video/"
TIMEOUT = 30

_REG = re.compile(r"https://www.bilibili.com/video/([0-9a-zA-Z]+)")


def _int(value) -> int:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return int(value)
    return 0


def _str(value) -> str:
    return value if isinstance(value, str) else ""


def _json(data):
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8")
    return json.loads(data)


def row(count: int) -> str:
    """A count, shown in units of ten thousand once it reaches them."""
    if abs(count) >= 10000:
        return f"{count / 10000:.2f}万"
    return str(count)


def video_query(video_id: str) -> str:
    """The query string for the video API."""
    if len(video_id) < 2:
        raise ValueError(f"invalid video id: {video_id!r}")
    prefix = video_id[:2]
    if prefix == "av":
        return "aid=" + video_id[2:]
    if prefix == "BV":
        return "bvid=" + video_id
    return ""


def cut_url(url: str) -> str:
    """The video id in a video page URL, or an empty string."""
    m = _REG.search(url)
    return m.group(1) if m else ""


def format_video(data, fans, video_id: str) -> list[tuple[str, str]]:
    """Message segments describing a video API response.

    fans is the uploader's fan count, needed unless the video is a cooperation.
    """
    d = data.get("data") or {}
    stat = d.get("stat") or {}
    segments = [("text", "标题: " + _str(d.get("title")) + "\n")]
    if _int((d.get("rights") or {}).get("is_cooperation")) == 1:
        for staff in d.get("staff") or []:
            segments.append(("text", _str(staff.get("title")) + ": " + _str(staff.get("name"))
                             + ", 粉丝: " + row(_int(staff.get("follower"))) + "\n"))
    else:
        if fans is None:
            raise ValueError("fan count of the uploader is missing")
        owner = d.get("owner") or {}
        segments.append(("text", "UP主: " + _str(owner.get("name")) + ", 粉丝: "
                         + row(fans) + "\n"))
    segments.append(("text", "播放: " + row(_int(stat.get("view"))) + ", 弹幕: "
                     + row(_int(stat.get("danmaku"))) + "\n"))
    segments.append(("image", _str(d.get("pic"))))
    segments.append(("text", "\n点赞: " + row(_int(stat.get("like")))
                     + ", 投币: " + row(_int(stat.get("coin")))
                     + "\n收藏: " + row(_int(stat.get("favorite")))
                     + ", 分享: " + row(_int(stat.get("share")))
                     + "\n" + ORIGIN + video_id))
    return segments


def real_url(url: str) -> str:
    """The URL a short link redirects to."""
    return requests.head(url, allow_redirects=True, timeout=TIMEOUT).url


def _card_fans(mid: int) -> int:
    resp = requests.get(CARD_API + "mid=" + str(mid), timeout=TIMEOUT)
    obj = _json(resp.content)
    return _int((((obj.get("data") or {}).get("card")) or {}).get("fans"))


def parse(video_id: str) -> list[tuple[str, str]]:
    """Fetch a video and describe it."""
    query = video_query(video_id)
    data = _json(requests.get(VIDEO_API + query, timeout=TIMEOUT).content)
    d = data.get("data") or {}
    fans = None
    if _int((d.get("rights") or {}).get("is_cooperation")) != 1:
        fans = _card_fans(_int((d.get("owner") or {}).get("mid")))
    return format_video(data, fans, video_id)