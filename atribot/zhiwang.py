"""Plagiarism check of essays against the public essay archive."""

from __future__ import annotations

import json
import math
from datetime import datetime
from typing import Sequence

import requests

CHECK_URL = "https://asoulcnki.asia/v1/api/check"
ORIGINAL = "枝网没搜到，查重率为0%，鉴定为原创"
MAX_CONTENT = 102
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
TIMEOUT = 30


def is_check_request(segments: Sequence) -> bool:
    """True for a reply message whose text says "查重"."""
    if not segments or segments[0][0] != "reply":
        return False
    for kind, data in segments:
        if kind != "text":
            continue
        text = (data.get("text") or "").replace(" ", "").replace("\r", "").replace("\n", "")
        if text == "查重":
            return True
    return False


def _s(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _num(x: float) -> str:
    return str(int(x)) if float(x).is_integer() else str(x)


def format_report(result: dict, now: datetime) -> str:
    """The report for an API result."""
    code = result.get("code", 0)
    if code != 0:
        raise ValueError(f"api返回错误:{code}")
    related = (result.get("data") or {}).get("related") or []
    if not related:
        return ORIGINAL
    first = related[0] or {}
    reply = first.get("reply") or {}
    rate = float(first.get("rate") or 0)
    content = _s(reply.get("content"))
    raw = content.encode("utf-8")
    if len(raw) > MAX_CONTENT:
        content = raw[:MAX_CONTENT].decode("utf-8", errors="ignore") + "....."
    ctime = datetime.fromtimestamp(int(float(reply.get("ctime") or 0)))
    return (
        "枝网文本复制检测报告(简洁)\n"
        f"查重时间: {now.strftime(TIME_FORMAT)}\n"
        f"总文字复制比: {_num(math.floor(rate * 100))}%\n"
        f"相似小作文：\n{content}\n"
        f"获赞数：{_s(reply.get('like_num'))}\n"
        f"{_s(first.get('reply_url'))}\n"
        f"作者: {_s(reply.get('m_name'))}\n"
        f"发表时间: {ctime.strftime(TIME_FORMAT)}\n"
        "查重结果仅作参考，请注意辨别是否为原创\n"
        "数据来源: https://asoulcnki.asia/"
    )


def check(text: str) -> dict:
    """Send an essay to the checker and return its parsed answer."""
    resp = requests.post(CHECK_URL, json={"text": text}, timeout=TIMEOUT)
    return json.loads(resp.content)