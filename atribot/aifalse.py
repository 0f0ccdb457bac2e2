"""Server self check and the default rate-limit command."""

from __future__ import annotations

import math
import re

import psutil

_LIMIT_RE = re.compile(r"^设置默认限速为每\s*(\d+)\s*(分钟|秒)\s*(\d+)\s*次触发$", re.ASCII)


def _round(x: float) -> int:
    """Round half away from zero."""
    return math.floor(x + 0.5) if x >= 0 else -math.floor(-x + 0.5)


def pack_limit(interval: int, burst: int) -> int:
    """Pack an interval in seconds and a burst count into one stored value."""
    return (interval & 0xFFFF) | ((burst << 16) & 0xFFFF0000)


def unpack_limit(value: int) -> tuple[int, int]:
    """Return (interval, burst) from a stored value."""
    return value & 0xFFFF, (value >> 16) & 0xFFFF


def parse_limit_command(text: str) -> tuple[int, int]:
    """Parse a limit command into (interval seconds, burst)."""
    m = _LIMIT_RE.match(text)
    if m is None:
        raise ValueError("not a limit command")
    interval = int(m.group(1))
    if m.group(2) == "分钟":
        interval *= 60
    if interval >= 65536 or interval <= 0:
        raise ValueError("interval too big")
    burst = int(m.group(3))
    if burst >= 65536 or burst <= 0:
        raise ValueError("burst too big")
    return interval, burst


def cpu_percent() -> float:
    """CPU usage over one second, rounded; -1 when unavailable."""
    try:
        return float(_round(psutil.cpu_percent(interval=1)))
    except Exception:
        return -1.0


def mem_percent() -> float:
    """Used memory in percent, rounded; -1 when unavailable."""
    try:
        return float(_round(psutil.virtual_memory().percent))
    except Exception:
        return -1.0


def disk_report() -> str:
    """One line per mounted partition that is in use."""
    try:
        parts = psutil.disk_partitions(all=True)
    except Exception as err:
        return str(err)
    msg = ""
    for part in parts:
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except Exception as err:
            msg += "\n  - " + str(err)
            continue
        pc = _round(usage.percent)
        if pc > 0:
            msg += f"\n  - {part.mountpoint}({usage.total // 1024 // 1024}M) {pc}%"
    return msg


def _num(x: float) -> str:
    return str(int(x)) if float(x).is_integer() else str(x)


def status_text() -> str:
    """The self-check report."""
    return (
        f"* CPU占用: {_num(cpu_percent())}%\n"
        f"* RAM占用: {_num(mem_percent())}%\n"
        f"* 硬盘使用: {disk_report()}"
    )