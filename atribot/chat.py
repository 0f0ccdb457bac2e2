"""Answers to the bot's name, pokes and the group air conditioner."""

from __future__ import annotations

import random
import re
import threading
import time
from typing import Optional

DEFAULT_TEMPERATURE = 26
POKE_INTERVAL = 300.0
POKE_BURST = 8

_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)


class RateLimiter:
    """Token bucket holding at most `burst` tokens, one added every `interval` seconds."""

    def __init__(self, interval: float, burst: int, clock=time.monotonic):
        self.interval = interval
        self.burst = burst
        self._clock = clock
        self._tokens = float(burst)
        self._last = clock()
        self._lock = threading.Lock()

    def acquire(self, n: int = 1) -> bool:
        """Take n tokens if they are there."""
        with self._lock:
            now = self._clock()
            elapsed = max(0.0, now - self._last)
            self._tokens = min(float(self.burst), self._tokens + elapsed / self.interval)
            self._last = now
            if self._tokens >= n:
                self._tokens -= n
                return True
            return False


class PokeManager:
    """One rate limiter per group."""

    def __init__(self, interval: float = POKE_INTERVAL, burst: int = POKE_BURST,
                 clock=time.monotonic):
        self.interval = interval
        self.burst = burst
        self._clock = clock
        self._limiters: dict = {}
        self._lock = threading.Lock()

    def load(self, key) -> RateLimiter:
        """Return the limiter for key, creating it on first use."""
        with self._lock:
            limiter = self._limiters.get(key)
            if limiter is None:
                limiter = RateLimiter(self.interval, self.burst, self._clock)
                self._limiters[key] = limiter
            return limiter


def _atoi(value) -> int:
    if isinstance(value, int):
        return value
    if not re.fullmatch(r"[+-]?[0-9]+", value):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(value)))


class AirConditioner:
    """Per-group air conditioner switch and temperature."""

    def __init__(self):
        self._on: dict = {}
        self._temp: dict = {}

    def turn_on(self, group) -> str:
        self._on[group] = True
        return "❄️哔~"

    def turn_off(self, group) -> str:
        self._on[group] = False
        self._temp.pop(group, None)
        return "💤哔~"

    def set_temperature(self, group, value) -> str:
        """Set the temperature if switched on; report the state either way."""
        self._temp.setdefault(group, DEFAULT_TEMPERATURE)
        if self._on.get(group, False):
            self._temp[group] = _atoi(value)
        return self.status(group)

    def status(self, group) -> str:
        temp = self._temp.setdefault(group, DEFAULT_TEMPERATURE)
        head = "❄️风速中" if self._on.get(group, False) else "💤"
        return f"{head}\n群温度 {temp}℃"


def name_reply(nickname: str, rng=None) -> str:
    """Answer to being called by name."""
    rng = rng or random
    options = (
        nickname + "在此，有何贵干~",
        "(っ●ω●)っ在~",
        "这里是" + nickname + "(っ●ω●)っ",
        nickname + "不在呢~",
    )
    return options[rng.randrange(len(options))]


def poke_reply(limiter: RateLimiter, nickname: str) -> Optional[str]:
    """Answer to a poke, or None when poked too often."""
    if limiter.acquire(3):
        return f"请不要戳{nickname} >_<"
    if limiter.acquire(1):
        return f"喂(#`O′) 戳{nickname}干嘛！"
    return None