"""Ten-pull gacha draws with per-session pool mode."""

from __future__ import annotations

import random
import re
import threading
from dataclasses import dataclass, field
from typing import MutableMapping, Sequence

_NAME_RE = re.compile(r"_(.*)\.png")


@dataclass(frozen=True)
class Storage:
    """Per-session settings packed in an integer; bit 0 is the five-star pool."""

    value: int = 0

    def is_five_star_mode(self) -> bool:
        return self.value & 1 == 1

    def with_mode(self, five_star: bool) -> "Storage":
        """A copy with the five-star pool switched on or off."""
        return Storage(self.value | 1 if five_star else self.value & ~1)


def toggle_mode(store: MutableMapping[int, int], gid: int) -> bool:
    """Switch the pool of a session; returns True for the five-star pool."""
    s = Storage(store.get(gid, 0))
    new = s.with_mode(not s.is_five_star_mode())
    store[gid] = new.value
    return new.is_five_star_mode()


def character_name(filename: str) -> str:
    """The name part of a picture file such as "five/Pyro_Name.png"."""
    m = _NAME_RE.search(filename)
    if m is None:
        raise ValueError(f"no name in {filename!r}")
    return m.group(1)


def reply_names(names: Sequence[str], num: int, prefix: str) -> str:
    """Announcement of five-star characters (num 1) or weapons (num 2)."""
    if num == 1:
        head = "★五星角色★\n"
    elif num == 2 and prefix:
        head = "\n★五星武器★\n"
    else:
        head = "★五星武器★\n"
    return head + "".join(character_name(n) + " * " for n in names)


@dataclass
class GachaResult:
    """Items drawn as (stars, file) in display order, and the announcement."""

    items: list[tuple[int, str]] = field(default_factory=list)
    text: str = ""
    five_star: bool = False


class Gacha:
    """The item pools and the global pull counter."""

    def __init__(self, five: Sequence[str], five_arms: Sequence[str], four: Sequence[str],
                 four_arms: Sequence[str], three_arms: Sequence[str], rng=None):
        self.five = list(five)
        self.five_arms = list(five_arms)
        self.four = list(four)
        self.four_arms = list(four_arms)
        self.three_arms = list(three_arms)
        self.total = 0
        self._rng = rng or random.Random()
        self._lock = threading.Lock()

    def _pick(self, pool):
        return pool[self._rng.randrange(len(pool))]

    def ten_pull(self, five_star_mode: bool = False) -> GachaResult:
        """Draw ten items; every ninth normal pull starts with a five-star."""
        rng = self._rng
        fives, fours, threes, four_arms, five_arms = [], [], [], [], []
        nums = 10
        with self._lock:
            guaranteed = self.total % 9 == 0
        if guaranteed:
            if rng.randrange(2) == 0:
                fives.append(self._pick(self.five))
            else:
                five_arms.append(self._pick(self.five_arms))
            nums -= 1

        if five_star_mode:
            for _ in range(nums):
                if rng.randrange(2) == 0:
                    fives.append(self._pick(self.five))
                else:
                    five_arms.append(self._pick(self.five_arms))
        else:
            for _ in range(nums):
                a = rng.randrange(1000)
                if a <= 800:
                    threes.append(self._pick(self.three_arms))
                elif a <= 885:
                    fours.append(self._pick(self.four))
                elif a <= 970:
                    four_arms.append(self._pick(self.four_arms))
                elif a <= 985:
                    fives.append(self._pick(self.five))
                else:
                    five_arms.append(self._pick(self.five_arms))
            if not fours and not four_arms and threes:
                threes.pop()
                if rng.randrange(2) == 0:
                    fours.append(self._pick(self.four))
                else:
                    four_arms.append(self._pick(self.four_arms))
            with self._lock:
                self.total += 1

        items = ([(5, f) for f in fives] + [(4, f) for f in fours]
                 + [(5, f) for f in five_arms] + [(4, f) for f in four_arms]
                 + [(3, f) for f in threes])
        text = ""
        if fives:
            text += reply_names(fives, 1, text)
        if five_arms:
            text += reply_names(five_arms, 2, text)
        return GachaResult(items, text, bool(fives or five_arms))