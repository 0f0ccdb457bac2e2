"""Per-session reply mode and voice mode selection for AI replies."""

from __future__ import annotations

import threading
from typing import MutableMapping

REPLY_MODES = ("青云客", "小爱")
DEFAULT_REPLY_MODE = "青云客"

TTS_MODES = (
    "拟声鸟阿梓",
    "拟声鸟文静",
    "拟声鸟药水哥",
    "百度女声",
    "百度男声",
    "百度度逍遥",
    "百度度丫丫",
)
DEFAULT_SOUND_MODE = "拟声鸟阿梓"


def session_id(group_id: int, user_id: int) -> int:
    """Key a setting by group, or by the negated user id in private chats."""
    return group_id if group_id != 0 else -user_id


def set_reply_mode(store: MutableMapping[int, int], gid: int, name: str) -> int:
    """Store the reply mode named for a session and return its index."""
    try:
        index = REPLY_MODES.index(name)
    except ValueError:
        raise ValueError("no such mode") from None
    if store is None:
        raise LookupError("no such plugin")
    store[gid] = index
    return index


def get_reply_mode(store, gid: int) -> str:
    """The reply mode of a session, or the default one."""
    if store is not None:
        index = store.get(gid, 0)
        if 0 <= index < len(REPLY_MODES):
            return REPLY_MODES[index]
    return DEFAULT_REPLY_MODE


class TTSModes:
    """The ordered list of voice modes; the first one is the default."""

    def __init__(self, modes=TTS_MODES):
        self._modes = list(modes)
        self._lock = threading.RLock()

    def list(self) -> list[str]:
        """A copy of the voice modes in their current order."""
        with self._lock:
            return list(self._modes)

    def index_of(self, name: str) -> int:
        """Position of a voice mode in the list."""
        with self._lock:
            try:
                return self._modes.index(name)
            except ValueError:
                raise ValueError(f"no such sound mode: {name}") from None

    def set_sound_mode(self, store: MutableMapping[int, int], gid: int, name: str) -> int:
        """Store the voice mode for a session and return its index."""
        index = self.index_of(name)
        store[gid] = index
        return index

    def get_sound_mode(self, store, gid: int) -> str:
        """The voice mode of a session, or the fixed fallback."""
        if store is not None:
            with self._lock:
                index = store.get(gid, 0)
                if 0 <= index < len(self._modes):
                    return self._modes[index]
        return DEFAULT_SOUND_MODE

    def set_default(self, name: str) -> None:
        """Make a voice mode the default by swapping it to the front."""
        with self._lock:
            index = self.index_of(name)
            self._modes[0], self._modes[index] = self._modes[index], self._modes[0]