"""Small one-shot commands: choosing, random waifu and a search link."""

from __future__ import annotations

import random
from typing import Optional
from urllib.parse import quote_plus

WAIFU_URL = "https://www.thiswaifudoesnotexist.net/example-{}.jpg"
BAIDU_URL = "https://buhuibaidu.me/?s="


def choose(args: str, nickname: str, rng=None) -> str:
    """Pick one of the options separated by "还是" and describe the choice."""
    rng = rng or random
    raw = args.split("还是")
    options = [f"{i}, {option}" for i, option in enumerate(raw, 1)]
    result = raw[rng.randrange(len(raw))]
    return ("> " + nickname + "\n" + "你的选项有:" + "\n"
            + "\n".join(options) + "\n" + "你最终会选: " + result)


def waifu_url(rng=None) -> str:
    """URL of a random generated waifu picture."""
    rng = rng or random
    return WAIFU_URL.format(rng.randrange(100000) + 1)


def baidu_link(text: str) -> Optional[str]:
    """Search link for text, or None for empty text."""
    if not text:
        return None
    return BAIDU_URL + quote_plus(text)