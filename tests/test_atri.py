import random

import pytest

from atribot import atri
from atribot.atri import Reply, respond


class Seq:
    """A random source that returns preset values."""

    def __init__(self, *values):
        self._values = iter(values)

    def randrange(self, n):
        v = next(self._values)
        assert 0 <= v < n
        return v


@pytest.mark.parametrize("hour", range(24))
def test_sleeping_hours(hour):
    assert atri.is_atri_awake(hour) == (hour == 0 or hour >= 6)


def test_image_url():
    assert atri.image_url("WH.jpg") == atri.RES + "WH.jpg"


def test_morning_sleep_talk():
    assert atri.morning_reply(3, Seq(0)) == Reply("text", "zzzz......", True)


@pytest.mark.parametrize("hour,pool", [
    (7, atri.MORNING_EARLY), (12, atri.MORNING_LATE), (20, atri.MORNING_EVENING),
])
def test_morning_pools(hour, pool):
    r = atri.morning_reply(hour, random.Random(hour))
    assert r.content in pool and r.quote


def test_noon_only_at_noon():
    assert atri.noon_reply(10, Seq()) is None
    assert atri.noon_reply(15, Seq()) is None
    assert atri.noon_reply(12, Seq(0)).content == "午安w"


@pytest.mark.parametrize("hour,pool", [
    (2, atri.SLEEP_TALK), (8, atri.NIGHT_MORNING), (13, atri.NOON),
    (17, atri.NIGHT_AFTERNOON), (22, atri.NIGHT_EVENING),
])
def test_night_pools(hour, pool):
    assert atri.night_reply(hour, random.Random(1)).content in pool


def test_robot_record():
    r = respond("萝卜子", 12, rng=Seq(1))
    assert r == Reply("record", atri.RES + "RocketPunch.amr")


def test_robot_asleep():
    assert respond("萝卜子", 3, rng=Seq()) is None


def test_greeting_while_asleep():
    r = respond("早", 3, rng=Seq(1))
    assert r.content == atri.SLEEP_TALK[1]


def test_love_needs_to_me():
    assert respond("爱", 12, to_me=False, rng=Seq()) is None
    r = respond("爱", 12, to_me=True, rng=Seq(2))
    assert r == Reply("image", atri.RES + "SUKI2.png")


def test_curse_keyword():
    r = respond("你这个废物啊", 12, to_me=True, rng=Seq(0))
    assert r.kind == "image" and r.content == atri.image_url("FN.jpg")


def test_huh_silent_and_image():
    assert respond("?", 12, rng=Seq(4)) is None
    r = respond("?", 12, rng=Seq(1, 3))
    assert r.content == atri.image_url("WH3.jpg")


def test_i_am_done_quotes():
    r = respond("我好了", 12, rng=Seq(1))
    assert r == Reply("text", "憋回去！", True)


def test_promise_me():
    assert respond("答应我", 12, to_me=True, rng=Seq()).content == "我无法回应你的请求"


def test_unknown_text():
    assert respond("随便说说", 12, to_me=True, rng=Seq()) is None