import random
import re
from urllib.parse import unquote_plus

from atribot import simple


class Seq:
    def __init__(self, *values):
        self._values = iter(values)

    def randrange(self, n):
        v = next(self._values)
        assert 0 <= v < n
        return v


def test_choose_worked_example():
    out = simple.choose("可口可乐还是百事可乐", "小明", Seq(1))
    assert out == "> 小明\n你的选项有:\n1, 可口可乐\n2, 百事可乐\n你最终会选: 百事可乐"


def test_choose_result_is_an_option():
    rng = random.Random(7)
    for _ in range(20):
        out = simple.choose("肯德基还是麦当劳还是必胜客", "n", rng)
        choice = out.rsplit("你最终会选: ", 1)[1]
        assert choice in ("肯德基", "麦当劳", "必胜客")


def test_choose_single_option():
    out = simple.choose("睡觉", "n", Seq(0))
    assert out.endswith("1, 睡觉\n你最终会选: 睡觉")


def test_waifu_url_bounds():
    assert simple.waifu_url(Seq(0)) == simple.WAIFU_URL.format(1)
    assert simple.waifu_url(Seq(99999)) == simple.WAIFU_URL.format(100000)


def test_waifu_url_shape():
    url = simple.waifu_url(random.Random(3))
    m = re.fullmatch(r"https://www\.thiswaifudoesnotexist\.net/example-(\d+)\.jpg", url)
    assert m and 1 <= int(m.group(1)) <= 100000


def test_baidu_link_empty():
    assert simple.baidu_link("") is None


def test_baidu_link_round_trip():
    text = "怎么 学习 python?&"
    link = simple.baidu_link(text)
    assert link.startswith(simple.BAIDU_URL)
    query = link[len(simple.BAIDU_URL):]
    assert " " not in query and "&" not in query
    assert unquote_plus(query) == text


def test_baidu_link_space_is_plus():
    assert simple.baidu_link("a b") == simple.BAIDU_URL + "a+b"