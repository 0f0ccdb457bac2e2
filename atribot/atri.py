"""Canned ATRI replies to greetings, praise, insults and the like."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Optional

_DATA_BASE = "https://gitcode.net/u011570312/zbpdata/-/raw/main/"
RES = _DATA_BASE + "Atri/"

TEXT = "text"
IMAGE = "image"
RECORD = "record"


def _split(packed: str, sep: str = "|") -> tuple:
    """Unpack a separator-joined list of phrases."""
    return tuple(packed.split(sep))


ENABLE_TEXT, DISABLE_TEXT = _split("嗯呜呜……夏生先生……？|Zzz……Zzz……")

SLEEP_TALK = _split(
    "zzzz......|zzzzzzzz......|zzz...好涩哦..zzz....|"
    "别...不要..zzz..那..zzz..|嘻嘻..zzz..呐~..zzzz..|...zzz....哧溜哧溜...."
)
MORNING_EARLY = _split(
    "啊......早上好...(哈欠)|唔......吧唧...早上...哈啊啊~~~\n早上好......|"
    "早上好......|早上好呜......呼啊啊~~~~|啊......早上好。\n昨晚也很激情呢！|"
    "吧唧吧唧......怎么了...已经早上了么...|早上好！|"
    "......看起来像是傍晚，其实已经早上了吗？|早上好......欸~~~脸好近呢"
)
MORNING_LATE = _split(
    "哼！这个点还早啥，昨晚干啥去了！？|熬夜了对吧熬夜了对吧熬夜了对吧？？？！|"
    "是不是熬夜是不是熬夜是不是熬夜？！"
)
MORNING_EVENING = _split(
    "早个啥？哼唧！我都准备洗洗睡了！|不是...你看看几点了，哼！|晚上好哇"
)
NOON = _split(
    "午安w|午觉要好好睡哦，ATRI会陪伴在你身旁的w|"
    "嗯哼哼~睡吧，就像平常一样安眠吧~o(≧▽≦)o|睡你午觉去！哼唧！！"
)
NIGHT_MORNING = _split(
    "你可猝死算了吧！|？啊这|亲，这边建议赶快去睡觉呢~~~|"
    "不可忍不可忍不可忍！！为何这还不猝死！！"
)
NIGHT_AFTERNOON = _split(
    "难不成？？晚上不想睡觉？？现在休息|就......挺离谱的...现在睡觉|"
    "现在还是白天哦，睡觉还太早了"
)
NIGHT_EVENING = _split(
    "嗯哼哼~睡吧，就像平常一样安眠吧~o(≧▽≦)o|......(打瞌睡)|"
    "呼...呼...已经睡着了哦~...呼......|......我、我会在这守着你的，请务必好好睡着"
)
PRAISE = _split(
    "当然，我是高性能的嘛~！|小事一桩，我是高性能的嘛|怎么样？还是我比较高性能吧？|"
    "哼哼！我果然是高性能的呢！|因为我是高性能的嘛！嗯哼！|因为我是高性能的呢！|"
    "哎呀~，我可真是太高性能了|正是，因为我是高性能的|是的。我是高性能的嘛♪|"
    "毕竟我可是高性能的！|嘿嘿，我的高性能发挥出来啦♪|我果然是很高性能的机器人吧！|"
    "是吧！谁叫我这么高性能呢！哼哼！|交给我吧，有高性能的我陪着呢|"
    "呣......我的高性能，毫无遗憾地施展出来了......"
)
FINE = _split(
    "当然，我是高性能的嘛~！|没事没事，因为我是高性能的嘛！嗯哼！|"
    "没事的，因为我是高性能的呢！|正是，因为我是高性能的|是的。我是高性能的嘛♪|"
    "毕竟我可是高性能的！|那种程度的事不算什么的。\n别看我这样，我可是高性能的|"
    "没问题的，我可是高性能的"
)
ROBOT_TEXT = _split("萝卜子是对机器人的蔑称！|是亚托莉......萝卜子可是对机器人的蔑称")
HUH_TEXT = _split("?|？|嗯？|(。´・ω・)ん?|ん？")
LOVE_IMAGES = _split("SUKI.jpg SUKI1.jpg SUKI2.png", " ")
ANGRY_IMAGES = _split("FN.jpg WQ.jpg WQ1.jpg", " ")
YES_NO_IMAGES = _split("YES.png NO.jpg", " ")
AZ_IMAGES = _split("AZ.jpg AZ1.jpg", " ")
HUH_IMAGES = _split("WH.jpg WH1.jpg WH2.jpg WH3.jpg", " ")

LOVE_WORDS = _split("喜欢 爱你 爱 suki daisuki すき 好き 贴贴 老婆 亲一个 mua", " ")
CURSE_WORDS = _split("草你妈 操你妈 脑瘫 废柴 fw five 废物 战斗 爬 爪巴 sb SB 傻B", " ")
MORNING_WORDS = _split("早安 早哇 早上好 ohayo 哦哈哟 お早う 早好 早 早早早", " ")
NOON_WORDS = _split("中午好 午安 午好", " ")
NIGHT_WORDS = _split("晚安 oyasuminasai おやすみなさい 晚好 晚上好", " ")
PRAISE_WORDS = _split("高性能 太棒了 すごい sugoi 斯国一 よかった", " ")
FINE_WORDS = _split("没事 没关系 大丈夫 还好 不要紧 没出大问题 没伤到哪", " ")
QUESTION_WORDS = _split("好吗 是吗 行不行 能不能 可不可以", " ")
HUH_WORDS = _split("？ ? ¿", " ")
DONE_TEXT = _split("不许好！|憋回去！")
REFUSE_TEXT = "我无法回应你的请求"


@dataclass(frozen=True)
class Reply:
    """One message to send: text, an image URL or a voice record URL."""

    kind: str
    content: str
    quote: bool = False


def _pick(rng, options):
    return options[rng.randrange(len(options))]


def _text(rng, options, quote=False) -> Reply:
    return Reply(TEXT, _pick(rng, options), quote)


def _image(rng, names) -> Reply:
    return Reply(IMAGE, image_url(_pick(rng, names)))


def is_atri_awake(hour: int) -> bool:
    """ATRI sleeps from 1 to 6 o'clock and answers nothing then."""
    return not 1 <= hour < 6


def image_url(name: str) -> str:
    """Full URL of an ATRI resource file."""
    return RES + name


def morning_reply(hour: int, rng=None) -> Optional[Reply]:
    """Answer to a good-morning greeting at the given hour."""
    rng = rng or random
    if hour < 6:
        return _text(rng, SLEEP_TALK, True)
    if hour < 9:
        return _text(rng, MORNING_EARLY, True)
    if hour < 18:
        return _text(rng, MORNING_LATE, True)
    if hour < 24:
        return _text(rng, MORNING_EVENING, True)
    return None


def noon_reply(hour: int, rng=None) -> Optional[Reply]:
    """Answer to a noon greeting; only between 12 and 14 o'clock."""
    rng = rng or random
    if 11 < hour < 15:
        return _text(rng, NOON, True)
    return None


def night_reply(hour: int, rng=None) -> Optional[Reply]:
    """Answer to a good-night greeting at the given hour."""
    rng = rng or random
    if hour < 6:
        return _text(rng, SLEEP_TALK, True)
    if hour < 11:
        return _text(rng, NIGHT_MORNING, True)
    if hour < 15:
        return _text(rng, NOON, True)
    if hour < 19:
        return _text(rng, NIGHT_AFTERNOON, True)
    if hour < 24:
        return _text(rng, NIGHT_EVENING, True)
    return None


def _robot(hour, rng):
    if rng.randrange(2) == 0:
        return _text(rng, ROBOT_TEXT)
    return Reply(RECORD, image_url("RocketPunch.amr"))


def _maybe_image(names):
    def handler(hour, rng):
        if rng.randrange(2) == 0:
            return _image(rng, names)
        return None
    return handler


def _huh(names):
    def handler(hour, rng):
        n = rng.randrange(5)
        if n == 0:
            return _text(rng, HUH_TEXT)
        if n in (1, 2):
            return _image(rng, names)
        return None
    return handler


@dataclass(frozen=True)
class _Rule:
    words: tuple
    full: bool
    awake: bool
    to_me: bool
    handler: Callable

    def matches(self, text: str, hour: int, to_me: bool) -> bool:
        if self.full:
            hit = text in self.words
        else:
            hit = any(w in text for w in self.words)
        if not hit:
            return False
        if self.awake and not is_atri_awake(hour):
            return False
        return to_me or not self.to_me


_RULES = (
    _Rule(("萝卜子",), True, True, False, _robot),
    _Rule(LOVE_WORDS, True, True, True, lambda h, r: _image(r, LOVE_IMAGES)),
    _Rule(CURSE_WORDS, False, True, True, lambda h, r: _image(r, ANGRY_IMAGES)),
    _Rule(MORNING_WORDS, True, False, False, morning_reply),
    _Rule(NOON_WORDS, True, False, False, noon_reply),
    _Rule(NIGHT_WORDS, True, False, False, night_reply),
    _Rule(PRAISE_WORDS, False, True, True, lambda h, r: _text(r, PRAISE)),
    _Rule(FINE_WORDS, False, True, True, lambda h, r: _text(r, FINE)),
    _Rule(QUESTION_WORDS, False, True, False, _maybe_image(YES_NO_IMAGES)),
    _Rule(("啊这",), False, True, False, _maybe_image(AZ_IMAGES)),
    _Rule(("我好了",), False, True, False, lambda h, r: _text(r, DONE_TEXT, True)),
    _Rule(HUH_WORDS, True, True, False, _huh(HUH_IMAGES)),
    _Rule(("离谱",), False, True, False, _huh(("WH.jpg",))),
    _Rule(("答应我",), False, True, True, lambda h, r: Reply(TEXT, REFUSE_TEXT)),
)


def respond(text: str, hour: int, to_me: bool = False, rng=None) -> Optional[Reply]:
    """Answer a message; the first matching rule decides, even with no reply."""
    rng = rng or random
    for rule in _RULES:
        if rule.matches(text, hour, to_me):
            return rule.handler(hour, rng)
    return None