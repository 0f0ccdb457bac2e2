import pytest

from atribot.driftbottle import (
    Bottle,
    Sea,
    crc64_iso,
    parse_fetch,
    parse_jump,
    parse_throw,
)


@pytest.fixture
def sea(tmp_path):
    s = Sea(tmp_path / "sea.db")
    yield s
    s.close()


def test_crc64_check_value():
    assert crc64_iso(b"123456789") == 0xB90956C775A41001


def test_crc64_empty_and_str():
    assert crc64_iso(b"") == 0
    assert crc64_iso("abc") == crc64_iso(b"abc")


def test_bottle_id_is_signed_crc():
    b = Bottle(1, 2, "name", "msg")
    assert b.id % 2**64 == crc64_iso("1_2_name_msg")
    assert -(2**63) <= b.id < 2**63


def test_throw_and_fetch(sea):
    b = Bottle(10, 20, "alice", "hello")
    sea.throw("global", b)
    got = sea.fetch("global", 20)
    assert (got.qq, got.grp, got.name, got.msg, got.id) == (10, 20, "alice", "hello", b.id)


def test_fetch_respects_group(sea):
    sea.throw("global", Bottle(10, 20, "alice", "hello"))
    with pytest.raises(LookupError):
        sea.fetch("global", 30)


def test_open_bottle_for_anyone(sea):
    sea.throw("global", Bottle(10, 0, "bob", "hi"))
    assert sea.fetch("global", -99).msg == "hi"


def test_replace_and_destroy(sea):
    b = Bottle(1, 0, "n", "m")
    sea.throw("global", b)
    sea.throw("global", b)
    assert sea.count("global") == 1
    sea.destroy("global", b)
    assert sea.count("global") == 0


def test_channels(sea):
    with pytest.raises(LookupError):
        sea.count("other")
    sea.create_channel("other")
    assert sea.count("other") == 0
    with pytest.raises(ValueError):
        sea.create_channel("")


def test_parse_throw():
    assert parse_throw("在群123丢漂流瓶到频道abc hello", 5) == (123, "abc", "hello")
    assert parse_throw("丢漂流瓶 hi there", 7) == (7, "global", "hi there")


def test_parse_throw_errors():
    with pytest.raises(ValueError):
        parse_throw("丢漂流瓶 ", 1)
    with pytest.raises(ValueError):
        parse_throw("在群99999999999999999999丢漂流瓶 x", 1)
    with pytest.raises(ValueError):
        parse_throw("hello", 1)


def test_parse_fetch_and_jump():
    assert parse_fetch("从频道abc捡漂流瓶") == "abc"
    assert parse_fetch("捡漂流瓶") == "global"
    assert parse_jump("跳入abc海中") == "abc"
    assert parse_jump("跳入海中") == "global"
    with pytest.raises(ValueError):
        parse_fetch("捡漂流瓶x")
    with pytest.raises(ValueError):
        parse_jump("跳入")