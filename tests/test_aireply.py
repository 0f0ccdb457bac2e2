import pytest

from atribot import aireply


def test_session_id_group():
    assert aireply.session_id(123, 456) == 123


def test_session_id_private():
    assert aireply.session_id(0, 456) == -456


def test_reply_mode_default():
    assert aireply.get_reply_mode({}, 1) == "青云客"
    assert aireply.get_reply_mode(None, 1) == "青云客"


def test_reply_mode_round_trip():
    store = {}
    index = aireply.set_reply_mode(store, 7, "小爱")
    assert store[7] == index
    assert aireply.get_reply_mode(store, 7) == "小爱"
    assert aireply.get_reply_mode(store, 8) == "青云客"


def test_reply_mode_unknown():
    with pytest.raises(ValueError):
        aireply.set_reply_mode({}, 1, "nothing")


def test_reply_mode_out_of_range_index():
    assert aireply.get_reply_mode({1: 99}, 1) == "青云客"


def test_tts_list_is_copy():
    modes = aireply.TTSModes()
    lst = modes.list()
    lst.clear()
    assert modes.list() == list(aireply.TTS_MODES)


def test_tts_sound_mode_round_trip():
    modes = aireply.TTSModes()
    store = {}
    modes.set_sound_mode(store, -5, "百度男声")
    assert modes.get_sound_mode(store, -5) == "百度男声"
    assert modes.get_sound_mode(store, 6) == "拟声鸟阿梓"


def test_tts_unknown_mode():
    modes = aireply.TTSModes()
    with pytest.raises(ValueError):
        modes.set_sound_mode({}, 1, "nope")
    with pytest.raises(ValueError):
        modes.set_default("nope")


def test_tts_set_default_swaps():
    modes = aireply.TTSModes()
    modes.set_default("百度度丫丫")
    lst = modes.list()
    assert lst[0] == "百度度丫丫"
    assert lst[-1] == "拟声鸟阿梓"
    assert sorted(lst) == sorted(aireply.TTS_MODES)
    assert modes.get_sound_mode({}, 1) == "百度度丫丫"


def test_tts_index_of():
    modes = aireply.TTSModes()
    assert modes.index_of("拟声鸟文静") == 1