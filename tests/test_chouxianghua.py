import sqlite3

import pytest

from atribot.chouxianghua import AbstractDB


@pytest.fixture
def db(tmp_path):
    path = tmp_path / "cxh.db"
    AbstractDB(path).close()
    conn = sqlite3.connect(path)
    conn.executemany("INSERT INTO pinyin VALUES (?, ?)",
                     [("你", "ni"), ("好", "hao"), ("吗", "ma")])
    conn.executemany("INSERT INTO emoji VALUES (?, ?)",
                     [("nihao", "👋"), ("ma", "🐴")])
    conn.commit()
    conn.close()
    with AbstractDB(path) as d:
        yield d


def test_lookups(db):
    assert db.pinyin("好") == "hao"
    assert db.pinyin("未") == ""
    assert db.emoji("ma") == "🐴"
    assert db.emoji("xyz") == ""


def test_translate_pair_and_single(db):
    assert db.translate("你好吗") == "👋🐴"


def test_translate_keeps_unknown(db):
    assert db.translate("你x") == "你x"
    assert db.translate("") == ""


def test_translate_single_after_unknown(db):
    assert db.translate("x吗") == "x🐴"