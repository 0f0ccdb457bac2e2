import json

import pytest

from atribot import config as cfg
from atribot import kanban


def test_build_config_nicknames_and_fields():
    c = cfg.build_config("ws://localhost:1", "token", "bot", "#", [1, 2])
    assert c.zero.nickname == ["bot", "ATRI", "atri", "亚托莉", "アトリ"]
    assert c.zero.command_prefix == "#"
    assert c.zero.super_users == [1, 2]
    assert c.ws[0].url == "ws://localhost:1"
    assert c.ws[0].access_token == "token"


def test_to_dict_layout():
    c = cfg.build_config("ws://localhost:1", "token", "bot", "#", [3])
    d = c.to_dict()
    assert d["ws"] == [{"Url": "ws://localhost:1", "AccessToken": "token"}]
    assert d["zero"]["command_prefix"] == "#"
    assert d["zero"]["super_users"] == [3]


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "c.json"
    c = cfg.build_config("ws://localhost:2", "token", "亚托利", "/", [5, 6])
    cfg.save_config(c, path)
    assert cfg.load_config(path) == c
    assert json.loads(path.read_text(encoding="utf-8"))["zero"]["nickname"][0] == "亚托利"


def test_parse_args_defaults():
    args = cfg.parse_args([])
    assert args.url == "ws://127.0.0.1:6700"
    assert args.nickname == "亚托利"
    assert args.prefix == "/"
    assert args.super_users == []
    assert not args.help


def test_parse_args_super_users_skip_invalid():
    args = cfg.parse_args(["-d", "-t", "token", "12", "abc", "+7", "1_0"])
    assert args.debug
    assert args.token == "token"
    assert args.super_users == [12, 7]


def test_load_missing_file():
    with pytest.raises(FileNotFoundError):
        cfg.load_config("/nonexistent/dir/c.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        cfg.load_config(path)


def test_main_save(tmp_path, capsys):
    path = tmp_path / "out.json"
    assert cfg.main(["-s", str(path), "-n", "bot", "42"]) == 0
    loaded = cfg.load_config(path)
    assert loaded.zero.nickname[0] == "bot"
    assert loaded.zero.super_users == [42]
    assert loaded.ws[0].url == "ws://127.0.0.1:6700"


def test_main_from_config(tmp_path, capsys):
    path = tmp_path / "in.json"
    cfg.save_config(cfg.build_config("ws://localhost:3", "", "x", "/", []), path)
    assert cfg.main(["-c", str(path)]) == 0


def test_main_help(capsys):
    assert cfg.main(["-h"]) == 0
    out = capsys.readouterr().out
    assert "Usage:" in out
    assert kanban.banner() in out


def test_help_reply():
    text = cfg.help_reply()
    assert text.startswith(kanban.banner())
    assert '"/服务列表"' in text