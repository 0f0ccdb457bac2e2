"""Command line options and the JSON configuration file of the bot."""

from __future__ import annotations

import argparse
import json
import logging
import os
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path

from . import kanban
from .logformat import LogFormatter

DEFAULT_URL = "ws://127.0.0.1:6700"
DEFAULT_NICKNAME = "亚托利"
DEFAULT_PREFIX = "/"
EXTRA_NICKNAMES = ("ATRI", "atri", "亚托莉", "アトリ")

_INT64 = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

log = logging.getLogger(__name__)


@dataclass
class WSClient:
    """A websocket connection to a OneBot endpoint."""

    url: str
    access_token: str = ""


@dataclass
class ZeroConfig:
    """Settings of the bot framework itself."""

    nickname: list[str] = field(default_factory=list)
    command_prefix: str = ""
    super_users: list[int] = field(default_factory=list)


@dataclass
class BotConfig:
    """The whole configuration: framework settings and its connections."""

    zero: ZeroConfig = field(default_factory=ZeroConfig)
    ws: list[WSClient] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return the configuration in the layout of the JSON file."""
        return {
            "zero": {
                "nickname": list(self.zero.nickname),
                "command_prefix": self.zero.command_prefix,
                "super_users": list(self.zero.super_users),
            },
            "ws": [{"Url": w.url, "AccessToken": w.access_token} for w in self.ws],
        }


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="atribot", add_help=False)
    parser.add_argument("-d", dest="debug", action="store_true",
                        help="Enable debug level log and higher.")
    parser.add_argument("-w", dest="warn", action="store_true",
                        help="Enable warning level log and higher.")
    parser.add_argument("-h", dest="help", action="store_true",
                        help="Display this help.")
    parser.add_argument("-t", dest="token", default="",
                        help="Set AccessToken of WSClient.")
    parser.add_argument("-u", dest="url", default=DEFAULT_URL,
                        help="Set Url of WSClient.")
    parser.add_argument("-n", dest="nickname", default=DEFAULT_NICKNAME,
                        help="Set default nickname.")
    parser.add_argument("-p", dest="prefix", default=DEFAULT_PREFIX,
                        help="Set command prefix.")
    parser.add_argument("-c", dest="config", default="",
                        help="Run from config file.")
    parser.add_argument("-s", dest="save", default="",
                        help="Save default config to file and exit.")
    parser.add_argument("rest", nargs="*", help="Super user ids.")
    return parser


def _parse_int64(text: str) -> int | None:
    if not _INT64.fullmatch(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def parse_args(argv=None) -> argparse.Namespace:
    """Parse the command line; positional numbers become super users."""
    args = _parser().parse_args(argv)
    args.super_users = [
        value for value in (_parse_int64(s) for s in args.rest) if value is not None
    ]
    return args


def build_config(url, token, nickname, prefix, super_users) -> BotConfig:
    """Build the default configuration from command line values."""
    client = WSClient(url=url, access_token=token)
    return BotConfig(
        zero=ZeroConfig(
            nickname=[nickname, *EXTRA_NICKNAMES],
            command_prefix=prefix,
            super_users=list(super_users),
        ),
        ws=[client],
    )


def load_config(path) -> BotConfig:
    """Read a configuration file written by save_config."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("configuration must be a JSON object")
    zero = data.get("zero") or {}
    clients = data.get("ws") or []
    return BotConfig(
        zero=ZeroConfig(
            nickname=list(zero.get("nickname") or []),
            command_prefix=zero.get("command_prefix", ""),
            super_users=[int(u) for u in zero.get("super_users") or []],
        ),
        ws=[
            WSClient(url=c.get("Url", ""), access_token=c.get("AccessToken", ""))
            for c in clients
        ],
    )


def save_config(config: BotConfig, path) -> None:
    """Write the configuration as JSON."""
    Path(path).write_text(
        json.dumps(config.to_dict(), ensure_ascii=False) + "\n", encoding="utf-8"
    )


def help_reply() -> str:
    """The text the bot answers to a help request."""
    return kanban.banner() + '\n可发送"/服务列表"查看 bot 功能'


def _setup_logging(debug: bool, warn: bool) -> None:
    level = logging.INFO
    if debug and not warn:
        level = logging.DEBUG
    if warn:
        level = logging.WARNING
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        if os.name == "nt":
            handler.setFormatter(LogFormatter())
            handler.terminator = ""
        root.addHandler(handler)


def main(argv=None) -> int:
    """Prepare the bot configuration from the command line."""
    args = parse_args(argv)
    kanban.print_banner("", sys.stdout)
    if args.help:
        print("Usage:")
        print(_parser().format_help(), end="")
        return 0
    _setup_logging(args.debug, args.warn)

    if args.config:
        config = load_config(args.config)
        log.info("[main] 从 %s 读取配置文件", args.config)
    else:
        config = build_config(args.url, args.token, args.nickname, args.prefix,
                              args.super_users)
        if args.save:
            save_config(config, args.save)
            log.info("[main] 配置文件已保存到 %s", args.save)
            return 0

    for client in config.ws:
        log.info("[main] 连接到 %s", client.url)
    return 0