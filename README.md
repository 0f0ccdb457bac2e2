# atribot

The working parts of a group-chat bot, one plain Python module per plugin:
canned replies, small games, lookups against public web services, and a few
text tools. Each module does the parsing, storage and formatting for its
feature and returns strings or simple values, so everything can be used and
tested without a running bot.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## The `atribot` command

```
atribot -u ws://127.0.0.1:6700 -t token -n 亚托利 -p / 12345678
```

It prints the start-up banner, sets up logging and builds the bot
configuration from the options (or reads it from a file), then logs the
WebSocket endpoints it is configured for.

Options:

- `-d` debug logging, `-w` warning logging (`-w` wins over `-d`)
- `-h` print the banner and usage, then exit
- `-t` access token of the WebSocket client
- `-u` URL of the WebSocket client (default `ws://127.0.0.1:6700`)
- `-n` default nickname (default `亚托利`); `ATRI`, `atri`, `亚托莉`, `アトリ` are always added
- `-p` command prefix (default `/`)
- `-c FILE` read the configuration from a JSON file
- `-s FILE` save the configuration built from the options to a file and exit

Positional arguments that are 64-bit integers become super users; others
are ignored.

The configuration can be handled in code too:

```python
from atribot.config import build_config, save_config, load_config

cfg = build_config("ws://127.0.0.1:6700", "token", "亚托利", "/", [12345678])
save_config(cfg, "config.json")
assert load_config("config.json").to_dict() == cfg.to_dict()
```

On Windows, log lines are coloured by level with
`atribot.logformat.LogFormatter`.

## Plugins

| Module | What it does |
| --- | --- |
| `atribot.aifalse` | CPU, RAM and disk report (`status_text`); parsing and packing of the default rate-limit command |
| `atribot.atri` | ATRI canned replies (`respond`), depending on the words, the hour and whether the bot was addressed |
| `atribot.chat` | answers to the bot's name, rate-limited poke replies, a per-group air conditioner |
| `atribot.simple` | `choose` ("A还是B"), `waifu_url`, `baidu_link` |
| `atribot.aireply` | per-session reply mode and voice mode selection |
| `atribot.emojimix` | recognises a pair of emoji or QQ faces and builds the Emoji Kitchen image URLs |
| `atribot.bilibili` | bilibili user search, fan data, member cards, medals and followings; SQLite `VupDB` of known vups and the login cookie |
| `atribot.bilibili_parse` | summary segments of a bilibili video from its av or BV id |
| `atribot.driftbottle` | drift bottles kept in SQLite channels (`Sea`) and parsing of the throw, pick-up and jump commands |
| `atribot.fortune` | background kind per session and the vertical text layout of a fortune slip |
| `atribot.genshin` | ten-pull gacha draws (`Gacha.ten_pull`) and the per-session pool mode |
| `atribot.epidemic` | city epidemic figures from the public news API |
| `atribot.github` | GitHub repository search and its text description |
| `atribot.chouxianghua` | "abstract speech": characters to emoji by pinyin, from SQLite tables |
| `atribot.corpus` | curses, cp stories, jokes, book reviews and essays in one SQLite database |
| `atribot.zhiwang` | recognising a "查重" reply and formatting the essay duplicate-check report |
| `atribot.kanban` | the version banner and `print_banner` |

Session settings (`aireply`, `fortune`, `genshin`) are kept in any mutable
mapping you pass in, keyed by `session_id(group_id, user_id)`.

Some examples:

```python
import random
from atribot.simple import choose, baidu_link
from atribot.bilibili_parse import row
from atribot.emojimix import mix_urls

print(choose("可口可乐还是百事可乐", "alice", random.Random(1)))
print(baidu_link("天气"))
print(row(123456))          # 12.35万
print(mix_urls(0x1F604, 0x1F60D))
```

## What the package does not do

- It does not connect to a chat server. The `atribot` command only prepares
  and saves the configuration; there is no WebSocket client, no event loop
  and no routing of incoming messages to the plugin modules.
- It draws no pictures. `fortune` computes where each character goes,
  `genshin` returns the drawn file names, and `bilibili` returns data; none
  of them renders an image.
- It does not speak or chat by itself: `aireply` only stores which reply
  and voice mode a session uses.
- It ships no data. The SQLite stores of `corpus`, `chouxianghua`,
  `driftbottle` and `bilibili` start empty, and the notice text of the
  banner is whatever you pass to `print_banner`.