[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atribot"
version = "1.5.0"
description = "Group-chat bot plugins: canned replies, small games, web lookups and text tools"
requires-python = ">=3.10"
dependencies = [
    "requests",
    "psutil",
]
keywords = ["chat", "bot", "onebot", "plugins", "qq"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
atribot = "atribot.config:main"

[tool.hatch.build.targets.wheel]
packages = ["atribot"]

[tool.pytest.ini_options]
addopts = "-ra"
