"""Version banner and notice board printed at start."""

from __future__ import annotations

import sys

_INFO = (
    "* OneBot + ZeroBot",
    "* Version 1.5.0-beta2 - 2022-07-03 18:24:34 +0800 CST",
)


def banner() -> str:
    """Return the version banner."""
    return "\n".join(_INFO)


def print_banner(notice="", file=None) -> None:
    """Print the banner framed together with a notice text."""
    out = file if file is not None else sys.stdout
    out.write(
        "\n======================[ZeroBot-Plugin]======================"
        "\n" + banner() + "\n"
        "----------------------[ZeroBot-公告栏]----------------------"
        "\n" + notice + "\n"
        "============================================================\n\n"
    )