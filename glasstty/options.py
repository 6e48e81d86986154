"""Command-line options shared by all terminals."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence


class UsageError(Exception):
    """The command line could not be understood."""


@dataclass
class Options:
    """What the command line asked for."""

    command: list[str]
    baud: int = 0
    backspace_is_rubout: bool = False
    rerun: bool = False
    scale: int = 1
    fullscreen: bool = False
    flags: frozenset[str] = field(default_factory=frozenset)


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _usage(prog: str, extra: str) -> str:
    extras = "".join(f" [-{flag}]" for flag in extra)
    return f"usage: {prog} [-2]{extras} [-B] [-r] [-f] [-b baudrate] command..."


def parse_args(prog: str, argv: Optional[Sequence[str]] = None, extra: str = "") -> Options:
    """Parse ``argv`` (without the program name); ``extra`` names additional flag letters."""
    args = list(sys.argv[1:] if argv is None else argv)
    usage = _usage(prog, extra)
    baud = 0
    rubout = rerun = fullscreen = False
    scale = 1
    flags: set[str] = set()

    rest_args = iter(args)
    command: list[str] = []
    for arg in rest_args:
        if not arg.startswith("-") or len(arg) < 2:
            command = [arg]
            break
        if arg == "--":
            break
        cluster = arg[1:]
        while cluster:
            flag, cluster = cluster[0], cluster[1:]
            if flag == "b":
                if cluster:
                    value, cluster = cluster, ""
                else:
                    value = next(rest_args, None)
                    if value is None:
                        raise UsageError(usage)
                baud = _atoi(value)
            elif flag == "B":
                rubout = True
            elif flag == "r":
                rerun = True
            elif flag == "2":
                scale += 1
            elif flag == "f":
                fullscreen = True
            elif flag in extra:
                flags.add(flag)
            else:
                raise UsageError(usage)
    command.extend(rest_args)
    if not command:
        raise UsageError(usage)
    return Options(
        command=command,
        baud=baud,
        backspace_is_rubout=rubout,
        rerun=rerun,
        scale=scale,
        fullscreen=fullscreen,
        flags=frozenset(flags),
    )