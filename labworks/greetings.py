"""Small console greetings and the ``fun`` summation exercise."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

MAX_LEN = 80
DEFAULT_SOURCE = (3, 1, 4, 1, 5, 9, 0)

_HEADER = "Berkeley eccentrics:\n====================\n"
_UNKNOWN = "I don't know these people!\n"
# Each case lists what it prints; ``True`` marks a case that falls through.
_CASES: dict[int, tuple[list[str], bool]] = {
    0: (["Yoshua\n"], True),
    1: (["Triangle Man\n"], False),
    2: (["Chinese Erhu Guy\n"], True),
    3: (["Yoshua\n"], False),
    4: (["Dr. Jokemon\n"], False),
    5: (["Hat Lady\n"], True),
}
_CASE_ORDER = [0, 1, 2, 3, 4, 5]


def _switch(value: int) -> str:
    """Render the switch block, following fall-through between cases."""
    if value not in _CASES:
        return _UNKNOWN
    lines: list[str] = []
    for case in _CASE_ORDER[_CASE_ORDER.index(value):]:
        printed, falls_through = _CASES[case]
        lines.extend(printed)
        if not falls_through:
            return "".join(lines)
    lines.append(_UNKNOWN)
    return "".join(lines)


def eccentric(v0: int = 3, v1: int = 3, v2: int = 3, v3: int = 3) -> str:
    """Return the eccentrics report driven by the four values."""
    cheer = "Go" if v3 == 3 else "Boo"
    rival = "BEARS" if v2 else "CARDINAL"
    return (
        _HEADER
        + "Happy " * max(v0, 0)
        + "\n"
        + _switch(v1)
        + f"{cheer} {rival}!\n"
    )


def hello() -> str:
    """Return the farewell message."""
    return "Thanks for waddling through this program. Have a nice day."


def interactive_hello(line: str) -> str:
    """Return the prompt and greeting for a name typed as ``line``.

    At most one line of up to ``MAX_LEN - 1`` characters of the input is used.
    """
    end = line.find("\n")
    name = line if end < 0 else line[: end + 1]
    name = name[: MAX_LEN - 1]
    return (
        "What's your name?\n"
        f"Hey, {name}I just really wanted to say hello to you.\n"
        "I hope you have a wonderful day."
    )


def fun(x: int) -> int:
    """Return ``-x * (x + 1)``."""
    return -x * (x + 1)


def sum_of_fun(source: Iterable[int] = DEFAULT_SOURCE) -> int:
    """Sum ``fun`` over ``source`` up to, not including, the first zero."""
    total = 0
    for value in source:
        if value == 0:
            break
        total += fun(value)
    return total


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="greetings")
    commands = parser.add_subparsers(dest="command", required=True)
    ecc = commands.add_parser("eccentric")
    for name in ("v0", "v1", "v2", "v3"):
        ecc.add_argument(f"--{name}", type=int, default=3)
    commands.add_parser("hello")
    commands.add_parser("interactive")
    commands.add_parser("ex2")
    args = parser.parse_args(argv)

    if args.command == "eccentric":
        sys.stdout.write(eccentric(args.v0, args.v1, args.v2, args.v3))
    elif args.command == "hello":
        sys.stdout.write(hello())
    elif args.command == "interactive":
        sys.stdout.write(interactive_hello(sys.stdin.readline()))
    else:
        print(sum_of_fun())
    return 0


if __name__ == "__main__":
    sys.exit(main())