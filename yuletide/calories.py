"""Calorie counting: totals carried by each elf and the largest of them."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Callable, Iterator


def _blocks(text: str) -> Iterator[list[str]]:
    """Yield the stripped non-blank lines of each blank-line separated block."""
    block: list[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if line:
            block.append(line)
        elif block:
            yield block
            block = []
    if block:
        yield block


def _run_cli(argv: list[str] | None, description: str, *solvers: Callable[[str], object]) -> int:
    """Read puzzle input from a file or stdin and print each solver's answer."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input (default: stdin)")
    path = parser.parse_args(argv).input
    if path == "-":
        text = sys.stdin.read()
    else:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    for solve in solvers:
        print(solve(text))
    return 0


def elf_totals(text: str) -> list[int]:
    """Return the calorie total of each blank-line separated group, in order."""
    return [sum(int(line) for line in block) for block in _blocks(text)]


def part_one(text: str) -> int:
    """Largest calorie total carried by a single elf."""
    return max(elf_totals(text), default=0)


def part_two(text: str) -> int:
    """Sum of the three largest calorie totals."""
    return sum(heapq.nlargest(3, elf_totals(text)))


def main(argv: list[str] | None = None) -> int:
    return _run_cli(argv, "Count the calories carried by elves.", part_one, part_two)