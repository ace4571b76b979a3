"""Rock paper scissors strategy guide scoring."""

from __future__ import annotations

from enum import Enum

from yuletide.calories import _run_cli

LOSS = 0
DRAW = 3
WIN = 6


class Shape(Enum):
    """A hand shape; its value is the points it scores when played."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @classmethod
    def from_letter(cls, letter: str) -> "Shape":
        """Decode A/X as rock, B/Y as paper and C/Z as scissors."""
        try:
            return _LETTERS[letter]
        except KeyError:
            raise ValueError(f"unknown play letter: {letter!r}") from None


_LETTERS = {
    "A": Shape.ROCK,
    "X": Shape.ROCK,
    "B": Shape.PAPER,
    "Y": Shape.PAPER,
    "C": Shape.SCISSORS,
    "Z": Shape.SCISSORS,
}

_BEATS = {
    Shape.ROCK: Shape.SCISSORS,
    Shape.PAPER: Shape.ROCK,
    Shape.SCISSORS: Shape.PAPER,
}


def outcome_points(opponent: Shape, me: Shape) -> int:
    """Points for the result of a round, seen from the second player."""
    if opponent is me:
        return DRAW
    return WIN if _BEATS[me] is opponent else LOSS


def round_score(opponent: Shape, me: Shape) -> int:
    """Shape points plus outcome points for one round."""
    return me.value + outcome_points(opponent, me)


def total_score(text: str) -> int:
    """Total score over every round of a strategy guide."""
    total = 0
    for line in text.splitlines():
        parts = line.split()
        if not parts:
            continue
        if len(parts) != 2:
            raise ValueError(f"malformed round: {line!r}")
        total += round_score(Shape.from_letter(parts[0]), Shape.from_letter(parts[1]))
    return total


def main(argv: list[str] | None = None) -> int:
    return _run_cli(argv, "Score a rock paper scissors strategy guide.", total_score)