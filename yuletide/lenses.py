"""The holiday hash and a lens arrangement in 256 boxes."""

from __future__ import annotations

from yuletide.calories import _run_cli

BOX_COUNT = 256


def holiday_hash(text: str) -> int:
    """Hash a string: for each character, add its code, times 17, modulo 256."""
    value = 0
    for ch in text:
        value = (value + ord(ch)) * 17 % BOX_COUNT
    return value


def _split_label(step: str) -> tuple[str, str]:
    index = 0
    while index < len(step) and step[index].isalpha():
        index += 1
    return step[:index], step[index:]


class LensBoxes:
    """Boxes of labelled lenses, each kept in insertion order."""

    def __init__(self) -> None:
        self.boxes: list[dict[str, int]] = [{} for _ in range(BOX_COUNT)]

    def put(self, label: str, focal_length: int) -> None:
        """Replace the lens with this label, or add it behind the others."""
        self.boxes[holiday_hash(label)][label] = focal_length

    def remove(self, label: str) -> None:
        """Take out the lens with this label, if present."""
        self.boxes[holiday_hash(label)].pop(label, None)

    def apply(self, step: str) -> None:
        """Carry out a step such as ``rn=1`` or ``cm-``."""
        label, operation = _split_label(step.strip())
        if not label:
            raise ValueError(f"step has no label: {step!r}")
        if operation == "-":
            self.remove(label)
        elif operation.startswith("=") and operation[1:].isdigit():
            self.put(label, int(operation[1:]))
        else:
            raise ValueError(f"malformed step: {step!r}")

    def focusing_power(self) -> int:
        """Sum over lenses of box number, slot number and focal length."""
        return sum(
            box_number * slot * focal
            for box_number, box in enumerate(self.boxes, start=1)
            for slot, focal in enumerate(box.values(), start=1)
        )


def _steps(text: str) -> list[str]:
    return [step for step in text.replace("\n", "").replace("\r", "").split(",") if step]


def part_one(text: str) -> int:
    """Sum of the hashes of every step."""
    return sum(holiday_hash(step) for step in _steps(text))


def part_two(text: str) -> int:
    """Focusing power after performing every step."""
    boxes = LensBoxes()
    for step in _steps(text):
        boxes.apply(step)
    return boxes.focusing_power()


def main(argv: list[str] | None = None) -> int:
    return _run_cli(argv, "Hash initialization steps and arrange lenses.", part_one, part_two)