import pytest

from yuletide.beams import (
    Direction,
    deflect,
    energized,
    main,
    parse_grid,
    part_one,
    part_two,
)

EXAMPLE = r""".|...\....
|.-.\.....
.....|-...
........|.
..........
.........\
..../.\\..
.-.-/..|..
.|....-|.\
..//.|....
"""

LOOP = "/.\\\n...\n\\./\n"


def test_part_one_example():
    assert part_one(EXAMPLE) == 46


def test_part_two_example():
    assert part_two(EXAMPLE) == 51


def test_part_two_at_least_part_one():
    assert part_two(EXAMPLE) >= part_one(EXAMPLE)


@pytest.mark.parametrize(
    "tile, heading, expected",
    [
        (".", Direction.LEFT, {Direction.LEFT}),
        ("/", Direction.RIGHT, {Direction.UP}),
        ("/", Direction.UP, {Direction.RIGHT}),
        ("\\", Direction.RIGHT, {Direction.DOWN}),
        ("\\", Direction.UP, {Direction.LEFT}),
        ("-", Direction.RIGHT, {Direction.RIGHT}),
        ("-", Direction.UP, {Direction.LEFT, Direction.RIGHT}),
        ("|", Direction.DOWN, {Direction.DOWN}),
        ("|", Direction.LEFT, {Direction.UP, Direction.DOWN}),
    ],
)
def test_deflect(tile, heading, expected):
    assert set(deflect(tile, heading)) == expected


def test_deflect_unknown_tile():
    with pytest.raises(ValueError):
        deflect("x", Direction.UP)


def test_empty_row_energizes_whole_row():
    grid = parse_grid(".....\n.....\n")
    tiles = energized(grid, 0, 0, Direction.RIGHT)
    assert tiles == {(0, c) for c in range(len(grid[0]))}


def test_energized_within_bounds_and_includes_start():
    grid = parse_grid(EXAMPLE)
    tiles = energized(grid, 3, 4, Direction.LEFT)
    assert (3, 4) in tiles
    assert all(0 <= r < len(grid) and 0 <= c < len(grid[0]) for r, c in tiles)


def test_start_tile_deflects_beam():
    grid = parse_grid("\\..\n...\n")
    tiles = energized(grid, 0, 0, Direction.RIGHT)
    assert tiles == {(0, 0), (1, 0)}


def test_loop_terminates():
    grid = parse_grid(LOOP)
    tiles = energized(grid, 0, 1, Direction.RIGHT)
    everything = {(r, c) for r in range(3) for c in range(3)}
    assert tiles == everything - {(1, 1)}


def test_start_outside_grid():
    grid = parse_grid(EXAMPLE)
    with pytest.raises(ValueError):
        energized(grid, len(grid), 0, Direction.UP)


def test_parse_grid_ragged():
    with pytest.raises(ValueError):
        parse_grid("...\n..\n")


def test_parse_grid_bad_symbol():
    with pytest.raises(ValueError):
        parse_grid("..x\n...\n")


def test_empty_input():
    assert part_one("") == 0
    assert part_two("") == 0


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == [str(part_one(EXAMPLE)), str(part_two(EXAMPLE))]