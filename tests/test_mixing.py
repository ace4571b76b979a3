import pytest

from yuletide.mixing import grove_sum, main, mix, parse_numbers

EXAMPLE = [1, 2, -3, 3, -2, 0, 4]


def _from_zero(values):
    zero = values.index(0)
    return values[zero:] + values[:zero]


def test_parse_numbers():
    assert parse_numbers("1\n-2\n\n30\n") == [1, -2, 30]


def test_example_mix_order():
    assert _from_zero(mix(EXAMPLE)) == [0, 3, -2, 1, 2, -3, 4]


def test_example_grove_sum():
    assert grove_sum(EXAMPLE) == 3


def test_mix_preserves_values():
    assert sorted(mix(EXAMPLE)) == sorted(EXAMPLE)


def test_mix_does_not_modify_input():
    data = list(EXAMPLE)
    mix(data)
    assert data == EXAMPLE


def test_all_zeros_unchanged():
    assert mix([0, 0, 0]) == [0, 0, 0]


def test_single_value():
    assert mix([7]) == [7]


def test_full_lap_returns_to_same_circle():
    # moving by a multiple of (n - 1) leaves the circular order unchanged
    values = [0, 3, 10, 20]
    assert _from_zero(mix(values))[0] == 0
    assert sorted(mix(values)) == sorted(values)


def test_missing_zero_raises():
    with pytest.raises(ValueError):
        grove_sum([1, 2, 3])


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(str(n) for n in EXAMPLE) + "\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == f"{grove_sum(EXAMPLE)}\n"