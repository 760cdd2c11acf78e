import pytest

from alifesim.pattern import Pattern


def test_empty_pattern_is_zero():
    pattern = Pattern(2, 3)
    assert pattern.channels == 1
    assert pattern.data.sum() == 0.0


def test_values_fill_row_major_single_channel():
    pattern = Pattern(2, 3, values=[1, 2, 3, 4, 5, 6])
    assert pattern[0, 0] == 1.0
    assert pattern[0, 2] == 3.0
    assert pattern[1, 0] == 4.0
    assert pattern[1, 2] == 6.0


def test_values_interleave_channels():
    pattern = Pattern(2, 2, 2, [0, 1, 2, 3, 4, 5, 6, 7])
    assert pattern[0, 0, 0] == 0.0
    assert pattern[0, 0, 1] == 1.0
    assert pattern[0, 1, 0] == 2.0
    assert pattern[1, 0, 1] == 5.0
    assert pattern[1, 1, 1] == 7.0


def test_values_accept_generator():
    pattern = Pattern(1, 3, 1, (v / 2 for v in range(3)))
    assert [pattern[0, c] for c in range(3)] == [0.0, 0.5, 1.0]


@pytest.mark.parametrize("values", [[1, 2, 3], [1, 2, 3, 4, 5], []])
def test_wrong_value_count(values):
    with pytest.raises(ValueError, match="does not match"):
        Pattern(2, 2, 1, values)