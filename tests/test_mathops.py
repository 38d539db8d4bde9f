import pytest

from melp_runtime.mathops import absolute, maximum, minimum


@pytest.mark.parametrize("a,b", [(3, 7), (7, 3), (-2, 5), (4, 4), (-9, -1)])
def test_minimum_and_maximum_pick_operands(a, b):
    low = minimum(a, b)
    high = maximum(a, b)
    assert {low, high} == {a, b}
    assert low <= high
    assert low == min(a, b)
    assert high == max(a, b)


@pytest.mark.parametrize("x", [0, 1, 5, 123456789])
def test_absolute_is_symmetric(x):
    assert absolute(x) == x
    assert absolute(-x) == x


def test_absolute_never_negative():
    for x in range(-20, 21):
        assert absolute(x) >= 0
        assert absolute(x) in (x, -x)