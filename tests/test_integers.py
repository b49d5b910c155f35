import pytest

from learngo.integers import add


@pytest.mark.parametrize("x, y, expected", [(2, 2, 4), (1, 5, 6), (-3, 3, 0)])
def test_add(x, y, expected):
    assert add(x, y) == expected