import pytest

from ratiounits.mpl import (
    accumulate,
    accumulate_value,
    add,
    conditional,
    count_if,
    logical_and,
    logical_or,
    multiply,
    multiply_all,
    pop_front,
    subtract,
    transform,
)

SEQUENCE = [2, 9, 0, 4, 5, 1, 7, 8, 9, 3]
EXPECTED_SUMS = [11, 11, 15, 20, 21, 28, 36, 45, 48]


@pytest.mark.parametrize("length,expected", zip(range(2, 11), EXPECTED_SUMS))
def test_accumulate_type_sums(length, expected):
    assert accumulate(lambda a, b: a + b, SEQUENCE[:length]) == expected


@pytest.mark.parametrize("length,expected", zip(range(2, 11), EXPECTED_SUMS))
def test_accumulate_value_sums(length, expected):
    assert accumulate_value(add, SEQUENCE[:length]) == expected


def test_accumulate_single_item_is_returned():
    assert accumulate(add, [7]) == 7
    assert accumulate_value(add, [7]) == 7


def test_accumulate_folds_from_left():
    assert accumulate(subtract, [10, 5, 2]) == 3


def test_accumulate_value_nests_to_the_right():
    assert accumulate_value(subtract, [10, 5, 2]) == 7
    assert accumulate_value(subtract, [10, 5, 2, 1]) == 6


def test_accumulate_empty_raises():
    with pytest.raises(ValueError):
        accumulate(add, [])
    with pytest.raises(ValueError):
        accumulate_value(add, [])


def test_accumulate_value_long_product():
    values = list(range(1, 21))
    expected = 1
    for v in values:
        expected *= v
    assert accumulate_value(multiply, values) == expected


def test_conditional():
    assert conditional(True, int, float) is int
    assert conditional(False, int, float) is float


def _add_shift(t):
    a, _b, c = t
    return (a + 1, a + 1, c)


def _add_shift2(t):
    a, b, _c = t
    return (a + 1, b, a + 1)


def test_transform_chain():
    input_list = [(0, 0, 0), (1, 0, 0), (5, 0, 0), (10, 0, 0)]
    middle = transform(_add_shift, input_list)
    assert middle == [(1, 1, 0), (2, 2, 0), (6, 6, 0), (11, 11, 0)]
    final = transform(_add_shift2, middle)
    assert final == [(2, 1, 2), (3, 2, 3), (7, 6, 7), (12, 11, 12)]
    assert tuple(final) == ((2, 1, 2), (3, 2, 3), (7, 6, 7), (12, 11, 12))


def test_pop_front():
    assert pop_front([1, 2, 3]) == [2, 3]
    assert pop_front([1]) == []
    assert pop_front([]) == []


def test_count_if():
    assert count_if(lambda v: v != 0, [1, 0, 3, 0, -1]) == 3
    assert count_if(lambda v: v != 0, [0, 0]) == 0
    assert count_if(lambda v: v != 0, []) == 0


def test_binary_functors():
    assert add(2, 3) == 5
    assert subtract(2, 3) == -1
    assert multiply(2, 3) == 6
    assert logical_and(True, False) is False
    assert logical_and(1, 2) is True
    assert logical_or(False, 0) is False
    assert logical_or(False, True) is True


def test_multiply_all():
    assert multiply_all() == 1
    assert multiply_all(5) == 5
    assert multiply_all(2, 3) == 6
    assert multiply_all(2, 3, 4, 5) == 120