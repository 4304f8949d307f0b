from fractions import Fraction

import pytest

from ratiounits.traits import (
    Dimension,
    Unit,
    is_exponentiable,
    lists_contain_same_dimensions,
    lists_contain_same_types,
    units_have_same_dimension,
    units_have_same_dimension_and_different_prefixes,
    units_have_same_dimension_and_power,
)

LENGTH = Dimension("m")
MASS = Dimension("g")
TIME = Dimension("s")
TEMPERATURE = Dimension("K")

meter = Unit(LENGTH)
millimeter = Unit(LENGTH, Fraction(1, 1000))
kilometer = Unit(LENGTH, 1000)
square_meter = Unit(LENGTH, 1, 2)
cubic_meter = Unit(LENGTH, 1, 3)
kilogram = Unit(MASS, 1000)
milligram = Unit(MASS, Fraction(1, 1000))
kelvin = Unit(TEMPERATURE)
per_square_second = Unit(TIME, 1, -2)

NEWTON = Dimension("N", (kilogram, meter, per_square_second))
newton = Unit(NEWTON)

list0 = ()
list1 = (meter,)
list2 = (kelvin,)
list3 = (millimeter,)
list4 = (square_meter,)
list5 = (meter, kilogram)
list6 = (milligram, kilometer)
list7 = (kilogram, meter)


@pytest.mark.parametrize(
    "l1, l2, expected",
    [
        (list0, list0, True),
        (list1, list1, True),
        (list1, list3, True),
        (list5, list6, True),
        (list1, list6, False),
        (list1, list4, False),
        (list1, list2, False),
        (list1, list0, False),
        (list0, list1, False),
    ],
)
def test_lists_contain_same_dimensions(l1, l2, expected):
    assert lists_contain_same_dimensions(l1, l2) is expected


@pytest.mark.parametrize(
    "l1, l2, expected",
    [
        (list0, list0, True),
        (list1, list1, True),
        (list5, list7, True),
        (list1, list3, False),
        (list5, list6, False),
        (list1, list6, False),
        (list1, list4, False),
        (list1, list2, False),
    ],
)
def test_lists_contain_same_types(l1, l2, expected):
    assert lists_contain_same_types(l1, l2) is expected


def test_unit_pair_predicates():
    assert units_have_same_dimension(meter, kilometer) is True
    assert units_have_same_dimension(meter, kelvin) is False
    assert units_have_same_dimension_and_power(meter, millimeter) is True
    assert units_have_same_dimension_and_power(meter, square_meter) is False
    assert units_have_same_dimension_and_different_prefixes(meter, kilometer) is True
    assert units_have_same_dimension_and_different_prefixes(meter, square_meter) is False
    assert units_have_same_dimension_and_different_prefixes(meter, kelvin) is False


def test_newton_is_derived():
    assert newton.is_derived() is True
    assert meter.is_derived() is False


def test_base_units_of_base_unit_is_itself():
    assert meter.base_units() == (meter,)


def test_base_units_of_derived_unit():
    assert newton.base_units() == (kilogram, meter, per_square_second)


def test_base_units_fold_prefix_into_first_unit():
    kilonewton = Unit(NEWTON, 1000)
    first, *rest = kilonewton.base_units()
    assert first == Unit(MASS, 1_000_000)
    assert rest == [meter, per_square_second]


def test_derived_unit_with_power_other_than_one_is_rejected():
    with pytest.raises(ValueError):
        Unit(NEWTON, 1, 2).base_units()


def test_derived_dimension_first_unit_must_have_power_one():
    with pytest.raises(ValueError):
        Dimension("bad", (square_meter, kilogram))


def test_with_prefix_and_with_power():
    assert meter.with_prefix(Fraction(1, 1000)) == millimeter
    assert meter.with_power(2) == square_meter
    assert meter.power == 1


def test_prefix_is_normalised_to_fraction():
    assert Unit(LENGTH, "1/1000").prefix == Fraction(1, 1000)
    assert Unit(LENGTH, "1/1000") == millimeter


def test_invalid_prefix_and_power():
    with pytest.raises(ValueError):
        Unit(LENGTH, 0)
    with pytest.raises(TypeError):
        Unit(LENGTH, 1, 1.5)


@pytest.mark.parametrize(
    "units, ratio, expected",
    [
        ((meter,), 2, True),
        ((meter,), Fraction(1, 2), False),
        ((square_meter,), 2, True),
        ((square_meter,), Fraction(1, 2), True),
        ((cubic_meter,), Fraction(1, 3), True),
        ((square_meter,), Fraction(1, 3), False),
    ],
)
def test_is_exponentiable(units, ratio, expected):
    assert is_exponentiable(units, ratio) is expected