"""Conversion factors between unit lists and the unit lists of products and quotients."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from fractions import Fraction

from . import mpl
from .traits import (
    RatioLike,
    Unit,
    units_have_same_dimension,
    units_have_same_dimension_and_different_prefixes,
    units_have_same_dimension_and_power,
)

UnitList = tuple[Unit, ...]


def ratio_conversion_factor(ratio_to: RatioLike, ratio_from: RatioLike) -> Fraction:
    """Return the factor that turns a value scaled by ``ratio_from`` into ``ratio_to``."""
    return Fraction(ratio_from) / Fraction(ratio_to)


def power_conversion_factor(
    power: int, ratio_to: RatioLike, ratio_from: RatioLike
) -> Fraction:
    """Return the prefix conversion factor raised to ``power``."""
    return ratio_conversion_factor(ratio_to, ratio_from) ** power


def _unit_factor(to_unit: Unit, from_unit: Unit) -> Fraction:
    if units_have_same_dimension_and_power(to_unit, from_unit):
        return power_conversion_factor(to_unit.power, to_unit.prefix, from_unit.prefix)
    return Fraction(1)


def _needs_computation(to_units: UnitList, from_units: UnitList) -> bool:
    return bool(to_units) and bool(from_units) and to_units != from_units


def unit_list_conversion_factor(
    to_units: Iterable[Unit], from_units: Iterable[Unit]
) -> Fraction:
    """Return the exact factor that converts a value in ``from_units`` to ``to_units``.

    Units without a counterpart of the same dimension and power contribute a
    factor of one; empty or identical lists need no conversion.
    """
    to_list = tuple(to_units)
    from_list = tuple(from_units)
    if not _needs_computation(to_list, from_list):
        return Fraction(1)
    return mpl.accumulate_value(
        mpl.multiply,
        [
            mpl.accumulate_value(mpl.multiply, [_unit_factor(t, f) for f in from_list])
            for t in to_list
        ],
    )


def _integral_ratio_factor(ratio_to: Fraction, ratio_from: Fraction) -> int:
    return (ratio_from.numerator * ratio_to.denominator) // (
        ratio_to.numerator * ratio_from.denominator
    )


def _integral_unit_factor(to_unit: Unit, from_unit: Unit) -> int:
    if not units_have_same_dimension_and_power(to_unit, from_unit):
        return 1
    power = to_unit.power
    if power > 0:
        return _integral_ratio_factor(to_unit.prefix, from_unit.prefix) ** power
    if power < 0:
        return _integral_ratio_factor(from_unit.prefix, to_unit.prefix) ** -power
    return 1


def conversion_is_lossless(
    to_units: Iterable[Unit], from_units: Iterable[Unit], integral: bool
) -> bool:
    """Return true when converting between the lists keeps all information.

    Floating values never lose information here. For integral values the
    factor, computed with integer division as integers would, must be at
    least one.
    """
    if not integral:
        return True
    to_list = tuple(to_units)
    from_list = tuple(from_units)
    if not _needs_computation(to_list, from_list):
        return True
    factor = mpl.multiply_all(
        *(_integral_unit_factor(t, f) for t in to_list for f in from_list)
    )
    return factor >= 1


def select_highest_accuracy(first: Unit, others: Iterable[Unit]) -> Unit:
    """Return ``first`` with the smallest prefix of any unit of its dimension."""

    def step(minimum: Unit, compare: Unit) -> Unit:
        if not units_have_same_dimension(minimum, compare):
            return minimum
        if minimum.prefix < compare.prefix:
            return minimum
        return minimum.with_prefix(compare.prefix)

    return mpl.accumulate(step, (first, *others))


def combine_unit_lists_selecting_higher_accuracy(
    l1: Iterable[Unit], l2: Iterable[Unit]
) -> UnitList:
    """Return ``l1`` with each unit refined to the finest prefix found in ``l2``."""
    second = tuple(l2)
    return tuple(select_highest_accuracy(unit, second) for unit in l1)


def combine_unit_power(
    operation: Callable[[int, int], int], u1: Unit, u2: Unit
) -> Unit:
    """Combine two units of one dimension: smaller prefix, powers joined by ``operation``."""
    prefix = u1.prefix if u1.prefix < u2.prefix else u2.prefix
    return Unit(u1.dimension, prefix, operation(u1.power, u2.power))


def _unit_accumulator(operation: Callable[[int, int], int]) -> Callable[[Unit, Unit], Unit]:
    def step(combined: Unit, compare: Unit) -> Unit:
        if units_have_same_dimension(combined, compare):
            return combine_unit_power(operation, combined, compare)
        return combined

    return step


def _backpropagate(combined: Unit, compare: Unit) -> Unit:
    if units_have_same_dimension(combined, compare):
        return Unit(combined.dimension, Fraction(1), 0)
    return combined


def _combine_lists(
    operation: Callable[[int, int], int],
    l1: Iterable[Unit],
    l2: Iterable[Unit],
    invert: bool,
) -> UnitList:
    first = tuple(l1)
    second = tuple(l2)
    accumulator = _unit_accumulator(operation)
    own = [mpl.accumulate(accumulator, (unit, *second)) for unit in first]
    rest = [mpl.accumulate(_backpropagate, (unit, *first)) for unit in second]
    if invert:
        rest = [unit.with_power(-unit.power) for unit in rest]
    return tuple(unit for unit in (*own, *rest) if unit.power != 0)


def multiplication_result(l1: Iterable[Unit], l2: Iterable[Unit]) -> UnitList:
    """Return the unit list of a product; units whose powers cancel are dropped."""
    return _combine_lists(mpl.add, l1, l2, invert=False)


def division_result(l1: Iterable[Unit], l2: Iterable[Unit]) -> UnitList:
    """Return the unit list of a quotient; units whose powers cancel are dropped."""
    return _combine_lists(mpl.subtract, l1, l2, invert=True)


def compute_multiply_conversion_factor(
    l1: Iterable[Unit], l2: Iterable[Unit]
) -> Fraction:
    """Return the factor applied to the product of values in ``l1`` and ``l2``."""
    first = tuple(l1)
    second = tuple(l2)
    return unit_list_conversion_factor(
        combine_unit_lists_selecting_higher_accuracy(first, second), first
    ) * unit_list_conversion_factor(
        combine_unit_lists_selecting_higher_accuracy(second, first), second
    )


def compute_division_conversion_factor(
    l1: Iterable[Unit], l2: Iterable[Unit]
) -> Fraction:
    """Return the factor applied to the quotient of values in ``l1`` and ``l2``."""
    first = tuple(l1)
    second = tuple(l2)
    return unit_list_conversion_factor(
        combine_unit_lists_selecting_higher_accuracy(first, second), first
    ) / unit_list_conversion_factor(
        combine_unit_lists_selecting_higher_accuracy(second, first), second
    )


def _extract_step(accumulated: UnitList, current: UnitList) -> UnitList:
    for unit in accumulated:
        if any(
            units_have_same_dimension_and_different_prefixes(unit, other)
            for other in current
        ):
            raise ValueError(
                "A list of units for a quantity cannot have the same unit "
                "with different prefixes"
            )
    return multiplication_result(accumulated, current)


def extract_base_units(*args: Unit) -> UnitList:
    """Expand derived units and multiply everything into one list of base units."""
    if not args:
        return ()
    return mpl.accumulate(_extract_step, [unit.base_units() for unit in args])


def exponentiation_result(units: Iterable[Unit], ratio: RatioLike) -> UnitList:
    """Return the unit list raised to ``ratio``; fractional powers are truncated."""
    exponent = Fraction(ratio)
    return tuple(
        unit.with_power(
            math.trunc(Fraction(unit.power * exponent.numerator, exponent.denominator))
        )
        for unit in units
    )