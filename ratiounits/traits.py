"""Dimensions, units and comparisons between lists of units."""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from dataclasses import dataclass, replace
from fractions import Fraction
from typing import Union

RatioLike = Union[int, Fraction, str]


@dataclass(frozen=True)
class Dimension:
    """A physical dimension.

    A base dimension only carries a name. A derived dimension also carries the
    units it is made of; the first of those units must have power 1.
    """

    name: str
    units: tuple[Unit, ...] = ()

    def __post_init__(self) -> None:
        units = tuple(self.units)
        if units and units[0].power != 1:
            raise ValueError("The power of the first unit in a derived list has to be 1")
        object.__setattr__(self, "units", units)


@dataclass(frozen=True)
class Unit:
    """A dimension with a scale factor (prefix) and an integer power."""

    dimension: Dimension
    prefix: Fraction = Fraction(1)
    power: int = 1

    def __post_init__(self) -> None:
        prefix = Fraction(self.prefix)
        if prefix <= 0:
            raise ValueError(f"unit prefix must be positive, got {prefix}")
        if isinstance(self.power, bool) or not isinstance(self.power, numbers.Integral):
            raise TypeError(f"unit power must be an integer, got {self.power!r}")
        object.__setattr__(self, "prefix", prefix)
        object.__setattr__(self, "power", int(self.power))

    def is_derived(self) -> bool:
        """Return true when the unit's dimension is made of other units."""
        return bool(self.dimension.units)

    def base_units(self) -> tuple[Unit, ...]:
        """Return the units this unit stands for.

        A base unit stands for itself. For a derived unit the prefix is folded
        into the first unit of the dimension's list.
        """
        if not self.is_derived():
            return (self,)
        if self.power != 1:
            raise ValueError("Derived units cannot have a power different than 1")
        first, *rest = self.dimension.units
        return (first.with_prefix(first.prefix * self.prefix), *rest)

    def with_prefix(self, prefix: RatioLike) -> Unit:
        """Return a copy of this unit with another prefix."""
        return replace(self, prefix=Fraction(prefix))

    def with_power(self, power: int) -> Unit:
        """Return a copy of this unit with another power."""
        return replace(self, power=power)


def units_have_same_dimension(u1: Unit, u2: Unit) -> bool:
    """Return true when both units measure the same dimension."""
    return u1.dimension == u2.dimension


def units_have_same_dimension_and_power(u1: Unit, u2: Unit) -> bool:
    """Return true when both units share dimension and power."""
    return units_have_same_dimension(u1, u2) and u1.power == u2.power


def units_have_same_dimension_and_different_prefixes(u1: Unit, u2: Unit) -> bool:
    """Return true when both units share a dimension but differ in prefix."""
    return units_have_same_dimension(u1, u2) and u1.prefix != u2.prefix


def lists_contain_same_dimensions(l1: Iterable[Unit], l2: Iterable[Unit]) -> bool:
    """Return true when both lists hold the same dimensions with the same powers.

    Prefixes and order are ignored. Two empty lists match; an empty list never
    matches a non-empty one.
    """
    first = tuple(l1)
    second = tuple(l2)
    if len(first) != len(second):
        return False
    return all(
        any(units_have_same_dimension_and_power(a, b) for b in second) for a in first
    )


def lists_contain_same_types(l1: Iterable[Unit], l2: Iterable[Unit]) -> bool:
    """Return true when both lists hold exactly the same units, in any order."""
    first = tuple(l1)
    second = tuple(l2)
    return len(first) == len(second) and all(unit in second for unit in first)


def is_exponentiable(units: Iterable[Unit], ratio: RatioLike) -> bool:
    """Return true when every unit's power times ``ratio`` is a whole number."""
    exponent = Fraction(ratio)
    return all(
        (unit.power * exponent.numerator) % exponent.denominator == 0 for unit in units
    )