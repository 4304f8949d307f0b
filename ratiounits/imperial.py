"""Imperial and US customary units."""

from __future__ import annotations

from fractions import Fraction
from typing import Any

from .quantity import Quantity, derived_unit
from .traits import Dimension, Unit

_LENGTH = Dimension("m")
_MASS = Dimension("g")
_TIME = Dimension("s")
_FAHRENHEIT = Dimension("°F")

_RATIO_MILE = Fraction(1609344, 1000)
_RATIO_YARD = Fraction(9144, 10000)
_RATIO_FOOT = Fraction(3048, 10000)
_RATIO_INCH = Fraction(254, 10000)
_RATIO_POUND = Fraction(45359237, 100000)
_RATIO_OUNCE = Fraction(28349523125, 1000000000)
_RATIO_NAUTICAL_MILE = Fraction(1852)
_RATIO_ACRE = Fraction(6361490723407525334, 100000000000000000)

_UNIT_NAUTICAL_MILE = derived_unit("nmi", Unit(_LENGTH, _RATIO_NAUTICAL_MILE, 1))
_UNIT_MILE = derived_unit("mi", Unit(_LENGTH, _RATIO_MILE, 1))
_UNIT_YARD = derived_unit("yd", Unit(_LENGTH, _RATIO_YARD, 1))
_UNIT_FOOT = derived_unit("ft", Unit(_LENGTH, _RATIO_FOOT, 1))
_UNIT_INCH = derived_unit("in", Unit(_LENGTH, _RATIO_INCH, 1))
_UNIT_POUND = derived_unit("lb", Unit(_MASS, _RATIO_POUND, 1))
_UNIT_OUNCE = derived_unit("oz", Unit(_MASS, _RATIO_OUNCE, 1))

_UNIT_ACRE = Unit(_LENGTH, _RATIO_ACRE, 2)
_UNIT_SQUARE_MILE = Unit(_LENGTH, _RATIO_MILE, 2)
_UNIT_SQUARE_YARD = Unit(_LENGTH, _RATIO_YARD, 2)
_UNIT_SQUARE_FOOT = Unit(_LENGTH, _RATIO_FOOT, 2)
_UNIT_SQUARE_INCH = Unit(_LENGTH, _RATIO_INCH, 2)

_UNIT_PER_HOUR = Unit(_TIME, Fraction(3600), -1)
_UNIT_PER_SECOND = Unit(_TIME, Fraction(1), -1)
_UNIT_FAHRENHEIT = Unit(_FAHRENHEIT, Fraction(1), 1)


def nautical_mile(value: Any) -> Quantity:
    """Return a length in nautical miles."""
    return Quantity(value, _UNIT_NAUTICAL_MILE)


def mile(value: Any) -> Quantity:
    """Return a length in miles."""
    return Quantity(value, _UNIT_MILE)


def yard(value: Any) -> Quantity:
    """Return a length in yards."""
    return Quantity(value, _UNIT_YARD)


def foot(value: Any) -> Quantity:
    """Return a length in feet."""
    return Quantity(value, _UNIT_FOOT)


def inch(value: Any) -> Quantity:
    """Return a length in inches."""
    return Quantity(value, _UNIT_INCH)


def acre(value: Any) -> Quantity:
    """Return an area in acres."""
    return Quantity(value, _UNIT_ACRE)


def square_mile(value: Any) -> Quantity:
    """Return an area in square miles."""
    return Quantity(value, _UNIT_SQUARE_MILE)


def square_yard(value: Any) -> Quantity:
    """Return an area in square yards."""
    return Quantity(value, _UNIT_SQUARE_YARD)


def square_feet(value: Any) -> Quantity:
    """Return an area in square feet."""
    return Quantity(value, _UNIT_SQUARE_FOOT)


def square_inch(value: Any) -> Quantity:
    """Return an area in square inches."""
    return Quantity(value, _UNIT_SQUARE_INCH)


def pound(value: Any) -> Quantity:
    """Return a mass in pounds."""
    return Quantity(value, _UNIT_POUND)


def ounce(value: Any) -> Quantity:
    """Return a mass in ounces."""
    return Quantity(value, _UNIT_OUNCE)


def miles_per_hour(value: Any) -> Quantity:
    """Return a speed in miles per hour."""
    return Quantity(value, _UNIT_MILE, _UNIT_PER_HOUR)


def feet_per_second(value: Any) -> Quantity:
    """Return a speed in feet per second."""
    return Quantity(value, _UNIT_FOOT, _UNIT_PER_SECOND)


def fahrenheit(value: Any) -> Quantity:
    """Return a temperature in degrees Fahrenheit."""
    return Quantity(value, _UNIT_FAHRENHEIT)