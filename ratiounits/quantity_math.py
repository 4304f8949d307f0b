"""Angles, temperatures and mathematical functions on quantities."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from fractions import Fraction
from typing import Any

from .conversion import exponentiation_result, unit_list_conversion_factor
from .quantity import Quantity, derived_unit
from .traits import (
    Dimension,
    RatioLike,
    Unit,
    is_exponentiable,
    lists_contain_same_dimensions,
)

_ANGLE = Dimension("rad")
_KELVIN_DIMENSION = Dimension("K")
_CELSIUS_DIMENSION = Dimension("°C")
_FAHRENHEIT_DIMENSION = Dimension("°F")

_UNIT_RADIAN = Unit(_ANGLE, Fraction(1), 1)
_UNIT_DEGREE = derived_unit("°", Unit(_ANGLE, Fraction(math.pi / 180), 1))
_UNIT_KELVIN = Unit(_KELVIN_DIMENSION, Fraction(1), 1)
_UNIT_CELSIUS = Unit(_CELSIUS_DIMENSION, Fraction(1), 1)
_UNIT_FAHRENHEIT = Unit(_FAHRENHEIT_DIMENSION, Fraction(1), 1)

_ZERO_CELSIUS_IN_KELVIN = 273.15


def radian(value: Any) -> Quantity:
    """Return an angle in radians."""
    return Quantity(value, _UNIT_RADIAN)


def degree(value: Any) -> Quantity:
    """Return an angle in degrees."""
    return Quantity(value, _UNIT_DEGREE)


def celsius(value: Any) -> Quantity:
    """Return a temperature in degrees Celsius."""
    return Quantity(value, _UNIT_CELSIUS)


def kelvin(value: Any) -> Quantity:
    """Return a temperature in kelvin."""
    return Quantity(value, _UNIT_KELVIN)


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _require_quantity(value: Any) -> Quantity:
    if not isinstance(value, Quantity):
        raise TypeError(f"expected a quantity, got {type(value).__name__}")
    return value


def _require_float(value: Any) -> float:
    if isinstance(value, Quantity) or isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"expected a real number, got {type(value).__name__}")
    return float(value)


def _to_radians(x: Any) -> float:
    q = _require_quantity(x)
    if not lists_contain_same_dimensions(q.base_units, (_UNIT_RADIAN,)):
        raise TypeError(f"'{q.unit_string()}' cannot be converted to radian")
    return Quantity(float(q.count()), *q.units).to(_UNIT_RADIAN).count()


def sin(x: Quantity) -> float:
    """Return the sine of an angle."""
    return math.sin(_to_radians(x))


def cos(x: Quantity) -> float:
    """Return the cosine of an angle."""
    return math.cos(_to_radians(x))


def tan(x: Quantity) -> float:
    """Return the tangent of an angle."""
    return math.tan(_to_radians(x))


def asin(x: float) -> Quantity:
    """Return the arc sine of ``x`` as an angle in radians."""
    return radian(math.asin(_require_float(x)))


def acos(x: float) -> Quantity:
    """Return the arc cosine of ``x`` as an angle in radians."""
    return radian(math.acos(_require_float(x)))


def atan(x: float) -> Quantity:
    """Return the arc tangent of ``x`` as an angle in radians."""
    return radian(math.atan(_require_float(x)))


def atan2(y: float, x: float) -> Quantity:
    """Return the angle of the point (``x``, ``y``) in radians."""
    return radian(math.atan2(_require_float(y), _require_float(x)))


def _value_in_units_of(other: Any, reference: Quantity) -> Any:
    return _require_quantity(other).to(*reference.units).count()


def absolute(q: Quantity) -> Quantity:
    """Return the quantity with its value made non-negative."""
    q = _require_quantity(q)
    return Quantity(abs(q.count()), *q.units)


def minimum(a: Quantity, b: Quantity) -> Quantity:
    """Return the smaller of two quantities, in the units of ``a``."""
    a = _require_quantity(a)
    return Quantity(min(a.count(), _value_in_units_of(b, a)), *a.units)


def maximum(a: Quantity, b: Quantity) -> Quantity:
    """Return the larger of two quantities, in the units of ``a``."""
    a = _require_quantity(a)
    return Quantity(max(a.count(), _value_in_units_of(b, a)), *a.units)


def clamp(value: Quantity, low: Quantity, high: Quantity) -> Quantity:
    """Return ``value`` limited to the range from ``low`` to ``high``."""
    return maximum(low, minimum(high, value))


def _dimensionless_value(q: Any) -> float:
    q = _require_quantity(q)
    if q.base_units:
        raise TypeError(f"expected a dimensionless quantity, got '{q.unit_string()}'")
    return float(q.count())


def exp(q: Quantity) -> float:
    """Return e raised to a dimensionless quantity."""
    return math.exp(_dimensionless_value(q))


def log(q: Quantity) -> float:
    """Return the natural logarithm of a dimensionless quantity."""
    return math.log(_dimensionless_value(q))


def _exponentiate(q: Any, ratio: RatioLike, value: float) -> Quantity:
    units = exponentiation_result(q.base_units, ratio)
    return Quantity(int(value) if _is_int(q.count()) else value, *units)


def _check_exponent(q: Any, ratio: RatioLike) -> Quantity:
    q = _require_quantity(q)
    if not is_exponentiable(q.base_units, ratio):
        raise ValueError(
            f"'{q.unit_string()}' cannot be raised to the power {Fraction(ratio)}"
        )
    return q


def power(q: Quantity, ratio: RatioLike) -> Quantity:
    """Raise a quantity to a rational power; every unit power must stay whole."""
    exponent = Fraction(ratio)
    q = _check_exponent(q, exponent)
    value = math.pow(float(q.count()), exponent.numerator / exponent.denominator)
    return _exponentiate(q, exponent, value)


def sqrt(q: Quantity) -> Quantity:
    """Return the square root of a quantity whose unit powers are all even."""
    half = Fraction(1, 2)
    q = _check_exponent(q, half)
    return _exponentiate(q, half, math.sqrt(float(q.count())))


def _convert(value: Any, source: Iterable[Unit], target: Iterable[Unit]) -> Any:
    factor = unit_list_conversion_factor(tuple(target), tuple(source))
    if factor == 1:
        return value
    return value * float(factor)


def _narrow(value: Any, integral: bool) -> Any:
    return int(value) if integral else value


def _is_like(units: Iterable[Unit], unit: Unit) -> bool:
    return lists_contain_same_dimensions(tuple(units), (unit,))


def quantity_cast(target_units: Iterable[Unit], q: Quantity, integral: bool = False) -> Quantity:
    """Convert ``q`` to ``target_units``, also between temperature scales.

    With ``integral`` the resulting value is truncated to an integer, so the
    conversion may lose precision. Raises TypeError for unrelated dimensions.
    """
    q = _require_quantity(q)
    target = tuple(target_units)
    target_base = Quantity(0, *target).base_units
    source_base = q.base_units
    value = q.count()
    zero = 273 if integral else _ZERO_CELSIUS_IN_KELVIN

    if _is_like(source_base, _UNIT_CELSIUS):
        celsius_value = _convert(value, source_base, (_UNIT_CELSIUS,))
        if _is_like(target_base, _UNIT_KELVIN):
            kelvin_value = _narrow(celsius_value + zero, integral)
            result = _convert(kelvin_value, (_UNIT_KELVIN,), target_base)
            return Quantity(_narrow(result, integral), *target)
        if _is_like(target_base, _UNIT_FAHRENHEIT):
            result = _convert(celsius_value * 1.8 + 32, (_UNIT_FAHRENHEIT,), target_base)
            return Quantity(_narrow(result, integral), *target)

    if _is_like(source_base, _UNIT_FAHRENHEIT):
        fahrenheit_value = _convert(value, source_base, (_UNIT_FAHRENHEIT,))
        celsius_value = (fahrenheit_value - 32) * 5.0 / 9.0
        if _is_like(target_base, _UNIT_CELSIUS):
            result = _convert(celsius_value, (_UNIT_CELSIUS,), target_base)
            return Quantity(_narrow(result, integral), *target)
        if _is_like(target_base, _UNIT_KELVIN):
            kelvin_value = _narrow(celsius_value + zero, integral)
            result = _convert(kelvin_value, (_UNIT_KELVIN,), target_base)
            return Quantity(_narrow(result, integral), *target)

    if _is_like(source_base, _UNIT_KELVIN):
        kelvin_value = _narrow(_convert(value, source_base, (_UNIT_KELVIN,)), integral)
        if _is_like(target_base, _UNIT_CELSIUS):
            result = _convert(kelvin_value - zero, (_UNIT_CELSIUS,), target_base)
            return Quantity(_narrow(result, integral), *target)
        if _is_like(target_base, _UNIT_FAHRENHEIT):
            result = _convert((kelvin_value - zero) * 1.8 + 32, (_UNIT_FAHRENHEIT,), target_base)
            return Quantity(_narrow(result, integral), *target)

    if not lists_contain_same_dimensions(source_base, target_base):
        raise TypeError(
            f"cannot cast '{q.unit_string()}' to '{Quantity(0, *target).unit_string()}'"
        )
    return Quantity(_narrow(_convert(value, source_base, target_base), integral), *target)