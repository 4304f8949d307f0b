"""Quantities: numeric values tagged with a list of units."""

from __future__ import annotations

import numbers
from fractions import Fraction
from typing import Any

from .conversion import (
    combine_unit_lists_selecting_higher_accuracy,
    compute_division_conversion_factor,
    compute_multiply_conversion_factor,
    conversion_is_lossless,
    division_result,
    extract_base_units,
    multiplication_result,
    unit_list_conversion_factor,
)
from .traits import Dimension, Unit, lists_contain_same_dimensions

_PREFIXES: dict[str, Fraction] = {
    "atto": Fraction(1, 10**18),
    "femto": Fraction(1, 10**15),
    "pico": Fraction(1, 10**12),
    "nano": Fraction(1, 10**9),
    "micro": Fraction(1, 10**6),
    "milli": Fraction(1, 10**3),
    "centi": Fraction(1, 100),
    "deci": Fraction(1, 10),
    "": Fraction(1),
    "deca": Fraction(10),
    "hecto": Fraction(100),
    "kilo": Fraction(10**3),
    "mega": Fraction(10**6),
    "giga": Fraction(10**9),
    "tera": Fraction(10**12),
    "peta": Fraction(10**15),
    "exa": Fraction(10**18),
}

_SYMBOLS: dict[Fraction, str] = {
    Fraction(1, 10**18): "a",
    Fraction(1, 10**15): "f",
    Fraction(1, 10**12): "p",
    Fraction(1, 10**9): "n",
    Fraction(1, 10**6): "u",
    Fraction(1, 10**3): "m",
    Fraction(1, 100): "c",
    Fraction(1, 10): "d",
    Fraction(1): "",
    Fraction(10): "da",
    Fraction(100): "h",
    Fraction(10**3): "k",
    Fraction(10**6): "M",
    Fraction(10**9): "G",
    Fraction(10**12): "T",
    Fraction(10**15): "P",
    Fraction(10**18): "E",
}


def prefixed_units(dimension: Dimension, power: int) -> dict[str, Unit]:
    """Return the units of ``dimension`` for every SI prefix from atto to exa.

    The unprefixed unit is stored under the empty string.
    """
    return {name: Unit(dimension, ratio, power) for name, ratio in _PREFIXES.items()}


def derived_unit(name: str, *args: Unit) -> Unit:
    """Return a unit of a new dimension called ``name`` made of the given units."""
    if not args:
        raise ValueError("a derived unit needs at least one unit")
    return Unit(Dimension(name, tuple(args)), Fraction(1), 1)


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _scale(value: Any, factor: Fraction) -> Any:
    if factor == 1:
        return value
    if _is_int(value):
        if factor.denominator == 1:
            return value * factor.numerator
        return int(value * factor)
    return value * float(factor)


def _divide(a: Any, b: Any) -> Any:
    if _is_int(a) and _is_int(b):
        return int(Fraction(a, b))
    return a / b


def _unit_text(unit: Unit) -> str:
    symbol = _SYMBOLS.get(unit.prefix)
    if symbol is None:
        symbol = f"({unit.prefix})"
    text = f"{symbol}{unit.dimension.name}"
    if unit.power != 1:
        text += f"^{unit.power}"
    return text


class Quantity:
    """A value together with the units it is measured in."""

    def __init__(self, value: Any, *units: Unit) -> None:
        self._value = value
        self.units: tuple[Unit, ...] = tuple(units)
        self.base_units: tuple[Unit, ...] = extract_base_units(*units)

    def count(self) -> Any:
        """Return the bare numeric value."""
        return self._value

    def unit_string(self) -> str:
        """Return the units as text, e.g. ``km*h^-1``."""
        return "*".join(_unit_text(unit) for unit in self.units)

    def _check_same_dimensions(self, other: Quantity) -> None:
        if not lists_contain_same_dimensions(self.base_units, other.base_units):
            raise TypeError(
                f"incompatible units: '{self.unit_string()}' and '{other.unit_string()}'"
            )

    def _value_in(self, base: tuple[Unit, ...]) -> Any:
        return _scale(self._value, unit_list_conversion_factor(base, self.base_units))

    def to(self, *args: Unit) -> Quantity:
        """Return this quantity expressed in the given units.

        Raises TypeError when the dimensions differ and ValueError when an
        integral value would lose precision.
        """
        target = Quantity(0, *args)
        self._check_same_dimensions(target)
        if not conversion_is_lossless(target.base_units, self.base_units, _is_int(self._value)):
            raise ValueError(
                f"converting '{self.unit_string()}' to '{target.unit_string()}' loses precision"
            )
        return Quantity(self._value_in(target.base_units), *args)

    def _coerce(self, other: Any) -> Quantity | None:
        if isinstance(other, Quantity):
            return other
        if _is_number(other):
            return Quantity(other)
        return None

    def _combine(self, other: Any, sign: int) -> Quantity:
        other_q = self._coerce(other)
        if other_q is None:
            return NotImplemented
        self._check_same_dimensions(other_q)
        result = combine_unit_lists_selecting_higher_accuracy(self.base_units, other_q.base_units)
        a = self._value_in(result)
        b = other_q._value_in(result)
        return Quantity(a + b if sign > 0 else a - b, *result)

    def __add__(self, other: Any) -> Quantity:
        return self._combine(other, 1)

    def __radd__(self, other: Any) -> Quantity:
        other_q = self._coerce(other)
        if other_q is None:
            return NotImplemented
        return other_q._combine(self, 1)

    def __sub__(self, other: Any) -> Quantity:
        return self._combine(other, -1)

    def __rsub__(self, other: Any) -> Quantity:
        other_q = self._coerce(other)
        if other_q is None:
            return NotImplemented
        return other_q._combine(self, -1)

    def __iadd__(self, other: Any) -> Quantity:
        result = self._combine(other, 1)
        if result is NotImplemented:
            return result
        return Quantity(result._value_in(self.base_units), *self.units)

    def __isub__(self, other: Any) -> Quantity:
        result = self._combine(other, -1)
        if result is NotImplemented:
            return result
        return Quantity(result._value_in(self.base_units), *self.units)

    def __mul__(self, other: Any) -> Quantity:
        if _is_number(other):
            return Quantity(self._value * other, *self.units)
        if not isinstance(other, Quantity):
            return NotImplemented
        units = multiplication_result(self.base_units, other.base_units)
        factor = compute_multiply_conversion_factor(self.base_units, other.base_units)
        return Quantity(_scale(self._value * other._value, factor), *units)

    def __rmul__(self, other: Any) -> Quantity:
        if _is_number(other):
            return Quantity(other * self._value, *self.units)
        return NotImplemented

    def __truediv__(self, other: Any) -> Quantity:
        if _is_number(other):
            return Quantity(_divide(self._value, other), *self.units)
        if not isinstance(other, Quantity):
            return NotImplemented
        units = division_result(self.base_units, other.base_units)
        factor = compute_division_conversion_factor(self.base_units, other.base_units)
        return Quantity(_scale(_divide(self._value, other._value), factor), *units)

    def __rtruediv__(self, other: Any) -> Quantity:
        if _is_number(other):
            return Quantity(other) / self
        return NotImplemented

    def __neg__(self) -> Quantity:
        return Quantity(-self._value, *self.units)

    def __pos__(self) -> Quantity:
        return Quantity(+self._value, *self.units)

    def _compare_values(self, other: Any) -> tuple[Any, Any] | None:
        other_q = self._coerce(other)
        if other_q is None:
            return None
        self._check_same_dimensions(other_q)
        return self._value, other_q._value_in(self.base_units)

    def __eq__(self, other: object) -> bool:
        other_q = self._coerce(other)
        if other_q is None:
            return NotImplemented
        if not lists_contain_same_dimensions(self.base_units, other_q.base_units):
            return False
        return self._value == other_q._value_in(self.base_units)

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Any) -> bool:
        pair = self._compare_values(other)
        return NotImplemented if pair is None else pair[0] < pair[1]

    def __le__(self, other: Any) -> bool:
        pair = self._compare_values(other)
        return NotImplemented if pair is None else pair[0] <= pair[1]

    def __gt__(self, other: Any) -> bool:
        pair = self._compare_values(other)
        return NotImplemented if pair is None else pair[0] > pair[1]

    def __ge__(self, other: Any) -> bool:
        pair = self._compare_values(other)
        return NotImplemented if pair is None else pair[0] >= pair[1]

    def __float__(self) -> float:
        if self.base_units:
            raise TypeError("only dimensionless quantities convert to float")
        return float(self._value)

    def __str__(self) -> str:
        units = self.unit_string()
        return f"{self._value} {units}" if units else f"{self._value}"

    def __format__(self, spec: str) -> str:
        units = self.unit_string()
        text = format(self._value, spec)
        return f"{text} {units}" if units else text

    def __repr__(self) -> str:
        return f"Quantity({self._value!r}, {self.unit_string()!r})"