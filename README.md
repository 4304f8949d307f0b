# ratiounits

Physical quantities that carry their units with them. A unit is a
dimension, an exact rational prefix and an integer power. Quantities check
dimensions when they are added, compared or converted, and work out new unit
lists when they are multiplied or divided.

The package has no dependencies beyond the standard library.

## Installation

```
pip install ratiounits
```

## Units and quantities

`ratiounits.traits` defines the two building blocks:

- `Dimension(name, units=())` is a base dimension, or, with `units`, a
  derived dimension made of other units (the first of them must have
  power 1).
- `Unit(dimension, prefix=1, power=1)` is a frozen dataclass. The prefix is
  stored as a `Fraction` and must be positive. `is_derived()`,
  `base_units()`, `with_prefix(prefix)` and `with_power(power)` inspect and
  copy it.

`ratiounits.quantity` builds on them:

- `prefixed_units(dimension, power)` returns a dict of units for every SI
  prefix from `"atto"` to `"exa"`; the unprefixed unit is under `""`.
- `derived_unit(name, *units)` returns a unit of a new dimension made of
  the given units, such as a newton built from mass, length and time.
- `Quantity(value, *units)` holds a value and its units.

```python
from ratiounits.traits import Dimension
from ratiounits.quantity import Quantity, prefixed_units

length = prefixed_units(Dimension("m"), 1)
km = Quantity(2.0, length["kilo"])

m = km.to(length[""])
m.count()        # 2000.0
str(m)           # '2000.0 m'
format(km, ".3f")  # '2.000 km'
```

`Quantity.to(*units)` raises `TypeError` when the dimensions differ and
`ValueError` when an integer value would lose precision (for example metres
to millimetres is fine for `int`, millimetres to metres is not).
`Quantity.count()` returns the bare value and `Quantity.unit_string()` the
unit text, such as `km*s^-1`.

Arithmetic:

- `+` and `-` need the same dimensions; the result uses the finer prefix of
  the two operands. `+=` and `-=` keep the left operand's units.
- `*` and `/` combine the unit lists and drop dimensions whose power becomes
  zero; the values are rescaled to the finer prefix of each dimension.
- Multiplying or dividing by a plain number keeps the units; dividing a
  number by a quantity inverts its units. Integer division truncates.
- `==`, `<`, `<=`, `>`, `>=` compare across prefixes (1000 m equals 1 km).
  Ordering quantities of different dimensions raises `TypeError`; equality
  is simply false.
- `float(q)` works only for dimensionless quantities.

## Imperial units

`ratiounits.imperial` has constructors that take a value: `mile`,
`nautical_mile`, `yard`, `foot`, `inch`, `acre`, `square_mile`,
`square_yard`, `square_feet`, `square_inch`, `pound`, `ounce`,
`miles_per_hour`, `feet_per_second` and `fahrenheit`. Lengths use the
dimension `Dimension("m")`, masses `Dimension("g")` and times
`Dimension("s")`, so they convert to units built from those dimensions:

```python
from ratiounits import imperial

imperial.mile(1.0).to(length["kilo"]).count()   # 1.609344
```

## Mathematics

`ratiounits.quantity_math` provides:

- `radian`, `degree`, `celsius` and `kelvin` constructors;
- `sin`, `cos` and `tan` of angles, returning floats;
- `asin`, `acos`, `atan` and `atan2`, which return radians;
- `absolute`, `minimum`, `maximum` and `clamp`, which keep the units of
  their first operand;
- `exp` and `log` of dimensionless quantities;
- `power(q, ratio)` and `sqrt(q)`, which scale every unit power and raise
  `ValueError` when a power would not stay whole;
- `quantity_cast(target_units, q, integral=False)`, which converts between
  units of the same dimensions and also between the Celsius, Kelvin and
  Fahrenheit scales; with `integral` the result is truncated to an integer.

## Lower-level helpers

`ratiounits.traits` also has comparisons between units and unit lists:
`units_have_same_dimension`, `units_have_same_dimension_and_power`,
`units_have_same_dimension_and_different_prefixes`,
`lists_contain_same_dimensions`, `lists_contain_same_types` and
`is_exponentiable`.

`ratiounits.conversion` computes exact `Fraction` conversion factors and
result unit lists: `ratio_conversion_factor`, `power_conversion_factor`,
`unit_list_conversion_factor`, `select_highest_accuracy`,
`combine_unit_lists_selecting_higher_accuracy`, `combine_unit_power`,
`multiplication_result`, `division_result`,
`compute_multiply_conversion_factor`, `compute_division_conversion_factor`,
`extract_base_units`, `exponentiation_result` and `conversion_is_lossless`.

`ratiounits.mpl` has small list utilities: `accumulate`,
`accumulate_value`, `transform`, `pop_front`, `count_if`, `conditional` and
the operations `add`, `subtract`, `multiply`, `multiply_all`, `logical_and`
and `logical_or`.

## What the package does not do

There is no ready-made catalogue of SI units (metre, second, newton, watt
and so on). Apart from the angle and temperature constructors in
`quantity_math` and the imperial constructors, units are built with
`Dimension`, `prefixed_units` and `derived_unit`. There is no command-line
tool.

## Running the tests

```
pip install ratiounits[test]
pytest
```