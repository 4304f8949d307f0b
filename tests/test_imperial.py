import pytest

from ratiounits import imperial
from ratiounits.quantity import Quantity, prefixed_units
from ratiounits.traits import Dimension, Unit

LENGTH = Dimension("m")
TIME = Dimension("s")
KM = prefixed_units(LENGTH, 1)["kilo"]
PER_H = Unit(TIME, 3600, -1)


def test_miles_per_hour_to_kmh():
    kmh = imperial.miles_per_hour(1.0).to(KM, PER_H)
    assert kmh.count() == 1.609344


def test_mile_to_kilometer():
    assert imperial.mile(1.0).to(KM).count() == 1.609344


def test_acre_to_square_feet():
    sqft = imperial.acre(1.0).to(*imperial.square_feet(1.0).units)
    assert sqft.count() == pytest.approx(43560.0)


def test_length_relations():
    assert imperial.yard(1.0).to(*imperial.foot(1.0).units).count() == pytest.approx(3.0)
    assert imperial.foot(1.0).to(*imperial.inch(1.0).units).count() == pytest.approx(12.0)
    assert imperial.pound(1.0).to(*imperial.ounce(1.0).units).count() == pytest.approx(16.0)


@pytest.mark.parametrize(
    "make",
    [imperial.nautical_mile, imperial.mile, imperial.square_mile, imperial.square_yard,
     imperial.square_inch, imperial.feet_per_second],
)
def test_round_trip_through_km(make):
    q = make(7.0)
    other = q / Quantity(1.0, KM) * Quantity(1.0, KM)
    assert other.to(*q.units).count() == pytest.approx(7.0)


def test_unit_strings():
    assert imperial.mile(2).unit_string() == "mi"
    assert imperial.nautical_mile(1).unit_string() == "nmi"
    assert imperial.fahrenheit(3).unit_string() == "°F"


def test_fahrenheit_is_not_length():
    with pytest.raises(TypeError):
        imperial.fahrenheit(1.0).to(KM)