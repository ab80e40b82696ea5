"""
Closed set of measurement units understood by the converter.

Each member's value is its canonical display spelling (e.g. "Kilogram"),
which is what result lines print. Members are grouped informally by the
physical quantity they measure; the grouping is informational only and is
never used to reject a conversion.

Quantity kinds
--------------
- temperature: Celsius, Fahrenheit, Kelvin
- distance:    Meter, Kilometer
- mass:        Gram, Kilogram, Pound
- time:        Second, Minute
"""

from enum import Enum


class Unit(Enum):
    CELSIUS = "Celsius"
    FAHRENHEIT = "Fahrenheit"
    KELVIN = "Kelvin"
    METER = "Meter"
    KILOMETER = "Kilometer"
    GRAM = "Gram"
    KILOGRAM = "Kilogram"
    POUND = "Pound"
    SECOND = "Second"
    MINUTE = "Minute"

    @property
    def kind(self):
        """Name of the physical quantity this unit measures."""
        return UNIT_KINDS[self]

    def __str__(self):
        return self.value


UNIT_KINDS = {
    Unit.CELSIUS: "temperature",
    Unit.FAHRENHEIT: "temperature",
    Unit.KELVIN: "temperature",
    Unit.METER: "distance",
    Unit.KILOMETER: "distance",
    Unit.GRAM: "mass",
    Unit.KILOGRAM: "mass",
    Unit.POUND: "mass",
    Unit.SECOND: "time",
    Unit.MINUTE: "time",
}
