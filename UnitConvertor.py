"""
Unit registry and pairwise conversion.

This module defines `UnitConvertor`, which resolves user-typed unit names to
`Unit` members through a fixed alias table and converts values between units
using an explicit table of formulas keyed by ordered (from, to) pairs.

Identity fallback
-----------------
Any pair without a formula converts to the input value unchanged. This covers
same-unit pairs, cross-category pairs (e.g. Meter -> Gram) and the few
same-category pairs that simply have no formula (e.g. Pound -> Gram).
`has_conversion` tells a real conversion apart from the fallback.

Notes & caveats
---------------
- Alias matching is exact after trimming and lowercasing; no fuzzy matching.
- No bounds or plausibility checks are made (negative Kelvin converts fine).
"""

import logging

from ConversionError import UnrecognizedUnitError
from Unit import Unit

logger = logging.getLogger("unit_converter.convertor")


class UnitConvertor:
    """
    Resolve unit names and convert values between `Unit` members.
    """

    def get_units(self):
        """
        Return the alias-to-unit mapping.

        Returns
        -------
        dict[str, Unit]
            Lowercase aliases (full name and abbreviation) for every unit.
        """
        return {
            'celsius': Unit.CELSIUS, 'c': Unit.CELSIUS,
            'fahrenheit': Unit.FAHRENHEIT, 'f': Unit.FAHRENHEIT,
            'kelvin': Unit.KELVIN, 'k': Unit.KELVIN,
            'meter': Unit.METER, 'm': Unit.METER,
            'kilometer': Unit.KILOMETER, 'km': Unit.KILOMETER,
            'gram': Unit.GRAM, 'g': Unit.GRAM,
            'kilogram': Unit.KILOGRAM, 'kg': Unit.KILOGRAM,
            'pound': Unit.POUND, 'lb': Unit.POUND,
            'second': Unit.SECOND, 's': Unit.SECOND,
            'minute': Unit.MINUTE, 'min': Unit.MINUTE,
        }

    def get_conversions(self):
        """
        Return the formula table.

        Returns
        -------
        dict[tuple[Unit, Unit], Callable[[float], float]]
            One formula per ordered (from, to) pair that has a defined
            conversion. Pairs missing from the table use the identity fallback.
        """
        return {
            (Unit.CELSIUS, Unit.FAHRENHEIT): lambda v: v * 1.8 + 32.0,
            (Unit.FAHRENHEIT, Unit.CELSIUS): lambda v: (v - 32.0) / 1.8,
            (Unit.CELSIUS, Unit.KELVIN): lambda v: v + 273.15,
            (Unit.KELVIN, Unit.CELSIUS): lambda v: v - 273.15,
            (Unit.FAHRENHEIT, Unit.KELVIN): lambda v: (v - 32.0) / 1.8 + 273.15,
            (Unit.KELVIN, Unit.FAHRENHEIT): lambda v: (v - 273.15) * 1.8 + 32.0,
            (Unit.METER, Unit.KILOMETER): lambda v: v / 1000.0,
            (Unit.KILOMETER, Unit.METER): lambda v: v * 1000.0,
            (Unit.GRAM, Unit.KILOGRAM): lambda v: v / 1000.0,
            (Unit.KILOGRAM, Unit.GRAM): lambda v: v * 1000.0,
            (Unit.POUND, Unit.KILOGRAM): lambda v: v * 0.453592,
            (Unit.KILOGRAM, Unit.POUND): lambda v: v / 0.453592,
            (Unit.SECOND, Unit.MINUTE): lambda v: v / 60.0,
            (Unit.MINUTE, Unit.SECOND): lambda v: v * 60.0,
        }

    def parse_unit(self, unit_text):
        """
        Resolve a unit name or abbreviation to a `Unit`.

        Parameters
        ----------
        unit_text : str
            Name as typed by the user; surrounding whitespace and case are
            ignored (e.g. "  KG ", "kilogram", "Kg").

        Returns
        -------
        Unit

        Raises
        ------
        UnrecognizedUnitError
            If the trimmed, lowercased text is not a known alias.
        """
        unit = self.get_units().get(unit_text.strip().lower())
        if unit is None:
            logger.debug("No unit matches %r", unit_text)
            raise UnrecognizedUnitError(unit_text)
        return unit

    def has_conversion(self, from_unit, to_unit):
        """Return True if the pair has its own formula (not the identity fallback)."""
        return (from_unit, to_unit) in self.get_conversions()

    def convert(self, value, from_unit, to_unit):
        """
        Convert a numeric `value` from `from_unit` to `to_unit`.

        Parameters
        ----------
        value : float
            Quantity expressed in `from_unit`.
        from_unit : Unit
        to_unit : Unit

        Returns
        -------
        float
            Converted value, or `value` unchanged when the pair has no
            formula.
        """
        formula = self.get_conversions().get((from_unit, to_unit))
        if formula is None:
            if from_unit != to_unit:
                logger.debug("No formula for %s -> %s, returning value unchanged", from_unit, to_unit)
            return value
        return formula(value)


if __name__ == "__main__":
    # Example usage / quick sanity checks
    unit_convertor = UnitConvertor()
    print(unit_convertor.convert(10.0, Unit.KILOGRAM, Unit.GRAM))
    print(unit_convertor.convert(100.0, Unit.CELSIUS, Unit.FAHRENHEIT))
    print(sorted(unit_convertor.get_units()))
