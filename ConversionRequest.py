import math
from dataclasses import dataclass
from decimal import Decimal

from Unit import Unit
from UnitConvertor import UnitConvertor


def format_number(value):
    """
    Render a float the way result lines show it.

    Uses the shortest round-trip digits, written out in plain positional
    notation with no exponent and no rounding: "10000" (not "10000.0"),
    "0.00001" (not "1e-05"), "100000000000000000000000" for 1e23, and "-0"
    for negative zero. Infinities and NaN print as "inf", "-inf" and "NaN".
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return format(Decimal(repr(value)).normalize(), "f")


@dataclass(frozen=True)
class ConversionRequest:
    value: float
    from_unit: Unit
    to_unit: Unit


    def convert(self, unit_convertor=None):
        unit_convertor = unit_convertor or UnitConvertor()
        return unit_convertor.convert(self.value, self.from_unit, self.to_unit)


    def format_result(self, result):
        return (
            f"{format_number(self.value)} {self.from_unit} = "
            f"{format_number(result)} {self.to_unit}"
        )


    def __str__(self):
        return f"{format_number(self.value)} {self.from_unit} -> {self.to_unit}"
