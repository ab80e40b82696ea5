"""
Parser for single-line conversion expressions such as "10kg -> g".

Expression shape
----------------
    <number><unit-text> -> <unit-text>

Whitespace around "->" and between the number and the source unit is
tolerated. The number is the longest leading run of ASCII digits and '.'
characters; everything after it is the source-unit text.

Two failure tiers
-----------------
- "No result" (`parse` returns None): the line does not split into exactly
  two parts on "->", or either unit text is not a known alias. Callers show
  the fixed invalid-format message.
- `InvalidNumberError` (raised): the leading run is not a valid float, e.g.
  the line starts with a letter. This check happens before the units are
  resolved, so "abc -> g" raises rather than returning None.
"""

import logging
import re

from ConversionError import InvalidNumberError, UnrecognizedUnitError
from ConversionRequest import ConversionRequest
from UnitConvertor import UnitConvertor

logger = logging.getLogger("unit_converter.parser")

ARROW = "->"
NUMBER_CHARS = "0123456789."
# Optional sign, then a decimal with optional exponent, or inf/infinity/nan.
# ASCII digits only; no underscores or surrounding whitespace.
NUMBER_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.IGNORECASE | re.ASCII,
)


def parse_number(number_text):
    """
    Parse `number_text` as a float.

    Raises
    ------
    InvalidNumberError
        If the text is empty or not a plain decimal, e.g. "1_000", " 5",
        or non-ASCII digits, all of which `float()` alone would accept.
    """
    if not NUMBER_PATTERN.fullmatch(number_text):
        raise InvalidNumberError(number_text)
    return float(number_text)


class ExpressionParser:
    """
    Turn an expression line into a `ConversionRequest`.
    """

    def __init__(self, unit_convertor=None):
        self.unit_convertor = unit_convertor or UnitConvertor()


    def split_value_and_unit(self, value_unit):
        """
        Split "10.5kg" into ("10.5", "kg").

        Returns
        -------
        tuple[str, str]
            (numeric run, remainder). The remainder keeps any whitespace that
            followed the number; unit resolution trims it later.
        """
        end = 0
        while end < len(value_unit) and value_unit[end] in NUMBER_CHARS:
            end += 1
        return value_unit[:end], value_unit[end:]


    def parse(self, expression):
        """
        Parse an expression line.

        Parameters
        ----------
        expression : str
            Raw line, e.g. "10kg -> g" or "98.6F->C".

        Returns
        -------
        ConversionRequest | None
            None when the line has the wrong shape or names an unknown unit.

        Raises
        ------
        InvalidNumberError
            If the leading numeric run cannot be parsed.
        """
        parts = [part.strip() for part in expression.split(ARROW)]
        if len(parts) != 2:
            logger.info("Expression %r has %d part(s) around %r, expected 2", expression, len(parts), ARROW)
            return None

        value_unit, to_unit_text = parts
        number_text, from_unit_text = self.split_value_and_unit(value_unit)
        value = parse_number(number_text)

        try:
            from_unit = self.unit_convertor.parse_unit(from_unit_text)
            to_unit = self.unit_convertor.parse_unit(to_unit_text)
        except UnrecognizedUnitError as e:
            logger.info("Expression %r names an unknown unit %r", expression, e.unit_text)
            return None

        request = ConversionRequest(value, from_unit, to_unit)
        logger.debug("Parsed expression %r as %s", expression, request)
        return request
