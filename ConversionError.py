"""
Errors raised while turning user text into a conversion.

All of them derive from `ConversionError`, itself a `ValueError`, and their
`str()` is the message shown to the user before the run ends.
"""


class ConversionError(ValueError):
    """Base class for input that cannot be turned into a conversion."""


class UnrecognizedUnitError(ConversionError):
    """
    Raised when a unit name matches none of the known aliases.

    Attributes
    ----------
    unit_text : str
        The text exactly as it was given, before trimming.
    """

    def __init__(self, unit_text):
        super().__init__("Invalid unit!")
        self.unit_text = unit_text


class InvalidNumberError(ConversionError):
    """
    Raised when numeric text cannot be parsed as a float.

    Attributes
    ----------
    number_text : str
        The offending text (may be empty).
    """

    def __init__(self, number_text):
        super().__init__(f"Invalid number: '{number_text}'")
        self.number_text = number_text
