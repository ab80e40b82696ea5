import logging
import sys

from ConversionError import ConversionError
from ConversionRequest import ConversionRequest
from ExpressionParser import ExpressionParser, parse_number
from Settings import configure_logging, load_settings
from UnitConvertor import UnitConvertor


"""
Interactive CLI for converting a single quantity between units.

Overview
--------
`Main` prints a two-option menu and performs exactly one conversion:
1) Expression mode: one line such as "10kg -> g".
2) Guided mode: prompts for the source unit, target unit and value.

Any other menu choice prints "Invalid choice!".

Exit status
-----------
- 0 after a result, the invalid-format message or the invalid-choice message.
- 1 after an unrecoverable input error (invalid number in either mode, or an
  unknown unit in guided mode). The error is raised as a `ConversionError`,
  propagated up to `run()`, printed, and the run ends.

Key behavior & dependencies
---------------------------
- Uses `ExpressionParser` for expression mode and `UnitConvertor` for unit
  resolution and conversion.
- Reads from `input` and writes with `print` by default; both are injectable
  so the flow can be driven from tests.
- End of input is read as an empty line.
"""

logger = logging.getLogger("unit_converter")

MENU = (
    "Unit Converter\n"
    "1. Use an expression (e.g., 10Kg -> g)\n"
    "2. Enter units and values manually"
)
INVALID_FORMAT_MESSAGE = "Invalid format! Use '10Kg -> g'."
INVALID_CHOICE_MESSAGE = "Invalid choice!"


class Main:
    """
    Interactive entry point that wires the parser and convertor to stdin/stdout.
    """
    def __init__(self, unit_convertor=None, input_func=input, output_func=print):
        """
        Initialize collaborators.

        Attributes
        ----------
        unit_convertor : UnitConvertor
        expression_parser : ExpressionParser
        input_func : Callable[[str], str]
            Shows a prompt and returns one line without its newline.
        output_func : Callable[[str], None]
            Writes one line of output.
        """
        self.unit_convertor = unit_convertor or UnitConvertor()
        self.expression_parser = ExpressionParser(self.unit_convertor)
        self.input_func = input_func
        self.output_func = output_func

    def read_input(self, prompt):
        try:
            return self.input_func(prompt)
        except EOFError:
            return ""

    def run(self):
        """
        Present the menu, dispatch to the selected mode and return the exit status.
        """
        self.output_func(MENU)
        choice = self.read_input("Choose an option: ").strip()
        logger.debug("Menu choice %r", choice)

        try:
            if choice == "1":
                self.handle_expression()
            elif choice == "2":
                self.handle_manual_input()
            else:
                self.output_func(INVALID_CHOICE_MESSAGE)
        except ConversionError as e:
            logger.warning("Stopping after invalid input: %s", e)
            self.output_func(str(e))
            return 1
        return 0

    def handle_expression(self):
        expression = self.read_input("Enter a conversion expression (e.g., 10Kg -> g): ")
        request = self.expression_parser.parse(expression)
        if request is None:
            self.output_func(INVALID_FORMAT_MESSAGE)
            return None
        return self.report(request)

    def handle_manual_input(self):
        from_unit = self.get_unit("Choose a unit to convert from: ")
        to_unit = self.get_unit("Choose a unit to convert to: ")
        value = parse_number(self.read_input("Enter the value to convert: ").strip())
        return self.report(ConversionRequest(value, from_unit, to_unit))

    def get_unit(self, prompt):
        """
        Prompt for a unit name and resolve it.

        Raises
        ------
        UnrecognizedUnitError
            If the answer is not a known unit alias; there is no retry.
        """
        return self.unit_convertor.parse_unit(self.read_input(prompt))

    def report(self, request):
        """
        Convert `request`, print the result line and return the converted value.
        """
        result = request.convert(self.unit_convertor)
        if not self.unit_convertor.has_conversion(request.from_unit, request.to_unit):
            logger.info("%s uses the identity fallback", request)
        self.output_func(request.format_result(result))
        return result


def main():
    configure_logging(load_settings())
    return Main().run()


if __name__ == "__main__":
    sys.exit(main())
