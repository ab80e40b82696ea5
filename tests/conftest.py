import pytest

from Main import Main
from UnitConvertor import UnitConvertor


class ScriptedConsole:
    """Feeds canned answers to prompts and records everything shown."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def print(self, line):
        self.lines.append(line)


@pytest.fixture
def unit_convertor():
    return UnitConvertor()


@pytest.fixture
def run_main():
    def _run(*answers):
        console = ScriptedConsole(answers)
        status = Main(input_func=console.input, output_func=console.print).run()
        return status, console
    return _run
