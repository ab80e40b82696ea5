"""
Tests for the interactive flow: menu dispatch, both modes and main().
"""

import io

import pytest

import Main as main_module
from Main import INVALID_CHOICE_MESSAGE, INVALID_FORMAT_MESSAGE, MENU
from Unit import Unit

EXPRESSION_PROMPT = "Enter a conversion expression (e.g., 10Kg -> g): "


def test_menu_text():
    assert MENU == (
        "Unit Converter\n"
        "1. Use an expression (e.g., 10Kg -> g)\n"
        "2. Enter units and values manually"
    )


def test_expression_mode(run_main):
    status, console = run_main("1", "10kg -> g")
    assert status == 0
    assert console.prompts == ["Choose an option: ", EXPRESSION_PROMPT]
    assert console.lines == [MENU, "10 Kilogram = 10000 Gram"]


def test_menu_choice_is_trimmed(run_main):
    status, console = run_main("  1 ", "2.5km -> m")
    assert status == 0
    assert console.lines[-1] == "2.5 Kilometer = 2500 Meter"


def test_expression_mode_invalid_format(run_main):
    status, console = run_main("1", "garbage")
    assert status == 0
    assert console.lines == [MENU, INVALID_FORMAT_MESSAGE]


def test_expression_mode_unknown_unit(run_main):
    status, console = run_main("1", "10xyz -> g")
    assert status == 0
    assert console.lines[-1] == "Invalid format! Use '10Kg -> g'."


def test_expression_mode_missing_number_stops_with_error(run_main):
    status, console = run_main("1", "xyz -> g")
    assert status == 1
    assert console.lines == [MENU, "Invalid number: ''"]


def test_expression_mode_identity_fallback(run_main):
    status, console = run_main("1", "5m -> g")
    assert status == 0
    assert console.lines[-1] == "5 Meter = 5 Gram"


def test_guided_mode(run_main):
    status, console = run_main("2", "min", "S", " 2 ")
    assert status == 0
    assert console.prompts == [
        "Choose an option: ",
        "Choose a unit to convert from: ",
        "Choose a unit to convert to: ",
        "Enter the value to convert: ",
    ]
    assert console.lines == [MENU, "2 Minute = 120 Second"]


def test_guided_mode_fractional_result(run_main):
    status, console = run_main("2", "g", "kg", "250")
    assert status == 0
    assert console.lines[-1] == "250 Gram = 0.25 Kilogram"


def test_guided_mode_unknown_unit_stops_immediately(run_main):
    status, console = run_main("2", "parsec", "m", "1")
    assert status == 1
    assert console.lines == [MENU, "Invalid unit!"]
    assert console.prompts[-1] == "Choose a unit to convert from: "


def test_guided_mode_unknown_target_unit(run_main):
    status, console = run_main("2", "m", "furlong")
    assert status == 1
    assert console.lines[-1] == "Invalid unit!"


def test_guided_mode_invalid_value(run_main):
    status, console = run_main("2", "c", "f", "hot")
    assert status == 1
    assert console.lines[-1] == "Invalid number: 'hot'"


@pytest.mark.parametrize("choice", ["3", "", "one", "12"])
def test_invalid_choice_performs_no_conversion(run_main, choice):
    status, console = run_main(choice, "10kg -> g")
    assert status == 0
    assert console.lines == [MENU, INVALID_CHOICE_MESSAGE]
    assert console.prompts == ["Choose an option: "]


def test_end_of_input_reads_as_empty_line(run_main):
    status, console = run_main()
    assert status == 0
    assert console.lines == [MENU, INVALID_CHOICE_MESSAGE]


def test_dispatch_routes_to_handlers(monkeypatch):
    calls = []
    monkeypatch.setattr(main_module.Main, "handle_expression", lambda self: calls.append("expression"))
    monkeypatch.setattr(main_module.Main, "handle_manual_input", lambda self: calls.append("guided"))

    for choice in ("1", "2", "9"):
        answers = iter([choice])
        main_module.Main(input_func=lambda prompt: next(answers), output_func=lambda line: None).run()

    assert calls == ["expression", "guided"]


def test_handle_expression_returns_result():
    answers = iter(["100c -> f"])
    app = main_module.Main(input_func=lambda prompt: next(answers), output_func=lambda line: None)
    assert app.handle_expression() == pytest.approx(212.0)


def test_get_unit():
    app = main_module.Main(input_func=lambda prompt: " LB ", output_func=lambda line: None)
    assert app.get_unit("unit: ") is Unit.POUND


def test_main_reads_stdin_and_writes_stdout(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("UNIT_CONVERTER_LOG_LEVEL", raising=False)
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n10kg -> g\n"))

    assert main_module.main() == 0

    out = capsys.readouterr().out
    assert out.startswith(MENU + "\n")
    assert "Choose an option: " in out
    assert out.endswith("10 Kilogram = 10000 Gram\n")


def test_main_returns_error_status(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("UNIT_CONVERTER_LOG_LEVEL", raising=False)
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nparsec\n"))

    assert main_module.main() == 1
    assert capsys.readouterr().out.endswith("Invalid unit!\n")


def test_expression_mode_small_result_is_positional(run_main):
    status, console = run_main("1", "0.01g -> kg")
    assert status == 0
    assert console.lines[-1] == "0.01 Gram = 0.00001 Kilogram"


def test_expression_mode_large_whole_number(run_main):
    status, console = run_main("1", "100000000000000000000000g -> g")
    assert status == 0
    assert console.lines[-1] == "100000000000000000000000 Gram = 100000000000000000000000 Gram"


def test_guided_mode_keeps_negative_zero(run_main):
    status, console = run_main("2", "m", "km", "-0.0")
    assert status == 0
    assert console.lines[-1] == "-0 Meter = -0 Kilometer"


@pytest.mark.parametrize("value_text", ["1_000", "١٠"])
def test_guided_mode_rejects_non_plain_numbers(run_main, value_text):
    status, console = run_main("2", "m", "km", value_text)
    assert status == 1
    assert console.lines == [MENU, f"Invalid number: '{value_text}'"]
