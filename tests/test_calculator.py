from __future__ import annotations

from responder.calculator import Calculator


def _press_all(calc, labels):
    for label in labels:
        calc.press(label)
    return calc.display


def test_display_defaults_to_zero():
    assert Calculator().display == "0"


def test_buttons_evaluate():
    calc = Calculator()
    assert _press_all(calc, ["1", "2", "+", "3", "="]) == "15"
    assert _press_all(Calculator(), ["7", "/", "2", "="]) == "3.5"


def test_error_is_cleared_by_next_input():
    calc = Calculator()
    assert _press_all(calc, ["1", "/", "0", "="]) == "Error"
    assert calc.press("5") == "5"


def test_clear_and_exit():
    calc = Calculator()
    calc.open()
    _press_all(calc, ["9", "9"])
    assert calc.press("C") == "0"
    calc.press("4")
    assert calc.press("Exit") == "0"
    assert not calc.is_open


def test_keyboard_only_when_open():
    calc = Calculator()
    assert calc.key("7") == "0"

    calc.open()
    for k in ["7", "*", "6", "x"]:
        calc.key(k)
    assert calc.display == "7*6"
    assert calc.key("Enter") == "42"
    calc.key("Backspace")
    assert calc.display == "4"


def test_keyboard_enter_on_bad_input():
    calc = Calculator()
    calc.open()
    calc.key("(")
    assert calc.key("Enter") == "Error"


def test_deeply_nested_keys_show_error():
    calc = Calculator()
    calc.open()
    for _ in range(2000):
        calc.key("(")
    calc.key("1")
    assert calc.key("Enter") == "Error"
