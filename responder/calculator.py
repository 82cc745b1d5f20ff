# responder/calculator.py
# Calculator widget state: button presses and keyboard input

from __future__ import annotations

from responder.arithmetic import ExpressionError, evaluate, format_number

ERROR = "Error"
KEY_CHARS = set("0123456789+-*/().")


class Calculator:
    def __init__(self):
        self.expression = ""
        self.is_open = False

    @property
    def display(self) -> str:
        return self.expression or "0"

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False
        self.expression = ""

    def _append(self, text: str) -> None:
        if self.expression == ERROR:
            self.expression = ""
        self.expression += text

    def _equals(self) -> None:
        try:
            self.expression = format_number(evaluate(self.expression))
        except ExpressionError:
            self.expression = ERROR

    def press(self, label: str) -> str:
        if label == "C":
            self.expression = ""
        elif label == "=":
            self._equals()
        elif label == "Exit":
            self.close()
        else:
            self._append(label)
        return self.display

    def key(self, key: str) -> str:
        # keyboard input only applies while the widget is shown
        if not self.is_open:
            return self.display
        if key in KEY_CHARS:
            self._append(key)
        elif key == "Enter":
            self._equals()
        elif key == "Backspace":
            self.expression = self.expression[:-1]
        return self.display
