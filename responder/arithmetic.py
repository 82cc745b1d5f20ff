"""
Safe arithmetic for chat messages and the calculator.

Grammar (left associative, usual precedence):
    expr   := term (("+" | "-") term)*
    term   := factor (("*" | "/") factor)*
    factor := ("+" | "-")* atom
    atom   := NUMBER | "(" expr ")"      (at most MAX_DEPTH levels deep)
"""
from __future__ import annotations

import operator
import re
from typing import List, Optional, Tuple, Union

Number = Union[int, float]

TOKEN_RE = re.compile(r"\s*(?:(\d+\.?\d*|\.\d+)|(.))")
MATH_RUN_RE = re.compile(r"[-+*/()\d\s.]+")
MAX_DEPTH = 100

_OPS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


class ExpressionError(ValueError):
    pass


def tokenize(expression: str) -> List[Tuple[str, str]]:
    tokens: List[Tuple[str, str]] = []
    for number, op in TOKEN_RE.findall(expression or ""):
        if number:
            tokens.append(("num", number))
        elif op.strip():
            if op not in "+-*/()":
                raise ExpressionError(f"Unexpected character: {op!r}")
            tokens.append(("op", op))
    return tokens


class _Parser:
    def __init__(self, tokens: List[Tuple[str, str]]):
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

    def peek(self) -> Optional[Tuple[str, str]]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take_op(self, ops: str) -> Optional[str]:
        tok = self.peek()
        if tok and tok[0] == "op" and tok[1] in ops:
            self.pos += 1
            return tok[1]
        return None

    def parse(self) -> float:
        if not self.tokens:
            raise ExpressionError("Empty expression")
        value = self.expr()
        if self.peek() is not None:
            raise ExpressionError(f"Unexpected token: {self.peek()[1]!r}")
        return value

    def expr(self) -> float:
        value = self.term()
        while True:
            op = self.take_op("+-")
            if op is None:
                return value
            rhs = self.term()
            value = _OPS[op](value, rhs)

    def term(self) -> float:
        value = self.factor()
        while True:
            op = self.take_op("*/")
            if op is None:
                return value
            rhs = self.factor()
            if op == "/" and rhs == 0:
                raise ExpressionError("Division by zero")
            value = _OPS[op](value, rhs)

    def factor(self) -> float:
        negative = False
        op = self.take_op("+-")
        while op is not None:
            negative ^= op == "-"
            op = self.take_op("+-")
        value = self.atom()
        return -value if negative else value

    def atom(self) -> float:
        if self.take_op("("):
            if self.depth >= MAX_DEPTH:
                raise ExpressionError("Too many nested parentheses")
            self.depth += 1
            value = self.expr()
            self.depth -= 1
            if not self.take_op(")"):
                raise ExpressionError("Missing closing parenthesis")
            return value

        tok = self.peek()
        if tok is None or tok[0] != "num":
            raise ExpressionError("Expected a number")
        self.pos += 1
        return float(tok[1])


def evaluate(expression: str) -> Number:
    """Evaluate an arithmetic expression; integral results come back as int."""
    value = _Parser(tokenize(expression)).parse()
    if value.is_integer():
        return int(value)
    return value


def format_number(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


def extract_expression(message: str) -> Optional[str]:
    """Pull the arithmetic-looking parts out of a chat message."""
    runs = MATH_RUN_RE.findall(message or "")
    if not runs:
        return None
    expression = "".join(runs).strip()
    if not any(ch.isdigit() for ch in expression):
        return None
    return expression
