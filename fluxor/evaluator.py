"""Evaluation of arithmetic, comparison and helper-function expressions."""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional

from .paths import contains_expression_operators, resolve_path, stringify

_LEXEME = re.compile(
    r"""\s*(?:
        (?P<number>\d+\.\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|\d+[eE][+-]?\d+|\d+)
      | (?P<string>"[^"]*"|'[^']*'|`[^`]*`)
      | (?P<name>[A-Za-z_][A-Za-z0-9_.]*(?:\[[^\]]*\][A-Za-z0-9_.]*)*)
      | (?P<op>==|!=|<=|>=|&&|\|\||[-+*/%<>!()])
    )""",
    re.VERBOSE,
)

_PRECEDENCE = {
    "||": 1, "&&": 2,
    "==": 3, "!=": 3, "<": 3, "<=": 3, ">": 3, ">=": 3,
    "+": 4, "-": 4,
    "*": 5, "/": 5, "%": 5,
}


class _ParseError(ValueError):
    pass


def _tokenize(text: str) -> list[tuple[str, str]]:
    tokens = []
    pos = 0
    text = text.rstrip()
    while pos < len(text):
        match = _LEXEME.match(text, pos)
        if match is None or match.end() == pos:
            raise _ParseError(text[pos:])
        kind = match.lastgroup
        tokens.append((kind, match.group(kind)))
        pos = match.end()
    return tokens


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_float(value: Any) -> bool:
    return isinstance(value, float)


def _to_int(value: Any) -> int:
    if _is_int(value):
        return value
    if _is_float(value):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return 0
    return 0


def _to_float(value: Any) -> float:
    if _is_int(value) or _is_float(value):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0


def _deep_equal(x: Any, y: Any) -> bool:
    if isinstance(x, bool) or isinstance(y, bool):
        return isinstance(x, bool) and isinstance(y, bool) and x == y
    if type(x) is not type(y) and not (_is_int(x) and _is_int(y)):
        return False
    return x == y


def _compare(x: Any, y: Any) -> int:
    if _is_int(x) and _is_int(y):
        a, b = x, y
    else:
        a, b = _to_float(x), _to_float(y)
    return (a > b) - (a < b)


def _add(x: Any, y: Any) -> Any:
    if isinstance(x, str) or isinstance(y, str):
        return (x if isinstance(x, str) else stringify(x)) + (y if isinstance(y, str) else stringify(y))
    if _is_int(x) and _is_int(y):
        return x + y
    return _to_float(x) + _to_float(y)


def _modulo(x: Any, y: Any) -> Any:
    if _is_int(x) and _is_int(y) and y != 0:
        remainder = abs(x) % abs(y)
        return -remainder if x < 0 else remainder
    divisor = _to_float(y)
    if divisor == 0:
        return math.nan
    return math.fmod(_to_float(x), divisor)


def _binary(op: str, x: Any, y: Any) -> Any:
    if _is_int(x) and _is_int(y):
        pass
    elif _is_float(x) or _is_float(y):
        x, y = _to_float(x), _to_float(y)
    both_int = _is_int(x) and _is_int(y)
    if op == "+":
        return _add(x, y)
    if op == "-":
        return x - y if both_int else _to_float(x) - _to_float(y)
    if op == "*":
        return x * y if both_int else _to_float(x) * _to_float(y)
    if op == "/":
        divisor = _to_float(y)
        return math.inf if divisor == 0 else _to_float(x) / divisor
    if op == "%":
        return _modulo(x, y)
    if op == "==":
        return _deep_equal(x, y)
    if op == "!=":
        return not _deep_equal(x, y)
    if op == "<":
        return _compare(x, y) < 0
    if op == ">":
        return _compare(x, y) > 0
    if op == "<=":
        return _compare(x, y) <= 0
    if op == ">=":
        return _compare(x, y) >= 0
    return None  # logical operators yield no value


class _Parser:
    def __init__(self, tokens: list[tuple[str, str]], variables: Mapping[str, Any]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._variables = variables

    def _peek(self) -> Optional[tuple[str, str]]:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _next(self) -> tuple[str, str]:
        lexeme = self._peek()
        if lexeme is None:
            raise _ParseError("unexpected end")
        self._pos += 1
        return lexeme

    def parse(self) -> Any:
        value = self._binary(1)
        if self._peek() is not None:
            raise _ParseError("trailing input")
        return value

    def _binary(self, min_prec: int) -> Any:
        left = self._unary()
        while True:
            lexeme = self._peek()
            if lexeme is None or lexeme[0] != "op" or lexeme[1] not in _PRECEDENCE:
                return left
            prec = _PRECEDENCE[lexeme[1]]
            if prec < min_prec:
                return left
            self._pos += 1
            right = self._binary(prec + 1)
            left = _binary(lexeme[1], left, right)

    def _unary(self) -> Any:
        lexeme = self._peek()
        if lexeme is not None and lexeme[0] == "op" and lexeme[1] in ("-", "!", "+"):
            self._pos += 1
            operand = self._unary()
            if lexeme[1] == "-" and (_is_int(operand) or _is_float(operand)):
                return -operand
            if lexeme[1] == "!" and isinstance(operand, bool):
                return not operand
            return None
        return self._primary()

    def _primary(self) -> Any:
        kind, text = self._next()
        if kind == "number":
            if re.fullmatch(r"\d+", text):
                return int(text)
            return float(text)
        if kind == "string":
            return text[1:-1]
        if kind == "name":
            return resolve_path(text, self._variables)
        if text == "(":
            value = self._binary(1)
            if self._next() != ("op", ")"):
                raise _ParseError("missing )")
            return value
        raise _ParseError(text)


def evaluate(expr: str, variables: Mapping[str, Any]) -> Any:
    """Evaluate an expression such as ``i + 1`` or ``foo.z * (1 + bar.zoo)``.

    Variable paths are resolved from ``variables``; a malformed expression
    gives None.
    """
    try:
        return _Parser(_tokenize(expr), variables).parse()
    except _ParseError:
        return None


class ExpressionEvaluator:
    """Evaluates expressions, ``${...}`` helper functions and variable paths."""

    def evaluate(self, expr: str, variables: Mapping[str, Any]) -> Any:
        """Evaluate ``expr`` against ``variables``."""
        if expr.startswith("{") and expr.endswith("}"):
            inner = expr[1:-1]
            if contains_expression_operators(inner):
                return evaluate(inner, variables)
        if expr.startswith("${") and expr.endswith("}"):
            inner = expr[2:-1]
            if inner.startswith("len(") and inner.endswith(")"):
                return self._length(inner[4:-1], variables)
            if inner.startswith("is nil(") and inner.endswith(")"):
                return resolve_path(inner[7:-1], variables) is None
            if len(inner) >= 3 and inner.startswith("~/") and inner.endswith("/"):
                return self._regex_match(inner[2:-1], variables)
            if contains_expression_operators(inner):
                return evaluate(inner, variables)
            return resolve_path(inner, variables)
        return resolve_path(expr, variables)

    @staticmethod
    def _length(arg: str, variables: Mapping[str, Any]) -> int:
        value = resolve_path(arg, variables)
        if isinstance(value, str):
            return len(value.encode("utf-8"))
        if isinstance(value, (list, tuple, dict, Mapping)):
            return len(value)
        return 0

    @staticmethod
    def _regex_match(spec: str, variables: Mapping[str, Any]) -> bool:
        parts = spec.split(" ")
        if len(parts) < 2:
            return False
        pattern = parts[-1]
        value = resolve_path(" ".join(parts[:-1]), variables)
        if value is None:
            return False
        text = value if isinstance(value, str) else stringify(value)
        try:
            return re.search(pattern, text) is not None
        except re.error:
            return False