"""Navigation of nested values by dotted and indexed paths, plus shared helpers."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Mapping, Optional

_OPERATORS = ("+", "-", "*", "/", "%", "==", "!=", ">", "<", ">=", "<=", "&&", "||")
_NEGATION_MARKERS = ("+-", "*-", "/-", "=-")
_PRIMITIVES = (str, bytes, bytearray, int, float, complex, bool, list, tuple, set, frozenset)


def contains_expression_operators(text: str) -> bool:
    """Whether ``text`` holds an arithmetic, comparison or logical operator.

    A minus that starts the text, or that follows another operator, is taken
    as a sign and does not count.
    """
    for op in _OPERATORS:
        if op == "-" and (
            text.startswith("-") or any(marker in text for marker in _NEGATION_MARKERS)
        ):
            continue
        if op in text:
            return True
    return False


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def stringify(value: Any) -> str:
    """Render a value for interpolation into text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def get_property(obj: Any, prop: str) -> Any:
    """Return key ``prop`` of a mapping or public attribute ``prop`` of an object.

    Attribute names are matched exactly first, then case-insensitively.
    Private names (leading underscore) and missing properties give None.
    """
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(prop)
    if isinstance(obj, _PRIMITIVES) or prop.startswith("_"):
        return None
    if hasattr(obj, prop):
        value = getattr(obj, prop)
        return None if callable(value) else value
    wanted = prop.lower()
    for name in dir(obj):
        if name.startswith("_") or name.lower() != wanted:
            continue
        value = getattr(obj, name)
        if not callable(value):
            return value
    return None


def get_array_element(obj: Any, index: int) -> Any:
    """Return element ``index`` of a list or tuple; None when out of range."""
    if not isinstance(obj, (list, tuple)):
        return None
    if 0 <= index < len(obj):
        return obj[index]
    return None


def _step(current: Any, name: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(name)
    return get_property(current, name)


def _process_path(obj: Any, path: str) -> Any:
    current = obj
    i = 0
    while i < len(path):
        if path[i] == ".":
            i += 1
            continue
        if path[i] == "[":
            close = path.find("]", i)
            if close < 0:
                return None
            index_text = path[i + 1:close]
            if not all("0" <= ch <= "9" for ch in index_text):
                return None
            current = get_array_element(current, int(index_text) if index_text else 0)
            if current is None:
                return None
            i = close + 1
            continue
        ends = [pos for pos in (path.find(".", i), path.find("[", i)) if pos >= 0]
        end = min(ends) if ends else len(path)
        current = _step(current, path[i:end])
        if current is None:
            return None
        i = end
    return current


def _resolve_indexed(expr: str, variables: Mapping[str, Any]) -> Any:
    first_dot = expr.find(".")
    first_bracket = expr.find("[")
    if first_dot < 0 and first_bracket < 0:
        return variables.get(expr)
    if first_dot < 0 or (0 <= first_bracket < first_dot):
        root = expr[:first_bracket]
    else:
        root = expr[:first_dot]
    if root not in variables:
        return None
    return _process_path(variables[root], expr[len(root):])


def resolve_path(expr: str, variables: Mapping[str, Any]) -> Optional[Any]:
    """Resolve a path such as ``user.name`` or ``data.users[1].email``."""
    if "[" in expr and "]" in expr:
        return _resolve_indexed(expr, variables)
    root, *rest = expr.split(".")
    if root not in variables:
        return None
    current = variables[root]
    for part in rest:
        current = _step(current, part)
        if current is None:
            return None
    return current