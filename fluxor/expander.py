"""Expansion of ``$var`` and ``${expr}`` references inside strings and nested data."""

from __future__ import annotations

import re
from typing import Any, Mapping

from .evaluator import evaluate
from .paths import contains_expression_operators, resolve_path, stringify

_SIMPLE_VARIABLE = re.compile(r"\$([a-zA-Z_][a-zA-Z0-9_.]*)")


def has_expr(value: str) -> bool:
    """Whether ``value`` may hold a variable reference."""
    return "$" in value


def find_matching_closing_brace(text: str) -> int:
    """Return the index of the brace closing the ``${`` that starts ``text``.

    Nested braces are balanced. Gives -1 when ``text`` does not start with
    ``${`` or the brace is never closed.
    """
    if not text.startswith("${"):
        return -1
    depth = 0
    for index, char in enumerate(text):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return -1


def _evaluate_reference(expr: str, variables: Mapping[str, Any]) -> Any:
    if contains_expression_operators(expr):
        return evaluate(expr, variables)
    return resolve_path(expr, variables)


def _is_pure_reference(value: str) -> bool:
    if value.startswith("$") and "$" not in value[1:] and " " not in value:
        return True
    return (
        value.startswith("${")
        and value.endswith("}")
        and "${" not in value[2:-1]
    )


def _replace_simple(match: re.Match, variables: Mapping[str, Any]) -> str:
    replacement = resolve_path(match.group(1), variables)
    if replacement is None or isinstance(replacement, (list, tuple, Mapping)):
        return match.group(0)
    return stringify(replacement)


def expand_text(value: str, variables: Mapping[str, Any]) -> Any:
    """Expand the references in a single string.

    A string that is one reference as a whole (``$name`` or ``${expr}``)
    yields the referenced value itself, which may be of any type, or None
    when it cannot be resolved. Otherwise each embedded ``${expr}`` is
    replaced by its rendered value and each ``$name`` by its rendered value
    when it resolves to a scalar; unresolved ``$name`` references stay as
    they are.
    """
    if value == "":
        return value

    if _is_pure_reference(value):
        if value.startswith("${") and value.endswith("}"):
            return _evaluate_reference(value[2:-1], variables)
        return resolve_path(value[1:], variables)

    result = value
    while True:
        start = result.find("${")
        if start == -1:
            break
        end = find_matching_closing_brace(result[start:])
        if end == -1:
            break
        end = start + end + 1
        replacement = _evaluate_reference(result[start + 2:end - 1], variables)
        result = result[:start] + stringify(replacement) + result[end:]

    return _SIMPLE_VARIABLE.sub(lambda match: _replace_simple(match, variables), result)


def _expand_item(item: Any, variables: Mapping[str, Any]) -> Any:
    if isinstance(item, str) and has_expr(item):
        return expand_text(item, variables)
    return expand(item, variables)


def expand(value: Any, variables: Mapping[str, Any]) -> Any:
    """Expand references throughout ``value``, walking mappings and sequences.

    Mapping keys are expanded too; an entry whose key does not expand to a
    string is dropped. Values of other types are returned unchanged.
    """
    if isinstance(value, Mapping):
        expanded: dict[Any, Any] = {}
        for key, element in value.items():
            new_key = key
            if isinstance(key, str) and has_expr(key):
                new_key = expand_text(key, variables)
                if not isinstance(new_key, str):
                    continue
            expanded[new_key] = _expand_item(element, variables)
        return expanded
    if isinstance(value, list):
        return [_expand_item(item, variables) for item in value]
    if isinstance(value, tuple):
        return tuple(_expand_item(item, variables) for item in value)
    if isinstance(value, str):
        return expand_text(value, variables) if has_expr(value) else value
    return value