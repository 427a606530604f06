from dataclasses import dataclass, field

import pytest

from fluxor.paths import (
    contains_expression_operators,
    get_array_element,
    get_property,
    resolve_path,
    stringify,
)


@pytest.mark.parametrize(
    "expr, variables, expected",
    [
        ("foo", {"foo": "bar"}, "bar"),
        ("user.name", {"user": {"name": "John"}}, "John"),
        ("users[1]", {"users": ["John", "Jane", "Bob"]}, "Jane"),
        ("users[0].name", {"users": [{"name": "John"}]}, "John"),
        ("user.address", {"user": {"name": "John"}}, None),
        ("users[99]", {"users": ["John", "Jane"]}, None),
        ("a.b.c.d", {"a": 1}, None),
        (
            "data.users[1].contacts[0].email",
            {"data": {"users": [{"name": "John"}, {"contacts": [{"email": "jane@example.com"}]}]}},
            "jane@example.com",
        ),
        ("missing", {}, None),
        ("users[x]", {"users": ["a"]}, None),
    ],
)
def test_resolve_path(expr, variables, expected):
    assert resolve_path(expr, variables) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(42, "42"), (True, "true"), ("hello", "hello"), (None, ""), (5.0, "5"), (2.5, "2.5")],
)
def test_stringify(value, expected):
    assert stringify(value) == expected


@dataclass
class _Sample:
    Name: str
    Value: int
    _child: dict = field(default_factory=lambda: {"Data": "hidden"})


def test_get_property():
    obj = _Sample(Name="test", Value=42)
    assert get_property(obj, "Name") == "test"
    assert get_property(obj, "Value") == 42
    assert get_property(obj, "_child") is None
    assert get_property(obj, "Missing") is None
    assert get_property(obj, "name") == "test"
    assert get_property({"key": "value"}, "key") == "value"
    assert get_property(None, "anything") is None
    assert get_property(5, "real") is None


@pytest.mark.parametrize(
    "obj, index, expected",
    [
        (["a", "b", "c"], 1, "b"),
        ([1, 2, 3], 2, 3),
        (["hello", "world"], 0, "hello"),
        (["a", "b", "c"], 10, None),
        (["a", "b", "c"], -1, None),
        ("not an array", 0, None),
        (None, 0, None),
    ],
)
def test_get_array_element(obj, index, expected):
    assert get_array_element(obj, index) == expected


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("a + b", True), ("a - b", True), ("a * b", True), ("a / b", True),
        ("a % b", True), ("a == b", True), ("a != b", True), ("a > b", True),
        ("a < b", True), ("a >= b", True), ("a <= b", True), ("a && b", True),
        ("a || b", True), ("-5", False), ("a", False), ("a.b.c", False),
        ("users[0]", False), ("a+-b", True), ("a*-b", True),
    ],
)
def test_contains_expression_operators(expr, expected):
    assert contains_expression_operators(expr) is expected