"""Named values applied to a session before or after a task runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class Parameter:
    """A named value, optionally with a declared data type."""

    name: str
    value: Any = None
    data_type: str = ""
    location: Any = None
    default: Any = None


class Parameters(list):
    """An ordered collection of parameters."""

    def add(self, name: str, value: Any) -> None:
        """Append a parameter with the given name and value."""
        self.append(Parameter(name=name, value=value))

    def get(self, name: str) -> Optional[Parameter]:
        """Return the first parameter called ``name``, or None."""
        return next((param for param in self if param.name == name), None)

    def to_dict(self) -> dict[str, Any]:
        """Map parameter names to values; later duplicates win."""
        return {param.name: param.value for param in self}

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> "Parameters":
        """Build parameters from a name-to-value mapping."""
        return cls(Parameter(name=key, value=value) for key, value in mapping.items())