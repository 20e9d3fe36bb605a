"""
Runtime checks for caller-supplied parameters.
"""

from collections.abc import Mapping
from typing import Any, Literal

ParameterKind = Literal["string", "boolean", "object"]


class InvalidParameterError(Exception):
    name: str
    expected_kind: str

    def __init__(self, name: str, expected_kind: str):
        self.name = name
        self.expected_kind = expected_kind
        super().__init__(f"Parameter '{name}' is not a {expected_kind}")


def _matches(value: Any, kind: ParameterKind) -> bool:
    match kind:
        case "string":
            return isinstance(value, str)
        case "boolean":
            return isinstance(value, bool)
        case "object":
            return isinstance(value, Mapping)
        case _:
            raise ValueError(f"Unknown parameter kind {kind}")


def check_parameter(value: Any, name: str, kind: ParameterKind) -> None:
    """
    Check that `value` is of the expected kind.

    Raises
    ------
    InvalidParameterError
        If it is not.
    """
    if not _matches(value, kind):
        raise InvalidParameterError(name=name, expected_kind=kind)


def check_non_empty_string(value: Any, name: str) -> None:
    check_parameter(value, name, "string")

    if not value:
        raise InvalidParameterError(name=name, expected_kind="non-empty string")
