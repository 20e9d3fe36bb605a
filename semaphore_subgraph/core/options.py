"""
Options that select which group fields are queried, and which groups.
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, ValidationError
from pydantic.alias_generators import to_camel, to_snake

from .parameters import InvalidParameterError

TimeOperator = Literal["timestamp", "timestamp_gte", "timestamp_lte"]


class OptionsModel(BaseModel):
    # Options may be spelled in snake_case or camelCase; unknown keys are rejected.
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


class GroupFilters(OptionsModel):
    """
    Predicates for the group list. `admin` is always applied when given; of
    the timestamp family only the first present of `timestamp`,
    `timestamp_gte` and `timestamp_lte` is used.
    """

    admin: StrictStr | None = None
    timestamp: datetime | None = None
    timestamp_gte: datetime | None = None
    timestamp_lte: datetime | None = None

    def time_predicate(self) -> tuple[TimeOperator, datetime] | None:
        if self.timestamp is not None:
            return "timestamp", self.timestamp
        elif self.timestamp_gte is not None:
            return "timestamp_gte", self.timestamp_gte
        elif self.timestamp_lte is not None:
            return "timestamp_lte", self.timestamp_lte

        return None


class GroupOptions(OptionsModel):
    members: StrictBool = False
    verified_proofs: StrictBool = False
    filters: GroupFilters | None = None


def _expected_kind(error_type: str) -> str:
    if error_type == "extra_forbidden":
        return "known option"
    if error_type == "bool_type":
        return "boolean"
    if error_type == "string_type":
        return "string"
    if error_type.startswith("datetime"):
        return "datetime"
    if error_type in ("model_type", "model_attributes_type", "dict_type"):
        return "object"
    return error_type


def parse_options(value: Any) -> GroupOptions:
    """
    Turn the options a caller handed us into a `GroupOptions`.

    Parameters
    ----------
    value: GroupOptions | Mapping | None
        The raw options. `None` means all defaults.

    Raises
    ------
    InvalidParameterError
        Naming the first field that is unknown or has the wrong kind
        (`options` if the value itself is not an object).
    """
    if value is None:
        return GroupOptions()

    try:
        return GroupOptions.model_validate(value)
    except ValidationError as e:
        error = e.errors()[0]
        location = [str(x) for x in error["loc"]]
        if not location:
            name = "options"
        elif error["type"] == "extra_forbidden":
            name = location[-1]
        else:
            name = to_snake(location[-1])
        raise InvalidParameterError(
            name=name, expected_kind=_expected_kind(error["type"])
        ) from e
