"""Runtime value models for the LET evaluator.

Values are immutable Pydantic models that compare by payload. The evaluator
only relies on the small contract below: numeric, boolean and list
construction, and extraction of each payload with a typed failure when the
value is of another kind.
"""
from typing import Any, Tuple, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt

from letlang.system.errors import TypeMismatch


class Value(BaseModel):
    """Base class for every runtime value."""
    model_config = ConfigDict(frozen=True)

    def __init__(self, value: Any, **data: Any):
        super().__init__(value=value, **data)


class NumVal(Value):
    """Numeric value (integer or float payload)."""
    value: Union[StrictInt, StrictFloat]

    def __str__(self) -> str:
        return str(self.value)


class BoolVal(Value):
    """Boolean value."""
    value: StrictBool

    def __str__(self) -> str:
        return "#t" if self.value else "#f"


class ListVal(Value):
    """Ordered list of values. Elements may be any runtime value, closures included."""
    value: Tuple[Any, ...]

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return "(" + " ".join(str(item) for item in self.value) + ")"


def unwrap_number(value: Any, expression: Any = None) -> Union[int, float]:
    """Return the numeric payload of a NumVal, raising TypeMismatch for anything else."""
    if not isinstance(value, NumVal):
        raise TypeMismatch("a number", value, expression)
    return value.value


def unwrap_bool(value: Any, expression: Any = None) -> bool:
    """Return the payload of a BoolVal, raising TypeMismatch for anything else."""
    if not isinstance(value, BoolVal):
        raise TypeMismatch("a boolean", value, expression)
    return value.value


def unwrap_list(value: Any, expression: Any = None) -> Tuple[Any, ...]:
    """Return the element tuple of a ListVal, raising TypeMismatch for anything else."""
    if not isinstance(value, ListVal):
        raise TypeMismatch("a list", value, expression)
    return value.value
