"""Tests for runtime value models."""
import pytest
from pydantic import ValidationError

from letlang.system.errors import TypeMismatch
from letlang.system.values import BoolVal, ListVal, NumVal, unwrap_bool, unwrap_list, unwrap_number


def test_values_compare_by_payload():
    assert NumVal(5) == NumVal(5)
    assert NumVal(5) != NumVal(6)
    assert BoolVal(True) == BoolVal(True)
    assert ListVal([NumVal(1)]) == ListVal((NumVal(1),))

def test_values_of_different_kinds_differ():
    assert NumVal(1) != BoolVal(True)
    assert ListVal([]) != NumVal(0)

def test_values_are_frozen():
    with pytest.raises(ValidationError):
        NumVal(1).value = 2

def test_num_val_keeps_int_and_float():
    assert isinstance(NumVal(3).value, int)
    assert isinstance(NumVal(3.5).value, float)

@pytest.mark.parametrize("model, payload", [
    (NumVal, True),
    (NumVal, "5"),
    (BoolVal, 1),
    (BoolVal, "true"),
])
def test_scalar_payloads_are_not_coerced(model, payload):
    with pytest.raises(ValidationError):
        model(payload)

def test_list_val_stores_tuple():
    value = ListVal([NumVal(1), NumVal(2)])
    assert value.value == (NumVal(1), NumVal(2))
    assert len(value) == 2

def test_string_forms():
    assert str(NumVal(7)) == "7"
    assert str(BoolVal(True)) == "#t"
    assert str(BoolVal(False)) == "#f"
    assert str(ListVal([NumVal(1), ListVal([]), BoolVal(False)])) == "(1 () #f)"

# --- unwrap helpers ---

def test_unwrap_matching_kinds():
    assert unwrap_number(NumVal(4)) == 4
    assert unwrap_bool(BoolVal(False)) is False
    assert unwrap_list(ListVal([NumVal(1)])) == (NumVal(1),)

@pytest.mark.parametrize("unwrap, value, expected", [
    (unwrap_number, BoolVal(True), "a number"),
    (unwrap_number, ListVal([]), "a number"),
    (unwrap_bool, NumVal(1), "a boolean"),
    (unwrap_list, NumVal(1), "a list"),
    (unwrap_list, None, "a list"),
])
def test_unwrap_mismatch(unwrap, value, expected):
    with pytest.raises(TypeMismatch) as exc_info:
        unwrap(value, "expr")
    assert exc_info.value.expected == expected
    assert exc_info.value.got is value
    assert exc_info.value.expression == "expr"
