"""
Binary operator semantics.

Every binary operator shares one rule: evaluate both operands in the same
environment, unwrap their numeric payloads, apply a primitive and wrap the
result. The table below maps each generated operator class to its primitive
and result wrapper.
"""
import logging
import operator
from typing import Any, Callable, Dict, NamedTuple, Type, Union, TYPE_CHECKING

from letlang.evaluator.environment import Environment
from letlang.evaluator.expressions import (
    Add, BinaryOperator, Diff, Div, EqualTo, GreaterThan, LessThan, Mult,
)
from letlang.system.errors import DivisionByZero
from letlang.system.values import BoolVal, NumVal, Value, unwrap_number

if TYPE_CHECKING:
    from letlang.evaluator.evaluator import LetEvaluator

logger = logging.getLogger(__name__)

Number = Union[int, float]


def divide(dividend: Number, divisor: Number) -> Number:
    """Floor division for two integers, true division otherwise."""
    if divisor == 0:
        raise DivisionByZero(dividend)
    if isinstance(dividend, int) and isinstance(divisor, int):
        return dividend // divisor
    return dividend / divisor


class BinaryOperation(NamedTuple):
    primitive: Callable[[Number, Number], Any]
    wrapper: Type[Value]


BINARY_OPERATIONS: Dict[type, BinaryOperation] = {
    Diff: BinaryOperation(operator.sub, NumVal),
    Add: BinaryOperation(operator.add, NumVal),
    Mult: BinaryOperation(operator.mul, NumVal),
    Div: BinaryOperation(divide, NumVal),
    EqualTo: BinaryOperation(operator.eq, BoolVal),
    GreaterThan: BinaryOperation(operator.gt, BoolVal),
    LessThan: BinaryOperation(operator.lt, BoolVal),
}


def evaluate_binary(evaluator: 'LetEvaluator', expr: BinaryOperator, env: Environment) -> Value:
    """Evaluate both operands, unwrap, combine with the operator's primitive, wrap."""
    operation = BINARY_OPERATIONS[type(expr)]
    first = unwrap_number(evaluator._eval(expr.first, env), expr)
    second = unwrap_number(evaluator._eval(expr.second, env), expr)
    try:
        result = operation.primitive(first, second)
    except DivisionByZero:
        raise DivisionByZero(first, expr) from None
    logger.debug("  %s(%s, %s) -> %s", type(expr).__name__, first, second, result)
    return operation.wrapper(result)
