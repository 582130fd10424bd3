"""Expression tree for the LET language.

Every variant is an immutable Pydantic model holding only its syntactic
children. Nodes accept their fields positionally, in declaration order, or by
keyword:

    Let([LetBinding(Var("x"), Const(5))], Add(Var("x"), Const(1)))
    Let(bindings=[LetBinding(var="x", value=Const(5))], body=Var("x"))

Identifiers (let variables, procedure parameters, unpack targets) are `Var`
nodes; a plain string is accepted wherever an identifier is expected.
Sequences are stored as tuples.
"""
from typing import Any, Iterable, Tuple, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr, create_model, field_validator


class Node(BaseModel):
    """Frozen model with positional construction."""
    model_config = ConfigDict(frozen=True)

    def __init__(self, *args: Any, **data: Any):
        if args:
            field_names = list(type(self).model_fields)
            if len(args) > len(field_names):
                raise TypeError(
                    f"{type(self).__name__} takes at most {len(field_names)} positional arguments ({len(args)} given)"
                )
            for field_name, arg in zip(field_names, args):
                if field_name in data:
                    raise TypeError(f"{type(self).__name__} got multiple values for '{field_name}'")
                data[field_name] = arg
        super().__init__(**data)


class Expression(Node):
    """Base class of all evaluable LET expressions."""


def _as_var(identifier: Any) -> Any:
    if isinstance(identifier, str):
        return Var(identifier)
    return identifier


# --- Literals, variables, unary forms ---

class Const(Expression):
    """Numeric literal."""
    value: Union[StrictInt, StrictFloat]


class Var(Expression):
    """Variable reference; also used as the identifier in binding positions."""
    name: StrictStr


class Minus(Expression):
    expression: Expression


class Zero(Expression):
    expression: Expression


# --- Control flow ---

class If(Expression):
    test: Expression
    then_branch: Expression
    else_branch: Expression


class CondClause(Node):
    """One `test => value` arm of a Conds expression."""
    test: Expression
    value: Expression


class Conds(Expression):
    """Ordered clauses; the first clause whose test is true supplies the result."""
    clauses: Tuple[CondClause, ...]


# --- Binding constructs ---

class LetBinding(Expression):
    """Binds `var` to the value of `value` in the environment it is evaluated in."""
    var: Var
    value: Expression

    @field_validator("var", mode="before")
    @classmethod
    def coerce_var(cls, var: Any) -> Any:
        return _as_var(var)


class Let(Expression):
    """All bindings share a single new scope, in which the body is evaluated."""
    bindings: Tuple[LetBinding, ...]
    body: Expression


class Procedure(Expression):
    """Single-parameter procedure. Evaluates to a Closure over the current environment."""
    parameter: Var
    body: Expression

    @field_validator("parameter", mode="before")
    @classmethod
    def coerce_parameter(cls, parameter: Any) -> Any:
        return _as_var(parameter)


class ProcedureCall(Expression):
    procedure: Expression
    argument: Expression


# --- Lists ---

class List(Expression):
    elements: Tuple[Expression, ...]


class Unpack(Expression):
    """Destructures a list positionally into `identifiers` for the body."""
    identifiers: Tuple[Var, ...]
    packed: Expression
    body: Expression

    @field_validator("identifiers", mode="before")
    @classmethod
    def coerce_identifiers(cls, identifiers: Any) -> Any:
        if isinstance(identifiers, (list, tuple)):
            return tuple(_as_var(identifier) for identifier in identifiers)
        return identifiers


class Car(Expression):
    expression: Expression


class Cdr(Expression):
    expression: Expression


class Null(Expression):
    expression: Expression


class Cons(Node):
    """
    Construction helper for building flat sequences out of nested cons cells.
    Not an Expression: the evaluator rejects it.
    """
    head: Tuple[Any, ...]
    tail: Union['Cons', Tuple[Any, ...]]

    def flatten(self) -> Tuple[Any, ...]:
        """Concatenate `head` with the flattened `tail`."""
        if isinstance(self.tail, Cons):
            rest = self.tail.flatten()
        else:
            rest = tuple(_flatten_items(self.tail))
        return tuple(self.head) + rest


def _flatten_items(items: Iterable[Any]) -> Iterable[Any]:
    for item in items:
        if isinstance(item, Cons):
            yield from item.flatten()
        elif isinstance(item, (list, tuple)):
            yield from _flatten_items(item)
        else:
            yield item


# --- Binary operators ---

class BinaryOperator(Expression):
    """Common shape of every binary operator: two operand expressions."""
    first: Expression
    second: Expression


def binary_operator_class(name: str, doc: str) -> type:
    """Generate a BinaryOperator variant. Its semantics live in letlang.evaluator.operators."""
    return create_model(name, __base__=BinaryOperator, __module__=__name__, __doc__=doc)


Diff = binary_operator_class("Diff", "Numeric subtraction.")
Add = binary_operator_class("Add", "Numeric addition.")
Mult = binary_operator_class("Mult", "Numeric multiplication.")
Div = binary_operator_class("Div", "Numeric division; floor division when both operands are integers.")

EqualTo = binary_operator_class("EqualTo", "Numeric equality.")
GreaterThan = binary_operator_class("GreaterThan", "Numeric greater-than.")
LessThan = binary_operator_class("LessThan", "Numeric less-than.")
