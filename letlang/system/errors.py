"""
System-wide custom error types.
"""
from typing import Any, Optional


class LetEvaluationError(Exception):
    """
    Base class for failures raised while evaluating a LET expression tree.
    Every error is raised at the point of detection and propagates unchanged
    to the caller of evaluate().
    """
    def __init__(self, message: str, expression: Any = None, error_details: str = ""):
        """
        Initializes the LetEvaluationError.

        Args:
            message: A high-level error message describing the evaluation failure.
            expression: The expression node (or a description of it) being evaluated
                        when the error occurred. Nodes are only rendered here, once
                        the error is actually raised.
            error_details: Specific details about the error.
        """
        full_message = f"{message}"
        if expression is not None and expression != "":
            rendered = expression if isinstance(expression, str) else repr(expression)
            full_message += f"\nExpression: '{rendered}'"
        if error_details:
            full_message += f"\nDetails: {error_details}"
        super().__init__(full_message)
        self.message = message
        self.expression = expression
        self.error_details = error_details


class UnboundVariable(LetEvaluationError):
    """Raised when a name is absent through the entire scope chain."""
    def __init__(self, name: str, expression: Any = None):
        super().__init__(f"Unbound variable: '{name}' is not defined.", expression)
        self.name = name


class ArityMismatch(LetEvaluationError):
    """Raised when an unpack names a different number of identifiers than the list holds."""
    def __init__(self, expected: int, actual: int, expression: Any = None):
        super().__init__(
            f"Malformed unpack expression: {expected} identifier(s) for a list of {actual} element(s).",
            expression,
        )
        self.expected = expected
        self.actual = actual


class TypeMismatch(LetEvaluationError):
    """Raised when an operator or accessor receives an operand of the wrong kind."""
    def __init__(self, expected: str, got: object, expression: Any = None, error_details: str = ""):
        super().__init__(f"Type mismatch: expected {expected}, got {type(got).__name__}.", expression, error_details)
        self.expected = expected
        self.got = got


class EmptyListAccess(LetEvaluationError):
    """Raised by car (and by cdr in strict mode) on an empty list."""
    def __init__(self, accessor: str, expression: Any = None):
        super().__init__(f"'{accessor}' applied to an empty list.", expression)
        self.accessor = accessor


class NoMatchingClause(LetEvaluationError):
    """Raised when no clause of a cond has a true test."""
    def __init__(self, clause_count: int, expression: Any = None):
        super().__init__(f"No matching clause among {clause_count} cond clause(s).", expression)
        self.clause_count = clause_count


class DivisionByZero(LetEvaluationError):
    def __init__(self, dividend: Optional[object] = None, expression: Any = None):
        super().__init__(f"Division by zero (dividend: {dividend}).", expression)
        self.dividend = dividend
