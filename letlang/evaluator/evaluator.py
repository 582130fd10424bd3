"""
LET expression evaluator.
Walks an expression tree recursively, threading environments down and
returning values up. Dispatches on the node type to one handler per variant.
"""

import functools
import logging
from typing import Any, Callable, Dict, Optional

from letlang.config.logging_config import setup_logging
from letlang.config.settings import EvaluatorSettings
from letlang.evaluator.closure import Closure
from letlang.evaluator.environment import Environment
from letlang.evaluator.expressions import (
    Car, Cdr, Conds, Const, Expression, If, Let, LetBinding, List, Minus,
    Null, Procedure, ProcedureCall, Unpack, Var, Zero,
)
from letlang.evaluator.operators import BINARY_OPERATIONS, evaluate_binary
from letlang.system.errors import (
    ArityMismatch, EmptyListAccess, LetEvaluationError, NoMatchingClause, TypeMismatch,
)
from letlang.system.values import (
    BoolVal, ListVal, NumVal, unwrap_bool, unwrap_list, unwrap_number,
)

logger = logging.getLogger(__name__)


class LetEvaluator:
    """
    Evaluates LET expression trees against an Environment.

    The only public operation is evaluate(expression, environment). Failures
    raise a LetEvaluationError subclass at the point of detection; nothing is
    recovered or retried.
    """

    def __init__(self, settings: Optional[EvaluatorSettings] = None):
        """
        Initializes the evaluator.

        Args:
            settings: Behaviour switches; defaults to EvaluatorSettings().
        """
        self.settings = settings if settings is not None else EvaluatorSettings()

        self.NODE_HANDLERS: Dict[type, Callable[[Any, Environment], Any]] = {
            Const: self._eval_const,
            Var: self._eval_var,
            Minus: self._eval_minus,
            Zero: self._eval_zero,
            If: self._eval_if,
            Conds: self._eval_conds,
            LetBinding: self._eval_let_binding,
            Let: self._eval_let,
            Procedure: self._eval_procedure,
            ProcedureCall: self._eval_procedure_call,
            List: self._eval_list,
            Unpack: self._eval_unpack,
            Car: self._eval_car,
            Cdr: self._eval_cdr,
            Null: self._eval_null,
        }
        for operator_class in BINARY_OPERATIONS:
            self.NODE_HANDLERS[operator_class] = functools.partial(evaluate_binary, self)
        logger.info("LetEvaluator initialized (strict_cdr=%s).", self.settings.strict_cdr)

    @classmethod
    def from_env(cls) -> 'LetEvaluator':
        """Build an evaluator from LET_* environment variables and configure logging to match."""
        settings = EvaluatorSettings.from_env()
        setup_logging(settings)
        return cls(settings)

    def evaluate(self, expression: Expression, environment: Environment) -> Any:
        """
        Evaluates an expression tree within the given environment.

        Args:
            expression: Root of a well-formed expression tree.
            environment: The environment the root is evaluated in.

        Returns:
            The resulting value (NumVal, BoolVal, ListVal or Closure).

        Raises:
            LetEvaluationError: UnboundVariable, ArityMismatch, TypeMismatch,
                EmptyListAccess, NoMatchingClause or DivisionByZero.
        """
        logger.debug("Evaluating expression: %r", expression)
        try:
            result = self._eval(expression, environment)
        except LetEvaluationError as e:
            logger.error("LET evaluation error: %s: %s", type(e).__name__, e.message)
            raise
        logger.debug("Finished evaluating expression. Result: %r", result)
        return result

    def _eval(self, node: Any, env: Environment) -> Any:
        """Internal recursive evaluation: dispatch on the node's type."""
        try:
            handler = self.NODE_HANDLERS[type(node)]
        except KeyError:
            raise TypeMismatch("an evaluable expression", node, node) from None
        return handler(node, env)

    # --- Literals, variables, unary forms ---

    def _eval_const(self, node: Const, env: Environment) -> NumVal:
        return NumVal(node.value)

    def _eval_var(self, node: Var, env: Environment) -> Any:
        return env.lookup(node.name)

    def _eval_minus(self, node: Minus, env: Environment) -> NumVal:
        # Re-wraps the operand unchanged; minus does not negate.
        return NumVal(unwrap_number(self._eval(node.expression, env), node))

    def _eval_zero(self, node: Zero, env: Environment) -> BoolVal:
        return BoolVal(unwrap_number(self._eval(node.expression, env), node) == 0)

    # --- Control flow ---

    def _eval_if(self, node: If, env: Environment) -> Any:
        condition = unwrap_bool(self._eval(node.test, env), node)
        chosen_branch = node.then_branch if condition is True else node.else_branch
        logger.debug("  'if' condition -> %s", condition)
        return self._eval(chosen_branch, env)

    def _eval_conds(self, node: Conds, env: Environment) -> Any:
        for i, clause in enumerate(node.clauses):
            if unwrap_bool(self._eval(clause.test, env), clause):
                logger.debug("  'conds' matched clause %d", i + 1)
                return self._eval(clause.value, env)
        raise NoMatchingClause(len(node.clauses), node)

    # --- Binding constructs ---

    def _eval_let_binding(self, node: LetBinding, env: Environment) -> Any:
        value = self._eval(node.value, env)
        env.bind(node.var.name, value)
        return value

    def _eval_let(self, node: Let, env: Environment) -> Any:
        let_env = env.extend()
        for binding in node.bindings:
            self._eval_let_binding(binding, let_env)
        return self._eval(node.body, let_env)

    def _eval_procedure(self, node: Procedure, env: Environment) -> Closure:
        return Closure(node, env)

    def _eval_procedure_call(self, node: ProcedureCall, env: Environment) -> Any:
        closure = self._eval(node.procedure, env)
        if not isinstance(closure, Closure):
            raise TypeMismatch("a procedure", closure, node)
        argument = self._eval(node.argument, env)
        call_env = closure.definition_env.extend()
        call_env.bind(closure.parameter_name, argument)
        return self._eval(closure.body, call_env)

    # --- Lists ---

    def _eval_list(self, node: List, env: Environment) -> ListVal:
        return ListVal([self._eval(element, env) for element in node.elements])

    def _eval_unpack(self, node: Unpack, env: Environment) -> Any:
        elements = unwrap_list(self._eval(node.packed, env), node)
        if len(node.identifiers) != len(elements):
            raise ArityMismatch(len(node.identifiers), len(elements), node)
        unpack_env = env.extend()
        for identifier, value in zip(node.identifiers, elements):
            unpack_env.bind(identifier.name, value)
        return self._eval(node.body, unpack_env)

    def _eval_car(self, node: Car, env: Environment) -> Any:
        elements = unwrap_list(self._eval(node.expression, env), node)
        if not elements:
            raise EmptyListAccess("car", node)
        return elements[0]

    def _eval_cdr(self, node: Cdr, env: Environment) -> ListVal:
        elements = unwrap_list(self._eval(node.expression, env), node)
        if not elements and self.settings.strict_cdr:
            raise EmptyListAccess("cdr", node)
        return ListVal(elements[1:])

    def _eval_null(self, node: Null, env: Environment) -> BoolVal:
        return BoolVal(len(unwrap_list(self._eval(node.expression, env), node)) == 0)


_default_evaluator: Optional[LetEvaluator] = None


def evaluate(expression: Expression, environment: Environment) -> Any:
    """Evaluate `expression` in `environment` with a shared default LetEvaluator."""
    global _default_evaluator
    if _default_evaluator is None:
        _default_evaluator = LetEvaluator()
    return _default_evaluator.evaluate(expression, environment)
