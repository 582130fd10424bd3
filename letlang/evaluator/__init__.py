"""Evaluator component: scope-chain environments and recursive evaluation of LET expressions."""

from letlang.evaluator.closure import Closure
from letlang.evaluator.environment import Environment, create_root_environment
from letlang.evaluator.evaluator import LetEvaluator, evaluate

__all__ = ["Closure", "Environment", "LetEvaluator", "create_root_environment", "evaluate"]
