"""letlang: a tree-walking evaluator for the LET expression language.

Build an expression tree from letlang.evaluator.expressions, create a root
environment and evaluate:

    from letlang import evaluate, create_root_environment
    from letlang.evaluator.expressions import Add, Const

    evaluate(Add(Const(1), Const(2)), create_root_environment())  # NumVal(value=3)
"""

from letlang.evaluator import Closure, Environment, LetEvaluator, create_root_environment, evaluate
from letlang.system.values import BoolVal, ListVal, NumVal

__all__ = [
    "BoolVal",
    "Closure",
    "Environment",
    "LetEvaluator",
    "ListVal",
    "NumVal",
    "create_root_environment",
    "evaluate",
]
