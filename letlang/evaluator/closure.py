"""
Defines the Closure value produced by evaluating a Procedure expression.
"""
import logging

from letlang.evaluator.environment import Environment
from letlang.evaluator.expressions import Expression, Procedure

logger = logging.getLogger(__name__)

class Closure:
    def __init__(self, procedure: Procedure, definition_env: Environment):
        """
        Represents a lexically-scoped single-parameter procedure.

        Each evaluation of a Procedure node builds a new Closure, so the node
        itself stays immutable and two evaluations never share a captured scope.

        Args:
            procedure: The Procedure node supplying the parameter and body.
            definition_env: The Environment active where the procedure was evaluated.
                            It becomes the parent of every call frame.
        """
        self.procedure: Procedure = procedure
        self.definition_env: Environment = definition_env
        logger.debug("Closure created: param=%s, def_env_id=%s", self.parameter_name, id(self.definition_env))

    @property
    def parameter_name(self) -> str:
        return self.procedure.parameter.name

    @property
    def body(self) -> Expression:
        return self.procedure.body

    def __repr__(self):
        return f"<Closure param={self.parameter_name} def_env_id={id(self.definition_env)}>"
