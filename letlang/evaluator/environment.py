"""
Scope-chain environment for LET evaluation.
Each Environment holds one frame of bindings and a link to its enclosing scope.
"""

import logging
from typing import Any, Dict, Optional

from letlang.system.errors import UnboundVariable

logger = logging.getLogger(__name__)

class Environment:
    """
    Represents one frame of a lexical scope chain.

    Lookups search this frame first and then delegate to the outer frame.
    Bindings always land in this frame; an outer frame is never mutated
    through a child. Frames are linked, never flattened, so extending an
    environment is O(1) and closures share their captured frames by reference.
    """

    def __init__(
        self,
        bindings: Optional[Dict[str, Any]] = None,
        parent: Optional['Environment'] = None
    ):
        """
        Initializes a new Environment.

        Args:
            bindings: An optional dictionary of initial variable bindings for this frame.
            parent: An optional enclosing environment. None marks the root of the chain.
        """
        self._bindings: Dict[str, Any] = bindings if bindings is not None else {}
        self._parent: Optional['Environment'] = parent
        logger.debug("Initialized Environment (Parent: %s, Bindings: %s)", parent is not None, list(self._bindings))

    @property
    def parent(self) -> Optional['Environment']:
        return self._parent

    def lookup(self, name: str) -> Any:
        """
        Looks up a variable name in this frame and then in the enclosing frames.

        Args:
            name: The variable name to look up.

        Returns:
            The value bound to the name in the innermost frame that defines it.

        Raises:
            UnboundVariable: If no frame in the chain binds the name.
        """
        if name in self._bindings:
            value = self._bindings[name]
            logger.debug("  Found '%s' in local bindings of env id=%s. Value type: %s", name, id(self), type(value).__name__)
            return value
        elif self._parent is not None:
            logger.debug("  '%s' not found locally, checking parent env id=%s", name, id(self._parent))
            return self._parent.lookup(name)
        else:
            logger.debug("  '%s' not found locally and no parent for env id=%s.", name, id(self))
            raise UnboundVariable(name)

    def bind(self, name: str, value: Any) -> None:
        """
        Binds (or rebinds) a variable in the *current* frame.
        Enclosing frames are never searched or modified.

        Args:
            name: The variable name.
            value: The evaluated value to associate with the name.
        """
        logger.debug("Binding '%s' = %s in env %s", name, type(value).__name__, id(self))
        self._bindings[name] = value

    def extend(self) -> 'Environment':
        """
        Creates a new, empty child frame whose parent is this environment.

        Returns:
            A new Environment representing the child scope.
        """
        logger.debug("Extending env %s", id(self))
        return Environment(parent=self)

    def get_local_bindings(self) -> Dict[str, Any]:
        """Returns a copy of the bindings defined directly in this frame."""
        return self._bindings.copy()

    def __repr__(self) -> str:
        parent_id = id(self._parent) if self._parent else None
        return f"<Environment id={id(self)} parent={parent_id} bindings={list(self._bindings.keys())}>"


def create_root_environment(bindings: Optional[Dict[str, Any]] = None) -> Environment:
    """Create the outermost environment of a scope chain, optionally pre-populated."""
    return Environment(bindings=dict(bindings) if bindings else None)
