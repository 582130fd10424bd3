"""
Unit tests for the Environment class.
"""

import pytest

from letlang.evaluator.environment import Environment, create_root_environment
from letlang.system.errors import UnboundVariable
from letlang.system.values import NumVal

# --- Test Initialization ---

def test_init_no_parent():
    """Test creating a root environment."""
    env = Environment()
    assert env.parent is None
    assert env.get_local_bindings() == {}

def test_init_with_parent():
    """Test creating a child environment."""
    parent_env = Environment()
    child_env = Environment(parent=parent_env)
    assert child_env.parent is parent_env
    assert child_env.get_local_bindings() == {}

def test_create_root_environment_copies_bindings():
    """Test that the root factory does not alias the caller's dictionary."""
    initial = {"x": NumVal(1)}
    env = create_root_environment(initial)
    env.bind("y", NumVal(2))
    assert env.parent is None
    assert env.lookup("x") == NumVal(1)
    assert initial == {"x": NumVal(1)}

# --- Test bind ---

def test_bind_new_variable():
    """Test binding a new variable."""
    env = Environment()
    env.bind("x", NumVal(10))
    assert env.get_local_bindings() == {"x": NumVal(10)}

def test_bind_rebinding_overwrites():
    """Test rebinding an existing variable in the same frame."""
    env = Environment()
    env.bind("x", NumVal(10))
    env.bind("x", NumVal(20))
    assert env.get_local_bindings() == {"x": NumVal(20)}

def test_bind_writes_current_frame_only():
    """Binding a name that an ancestor defines shadows it instead of mutating the ancestor."""
    parent_env = Environment()
    parent_env.bind("x", NumVal(1))
    child_env = parent_env.extend()
    child_env.bind("x", NumVal(2))

    assert child_env.lookup("x") == NumVal(2)
    assert parent_env.lookup("x") == NumVal(1)
    assert parent_env.get_local_bindings() == {"x": NumVal(1)}

# --- Test lookup ---

def test_lookup_local_variable():
    """Test looking up a variable bound in the local frame."""
    env = Environment()
    env.bind("x", NumVal(10))
    assert env.lookup("x") == NumVal(10)

def test_lookup_grandparent_variable():
    """Test looking up a variable bound two levels up."""
    grandparent_env = Environment()
    grandparent_env.bind("g", NumVal(5))
    parent_env = grandparent_env.extend()
    parent_env.bind("p", NumVal(6))
    child_env = parent_env.extend()

    assert child_env.lookup("g") == NumVal(5)
    assert child_env.lookup("p") == NumVal(6)

def test_lookup_not_found_at_root():
    """Test looking up a missing name in a root environment."""
    env = Environment()
    with pytest.raises(UnboundVariable, match="'z' is not defined") as exc_info:
        env.lookup("z")
    assert exc_info.value.name == "z"

def test_lookup_not_found_in_chain():
    """Test looking up a missing name through a nested chain."""
    parent_env = Environment(bindings={"a": NumVal(1)})
    child_env = parent_env.extend()
    with pytest.raises(UnboundVariable):
        child_env.lookup("z")

# --- Test extend ---

def test_extend_creates_empty_child():
    """Test that extend creates an empty frame linked to its parent."""
    parent_env = Environment(bindings={"p": NumVal(1)})
    child_env = parent_env.extend()

    assert isinstance(child_env, Environment)
    assert child_env.parent is parent_env
    assert child_env.get_local_bindings() == {}
    assert child_env.lookup("p") == NumVal(1)

def test_extend_sees_later_parent_bindings():
    """Frames are linked, not copied: a parent binding made after extend is visible to the child."""
    parent_env = Environment()
    child_env = parent_env.extend()
    parent_env.bind("late", NumVal(3))
    assert child_env.lookup("late") == NumVal(3)

def test_repr_lists_local_names():
    """Test the debugging representation."""
    env = Environment(bindings={"x": NumVal(1)})
    assert "bindings=['x']" in repr(env)
    assert "parent=None" in repr(env)
