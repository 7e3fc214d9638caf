import pytest

from lispir.errors import LispirUnboundSymbol
from lispir.types.environment import Environment
from lispir.types.symbol import Symbol


def test_new_environment_is_empty_root():
    env = Environment()
    assert env.outer is None
    assert env.vars == {}
    assert env.get("x") is None


def test_get_walks_parent_chain():
    root = Environment()
    root.set("x", 1)
    child = Environment.extend(root)
    grandchild = Environment.extend(child)
    assert grandchild.get("x") == 1
    assert grandchild.get(Symbol("x")) == 1
    assert grandchild.depth() == 2


def test_set_shadows_instead_of_writing_through():
    root = Environment()
    root.set("x", 1)
    child = Environment.extend(root)
    child.set("x", 2)
    assert child.get("x") == 2
    assert root.get("x") == 1
    del child
    assert root.get("x") == 1


def test_set_overwrites_local_binding():
    env = Environment()
    env.set("x", 1)
    env.set("x", 5)
    assert env.get("x") == 5
    assert list(env.vars) == [Symbol("x")]


def test_siblings_share_parent_but_not_bindings():
    root = Environment()
    a = Environment.extend(root)
    b = Environment.extend(root)
    a.set("y", 1)
    assert b.get("y") is None
    assert root.get("y") is None


def test_lookup_raises_for_unbound():
    env = Environment.extend(Environment())
    with pytest.raises(LispirUnboundSymbol, match="Undefined symbol: nope"):
        env.lookup(Symbol("nope"))


def test_falsy_values_are_found():
    env = Environment()
    env.set("f", False)
    env.set("z", 0)
    assert Environment.extend(env).get("f") is False
    assert Environment.extend(env).get("z") == 0


def test_str_and_repr_show_chain():
    root = Environment()
    root.set("x", 1)
    child = Environment.extend(root)
    child.set("y", 2)
    assert str(root) == "{x: 1}"
    assert str(child) == "{y: 2} -> ..."
    assert repr(child) == "<Environment chain: {y: 2} -> {x: 1}>"
