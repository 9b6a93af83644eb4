import pytest

from lang1.errors import ArityError
from lang1.types.environment import Environment
from lang1.types.symbol import Symbol
from lang1.types.unbound import Unbound


def test_define_and_lookup(env):
    env.define(Symbol("x"), 42)
    assert env.lookup(Symbol("x")) == 42


def test_define_overwrites(env):
    env.define(Symbol("x"), 1)
    env.define(Symbol("x"), 2)
    assert env.lookup(Symbol("x")) == 2


def test_lookup_unbound_is_soft(env):
    assert env.lookup(Symbol("nope")) is Unbound
    assert not Unbound


def test_lookup_walks_outer_chain(env):
    env.define(Symbol("x"), 1)
    child = Environment(outer=env)
    grandchild = Environment(outer=child)
    assert grandchild.lookup(Symbol("x")) == 1
    assert grandchild.find(Symbol("x")) is env
    assert grandchild.find(Symbol("y")) is None


def test_define_is_local_only(env):
    env.define(Symbol("x"), 1)
    child = Environment(outer=env)
    child.define(Symbol("x"), 2)
    assert child.lookup(Symbol("x")) == 2
    assert env.lookup(Symbol("x")) == 1


def test_extend_binds_positionally(env):
    frame = Environment.extend(env, [Symbol("a"), Symbol("b")], [1, 2.5])
    assert frame.outer is env
    assert frame.lookup(Symbol("a")) == 1
    assert frame.lookup(Symbol("b")) == 2.5
    assert env.lookup(Symbol("a")) is Unbound


def test_extend_without_params(env):
    frame = Environment.extend(env, [], [])
    assert frame.vars == {}


@pytest.mark.parametrize("args", [[], [1, 2, 3]])
def test_extend_arity_mismatch(env, args):
    with pytest.raises(ArityError):
        Environment.extend(env, [Symbol("a"), Symbol("b")], args)


def test_depth(env):
    assert env.depth() == 0
    assert Environment(outer=Environment(outer=env)).depth() == 2


def test_str_and_repr(env):
    env.define(Symbol("x"), 1)
    child = Environment(outer=env)
    child.define(Symbol("y"), 2)
    assert str(child) == "{y: 2} -> ..."
    assert repr(child) == "<Environment chain: {y: 2} -> {x: 1}>"
