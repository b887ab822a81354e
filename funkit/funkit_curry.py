"""
Builds new callables out of existing ones: curried chains, composed
pipelines and argument-flipped wrappers.

All shape checks happen here, when the new callable is built, so a
successful `curry`/`compose`/`flip` never fails later on account of the
shapes it was given.
"""
from typing import Any

from funkit.funkit_datatypes import (
    Fn, CurriedChain, ArityError, ShapeError, TypeMismatchError,
    accepts, callable_of, dbg, type_name,
)


def curry(f: Any) -> CurriedChain:
    """Turns an n-ary callable into a chain of unary steps.

    `curry(f)(a1)(a2)...(an) == f(a1, ..., an)`. A chain is already curried
    and is returned as is.
    """
    if isinstance(f, CurriedChain):
        return f
    fn = callable_of(f)
    if fn.arity <= 0:
        raise ArityError(f"{fn.name} must take at least one argument", expected=1, actual=fn.arity)
    dbg("curry", fn.name, "arity", fn.arity)
    return CurriedChain(fn)


def compose(f: Any, g: Any) -> Fn:
    """Returns `h` with `h(*args) == f(g(*args))`.

    `f` must take as many arguments as `g` returns values, and each of `f`'s
    parameter types must accept the matching result type of `g`. When `g`
    returns several values its tuple is spread over `f`'s parameters.
    """
    fn, gn = callable_of(f), callable_of(g)
    spread = len(gn.returns)
    if fn.arity != spread:
        raise ArityError(f"{fn.name} takes {fn.arity} args, but {gn.name} returns {spread} args",
                         expected=fn.arity, actual=spread)
    for position, (want, got) in enumerate(zip(fn.params, gn.returns)):
        if not accepts(want, got):
            raise TypeMismatchError(
                f"{fn.name} takes <{type_name(want)}> at position {position}, but {gn.name} returns <{type_name(got)}>",
                position=position, expected=want, actual=got,
            )
    dbg("compose", fn.name, gn.name, "spread", spread)

    def composed(*args):
        out = gn(*args)
        if spread == 1:
            return fn(out)
        if spread == 0:
            return fn()
        if not isinstance(out, tuple) or len(out) != spread:
            raise ShapeError(f"{gn.name} must return a tuple of {spread} values, got {out!r}")
        return fn(*out)

    return Fn(composed, arity=gn.arity, params=gn.params, returns=fn.returns, name=f"compose({fn.name}, {gn.name})")


def flip(f: Any) -> Fn:
    """Returns `f'` with `f'(a, b, *rest) == f(b, a, *rest)`."""
    fn = callable_of(f)
    if fn.arity < 2:
        raise ArityError(f"{fn.name} must take at least two arguments", expected=2, actual=fn.arity)

    def flipped(a, b, *rest):
        return fn(b, a, *rest)

    params = (fn.params[1], fn.params[0]) + fn.params[2:]
    return Fn(flipped, arity=fn.arity, params=params, returns=fn.returns, name=f"flip({fn.name})")
