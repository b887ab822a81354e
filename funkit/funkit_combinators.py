"""
Combinatory logic on top of the currying engine.

`apply_left` applies one argument to a callable of arity 1, 2 or 3: a unary
callable is reduced to its result, a binary or ternary one comes back
partially applied. S and K are ordinary Python functions; I, B, C, M and L
are derived from them purely by application, built once when this module
is imported.

Evaluation is strict. Expressions that only terminate under lazy
evaluation do not terminate here either, which is why the fixpoint
combinator `S L L` is not provided.
"""
from types import MappingProxyType
from typing import Any

from funkit.funkit_curry import curry
from funkit.funkit_datatypes import InvalidArgsError, callable_of, dbg


def apply_left(x: Any, y: Any) -> Any:
    """Applies `y` to `x`, reducing when `x` is unary."""
    fn = callable_of(x)
    if fn.arity not in (1, 2, 3):
        raise InvalidArgsError(f"{fn.name} takes {fn.arity} argument(s); only 1, 2 or 3 can be applied",
                               arity=fn.arity)
    dbg("apply_left", fn, "arity", fn.arity)
    return curry(fn)(y)


def apply_all(x: Any, *ys: Any) -> Any:
    """Left-folds `apply_left` over `ys`, starting from `x`.

    The first failing application raises; no partial term is returned.
    """
    term = x
    for y in ys:
        term = apply_left(term, y)
    return term


# =================================================================
# Basis
# =================================================================

def K(x, y):
    return x


def S(x, y, z):
    xz = apply_left(x, z)
    yz = apply_left(y, z)
    return apply_left(xz, yz)


# =================================================================
# Derived combinators
# =================================================================

def I(x):
    """Identity: `S K K x == x`."""
    return apply_all(_TERMS["I"], x)


def B(f, g, x):
    """Composition: `S (K S) K f g x == f(g(x))`."""
    return apply_all(_TERMS["B"], f, g, x)


def C(f, x, y):
    """Flip: `S (B B S) (K K) f x y == f(y, x)`."""
    return apply_all(_TERMS["C"], f, x, y)


def M(f):
    """Self-application: `S I I f == f(f)`."""
    return apply_all(_TERMS["M"], f)


def L(f, g):
    # C B M f g == f(g(g))
    return apply_all(_TERMS["L"], f, g)


def _initialize():
    # Each term may only refer to combinators defined above it.
    terms = {}
    terms["I"] = apply_all(S, K, K)
    terms["B"] = apply_all(S, apply_left(K, S), K)
    terms["C"] = apply_all(S, apply_all(B, B, S), apply_left(K, K))
    terms["M"] = apply_all(S, I, I)
    terms["L"] = apply_all(C, B, M)
    return MappingProxyType(terms)


_TERMS = _initialize()


def term(name: str):
    """Returns the point-free term a derived combinator reduces through."""
    try:
        return _TERMS[name]
    except KeyError:
        raise KeyError(f"unknown combinator term '{name}'") from None
