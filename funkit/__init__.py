"""
funkit: currying, composition, container traversal and SKI combinators.
"""
from funkit.funkit_datatypes import (
    Fn, CurriedChain, FunkitCallable, ContainerKind, callable_of, kind_of,
    FunkitError, ArityError, ShapeError, TypeMismatchError, UnsupportedError, InvalidArgsError,
)
from funkit.funkit_curry import curry, compose, flip
from funkit.funkit_traverse import fold, map, filter, each
from funkit.funkit_combinators import apply_left, apply_all, term, I, S, K, B, C, M
from funkit.funkit_printer import Printer

__all__ = [
    "Fn", "CurriedChain", "FunkitCallable", "ContainerKind", "callable_of", "kind_of",
    "FunkitError", "ArityError", "ShapeError", "TypeMismatchError", "UnsupportedError", "InvalidArgsError",
    "curry", "compose", "flip",
    "fold", "map", "filter", "each",
    "apply_left", "apply_all", "term", "I", "S", "K", "B", "C", "M",
    "Printer",
]
