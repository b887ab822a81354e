"""
Defines the core data types for the funkit toolkit.

This module provides the callable handles every other module works with
(`Fn` and `CurriedChain`), the closed set of container kinds the traversal
algorithms dispatch on, and the error taxonomy shared by all operations.
"""

import os
import sys
import inspect
import typing
import collections.abc
from abc import ABC
from enum import Enum
from typing import Any, Optional, Tuple


def dbg(*parts):
    """Prints a trace line to stderr when FUNKIT_DEBUG is set."""
    if os.environ.get("FUNKIT_DEBUG"):
        print("[DBG]", *parts, file=sys.stderr)


# =================================================================
# Errors
# =================================================================

class FunkitError(Exception):
    """Base class for every error raised by funkit."""
    pass


class ArityError(FunkitError, TypeError):
    """A callable takes the wrong number of parameters for its role."""
    def __init__(self, message: str, expected: Optional[int] = None, actual: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ShapeError(FunkitError, TypeError):
    """A value is not callable, or its shape cannot be used in this role."""
    pass


class TypeMismatchError(FunkitError, TypeError):
    """A positional, element, or key/value type does not match."""
    def __init__(self, message: str, position: Optional[int] = None, expected: Any = None, actual: Any = None):
        super().__init__(message)
        self.position = position
        self.expected = expected
        self.actual = actual


class UnsupportedError(FunkitError, TypeError):
    """An operation is not defined for a container kind."""
    def __init__(self, message: str, kind: Any = None):
        super().__init__(message)
        self.kind = kind


class InvalidArgsError(FunkitError, ValueError):
    """The application engine was handed a callable of arity outside {1, 2, 3}."""
    def __init__(self, message: str, arity: Optional[int] = None):
        super().__init__(message)
        self.arity = arity


# =================================================================
# Shapes
# =================================================================

def type_name(t) -> str:
    if t is Any:
        return "any"
    return getattr(t, "__name__", None) or str(t)


def accepts(annotation, t) -> bool:
    """True when a position declared as `annotation` can take a value of type `t`.

    Unannotated positions, `Any`, and annotations that are not plain classes
    (generic aliases, unresolved strings) accept everything.
    """
    if annotation is Any or t is Any:
        return True
    if typing.get_origin(annotation) is not None or typing.get_origin(t) is not None:
        return True
    if not isinstance(annotation, type) or not isinstance(t, type):
        return True
    return issubclass(t, annotation)


def _result_shape(annotation) -> Tuple[Any, ...]:
    if annotation is inspect.Signature.empty:
        return (Any,)
    if annotation is None or annotation is type(None):
        return ()
    if typing.get_origin(annotation) is tuple:
        args = typing.get_args(annotation)
        # tuple[int, ...] is one value of varying length
        if args and args[-1] is not Ellipsis:
            return tuple(args)
    return (annotation,)


def _signature(func) -> Optional[inspect.Signature]:
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    try:
        return inspect.signature(func, eval_str=True)
    except Exception:
        # Annotations naming things that cannot be resolved here stay as strings
        return sig


def _shape_from_signature(sig: inspect.Signature, name: str):
    params = []
    for p in sig.parameters.values():
        if p.kind is inspect.Parameter.VAR_POSITIONAL:
            raise ShapeError(f"cannot determine the arity of {name}: it takes *{p.name}; pass an explicit arity")
        if p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is inspect.Parameter.empty:
            raise ShapeError(f"{name} requires keyword-only argument '{p.name}'")
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD) \
           and p.default is inspect.Parameter.empty:
            params.append(Any if p.annotation is inspect.Parameter.empty else p.annotation)
    return tuple(params), _result_shape(sig.return_annotation)


# =================================================================
# Callables
# =================================================================

class FunkitCallable(ABC):
    """Abstract base class for the callable handles funkit hands out."""

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def params(self) -> Tuple[Any, ...]:
        return self._params

    @property
    def returns(self) -> Tuple[Any, ...]:
        return self._returns

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        from funkit.funkit_printer import Printer
        return Printer().pformat(self)


class Fn(FunkitCallable):
    """An immutable handle around a function value.

    The arity is the number of required positional parameters. Parameter
    shapes are the parameter annotations (`Any` when missing) and the result
    shape is one entry per returned value: `-> None` returns nothing,
    `-> tuple[A, B]` returns two values, anything else returns one.
    """
    def __init__(self, func, arity: Optional[int] = None, params=None, returns=None, name: Optional[str] = None):
        if isinstance(func, Fn):
            arity = func.arity if arity is None else arity
            params = func.params if params is None else params
            returns = func.returns if returns is None else returns
            name = name or func.name
            func = func.func
        if not callable(func):
            raise ShapeError(f"{func!r} is not callable")
        self._func = func
        self._name = name or getattr(func, "__name__", None) or type(func).__name__

        if arity is None:
            sig = _signature(func)
            if sig is None:
                raise ShapeError(f"cannot determine the shape of {self._name}; pass an explicit arity")
            sig_params, sig_returns = _shape_from_signature(sig, self._name)
            arity = len(sig_params)
            params = sig_params if params is None else params
            returns = sig_returns if returns is None else returns
        if arity < 0:
            raise ArityError(f"arity must not be negative, got {arity}", actual=arity)

        self._arity = arity
        self._params = tuple(params) if params is not None else (Any,) * arity
        self._returns = tuple(returns) if returns is not None else (Any,)
        if len(self._params) != arity:
            raise ShapeError(f"{self._name} declares {len(self._params)} parameter shapes for arity {arity}")

    @property
    def func(self):
        return self._func

    def __call__(self, *args):
        if len(args) != self._arity:
            raise ArityError(
                f"{self._name} takes {self._arity} argument(s), got {len(args)}",
                expected=self._arity, actual=len(args),
            )
        return self._func(*args)

    def __eq__(self, other):
        if not isinstance(other, Fn):
            return NotImplemented
        return (self._func == other._func and self._arity == other._arity
                and self._params == other._params and self._returns == other._returns)

    def __hash__(self):
        return hash((self._func, self._arity))


class CurriedChain(FunkitCallable):
    """One step of a curried function: an `Fn` plus the arguments captured so far.

    Calling a chain with one argument captures it. When that completes the
    underlying function's arity the function is invoked and its result
    returned; otherwise a new chain is returned. Several arguments may be
    passed at once, which is the same as passing them one by one.
    """
    def __init__(self, fn: Fn, captured: Tuple[Any, ...] = ()):
        if len(captured) >= fn.arity:
            raise ArityError(
                f"{fn.name} takes {fn.arity} argument(s), cannot capture {len(captured)}",
                expected=fn.arity, actual=len(captured),
            )
        self._fn = fn
        self._captured = tuple(captured)
        self._arity = fn.arity - len(self._captured)
        self._params = fn.params[len(self._captured):]
        self._returns = fn.returns
        self._name = fn.name

    @property
    def fn(self) -> Fn:
        return self._fn

    @property
    def captured(self) -> Tuple[Any, ...]:
        return self._captured

    def _step(self, arg):
        captured = self._captured + (arg,)
        if len(captured) == self._fn.arity:
            dbg("reduce", self._name, "argc", len(captured))
            return self._fn(*captured)
        return CurriedChain(self._fn, captured)

    def __call__(self, *args):
        if not args or len(args) > self._arity:
            raise ArityError(
                f"{self._name} expects between 1 and {self._arity} more argument(s), got {len(args)}",
                expected=self._arity, actual=len(args),
            )
        result = self
        for arg in args:
            result = result._step(arg)
        return result


def callable_of(value) -> FunkitCallable:
    """Returns `value` when it is already a funkit callable, otherwise wraps it in an `Fn`."""
    if isinstance(value, FunkitCallable):
        return value
    return Fn(value)


# =================================================================
# Containers
# =================================================================

class ContainerKind(Enum):
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    CHARS = "character sequence"


def kind_of(container) -> ContainerKind:
    """Classifies a container; anything outside the three kinds is unsupported."""
    if isinstance(container, str):
        return ContainerKind.CHARS
    if isinstance(container, collections.abc.Mapping):
        return ContainerKind.MAPPING
    if isinstance(container, collections.abc.Sequence):
        return ContainerKind.SEQUENCE
    raise UnsupportedError(f"unsupported container type: {type(container).__name__}")
