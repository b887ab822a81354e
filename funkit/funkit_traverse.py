"""
Generic traversal algorithms over the three container kinds.

`map`, `filter` and `each` accept sequences, mappings and strings; `fold`
accepts sequences and strings. Visitors are unary for sequences and strings
and take `(key, value)` for mappings. Inputs are never modified.
"""
from funkit.funkit_datatypes import (
    ContainerKind, FunkitCallable, ArityError, ShapeError, TypeMismatchError, UnsupportedError,
    accepts, callable_of, dbg, kind_of, type_name,
)


def _visitor(f, kind: ContainerKind, op: str) -> FunkitCallable:
    fn = callable_of(f)
    expected = 2 if kind is ContainerKind.MAPPING else 1
    if fn.arity != expected:
        raise ArityError(
            f"{op} over a {kind.value} needs a function of {expected} argument(s), {fn.name} takes {fn.arity}",
            expected=expected, actual=fn.arity,
        )
    if kind is ContainerKind.CHARS and not accepts(fn.params[0], str):
        raise TypeMismatchError(
            f"{op} over a {kind.value} passes <str>, but {fn.name} takes <{type_name(fn.params[0])}>",
            position=0, expected=fn.params[0], actual=str,
        )
    dbg(op, kind.value, fn.name)
    return fn


def fold(f, container, initial=None):
    """Left-folds `f` over the elements of a sequence or string.

    When `initial` is given it is appended to the elements, so it is the
    last value folded in rather than the seed. An empty input folds to None.
    """
    kind = kind_of(container)
    if kind is ContainerKind.MAPPING:
        raise UnsupportedError("fold is not supported for mappings", kind=kind)
    fn = callable_of(f)
    if fn.arity != 2:
        raise ArityError(f"{fn.name} must take exactly two arguments", expected=2, actual=fn.arity)
    if len(fn.returns) != 1:
        raise ShapeError(f"{fn.name} must return exactly one value")

    items = list(container)
    if initial is not None:
        if items and type(initial) is not type(items[0]):
            raise TypeMismatchError(
                f"initial value is <{type(initial).__name__}>, but elements are <{type(items[0]).__name__}>",
                position=len(items), expected=type(items[0]), actual=type(initial),
            )
        items.append(initial)
    if not items:
        return None

    elem_type = type(items[0])
    for position, want in enumerate(fn.params):
        if not accepts(want, elem_type):
            raise TypeMismatchError(
                f"{fn.name} takes <{type_name(want)}> at position {position}, but elements are <{elem_type.__name__}>",
                position=position, expected=want, actual=elem_type,
            )
    if not accepts(elem_type, fn.returns[0]):
        raise TypeMismatchError(
            f"function should return single <{elem_type.__name__}>, but got <{type_name(fn.returns[0])}>",
            expected=elem_type, actual=fn.returns[0],
        )

    dbg("fold", kind.value, fn.name, "count", len(items))
    acc = items[0]
    for item in items[1:]:
        acc = fn(acc, item)
    return acc


def map(container, f):
    """Applies `f` to every element and returns a new container of the same kind.

    For mappings `f(key, value)` must return a `(key, value)` pair; when two
    entries produce the same key the later one in iteration order wins.
    """
    kind = kind_of(container)
    fn = _visitor(f, kind, "map")
    if not fn.returns:
        raise ShapeError(f"{fn.name} must return a value")

    match kind:
        case ContainerKind.SEQUENCE:
            out = [fn(item) for item in container]
            return tuple(out) if isinstance(container, tuple) else out

        case ContainerKind.CHARS:
            if len(fn.returns) != 1 or not accepts(str, fn.returns[0]):
                raise TypeMismatchError(
                    f"{fn.name} must return <str>, but returns <{', '.join(type_name(t) for t in fn.returns)}>",
                    expected=str, actual=fn.returns,
                )
            chars = []
            for position, c in enumerate(container):
                out = fn(c)
                if not isinstance(out, str) or len(out) != 1:
                    raise TypeMismatchError(
                        f"{fn.name} must map a character to a character, got {out!r} at position {position}",
                        position=position, expected=str, actual=type(out),
                    )
                chars.append(out)
            return "".join(chars)

        case ContainerKind.MAPPING:
            if len(fn.returns) != 2 and not (len(fn.returns) == 1 and accepts(fn.returns[0], tuple)):
                raise ShapeError(f"{fn.name} must return a (key, value) pair")
            out = {}
            for key, value in container.items():
                pair = fn(key, value)
                if not isinstance(pair, tuple) or len(pair) != 2:
                    raise ShapeError(f"{fn.name} must return a (key, value) pair, got {pair!r}")
                out[pair[0]] = pair[1]
            return out


def filter(container, predicate):
    """Keeps the elements (or mapping entries) for which `predicate` is true."""
    kind = kind_of(container)
    fn = _visitor(predicate, kind, "filter")
    if len(fn.returns) != 1 or not accepts(bool, fn.returns[0]):
        raise ShapeError(f"{fn.name} must return a single bool")

    match kind:
        case ContainerKind.SEQUENCE:
            out = [item for item in container if fn(item)]
            return tuple(out) if isinstance(container, tuple) else out
        case ContainerKind.CHARS:
            return "".join(c for c in container if fn(c))
        case ContainerKind.MAPPING:
            return {key: value for key, value in container.items() if fn(key, value)}


def each(container, visitor) -> None:
    """Calls `visitor` once per element for its side effects.

    Sequences and strings are visited in ascending index order; mapping
    entries are visited as `(key, value)` in no guaranteed order.
    """
    kind = kind_of(container)
    fn = _visitor(visitor, kind, "each")

    match kind:
        case ContainerKind.SEQUENCE | ContainerKind.CHARS:
            for item in container:
                fn(item)
        case ContainerKind.MAPPING:
            for key, value in container.items():
                fn(key, value)
