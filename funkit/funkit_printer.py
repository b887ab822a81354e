"""
A pretty-printer for funkit callables and combinator terms.
"""
import collections.abc

from funkit.funkit_datatypes import Fn, CurriedChain


class Printer:
    """Formats callables as combinator expressions, e.g. `S (K S) K`."""

    def __init__(self):
        self._handlers = self._create_handlers()

    def pformat(self, obj, level=0):
        """Public entry point to format an object."""
        handler = self._get_handler(obj)
        return handler(obj, level)

    def _get_handler(self, obj):
        """Dispatcher to find the correct formatting method."""
        obj_type = type(obj)
        if obj_type in self._handlers:
            return self._handlers[obj_type]
        if isinstance(obj, collections.abc.Mapping): return self._pformat_dict
        if isinstance(obj, (list, tuple)): return self._pformat_sequence
        if callable(obj): return self._pformat_function
        # Default to Python's repr for unknown types
        return lambda o, l: repr(o)

    def _create_handlers(self):
        return {
            str: self._pformat_str,
            int: self._pformat_primitive,
            float: self._pformat_primitive,
            bool: self._pformat_primitive,
            type(None): self._pformat_none,
            Fn: self._pformat_fn,
            CurriedChain: self._pformat_chain,
        }

    def _pformat_primitive(self, obj, level):
        return str(obj)

    def _pformat_str(self, obj, level):
        return f"'{obj}'"

    def _pformat_none(self, obj, level):
        return 'none'

    def _pformat_function(self, obj, level):
        return getattr(obj, "__name__", None) or type(obj).__name__

    def _pformat_fn(self, obj, level):
        return obj.name

    def _pformat_chain(self, obj, level):
        # Application is left-associative, so only captured terms need parentheses.
        parts = [self.pformat(obj.fn, level)]
        parts.extend(self._pformat_operand(arg, level + 1) for arg in obj.captured)
        return " ".join(parts)

    def _pformat_operand(self, obj, level):
        text = self.pformat(obj, level)
        if isinstance(obj, CurriedChain) and obj.captured:
            return f"({text})"
        return text

    def _pformat_sequence(self, obj, level):
        items = ", ".join(self.pformat(item, level + 1) for item in obj)
        if isinstance(obj, tuple):
            return f"({items},)" if len(obj) == 1 else f"({items})"
        return f"[{items}]"

    def _pformat_dict(self, obj, level):
        items = ", ".join(f"{self.pformat(k, level + 1)}: {self.pformat(v, level + 1)}" for k, v in obj.items())
        return f"{{{items}}}"
