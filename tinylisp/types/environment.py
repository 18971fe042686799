"""Runtime environment for tinylisp.

The Environment holds two independent tables keyed by Symbol: user bindings
installed by `define`, and the fixed builtin operations registered at
construction. There is a single, flat scope; it lives for the whole REPL
session.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional, TextIO

from tinylisp import Expression, BuiltinFn
from tinylisp.printer import to_string
from tinylisp.types.errors import TinyLispTypeError, TinyLispUnboundSymbol
from tinylisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Mapping from Symbols to bound values plus a builtin operation table.

    `out` is the stream `print` writes to; None means the current sys.stdout.
    """

    __slots__ = ("vars", "builtins", "out")

    def __init__(self, out: Optional[TextIO] = None):
        self.vars: dict[Symbol, Expression] = {}
        self.builtins: dict[Symbol, BuiltinFn] = {}
        self.out: Optional[TextIO] = out

    @staticmethod
    def check_name(name: Expression) -> Symbol:
        """Return `name` if it can be a binding target, else raise TinyLispTypeError."""
        if not isinstance(name, Symbol):
            raise TinyLispTypeError("define target must be a symbol")
        return name

    def define(self, name: Symbol, value: Expression) -> None:
        """Bind `name` to `value`, replacing any previous binding."""
        self.check_name(name)
        logger.debug("define %s", name)
        self.vars[name] = value

    def is_bound(self, name: Symbol) -> bool:
        return name in self.vars

    def lookup(self, name: Symbol) -> Expression:
        """Look up the value bound to `name`.

        Builtins are not first-class values and are never returned here.
        Raises TinyLispUnboundSymbol if not found.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise TinyLispUnboundSymbol(f"undefined symbol: {name}") from None

    def register_builtin(self, name: Symbol, fn: BuiltinFn) -> None:
        if not isinstance(name, Symbol):
            raise TinyLispTypeError(f"cannot register {name!r}: name must be a symbol")
        self.builtins[name] = fn

    def has_builtin(self, name: Symbol) -> bool:
        return name in self.builtins

    def get_builtin(self, name: Symbol) -> Optional[BuiltinFn]:
        return self.builtins.get(name)

    def update(self, mapping: dict[Symbol, BuiltinFn]) -> None:
        """Bulk-register a mapping of Symbol -> builtin."""
        for k, v in mapping.items():
            self.register_builtin(k, v)

    def snapshot(self) -> dict[Symbol, Expression]:
        """Shallow copy of the current bindings."""
        return dict(self.vars)

    def restore(self, snapshot: dict[Symbol, Expression]) -> None:
        """Replace the bindings with a copy taken by `snapshot()`."""
        self.vars = dict(snapshot)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {to_string(v)}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Debugging view; builtin callables are listed by name only."""
        with StringIO() as buffer:
            buffer.write("<Environment vars=")
            self._write_vars(buffer)
            names = " ".join(str(k) for k in self.builtins)
            buffer.write(f" builtins=[{names}]>")
            return buffer.getvalue()
