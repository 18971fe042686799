"""Built-in functions for the tinylisp runtime environment.

This module defines the arithmetic and list primitives exposed to Lisp code,
plus the table-level `define` and `print` entries and the registration
helper that installs them into an Environment.
"""
from __future__ import annotations

from tinylisp import Expression
from tinylisp.printer import to_string
from tinylisp.types.environment import Environment
from tinylisp.types.errors import TinyLispArityError, TinyLispTypeError
from tinylisp.types.symbol import Symbol


def _require_numbers(name: str, args: list[Expression]) -> None:
    for x in args:
        if not isinstance(x, float):
            raise TinyLispTypeError(f"all arguments to {name} must be numbers, got {to_string(x)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[Expression]) -> float:
    """Return the sum of all arguments; the empty sum is 0."""
    _require_numbers("+", args)
    return sum(args, 0.0)


def sub(env: Environment, args: list[Expression]) -> float:
    """Subtract all subsequent numbers from the first, left to right."""
    if not args:
        raise TinyLispArityError("- requires at least 1 argument")
    _require_numbers("-", args)
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


# -------------------------------
# Lists
# -------------------------------
def car(env: Environment, args: list[Expression]) -> Expression:
    """Return the first element of a non-empty list."""
    if len(args) != 1:
        raise TinyLispArityError("car requires exactly 1 argument")
    xs = args[0]
    if not isinstance(xs, list):
        raise TinyLispTypeError(f"car expects a list, got {to_string(xs)}")
    if not xs:
        raise TinyLispTypeError("car of an empty list")
    return xs[0]


def cdr(env: Environment, args: list[Expression]) -> list[Expression]:
    """Return a new list of all but the first element; () stays ()."""
    if len(args) != 1:
        raise TinyLispArityError("cdr requires exactly 1 argument")
    xs = args[0]
    if not isinstance(xs, list):
        raise TinyLispTypeError(f"cdr expects a list, got {to_string(xs)}")
    return xs[1:]


# -------------------------------
# Table entries shadowed by special forms
# -------------------------------
def define_builtin(env: Environment, args: list[Expression]) -> Expression:
    """(define name value) on evaluated arguments; returns the value."""
    if len(args) != 2:
        raise TinyLispArityError("define requires exactly 2 arguments")
    name, value = args
    env.define(name, value)
    return value


def print_builtin(env: Environment, args: list[Expression]) -> Expression:
    """Print the printable form of one value followed by a newline; return it."""
    if len(args) != 1:
        raise TinyLispArityError("print requires exactly 1 argument")
    value = args[0]
    print(to_string(value), file=env.out)
    return value


BUILTINS = {
    Symbol("+"): add,
    Symbol("-"): sub,
    Symbol("car"): car,
    Symbol("cdr"): cdr,
    Symbol("define"): define_builtin,
    Symbol("print"): print_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update(BUILTINS)


def make_environment() -> Environment:
    env = Environment()
    register(env)
    return env
