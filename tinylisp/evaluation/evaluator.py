"""Core evaluator for the tinylisp interpreter.

A plain recursive tree walk. Special forms are dispatched first, then the
builtin table; a list whose head is not a symbol evaluates to the list of its
evaluated elements.
"""

from __future__ import annotations

import logging

from tinylisp import Expression
from tinylisp.evaluation.special_forms import SPECIAL_FORMS
from tinylisp.types.environment import Environment
from tinylisp.types.errors import TinyLispEvalError, TinyLispUndefinedFunction
from tinylisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: Expression, env: Environment) -> Expression:
    """Evaluate `expr` in `env`. Only `define` mutates the environment."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case []:
            raise TinyLispEvalError("cannot evaluate an empty list")

        case [Symbol() as head, *tail_args]:
            if head in SPECIAL_FORMS:
                logger.debug("special form %s", head)
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            fn = env.get_builtin(head)
            if fn is None:
                raise TinyLispUndefinedFunction(f"undefined function: {head}")
            # Applicative order: left to right, first error wins
            args = [evaluate(arg, env) for arg in tail_args]
            return fn(env, args)

        case [*items]:
            return [evaluate(item, env) for item in items]

    # --- Atoms return as-is ---
    return expr
