from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from tinylisp import Expression
from tinylisp.builtin.env_builtin import register
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.printer import to_string
from tinylisp.reader.parser import lex, parse, TokenStream
from tinylisp.types.environment import Environment
from tinylisp.types.errors import TinyLispError, TinyLispEvalError

logger = logging.getLogger(__name__)


@contextmanager
def nesting_guard() -> Iterator[None]:
    """Turn host stack exhaustion into an ordinary evaluation error."""
    try:
        yield
    except RecursionError:
        raise TinyLispEvalError("nesting too deep") from None


class Interpreter:
    """
    Orchestrates reading and evaluating tinylisp code.
    Maintains a single Environment across calls; a top-level form that fails
    leaves the bindings as they were before it started.
    """

    def __init__(self, env: Environment | None = None):
        if env is None:
            env = Environment()
            register(env)
        self.env: Environment = env

    def _evaluate(self, expr: Expression) -> Expression:
        before = self.env.snapshot()
        try:
            with nesting_guard():
                return evaluate(expr, self.env)
        except TinyLispError:
            logger.debug("rolling back bindings after failed form")
            self.env.restore(before)
            raise

    def eval(self, code: str) -> Expression:
        """Evaluate the first expression in `code`; trailing tokens are ignored."""
        with nesting_guard():
            expr, _ = parse(lex(code))
        return self._evaluate(expr)

    def eval_all(self, code: str) -> list[Expression]:
        """Evaluate every top-level form in order, stopping at the first error."""
        stream = TokenStream(lex(code))
        results = []
        while not stream.at_end():
            with nesting_guard():
                expr = stream.parse_expr()
            results.append(self._evaluate(expr))
        return results

    def run(self, code: str) -> str:
        result = self.eval(code)
        with nesting_guard():
            return to_string(result)
