from tinylisp import EvaluatorFn, Expression
from tinylisp.printer import to_string
from tinylisp.types.errors import TinyLispArityError
from tinylisp.types.environment import Environment


def print_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """(print expr) writes the printable form of the value and returns the value."""
    if len(tail) != 1:
        raise TinyLispArityError("print requires exactly 1 argument")
    value = evaluate_fn(tail[0], env)
    print(to_string(value), file=env.out)
    return value
