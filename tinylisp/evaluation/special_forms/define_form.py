from tinylisp import EvaluatorFn, Expression
from tinylisp.types.errors import TinyLispArityError
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol


def define_form(
    tail: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Symbol:
    """
    (define name value)
    The target is checked and the value evaluated before anything is
    installed. Returns the target symbol.
    """
    if len(tail) != 2:
        raise TinyLispArityError("define requires exactly 2 arguments")

    name = env.check_name(tail[0])
    val_expr = tail[1]
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return name
