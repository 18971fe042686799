import pytest
from hypothesis import given, strategies as st

from tinylisp.builtin.env_builtin import make_environment
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.reader.parser import lex, parse
from tinylisp.types.errors import (
    TinyLispArityError,
    TinyLispError,
    TinyLispEvalError,
    TinyLispSyntaxError,
    TinyLispTypeError,
    TinyLispUnboundSymbol,
    TinyLispUndefinedFunction,
)
from tinylisp.types.symbol import Symbol


def run(source, env):
    expr, _ = parse(lex(source))
    return evaluate(expr, env)


def test_self_evaluating_numbers(env):
    assert evaluate(1.0, env) == 1.0
    assert evaluate(-3.5, env) == -3.5


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42.0)
    assert evaluate(Symbol("x"), env) == 42.0
    with pytest.raises(TinyLispUnboundSymbol):
        evaluate(Symbol("z"), env)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6.0),
        ("(+)", 0.0),
        ("(- 10 1 2 3)", 4.0),
        ("(- 7)", 7.0),
        ("(+ (- 10 4) (+ 1 1))", 8.0),
        ("(+ 1 2.5)", 3.5),
        ("(car (cdr (1 2 3)))", 2.0),
        ("(cdr (1))", []),
        ("(cdr (cdr (cdr (1 2 3))))", []),
        ("(car ((1 2) 3))", [1.0, 2.0]),
        ("(1 2 3)", [1.0, 2.0, 3.0]),
        ("(1 (+ 1 1) 3)", [1.0, 2.0, 3.0]),
        ("((+ 1 2) 4)", [3.0, 4.0]),
    ]
)
def test_evaluation(env, source, expected):
    assert run(source, env) == expected


def test_define_returns_target_symbol(env):
    assert run("(define x (+ 2 3))", env) == Symbol("x")
    assert run("x", env) == 5.0
    assert run("(+ x x)", env) == 10.0


def test_define_replaces_binding(env):
    run("(define x 1)", env)
    run("(define x (+ x 1))", env)
    assert run("x", env) == 2.0


def test_define_data_list(env):
    run("(define xs (1 2 3))", env)
    assert run("(car (cdr xs))", env) == 2.0


def test_print_form_outputs_and_returns_value(env, capsys):
    assert run("(print (+ 1 1))", env) == 2.0
    assert capsys.readouterr().out == "2\n"


def test_nested_print_order(env, capsys):
    assert run("(+ (print 1) (print 2))", env) == 3.0
    assert capsys.readouterr().out == "1\n2\n"


def test_special_forms_shadow_builtins(env, capsys):
    # the special form returns the symbol, the table entry would return the value
    assert run("(define y 7)", env) == Symbol("y")
    assert run("(print y)", env) == 7.0
    assert capsys.readouterr().out == "7\n"


@pytest.mark.parametrize(
    "source, error, message",
    [
        ("()", TinyLispEvalError, "cannot evaluate an empty list"),
        ("(+ 1 y)", TinyLispUnboundSymbol, "undefined symbol: y"),
        ("(foo 1 2)", TinyLispUndefinedFunction, "undefined function: foo"),
        ("(x)", TinyLispUndefinedFunction, "undefined function: x"),
        ("(1 ())", TinyLispEvalError, "cannot evaluate an empty list"),
        ("(-)", TinyLispArityError, None),
        ("(car (1) (2))", TinyLispArityError, None),
        ("(car ())", TinyLispEvalError, None),
        ("(car (cdr (1)))", TinyLispTypeError, None),
        ("(car 1)", TinyLispTypeError, None),
        ("(cdr 1)", TinyLispTypeError, None),
        ("(+ 1 (1 2))", TinyLispTypeError, None),
        ("(define x)", TinyLispArityError, None),
        ("(define x 1 2)", TinyLispArityError, None),
        ("(define 1 2)", TinyLispTypeError, None),
        ("(define (x) 2)", TinyLispTypeError, None),
        ("(print)", TinyLispArityError, None),
        ("(print 1 2)", TinyLispArityError, None),
    ]
)
def test_evaluation_errors(env, source, error, message):
    with pytest.raises(error) as exc:
        run(source, env)
    assert isinstance(exc.value, TinyLispError)
    if message is not None:
        assert str(exc.value) == message


def test_builtins_are_not_values(env):
    with pytest.raises(TinyLispUnboundSymbol):
        run("car", env)


def test_argument_errors_short_circuit(env, capsys):
    with pytest.raises(TinyLispUnboundSymbol):
        run("(+ (print 1) nope (print 2))", env)
    assert capsys.readouterr().out == "1\n"


@pytest.mark.parametrize(
    "source",
    [
        "(define x (+ 1 y))",
        "(define x (car ()))",
    ]
)
def test_failed_define_leaves_environment_unchanged(env, source):
    run("(define x 1)", env)
    before = env.snapshot()
    with pytest.raises(TinyLispError):
        run(source, env)
    assert env.snapshot() == before


@pytest.mark.parametrize(
    "source",
    [
        "(1 (define x 5) nope)",
        "(1 (define a 9) (car ()))",
        "(1 (define x 5) (define a (+ x nope)))",
    ]
)
def test_failed_form_rolls_back_earlier_defines(interp, source):
    interp.eval("(define a 1)")
    before = interp.env.snapshot()
    with pytest.raises(TinyLispError):
        interp.eval(source)
    assert interp.env.snapshot() == before
    assert interp.eval("a") == 1.0


def test_deep_nesting_is_an_ordinary_error(interp):
    interp.eval("(define a 1)")
    with pytest.raises(TinyLispEvalError) as exc:
        interp.eval("(" * 5000 + ")" * 5000)
    assert str(exc.value) == "nesting too deep"
    assert interp.eval("a") == 1.0


def test_parse_errors_are_tinylisp_errors():
    assert issubclass(TinyLispSyntaxError, TinyLispError)


@given(st.floats(allow_nan=False))
def test_number_literal_evaluates_to_itself(n):
    assert evaluate(n, make_environment()) == n


@given(st.lists(st.floats(allow_nan=False), max_size=10))
def test_cdr_length_times_yields_empty(xs):
    env = make_environment()
    env.define(Symbol("l"), xs)
    expr = Symbol("l")
    for _ in xs:
        expr = [Symbol("cdr"), expr]
    assert evaluate(expr, env) == []


@given(st.floats(allow_nan=False, allow_infinity=False), st.floats(allow_nan=False, allow_infinity=False))
def test_define_then_lookup(a, b):
    env = make_environment()
    evaluate([Symbol("define"), Symbol("v"), [Symbol("-"), a, b]], env)
    assert evaluate(Symbol("v"), env) == a - b


def test_bindings_do_not_shadow_builtins(env):
    assert run("(define car 1)", env) == Symbol("car")
    assert run("car", env) == 1.0
    assert run("(car (5 6))", env) == 5.0


def test_define_checks_target_before_evaluating_value(env, capsys):
    with pytest.raises(TinyLispTypeError):
        run("(define 1 (print 3))", env)
    assert capsys.readouterr().out == ""
