import logging

import pytest

from lispir import config
from lispir.errors import LispirConfigError, LispirRecursionError, LispirUnboundSymbol
from lispir.interpreter import Interpreter
from lispir.runtime_context import RuntimeContext

MAKE_ADDER = "(define make (lambda (n) (lambda (x) (+ x n))))"
CALLER_LOCAL = "(define show (lambda () (+ v 0))) (define wrap (lambda (v) (show)))"


# ------------------ scoping ------------------

def test_dynamic_scoping_is_default():
    assert Interpreter().context().scoping == "dynamic"


def test_dynamic_scoping_sees_caller_locals():
    interp = Interpreter(scoping="dynamic")
    interp.eval(CALLER_LOCAL)
    assert interp.eval("(wrap 3)") == 3


def test_dynamic_scoping_forgets_definition_env():
    interp = Interpreter(scoping="dynamic")
    interp.eval(MAKE_ADDER)
    interp.eval("(define add5 (make 5))")
    with pytest.raises(LispirUnboundSymbol, match="Undefined symbol: n"):
        interp.eval("(add5 1)")


def test_lexical_scoping_captures_definition_env():
    interp = Interpreter(scoping="lexical")
    interp.eval(MAKE_ADDER)
    interp.eval("(define add5 (make 5))")
    assert interp.eval("(add5 1)") == 6


def test_lexical_scoping_hides_caller_locals():
    interp = Interpreter(scoping="lexical")
    interp.eval(CALLER_LOCAL)
    with pytest.raises(LispirUnboundSymbol):
        interp.eval("(wrap 3)")


def test_lexical_scoping_allows_recursion():
    interp = Interpreter(scoping="lexical")
    result = interp.eval(
        "(define fact (lambda (n) (if (= n 1) 1 (* n (fact (- n 1)))))) (fact 6)"
    )
    assert result == [720]


def test_scoping_from_environment_variable(monkeypatch):
    monkeypatch.setenv("LISPIR_SCOPING", " Lexical ")
    interp = Interpreter()
    interp.eval(MAKE_ADDER)
    assert interp.eval("((define add2 (make 2)) (add2 1))") == [3]


# ------------------ recursion limit ------------------

LOOP = "((define loop (lambda (n) (loop n))) (loop 1))"


def test_runaway_recursion_is_reported():
    interp = Interpreter(max_depth=50)
    with pytest.raises(LispirRecursionError, match="50"):
        interp.eval(LOOP)
    # The session survives
    assert interp.eval("(+ 1 2)") == 3


def test_runaway_recursion_with_default_limit():
    interp = Interpreter()
    with pytest.raises(LispirRecursionError):
        interp.eval(LOOP)


def test_deeply_nested_input_is_reported():
    interp = Interpreter()
    with pytest.raises(LispirRecursionError):
        interp.eval("(" * 1500 + ")" * 1500)
    assert interp.eval("(+ 1 2)") == 3


def test_depth_limit_applies_to_deep_but_finite_programs():
    program = "((define fact (lambda (n) (if (= n 1) 1 (* n (fact (- n 1)))))) (fact 10))"
    with pytest.raises(LispirRecursionError):
        Interpreter(max_depth=10).eval(program)
    assert Interpreter(max_depth=100).eval(program) == [3628800]


def test_max_depth_from_environment_variable(monkeypatch):
    monkeypatch.setenv("LISPIR_MAX_DEPTH", "5")
    with pytest.raises(LispirRecursionError):
        Interpreter().eval("(+ 1 (+ 1 (+ 1 (+ 1 (+ 1 1)))))")


def test_context_depth_tracking():
    ctx = RuntimeContext(max_depth=2, scoping="dynamic")
    ctx.enter()
    ctx.enter()
    with pytest.raises(LispirRecursionError):
        ctx.enter()
    assert ctx.depth == 2
    ctx.leave()
    ctx.leave()
    assert ctx.depth == 0


# ------------------ configuration ------------------

@pytest.mark.parametrize("kwargs", [{"max_depth": 0}, {"max_depth": -3}, {"scoping": "static"}])
def test_invalid_interpreter_settings(kwargs):
    with pytest.raises(LispirConfigError):
        Interpreter(**kwargs)


@pytest.mark.parametrize(
    "var,value",
    [("LISPIR_MAX_DEPTH", "deep"), ("LISPIR_MAX_DEPTH", "0"), ("LISPIR_SCOPING", "static")],
)
def test_invalid_environment_settings(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(LispirConfigError):
        Interpreter()


def test_config_defaults():
    assert config.get_max_depth() == 200
    assert config.get_scoping() == "dynamic"
    assert config.get_prompt() == "lispirλ "
    assert config.get_log_level() == logging.WARNING


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOGLEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    monkeypatch.setenv("LOGLEVEL", "chatty")
    assert config.get_log_level() == logging.WARNING
