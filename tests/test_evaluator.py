"""Tests for sexp_core.evaluator."""

import math

import pytest

from sexp_core.environment import Environment, new_context
from sexp_core.errors import (
    ArgumentError,
    EmptyListError,
    NestingTooDeepError,
    NotCallableError,
    UnboundSymbolError,
)
from sexp_core.evaluator import apply_procedure, evaluate
from sexp_core.reader import parse
from sexp_core.values import List, Number, Procedure, Symbol


@pytest.fixture
def env():
    return new_context()


class TestArithmetic:
    def test_add(self, env):
        assert evaluate(parse("(+ 1 2)"), env) == Number(3.0)

    def test_multiply(self, env):
        assert evaluate(parse("(* 2 3)"), env) == Number(6.0)

    def test_nested(self, env):
        assert evaluate(parse("(+ 1 (* 2 3))"), env) == Number(7.0)

    def test_divide(self, env):
        assert evaluate(parse("(/ 4 2)"), env) == Number(2.0)

    def test_divide_by_zero(self, env):
        result = evaluate(parse("(/ 1 0)"), env)
        assert isinstance(result, Number)
        assert math.isinf(result.value)


class TestSelfEvaluating:
    def test_number(self, env):
        assert evaluate(Number(5.0), env) == Number(5.0)

    def test_procedure(self, env):
        proc = env.lookup("+")
        assert evaluate(proc, env) is proc

    def test_symbol_resolves_to_procedure(self, env):
        assert isinstance(evaluate(Symbol("*"), env), Procedure)


class TestErrors:
    def test_unbound_head(self, env):
        with pytest.raises(UnboundSymbolError, match="foo"):
            evaluate(parse("(foo 1 2)"), env)

    def test_unbound_argument(self, env):
        with pytest.raises(UnboundSymbolError):
            evaluate(parse("(+ 1 x)"), env)

    def test_not_callable(self, env):
        with pytest.raises(NotCallableError) as info:
            evaluate(parse("(1 2 3)"), env)
        assert info.value.value == Number(1.0)

    def test_empty_list(self, env):
        with pytest.raises(EmptyListError):
            evaluate(parse("()"), env)

    def test_nested_empty_list(self, env):
        with pytest.raises(EmptyListError):
            evaluate(parse("(+ 1 ())"), env)

    def test_wrong_arity(self, env):
        with pytest.raises(ArgumentError):
            evaluate(parse("(+ 1)"), env)

    def test_wrong_type(self, env):
        with pytest.raises(ArgumentError):
            evaluate(parse("(+ 1 +)"), env)

    def test_too_deep(self, env):
        expr = Number(1.0)
        for _ in range(100000):
            expr = List([Symbol("+"), Number(1.0), expr])
        with pytest.raises(NestingTooDeepError):
            evaluate(expr, env)


class TestEnvironmentPropagation:
    def test_environment_not_mutated(self, env):
        before = dict(env.bindings)
        evaluate(parse("(+ 1 (* 2 3))"), env)
        assert env.bindings == before

    def test_each_subexpression_gets_own_snapshot(self):
        seen = []

        class Recorder(Environment):
            def copy(self):
                child = super().copy()
                seen.append(child)
                return child

        rec = Recorder(dict(new_context().bindings))
        evaluate(parse("(+ 1 2)"), rec)
        assert len(seen) == 3
        assert len({id(e) for e in seen}) == 3

    def test_user_binding(self):
        env = new_context()
        env.define("x", Number(10.0))
        assert evaluate(parse("(* x x)"), env) == Number(100.0)


def test_apply_procedure_checks_arity():
    proc = Procedure("one", lambda args: args[0], arity=1)
    assert apply_procedure(proc, [Number(4.0)]) == Number(4.0)
    with pytest.raises(ArgumentError, match="expects 1 arguments"):
        apply_procedure(proc, [])
