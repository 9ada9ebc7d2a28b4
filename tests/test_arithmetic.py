import pytest
from hypothesis import given, strategies as st

from sable.errors import NumArgs, TypeMismatch
from sable.reader.parser import parse
from sable.evaluation.evaluator import evaluate
from sable.builtin.primitives import PRIMITIVES, wrap

INT64 = st.integers(min_value=-(2**63), max_value=2**63 - 1)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 2 2)", 4),
        ("(+ 2 (- 4 1))", 5),
        ("(- (+ 4 6 3) 3 5 2)", 3),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(quotient -7 2)", -3),
        ("(remainder -7 2)", -1),
        ("(remainder 7 -2)", 1),
        ("(mod -7 2)", 1),
        ("(mod 7 -2)", -1),
        ("(mod 10 3)", 1),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ('(+ "2" 3)', 5),
        ('(* "-4" "+2")', -8),
    ]
)
def test_numeric_folds(env, source, expected):
    assert evaluate(parse(source), env) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 2 3)", True),
        ("(> 2 3)", False),
        ("(>= 3 3)", True),
        ("(<= 4 3)", False),
        ("(= 3 3)", True),
        ("(/= 3 3)", False),
        ('(= "3" 3)', True),
        ("(&& #t #f)", False),
        ("(|| #t #f)", True),
        ('(string=? "test" "test")', True),
        ('(string<? "abc" "bba")', True),
        ('(string>? "abc" "bba")', False),
        ('(string<=? "abc" "abc")', True),
        ('(string>=? "abc" "abd")', False),
        ('(string=? 12 "12")', True),
        ('(string=? #t "true")', True),
    ]
)
def test_comparisons(env, source, expected):
    assert evaluate(parse(source), env) is expected


@pytest.mark.parametrize("op", ["+", "-", "*", "/", "mod", "quotient", "remainder"])
@given(args=st.lists(INT64, max_size=1))
def test_numeric_fold_needs_two_arguments(op, args):
    with pytest.raises(NumArgs) as exc:
        PRIMITIVES[op](args)
    assert exc.value.expected == 2
    assert exc.value.values == args


@pytest.mark.parametrize("op", ["=", "<", ">", "/=", ">=", "<=", "string=?", "&&"])
def test_comparisons_need_exactly_two_arguments(env, op):
    with pytest.raises(NumArgs) as exc:
        evaluate(parse(f"({op} 1 2 3)"), env)
    assert exc.value.expected == 2
    assert exc.value.values == [1, 2, 3]


@pytest.mark.parametrize(
    "source,expected_kind,offending",
    [
        ('(< "A string" 1)', "number", "A string"),
        ("(+ 1 #t)", "number", True),
        ("(+ 1 '(2))", "number", [2]),
        ('(&& #t "yes")', "bool", "yes"),
        ("(string<? 'abc \"b\")", "string", None),
    ]
)
def test_type_mismatch(env, source, expected_kind, offending):
    with pytest.raises(TypeMismatch) as exc:
        evaluate(parse(source), env)
    assert exc.value.expected == expected_kind
    if offending is not None:
        assert exc.value.value == offending


@pytest.mark.parametrize("source", ["(/ 1 0)", "(mod 5 0)", "(quotient 5 0)", "(remainder 5 0)"])
def test_division_by_zero(env, source):
    with pytest.raises(TypeMismatch) as exc:
        evaluate(parse(source), env)
    assert exc.value.expected == "nonzero number"


def test_overflow_wraps(env):
    assert evaluate(parse("(+ 9223372036854775807 1)"), env) == -(2**63)
    assert evaluate(parse("(* 4294967296 4294967296)"), env) == 0
    assert evaluate(parse("(- -9223372036854775808 1)"), env) == 2**63 - 1


def test_out_of_range_numeric_string_is_a_type_mismatch(env):
    with pytest.raises(TypeMismatch):
        evaluate(parse('(+ "99999999999999999999" 1)'), env)


@given(a=INT64, b=INT64)
def test_addition_stays_in_range(a, b):
    assert -(2**63) <= wrap(a + b) <= 2**63 - 1
    assert wrap(a + b) == a + b or not (-(2**63) <= a + b <= 2**63 - 1)
