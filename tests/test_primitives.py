import pytest
from hypothesis import given, strategies as st

from sable.builtin.primitives import PRIMITIVES, as_number, as_string, as_bool
from sable.errors import NumArgs, TypeMismatch
from sable.types.dotted_list import DottedList
from sable.types.symbol import Symbol

car = PRIMITIVES["car"]
cdr = PRIMITIVES["cdr"]
cons = PRIMITIVES["cons"]
eqv = PRIMITIVES["eqv?"]
equal = PRIMITIVES["equal?"]

a, b, c = Symbol("a"), Symbol("b"), Symbol("c")


@pytest.mark.parametrize(
    "arg,expected",
    [
        ([a, b, c], a),
        ([[a, b], c], [a, b]),
        (DottedList([a, b], c), a),
    ]
)
def test_car(arg, expected):
    assert car([arg]) == expected


@pytest.mark.parametrize(
    "arg,expected",
    [
        ([a, b, c], [b, c]),
        ([a], []),
        (DottedList([a, b], c), DottedList([b], c)),
        (DottedList([a], c), DottedList([], c)),
    ]
)
def test_cdr(arg, expected):
    assert cdr([arg]) == expected


@pytest.mark.parametrize(
    "args,expected",
    [
        ([a, []], [a]),
        ([a, [b, c]], [a, b, c]),
        ([[a], b], DottedList([[a]], b)),
        ([a, DottedList([b], c)], DottedList([a, b], c)),
        ([1, 2], DottedList([1], 2)),
    ]
)
def test_cons(args, expected):
    assert cons(args) == expected


@pytest.mark.parametrize("fn", [car, cdr])
@pytest.mark.parametrize("arg", [[], a, 1, "s", True])
def test_car_cdr_need_a_pair(fn, arg):
    with pytest.raises(TypeMismatch) as exc:
        fn([arg])
    assert exc.value.expected == "pair"


@pytest.mark.parametrize(
    "name,args,expected",
    [
        ("car", [], 1),
        ("car", [[1], [2]], 1),
        ("cdr", [], 1),
        ("cons", [1], 2),
        ("cons", [1, 2, 3], 2),
        ("eqv?", [1], 2),
        ("equal?", [1, 2, 3], 2),
        ("null?", [], 1),
        ("not", [True, False], 1),
    ]
)
def test_fixed_arity(name, args, expected):
    with pytest.raises(NumArgs) as exc:
        PRIMITIVES[name](args)
    assert exc.value.expected == expected
    assert exc.value.values == args


simple = st.one_of(st.integers(), st.text(max_size=5), st.booleans())


@given(simple, st.lists(simple, max_size=5))
def test_car_and_cdr_undo_cons(head, tail):
    pair = cons([head, tail])
    assert car([pair]) == head
    assert cdr([pair]) == tail


@pytest.mark.parametrize(
    "lhs,rhs,expected",
    [
        (1, 1, True),
        (1, 2, False),
        ("a", "a", True),
        (a, Symbol("a"), True),
        (a, b, False),
        (True, True, True),
        (1, True, False),
        (0, False, False),
        ("1", 1, False),
        ([], [], True),
        ([1, [2, "x"]], [1, [2, "x"]], True),
        ([1, 2], [1, 2, 3], False),
        ([1], [True], False),
        (DottedList([1], 2), DottedList([1], 2), True),
        (DottedList([1], 2), [1, 2], False),
    ]
)
def test_eqv(lhs, rhs, expected):
    assert eqv([lhs, rhs]) is expected
    assert PRIMITIVES["eq?"]([lhs, rhs]) is expected


@pytest.mark.parametrize(
    "lhs,rhs,expected",
    [
        (1, 1, True),
        ("2", 2, True),
        (2, "2", True),
        ("abc", "abc", True),
        (True, "true", True),
        (False, "false", True),
        (True, True, True),
        (1, 2, False),
        ("a", "b", False),
        (a, a, False),
        ([1], [1], False),
    ]
)
def test_equal_coerces(lhs, rhs, expected):
    assert equal([lhs, rhs]) is expected


@pytest.mark.parametrize(
    "name,args,expected",
    [
        ("list", [], []),
        ("list", [1, a, "s"], [1, a, "s"]),
        ("null?", [[]], True),
        ("null?", [[1]], False),
        ("null?", [False], False),
        ("not", [False], True),
        ("not", [0], False),
        ("not", [[]], False),
        ("&&", [True, True], True),
        ("&&", [True, False], False),
        ("||", [False, True], True),
        ("||", [False, False], False),
        ("string=?", ["a", "a"], True),
        ("string<?", ["abc", "bba"], True),
        ("string>?", ["abc", "bba"], False),
        ("string<=?", ["a", "a"], True),
        ("string>=?", ["b", "a"], True),
        ("string=?", [12, "12"], True),
        ("string=?", [True, "true"], True),
    ]
)
def test_other_primitives(name, args, expected):
    assert PRIMITIVES[name](args) == expected


@pytest.mark.parametrize(
    "name,args,expected",
    [
        ("&&", [1, True], "bool"),
        ("||", [True, "x"], "bool"),
        ("string=?", [a, "a"], "string"),
        ("string<?", [[], "a"], "string"),
    ]
)
def test_comparison_coercion_failures(name, args, expected):
    with pytest.raises(TypeMismatch) as exc:
        PRIMITIVES[name](args)
    assert exc.value.expected == expected


@pytest.mark.parametrize(
    "coerce,value,expected",
    [
        (as_number, 5, 5),
        (as_number, "-12", -12),
        (as_number, "+3", 3),
        (as_string, "s", "s"),
        (as_string, 42, "42"),
        (as_string, False, "false"),
        (as_bool, True, True),
    ]
)
def test_coercions(coerce, value, expected):
    assert coerce(value) == expected


@pytest.mark.parametrize(
    "coerce,value",
    [
        (as_number, True),
        (as_number, "1.5"),
        (as_number, "ten"),
        (as_number, a),
        (as_string, a),
        (as_string, [1]),
        (as_bool, 1),
        (as_bool, "#t"),
    ]
)
def test_coercion_failures(coerce, value):
    with pytest.raises(TypeMismatch) as exc:
        coerce(value)
    assert exc.value.value == value
