from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.errors import BadSpecialForm
from sable.types.closure import Closure
from sable.types.dotted_list import DottedList
from sable.types.environment import Environment
from sable.types.symbol import Symbol
from sable.evaluation.special_forms.no_match import NO_MATCH


def param_names(params: list[SExpression], form: SExpression) -> list[str]:
    """Names of a parameter list; every parameter must be a distinct atom."""
    names = []
    for p in params:
        if not isinstance(p, Symbol):
            raise BadSpecialForm("Parameter is not an atom", form)
        if p.id in names:
            raise BadSpecialForm("Duplicate parameter name", form)
        names.append(p.id)
    return names


def make_closure(
    params: list[SExpression],
    vararg: SExpression | None,
    body: list[SExpression],
    form: SExpression,
    env: Environment,
) -> Closure:
    """Build a closure capturing the current bindings (the slots, not their values)."""
    names = param_names(params if vararg is None else [*params, vararg], form)
    if vararg is not None:
        names.pop()
    return Closure(
        names,
        None if vararg is None else vararg.id,
        list(body),
        env.snapshot(),
    )


def lambda_form(
    tail: list[SExpression],
    form: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (a b) body...)     fixed parameters
    (lambda (a . rest) body...) fixed parameters plus a vararg
    (lambda rest body...)      vararg only
    """
    match tail:
        case [list() as params, *body]:
            return make_closure(params, None, body, form, env)
        case [DottedList(items=params, tail=vararg), *body]:
            return make_closure(params, vararg, body, form, env)
        case [Symbol() as vararg, *body]:
            return make_closure([], vararg, body, form, env)
    return NO_MATCH
