from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.errors import BadSpecialForm
from sable.types.dotted_list import DottedList
from sable.types.environment import Environment
from sable.types.symbol import Symbol
from sable.evaluation.special_forms.lambda_form import make_closure
from sable.evaluation.special_forms.no_match import NO_MATCH


def define_form(
    tail: list[SExpression],
    form: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    (define (name a b) body...)
    (define (name a . rest) body...)

    Returns the defined value, so a function definition prints as its closure.
    """
    match tail:
        case [Symbol() as name, val_expr]:
            value = evaluate_fn(val_expr, env)
            return env.define(name.id, value)
        case [[Symbol() as name, *params], *body]:
            closure = make_closure(params, None, body, form, env)
            return env.define(name.id, closure)
        case [DottedList(items=[Symbol() as name, *params], tail=vararg), *body]:
            closure = make_closure(params, vararg, body, form, env)
            return env.define(name.id, closure)
        case [list() | DottedList(), *_]:
            raise BadSpecialForm("Unrecognized special form", form)
    return NO_MATCH
