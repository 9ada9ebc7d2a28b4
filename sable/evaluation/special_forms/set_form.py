from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.types.symbol import Symbol
from sable.types.environment import Environment
from sable.evaluation.special_forms.no_match import NO_MATCH


def set_form(
    tail: list[SExpression],
    form: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set! var value) overwrites an existing binding in place."""
    match tail:
        case [Symbol() as var, val_expr]:
            value = evaluate_fn(val_expr, env)
            return env.assign(var.id, value)
    return NO_MATCH
