from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.types.environment import Environment
from sable.evaluation.special_forms.no_match import NO_MATCH


def if_form(
    tail: list[SExpression],
    form: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    match tail:
        case [pred, conseq, alt]:
            # Only #f is false; every other value, including (), selects the consequent
            if evaluate_fn(pred, env) is False:
                return evaluate_fn(alt, env)
            return evaluate_fn(conseq, env)
    return NO_MATCH
