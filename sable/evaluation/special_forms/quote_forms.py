from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.types.environment import Environment
from sable.evaluation.special_forms.no_match import NO_MATCH


def quote_form(
    tail: list[SExpression],
    form: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote X) returns X unevaluated."""
    match tail:
        case [datum]:
            return datum
    return NO_MATCH
