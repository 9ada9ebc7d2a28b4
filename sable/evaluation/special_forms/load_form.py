from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.errors import EmptyBody
from sable.types.environment import Environment
from sable.modules.loader import load
from sable.evaluation.special_forms.no_match import NO_MATCH


def load_form(
    tail: list[SExpression],
    form: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(load "path") evaluates every form in the file and returns the last result."""
    match tail:
        case [str() as path]:
            forms = load(path)
            if not forms:
                raise EmptyBody()
            result = None
            for expr in forms:
                result = evaluate_fn(expr, env)
            return result
    return NO_MATCH
