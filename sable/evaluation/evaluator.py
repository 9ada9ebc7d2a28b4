"""Core evaluator for the Sable interpreter.

Evaluation is driven by the shape of the form: literals evaluate to
themselves, atoms are looked up, lists whose head names a special form are
handed to that form, and every other non-empty list is an application.
"""

from __future__ import annotations

from sable import SExpression, LispValue
from sable.errors import BadSpecialForm
from sable.types.environment import Environment
from sable.types.symbol import Symbol
from sable.evaluation.apply import apply
from sable.evaluation.special_forms import SPECIAL_FORMS, NO_MATCH


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case bool() | int() | str():
            return expr
        case Symbol():
            return env.lookup(expr.id)
        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            result = SPECIAL_FORMS[head](tail, expr, env, evaluate)
            if result is not NO_MATCH:
                return result
            # Wrong shape for the special form: fall back to application
            return evaluate_application(head, tail, env)
        case [head, *tail]:
            return evaluate_application(head, tail, env)
    raise BadSpecialForm("Unrecognized special form", expr)


def evaluate_application(
    head: SExpression, tail: list[SExpression], env: Environment
) -> LispValue:
    """Evaluate (F A1 A2 ...).

    The caller, not the callee, saves its bindings before the call and puts
    them back afterwards. Assignments made inside the callee still reach the
    caller because only the name -> slot mapping is restored, never the slots.
    """
    fn = evaluate(head, env)
    args = [evaluate(arg, env) for arg in tail]
    saved = env.snapshot()
    try:
        return apply(fn, args, env, evaluate)
    finally:
        env.restore(saved)
