"""Application engine for Sable.

One calling convention for the three callee kinds:
- NativeOp: pure primitive, called with the argument list.
- IoOp: effectful primitive, called with the environment and the argument list.
- Closure: parameters are bound into the live environment on top of the
  closure's captured bindings, then the body forms run in order.

Keeping this logic in one place prevents duplication between the evaluator
and the `apply` primitive.
"""

from sable import LispValue, EvaluatorFn
from sable.errors import NumArgs, EmptyBody, NotFunction
from sable.types.closure import Closure
from sable.types.environment import Environment
from sable.types.primitive import NativeOp, IoOp


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a user-defined closure.

    Without a vararg the argument count must equal the parameter count; with
    one, at least the fixed parameters must be supplied and the rest are
    collected into a list. Raises NumArgs otherwise and EmptyBody if there is
    nothing to evaluate.
    """
    arity = len(fn.params)
    if len(args) < arity or (fn.vararg is None and len(args) != arity):
        raise NumArgs(arity, args)

    env.enter(fn.captured)
    for name, arg in zip(fn.params, args):
        env.define(name, arg)
    if fn.vararg is not None:
        env.define(fn.vararg, list(args[arity:]))

    if not fn.body:
        raise EmptyBody()
    result: LispValue = None
    for form in fn.body:
        result = evaluate_fn(form, env)
    return result


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a primitive, IO primitive or closure to already-evaluated arguments."""
    match head:
        case NativeOp():
            return head(args)
        case IoOp():
            return head(env, args)
        case Closure():
            return apply_closure(head, args, env, evaluate_fn)
    raise NotFunction("Unrecognized primitive function args", head)
