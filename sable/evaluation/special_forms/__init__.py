"""Registry of special forms for the Sable evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application.

A handler receives the form's arguments (everything after the keyword), the
whole form, the environment and the evaluator. It returns NO_MATCH when the
arguments do not have the shape the form requires; the evaluator then treats
the form as an ordinary application.
"""

from sable.types.symbol import Symbol
from sable.evaluation.special_forms.no_match import NO_MATCH
from sable.evaluation.special_forms.quote_forms import quote_form
from sable.evaluation.special_forms.if_form import if_form
from sable.evaluation.special_forms.set_form import set_form
from sable.evaluation.special_forms.define_form import define_form
from sable.evaluation.special_forms.lambda_form import lambda_form
from sable.evaluation.special_forms.load_form import load_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("set!"): set_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("load"): load_form,
}

__all__ = ["SPECIAL_FORMS", "NO_MATCH"]
