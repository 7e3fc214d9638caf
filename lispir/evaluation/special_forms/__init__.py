"""Registry of special forms for the lispir evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table after the operator table and before
ordinary function application, so these names cannot be rebound as functions.
"""

from lispir.types.symbol import Symbol
from lispir.evaluation.special_forms.if_form import if_form
from lispir.evaluation.special_forms.define_form import define_form
from lispir.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
}
