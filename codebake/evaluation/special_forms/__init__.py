"""Registry of special forms for the codebake evaluator.

Maps Symbols to handler functions that receive their argument forms
unevaluated. The evaluator consults this table before ordinary function
application, so these names cannot be shadowed.
"""

from codebake.types.symbol import Symbol
from codebake.evaluation.special_forms.quote_form import quote_form
from codebake.evaluation.special_forms.lambda_form import lambda_form
from codebake.evaluation.special_forms.define_form import define_form, defn_form
from codebake.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("fn"): lambda_form,
    Symbol("def"): define_form,
    Symbol("defn"): defn_form,
    Symbol("if"): if_form,
}
