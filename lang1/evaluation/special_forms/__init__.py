"""Registry of special forms for the lang1 evaluator.

Maps Symbols to handler functions that receive their arguments unevaluated.
The evaluator consults this table before ordinary function application.
"""

from lang1.types.symbol import Symbol
from lang1.evaluation.special_forms.defn_form import defn_form

SPECIAL_FORMS = {
    Symbol("defn"): defn_form,
}
