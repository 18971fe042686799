"""Registry of special forms for the tinylisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before the builtin table, so these names
shadow the builtin entries of the same name.
"""

from tinylisp.types.symbol import Symbol
from tinylisp.evaluation.special_forms.define_form import define_form
from tinylisp.evaluation.special_forms.print_form import print_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
    Symbol("print"): print_form,
}
