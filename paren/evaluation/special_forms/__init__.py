"""Registry of special forms for the Paren evaluator.

Maps identifier names to handler functions that receive their operands
unevaluated. An identifier listed here is only treated as a special form while
it is unbound in the environment.
"""

from paren.evaluation.special_forms.define_form import define_form

SPECIAL_FORMS = {
    "defvar": define_form,
    "define": define_form,
}
