from .bindings import Bindings, NoSuchTermError, NoSuchFormulaError
from .pattern import (
    hole_name, match_term, match_formula,
    instantiate_term, instantiate_formula, positions, replace_at,
)
from .matchers import FormulaMatcher, TermMatcher, template

__all__ = [
    "Bindings", "NoSuchTermError", "NoSuchFormulaError",
    "hole_name", "match_term", "match_formula",
    "instantiate_term", "instantiate_formula", "positions", "replace_at",
    "FormulaMatcher", "TermMatcher", "template",
]
