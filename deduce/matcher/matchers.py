"""
Matchers: find pattern occurrences in a formula and replace them.

Both matchers honour the contract MatcherRule relies on:

    replace_one(formula, replacer) -> list[Formula]
        one result per matching occurrence, only that occurrence replaced,
        occurrences in pre-order
    replace_all(formula, replacer) -> Formula
        every outermost occurrence replaced in one top-down pass; a
        formula identical to the input when nothing matches

FormulaMatcher looks for a formula pattern among the sub-formulas.
TermMatcher looks for a term pattern among the sub-terms of every atomic
formula. A replacer is a callable taking the Bindings of one occurrence
and returning the replacement (a Formula or a Term respectively);
template(skeleton) builds one from a skeleton with holes.
"""

from typing import Callable, List, Optional

from ..core.term import Term
from ..core.formula import Formula, PredicateFormula
from .bindings import Bindings
from .pattern import (
    match_term, match_formula, instantiate_term, instantiate_formula,
    positions, replace_at,
)


def template(skeleton) -> Callable[[Bindings], object]:
    """A replacer that fills the holes of skeleton from the bindings."""
    if isinstance(skeleton, Term):
        return lambda bindings: instantiate_term(skeleton, bindings)
    return lambda bindings: instantiate_formula(skeleton, bindings)


class FormulaMatcher:

    def __init__(self, pattern: Formula):
        self.pattern = pattern

    def match(self, formula: Formula) -> Optional[Bindings]:
        return match_formula(self.pattern, formula)

    def replace_one(self, formula: Formula, replacer) -> List[Formula]:
        results = []
        for path, sub in positions(formula):
            bindings = self.match(sub)
            if bindings is not None:
                results.append(replace_at(formula, path, replacer(bindings)))
        return results

    def replace_all(self, formula: Formula, replacer) -> Formula:
        def before(f):
            bindings = self.match(f)
            if bindings is None:
                return None
            return replacer(bindings)

        return formula.recur_map_before_after(before, lambda f: f)

    def __repr__(self):
        return f"FormulaMatcher({self.pattern})"


class TermMatcher:

    def __init__(self, pattern: Term):
        self.pattern = pattern

    def match(self, term: Term) -> Optional[Bindings]:
        return match_term(self.pattern, term)

    def replace_one(self, formula: Formula, replacer) -> List[Formula]:
        results = []
        for f_path, sub in positions(formula):
            if not isinstance(sub, PredicateFormula):
                continue
            for i, arg in enumerate(sub.terms):
                for t_path, t in positions(arg):
                    bindings = self.match(t)
                    if bindings is None:
                        continue
                    new_arg = replace_at(arg, t_path, replacer(bindings))
                    terms = sub.terms[:i] + (new_arg,) + sub.terms[i + 1:]
                    results.append(replace_at(formula, f_path, PredicateFormula(sub.p, terms)))
        return results

    def replace_all(self, formula: Formula, replacer) -> Formula:
        def before(t):
            bindings = self.match(t)
            if bindings is None:
                return None
            return replacer(bindings)

        return formula.map_terms(lambda t: t.recur_map_before_after(before, lambda x: x))

    def __repr__(self):
        return f"TermMatcher({self.pattern})"
