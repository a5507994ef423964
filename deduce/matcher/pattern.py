"""
One-sided matching of patterns against terms and formulas.

Unlike unification, only the pattern side has holes:

    NamedTerm     in a term pattern     -> matches any term
    NamedFormula  in a formula pattern  -> matches any formula

Holes are keyed by the full name of their QualifiedName. Everything else
must match structurally. A hole used twice must match structurally
identical sub-trees both times.

    match_term(plus(A, 0), plus(x, 0))  ->  {A: x}
    match_term(plus(A, A), plus(x, y))  ->  None

Positions are paths of child indices from the root; both terms and
formulas expose `children` and (when combined) `copy_of`, so the same
helpers walk and rebuild either kind of tree.
"""

from typing import Iterator, Optional, Tuple

from ..core.term import Term, NamedTerm, FunTerm
from ..core.formula import (
    Formula, NamedFormula, PredicateFormula, QuantifiedFormula, CombinedFormula,
)
from .bindings import Bindings


def hole_name(node) -> Optional[str]:
    """The binding key if node is a hole, else None."""
    if isinstance(node, (NamedTerm, NamedFormula)):
        return node.name.full_name
    return None


def match_term(pattern: Term, term: Term, bindings: Optional[Bindings] = None) -> Optional[Bindings]:
    """Extend bindings so that pattern instantiates to term, or return None."""
    if bindings is None:
        bindings = Bindings()

    if isinstance(pattern, NamedTerm):
        return bindings.extend(hole_name(pattern), term)

    if isinstance(pattern, FunTerm):
        if not isinstance(term, FunTerm) or pattern.f != term.f:
            return None
        if len(pattern.children) != len(term.children):
            return None
        for p, t in zip(pattern.children, term.children):
            bindings = match_term(p, t, bindings)
            if bindings is None:
                return None
        return bindings

    return bindings if pattern.is_identity_to(term) else None


def match_formula(pattern: Formula, formula: Formula,
                  bindings: Optional[Bindings] = None) -> Optional[Bindings]:
    if bindings is None:
        bindings = Bindings()

    if isinstance(pattern, NamedFormula):
        return bindings.extend(hole_name(pattern), formula)

    if isinstance(pattern, PredicateFormula):
        if not isinstance(formula, PredicateFormula) or pattern.p != formula.p:
            return None
        if len(pattern.terms) != len(formula.terms):
            return None
        for p, t in zip(pattern.terms, formula.terms):
            bindings = match_term(p, t, bindings)
            if bindings is None:
                return None
        return bindings

    if isinstance(pattern, CombinedFormula):
        if type(pattern) is not type(formula):
            return None
        if isinstance(pattern, QuantifiedFormula) and pattern.v != formula.v:
            return None
        for p, f in zip(pattern.children, formula.children):
            bindings = match_formula(p, f, bindings)
            if bindings is None:
                return None
        return bindings

    return None


def instantiate_term(skeleton: Term, bindings: Bindings) -> Term:
    """Replace every hole in skeleton by its binding."""
    def before(t):
        if isinstance(t, NamedTerm):
            return bindings.term(hole_name(t))
        return None

    return skeleton.recur_map_before_after(before, lambda t: t)


def instantiate_formula(skeleton: Formula, bindings: Bindings) -> Formula:
    def before(f):
        if isinstance(f, NamedFormula):
            return bindings.formula(hole_name(f))
        return None

    def after(f):
        if isinstance(f, PredicateFormula):
            return f.map_terms(lambda t: instantiate_term(t, bindings))
        return f

    return skeleton.recur_map_before_after(before, after)


def positions(node, path: Tuple[int, ...] = ()) -> Iterator[Tuple[Tuple[int, ...], object]]:
    """Yield (path, sub-tree) pairs in pre-order, root first."""
    yield path, node
    for i, child in enumerate(node.children):
        yield from positions(child, path + (i,))


def replace_at(node, path: Tuple[int, ...], new):
    """A copy of node with the sub-tree at path replaced by new."""
    if not path:
        return new
    children = list(node.children)
    children[path[0]] = replace_at(children[path[0]], path[1:], new)
    return node.copy_of(tuple(children))
