"""
Deduce: a symbolic term and formula rewriting engine.

Given a context of established formulas, named rules produce new formulas,
either exhaustively (Rule.apply) or steered toward a target formula
(Rule.apply_toward). Every result is a Deduction recording the rule and
the premises it came from, so proofs can be reconstructed afterwards.

Usage:
    python -m deduce --domain algebra
    python -m deduce --domain logic --toward
"""

from .core.names import QualifiedName, Variable, Constant, Function, Predicate, xn_name_provider
from .core.term import (
    Term, VarTerm, ConstTerm, NamedTerm, FunTerm, regularize, is_alpha_equivalent,
)
from .core.formula import (
    Formula, PredicateFormula, NamedFormula, NotFormula,
    AndFormula, OrFormula, ImplyFormula, EquivFormula,
    ForAllFormula, ExistFormula, FormulaContext,
)
from .core.deduction import Deduction, TowardResult, Reached, NotReached
from .core.rule import Rule, MatcherRule, MatcherDefRule
from .matcher import (
    Bindings, NoSuchTermError, NoSuchFormulaError,
    FormulaMatcher, TermMatcher, template,
)
from .builder import TermBuilder, RefTermContext, SIMPLE, build_term

__all__ = [
    "QualifiedName", "Variable", "Constant", "Function", "Predicate", "xn_name_provider",
    "Term", "VarTerm", "ConstTerm", "NamedTerm", "FunTerm", "regularize", "is_alpha_equivalent",
    "Formula", "PredicateFormula", "NamedFormula", "NotFormula",
    "AndFormula", "OrFormula", "ImplyFormula", "EquivFormula",
    "ForAllFormula", "ExistFormula", "FormulaContext",
    "Deduction", "TowardResult", "Reached", "NotReached",
    "Rule", "MatcherRule", "MatcherDefRule",
    "Bindings", "NoSuchTermError", "NoSuchFormulaError",
    "FormulaMatcher", "TermMatcher", "template",
    "TermBuilder", "RefTermContext", "SIMPLE", "build_term",
]
