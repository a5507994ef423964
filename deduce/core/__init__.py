from .names import (
    QualifiedName, Variable, Constant, Function, Predicate,
    name_provider, xn_name_provider,
)
from .term import (
    Term, AtomicTerm, CombinedTerm, VarTerm, ConstTerm, NamedTerm, FunTerm,
)
from .formula import (
    Formula, AtomicFormula, CombinedFormula, BinaryFormula, QuantifiedFormula,
    PredicateFormula, NamedFormula, NotFormula,
    AndFormula, OrFormula, ImplyFormula, EquivFormula,
    ForAllFormula, ExistFormula, FormulaContext,
)
from .deduction import Deduction, TowardResult, Reached, NotReached
from .rule import Rule, MatcherRule, MatcherDefRule

__all__ = [
    "QualifiedName", "Variable", "Constant", "Function", "Predicate",
    "name_provider", "xn_name_provider",
    "Term", "AtomicTerm", "CombinedTerm", "VarTerm", "ConstTerm", "NamedTerm", "FunTerm",
    "Formula", "AtomicFormula", "CombinedFormula", "BinaryFormula", "QuantifiedFormula",
    "PredicateFormula", "NamedFormula", "NotFormula",
    "AndFormula", "OrFormula", "ImplyFormula", "EquivFormula",
    "ForAllFormula", "ExistFormula", "FormulaContext",
    "Deduction", "TowardResult", "Reached", "NotReached",
    "Rule", "MatcherRule", "MatcherDefRule",
]
