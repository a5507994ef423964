"""
Domain: propositional logic.

Formula-level rules whose holes P and Q are NamedFormulas:

    double-negation   ~~P            ->  P
    imply-def         (P -> Q)       <-> (~P | Q)       both directions
    de-morgan-and     ~(P & Q)       <-> (~P | ~Q)      both directions

The two-way rules are MatcherDefRules: the first pair rewrites the
definiendum into its definition, the second pair rewrites back.
"""

from ..builder import SIMPLE as T
from ..core.names import QualifiedName
from ..core.formula import (
    FormulaContext, NotFormula, AndFormula, OrFormula, ImplyFormula,
)
from ..core.rule import MatcherRule, MatcherDefRule
from ..matcher import FormulaMatcher, template

P = T.formula_ref("P")
Q = T.formula_ref("Q")

RAIN = T.pred("rain")
WET = T.pred("wet")
COLD = T.pred("cold")


DOUBLE_NEGATION = MatcherRule(
    QualifiedName("logic.double-negation"), "~~P = P",
    FormulaMatcher(NotFormula(NotFormula(P))), template(P),
)

IMPLY_DEF = MatcherDefRule(
    QualifiedName("logic.imply-def"), "(P -> Q) = (~P | Q)",
    FormulaMatcher(ImplyFormula(P, Q)), template(OrFormula(NotFormula(P), Q)),
    FormulaMatcher(OrFormula(NotFormula(P), Q)), template(ImplyFormula(P, Q)),
)

DE_MORGAN_AND = MatcherDefRule(
    QualifiedName("logic.de-morgan-and"), "~(P & Q) = (~P | ~Q)",
    FormulaMatcher(NotFormula(AndFormula(P, Q))),
    template(OrFormula(NotFormula(P), NotFormula(Q))),
    FormulaMatcher(OrFormula(NotFormula(P), NotFormula(Q))),
    template(NotFormula(AndFormula(P, Q))),
)

LOGIC_RULES = [DOUBLE_NEGATION, IMPLY_DEF, DE_MORGAN_AND]


def make_logic_context() -> FormulaContext:
    """
    Known:
        ~~rain
        ~(rain & cold)
        (rain -> wet)
    """
    return FormulaContext([
        NotFormula(NotFormula(RAIN)),
        NotFormula(AndFormula(RAIN, COLD)),
        ImplyFormula(RAIN, WET),
    ])


def logic_goal():
    return OrFormula(NotFormula(RAIN), WET)
