"""
Domain: elementary algebra.

Term-level rewrite rules over plus, times, 0 and 1. The holes A and B
are NamedTerms, so each rule reads like its textbook statement:

    add-comm   A + B  ->  B + A
    add-zero   A + 0  ->  A
    mul-one    A * 1  ->  A

Known formulas are equations eq(lhs, rhs). The default goal,
eq(plus(0,x), x), is one add-comm step away from eq(plus(x,0), x).
"""

from ..builder import SIMPLE as T
from ..core.names import QualifiedName
from ..core.formula import FormulaContext
from ..core.rule import MatcherRule
from ..matcher import TermMatcher, template

A = T.named("A")
B = T.named("B")
ZERO = T.const("0")
ONE = T.const("1")


def plus(a, b):
    return T.fn("plus", a, b)


def times(a, b):
    return T.fn("times", a, b)


def eq(lhs, rhs):
    return T.pred("eq", lhs, rhs)


ADD_COMM = MatcherRule(
    QualifiedName("algebra.add-comm"), "A + B = B + A",
    TermMatcher(plus(A, B)), template(plus(B, A)),
)

ADD_ZERO = MatcherRule(
    QualifiedName("algebra.add-zero"), "A + 0 = A",
    TermMatcher(plus(A, ZERO)), template(A),
)

MUL_ONE = MatcherRule(
    QualifiedName("algebra.mul-one"), "A * 1 = A",
    TermMatcher(times(A, ONE)), template(A),
)

ALGEBRA_RULES = [ADD_COMM, ADD_ZERO, MUL_ONE]


def make_algebra_context() -> FormulaContext:
    """
    Known:
        eq(plus(x,0), x)
        eq(times(plus(x,0),1), y)
    """
    return FormulaContext([
        eq(plus(T.x, ZERO), T.x),
        eq(times(plus(T.x, ZERO), ONE), T.y),
    ])


def algebra_goal():
    return eq(plus(ZERO, T.x), T.x)
