"""
Domain registry.

Each domain is a dict describing a ready-made rewriting problem:
    make_context:  () -> FormulaContext
    rules:         list[Rule]
    goal:          () -> Formula          [optional]
    description:   str
"""

from .algebra import make_algebra_context, algebra_goal, ALGEBRA_RULES
from .logic import make_logic_context, logic_goal, LOGIC_RULES


DOMAINS = {
    "algebra": {
        "make_context": make_algebra_context,
        "rules":        ALGEBRA_RULES,
        "goal":         algebra_goal,
        "description":  "Term rewriting: commutativity and unit laws of + and *",
    },
    "logic": {
        "make_context": make_logic_context,
        "rules":        LOGIC_RULES,
        "goal":         logic_goal,
        "description":  "Formula rewriting: double negation, implication, De Morgan",
    },
}
