"""
Rules: named transformations from a context of known formulas to new ones.

Every rule answers two questions:
    apply(context, formulas, terms)
        -> every one-step rewrite of every known formula, as Deductions
    apply_toward(context, formulas, terms, desired_result)
        -> Reached if some one-step rewrite is exactly desired_result,
           NotReached with the candidates tried otherwise

Finding nothing is an ordinary answer ([] or NotReached(())), never an
exception. Deciding which rule to try next belongs to the caller.

MatcherRule turns a matcher plus a replacer into such a rule. The matcher
supplies:
    replace_one(formula, replacer) -> list[Formula]   one per occurrence
    replace_all(formula, replacer) -> Formula         all occurrences at once
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Sequence

from .names import QualifiedName
from .formula import Formula, FormulaContext
from .term import Term
from .deduction import Deduction, TowardResult, Reached, NotReached

logger = logging.getLogger(__name__)


class Rule(ABC):
    """
    The rule capability.

    `formulas` and `terms` are optional rule-specific parameters, e.g. a
    witness term for an instantiation rule. They may or may not be known
    formulas. Rules that work purely over the context ignore them.
    """

    name: QualifiedName
    description: str

    @abstractmethod
    def apply_toward(
        self,
        context: FormulaContext,
        formulas: Sequence[Formula],
        terms: Sequence[Term],
        desired_result: Formula,
    ) -> TowardResult:
        raise NotImplementedError

    @abstractmethod
    def apply(
        self,
        context: FormulaContext,
        formulas: Sequence[Formula],
        terms: Sequence[Term],
    ) -> List[Deduction]:
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}({self.name.full_name!r})"


def _add_if_new(results: list, candidate: Formula) -> None:
    if not any(r.is_identity_to(candidate) for r in results):
        results.append(candidate)


class MatcherRule(Rule):
    """A rewrite rule driven by one matcher and one replacer."""

    def __init__(self, name: QualifiedName, description: str, matcher, replacer: Callable):
        self.name = name
        self.description = description
        self.matcher = matcher
        self.replacer = replacer

    def apply_one(self, f: Formula) -> List[Formula]:
        """
        All distinct one-step rewrites of f.

        Single-occurrence rewrites come first, in matcher order, followed
        by the all-occurrences rewrite when it changes f. Structural
        duplicates are kept once, at their first position.
        """
        results = []
        for r in self.matcher.replace_one(f, self.replacer):
            _add_if_new(results, r)
        replaced = self.matcher.replace_all(f, self.replacer)
        if not f.is_identity_to(replaced):
            _add_if_new(results, replaced)
        return results

    def apply_toward(self, context, formulas, terms, desired_result):
        # Newest formulas first.
        all_results = []
        known = context.formulas
        for f in reversed(known):
            for r in self.apply_one(f):
                deduction = Deduction(self, desired_result, (f,))
                if r.is_identity_to(desired_result):
                    logger.debug("%s reached %s from %s", self.name, desired_result, f)
                    return Reached(deduction)
                all_results.append(deduction)
        logger.debug("%s did not reach %s (%d candidates over %d formulas)",
                     self.name, desired_result, len(all_results), len(known))
        return NotReached(tuple(all_results))

    def apply(self, context, formulas, terms):
        deductions = []
        for f in context.formulas:
            for r in self.apply_one(f):
                deductions.append(Deduction(self, r, (f,)))
        logger.debug("%s produced %d deductions", self.name, len(deductions))
        return deductions


class MatcherDefRule(MatcherRule):
    """
    A rule with a second matcher/replacer pair, typically a definition
    usable in both directions. Candidates from both pairs are merged into
    one list without structural duplicates.
    """

    def __init__(self, name, description, m1, r1: Callable, m2, r2: Callable):
        super().__init__(name, description, m1, r1)
        self.m2 = m2
        self.r2 = r2

    def apply_one(self, f: Formula) -> List[Formula]:
        results = []

        def replace_and_add(m, r):
            for t in m.replace_one(f, r):
                _add_if_new(results, t)
            # Always self.matcher, also for the second pair.
            t = self.matcher.replace_all(f, r)
            if not t.is_identity_to(f):
                _add_if_new(results, t)

        replace_and_add(self.matcher, self.replacer)
        replace_and_add(self.m2, self.r2)
        return results
