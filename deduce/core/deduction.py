"""
Deductions and the outcome of a goal-directed rule application.

A Deduction is the justification record: which rule, applied to which
premises, yields which conclusion. Proof reconstruction walks these
records back from a goal to the formulas it came from.

apply_toward returns a TowardResult, which is exactly one of
    Reached(result)      the rule produced the desired formula
    NotReached(results)  it did not; results are the candidates tried
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .formula import Formula


@dataclass(frozen=True)
class Deduction:
    """
    rule applied to premises yields conclusion.

    more_info carries rule-specific annotations (for instance, the
    witness term chosen by an instantiation rule). It is copied into a
    read-only mapping and takes no part in hashing.
    """
    rule: Any
    conclusion: Formula
    premises: tuple = ()
    more_info: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "premises", tuple(self.premises))
        object.__setattr__(self, "more_info", MappingProxyType(dict(self.more_info)))

    @property
    def name(self) -> str:
        rule_name = getattr(self.rule, "name", self.rule)
        return f"{self.conclusion}  [{rule_name}]"

    def __str__(self):
        premises = ", ".join(str(p) for p in self.premises)
        return f"{premises} |- {self.conclusion}  [{getattr(self.rule, 'name', self.rule)}]"


class TowardResult(ABC):
    """Base of the closed pair Reached | NotReached."""

    @property
    @abstractmethod
    def reached(self) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class Reached(TowardResult):
    result: Deduction

    @property
    def reached(self) -> bool:
        return True

    @classmethod
    def of(cls, rule, conclusion: Formula, premises, more_info: Optional[dict] = None) -> "Reached":
        return cls(Deduction(rule, conclusion, tuple(premises), dict(more_info or {})))


@dataclass(frozen=True)
class NotReached(TowardResult):
    results: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "results", tuple(self.results))

    @property
    def reached(self) -> bool:
        return False
