"""
Symbols: the names that label term and formula nodes.

QualifiedName is the opaque identifier. Variable, Constant, Function and
Predicate wrap it (or a plain string, for variables) and are compared by
name only. Everything here is immutable and hashable.

Fresh variables come from a name provider: an infinite iterator the
caller owns. There is no global counter.
"""

from dataclasses import dataclass, field
from itertools import count
from typing import Iterator, Optional


@dataclass(frozen=True)
class QualifiedName:
    """
    A dotted name such as "algebra.plus".

    Only full_name takes part in equality and hashing; display_name is
    what gets printed and defaults to the last dotted segment.
    """
    full_name: str
    display_name: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if self.display_name is None:
            object.__setattr__(self, "display_name", self.full_name.rsplit(".", 1)[-1])

    def __str__(self):
        return self.display_name


@dataclass(frozen=True)
class Variable:
    """A variable symbol. Two variables are the same iff their names are."""
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Constant:
    name: QualifiedName

    def __str__(self):
        return str(self.name)


@dataclass(frozen=True)
class Function:
    """
    A function symbol. The arity documents intent; FunTerm never checks it.
    """
    arity: int
    name: QualifiedName

    def __str__(self):
        return str(self.name)


@dataclass(frozen=True)
class Predicate:
    """A predicate symbol for atomic formulas. Arity is not enforced either."""
    arity: int
    name: QualifiedName

    def __str__(self):
        return str(self.name)


def name_provider(prefix: str) -> Iterator[Variable]:
    """Yield prefix0, prefix1, prefix2, ... forever."""
    return (Variable(f"{prefix}{i}") for i in count())


def xn_name_provider() -> Iterator[Variable]:
    """A new supply of x0, x1, x2, ... Each call starts again from x0."""
    return name_provider("x")
