"""
The term tree: variables, constants, named placeholders and function
applications.

Terms:
    VarTerm(Variable("x"))                    -> x
    ConstTerm(Constant(QualifiedName("0")))   -> 0
    NamedTerm(QualifiedName("T"), (x, y))     -> T(x,y)   a placeholder
    FunTerm(Function(2, plus), (x, zero))     -> plus(x,0)

Every term is immutable. Transformations build new terms and share
untouched sub-trees. `==` and is_identity_to are both structural identity:
same variant, same symbol, same children in the same order. Neither is
mathematical equality: plus(a,b) and plus(b,a) are different terms.

Alpha-equivalence is decided by canonicalizing both sides with
regularize_var_name and comparing the results structurally.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Iterator, MutableMapping, Mapping, Optional

from .names import QualifiedName, Variable, Constant, Function, xn_name_provider


class Term(ABC):
    """
    Base of the closed family VarTerm | ConstTerm | NamedTerm | FunTerm.

    Subclasses provide `variables` (a frozenset computed at construction),
    `children`, and the traversal and renaming operations below.
    """

    children: tuple = ()

    @property
    def child_count(self) -> int:
        return len(self.children)

    @abstractmethod
    def is_identity_to(self, other: "Term") -> bool:
        raise NotImplementedError

    def recur_apply(self, visit: Callable[["Term"], None]) -> None:
        """Call visit on this node and then on every descendant, pre-order."""
        visit(self)
        for child in self.children:
            child.recur_apply(visit)

    @abstractmethod
    def recur_map(self, combine: Callable[["Term", "Term"], "Term"]) -> "Term":
        """
        Rebuild bottom-up.

        combine(origin, mapped) receives the original node and the node
        rebuilt from already-mapped children. For a leaf both are the leaf.
        """
        raise NotImplementedError

    @abstractmethod
    def recur_map_before_after(
        self,
        before: Callable[["Term"], Optional["Term"]],
        after: Callable[["Term"], "Term"],
    ) -> "Term":
        """
        Rebuild top-down with short-circuit.

        If before(node) returns a term, that term is the result and the
        node's children are never visited. Otherwise the children are
        processed the same way, the node is rebuilt from them, and
        after(rebuilt) is the result.
        """
        raise NotImplementedError

    @abstractmethod
    def rename_var(self, name_map: Mapping[Variable, Variable]) -> "Term":
        """
        Substitute variables according to name_map.

        Returns self, the very same object, when none of this term's
        variables is a key of name_map.
        """
        raise NotImplementedError

    @abstractmethod
    def regularize_var_name(
        self,
        name_map: MutableMapping[Variable, Variable],
        name_provider: Iterator[Variable],
    ) -> "Term":
        """
        Rename every distinct variable, in pre-order, to the next fresh
        variable from name_provider. name_map is updated in place so
        repeated occurrences (here or in later calls) get the same name.
        """
        raise NotImplementedError


class AtomicTerm(Term):
    """A term with no sub-terms."""

    def recur_map(self, combine):
        return combine(self, self)

    def recur_map_before_after(self, before, after):
        replaced = before(self)
        if replaced is not None:
            return replaced
        return after(self)


def _fresh_for(v: Variable, name_map, name_provider) -> Variable:
    nv = name_map.get(v)
    if nv is None:
        nv = next(name_provider)
        name_map[v] = nv
    return nv


@dataclass(frozen=True)
class VarTerm(AtomicTerm):
    v: Variable
    variables: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "variables", frozenset((self.v,)))

    def is_identity_to(self, other):
        return isinstance(other, VarTerm) and self.v == other.v

    def rename_var(self, name_map):
        nv = name_map.get(self.v)
        if nv is None:
            return self
        return VarTerm(nv)

    def regularize_var_name(self, name_map, name_provider):
        return VarTerm(_fresh_for(self.v, name_map, name_provider))

    def __str__(self):
        return self.v.name


@dataclass(frozen=True)
class ConstTerm(AtomicTerm):
    c: Constant
    variables: frozenset = field(default=frozenset(), init=False, repr=False, compare=False)

    def is_identity_to(self, other):
        return isinstance(other, ConstTerm) and self.c == other.c

    def rename_var(self, name_map):
        return self

    def regularize_var_name(self, name_map, name_provider):
        return self

    def __str__(self):
        return str(self.c.name)


@dataclass(frozen=True)
class NamedTerm(AtomicTerm):
    """
    A named placeholder, optionally parameterized: T or T(x,y).

    The parameters are a bound parameter list, not sub-terms.
    """
    name: QualifiedName
    parameters: tuple = ()
    variables: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "variables", frozenset(self.parameters))

    def is_identity_to(self, other):
        return (isinstance(other, NamedTerm) and self.name == other.name
                and self.parameters == other.parameters)

    def rename_var(self, name_map):
        if any(v in name_map for v in self.variables):
            return NamedTerm(self.name, tuple(name_map.get(v, v) for v in self.parameters))
        return self

    def regularize_var_name(self, name_map, name_provider):
        return NamedTerm(
            self.name,
            tuple(_fresh_for(v, name_map, name_provider) for v in self.parameters),
        )

    def __str__(self):
        if not self.parameters:
            return str(self.name)
        return f"{self.name}({','.join(v.name for v in self.parameters)})"


class CombinedTerm(Term):
    """A term built from sub-terms. Subclasses implement copy_of."""

    @abstractmethod
    def copy_of(self, new_children) -> "CombinedTerm":
        raise NotImplementedError

    def recur_map(self, combine):
        rebuilt = self.copy_of(tuple(c.recur_map(combine) for c in self.children))
        return combine(self, rebuilt)

    def recur_map_before_after(self, before, after):
        replaced = before(self)
        if replaced is not None:
            return replaced
        rebuilt = self.copy_of(
            tuple(c.recur_map_before_after(before, after) for c in self.children)
        )
        return after(rebuilt)

    def rename_var(self, name_map):
        if any(v in name_map for v in self.variables):
            return self.copy_of(tuple(c.rename_var(name_map) for c in self.children))
        return self

    def regularize_var_name(self, name_map, name_provider):
        return self.copy_of(
            tuple(c.regularize_var_name(name_map, name_provider) for c in self.children)
        )


@dataclass(frozen=True)
class FunTerm(CombinedTerm):
    """A function application such as f(a,b) or plus(x,0)."""
    f: Function
    children: tuple = ()
    variables: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        children = tuple(self.children)
        object.__setattr__(self, "children", children)
        object.__setattr__(self, "variables", frozenset().union(*(c.variables for c in children)))

    def is_identity_to(self, other):
        if not isinstance(other, FunTerm) or self.f != other.f:
            return False
        if len(self.children) != len(other.children):
            return False
        return all(a.is_identity_to(b) for a, b in zip(self.children, other.children))

    def copy_of(self, new_children):
        return FunTerm(self.f, new_children)

    def __str__(self):
        if not self.children:
            return str(self.f.name)
        return f"{self.f.name}({','.join(str(c) for c in self.children)})"


def regularize(term: Term, name_provider: Optional[Iterator[Variable]] = None) -> Term:
    """Canonical alpha-renaming of a single term, starting from x0."""
    if name_provider is None:
        name_provider = xn_name_provider()
    return term.regularize_var_name({}, name_provider)


def is_alpha_equivalent(t1: Term, t2: Term) -> bool:
    """Equal up to a consistent renaming of variables."""
    return regularize(t1).is_identity_to(regularize(t2))
