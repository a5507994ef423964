"""
Formulas and the context of known formulas.

Formulas follow the same discipline as terms: immutable trees, structural
identity through is_identity_to (and `==`), sharing of untouched sub-trees,
pre-order traversal.

Formulas:
    PredicateFormula(eq, (x, y))          -> eq(x,y)
    NamedFormula(QualifiedName("P"))      -> P          a placeholder
    NotFormula(P)                         -> ~P
    AndFormula(P, Q)                      -> (P & Q)
    OrFormula(P, Q)                       -> (P | Q)
    ImplyFormula(P, Q)                    -> (P -> Q)
    EquivFormula(P, Q)                    -> (P <-> Q)
    ForAllFormula(x, P)                   -> forall x. P
    ExistFormula(x, P)                    -> exists x. P

Quantifiers bind their variable, so `variables` holds free variables only
and rename_var never touches bound occurrences and never lets a bound
variable capture a substituted one.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Iterator, MutableMapping, Mapping, Optional

from .names import QualifiedName, Variable, Predicate, xn_name_provider
from .term import Term, _fresh_for


class Formula(ABC):
    """
    Base of the closed family of formula variants listed in the module
    docstring.
    """

    children: tuple = ()
    terms: tuple = ()

    @property
    def child_count(self) -> int:
        return len(self.children)

    @property
    def all_variables(self) -> frozenset:
        """Every variable mentioned anywhere, bound or free."""
        found = set()

        def visit(f):
            if isinstance(f, QuantifiedFormula):
                found.add(f.v)
            found.update(f.variables)
            for t in f.terms:
                found.update(t.variables)

        self.recur_apply(visit)
        return frozenset(found)

    @abstractmethod
    def is_identity_to(self, other: "Formula") -> bool:
        raise NotImplementedError

    def recur_apply(self, visit: Callable[["Formula"], None]) -> None:
        """Visit formula nodes pre-order. Terms are not visited."""
        visit(self)
        for child in self.children:
            child.recur_apply(visit)

    @abstractmethod
    def recur_map(self, combine: Callable[["Formula", "Formula"], "Formula"]) -> "Formula":
        raise NotImplementedError

    @abstractmethod
    def recur_map_before_after(
        self,
        before: Callable[["Formula"], Optional["Formula"]],
        after: Callable[["Formula"], "Formula"],
    ) -> "Formula":
        raise NotImplementedError

    @abstractmethod
    def map_terms(self, fn: Callable[[Term], Term]) -> "Formula":
        """
        Apply fn to every term argument of every atomic formula.
        Returns self when fn hands back every term unchanged.
        """
        raise NotImplementedError

    @abstractmethod
    def rename_var(self, name_map: Mapping[Variable, Variable]) -> "Formula":
        raise NotImplementedError

    @abstractmethod
    def regularize_var_name(
        self,
        name_map: MutableMapping[Variable, Variable],
        name_provider: Iterator[Variable],
    ) -> "Formula":
        raise NotImplementedError


class AtomicFormula(Formula):

    def recur_map(self, combine):
        return combine(self, self)

    def recur_map_before_after(self, before, after):
        replaced = before(self)
        if replaced is not None:
            return replaced
        return after(self)


@dataclass(frozen=True)
class PredicateFormula(AtomicFormula):
    p: Predicate
    terms: tuple = ()
    variables: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        terms = tuple(self.terms)
        object.__setattr__(self, "terms", terms)
        object.__setattr__(self, "variables", frozenset().union(*(t.variables for t in terms)))

    def is_identity_to(self, other):
        if not isinstance(other, PredicateFormula) or self.p != other.p:
            return False
        if len(self.terms) != len(other.terms):
            return False
        return all(a.is_identity_to(b) for a, b in zip(self.terms, other.terms))

    def map_terms(self, fn):
        mapped = tuple(fn(t) for t in self.terms)
        if all(a is b for a, b in zip(mapped, self.terms)):
            return self
        return PredicateFormula(self.p, mapped)

    def rename_var(self, name_map):
        if any(v in name_map for v in self.variables):
            return PredicateFormula(self.p, tuple(t.rename_var(name_map) for t in self.terms))
        return self

    def regularize_var_name(self, name_map, name_provider):
        return PredicateFormula(
            self.p,
            tuple(t.regularize_var_name(name_map, name_provider) for t in self.terms),
        )

    def __str__(self):
        if not self.terms:
            return str(self.p.name)
        return f"{self.p.name}({','.join(str(t) for t in self.terms)})"


@dataclass(frozen=True)
class NamedFormula(AtomicFormula):
    """A formula placeholder, P or P(x,y)."""
    name: QualifiedName
    parameters: tuple = ()
    variables: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "variables", frozenset(self.parameters))

    def is_identity_to(self, other):
        return (isinstance(other, NamedFormula) and self.name == other.name
                and self.parameters == other.parameters)

    def map_terms(self, fn):
        return self

    def rename_var(self, name_map):
        if any(v in name_map for v in self.variables):
            return NamedFormula(self.name, tuple(name_map.get(v, v) for v in self.parameters))
        return self

    def regularize_var_name(self, name_map, name_provider):
        return NamedFormula(
            self.name,
            tuple(_fresh_for(v, name_map, name_provider) for v in self.parameters),
        )

    def __str__(self):
        if not self.parameters:
            return str(self.name)
        return f"{self.name}({','.join(v.name for v in self.parameters)})"


class CombinedFormula(Formula):
    """Connectives. Subclasses implement copy_of."""

    @abstractmethod
    def copy_of(self, new_children) -> "CombinedFormula":
        raise NotImplementedError

    def is_identity_to(self, other):
        if type(other) is not type(self) or len(self.children) != len(other.children):
            return False
        return all(a.is_identity_to(b) for a, b in zip(self.children, other.children))

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

    def map_terms(self, fn):
        mapped = tuple(c.map_terms(fn) for c in self.children)
        if all(a is b for a, b in zip(mapped, self.children)):
            return self
        return self.copy_of(mapped)

    def rename_var(self, name_map):
        if any(v in name_map for v in self.variables):
            return self.copy_of(tuple(c.rename_var(name_map) for c in self.children))
        return self

    def regularize_var_name(self, name_map, name_provider):
        return self.copy_of(
            tuple(c.regularize_var_name(name_map, name_provider) for c in self.children)
        )


@dataclass(frozen=True)
class NotFormula(CombinedFormula):
    child: Formula
    variables: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "variables", self.child.variables)

    @property
    def children(self):
        return (self.child,)

    def copy_of(self, new_children):
        return NotFormula(new_children[0])

    def __str__(self):
        return f"~{self.child}"


class BinaryFormula(CombinedFormula):
    symbol = "?"

    @property
    def children(self):
        return (self.left, self.right)

    def copy_of(self, new_children):
        return type(self)(new_children[0], new_children[1])

    def __str__(self):
        return f"({self.left} {self.symbol} {self.right})"


def _binary_post_init(self):
    object.__setattr__(self, "variables", self.left.variables | self.right.variables)


@dataclass(frozen=True)
class AndFormula(BinaryFormula):
    left: Formula
    right: Formula
    variables: frozenset = field(init=False, repr=False, compare=False)
    symbol = "&"
    __post_init__ = _binary_post_init


@dataclass(frozen=True)
class OrFormula(BinaryFormula):
    left: Formula
    right: Formula
    variables: frozenset = field(init=False, repr=False, compare=False)
    symbol = "|"
    __post_init__ = _binary_post_init


@dataclass(frozen=True)
class ImplyFormula(BinaryFormula):
    left: Formula
    right: Formula
    variables: frozenset = field(init=False, repr=False, compare=False)
    symbol = "->"
    __post_init__ = _binary_post_init


@dataclass(frozen=True)
class EquivFormula(BinaryFormula):
    left: Formula
    right: Formula
    variables: frozenset = field(init=False, repr=False, compare=False)
    symbol = "<->"
    __post_init__ = _binary_post_init


class QuantifiedFormula(CombinedFormula):
    keyword = "?"

    @property
    def children(self):
        return (self.child,)

    def copy_of(self, new_children):
        return type(self)(self.v, new_children[0])

    def is_identity_to(self, other):
        return (type(other) is type(self) and self.v == other.v
                and self.child.is_identity_to(other.child))

    def rename_var(self, name_map):
        relevant = {k: w for k, w in name_map.items()
                    if k != self.v and k in self.child.variables}
        if not relevant:
            return self
        bound, body = self.v, self.child
        if bound in relevant.values():
            used = body.all_variables | set(relevant) | set(relevant.values())
            fresh = next(v for v in xn_name_provider() if v not in used)
            body = body.rename_var({bound: fresh})
            bound = fresh
        return type(self)(bound, body.rename_var(relevant))

    def regularize_var_name(self, name_map, name_provider):
        # The bound variable gets its own fresh name inside the body only.
        outer = name_map.pop(self.v, None)
        bound = _fresh_for(self.v, name_map, name_provider)
        child = self.child.regularize_var_name(name_map, name_provider)
        del name_map[self.v]
        if outer is not None:
            name_map[self.v] = outer
        return type(self)(bound, child)

    def __str__(self):
        return f"{self.keyword} {self.v}. {self.child}"


def _quantified_post_init(self):
    object.__setattr__(self, "variables", self.child.variables - {self.v})


@dataclass(frozen=True)
class ForAllFormula(QuantifiedFormula):
    v: Variable
    child: Formula
    variables: frozenset = field(init=False, repr=False, compare=False)
    keyword = "forall"
    __post_init__ = _quantified_post_init


@dataclass(frozen=True)
class ExistFormula(QuantifiedFormula):
    v: Variable
    child: Formula
    variables: frozenset = field(init=False, repr=False, compare=False)
    keyword = "exists"
    __post_init__ = _quantified_post_init


def regularize(formula: Formula, name_provider: Optional[Iterator[Variable]] = None) -> Formula:
    if name_provider is None:
        name_provider = xn_name_provider()
    return formula.regularize_var_name({}, name_provider)


def is_alpha_equivalent(f1: Formula, f2: Formula) -> bool:
    return regularize(f1).is_identity_to(regularize(f2))


class FormulaContext:
    """
    The formulas obtained so far, oldest first.

    `formulas` is a tuple snapshot, so a rule iterating over it is not
    affected by later additions.
    """

    def __init__(self, formulas=()):
        self._formulas = list(formulas)

    @property
    def formulas(self) -> tuple:
        return tuple(self._formulas)

    def contains(self, formula: Formula) -> bool:
        return any(f.is_identity_to(formula) for f in self._formulas)

    def add(self, formula: Formula) -> bool:
        """Append formula unless an identical one is already known."""
        if self.contains(formula):
            return False
        self._formulas.append(formula)
        return True

    def __len__(self):
        return len(self._formulas)

    def __iter__(self):
        return iter(self._formulas)

    def __repr__(self):
        return f"FormulaContext({len(self._formulas)} formulas)"
