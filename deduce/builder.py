"""
Shorthand for building terms and formulas by hand.

    from deduce.builder import SIMPLE as T

    T.fn("plus", T.x, T.const("0"))      -> plus(x,0)
    T("plus", T.x, T.const("0"))         -> same thing
    T.pred("eq", T.x, T.y)               -> eq(x,y)

Arities are taken from the argument count. RefTermContext resolves
references against match bindings, for writing replacers:

    def replacer(bindings):
        T = RefTermContext(bindings)
        return T("plus", T.Y, T.X)
"""

from typing import Callable

from .core.names import QualifiedName, Variable, Constant, Function, Predicate, xn_name_provider
from .core.term import Term, VarTerm, ConstTerm, NamedTerm, FunTerm
from .core.formula import PredicateFormula, NamedFormula
from .matcher.bindings import Bindings


def _as_variable(p) -> Variable:
    if isinstance(p, VarTerm):
        return p.v
    if isinstance(p, Variable):
        return p
    return Variable(p)


class TermBuilder:

    def var(self, name: str) -> Term:
        return VarTerm(Variable(name))

    def const(self, name: str) -> Term:
        return ConstTerm(Constant(QualifiedName(name)))

    def named(self, name: str, *parameters) -> Term:
        return NamedTerm(QualifiedName(name), tuple(_as_variable(p) for p in parameters))

    def fn(self, name: str, *args: Term) -> Term:
        return FunTerm(Function(len(args), QualifiedName(name)), args)

    def __call__(self, name: str, *args: Term) -> Term:
        return self.fn(name, *args)

    def pred(self, name: str, *args: Term) -> PredicateFormula:
        return PredicateFormula(Predicate(len(args), QualifiedName(name)), args)

    def formula_ref(self, name: str, *parameters) -> NamedFormula:
        return NamedFormula(QualifiedName(name), tuple(_as_variable(p) for p in parameters))


class SimpleTermBuilder(TermBuilder):
    """A builder with the usual single-letter variables ready to use."""

    def __init__(self):
        for name in ("a", "b", "c", "A", "B", "C", "x", "y", "X", "Y"):
            setattr(self, name, self.var(name))


SIMPLE = SimpleTermBuilder()


class RefTermContext(TermBuilder):
    """A builder whose x, y, X, Y refer to the terms bound by a match."""

    def __init__(self, bindings: Bindings):
        self.bindings = bindings
        self.used_variables = set()
        for name in bindings:
            self.used_variables.update(bindings[name].variables)

    def term_ref(self, name: str) -> Term:
        return self.bindings.term(name)

    @property
    def x(self):
        return self.term_ref("x")

    @property
    def y(self):
        return self.term_ref("y")

    @property
    def X(self):
        return self.term_ref("X")

    @property
    def Y(self):
        return self.term_ref("Y")

    def unused_var(self) -> Term:
        """The first of x0, x1, ... not occurring in any bound term."""
        v = next(v for v in xn_name_provider() if v not in self.used_variables)
        return VarTerm(v)


def build_term(action: Callable[[TermBuilder], Term]) -> Term:
    return action(SIMPLE)
