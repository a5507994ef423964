"""
Match results.

A Bindings maps placeholder names to the terms or formulas they matched.
Replacers receive one and look their references up by name:

    def swap(b):
        return FunTerm(plus, (b.term("B"), b.term("A")))

Looking up a name that was never bound is the one hard failure of this
layer: it raises NoSuchTermError / NoSuchFormulaError, both LookupErrors.
"""

from typing import Any, Dict, Optional

from ..core.term import Term
from ..core.formula import Formula


class NoSuchTermError(LookupError):
    pass


class NoSuchFormulaError(LookupError):
    pass


class Bindings:
    """
    Immutable name -> Term | Formula mapping.

    extend() returns a new Bindings, or None when the name is already
    bound to something structurally different.
    """

    __slots__ = ("_dict",)

    def __init__(self, pairs: Optional[Dict[str, Any]] = None):
        self._dict = dict(pairs or {})

    def extend(self, name: str, value) -> Optional["Bindings"]:
        existing = self._dict.get(name)
        if existing is not None:
            if type(existing) is type(value) and existing.is_identity_to(value):
                return self
            return None
        extended = dict(self._dict)
        extended[name] = value
        return Bindings(extended)

    def term(self, name: str) -> Term:
        value = self._dict.get(name)
        if not isinstance(value, Term):
            raise NoSuchTermError(f"No term named `{name}`")
        return value

    def formula(self, name: str) -> Formula:
        value = self._dict.get(name)
        if not isinstance(value, Formula):
            raise NoSuchFormulaError(f"No formula named `{name}`")
        return value

    def __getitem__(self, name: str):
        return self._dict[name]

    def get(self, name: str, default=None):
        return self._dict.get(name, default)

    def __contains__(self, name: str) -> bool:
        return name in self._dict

    def __iter__(self):
        return iter(self._dict)

    def __len__(self) -> int:
        return len(self._dict)

    def __eq__(self, other):
        return isinstance(other, Bindings) and self._dict == other._dict

    def __repr__(self):
        inner = ", ".join(f"{k}: {v}" for k, v in self._dict.items())
        return f"Bindings({{{inner}}})"

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._dict)
