"""
Property-based and unit tests for the term model.

The core claims:
    - Identity:       is_identity_to is reflexive, symmetric, order-sensitive
    - Sharing:        rename_var returns the very same node when nothing changes
    - Canonical form: regularizing twice changes nothing
    - Alpha:          isomorphic terms regularize to identical terms
    - Traversal:      recur_apply is pre-order, recur_map rebuilds faithfully,
                      recur_map_before_after short-circuits
"""

import pytest
from hypothesis import given, assume
from hypothesis import strategies as st

from deduce.core.names import QualifiedName, Variable, Constant, Function, xn_name_provider
from deduce.core.term import (
    Term, CombinedTerm, VarTerm, ConstTerm, NamedTerm, FunTerm, regularize, is_alpha_equivalent,
)


F = Function(2, QualifiedName("f"))
G = Function(1, QualifiedName("g"))


def var(name):
    return VarTerm(Variable(name))


def const(name):
    return ConstTerm(Constant(QualifiedName(name)))


def f(a, b):
    return FunTerm(F, (a, b))


def g(a):
    return FunTerm(G, (a,))


# ── Generators ──────────────────────────────────────────────────────────────

variables = st.sampled_from(["x", "y", "z", "u", "v"]).map(Variable)
constants = st.sampled_from(["0", "1", "a", "b"]).map(lambda n: Constant(QualifiedName(n)))


@st.composite
def terms(draw, max_depth=3):
    if max_depth == 0:
        return draw(st.one_of(variables.map(VarTerm), constants.map(ConstTerm)))
    choice = draw(st.integers(min_value=0, max_value=4))
    if choice == 0:
        return VarTerm(draw(variables))
    if choice == 1:
        return ConstTerm(draw(constants))
    if choice == 2:
        params = draw(st.lists(variables, max_size=2))
        return NamedTerm(QualifiedName(draw(st.sampled_from(["T", "S"]))), tuple(params))
    fn = draw(st.sampled_from([F, G, Function(0, QualifiedName("h"))]))
    args = [draw(terms(max_depth=max_depth - 1)) for _ in range(fn.arity)]
    return FunTerm(fn, args)


renamings = st.dictionaries(variables, variables, max_size=3)


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestAbstractBases:
    def test_term_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Term()

    def test_combined_term_needs_copy_of(self):
        class Partial(CombinedTerm):
            def is_identity_to(self, other):
                return self is other

        with pytest.raises(TypeError):
            Partial()


class TestVariables:
    def test_var_term(self):
        assert var("x").variables == {Variable("x")}

    def test_const_term_has_none(self):
        assert const("0").variables == frozenset()

    def test_named_term_parameters(self):
        t = NamedTerm(QualifiedName("T"), (Variable("x"), Variable("y")))
        assert t.variables == {Variable("x"), Variable("y")}
        assert t.child_count == 0

    def test_fun_term_union(self):
        t = f(var("x"), g(f(var("y"), const("0"))))
        assert t.variables == {Variable("x"), Variable("y")}

    def test_list_arguments_become_tuple(self):
        t = FunTerm(F, [var("x"), var("y")])
        assert isinstance(t.children, tuple)
        assert t.child_count == 2


class TestIsIdentityTo:
    def test_same_shape(self):
        assert f(var("a"), var("b")).is_identity_to(f(var("a"), var("b")))

    def test_argument_order_matters(self):
        assert not f(var("a"), var("b")).is_identity_to(f(var("b"), var("a")))

    def test_different_variants(self):
        assert not var("a").is_identity_to(const("a"))
        assert not const("a").is_identity_to(var("a"))

    def test_named_term_parameters_compared(self):
        n1 = NamedTerm(QualifiedName("T"), (Variable("x"),))
        n2 = NamedTerm(QualifiedName("T"), (Variable("y"),))
        assert not n1.is_identity_to(n2)

    def test_different_arity_same_symbol(self):
        h = Function(2, QualifiedName("f"))
        assert not FunTerm(h, (var("x"),)).is_identity_to(FunTerm(h, (var("x"), var("x"))))

    def test_display_name_not_compared(self):
        c1 = ConstTerm(Constant(QualifiedName("alg.zero", "0")))
        c2 = ConstTerm(Constant(QualifiedName("alg.zero", "O")))
        assert c1.is_identity_to(c2)


class TestStr:
    def test_rendering(self):
        t = f(var("x"), g(const("0")))
        assert str(t) == "f(x,g(0))"

    def test_named_term(self):
        assert str(NamedTerm(QualifiedName("T"))) == "T"
        assert str(NamedTerm(QualifiedName("T"), (Variable("x"), Variable("y")))) == "T(x,y)"

    def test_nullary_function(self):
        assert str(FunTerm(Function(0, QualifiedName("e")), ())) == "e"


class TestRenameVar:
    def test_renames_variable(self):
        t = f(var("x"), var("y")).rename_var({Variable("x"): Variable("z")})
        assert t.is_identity_to(f(var("z"), var("y")))

    def test_unaffected_returns_same_object(self):
        t = f(var("x"), g(var("y")))
        assert t.rename_var({Variable("q"): Variable("z")}) is t

    def test_unaffected_subtree_is_shared(self):
        right = g(var("y"))
        t = f(var("x"), right)
        renamed = t.rename_var({Variable("x"): Variable("z")})
        assert renamed.children[1] is right

    def test_named_term_parameters_renamed(self):
        t = NamedTerm(QualifiedName("T"), (Variable("x"), Variable("y")))
        renamed = t.rename_var({Variable("y"): Variable("x")})
        assert renamed.parameters == (Variable("x"), Variable("x"))

    def test_constant_always_itself(self):
        c = const("0")
        assert c.rename_var({Variable("x"): Variable("y")}) is c


class TestRegularize:
    def test_fresh_names_in_preorder(self):
        t = f(var("q"), g(var("p")))
        assert regularize(t).is_identity_to(f(var("x0"), g(var("x1"))))

    def test_repeated_variable_same_fresh_name(self):
        t = f(var("q"), var("q"))
        assert regularize(t).is_identity_to(f(var("x0"), var("x0")))

    def test_name_map_threads_across_terms(self):
        name_map = {}
        provider = xn_name_provider()
        t1 = var("p").regularize_var_name(name_map, provider)
        t2 = f(var("q"), var("p")).regularize_var_name(name_map, provider)
        assert t1.is_identity_to(var("x0"))
        assert t2.is_identity_to(f(var("x1"), var("x0")))
        assert name_map == {Variable("p"): Variable("x0"), Variable("q"): Variable("x1")}

    def test_alpha_equivalent_shapes(self):
        assert is_alpha_equivalent(f(var("x"), var("y")), f(var("p"), var("q")))

    def test_not_alpha_equivalent_when_sharing_differs(self):
        assert not is_alpha_equivalent(f(var("x"), var("x")), f(var("x"), var("y")))

    def test_named_parameters_regularized(self):
        t = NamedTerm(QualifiedName("T"), (Variable("b"), Variable("a")))
        assert regularize(t).parameters == (Variable("x0"), Variable("x1"))


class TestRecurApply:
    def test_preorder(self):
        t = f(g(var("x")), const("0"))
        seen = []
        t.recur_apply(lambda node: seen.append(str(node)))
        assert seen == ["f(g(x),0)", "g(x)", "x", "0"]

    def test_leaf_visited_once(self):
        seen = []
        var("x").recur_apply(seen.append)
        assert seen == [var("x")]


class TestRecurMap:
    def test_identity_combiner(self):
        t = FunTerm(G, (var("v"),))
        assert t.recur_map(lambda origin, mapped: mapped).is_identity_to(t)

    def test_leaf_gets_itself_twice(self):
        calls = []

        def combine(origin, mapped):
            calls.append((origin, mapped))
            return mapped

        leaf = var("x")
        leaf.recur_map(combine)
        assert calls == [(leaf, leaf)]
        assert calls[0][0] is calls[0][1]

    def test_bottom_up_order(self):
        order = []

        def combine(origin, mapped):
            order.append(str(origin))
            return mapped

        f(g(var("x")), const("0")).recur_map(combine)
        assert order == ["x", "g(x)", "0", "f(g(x),0)"]

    def test_mapped_sees_rewritten_children(self):
        def combine(origin, mapped):
            if isinstance(mapped, ConstTerm):
                return var("c")
            return mapped

        result = f(const("0"), g(const("1"))).recur_map(combine)
        assert result.is_identity_to(f(var("c"), g(var("c"))))


class TestRecurMapBeforeAfter:
    def test_before_short_circuits(self):
        visited = []
        target = g(var("x"))

        def before(t):
            visited.append(str(t))
            if t.is_identity_to(target):
                return const("0")
            return None

        result = f(target, var("y")).recur_map_before_after(before, lambda t: t)
        assert result.is_identity_to(f(const("0"), var("y")))
        assert "x" not in visited

    def test_after_sees_rebuilt_node(self):
        def after(t):
            if isinstance(t, FunTerm) and t.f == G:
                return t.children[0]
            return t

        result = f(g(g(var("x"))), var("y")).recur_map_before_after(lambda t: None, after)
        assert result.is_identity_to(f(var("x"), var("y")))

    def test_leaf_after(self):
        result = var("x").recur_map_before_after(lambda t: None, lambda t: const("1"))
        assert result.is_identity_to(const("1"))


# ── Property-based tests ─────────────────────────────────────────────────────

class TestTermProperties:

    @given(terms())
    def test_reflexive(self, t):
        assert t.is_identity_to(t)

    @given(terms(), terms())
    def test_symmetric(self, t1, t2):
        assert t1.is_identity_to(t2) == t2.is_identity_to(t1)

    @given(terms(), terms())
    def test_agrees_with_eq(self, t1, t2):
        assert t1.is_identity_to(t2) == (t1 == t2)

    @given(terms(), terms())
    def test_congruence(self, a, c):
        b = a.recur_map(lambda origin, mapped: mapped)
        assert f(a, c).is_identity_to(f(b, c))
        assert g(a).is_identity_to(g(b))

    @given(terms(), renamings)
    def test_rename_noop_when_disjoint(self, t, mapping):
        assume(not any(v in mapping for v in t.variables))
        assert t.rename_var(mapping) is t

    @given(terms(), renamings)
    def test_rename_keeps_variable_set_consistent(self, t, mapping):
        renamed = t.rename_var(mapping)
        assert renamed.variables == {mapping.get(v, v) for v in t.variables}

    @given(terms())
    def test_regularize_idempotent(self, t):
        once = regularize(t)
        assert regularize(once).is_identity_to(once)

    @given(terms(), renamings)
    def test_injective_renaming_is_alpha_equivalent(self, t, mapping):
        # Only injective renamings onto unused names preserve alpha-equivalence.
        assume(len(set(mapping.values())) == len(mapping))
        assume(not (set(mapping.values()) & (t.variables - set(mapping))))
        assert is_alpha_equivalent(t, t.rename_var(mapping))

    @given(terms())
    def test_identity_recur_map(self, t):
        assert t.recur_map(lambda origin, mapped: mapped).is_identity_to(t)

    @given(terms())
    def test_recur_apply_visits_every_node(self, t):
        count = []
        t.recur_apply(lambda node: count.append(1))

        def size(node):
            return 1 + sum(size(c) for c in node.children)

        assert len(count) == size(t)
