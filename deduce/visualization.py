"""
Visualization and reporting utilities.
"""

from .core.formula import FormulaContext
from .core.deduction import TowardResult, Reached


def print_context(context: FormulaContext):
    """Print the known formulas, oldest first."""
    print(f"\n{'='*60}")
    print(f"Context ({len(context)}):")
    for i, f in enumerate(context.formulas):
        print(f"  {i}. {f}")
    print(f"{'='*60}")


def print_deductions(deductions: list):
    """Print each deduction as premises |- conclusion [rule]."""
    if not deductions:
        print("  (nothing derived)")
        return
    for d in deductions:
        print(f"  {d}")


def print_toward_result(result: TowardResult):
    if isinstance(result, Reached):
        d = result.result
        print(f"  REACHED {d.conclusion} by {d.rule.name} from {d.premises[0]}")
    else:
        print(f"  not reached ({len(result.results)} candidates tried)")


def export_dot(deductions: list, path="deductions.dot"):
    """
    Export premise -> conclusion edges as a DOT file for Graphviz.

    Derived formulas are filled lightblue; premises that no deduction
    concludes are the given formulas and are filled lightgray.
    """
    def quoted(x):
        return str(x).replace('"', '\\"')

    derived = {quoted(d.conclusion) for d in deductions}
    given = {quoted(p) for d in deductions for p in d.premises} - derived

    with open(path, "w") as f:
        f.write("digraph deduce {\n")
        f.write("  rankdir=BT;\n")
        f.write("  node [shape=box, style=rounded];\n")
        for label in sorted(given):
            f.write(f'  "{label}" [fillcolor=lightgray, style=filled];\n')
        for label in sorted(derived):
            f.write(f'  "{label}" [fillcolor=lightblue, style=filled];\n')
        for d in deductions:
            rule_name = quoted(getattr(d.rule, "name", d.rule))
            for premise in d.premises:
                f.write(f'  "{quoted(premise)}" -> "{quoted(d.conclusion)}" [label="{rule_name}"];\n')
        f.write("}\n")
    print(f"Graph exported to {path}")
