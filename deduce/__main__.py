"""
CLI entry point. Run as: python -m deduce --domain <name>
"""

import argparse
import logging

from .domains import DOMAINS
from .visualization import print_context, print_deductions, print_toward_result, export_dot


def main(argv=None):
    parser = argparse.ArgumentParser(description="Apply rewrite rules to a context of formulas")
    parser.add_argument(
        "--domain",
        choices=list(DOMAINS.keys()),
        default="algebra",
        help="Which domain to explore",
    )
    parser.add_argument("--toward", action="store_true",
                        help="Search for the domain goal instead of listing all rewrites")
    parser.add_argument("--dot",   type=str, default=None, help="Export DOT graph to file")
    parser.add_argument("--quiet", action="store_true",    help="Less output")
    parser.add_argument("--debug", action="store_true",    help="Log rule internals")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    domain = DOMAINS[args.domain]
    context = domain["make_context"]()
    rules = domain["rules"]

    print(f"Domain: {args.domain} -- {domain['description']}")
    if not args.quiet:
        print_context(context)

    derived = []
    if args.toward and "goal" in domain:
        goal = domain["goal"]()
        print(f"\nGoal: {goal}")
        for rule in rules:
            result = rule.apply_toward(context, [], [], goal)
            print(f"\n[{rule.name}] {rule.description}")
            print_toward_result(result)
            if result.reached:
                derived.append(result.result)
                break
    else:
        for rule in rules:
            deductions = rule.apply(context, [], [])
            derived.extend(deductions)
            if not args.quiet:
                print(f"\n[{rule.name}] {rule.description}")
                print_deductions(deductions)
        print(f"\n{len(derived)} deductions from {len(rules)} rules.")

    if args.dot:
        export_dot(derived, args.dot)


if __name__ == "__main__":
    main()
