"""
Command-Line Interface for the False Position quadratic solver.

The CLI walks beginners through:
    1. Entering the coefficients of f(x) = ax^2 + bx + c.
    2. Entering a bracket [xL, xU] and a tolerance.
    3. Viewing the discriminant summary, per-iteration diagnostics and the
       final estimated root.

The same numerical core is shared with the Flask web interface.
"""

from __future__ import annotations

import math
from typing import Dict, Optional

from fp_solver import (
    DEFAULT_TOLERANCE,
    QuadraticSolverError,
    SolveReport,
    format_quadratic,
    solve,
)

COLUMNS = ["n", "xl", "xu", "xr", "fxl", "fxu", "fxr", "ea"]
HEADERS = ["n", "xL", "xU", "xr", "f(xL)", "f(xU)", "f(xr)", "ea (%)"]

PROMPTS = [
    ("a", "Coefficient a (x^2 term)", None),
    ("b", "Coefficient b (x term)", None),
    ("c", "Constant c", None),
    ("xl", "Lower bound xL", None),
    ("xu", "Upper bound xU", None),
    ("tol", "Tolerance in %", DEFAULT_TOLERANCE),
]


def _format_value(value) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "--"
    if isinstance(value, int):
        return str(value)
    try:
        return f"{float(value):.6g}"
    except (TypeError, ValueError):
        return str(value)


def _print_iterations(report: SolveReport) -> None:
    records = report.outcome.iterations
    if not records:
        print("No iteration details to display.")
        return
    table = [HEADERS] + [
        [_format_value(getattr(record, name)) for name in COLUMNS] for record in records
    ]
    widths = [max(len(cell) for cell in column) for column in zip(*table)]
    lines = [" | ".join(cell.ljust(w) for cell, w in zip(row, widths)) for row in table]
    rule = "-" * len(lines[0])

    print("\nDetailed Iterations")
    print(rule)
    print(lines[0])
    print(rule)
    print("\n".join(lines[1:]))
    print(rule)


def _prompt_float(label: str, *, default: Optional[float] = None) -> float:
    hint = f" [{default:g}]" if default is not None else ""
    while True:
        raw = input(f"{label}{hint}: ").strip()
        if not raw:
            if default is not None:
                return default
            print("Value is required. Please try again.")
            continue
        try:
            return float(raw)
        except ValueError:
            print(f"Invalid number {raw!r}. Please enter a numeric value.")


def _collect_inputs() -> Dict[str, float]:
    return {
        key: _prompt_float(label, default=default) for key, label, default in PROMPTS
    }


def _display_discriminant(report: SolveReport) -> None:
    cls = report.classification
    print(f"\n{cls.description}")
    if cls.dtype:
        print(f"Exact roots  : r1 = {_format_value(cls.r1)}, r2 = {_format_value(cls.r2)}")


def _display_summary(report: SolveReport) -> None:
    outcome = report.outcome
    print("\nSummary")
    print("-------")
    print(f"Status        : {'Converged' if outcome.converged else 'Iteration limit reached'}")
    print(f"Estimated root: {report.root:.10f}")
    print(f"f(root)       : {report.froot:.10e}")
    print(f"Iterations    : {report.iteration_count}")
    print(f"Last ea (%)   : {outcome.last_ea:.6f}")
    print(f"Message       : {outcome.message}")


def main() -> None:
    print("=" * 70)
    print("False Position Method - Quadratic Solver CLI")
    print("Solves f(x) = ax^2 + bx + c = 0 on a bracket [xL, xU].")
    print("=" * 70)

    while True:
        params = _collect_inputs()
        print(f"\nf(x) = {format_quadratic(params['a'], params['b'], params['c'])}")

        try:
            report = solve(**params)
        except QuadraticSolverError as exc:
            print(f"Input error: {exc}")
        else:
            _display_discriminant(report)
            _print_iterations(report)
            _display_summary(report)

        again = input("\nWould you like to solve another equation? (y/n): ").strip()
        if again.lower() not in {"y", "yes"}:
            print("Thanks for using the False Position solver!")
            break


if __name__ == "__main__":
    main()
