"""
Numerical core for the False Position (Regula Falsi) quadratic solver.

This module centralizes:
    - Evaluation of the quadratic f(x) = a*x**2 + b*x + c.
    - Classification of the roots through the discriminant.
    - The bracketing False Position iteration and its convergence policy.
    - Sampling of f(x) over a padded bracket for plotting.
    - A thin façade (`solve` / `build_response`) so both the CLI and the
      Flask web layer consume the same API.

A successful `build_response` payload has the keys:
    success, root, froot, iterations, last_ea, disc, r1, r2, dtype,
    graph   # [{"x": ..., "y": ...}, ...]
    table   # [{"n", "xl", "xu", "xr", "fxl", "fxu", "fxr", "ea"}, ...]
A failed one is {"success": False, "error": <message>}.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import sympy as sp

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
# Algorithm constants
# --------------------------------------------------------------------------- #

MAX_ITERATIONS = 200
DEFAULT_TOLERANCE = 1e-4
ROOT_EPSILON = 1e-14
DENOMINATOR_EPSILON = 1e-15
DISCRIMINANT_EPSILON = 1e-12
LEADING_COEFF_EPSILON = 1e-10

SAMPLE_STEPS = 200
SAMPLE_PADDING = 0.5

TWO_DISTINCT = 2
ONE_REPEATED = 1
NONE_REAL = 0


# --------------------------------------------------------------------------- #
# Errors
# --------------------------------------------------------------------------- #


class QuadraticSolverError(ValueError):
    """Base class for failures reported back to the caller as plain text."""

    default_message = "Unable to solve the equation."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NotQuadraticError(QuadraticSolverError):
    """Raised when the leading coefficient is zero."""

    default_message = (
        "Coefficient 'a' cannot be zero — that would not be a quadratic equation."
    )


class NoBracketError(QuadraticSolverError):
    """Raised when f(xl) and f(xu) do not change sign."""

    default_message = (
        "f(xL) and f(xU) must have opposite signs. "
        "No root is bracketed in this interval."
    )


class DegenerateDenominatorError(QuadraticSolverError):
    """Raised when f(xl) - f(xu) is too small for the False Position update."""

    default_message = (
        "Denominator too small — function values at xL and xU are nearly equal."
    )


# --------------------------------------------------------------------------- #
# Quadratic helpers
# --------------------------------------------------------------------------- #

X_SYMBOL = sp.symbols("x")


def evaluate(a: float, b: float, c: float, x: float) -> float:
    return a * x * x + b * x + c


def build_function(a: float, b: float, c: float) -> Callable[[float], float]:
    """Bind the coefficients and return f(x)."""

    def f(x: float) -> float:
        return evaluate(a, b, c, x)

    return f


def format_quadratic(a: float, b: float, c: float) -> str:
    """
    Render the coefficients as a readable polynomial.

    Floats are rationalized first so that 1.0, -3.0, 2.0 prints as
    "x**2 - 3*x + 2" rather than "1.0*x**2 - 3.0*x + 2.0".
    """
    coeffs = [sp.nsimplify(value, rational=True) for value in (a, b, c)]
    expr = coeffs[0] * X_SYMBOL**2 + coeffs[1] * X_SYMBOL + coeffs[2]
    return str(expr)


# --------------------------------------------------------------------------- #
# Discriminant classification
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class Classification:
    dtype: int
    discriminant: float
    r1: float = 0.0
    r2: float = 0.0

    @property
    def description(self) -> str:
        if self.dtype == TWO_DISTINCT:
            return f"Two distinct real roots (Δ = {self.discriminant:.6f} > 0)"
        if self.dtype == ONE_REPEATED:
            return "One repeated real root (Δ = 0)"
        return (
            f"Complex roots (Δ = {self.discriminant:.6f} < 0) "
            "— no real root in interval"
        )


def classify_roots(a: float, b: float, c: float) -> Classification:
    """Classify the real roots of a*x**2 + b*x + c (a must be non-zero)."""
    disc = b * b - 4.0 * a * c
    if disc > 0.0:
        sqrt_disc = math.sqrt(disc)
        return Classification(
            dtype=TWO_DISTINCT,
            discriminant=disc,
            r1=(-b + sqrt_disc) / (2.0 * a),
            r2=(-b - sqrt_disc) / (2.0 * a),
        )
    if abs(disc) < DISCRIMINANT_EPSILON:
        root = -b / (2.0 * a)
        return Classification(dtype=ONE_REPEATED, discriminant=disc, r1=root, r2=root)
    return Classification(dtype=NONE_REAL, discriminant=disc)


# --------------------------------------------------------------------------- #
# False Position iteration
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class IterationRecord:
    n: int
    xl: float
    xu: float
    xr: float
    fxl: float
    fxu: float
    fxr: float
    ea: float


@dataclass
class SolveOutcome:
    root: float
    iterations: List[IterationRecord]
    converged: bool
    message: str

    @property
    def last_ea(self) -> float:
        if len(self.iterations) > 1:
            return self.iterations[-1].ea
        return 100.0


def _narrow_bracket(
    xl: float, fxl: float, xu: float, fxu: float, xr: float, fxr: float
) -> Tuple[float, float, float, float]:
    # A zero product keeps the root on the xl side.
    if fxl * fxr < 0.0:
        return xl, fxl, xr, fxr
    return xr, fxr, xu, fxu


def false_position(
    a: float,
    b: float,
    c: float,
    xl: float,
    xu: float,
    tol: float,
    max_iter: int = MAX_ITERATIONS,
) -> SolveOutcome:
    """
    Run Regula Falsi on f(x) = a*x**2 + b*x + c over [xl, xu].

    Stops when |f(xr)| < ROOT_EPSILON or, from the second pass on, when the
    approximate relative error (percent) drops below `tol`. Hitting
    `max_iter` is not an error: the last estimate is returned with
    `converged=False`.

    Raises NoBracketError or DegenerateDenominatorError.
    """
    f = build_function(a, b, c)
    fxl, fxu = f(xl), f(xu)
    if not (math.isfinite(fxl) and math.isfinite(fxu) and fxl * fxu < 0.0):
        logger.debug("No sign change: f(%r)=%r, f(%r)=%r", xl, fxl, xu, fxu)
        raise NoBracketError()
    if tol <= 0.0:
        tol = DEFAULT_TOLERANCE

    records: List[IterationRecord] = []
    xr_old = xl
    for k in range(max_iter):
        denominator = fxl - fxu
        if abs(denominator) < DENOMINATOR_EPSILON:
            logger.debug("Degenerate denominator %r at pass %d", denominator, k + 1)
            raise DegenerateDenominatorError()
        xr = xu - fxu * (xl - xu) / denominator
        fxr = f(xr)
        if not (math.isfinite(xr) and math.isfinite(fxr)):
            logger.debug("Non-finite estimate xr=%r f(xr)=%r at pass %d", xr, fxr, k + 1)
            raise DegenerateDenominatorError()

        if k == 0 or xr == 0.0:
            ea = 100.0
        else:
            ea = abs((xr - xr_old) / xr) * 100.0

        records.append(IterationRecord(k + 1, xl, xu, xr, fxl, fxu, fxr, ea))

        if abs(fxr) < ROOT_EPSILON or (k > 0 and ea < tol):
            logger.debug("Converged to %r in %d iterations", xr, k + 1)
            return SolveOutcome(
                root=xr,
                iterations=records,
                converged=True,
                message=f"Converged in {k + 1} iterations.",
            )

        xl, fxl, xu, fxu = _narrow_bracket(xl, fxl, xu, fxu, xr, fxr)
        xr_old = xr

    logger.warning(
        "Maximum iterations (%d) reached; returning last estimate %r",
        max_iter,
        records[-1].xr if records else xl,
    )
    return SolveOutcome(
        root=records[-1].xr if records else xl,
        iterations=records,
        converged=False,
        message="Maximum iterations reached; returning the last estimate.",
    )


# --------------------------------------------------------------------------- #
# Plot samples
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class SamplePoint:
    x: float
    y: float


def sample_curve(
    a: float,
    b: float,
    c: float,
    xl: float,
    xu: float,
    steps: int = SAMPLE_STEPS,
) -> List[SamplePoint]:
    span = abs(xu - xl)
    left = xl - span * SAMPLE_PADDING
    right = xu + span * SAMPLE_PADDING
    step = (right - left) / steps
    points = []
    for i in range(steps + 1):
        x = left + i * step
        points.append(SamplePoint(x, evaluate(a, b, c, x)))
    return points


# --------------------------------------------------------------------------- #
# Result assembly
# --------------------------------------------------------------------------- #


# Overflowed values go out as null so the payload stays strict JSON.
def _fixed(value: float, digits: int) -> Optional[float]:
    if not math.isfinite(value):
        return None
    return round(value, digits)


def _scientific(value: float, digits: int) -> Optional[float]:
    if not math.isfinite(value):
        return None
    return float(f"{value:.{digits}e}")


@dataclass
class SolveReport:
    outcome: SolveOutcome
    classification: Classification
    samples: List[SamplePoint] = field(default_factory=list)
    froot: float = 0.0

    @property
    def root(self) -> float:
        return self.outcome.root

    @property
    def iteration_count(self) -> int:
        return len(self.outcome.iterations)

    def to_dict(self) -> Dict[str, Any]:
        cls = self.classification
        return {
            "success": True,
            "root": _fixed(self.root, 10),
            "froot": _scientific(self.froot, 10),
            "iterations": self.iteration_count,
            "last_ea": _fixed(self.outcome.last_ea, 6),
            "disc": cls.description,
            "r1": _fixed(cls.r1, 8),
            "r2": _fixed(cls.r2, 8),
            "dtype": cls.dtype,
            "graph": [
                {"x": _fixed(p.x, 6), "y": _fixed(p.y, 6)} for p in self.samples
            ],
            "table": [
                {
                    "n": row.n,
                    "xl": _fixed(row.xl, 8),
                    "xu": _fixed(row.xu, 8),
                    "xr": _fixed(row.xr, 8),
                    "fxl": _fixed(row.fxl, 8),
                    "fxu": _fixed(row.fxu, 8),
                    "fxr": _fixed(row.fxr, 8),
                    "ea": _fixed(row.ea, 6),
                }
                for row in self.outcome.iterations
            ],
        }


def solve(
    a: float,
    b: float,
    c: float,
    xl: float,
    xu: float,
    tol: float = 0.0,
) -> SolveReport:
    """
    Solve f(x) = a*x**2 + b*x + c = 0 on [xl, xu] and gather everything the
    front ends display.

    Raises a QuadraticSolverError subclass on failure.
    """
    if abs(a) < LEADING_COEFF_EPSILON:
        raise NotQuadraticError()

    outcome = false_position(a, b, c, xl, xu, tol)
    return SolveReport(
        outcome=outcome,
        classification=classify_roots(a, b, c),
        samples=sample_curve(a, b, c, xl, xu),
        froot=evaluate(a, b, c, outcome.root),
    )


def failure_response(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message}


def build_response(
    a: float,
    b: float,
    c: float,
    xl: float,
    xu: float,
    tol: float = 0.0,
) -> Dict[str, Any]:
    """Like `solve`, but always returns a JSON-ready dictionary."""
    try:
        report = solve(a, b, c, xl, xu, tol)
    except QuadraticSolverError as exc:
        return failure_response(str(exc))
    return report.to_dict()
