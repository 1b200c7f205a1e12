#
# PROJECT: raytracer-core
# MODULE: raytracer_core/scalar.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 1
# LOG_REF: 2026-10-17
#

import math

# Absolute tolerance used by every epsilon-tolerant comparison in the package.
EPSILON = 1e-5


def float_eq(left: float, right: float) -> bool:
    """True when the two scalars differ by at most EPSILON.

    Not transitive: a == b and b == c does not imply a == c.
    """
    return abs(left - right) <= EPSILON


def divide(numerator: float, denominator: float) -> float:
    """
    IEEE-754 division.

    Python raises ZeroDivisionError for x / 0.0, whereas the geometry code
    expects undefined results to surface as inf / nan in the components.
    """
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
