"""Shared numeric constants for the geometry engine.

Tolerances are absolute, not relative: shapes arrive in caller units and
the comparisons below are applied to raw side lengths and cross products.
"""

# Equality tolerance for side lengths, Pythagorean checks and collinearity.
# Comparisons against it are strict (< EPSILON).
EPSILON = 0.0001

# International foot: 1 m = 3.28084 ft.
FEET_PER_METER = 3.28084

# 1 m² = 10.7639 ft² (rounded square of FEET_PER_METER).
SQUARE_FEET_PER_SQUARE_METER = 10.7639
