"""Geometry validation constants."""

# ---------------------------------------------------------------------------
# Segment intersection
# ---------------------------------------------------------------------------
# Relative tolerance: a cross product at or below epsilon times the product of
# its operand lengths (the sine of their angle) is treated as zero.
SEGMENT_EPSILON = 1e-7

# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------
MIN_POSITION_COMPONENTS = 2
MAX_POSITION_COMPONENTS = 3
# A 4th component (e.g. a linear referencing measure) is accepted and dropped
MAX_DECODED_POSITION_COMPONENTS = 4

# ---------------------------------------------------------------------------
# Line strings and rings (RFC 7946 section 3.1.4 / 3.1.6)
# ---------------------------------------------------------------------------
MIN_LINE_STRING_POSITIONS = 2
MIN_LINEAR_RING_POSITIONS = 4
