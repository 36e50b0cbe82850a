"""Utility constants for rangeset.

Rendering symbols for unbounded ends and the default closedness used when
building intervals from plain values.
"""

from typing import Literal, TypeAlias

# Symbols used by str() for unbounded ends
NEG_INFINITY = "-∞"
POS_INFINITY = "∞"

Closed: TypeAlias = Literal["left", "right", "both", "neither"]

# Half-open [a, b), matching Python's builtin range
DEFAULT_CLOSED: Closed = "left"
