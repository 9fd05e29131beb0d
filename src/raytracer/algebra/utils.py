import numpy as np

EPSILON: float = 1e-6


def approximately_equal(a: float, b: float) -> bool:
    """Two scalars are equal if they differ by strictly less than EPSILON."""
    return abs(a - b) < EPSILON


def to_f32(value: float) -> float:
    """Round a number to single precision, returned as a Python float."""
    # Values beyond the f32 range become +/-inf
    with np.errstate(over="ignore"):
        return float(np.float32(value))
