"""
Tolerance constants for 3x3 algebra.

Defines the determinant band that inverse() treats as zero and the
comparison tiers used by isclose():
- SINGULAR_DETERMINANT: half-open band [-1e-5, 1e-5)
- DEFAULT: double precision comparison
- FP32: relaxed for values that went through single precision

These module-level constants are the library's only configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SingularityBand:
    """
    Determinant interval treated as zero.

    The lower bound is inclusive and the upper bound exclusive, so
    contains(lower) is True and contains(upper) is False.
    """
    lower: float
    upper: float
    name: str
    description: str

    def contains(self, value: float) -> bool:
        """Return True if lower <= value < upper (always False for NaN)."""
        return self.lower <= value < self.upper


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Half-open: det == -1e-5 is singular, det == 1e-5 is not.
SINGULAR_DETERMINANT = SingularityBand(
    lower=-0.00001,
    upper=0.00001,
    name='singular_determinant',
    description='det in [-1e-5, 1e-5) has no inverse',
)

DEFAULT = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='default',
    description='Double precision comparison',
)

FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='Single precision comparison',
)


def select_tolerance(single_precision: bool = False) -> ToleranceTier:
    """Select the comparison tier for values of the given precision."""
    if single_precision:
        return FP32
    return DEFAULT
