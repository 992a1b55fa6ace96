
"""
config.py
Defines the RollerConfig dataclass, which centralizes the numeric policy used when validating and sampling a distribution.
Related modules:
- precision.py: Uses significant_digits when counting decimals.
- rollers/base.py: Uses RollerConfig for validation tolerance, range limits and the default source seed.
"""

from dataclasses import dataclass
from typing import Optional, Union

@dataclass(frozen=True)
class RollerConfig:
    """
    Centralizes the numeric options of a roller.
    Fields:
        tolerance_decimals (int): Fractional digits kept when flooring |sum - 1| during validation.
        significant_digits (int): Significant digits a float probability is rounded to before its decimals are counted.
        max_decimals (int): Largest number of decimals accepted by max_range (10**18 still fits a signed 64-bit integer).
        rng_seed (int|None): Seed for the default random source when none is injected.
    """
    tolerance_decimals: int = 10
    significant_digits: int = 15
    max_decimals: int = 18
    rng_seed: Optional[Union[int, float, str]] = None
