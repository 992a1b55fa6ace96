"""
base.py
Implements the Roller abstract base class: validates a probability distribution, derives the integer sampling
range from its finest decimal precision, and delegates the uniform draw to an injected RandomSource.
Related modules:
- core/precision.py: Decimal counting and fixed-point flooring.
- core/config.py: RollerConfig numeric policy.
- sources/base.py: RandomSource contract.
- persistence/events.py: RollEvent recorded by roll_outcome when a recorder is attached.
"""

import logging
import math
from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_FLOOR
from typing import Any, List, Mapping, Optional, Tuple

from ..core.config import RollerConfig
from ..core.precision import floor_decimals, number_of_decimals, to_decimal
from ..persistence.events import RollEvent
from ..sources.base import RandomSource, Seed
from ..sources.mersenne import MersenneTwisterSource

logger = logging.getLogger(__name__)


class InvalidDistributionError(ValueError):
    """
    Raised by roll() when the probabilities do not sum to 1 within tolerance.
    """
    pass


class PrecisionOverflowError(ArithmeticError):
    """
    Raised by max_range() when a probability needs more decimals than RollerConfig.max_decimals allows.
    """
    pass


class Roller(ABC):
    """
    Abstract base class for all rollers.
    Concrete rollers implement probabilities(), returning a mapping of outcome -> probability. The mapping is
    re-read on every call and never modified by the roller.

    roll() returns a raw integer in [1, max_range()]. resolve() maps that integer back to an outcome by walking
    cumulative thresholds scaled by max_range(); roll_outcome() does both.
    """

    def __init__(self,
                 random_source: Optional[RandomSource] = None,
                 config: Optional[RollerConfig] = None,
                 recorder=None):
        """
        Args:
            random_source: Source of uniform integers. Defaults to a MersenneTwisterSource seeded with config.rng_seed.
            config: Numeric policy. Defaults to RollerConfig().
            recorder: Optional object with a record(event) method, e.g. InMemoryRecorder.
        """
        self.config = config or RollerConfig()
        self._random_source = random_source or MersenneTwisterSource(self.config.rng_seed)
        self.recorder = recorder

    @abstractmethod
    def probabilities(self) -> Mapping[Any, Any]:
        """
        Return the full mapping of outcome -> probability.
        """
        raise NotImplementedError

    @property
    def random_source(self) -> RandomSource:
        return self._random_source

    @random_source.setter
    def random_source(self, source: RandomSource) -> None:
        logger.debug("%s: swapping random source %s -> %s",
                     type(self).__name__, type(self._random_source).__name__, type(source).__name__)
        self._random_source = source

    def validate(self) -> bool:
        """
        Check that the probabilities sum to 1.
        A sum that is not exactly 1.0 is still accepted when |sum - 1| floored at
        config.tolerance_decimals fractional digits is zero. An empty mapping sums to 0 and fails.
        Returns:
            bool: True if the distribution is usable.
        """
        return self._validate(self.probabilities())

    def max_range(self) -> int:
        """
        Smallest power of ten that represents the finest-grained probability without rounding loss,
        e.g. {0.5, 0.25, 0.25} -> 100. At least 10.
        Raises:
            PrecisionOverflowError: If a probability needs more than config.max_decimals decimals.
        """
        return self._max_range(self.probabilities())

    def roll(self, seed: Optional[Seed] = None) -> int:
        """
        Draw a raw sample in [1, max_range()].
        Args:
            seed: Optional seed passed through to the random source for a reproducible draw.
        Returns:
            int: The sampled integer.
        Raises:
            InvalidDistributionError: If validate() fails. No draw is made.
            PrecisionOverflowError: See max_range().
        """
        value, _ = self._draw(self.probabilities(), seed)
        return value

    def thresholds(self) -> List[Tuple[Any, int]]:
        """
        Cumulative upper bounds of each outcome's bucket in [1, max_range()], in mapping order.
        The last bound is pinned to max_range() so sums a hair under 1 still cover the whole range.
        Outcomes with zero probability get an empty bucket.
        """
        probabilities = self.probabilities()
        return self._thresholds(probabilities, self._max_range(probabilities))

    def resolve(self, value: int) -> Any:
        """
        Map a raw sample to its outcome.
        Args:
            value (int): Sample in [1, max_range()], as returned by roll().
        Returns:
            The outcome whose bucket contains value.
        Raises:
            ValueError: If value is outside [1, max_range()].
        """
        probabilities = self.probabilities()
        return self._resolve(probabilities, self._max_range(probabilities), value)

    def roll_outcome(self, seed: Optional[Seed] = None) -> Any:
        """
        Roll and resolve in one step, recording a RollEvent if a recorder is attached.
        The draw, the thresholds and the recorded range all come from one read of probabilities().
        """
        probabilities = self.probabilities()
        value, max_range = self._draw(probabilities, seed)
        outcome = self._resolve(probabilities, max_range, value)
        if self.recorder is not None:
            self.recorder.record(RollEvent(
                roller=type(self).__name__,
                value=value,
                max_range=max_range,
                outcome=outcome,
                seed=seed,
            ))
        return outcome

    # Helpers below all work on a single snapshot of probabilities()

    def _validate(self, probabilities: Mapping[Any, Any]) -> bool:
        total = math.fsum(float(p) for p in probabilities.values())
        if total == 1.0:
            return True
        diff = abs(total - 1.0)
        return floor_decimals(diff, self.config.tolerance_decimals) == 0

    def _max_range(self, probabilities: Mapping[Any, Any]) -> int:
        decimals = 1
        for probability in probabilities.values():
            decimals = max(decimals, number_of_decimals(probability, self.config.significant_digits))
        if decimals > self.config.max_decimals:
            raise PrecisionOverflowError(
                f"{type(self).__name__}: probabilities need {decimals} decimals, "
                f"more than the allowed {self.config.max_decimals}"
            )
        return 10 ** decimals

    def _draw(self, probabilities: Mapping[Any, Any], seed: Optional[Seed]) -> Tuple[int, int]:
        """Validate, size and draw; returns (value, max_range)."""
        if not self._validate(probabilities):
            logger.warning("%s: probabilities do not sum to 1, refusing to roll", type(self).__name__)
            raise InvalidDistributionError(f"{type(self).__name__}.roll: probabilities are not valid")
        max_range = self._max_range(probabilities)
        value = self._random_source.next(1, max_range, seed)
        logger.debug("%s: drew %d in [1, %d] (seed=%r)", type(self).__name__, value, max_range, seed)
        return value, max_range

    def _thresholds(self, probabilities: Mapping[Any, Any], max_range: int) -> List[Tuple[Any, int]]:
        cumulative = Decimal(0)
        bounds = []
        for outcome, probability in probabilities.items():
            cumulative += to_decimal(probability, self.config.significant_digits)
            upper = int((cumulative * max_range).to_integral_value(rounding=ROUND_FLOOR))
            bounds.append((outcome, upper))
        if bounds:
            bounds[-1] = (bounds[-1][0], max_range)
        return bounds

    def _resolve(self, probabilities: Mapping[Any, Any], max_range: int, value: int) -> Any:
        if not (1 <= value <= max_range):
            raise ValueError(f"value must be between 1 and {max_range}, got {value}")
        for outcome, upper in self._thresholds(probabilities, max_range):
            if value <= upper:
                return outcome
        # unreachable: the last bound equals max_range
        raise ValueError(f"value {value} not covered by any outcome")
