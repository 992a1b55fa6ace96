from abc import ABC, abstractmethod
from typing import Optional, Union

Seed = Union[int, float, str]


class RandomSource(ABC):
    """
    Abstract base class for uniform integer generators consumed by rollers.
    Implementations must return a value uniformly distributed over the inclusive range [minimum, maximum].
    When a seed is given the same (minimum, maximum, seed) triple must always produce the same value;
    without a seed the source draws from its own stream or ambient entropy.
    """

    @abstractmethod
    def next(self, minimum: int, maximum: int, seed: Optional[Seed] = None) -> int:
        """
        Draw one integer.
        Args:
            minimum (int): Lowest possible value (inclusive).
            maximum (int): Highest possible value (inclusive).
            seed (int|float|str|None): Optional seed for a reproducible draw.
        Returns:
            int: Value in [minimum, maximum].
        Raises:
            ValueError: If minimum > maximum.
        """
        raise NotImplementedError

    def check_range(self, minimum: int, maximum: int) -> None:
        """Raise ValueError unless [minimum, maximum] is a non-empty integer range."""
        if minimum > maximum:
            raise ValueError(f"minimum ({minimum}) must not exceed maximum ({maximum})")
