import logging
import random
from typing import Optional

from .base import RandomSource, Seed
from . import register_source

logger = logging.getLogger(__name__)


@register_source("mersenne")
class MersenneTwisterSource(RandomSource):
    """
    Random source backed by random.Random (Mersenne Twister).
    Unseeded draws advance the source's own stream, which is itself seeded at construction when a seed is given.
    Seeded draws use a throwaway generator so they never disturb the stream.
    """
    def __init__(self, seed: Optional[Seed] = None):
        self._seed = seed
        # nosec B311 - sampling, not cryptography
        self._rng = random.Random(seed)

    @property
    def seed(self) -> Optional[Seed]:
        return self._seed

    def reseed(self, seed: Optional[Seed]) -> None:
        """Restart the stream from seed (None -> fresh, non-deterministic)."""
        logger.debug("Reseeding %s with %r", type(self).__name__, seed)
        self._seed = seed
        self._rng = random.Random(seed)

    def next(self, minimum: int, maximum: int, seed: Optional[Seed] = None) -> int:
        self.check_range(minimum, maximum)
        rng = self._rng if seed is None else random.Random(seed)
        return rng.randint(minimum, maximum)
