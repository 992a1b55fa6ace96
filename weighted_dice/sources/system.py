import random
from typing import Optional

from .base import RandomSource, Seed
from . import register_source


@register_source("system")
class SystemRandomSource(RandomSource):
    """
    Random source drawing from the operating system's entropy pool via random.SystemRandom.
    SystemRandom cannot be seeded, so a seed (at construction or per draw) switches to random.Random(seed)
    to keep runs reproducible. Not intended for cryptographic use.
    """
    def __init__(self, seed: Optional[Seed] = None):
        self._seed = seed
        self._rng = random.SystemRandom() if seed is None else random.Random(seed)

    @property
    def seed(self) -> Optional[Seed]:
        return self._seed

    def next(self, minimum: int, maximum: int, seed: Optional[Seed] = None) -> int:
        self.check_range(minimum, maximum)
        if seed is not None:
            return random.Random(seed).randint(minimum, maximum)
        return self._rng.randint(minimum, maximum)
