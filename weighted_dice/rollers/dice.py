from fractions import Fraction

from .base import Roller
from . import register_roller


@register_roller("die")
class DieRoller(Roller):
    """
    A fair die with faces 1..sides, each with probability 1/sides.
    Probabilities are exact Fractions so they always sum to exactly 1.
    """
    def __init__(self, random_source=None, sides=6, config=None, recorder=None):
        """
        Args:
            random_source: Optional RandomSource.
            sides: Number of faces (int >= 1).
            config: Optional RollerConfig.
            recorder: Optional recorder for roll_outcome events.
        """
        if sides < 1:
            raise ValueError("sides must be at least 1")
        super().__init__(random_source=random_source, config=config, recorder=recorder)
        self.sides = sides

    def probabilities(self):
        return {face: Fraction(1, self.sides) for face in range(1, self.sides + 1)}


# Common polyhedral presets
@register_roller("d4")
class D4Roller(DieRoller):
    """Four-sided die: quarter steps, sampled over [1, 100]."""
    def __init__(self, random_source=None, config=None, recorder=None):
        super().__init__(random_source, sides=4, config=config, recorder=recorder)

@register_roller("d6")
class D6Roller(DieRoller):
    def __init__(self, random_source=None, config=None, recorder=None):
        super().__init__(random_source, sides=6, config=config, recorder=recorder)

@register_roller("d8")
class D8Roller(DieRoller):
    def __init__(self, random_source=None, config=None, recorder=None):
        super().__init__(random_source, sides=8, config=config, recorder=recorder)

@register_roller("d10")
class D10Roller(DieRoller):
    """Ten-sided die: one decimal, so raw samples in [1, 10] map one-to-one onto faces."""
    def __init__(self, random_source=None, config=None, recorder=None):
        super().__init__(random_source, sides=10, config=config, recorder=recorder)

@register_roller("d12")
class D12Roller(DieRoller):
    def __init__(self, random_source=None, config=None, recorder=None):
        super().__init__(random_source, sides=12, config=config, recorder=recorder)

@register_roller("d20")
class D20Roller(DieRoller):
    def __init__(self, random_source=None, config=None, recorder=None):
        super().__init__(random_source, sides=20, config=config, recorder=recorder)
