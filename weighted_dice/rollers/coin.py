from .base import Roller
from . import register_roller


@register_roller("coin")
class CoinRoller(Roller):
    """
    A two-outcome roller: "heads" with probability bias, "tails" with 1 - bias.
    """
    def __init__(self, random_source=None, bias=0.5, config=None, recorder=None):
        if not (0.0 <= bias <= 1.0):
            raise ValueError("bias must be between 0 and 1")
        super().__init__(random_source=random_source, config=config, recorder=recorder)
        self.bias = bias

    def probabilities(self):
        return {"heads": self.bias, "tails": 1.0 - self.bias}
