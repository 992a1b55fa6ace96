import math
from typing import Any, Dict, Mapping

from .base import Roller
from . import register_roller


@register_roller("weighted")
class WeightedRoller(Roller):
    """
    A roller over an arbitrary table of outcome -> weight, e.g. a loot table.
    With normalize=False (default) the weights are used as probabilities as given and must already sum to 1;
    with normalize=True each weight is divided by the total, so {"a": 1, "b": 3} becomes {"a": 0.25, "b": 0.75}.
    The table may be edited between rolls through set_weight/remove; the roller itself never changes it.
    """
    def __init__(self, random_source=None, weights: Mapping[Any, Any] = None, normalize: bool = False,
                 config=None, recorder=None):
        super().__init__(random_source=random_source, config=config, recorder=recorder)
        self.normalize = normalize
        self._weights: Dict[Any, Any] = {}
        for outcome, weight in (weights or {}).items():
            self.set_weight(outcome, weight)

    @property
    def weights(self) -> Dict[Any, Any]:
        return dict(self._weights)

    def set_weight(self, outcome, weight) -> None:
        """
        Add or replace an outcome's weight.
        Raises:
            ValueError: If weight is negative, NaN or infinite.
        """
        if not math.isfinite(float(weight)):
            raise ValueError(f"weight for {outcome!r} must be finite")
        if weight < 0:
            raise ValueError(f"weight for {outcome!r} must be non-negative")
        self._weights[outcome] = weight

    def remove(self, outcome) -> None:
        self._weights.pop(outcome, None)

    def probabilities(self):
        if not self.normalize:
            return dict(self._weights)
        total = sum(float(w) for w in self._weights.values())
        if total <= 0:
            # degenerate table: zero sum fails validation
            return {outcome: 0.0 for outcome in self._weights}
        return {outcome: float(w) / total for outcome, w in self._weights.items()}
