
"""
events.py
Defines the RollEvent dataclass recorded each time a roller resolves an outcome.
Used by recorder.py and the CLI/simulation scripts for tallies, CSV export and JSON output.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class RollEvent:
    """
    Represents a single resolved roll.
    Fields:
        roller (str): Roller class name (e.g. 'D6Roller').
        value (int): Raw sample in [1, max_range].
        max_range (int): Sampling range the value was drawn from.
        outcome (Any): Outcome the value resolved to.
        seed (int|float|str|None): Seed passed to the roll, if any.
    """
    roller: str
    value: int
    max_range: int
    outcome: Any
    seed: Optional[Any] = None

    def to_row(self) -> dict:
        """Flatten to a dict keyed like csv_io.ROLL_HEADER."""
        return {
            "roller": self.roller,
            "value": self.value,
            "max_range": self.max_range,
            "outcome": self.outcome,
            "seed": "" if self.seed is None else self.seed,
        }
