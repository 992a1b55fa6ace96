
"""
recorder.py
Implements roll recording. A recorder attached to a roller receives one RollEvent per roll_outcome() call.
InMemoryRecorder is used by the CLI, the simulation script and the tests.
Related modules:
- events.py: Defines the RollEvent type.
- csv_io.py / serializer.py: Used to save recorded events.
"""

from collections import Counter
from typing import List
from .events import RollEvent


class InMemoryRecorder:
    """
    Records RollEvent objects in memory for later retrieval.
    Methods:
        record(event): Add a new event.
        events(): Get all recorded events.
        counts(): Tally of outcomes seen so far.
    """
    def __init__(self):
        self._events: List[RollEvent] = []

    def record(self, event: RollEvent) -> None:
        """Add a new event to the recorder."""
        self._events.append(event)

    def events(self):
        """Return all recorded events as a list."""
        return list(self._events)

    def counts(self) -> Counter:
        """Return a Counter of outcome -> number of times it was rolled."""
        return Counter(e.outcome for e in self._events)
