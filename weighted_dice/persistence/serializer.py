
"""
serializer.py
Provides utility functions for serializing and deserializing roll events to/from JSON.
Used by the CLI's --json output.
"""

import json
from decimal import Decimal
from fractions import Fraction
from typing import Any


def _default(o: Any):
    # exact probability types are written as strings ("1/6", "0.25") to avoid float noise
    if isinstance(o, (Decimal, Fraction)):
        return str(o)
    return getattr(o, '__dict__', str(o))


def dumps(obj: Any) -> str:
    """
    Serialize a Python object (including dataclasses) to a JSON string.
    Args:
        obj: Object to serialize.
    Returns:
        str: JSON string.
    """
    return json.dumps(obj, default=_default)


def loads(s: str):
    """
    Deserialize a JSON string to a Python object (dict/list).
    Args:
        s (str): JSON string.
    Returns:
        object: Deserialized Python object.
    """
    return json.loads(s)
