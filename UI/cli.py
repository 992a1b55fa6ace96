"""
Command-line roller.

Examples:
    python -m UI.cli d20
    python -m UI.cli die --sides 7 --times 5 --seed 42
    python -m UI.cli weighted --weights common=0.7 rare=0.25 epic=0.05
    python -m UI.cli coin --bias 0.3 --times 10 --json
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional

from weighted_dice.core.config import RollerConfig
from weighted_dice.rollers import ROLLER_MAP
from weighted_dice.rollers.base import InvalidDistributionError, PrecisionOverflowError, Roller
from weighted_dice.sources import SOURCE_MAP
from weighted_dice.sources.base import RandomSource
from weighted_dice.persistence.recorder import InMemoryRecorder
from weighted_dice.persistence import serializer


def parse_weights(items: List[str]) -> Dict[str, Decimal]:
    """
    Parse "outcome=weight" pairs into a mapping.
    Weights are read as Decimal so "0.1" stays exactly one decimal.
    Raises:
        ValueError: On a malformed pair or a non-numeric weight.
    """
    weights = {}
    for item in items:
        name, sep, raw = item.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected outcome=weight, got {item!r}")
        try:
            weight = Decimal(raw)
        except InvalidOperation:
            raise ValueError(f"Weight for {name!r} is not a number: {raw!r}")
        if not weight.is_finite():
            raise ValueError(f"Weight for {name!r} must be finite, got {raw!r}")
        weights[name] = weight
    return weights


def choose_source(name: str, seed=None) -> RandomSource:
    """
    Return a RandomSource instance by name.
    Raises:
        ValueError: If the source name is unknown.
    """
    name = name.lower()
    if name not in SOURCE_MAP:
        raise ValueError(f"Unknown source: {name}")
    return SOURCE_MAP[name](seed)


def choose_roller(args, source: RandomSource, recorder) -> Roller:
    """
    Return a Roller instance by name, passing through the roller-specific options.
    Raises:
        ValueError: If the roller name is unknown.
    """
    name = args.roller.lower()
    if name not in ROLLER_MAP:
        raise ValueError(f"Unknown roller: {name}")
    cls = ROLLER_MAP[name]
    config = RollerConfig(tolerance_decimals=args.tolerance)
    if name == "die":
        return cls(source, sides=args.sides, config=config, recorder=recorder)
    if name == "coin":
        return cls(source, bias=args.bias, config=config, recorder=recorder)
    if name == "weighted":
        return cls(source, weights=parse_weights(args.weights), normalize=args.normalize,
                   config=config, recorder=recorder)
    return cls(source, config=config, recorder=recorder)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Roll a weighted die, coin or table.")
    parser.add_argument('roller', type=str, help=f"Roller key: {', '.join(sorted(ROLLER_MAP))}")
    parser.add_argument('--times', type=int, default=1, help='Number of rolls')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the random stream (reproducible runs)')
    parser.add_argument('--source', type=str, default='mersenne', help=f"Random source: {', '.join(sorted(SOURCE_MAP))}")
    parser.add_argument('--sides', type=int, default=6, help='Faces for the "die" roller')
    parser.add_argument('--bias', type=float, default=0.5, help='Probability of heads for the "coin" roller')
    parser.add_argument('--weights', type=str, nargs='*', default=[], help='outcome=weight pairs for the "weighted" roller')
    parser.add_argument('--normalize', action='store_true', help='Divide weights by their total')
    parser.add_argument('--tolerance', type=int, default=10, help='Decimals kept when checking the sum of probabilities')
    parser.add_argument('--raw', action='store_true', help='Print raw samples instead of outcomes')
    parser.add_argument('--json', action='store_true', help='Print recorded roll events as JSON')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    recorder = InMemoryRecorder()
    try:
        source = choose_source(args.source, args.seed)
        roller = choose_roller(args, source, recorder)
        for _ in range(args.times):
            if args.raw:
                print(roller.roll())
            else:
                outcome = roller.roll_outcome()
                if not args.json:
                    print(outcome)
    except (ValueError, PrecisionOverflowError) as e:
        # InvalidDistributionError is a ValueError
        kind = "Invalid distribution" if isinstance(e, InvalidDistributionError) else "Error"
        print(f"{kind}: {e}", file=sys.stderr)
        return 2

    if args.json and not args.raw:
        print(serializer.dumps(recorder.events()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
