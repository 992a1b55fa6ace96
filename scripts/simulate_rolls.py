"""
Roll a registered roller many times and compare observed frequencies with its probabilities.
Writes every roll to rolls.csv, a per-outcome summary to summary.csv and a bar chart to frequencies.png.

    python scripts/simulate_rolls.py --roller d6 --rolls 10000 --seed 7
"""
import argparse
import datetime
import os

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from weighted_dice.persistence import csv_io
from weighted_dice.persistence.recorder import InMemoryRecorder
from weighted_dice.rollers import ROLLER_MAP
from weighted_dice.sources import SOURCE_MAP


def run_simulation(roller, rolls: int):
    """
    Roll `rolls` times and return (events, summary_rows).
    The roller must have an InMemoryRecorder attached.
    """
    for _ in range(rolls):
        roller.roll_outcome()
    events = roller.recorder.events()
    counts = roller.recorder.counts()
    summary = []
    for outcome, probability in roller.probabilities().items():
        count = counts.get(outcome, 0)
        summary.append({
            "roller": type(roller).__name__,
            "outcome": outcome,
            "expected_probability": float(probability),
            "count": count,
            "observed_probability": count / rolls if rolls else 0.0,
        })
    return events, summary


def plot_frequencies(summary, out_path: str):
    labels = [str(row["outcome"]) for row in summary]
    expected = [row["expected_probability"] * 100 for row in summary]
    observed = [row["observed_probability"] * 100 for row in summary]
    width = max(6, len(labels) * 0.6)
    positions = range(len(labels))
    plt.figure(figsize=(width, 4))
    plt.bar([p - 0.2 for p in positions], expected, width=0.4, color='C0', label='expected')
    plt.bar([p + 0.2 for p in positions], observed, width=0.4, color='C1', label='observed')
    plt.xticks(list(positions), labels)
    plt.ylabel('Probability (%)')
    plt.title(f"{summary[0]['roller']}: expected vs observed" if summary else 'No outcomes')
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()


def main():
    parser = argparse.ArgumentParser(description='Simulate many rolls and chart outcome frequencies')
    parser.add_argument('--roller', type=str, default='d6', help=f"Roller key from ROLLER_MAP: {', '.join(sorted(ROLLER_MAP))}")
    parser.add_argument('--rolls', type=int, default=10000, help='Number of rolls')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the random source (reproducible runs)')
    parser.add_argument('--source', type=str, default='mersenne', help=f"Random source: {', '.join(sorted(SOURCE_MAP))}")
    parser.add_argument('--data-dir', type=str, default='data', help='Directory to save csv and charts')
    args = parser.parse_args()

    if args.roller not in ROLLER_MAP:
        raise SystemExit(f"Unknown roller: {args.roller}")
    if args.source not in SOURCE_MAP:
        raise SystemExit(f"Unknown source: {args.source}")
    source = SOURCE_MAP[args.source](args.seed)
    roller = ROLLER_MAP[args.roller](source, recorder=InMemoryRecorder())

    timestamp = datetime.datetime.now().strftime('%Y%m%d_%H%M%S')
    out_dir = os.path.join(args.data_dir, f"{args.roller}_{timestamp}")
    os.makedirs(out_dir, exist_ok=True)

    print(f"Rolling {args.roller} {args.rolls} times (range 1-{roller.max_range()})...", end=' ')
    events, summary = run_simulation(roller, args.rolls)
    print('done')

    rolls_csv = os.path.join(out_dir, 'rolls.csv')
    summary_csv = os.path.join(out_dir, 'summary.csv')
    chart_png = os.path.join(out_dir, 'frequencies.png')
    csv_io.append_rows_to_csv([e.to_row() for e in events], rolls_csv, csv_io.get_roll_header())
    csv_io.append_rows_to_csv(summary, summary_csv, csv_io.get_summary_header())
    plot_frequencies(summary, chart_png)

    for row in summary:
        print(f"  {row['outcome']!s:>10}: expected {row['expected_probability']:.4f}, observed {row['observed_probability']:.4f}")
    print(f"Rolls saved to {rolls_csv}, summary to {summary_csv}")
    print(f"Frequency chart: {chart_png}")


if __name__ == "__main__":
    main()
