"""
csv_io.py
Persistence utilities for writing roll events and frequency summaries to CSV files.
"""

import os
import csv
from typing import Dict, List, Any

ROLL_HEADER = ["roller", "value", "max_range", "outcome", "seed"]
SUMMARY_HEADER = [
    "roller", "outcome", "expected_probability", "count", "observed_probability",
]

def append_rows_to_csv(rows: List[Dict[str, Any]], csv_path: str, header: List[str]):
    write_header = not os.path.exists(csv_path)
    with open(csv_path, "a", newline='', encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=header)
        if write_header:
            writer.writeheader()
        for row in rows:
            writer.writerow(row)

def get_roll_header():
    return ROLL_HEADER.copy()

def get_summary_header():
    return SUMMARY_HEADER.copy()
