#!/usr/bin/env python3
"""
Synthetic dataset generator for CSV splitter benchmarks.

Generates a large CSV file with a header row and many data rows. Some values
contain the delimiter, quotes or embedded newlines so the writer's quoting is
exercised, and optional all-blank rows exercise the skip-empty filter.
"""

import argparse
import csv
import random
import sys

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB

WORDS = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta", "eta", "theta"]


def generate_row(
    row_idx: int,
    columns: int,
    delimiter: str,
    rng: random.Random,
) -> list[str]:
    """
    Generate one data row.

    The first column is the row index so split output can be checked for order.
    """
    row = [str(row_idx)]

    for _ in range(1, columns):
        kind = rng.random()
        word = rng.choice(WORDS)
        if kind < 0.05:
            row.append(f"{word}{delimiter}{rng.choice(WORDS)}")
        elif kind < 0.08:
            row.append(f'say "{word}"')
        elif kind < 0.10:
            row.append(f"{word}\n{rng.choice(WORDS)}")
        elif kind < 0.15:
            row.append("")
        else:
            row.append(f"{word}_{rng.randint(0, 99999)}")

    return row


def generate_synthetic_dataset(
    output_path: str,
    num_rows: int,
    columns: int,
    blank_every: int,
    delimiter: str,
    seed: int,
) -> int:
    """
    Generate a synthetic CSV dataset.

    Args:
        output_path: Path to write the CSV file.
        num_rows: Number of data rows (blank rows excluded).
        columns: Number of columns per row.
        blank_every: Insert an all-blank row after every N data rows (0 disables).
        delimiter: Field delimiter.
        seed: Random seed for reproducibility.

    Returns:
        Total number of rows written, header excluded.
    """
    rng = random.Random(seed)
    total_rows = 0

    with open(output_path, "w", newline="", encoding="utf-8", buffering=BUFFER_SIZE) as f:
        writer = csv.writer(f, delimiter=delimiter, lineterminator="\n")
        writer.writerow(["id"] + [f"col_{i}" for i in range(1, columns)])

        for row_idx in range(1, num_rows + 1):
            writer.writerow(generate_row(row_idx, columns, delimiter, rng))
            total_rows += 1

            if blank_every > 0 and row_idx % blank_every == 0:
                writer.writerow([""] * columns)
                total_rows += 1

            # Progress every 1M rows
            if row_idx % 1_000_000 == 0:
                print(f"  Generated {row_idx:,} rows...", file=sys.stderr)

    return total_rows


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic CSV dataset for splitter benchmarks.",
    )
    parser.add_argument(
        "--out",
        required=True,
        help="Output file path",
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=1_000_000,
        help="Number of data rows (default: 1000000)",
    )
    parser.add_argument(
        "--columns",
        type=int,
        default=8,
        help="Number of columns (default: 8)",
    )
    parser.add_argument(
        "--blank-every",
        type=int,
        default=0,
        help="Insert an all-blank row after every N rows, 0 to disable (default: 0)",
    )
    parser.add_argument(
        "--delimiter",
        default=",",
        help="Field delimiter (default: ,)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    # Validate
    if args.rows < 0:
        parser.error("--rows must not be negative")
    if args.columns < 1:
        parser.error("--columns must be at least 1")
    if len(args.delimiter) != 1:
        parser.error("--delimiter must be a single character")

    print("=" * 60, file=sys.stderr)
    print("Synthetic CSV Dataset Generator", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"Output: {args.out}", file=sys.stderr)
    print(f"Rows: {args.rows:,}", file=sys.stderr)
    print(f"Columns: {args.columns}", file=sys.stderr)
    print(f"Blank every: {args.blank_every}", file=sys.stderr)
    print(f"Delimiter: {args.delimiter!r}", file=sys.stderr)
    print(f"Seed: {args.seed}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(file=sys.stderr)

    print("Generating...", file=sys.stderr)
    total_rows = generate_synthetic_dataset(
        output_path=args.out,
        num_rows=args.rows,
        columns=args.columns,
        blank_every=args.blank_every,
        delimiter=args.delimiter,
        seed=args.seed,
    )

    print(file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"Done! Wrote {total_rows:,} rows to {args.out}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)


if __name__ == "__main__":
    main()
