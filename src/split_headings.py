"""
Heading splitter: breaks the combined section-heading file into one JSON file
per book.

Input:  headings/bibleheadings.json   {"1": [...], "2": [...], ..., "66": [...]}
Output: data/splitted-headings/{bookNum}.json

Usage:
  python src/split_headings.py
  python src/split_headings.py --input headings/other.json --out data/other-headings
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from bible_data import BOOK_COUNT
from static_io import read_json_object, write_json

PROJECT_ROOT = Path(__file__).parent.parent
INPUT_PATH = PROJECT_ROOT / "headings" / "bibleheadings.json"
OUTPUT_DIR = PROJECT_ROOT / "data" / "splitted-headings"


def split_headings(headings: dict, out_dir: Path) -> tuple[list[int], list[int]]:
    """
    Write out_dir/{n}.json for every book number 1..66 present in headings.
    Returns (books_written, books_missing).
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written: list[int] = []
    missing: list[int] = []
    for book_num in range(1, BOOK_COUNT + 1):
        book_headings = headings.get(str(book_num))
        if book_headings is None:
            missing.append(book_num)
            continue
        write_json(out_dir / f"{book_num}.json", book_headings, indent=4)
        written.append(book_num)
    return written, missing


def main() -> None:
    ap = argparse.ArgumentParser(description="Split combined headings JSON into per-book files")
    ap.add_argument("--input", type=Path, default=INPUT_PATH, help="Combined headings JSON")
    ap.add_argument("--out", type=Path, default=OUTPUT_DIR, help="Output directory")
    args = ap.parse_args()

    try:
        print(f"Reading {args.input.name}...")
        headings = read_json_object(args.input)
        print("Splitting into individual JSON files...")
        written, missing = split_headings(headings, args.out)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    for book_num in written:
        print(f"  {book_num}.json  ({len(headings[str(book_num)])} headings)")
    for book_num in missing:
        print(f"WARNING: No data found for book {book_num}", file=sys.stderr)

    print(f"\nDone! Created {len(written)} individual JSON files in {args.out}")


if __name__ == "__main__":
    main()
