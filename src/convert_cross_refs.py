"""
Cross-reference converter: normalises the OpenBible.info cross-reference table
into one static JSON file per source book.

Input (tab-separated, first line is a header):
  From Verse    To Verse            Votes
  Gen.1.1       Prov.8.22-Prov.8.30 59
  Gen.1.1       John.1.1-3          12

Output: data/books-cross/{bookNum}.json, each an array of
  {"c": chapter, "v": verse, "to": ["43/1/1", "43/1/3"], "lyk": 12}
in input order.  A range keeps only its two boundary verses; a range whose
ends are the same verse is stored as a single entry.

The run is all-or-nothing: if any book code is missing from the abbreviation
table, nothing is written and every unknown code is listed once.

Usage:
  python src/convert_cross_refs.py
  python src/convert_cross_refs.py --input cross-references/cross_references.txt
  python src/convert_cross_refs.py --compress gzip --out data/books-cross-gz
"""
from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from bible_data import load_abbrevs
from static_io import COMPRESSIONS, output_path, write_json

PROJECT_ROOT = Path(__file__).parent.parent
ABBREVS_PATH = PROJECT_ROOT / "cross-references" / "abbrevs.json"
INPUT_PATH = PROJECT_ROOT / "cross-references" / "cross_references.txt"
OUTPUT_DIR = PROJECT_ROOT / "data" / "books-cross"

_VERSE_RE = re.compile(r"^(.+?)\.(\d+)\.(\d+)$", re.ASCII)
_BARE_VERSE_RE = re.compile(r"\d+", re.ASCII)
_STRENGTH_RE = re.compile(r"[+-]?\d+", re.ASCII)


class UnknownAbbreviationError(Exception):
    """Raised by the write phase when the parse phase met unknown book codes."""

    def __init__(self, codes: list[str]):
        self.codes = codes
        super().__init__("Found unknown abbreviations: " + ", ".join(codes))


@dataclass(frozen=True)
class VerseRef:
    book: str
    book_num: int
    chapter: int
    verse: int

    def canonical(self) -> str:
        return f"{self.book_num}/{self.chapter}/{self.verse}"


@dataclass
class CrossRef:
    chapter: int
    verse: int
    to: list[str]
    strength: int

    def to_json(self) -> dict:
        # Book number is the output file name, so it is not repeated here.
        return {"c": self.chapter, "v": self.verse, "to": self.to, "lyk": self.strength}


@dataclass
class ConversionResult:
    """Everything the parse phase learned about one input file."""
    grouped: dict[int, list[CrossRef]] = field(default_factory=dict)
    # dict used as an insertion-ordered set
    unknown_abbrevs: dict[str, None] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    line_count: int = 0

    @property
    def ok(self) -> bool:
        return not self.unknown_abbrevs

    @property
    def record_count(self) -> int:
        return sum(len(refs) for refs in self.grouped.values())

    def warn(self, line_number: int | None, message: str) -> None:
        prefix = f"[Line {line_number}] " if line_number is not None else ""
        self.warnings.append(prefix + message)


# ── Reference parsing ─────────────────────────────────────────────────────────

def parse_verse(
    verse_string: str,
    abbrevs: dict[str, int],
    line_number: int | None = None,
    result: ConversionResult | None = None,
) -> VerseRef | None:
    """
    Parse "Gen.1.1" into a VerseRef.

    Returns None when the string is not <code>.<chapter>.<verse> or the code is
    not in abbrevs.  Unknown codes are recorded on result and warned about the
    first time they are seen.
    """
    if result is None:
        result = ConversionResult()

    m = _VERSE_RE.match(verse_string)
    if not m:
        result.warn(line_number, f"Could not parse verse format: {verse_string}")
        return None

    code, chapter, verse = m.groups()
    book_num = abbrevs.get(code)
    if not book_num:
        if code not in result.unknown_abbrevs:
            result.warn(line_number, f"Unknown book abbreviation found: '{code}'")
            result.unknown_abbrevs[code] = None
        return None

    return VerseRef(book=code, book_num=book_num, chapter=int(chapter), verse=int(verse))


def _parse_range_end(
    end_str: str,
    start: VerseRef,
    abbrevs: dict[str, int],
    line_number: int | None,
    result: ConversionResult,
) -> VerseRef | None:
    if "." in end_str:
        return parse_verse(end_str, abbrevs, line_number, result)
    # Bare verse number ("Gen.1.1-5"): same book and chapter as the start.
    # Only plain ASCII digits; no sign, no "_" separators.
    if not _BARE_VERSE_RE.fullmatch(end_str):
        return None
    return VerseRef(book=start.book, book_num=start.book_num, chapter=start.chapter, verse=int(end_str))


def format_to_verse(
    to_verse_string: str,
    abbrevs: dict[str, int],
    line_number: int | None = None,
    result: ConversionResult | None = None,
) -> list[str]:
    """
    Normalise a target verse or range to canonical "book/chapter/verse" strings.

    Returns [verse] for a single verse, [start, end] for a range and [] when
    any part fails to parse.  Interior verses of a range are not listed.
    """
    if result is None:
        result = ConversionResult()

    if "-" not in to_verse_string:
        parsed = parse_verse(to_verse_string, abbrevs, line_number, result)
        return [parsed.canonical()] if parsed else []

    # Only the pieces before and after the first dash count;
    # anything after a second dash is ignored.
    parts = to_verse_string.split("-")
    start_str, end_str = parts[0], parts[1]
    start = parse_verse(start_str, abbrevs, line_number, result)
    if not start:
        return []

    end = _parse_range_end(end_str, start, abbrevs, line_number, result)
    if end is None:
        result.warn(line_number, f"Could not parse range's end verse: {to_verse_string}")
        return []

    start_fmt = start.canonical()
    end_fmt = end.canonical()
    if start_fmt == end_fmt:
        return [start_fmt]
    return [start_fmt, end_fmt]


# ── Parse phase ───────────────────────────────────────────────────────────────

def parse_line(
    line: str,
    line_number: int,
    abbrevs: dict[str, int],
    result: ConversionResult,
) -> tuple[int, CrossRef] | None:
    """Parse one data line into (source book number, CrossRef), or None to skip it."""
    columns = line.split("\t")
    if len(columns) < 3:
        return None

    from_verse = parse_verse(columns[0], abbrevs, line_number, result)
    if not from_verse:
        return None

    to_verses = format_to_verse(columns[1], abbrevs, line_number, result)
    if not to_verses:
        return None

    strength_str = columns[2].strip()
    if not _STRENGTH_RE.fullmatch(strength_str):
        result.warn(line_number, f"Could not parse relationship strength: {strength_str}")
        return None
    strength = int(strength_str)

    return from_verse.book_num, CrossRef(
        chapter=from_verse.chapter,
        verse=from_verse.verse,
        to=to_verses,
        strength=strength,
    )


def convert(lines: list[str], abbrevs: dict[str, int]) -> ConversionResult:
    """
    Parse every data line (the first line is a header) and group the records
    by source book.  Performs no I/O.
    """
    result = ConversionResult(line_count=len(lines))

    # Line numbers are 1-based file line numbers; the header is line 1.
    for line_number, line in enumerate(lines[1:], start=2):
        parsed = parse_line(line.rstrip("\r"), line_number, abbrevs, result)
        if parsed is None:
            continue
        book_num, ref = parsed
        result.grouped.setdefault(book_num, []).append(ref)

    return result


def read_lines(path: Path) -> list[str]:
    text = Path(path).read_text(encoding="utf-8")
    stripped = text.strip()
    return stripped.split("\n") if stripped else []


# ── Write phase ───────────────────────────────────────────────────────────────

def write_books(result: ConversionResult, out_dir: Path, compress: str = "none") -> list[Path]:
    """
    Write one file per source book.  Refuses to write anything if the parse
    phase found unknown abbreviations.
    """
    if not result.ok:
        raise UnknownAbbreviationError(list(result.unknown_abbrevs))

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for book_num in sorted(result.grouped):
        payload = [ref.to_json() for ref in result.grouped[book_num]]
        out_file = output_path(out_dir, book_num, compress)
        write_json(out_file, payload, indent=2, compress=compress)
        written.append(out_file)
    return written


def _print_failure(codes: list[str], abbrevs_path: Path) -> None:
    print("\n--- DEBUG SUMMARY ---", file=sys.stderr)
    print("Conversion failed. Found unknown abbreviations:", file=sys.stderr)
    print(", ".join(codes), file=sys.stderr)
    print(f"\nPlease add these to '{abbrevs_path.name}' and run again.", file=sys.stderr)


def main() -> None:
    ap = argparse.ArgumentParser(description="Split the cross-reference table into per-book JSON files")
    ap.add_argument("--abbrevs", type=Path, default=ABBREVS_PATH, help="Abbreviation table (JSON object)")
    ap.add_argument("--input", type=Path, default=INPUT_PATH, help="Tab-separated cross-reference table")
    ap.add_argument("--out", type=Path, default=OUTPUT_DIR, help="Output directory")
    ap.add_argument("--compress", choices=COMPRESSIONS, default="none", help="Output compression")
    ap.add_argument("--quiet", "-q", action="store_true", help="Do not print per-line warnings")
    args = ap.parse_args()

    try:
        abbrevs = load_abbrevs(args.abbrevs)
        lines = read_lines(args.input)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if len(lines) <= 1:
        print("The file is empty or contains only a header.")
        return

    result = convert(lines, abbrevs)

    if not args.quiet:
        for warning in result.warnings:
            print(f"WARNING: {warning}", file=sys.stderr)

    try:
        written = write_books(result, args.out, compress=args.compress)
    except UnknownAbbreviationError as e:
        _print_failure(e.codes, args.abbrevs)
        sys.exit(1)
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print("\nSuccess! Conversion complete.")
    print(f"  {result.record_count} cross-references from {result.line_count - 1} lines")
    print(f"{len(written)} files were written to the '{args.out}' directory.")


if __name__ == "__main__":
    main()
