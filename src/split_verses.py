"""
Verse splitter: writes one enriched JSON file per verse for the static API.

Inputs:
  bible/malayalam-bible.json      [{"b": 1, "c": 1, "v": 1, "t": "..."}, ...]
  bible-chapter-info.json         [{"n": 1, "bm": ..., "be": ..., "w": ..., ...}, ...]
  bible-chapter-summary.json      [{"n": 1, "t": "..."}, ...]

Output:
  api/malayalam-bible/{book}/{chapter}/{verse}.json

Existing verse files are left alone so an interrupted run can be resumed;
pass --force to rewrite them.

Usage:
  python src/split_verses.py
  python src/split_verses.py --bible bible/english-bible.json --out api/english-bible
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from static_io import read_json_list, write_json

PROJECT_ROOT = Path(__file__).parent.parent
BIBLE_PATH = PROJECT_ROOT / "bible" / "malayalam-bible.json"
CHAPTER_INFO_PATH = PROJECT_ROOT / "bible-chapter-info.json"
CHAPTER_SUMMARY_PATH = PROJECT_ROOT / "bible-chapter-summary.json"
OUTPUT_DIR = PROJECT_ROOT / "api" / "malayalam-bible"

# output field → chapter-info key
_INFO_FIELDS = (
    ("bookNameMalayalam", "bm"),
    ("bookNameEnglish", "be"),
    ("writerMalayalam", "w"),
    ("writerEnglish", "we"),
    ("dateInEnglish", "de"),
    ("dateInMalayalam", "d"),
    ("categoryInEnglish", "cae"),
    ("categoryInMalayalam", "ca"),
)


def index_by_number(records: list[dict], key: str = "n") -> dict[int, dict]:
    """Map book number → record.  Later records win on duplicate numbers."""
    return {int(r[key]): r for r in records}


def enrich_verse(verse: dict, book_info: dict, summary: str) -> dict:
    enriched = {
        "verse": verse["t"],
        "book": str(int(verse["b"])),
        "chapter": str(int(verse["c"])),
        "verseNumber": str(int(verse["v"])),
    }
    for out_key, info_key in _INFO_FIELDS:
        enriched[out_key] = book_info.get(info_key) or ""
    enriched["bookSummary"] = summary
    return enriched


def verse_path(out_dir: Path, book: int, chapter: int, verse: int) -> Path:
    return Path(out_dir) / str(book) / str(chapter) / f"{verse}.json"


def _print_progress(current: int, total: int) -> None:
    percent = current / total * 100 if total else 100.0
    print(f"Progress: {current}/{total} verses ({percent:.1f}%)", end="\r", flush=True)


def split_verses(
    verses: list[dict],
    chapter_info: list[dict],
    chapter_summaries: list[dict],
    out_dir: Path,
    force: bool = False,
    progress: bool = False,
) -> tuple[int, int]:
    """
    Write one file per verse, joined with its book's metadata and summary.
    Returns (files_written, files_skipped).
    """
    info_map = index_by_number(chapter_info)
    summary_map = {n: r.get("t") or "" for n, r in index_by_number(chapter_summaries).items()}

    written = skipped = 0
    total = len(verses)
    for i, verse in enumerate(verses, start=1):
        book = int(verse["b"])
        chapter = int(verse["c"])
        number = int(verse["v"])

        path = verse_path(out_dir, book, chapter, number)
        if path.exists() and not force:
            skipped += 1
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            payload = enrich_verse(verse, info_map.get(book, {}), summary_map.get(book, ""))
            write_json(path, payload, indent=2)
            written += 1

        if progress:
            _print_progress(i, total)

    return written, skipped


def main() -> None:
    ap = argparse.ArgumentParser(description="Split a verse list into per-verse JSON files")
    ap.add_argument("--bible", type=Path, default=BIBLE_PATH, help="Verse list JSON")
    ap.add_argument("--chapter-info", type=Path, default=CHAPTER_INFO_PATH, help="Book metadata JSON")
    ap.add_argument("--chapter-summary", type=Path, default=CHAPTER_SUMMARY_PATH, help="Book summaries JSON")
    ap.add_argument("--out", type=Path, default=OUTPUT_DIR, help="Output directory")
    ap.add_argument("--force", action="store_true", help="Rewrite verse files that already exist")
    args = ap.parse_args()

    try:
        print("Reading Bible JSON...")
        verses = read_json_list(args.bible)
        print("Reading chapter info...")
        chapter_info = read_json_list(args.chapter_info)
        print("Reading chapter summaries...")
        chapter_summaries = read_json_list(args.chapter_summary)

        written, skipped = split_verses(
            verses, chapter_info, chapter_summaries, args.out,
            force=args.force, progress=True,
        )
    except (OSError, ValueError, KeyError) as e:
        print(f"\nERROR: {e!r}", file=sys.stderr)
        sys.exit(1)

    print(f"\nAll verses processed: {written} written, {skipped} already present in {args.out}")


if __name__ == "__main__":
    main()
