"""
Canonical Bible book data: 66-book Protestant canon.

Each entry:
  number   - canonical ordering (OT 1-39, NT 40-66); used as the file name
             of every per-book output
  name     - canonical display name
  slug     - URL/path-safe identifier
  osis     - OSIS book code, as used by the OpenBible.info cross-reference
             dataset ("Gen.1.1", "1Sam.3.4", ...)
  chapters - number of chapters

The abbreviation table consumed by convert_cross_refs.py is a plain JSON
object {code: number}.  OSIS_ABBREVS is the default table; write it out with

  python src/bible_data.py --write cross-references/abbrevs.json
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

BOOKS = [
    # ── Old Testament ────────────────────────────────────────────────────────
    {"number":  1, "name": "Genesis",         "slug": "genesis",         "osis": "Gen",    "chapters": 50},
    {"number":  2, "name": "Exodus",          "slug": "exodus",          "osis": "Exod",   "chapters": 40},
    {"number":  3, "name": "Leviticus",       "slug": "leviticus",       "osis": "Lev",    "chapters": 27},
    {"number":  4, "name": "Numbers",         "slug": "numbers",         "osis": "Num",    "chapters": 36},
    {"number":  5, "name": "Deuteronomy",     "slug": "deuteronomy",     "osis": "Deut",   "chapters": 34},
    {"number":  6, "name": "Joshua",          "slug": "joshua",          "osis": "Josh",   "chapters": 24},
    {"number":  7, "name": "Judges",          "slug": "judges",          "osis": "Judg",   "chapters": 21},
    {"number":  8, "name": "Ruth",            "slug": "ruth",            "osis": "Ruth",   "chapters":  4},
    {"number":  9, "name": "1 Samuel",        "slug": "1-samuel",        "osis": "1Sam",   "chapters": 31},
    {"number": 10, "name": "2 Samuel",        "slug": "2-samuel",        "osis": "2Sam",   "chapters": 24},
    {"number": 11, "name": "1 Kings",         "slug": "1-kings",         "osis": "1Kgs",   "chapters": 22},
    {"number": 12, "name": "2 Kings",         "slug": "2-kings",         "osis": "2Kgs",   "chapters": 25},
    {"number": 13, "name": "1 Chronicles",    "slug": "1-chronicles",    "osis": "1Chr",   "chapters": 29},
    {"number": 14, "name": "2 Chronicles",    "slug": "2-chronicles",    "osis": "2Chr",   "chapters": 36},
    {"number": 15, "name": "Ezra",            "slug": "ezra",            "osis": "Ezra",   "chapters": 10},
    {"number": 16, "name": "Nehemiah",        "slug": "nehemiah",        "osis": "Neh",    "chapters": 13},
    {"number": 17, "name": "Esther",          "slug": "esther",          "osis": "Esth",   "chapters": 10},
    {"number": 18, "name": "Job",             "slug": "job",             "osis": "Job",    "chapters": 42},
    {"number": 19, "name": "Psalms",          "slug": "psalms",          "osis": "Ps",     "chapters": 150},
    {"number": 20, "name": "Proverbs",        "slug": "proverbs",        "osis": "Prov",   "chapters": 31},
    {"number": 21, "name": "Ecclesiastes",    "slug": "ecclesiastes",    "osis": "Eccl",   "chapters": 12},
    {"number": 22, "name": "Song of Solomon", "slug": "song-of-solomon", "osis": "Song",   "chapters":  8},
    {"number": 23, "name": "Isaiah",          "slug": "isaiah",          "osis": "Isa",    "chapters": 66},
    {"number": 24, "name": "Jeremiah",        "slug": "jeremiah",        "osis": "Jer",    "chapters": 52},
    {"number": 25, "name": "Lamentations",    "slug": "lamentations",    "osis": "Lam",    "chapters":  5},
    {"number": 26, "name": "Ezekiel",         "slug": "ezekiel",         "osis": "Ezek",   "chapters": 48},
    {"number": 27, "name": "Daniel",          "slug": "daniel",          "osis": "Dan",    "chapters": 12},
    {"number": 28, "name": "Hosea",           "slug": "hosea",           "osis": "Hos",    "chapters": 14},
    {"number": 29, "name": "Joel",            "slug": "joel",            "osis": "Joel",   "chapters":  3},
    {"number": 30, "name": "Amos",            "slug": "amos",            "osis": "Amos",   "chapters":  9},
    {"number": 31, "name": "Obadiah",         "slug": "obadiah",         "osis": "Obad",   "chapters":  1},
    {"number": 32, "name": "Jonah",           "slug": "jonah",           "osis": "Jonah",  "chapters":  4},
    {"number": 33, "name": "Micah",           "slug": "micah",           "osis": "Mic",    "chapters":  7},
    {"number": 34, "name": "Nahum",           "slug": "nahum",           "osis": "Nah",    "chapters":  3},
    {"number": 35, "name": "Habakkuk",        "slug": "habakkuk",        "osis": "Hab",    "chapters":  3},
    {"number": 36, "name": "Zephaniah",       "slug": "zephaniah",       "osis": "Zeph",   "chapters":  3},
    {"number": 37, "name": "Haggai",          "slug": "haggai",          "osis": "Hag",    "chapters":  2},
    {"number": 38, "name": "Zechariah",       "slug": "zechariah",       "osis": "Zech",   "chapters": 14},
    {"number": 39, "name": "Malachi",         "slug": "malachi",         "osis": "Mal",    "chapters":  4},

    # ── New Testament ────────────────────────────────────────────────────────
    {"number": 40, "name": "Matthew",         "slug": "matthew",         "osis": "Matt",   "chapters": 28},
    {"number": 41, "name": "Mark",            "slug": "mark",            "osis": "Mark",   "chapters": 16},
    {"number": 42, "name": "Luke",            "slug": "luke",            "osis": "Luke",   "chapters": 24},
    {"number": 43, "name": "John",            "slug": "john",            "osis": "John",   "chapters": 21},
    {"number": 44, "name": "Acts",            "slug": "acts",            "osis": "Acts",   "chapters": 28},
    {"number": 45, "name": "Romans",          "slug": "romans",          "osis": "Rom",    "chapters": 16},
    {"number": 46, "name": "1 Corinthians",   "slug": "1-corinthians",   "osis": "1Cor",   "chapters": 16},
    {"number": 47, "name": "2 Corinthians",   "slug": "2-corinthians",   "osis": "2Cor",   "chapters": 13},
    {"number": 48, "name": "Galatians",       "slug": "galatians",       "osis": "Gal",    "chapters":  6},
    {"number": 49, "name": "Ephesians",       "slug": "ephesians",       "osis": "Eph",    "chapters":  6},
    {"number": 50, "name": "Philippians",     "slug": "philippians",     "osis": "Phil",   "chapters":  4},
    {"number": 51, "name": "Colossians",      "slug": "colossians",      "osis": "Col",    "chapters":  4},
    {"number": 52, "name": "1 Thessalonians", "slug": "1-thessalonians", "osis": "1Thess", "chapters":  5},
    {"number": 53, "name": "2 Thessalonians", "slug": "2-thessalonians", "osis": "2Thess", "chapters":  3},
    {"number": 54, "name": "1 Timothy",       "slug": "1-timothy",       "osis": "1Tim",   "chapters":  6},
    {"number": 55, "name": "2 Timothy",       "slug": "2-timothy",       "osis": "2Tim",   "chapters":  4},
    {"number": 56, "name": "Titus",           "slug": "titus",           "osis": "Titus",  "chapters":  3},
    {"number": 57, "name": "Philemon",        "slug": "philemon",        "osis": "Phlm",   "chapters":  1},
    {"number": 58, "name": "Hebrews",         "slug": "hebrews",         "osis": "Heb",    "chapters": 13},
    {"number": 59, "name": "James",           "slug": "james",           "osis": "Jas",    "chapters":  5},
    {"number": 60, "name": "1 Peter",         "slug": "1-peter",         "osis": "1Pet",   "chapters":  5},
    {"number": 61, "name": "2 Peter",         "slug": "2-peter",         "osis": "2Pet",   "chapters":  3},
    {"number": 62, "name": "1 John",          "slug": "1-john",          "osis": "1John",  "chapters":  5},
    {"number": 63, "name": "2 John",          "slug": "2-john",          "osis": "2John",  "chapters":  1},
    {"number": 64, "name": "3 John",          "slug": "3-john",          "osis": "3John",  "chapters":  1},
    {"number": 65, "name": "Jude",            "slug": "jude",            "osis": "Jude",   "chapters":  1},
    {"number": 66, "name": "Revelation",      "slug": "revelation",      "osis": "Rev",    "chapters": 22},
]

BOOK_COUNT = len(BOOKS)

# ── Lookup structures ─────────────────────────────────────────────────────────

BY_NUMBER: dict[int, dict] = {b["number"]: b for b in BOOKS}
BY_SLUG: dict[str, dict] = {b["slug"]: b for b in BOOKS}
BY_OSIS: dict[str, dict] = {b["osis"]: b for b in BOOKS}

# Default abbreviation table: OSIS code → book number
OSIS_ABBREVS: dict[str, int] = {b["osis"]: b["number"] for b in BOOKS}


def load_abbrevs(path: Path) -> dict[str, int]:
    """
    Load an abbreviation table (JSON object of code → book number).

    Raises FileNotFoundError if the file is missing and ValueError if the
    document is not an object or a value is not a positive integer.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object of code -> book number")

    abbrevs: dict[str, int] = {}
    for code, number in data.items():
        # bool is an int subclass; reject it explicitly
        if isinstance(number, bool) or not isinstance(number, int) or number < 1:
            raise ValueError(f"{path}: invalid book number for '{code}': {number!r}")
        abbrevs[code] = number
    return abbrevs


def write_abbrevs(path: Path, abbrevs: dict[str, int] = OSIS_ABBREVS) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(abbrevs, f, ensure_ascii=False, indent=2)


def main() -> None:
    ap = argparse.ArgumentParser(description="Canon table sanity checks and abbrevs.json export")
    ap.add_argument("--write", metavar="PATH", help="Write the default OSIS abbreviation table to PATH")
    args = ap.parse_args()

    print(f"Total books: {BOOK_COUNT}")
    print(f"Total abbreviations registered: {len(OSIS_ABBREVS)}")
    # Quick sanity checks
    assert BY_NUMBER[1]["name"] == "Genesis"
    assert BY_NUMBER[66]["name"] == "Revelation"
    assert OSIS_ABBREVS["Ps"] == 19
    assert OSIS_ABBREVS["1John"] == 62
    assert [b["number"] for b in BOOKS] == list(range(1, 67))
    print("All assertions passed.")

    if args.write:
        try:
            write_abbrevs(Path(args.write))
        except OSError as e:
            print(f"ERROR: could not write {args.write}: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Wrote {args.write}")


if __name__ == "__main__":
    main()
