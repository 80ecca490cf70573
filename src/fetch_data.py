"""
Download the OpenBible.info cross-reference dataset.

Fetches the zip from openbible.info, extracts cross_references.txt into
cross-references/ and writes the default OSIS abbreviation table next to it
(only if abbrevs.json does not exist yet, so local additions survive).

Usage:
  python src/fetch_data.py            # skip the download if the file exists
  python src/fetch_data.py --force    # re-download
"""
from __future__ import annotations

import argparse
import io
import sys
import zipfile
from pathlib import Path

import requests

sys.path.insert(0, str(Path(__file__).parent))

from bible_data import write_abbrevs

PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "cross-references"

CROSS_REFS_URL = "https://a.openbible.info/data/cross-references.zip"
CROSS_REFS_MEMBER = "cross_references.txt"

HEADERS = {"User-Agent": "bible-static-api/1.0 (+static JSON builder)"}


def download_zip(session: requests.Session, url: str) -> bytes:
    resp = session.get(url, timeout=120)
    resp.raise_for_status()
    return resp.content


def extract_member(zip_bytes: bytes, member: str, out_path: Path) -> Path:
    """
    Extract the zip entry whose base name is member to out_path.
    Raises KeyError if the archive has no such entry.
    """
    with zipfile.ZipFile(io.BytesIO(zip_bytes)) as z:
        for name in z.namelist():
            if Path(name).name == member:
                out_path.parent.mkdir(parents=True, exist_ok=True)
                out_path.write_bytes(z.read(name))
                return out_path
    raise KeyError(f"{member} not found in archive")


def fetch_cross_refs(session: requests.Session, data_dir: Path, force: bool = False) -> Path:
    out_path = data_dir / CROSS_REFS_MEMBER
    if out_path.exists() and not force:
        print(f"  {out_path} already present, skipping download")
        return out_path

    print(f"Fetching {CROSS_REFS_URL} ...")
    zip_bytes = download_zip(session, CROSS_REFS_URL)
    print(f"  {len(zip_bytes) / 1024:.1f} KB downloaded")
    return extract_member(zip_bytes, CROSS_REFS_MEMBER, out_path)


def main() -> None:
    ap = argparse.ArgumentParser(description="Download the cross-reference source data")
    ap.add_argument("--out", type=Path, default=DATA_DIR, help="Directory for the source files")
    ap.add_argument("--force", action="store_true", help="Re-download even if the file exists")
    args = ap.parse_args()

    session = requests.Session()
    session.headers.update(HEADERS)

    try:
        path = fetch_cross_refs(session, args.out, force=args.force)
    except (requests.RequestException, zipfile.BadZipFile, KeyError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Written to {path}")

    abbrevs_path = args.out / "abbrevs.json"
    if not abbrevs_path.exists():
        write_abbrevs(abbrevs_path)
        print(f"Written default abbreviation table to {abbrevs_path}")


if __name__ == "__main__":
    main()
