"""
JSON file helpers shared by the splitter scripts.

Static output can be written plain (*.json), gzip-compressed (*.json.gz) or
zstd-compressed (*.json.zst).  Readers pick the codec from the file suffix.
"""
from __future__ import annotations

import gzip
import json
from pathlib import Path

import zstandard

COMPRESSIONS = ("none", "gzip", "zstd")

_SUFFIXES = {
    "none": ".json",
    "gzip": ".json.gz",
    "zstd": ".json.zst",
}

ZSTD_LEVEL = 19


def read_json(path: Path):
    """Load a JSON document, decompressing .gz / .zst files by suffix."""
    path = Path(path)
    if path.suffix == ".gz":
        with gzip.open(path, "rt", encoding="utf-8") as f:
            return json.load(f)
    if path.suffix == ".zst":
        raw = zstandard.ZstdDecompressor().decompress(path.read_bytes())
        return json.loads(raw.decode("utf-8"))
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def read_json_list(path: Path) -> list:
    data = read_json(path)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array, got {type(data).__name__}")
    return data


def read_json_object(path: Path) -> dict:
    data = read_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return data


def output_path(out_dir: Path, stem: str | int, compress: str = "none") -> Path:
    """Return out_dir/<stem>.json with the suffix for the chosen compression."""
    if compress not in _SUFFIXES:
        raise ValueError(f"unknown compression: {compress!r}")
    return Path(out_dir) / f"{stem}{_SUFFIXES[compress]}"


def dumps(payload, indent: int | None = None) -> str:
    if indent is None:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def write_json(path: Path, payload, indent: int | None = None, compress: str = "none") -> None:
    """Write payload as UTF-8 JSON at path, compressed as requested."""
    text = dumps(payload, indent)
    path = Path(path)
    if compress == "gzip":
        with gzip.open(path, "wt", encoding="utf-8") as f:
            f.write(text)
    elif compress == "zstd":
        cctx = zstandard.ZstdCompressor(level=ZSTD_LEVEL)
        path.write_bytes(cctx.compress(text.encode("utf-8")))
    elif compress == "none":
        path.write_text(text, encoding="utf-8")
    else:
        raise ValueError(f"unknown compression: {compress!r}")
