import json

import pytest

from split_verses import enrich_verse, index_by_number, split_verses, verse_path

VERSES = [
    {"b": 1, "c": 1, "v": 1, "t": "ആദിയിൽ ദൈവം ആകാശവും ഭൂമിയും സൃഷ്ടിച്ചു."},
    {"b": "1", "c": "1", "v": "2", "t": "ഭൂമി പാഴായും ശൂന്യമായും ഇരുന്നു."},
    {"b": 43, "c": 1, "v": 1, "t": "ആദിയിൽ വചനം ഉണ്ടായിരുന്നു."},
]

CHAPTER_INFO = [
    {"n": 1, "bm": "ഉല്പത്തി", "be": "Genesis", "w": "മോശെ", "we": "Moses",
     "de": "1445 BC", "d": "ക്രി.മു. 1445", "cae": "Law", "ca": "ന്യായപ്രമാണം"},
]

SUMMARIES = [{"n": 1, "t": "Creation and the patriarchs."}]


def test_enrich_verse_joins_book_metadata():
    enriched = enrich_verse(VERSES[0], CHAPTER_INFO[0], "Creation and the patriarchs.")
    assert enriched == {
        "verse": VERSES[0]["t"],
        "book": "1",
        "chapter": "1",
        "verseNumber": "1",
        "bookNameMalayalam": "ഉല്പത്തി",
        "bookNameEnglish": "Genesis",
        "writerMalayalam": "മോശെ",
        "writerEnglish": "Moses",
        "dateInEnglish": "1445 BC",
        "dateInMalayalam": "ക്രി.മു. 1445",
        "categoryInEnglish": "Law",
        "categoryInMalayalam": "ന്യായപ്രമാണം",
        "bookSummary": "Creation and the patriarchs.",
    }


def test_enrich_verse_missing_metadata_is_blank():
    enriched = enrich_verse(VERSES[2], {}, "")
    assert enriched["book"] == "43"
    assert enriched["bookNameEnglish"] == ""
    assert enriched["bookSummary"] == ""


def test_index_by_number_coerces_keys():
    assert index_by_number([{"n": "5", "t": "x"}]) == {5: {"n": "5", "t": "x"}}


def test_split_verses_writes_one_file_per_verse(tmp_path):
    written, skipped = split_verses(VERSES, CHAPTER_INFO, SUMMARIES, tmp_path)

    assert (written, skipped) == (3, 0)
    second = json.loads(verse_path(tmp_path, 1, 1, 2).read_text(encoding="utf-8"))
    assert second["verseNumber"] == "2"
    assert second["bookSummary"] == "Creation and the patriarchs."
    john = json.loads((tmp_path / "43" / "1" / "1.json").read_text(encoding="utf-8"))
    assert john["writerEnglish"] == ""


def test_split_verses_skips_existing_unless_forced(tmp_path):
    existing = verse_path(tmp_path, 1, 1, 1)
    existing.parent.mkdir(parents=True)
    existing.write_text('"keep"', encoding="utf-8")

    assert split_verses(VERSES, CHAPTER_INFO, SUMMARIES, tmp_path) == (2, 1)
    assert existing.read_text(encoding="utf-8") == '"keep"'

    assert split_verses(VERSES, CHAPTER_INFO, SUMMARIES, tmp_path, force=True) == (3, 0)
    assert json.loads(existing.read_text(encoding="utf-8"))["book"] == "1"


def test_split_verses_requires_verse_keys(tmp_path):
    with pytest.raises(KeyError):
        split_verses([{"b": 1, "c": 1}], [], [], tmp_path)
