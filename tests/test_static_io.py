import json

import pytest

from static_io import output_path, read_json, read_json_list, read_json_object, write_json


@pytest.mark.parametrize("compress,suffix", [("none", ".json"), ("gzip", ".json.gz"), ("zstd", ".json.zst")])
def test_write_then_read(tmp_path, compress, suffix):
    path = output_path(tmp_path, 7, compress)
    assert path.name == "7" + suffix

    payload = [{"t": "ആദിയിൽ ദൈവം", "n": 1}]
    write_json(path, payload, compress=compress)
    assert read_json(path) == payload


def test_plain_output_keeps_unicode_and_indent(tmp_path):
    path = tmp_path / "a.json"
    write_json(path, {"t": "ദൈവം"}, indent=2)
    text = path.read_text(encoding="utf-8")
    assert "ദൈവം" in text
    assert text == json.dumps({"t": "ദൈവം"}, ensure_ascii=False, indent=2)


def test_compact_output_without_indent(tmp_path):
    path = tmp_path / "a.json"
    write_json(path, {"a": [1, 2]})
    assert path.read_text(encoding="utf-8") == '{"a":[1,2]}'


def test_unknown_compression(tmp_path):
    with pytest.raises(ValueError):
        output_path(tmp_path, 1, "bz2")
    with pytest.raises(ValueError):
        write_json(tmp_path / "a.json", {}, compress="bz2")


def test_shape_checks(tmp_path):
    path = tmp_path / "a.json"
    path.write_text("{}", encoding="utf-8")
    assert read_json_object(path) == {}
    with pytest.raises(ValueError):
        read_json_list(path)

    path.write_text("[]", encoding="utf-8")
    assert read_json_list(path) == []
    with pytest.raises(ValueError):
        read_json_object(path)
