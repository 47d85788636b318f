import io

import pytest

from settlersfmt.mapping import MappingError, read_mapping, read_mapping_file


def test_reads_entries_and_skips_comments():
    text = "# comment\n\n3 first\n10\tsecond value\n"
    assert list(read_mapping(io.StringIO(text))) == [(3, "first"), (10, "second value")]


def test_only_first_delimiter_is_removed():
    assert list(read_mapping(io.StringIO("1  two\n"))) == [(1, " two")]


def test_value_may_be_empty():
    assert list(read_mapping(io.StringIO("7 \n"))) == [(7, "")]


def test_missing_value_reports_line():
    with pytest.raises(MappingError) as info:
        list(read_mapping(io.StringIO("1 a\n5\n")))
    assert info.value.line == 2
    assert "No index or value" in str(info.value)


def test_leading_delimiter_is_error():
    with pytest.raises(MappingError) as info:
        list(read_mapping(io.StringIO(" 5 x\n")))
    assert info.value.line == 1


def test_negative_index_is_error():
    with pytest.raises(MappingError) as info:
        list(read_mapping(io.StringIO("-1 x\n")))
    assert "Invalid index: -1" in str(info.value)


def test_non_numeric_index_is_error():
    with pytest.raises(MappingError) as info:
        list(read_mapping(io.StringIO("# c\nabc x\n")))
    assert info.value.line == 2
    assert info.value.reason == "Invalid index: abc"


def test_entries_before_error_are_yielded():
    entries = read_mapping(io.StringIO("0 ok\nbad\n"))
    assert next(entries) == (0, "ok")
    with pytest.raises(MappingError):
        next(entries)


def test_read_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("# header\n2\tvalue\n4 other\n", encoding="utf-8")
    assert read_mapping_file(path) == [(2, "value"), (4, "other")]