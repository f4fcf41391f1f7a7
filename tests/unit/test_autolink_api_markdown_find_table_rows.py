"""Unit tests for autolink.api.markdown.find_table_rows."""

from autolink.api.markdown.find_table_rows import find_table_rows


def test_table_rows_located():
    body = "intro\n| a | b |\n|---|---|\n  | c | d |\nafter"
    index = find_table_rows(body)
    assert not index.contains(body.index("intro"))
    assert index.contains(body.index("a |"))
    assert index.contains(body.index("---"))
    assert index.contains(body.index("c |"))
    assert not index.contains(body.index("after"))


def test_no_tables():
    index = find_table_rows("no tables | here")
    assert not index
    assert not index.contains(0)


def test_offset_past_end():
    body = "| a |"
    assert not find_table_rows(body).contains(len(body) + 5)
