"""Unit tests for autolink.api.vault.collect_descriptors and its readers."""

from pathlib import Path

import pytest

from autolink.api.vault.collect_descriptors import collect_descriptors
from autolink.api.vault.constants import SCOPED_KEYS
from autolink.api.vault.read_aliases import read_aliases
from autolink.api.vault.read_flag import read_flag
from autolink.api.vault.to_page_path import to_page_path


def test_collects_pages_with_frontmatter(vault, write_page):
    write_page(vault, "hello", "body")
    write_page(vault, "ns/tag", frontmatter={"aliases": ["T", "tg"], "autolink-scoped": True})
    write_page(vault, "private", frontmatter={"autolink-prevent-linking": True})

    descriptors = {d.path: d for d in collect_descriptors(vault)}
    assert set(descriptors) == {"hello", "ns/tag", "private"}
    assert descriptors["hello"].aliases is None
    assert descriptors["ns/tag"].aliases == ["T", "tg"]
    assert descriptors["ns/tag"].scoped is True
    assert descriptors["private"].excluded is True


def test_skips_hidden_and_non_markdown(vault, write_page):
    write_page(vault, ".obsidian/config")
    write_page(vault, "visible")
    (vault / "notes.txt").write_text("not a page")
    assert [d.path for d in collect_descriptors(vault)] == ["visible"]


def test_invalid_frontmatter_treated_as_empty(vault):
    (vault / "broken.md").write_text("---\naliases: [oops\n---\nbody")
    [descriptor] = collect_descriptors(vault)
    assert descriptor.path == "broken"
    assert descriptor.aliases is None


def test_unreadable_file_skipped(vault, write_page, caplog):
    write_page(vault, "good")
    (vault / "binary.md").write_bytes(b"\xff\xfe\x00bad")
    assert [d.path for d in collect_descriptors(vault)] == ["good"]
    assert "Skipping unreadable page" in caplog.text


def test_missing_vault_raises(tmp_path):
    with pytest.raises(ValueError, match="Vault directory not found"):
        collect_descriptors(tmp_path / "missing")


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ({"aliases": "one"}, ["one"]),
        ({"aliases": ["a", "b", "a"]}, ["a", "b"]),
        ({"alias": "x", "aliases": ["y"]}, ["y", "x"]),
        ({"aliases": [None, 3, " "]}, ["3"]),
        ({"aliases": {"not": "a list"}}, []),
        ({}, []),
    ],
)
def test_read_aliases(data, expected):
    assert read_aliases(data) == expected


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ({"autolink-scoped": True}, True),
        ({"autolink-restrict-namespace": "yes"}, True),
        ({"autolink-scoped": False}, False),
        ({"autolink-scoped": "no"}, False),
        ({}, False),
    ],
)
def test_read_flag(data, expected):
    assert read_flag(data, SCOPED_KEYS) is expected


def test_to_page_path(tmp_path):
    assert to_page_path(tmp_path / "a" / "b.md", tmp_path) == "a/b"
    assert to_page_path(Path("/elsewhere/c.md"), tmp_path) == "c"
