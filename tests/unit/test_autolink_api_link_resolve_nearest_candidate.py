"""Unit tests for autolink.api.link.resolve_nearest_candidate."""

import pytest

from autolink.api.link.resolve_nearest_candidate import resolve_nearest_candidate
from autolink.api.registry.Candidate import Candidate


def _entries(*paths: str) -> list[tuple[str, Candidate]]:
    return [(p, Candidate(canonical=p, path=p, namespace=p.split("/")[0], scoped=False, kind="exact")) for p in paths]


def _resolve(paths, file_path, base_dir=None) -> str:
    return resolve_nearest_candidate(_entries(*paths), file_path, base_dir)[0]


def test_most_shared_directories_wins():
    assert _resolve(["x/link", "a/b/link", "a/link"], "a/b/doc") == "a/b/link"


def test_tie_prefers_fewer_directories():
    assert _resolve(["a/b/c/d/link", "a/b/c/link"], "a/b/c/doc") == "a/b/c/link"


def test_tie_prefers_shorter_key():
    assert _resolve(["ns/longer/link", "ns/short/link"], "ns/doc") == "ns/short/link"


def test_full_tie_keeps_first():
    assert _resolve(["one/link", "two/link"], "root") == "one/link"


def test_document_at_base_root_prefers_inside_base():
    paths = ["outside/link", "base/deep/er/link", "base/deep/link"]
    assert _resolve(paths, "base/doc", base_dir="base") == "base/deep/link"


def test_document_in_base_subdirectory_compares_relative_paths():
    paths = ["base/x/link", "base/y/z/link"]
    assert _resolve(paths, "base/y/doc", base_dir="base") == "base/y/z/link"


def test_empty_entries_rejected():
    with pytest.raises(ValueError):
        resolve_nearest_candidate([], "doc")
