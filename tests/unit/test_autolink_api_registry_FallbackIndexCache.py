"""Unit tests for the fallback index and its cache."""

import gc

from autolink.api.registry.build_fallback_index import build_fallback_index
from autolink.api.registry.build_registry import build_registry
from autolink.api.registry.FallbackIndexCache import FallbackIndexCache


def test_index_groups_full_paths_by_last_segment():
    registry = build_registry([{"path": "a/link"}, {"path": "b/c/link"}, {"path": "link2"}], base_dir="a")
    index = build_fallback_index(registry, ignore_case=False)
    assert [key for key, _ in index.get("link")] == ["b/c/link", "a/link"]
    assert "link2" not in index
    assert index.max_key_length == len("link")


def test_index_case_folding():
    registry = build_registry([{"path": "x/Clean Code"}])
    assert not build_fallback_index(registry, ignore_case=False).get("clean code")
    assert build_fallback_index(registry, ignore_case=True).get("CLEAN CODE")


def test_cache_builds_once_per_registry_and_mode():
    registry = build_registry([{"path": "a/link"}])
    cache = FallbackIndexCache()
    first = cache.get(registry, False)
    assert cache.get(registry, False) is first
    assert cache.get(registry, True) is not first
    assert len(cache) == 2


def test_cache_separates_registries():
    cache = FallbackIndexCache()
    one = build_registry([{"path": "a/link"}])
    two = build_registry([{"path": "a/link"}])
    assert cache.get(one, False) is not cache.get(two, False)


def test_cache_drops_collected_registries():
    cache = FallbackIndexCache()
    registry = build_registry([{"path": "a/link"}])
    cache.get(registry, False)
    del registry
    gc.collect()
    assert len(cache) == 0
