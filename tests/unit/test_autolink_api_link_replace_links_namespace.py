"""Unit tests for namespace handling in autolink.api.link.replace_links."""

import pytest


def test_namespace_prefix_alone_not_linked(link_text):
    assert link_text("namespace", ["namespace/tag1", "namespace/tag2"], "journals/2022-01-01") == "namespace"


def test_full_path_gets_shorthand_display(link_text):
    result = link_text("namespace/tag1", ["namespace/tag1", "namespace/tag2"], "journals/2022-01-01")
    assert result == "[[namespace/tag1|tag1]]"


def test_multiple_full_paths(link_text):
    files = ["namespace/tag1", "namespace/tag2", "namespace"]
    result = link_text("namespace/tag1 namespace/tag2", files, "journals/2022-01-01")
    assert result == "[[namespace/tag1|tag1]] [[namespace/tag2|tag2]]"


def test_unique_shorthand_links(link_text):
    assert link_text("tag1", ["namespace/tag1", "namespace/tag2"]) == "[[namespace/tag1|tag1]]"


def test_nearest_sibling_wins(link_text):
    files = ["namespace/a/b/c/link", "namespace/a/b/c/d/link"]
    result = link_text("link", files, "namespace/a/b/c/current-file")
    assert result == "[[namespace/a/b/c/link|link]]"


@pytest.mark.parametrize(
    ("file_path", "expected"),
    [
        ("namespace/a/b/c/current-file", "[[namespace/a/b/c/link|link]]"),
        ("namespace/a/b/c/d/current-file", "[[namespace/a/b/c/d/link|link]]"),
    ],
)
def test_closest_directory_among_nested(link_text, file_path, expected):
    files = ["namespace/a/b/c/d/link", "namespace/a/b/c/d/e/f/link", "namespace/a/b/c/link"]
    assert link_text("link", files, file_path) == expected


def test_same_top_level_namespace_preferred(link_text):
    files = [
        "namespace/xxx/link",
        "another-namespace/link",
        "another-namespace/a/b/c/link",
        "another-namespace/a/b/c/d/link",
    ]
    assert link_text("link", files, "namespace/current-file") == "[[namespace/xxx/link|link]]"


def test_closest_child_directory(link_text):
    files = [
        "namespace1/subnamespace/link",
        "namespace2/super-super-long-long-directory/link",
        "namespace3/link",
        "namespace/a/b/c/link",
        "namespace/a/b/c/d/link",
        "namespace/a/b/c/d/e/f/link",
    ]
    assert link_text("link", files, "namespace/a/b/current-file") == "[[namespace/a/b/c/link|link]]"


BASE_FILES = [
    "namespace1/aaaaaaaaaaaaaaaaaaaaaaaaa/link",
    "namespace1/link2",
    "namespace2/link2",
    "namespace3/aaaaaa/bbbbbb/link2",
    "base/looooooooooooooooooooooooooooooooooooooong/link",
    "base/looooooooooooooooooooooooooooooooooooooong/super-super-long-long-long-long-closest-sub-dir/link",
    "base/a/b/c/link",
    "base/a/b/c/d/link",
    "base/a/b/c/d/e/f/link",
]


def test_document_at_base_root_prefers_shallow_candidate_inside_base(link_text):
    result = link_text("link link2", BASE_FILES, "base/current-file", base_dir="base")
    assert result == "[[looooooooooooooooooooooooooooooooooooooong/link|link]] [[namespace1/link2|link2]]"


def test_ambiguous_shorthand_left_alone_without_namespace_resolution(link_text):
    result = link_text("link link2", BASE_FILES, "base/current-file", base_dir="base", namespace_resolution=False)
    assert result == "link link2"


def test_alias_beats_shorthand_resolution(link_text):
    files = [
        {"path": "namespace/xx/yy/link"},
        {"path": "namespace/xx/link", "aliases": ["alias"]},
        {"path": "namespace/link2"},
    ]
    assert link_text("alias", files, "namespace/xx/current-file") == "[[namespace/xx/link|alias]]"


def test_resolution_without_aliases(link_text):
    files = ["namespace/xx/yy/link", "namespace/xx/link", "namespace/link2"]
    assert link_text("link", files, "namespace/xx/current-file") == "[[namespace/xx/link|link]]"


def test_multi_word_shorthands(link_text):
    files = ["Biomarkers/ATP Levels", "Biomarkers/cerebral blood flow (CBF)"]
    result = link_text("ATP Levels cerebral blood flow (CBF)", files, "namespace/xx/current-file")
    assert result == (
        "[[Biomarkers/ATP Levels|ATP Levels]] "
        "[[Biomarkers/cerebral blood flow (CBF)|cerebral blood flow (CBF)]]"
    )


def test_scoped_page_linked_within_its_namespace(link_text):
    files = [{"path": "pages/set/tag", "scoped": True}, {"path": "pages/other/current", "scoped": True}]
    assert link_text("tag", files, "pages/set/current", base_dir="pages") == "[[set/tag|tag]]"


def test_scoped_page_not_linked_from_other_namespace(link_text):
    files = [{"path": "pages/set/tag", "scoped": True}, {"path": "pages/other/current", "scoped": True}]
    assert link_text("tag", files, "pages/other/current", base_dir="pages") == "tag"


def test_scoped_pages_mixed(link_text):
    files = [
        {"path": "pages/set1/tag1", "scoped": True},
        {"path": "pages/set2/tag2", "scoped": True},
        {"path": "pages/other/current", "scoped": True},
    ]
    assert link_text("tag1 tag2", files, "pages/set1/current", base_dir="pages") == "[[set1/tag1|tag1]] tag2"


def test_scoped_cjk_page(link_text):
    files = [{"path": "pages/セット/タグ", "scoped": True}]
    assert link_text("タグ", files, "pages/セット/current", base_dir="pages") == "[[セット/タグ|タグ]]"
    assert link_text("タグ", files, "pages/other/current", base_dir="pages") == "タグ"


def test_scoped_ignored_without_namespace_resolution(link_text):
    files = [{"path": "set/tag", "scoped": True}]
    assert link_text("tag", files, "other/current", namespace_resolution=False) == "[[set/tag|tag]]"


def test_ambiguous_shorthand_skips_scoped_candidates(link_text):
    files = [{"path": "set/link", "scoped": True}, {"path": "other/sub/link"}]
    assert link_text("link", files, "elsewhere/current") == "[[other/sub/link|link]]"
