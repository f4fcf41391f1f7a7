"""Shared pytest configuration and fixtures for all tests."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from autolink.api.link.LinkSettings import LinkSettings
from autolink.api.link.replace_links import replace_links
from autolink.api.registry.build_registry import build_registry


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests that drive the CLI")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def link_text(
    body: str,
    files: list,
    file_path: str = "test",
    exclude_dirs: tuple[str, ...] = (),
    consider_aliases: bool = True,
    **settings,
) -> str:
    """Build a registry from ``files`` and link ``body`` as document ``file_path``.

    ``files`` holds descriptor dicts or bare paths.
    """
    link_settings = LinkSettings(**settings)
    descriptors = [{"path": f} if isinstance(f, str) else f for f in files]
    registry = build_registry(
        descriptors,
        base_dir=link_settings.base_dir,
        ignore_case=link_settings.ignore_case,
        exclude_dirs=exclude_dirs,
        consider_aliases=consider_aliases,
    )
    return replace_links(body, file_path, registry, link_settings)


def write_page(vault: Path, page: str, body: str = "", frontmatter: dict | None = None) -> Path:
    """Write ``page``.md under ``vault`` with optional YAML frontmatter."""
    path = vault / f"{page}.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    text = body
    if frontmatter is not None:
        lines = [f"{key}: {json.dumps(value)}" for key, value in frontmatter.items()]
        text = "---\n" + "\n".join(lines) + "\n---\n" + body
    path.write_text(text, encoding="utf-8")
    return path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def autolink_home(tmp_path: Path, monkeypatch) -> Path:
    """Point AUTOLINK_HOME at an empty per-test directory."""
    home = tmp_path / "autolink_home"
    home.mkdir()
    monkeypatch.setenv("AUTOLINK_HOME", str(home))
    return home


@pytest.fixture(name="run_cmd")
def run_cmd_fixture() -> Callable:
    return run_cmd


@pytest.fixture(name="link_text")
def link_text_fixture() -> Callable[..., str]:
    return link_text


@pytest.fixture(name="write_page")
def write_page_fixture() -> Callable[..., Path]:
    return write_page


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """Empty vault directory."""
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def config_file(autolink_home: Path) -> Callable[[dict], Path]:
    """Write a config.json into AUTOLINK_HOME."""

    def _write(data: dict) -> Path:
        path = autolink_home / "config.json"
        path.write_text(json.dumps(data))
        return path

    return _write
