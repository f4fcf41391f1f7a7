"""Link apply API command."""

from collections.abc import Iterator
from pathlib import Path

from ..config.AutolinkConfig import AutolinkConfig
from ..markdown.split_frontmatter import split_frontmatter
from ..registry.FallbackIndexCache import FallbackIndexCache
from ..registry.RegistryError import RegistryError
from ..StageResult import StageResult
from ..vault.constants import DISABLED_KEYS, MARKDOWN_SUFFIX
from ..vault.read_flag import read_flag
from ..vault.to_page_path import to_page_path
from . import LinkApplyOutput
from .LinkApplyFile import LinkApplyFile
from .link_document import link_document
from ._load_registry import _load_registry


def cmd_apply(
    path: str,
    vault: str | None = None,
    registry: str | None = None,
    write: bool = False,
) -> StageResult:
    """Insert wikilinks into a Markdown file, or every Markdown file under a directory."""

    def _fail(result_obj: StageResult, target: str, message: str, warnings: list[str] | None = None) -> None:
        result_obj.output = LinkApplyOutput(path=target, errors=[message], warnings=warnings or []).model_dump(
            mode="python"
        )
        result_obj.result = message
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = AutolinkConfig.load_or_default()
        except ValueError as e:
            _fail(result_obj, path, str(e))
            return

        yield (0.2, "Resolving path...")
        target = Path(path).expanduser().resolve()
        if not target.exists():
            _fail(result_obj, str(target), f"Path not found: {path}")
            return
        if target.is_dir():
            files = sorted(
                p
                for p in target.rglob(f"*{MARKDOWN_SUFFIX}")
                if p.is_file() and not any(part.startswith(".") for part in p.relative_to(target).parts)
            )
            default_vault = target
        else:
            files = [target]
            default_vault = target.parent
        vault_dir = Path(vault).expanduser().resolve() if vault else default_vault

        yield (0.4, "Building registry...")
        try:
            cand_registry, _ = _load_registry(
                config,
                vault_dir=None if registry else vault_dir,
                registry_file=Path(registry).expanduser().resolve() if registry else None,
            )
        except (ValueError, RegistryError) as e:
            _fail(result_obj, str(target), str(e))
            return
        warnings = [f"Rejected descriptor #{r.index}: {r.reason}" for r in cand_registry.rejected]

        yield (0.6, f"Linking {len(files)} file(s)...")
        cache = FallbackIndexCache()
        results: list[LinkApplyFile] = []
        errors: list[str] = []
        content: str | None = None
        for file_path in files:
            try:
                text = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                errors.append(f"Cannot read {file_path}: {e}")
                continue

            page = to_page_path(file_path, vault_dir)
            linked = link_document(text, page, cand_registry, config.link, cache)
            changed = linked != text
            if write and changed:
                try:
                    file_path.write_text(linked, encoding="utf-8")
                except OSError as e:
                    errors.append(f"Cannot write {file_path}: {e}")
            results.append(
                LinkApplyFile(
                    path=str(file_path),
                    page=page,
                    changed=changed,
                    links_added=max(0, linked.count("[[") - text.count("[[")),
                    skipped=read_flag(split_frontmatter(text).data, DISABLED_KEYS),
                )
            )
            if len(files) == 1:
                content = linked

        yield (0.9, "Summarizing...")
        links_added = sum(r.links_added for r in results)
        changed_count = sum(1 for r in results if r.changed)
        result_obj.output = LinkApplyOutput(
            path=str(target),
            files=results,
            links_added=links_added,
            changed=changed_count,
            written=write and changed_count > 0 and not errors,
            content=content,
            errors=errors,
            warnings=warnings,
        ).model_dump(mode="python")
        result_obj.success = not errors
        verb = "Wrote" if write else "Found"
        result_obj.result = (
            f"{verb} {links_added} link(s) in {changed_count} of {len(results)} file(s)"
            if not errors
            else f"Linking finished with {len(errors)} error(s)"
        )
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Linking {path}...",
        progress_callback=do_work,
    )
