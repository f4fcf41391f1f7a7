"""Link registry API command."""

from collections.abc import Iterator
from pathlib import Path

from ..config.AutolinkConfig import AutolinkConfig
from ..registry.build_fallback_index import build_fallback_index
from ..registry.RegistryError import RegistryError
from ..StageResult import StageResult
from . import LinkRegistryOutput
from ._load_registry import _load_registry


def cmd_registry(vault: str | None = None, registry: str | None = None) -> StageResult:
    """Build the candidate registry and report its keys, rejections and shared shorthands."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        vault_dir = Path(vault).expanduser().resolve() if vault else Path.cwd()
        registry_file = Path(registry).expanduser().resolve() if registry else None
        source = str(registry_file or vault_dir)

        yield (0.2, "Loading configuration...")
        try:
            config = AutolinkConfig.load_or_default()
        except ValueError as e:
            result_obj.output = LinkRegistryOutput(source=source, errors=[str(e)]).model_dump(mode="python")
            result_obj.result = str(e)
            result_obj.success = False
            return

        yield (0.5, "Building registry...")
        try:
            cand_registry, descriptor_count = _load_registry(
                config,
                vault_dir=None if registry_file else vault_dir,
                registry_file=registry_file,
            )
        except (ValueError, RegistryError) as e:
            result_obj.output = LinkRegistryOutput(source=source, errors=[str(e)]).model_dump(mode="python")
            result_obj.result = str(e)
            result_obj.success = False
            return

        yield (0.8, "Indexing shorthands...")
        index = build_fallback_index(cand_registry, cand_registry.ignore_case)
        ambiguous = {
            shorthand: sorted(key for key, _ in entries)
            for shorthand, entries in sorted(index.entries.items())
            if len(entries) > 1
        }

        result_obj.output = LinkRegistryOutput(
            source=source,
            descriptors=descriptor_count,
            pages=cand_registry.page_count,
            keys=len(cand_registry),
            rejected=[f"#{r.index}: {r.reason}" for r in cand_registry.rejected],
            ambiguous=ambiguous,
        ).model_dump(mode="python")
        result_obj.result = f"Registry has {len(cand_registry)} key(s) for {cand_registry.page_count} page(s)"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Building link registry...",
        progress_callback=do_work,
    )
