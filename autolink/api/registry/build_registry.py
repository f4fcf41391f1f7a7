"""Build a candidate registry from page descriptors (UNO: single function)."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from .Candidate import Candidate
from .CandidateRegistry import CandidateRegistry
from .get_effective_namespace import get_effective_namespace
from .is_under_dir import is_under_dir
from .PageDescriptor import PageDescriptor
from .RegistryError import RegistryError
from .RejectedDescriptor import RejectedDescriptor
from .strip_base_dir import strip_base_dir
from .TrieNode import TrieNode

logger = logging.getLogger(__name__)


def _validate(descriptors: Iterable[Any]) -> tuple[list[PageDescriptor], list[RejectedDescriptor]]:
    valid: list[PageDescriptor] = []
    rejected: list[RejectedDescriptor] = []
    for index, raw in enumerate(descriptors):
        if isinstance(raw, PageDescriptor):
            valid.append(raw)
            continue
        try:
            valid.append(PageDescriptor.model_validate(raw))
        except ValidationError as e:
            first = e.errors()[0]
            loc = ".".join(str(x) for x in first.get("loc", ()))
            reason = f"{loc}: {first['msg']}" if loc else first["msg"]
            logger.warning("Rejected descriptor #%d (%r): %s", index, raw, reason)
            rejected.append(RejectedDescriptor(index=index, raw=raw, reason=reason))
    return valid, rejected


def build_registry(
    descriptors: Iterable[PageDescriptor | Mapping[str, Any]],
    *,
    base_dir: str | None = None,
    ignore_case: bool = False,
    exclude_dirs: Sequence[str] = (),
    consider_aliases: bool = True,
) -> CandidateRegistry:
    """Build the trie and candidate map for a set of pages.

    Keys are inserted in priority order (full and base-relative paths, then
    aliases, then last-segment shorthands) over pages sorted by path length,
    longest first. A key that is already owned is never overwritten.
    Malformed descriptors are left out and reported in ``rejected``.

    Raises:
        RegistryError: If ``descriptors`` is not a collection of descriptors
    """
    if isinstance(descriptors, (str, bytes, Mapping)) or not isinstance(descriptors, Iterable):
        raise RegistryError(f"Expected a sequence of page descriptors, got {type(descriptors).__name__}")

    base_dir = (base_dir or "").strip("/") or None
    valid, rejected = _validate(descriptors)

    pages = [
        page
        for page in valid
        if not page.excluded and not any(is_under_dir(page.path, d) for d in exclude_dirs)
    ]
    pages.sort(key=lambda page: len(page.path), reverse=True)

    trie = TrieNode()
    candidate_map: dict[str, Candidate] = {}

    def add(key: str, candidate: Candidate) -> None:
        if key in candidate_map:
            return
        if trie.insert(key, ignore_case):
            candidate_map[key] = candidate

    namespaces = {page.path: get_effective_namespace(page.path, base_dir) for page in pages}

    for page in pages:
        exact = Candidate(
            canonical=page.path,
            path=page.path,
            namespace=namespaces[page.path],
            scoped=page.scoped,
            kind="exact",
        )
        add(page.path, exact)
        relative = strip_base_dir(page.path, base_dir)
        if relative != page.path:
            add(relative, exact)

    if consider_aliases:
        for page in pages:
            for alias in page.aliases or ():
                add(
                    alias,
                    Candidate(
                        canonical=f"{page.path}|{alias}",
                        path=page.path,
                        namespace=namespaces[page.path],
                        scoped=page.scoped,
                        kind="alias",
                    ),
                )

    for page in pages:
        if "/" not in page.path:
            continue
        shorthand = page.path.rsplit("/", 1)[1]
        if consider_aliases and page.aliases and shorthand in page.aliases:
            continue
        add(
            shorthand,
            Candidate(
                canonical=page.path,
                path=page.path,
                namespace=namespaces[page.path],
                scoped=page.scoped,
                kind="shorthand",
            ),
        )

    logger.debug("Built registry: %d keys from %d pages (%d rejected)", len(candidate_map), len(pages), len(rejected))
    return CandidateRegistry(
        trie=trie,
        candidate_map=MappingProxyType(candidate_map),
        base_dir=base_dir,
        ignore_case=ignore_case,
        rejected=tuple(rejected),
        page_count=len(pages),
    )
