"""Per-document state shared by segment scans (UNO: single class)."""

from dataclasses import dataclass

from ..markdown.TableIndex import TableIndex
from ..registry.CandidateRegistry import CandidateRegistry
from ..registry.FallbackIndex import FallbackIndex
from .LinkSettings import LinkSettings


@dataclass(frozen=True)
class ScanContext:
    registry: CandidateRegistry
    fallback: FallbackIndex
    settings: LinkSettings
    file_path: str
    namespace: str
    body: str
    tables: TableIndex
