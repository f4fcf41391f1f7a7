"""Record of a descriptor left out of a registry."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RejectedDescriptor:
    index: int
    raw: Any
    reason: str
