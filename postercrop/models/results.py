from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
from .enums import OutputKind
from .geometry import Dimensions

@dataclass(frozen=True)
class GeneratedFile:
    name: str
    data: bytes
    kind: OutputKind
    declared_dimensions: str
    size_display: str
    pixel_size: Dimensions

    @property
    def size(self) -> int:
        return len(self.data)

@dataclass(frozen=True)
class BatchResult:
    original_base_name: str
    files: Tuple[GeneratedFile, ...]
