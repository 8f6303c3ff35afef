"""Block tracking entities for the line-oriented schema rewrite."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BlockKind(str, Enum):
    """Declaration block the current schema line belongs to."""

    NONE = "none"
    MODEL = "model"
    ENUM = "enum"
    TYPE = "type"
    GENERATOR = "generator"
    DATASOURCE = "datasource"

    @classmethod
    def from_line(cls, trimmed_line: str) -> BlockKind | None:
        """Return the block kind opened by ``trimmed_line``, if any."""
        for kind in _OPENING_KINDS:
            if trimmed_line.startswith(f"{kind.value} "):
                return kind
        return None


_OPENING_KINDS = (
    BlockKind.MODEL,
    BlockKind.ENUM,
    BlockKind.TYPE,
    BlockKind.GENERATOR,
    BlockKind.DATASOURCE,
)


@dataclass(frozen=True)
class ModelMappingState:
    """Model-level ``@@map`` bookkeeping for the block being scanned."""

    original_name: str | None = None
    has_block_map: bool = False

    @property
    def owes_block_map(self) -> bool:
        """True when the model was renamed and no ``@@map`` has been seen yet."""
        return self.original_name is not None and not self.has_block_map

    def renamed_from(self, original_name: str) -> ModelMappingState:
        return ModelMappingState(original_name=original_name, has_block_map=self.has_block_map)

    def with_block_map(self) -> ModelMappingState:
        return ModelMappingState(original_name=self.original_name, has_block_map=True)
