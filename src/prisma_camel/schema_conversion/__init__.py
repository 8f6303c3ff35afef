"""Schema conversion exports."""

from .block_context import BlockKind, ModelMappingState
from .field_remainder import (
    SCALAR_TYPE_NAMES,
    convert_field_remainder,
    field_attribute_names,
    field_type_name,
    is_relation_type,
    split_trailing_comment,
)
from .schema_converter import convert_compound_attribute, convert_schema

__all__ = [
    "BlockKind",
    "ModelMappingState",
    "SCALAR_TYPE_NAMES",
    "convert_compound_attribute",
    "convert_field_remainder",
    "convert_schema",
    "field_attribute_names",
    "field_type_name",
    "is_relation_type",
    "split_trailing_comment",
]
