"""Line-oriented snake_case to camelCase rewrite of Prisma schema text."""

from __future__ import annotations

import logging
import re

from prisma_camel.case_conversion import is_snake_case, to_camel_case, to_pascal_case

from .block_context import BlockKind, ModelMappingState
from .field_remainder import (
    convert_field_remainder,
    field_type_name,
    has_field_map_annotation,
    is_relation_type,
    split_trailing_comment,
)

_LOGGER = logging.getLogger(__name__)

_BLOCK_DECLARATION_PATTERN = re.compile(
    r"^(\s*(?:model|enum|type)\s+)([A-Za-z_][A-Za-z0-9_]*)(\s*\{?\s*)$"
)
_FIELD_DECLARATION_PATTERN = re.compile(r"^(\s+)([A-Za-z_][A-Za-z0-9_]*)(\s+.*)$")
_COMPOUND_ATTRIBUTE_PATTERN = re.compile(r"^\s*@@(?:index|unique|id)\b")
_BLOCK_MAP_PATTERN = re.compile(r"^\s*@@map\b")
_FIELD_LIST_PATTERN = re.compile(r"\[([^\]]*)\]")
_FIELD_LIST_ENTRY_PATTERN = re.compile(r"^(\s*)([A-Za-z_][A-Za-z0-9_]*)")

_BLOCK_INDENT = "  "


def convert_schema(document: str) -> str:
    """Convert snake_case model, enum, type and field names to camelCase/PascalCase.

    Renamed models receive a trailing ``@@map("<original>")`` and renamed scalar
    fields a ``@map("<original>")`` so the database names stay the same.
    ``generator`` and ``datasource`` blocks are copied unchanged.
    """
    converted_lines: list[str] = []
    block = BlockKind.NONE
    model_state = ModelMappingState()

    for raw_line in document.split("\n"):
        line, line_ending = _detach_carriage_return(raw_line)
        trimmed = line.strip()

        opened_block = _opened_block(trimmed, block)
        if opened_block is not None:
            block = opened_block
            model_state = ModelMappingState()

        if trimmed == "}":
            if block is BlockKind.MODEL and model_state.owes_block_map:
                indent = line[: len(line) - len(line.lstrip())]
                converted_lines.append(
                    f'{indent}{_BLOCK_INDENT}@@map("{model_state.original_name}"){line_ending}'
                )
            block = BlockKind.NONE
            model_state = ModelMappingState()
            converted_lines.append(raw_line)
            continue

        if opened_block in (BlockKind.MODEL, BlockKind.ENUM, BlockKind.TYPE):
            renamed = _rename_block_declaration(line, opened_block)
            if renamed is not None:
                new_line, original_name = renamed
                if opened_block is BlockKind.MODEL:
                    model_state = model_state.renamed_from(original_name)
                _LOGGER.debug("Renamed %s %s", opened_block.value, original_name)
                converted_lines.append(f"{new_line}{line_ending}")
                continue

        converted_lines.append(f"{_convert_block_line(line, block)}{line_ending}")
        if block is BlockKind.MODEL and _BLOCK_MAP_PATTERN.match(line):
            model_state = model_state.with_block_map()

    return "\n".join(converted_lines)


def _opened_block(trimmed: str, block: BlockKind) -> BlockKind | None:
    kind = BlockKind.from_line(trimmed)
    # inside a block only a full "<keyword> <name> {" line opens a new one
    if kind is None or block is BlockKind.NONE or trimmed.endswith("{"):
        return kind
    return None


def _detach_carriage_return(raw_line: str) -> tuple[str, str]:
    if raw_line.endswith("\r"):
        return raw_line[:-1], "\r"
    return raw_line, ""


def _rename_block_declaration(line: str, kind: BlockKind) -> tuple[str, str] | None:
    match = _BLOCK_DECLARATION_PATTERN.match(line)
    if match is None:
        return None
    prefix, name, suffix = match.groups()
    if not is_snake_case(name):
        return None
    new_name = to_pascal_case(name) if kind is BlockKind.MODEL else to_camel_case(name)
    return f"{prefix}{new_name}{suffix}", name


def _convert_block_line(line: str, block: BlockKind) -> str:
    if block is BlockKind.MODEL:
        if _COMPOUND_ATTRIBUTE_PATTERN.match(line):
            return convert_compound_attribute(line)
        return _convert_field_declaration(line, block)
    if block is BlockKind.TYPE:
        return _convert_field_declaration(line, block)
    # enum values and generator/datasource settings are never renamed
    return line


def convert_compound_attribute(line: str) -> str:
    """Rename snake_case entries in the field list of ``@@index``/``@@unique``/``@@id``."""
    return _FIELD_LIST_PATTERN.sub(
        lambda match: f"[{_convert_field_list(match.group(1))}]", line, count=1
    )


def _convert_field_list(field_list: str) -> str:
    entries: list[str] = []
    for entry in field_list.split(","):
        match = _FIELD_LIST_ENTRY_PATTERN.match(entry)
        if match is not None and is_snake_case(match.group(2)):
            entry = f"{match.group(1)}{to_camel_case(match.group(2))}{entry[match.end():]}"
        entries.append(entry)
    return ",".join(entries)


def _convert_field_declaration(line: str, block: BlockKind) -> str:
    match = _FIELD_DECLARATION_PATTERN.match(line)
    if match is None:
        return line
    indent, field_name, remainder = match.groups()

    if not is_snake_case(field_name):
        if block is BlockKind.MODEL:
            return f"{indent}{field_name}{convert_field_remainder(remainder)}"
        return line

    converted_remainder = convert_field_remainder(remainder)
    new_field_name = to_camel_case(field_name)
    if has_field_map_annotation(remainder) or is_relation_type(field_type_name(remainder)):
        return f"{indent}{new_field_name}{converted_remainder}"

    body, comment = split_trailing_comment(converted_remainder)
    mapped = f'{indent}{new_field_name}{body.rstrip()} @map("{field_name}")'
    if comment:
        return f"{mapped} {comment.strip()}"
    return mapped
