"""Field remainder tokenizer and rewrite tests."""

from __future__ import annotations

import pytest
from prisma_camel.schema_conversion.field_remainder import (
    TokenKind,
    convert_field_remainder,
    field_attribute_names,
    field_type_name,
    has_field_map_annotation,
    is_relation_type,
    split_trailing_comment,
    tokenize_remainder,
)


def test_tokenizer_covers_every_character() -> None:
    remainder = ' UserInfo @relation(fields: [user_idx], map: "fk_x") // note'

    tokens = list(tokenize_remainder(remainder))

    assert "".join(token.text for token in tokens) == remainder
    assert tokens[-1].kind is TokenKind.COMMENT


def test_tokenizer_tracks_attribute_argument_owner() -> None:
    tokens = list(tokenize_remainder(" Int @default(auto_value) @map(\"col_name\")"))

    owners = {
        token.text: token.attribute for token in tokens if token.kind is not TokenKind.SYMBOL
    }
    assert owners["auto_value"] == "default"
    assert owners['"col_name"'] == "map"
    assert owners["Int"] is None


def test_type_position_is_rendered_in_pascal_case() -> None:
    assert convert_field_remainder(" user_profile") == " UserProfile"
    assert convert_field_remainder(" blog_post[]") == " BlogPost[]"
    assert convert_field_remainder(" user_profile?") == " UserProfile?"


def test_relation_field_lists_are_rendered_in_camel_case() -> None:
    remainder = " user_profile @relation(fields: [author_id], references: [id])"

    assert convert_field_remainder(remainder) == (
        " UserProfile @relation(fields: [authorId], references: [id])"
    )


def test_relation_map_literal_is_never_renamed() -> None:
    remainder = (
        ' UserInfo @relation(fields: [user_idx], references: [userIdx], onUpdate: Restrict,'
        ' map: "FK_user_browser_fingerprint_user_idx")'
    )

    assert convert_field_remainder(remainder) == (
        ' UserInfo @relation(fields: [userIdx], references: [userIdx], onUpdate: Restrict,'
        ' map: "FK_user_browser_fingerprint_user_idx")'
    )


def test_map_annotation_contents_are_preserved() -> None:
    assert convert_field_remainder(' String @map("user_name")') == ' String @map("user_name")'
    assert convert_field_remainder(" String @map(name: user_name)") == (
        " String @map(name: user_name)"
    )


def test_string_literals_and_comments_are_preserved() -> None:
    remainder = ' String @default("pending_review") // keeps old_value'

    assert convert_field_remainder(remainder) == remainder


def test_later_identifiers_use_camel_case() -> None:
    assert convert_field_remainder(" Int @default(auto_value)") == " Int @default(autoValue)"


def test_convert_field_remainder_is_idempotent() -> None:
    remainder = (
        ' user_profile? @relation("post_author", fields: [author_id], references: [user_id])'
        " // owner_ref"
    )

    once = convert_field_remainder(remainder)

    assert convert_field_remainder(once) == once


def test_field_attribute_names_skip_strings_and_comments() -> None:
    remainder = ' String @id @db.VarChar(255) @default("@map(x)") // @map("y")'

    assert field_attribute_names(remainder) == ("id", "db.VarChar", "default")
    assert has_field_map_annotation(remainder) is False
    assert has_field_map_annotation(' String @unique @map("email_address")') is True


def test_split_trailing_comment_ignores_slashes_inside_strings() -> None:
    body, comment = split_trailing_comment(' String @default("https://example.com") // homepage')

    assert body == ' String @default("https://example.com") '
    assert comment == "// homepage"
    assert split_trailing_comment(" String") == (" String", "")


@pytest.mark.parametrize(
    ("remainder", "expected"),
    [
        (" String", "String"),
        ("   DateTime? @default(now())", "DateTime"),
        (" Int[]", "Int"),
        (" user_profile @relation(fields: [a], references: [b])", "user_profile"),
        (' Unsupported("geometry")', "Unsupported"),
        (" @id", None),
    ],
)
def test_field_type_name(remainder: str, expected: str | None) -> None:
    assert field_type_name(remainder) == expected


def test_is_relation_type_uses_scalar_names() -> None:
    for scalar in ("String", "Boolean", "Int", "BigInt", "Float", "Decimal", "DateTime"):
        assert is_relation_type(scalar) is False
    for scalar in ("Json", "Bytes", "Unsupported"):
        assert is_relation_type(scalar) is False
    assert is_relation_type("UserInfo") is True
    assert is_relation_type("user_profile") is True
    assert is_relation_type(None) is False
