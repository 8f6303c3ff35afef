"""Identifier case conversion tests."""

from __future__ import annotations

import pytest
from prisma_camel.case_conversion import is_snake_case, to_camel_case, to_pascal_case


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("user_name", "userName"),
        ("blog_post", "blogPost"),
        ("this_is_a_test", "thisIsATest"),
        ("user_email_address", "userEmailAddress"),
        ("user", "user"),
    ],
)
def test_to_camel_case_removes_underscores_before_letters(value: str, expected: str) -> None:
    assert to_camel_case(value) == expected


def test_to_camel_case_leaves_underscore_before_digit() -> None:
    assert to_camel_case("address_2") == "address_2"
    assert to_camel_case("value_1a") == "value_1a"


def test_to_camel_case_passes_through_non_snake_input() -> None:
    assert to_camel_case("userName") == "userName"
    assert to_camel_case("user_Name") == "user_Name"
    assert to_camel_case("") == ""


def test_to_pascal_case_uppercases_first_character() -> None:
    assert to_pascal_case("user_profile") == "UserProfile"
    assert to_pascal_case("blog_post") == "BlogPost"
    assert to_pascal_case("UserProfile") == "UserProfile"
    assert to_pascal_case("") == ""


@pytest.mark.parametrize(
    "value",
    ["user_name", "user_profile", "this_is_a_test", "user_id", "value_1a", "a1_b2"],
)
def test_is_snake_case_accepts_multi_word_lowercase(value: str) -> None:
    assert is_snake_case(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "user",
        "name",
        "userName",
        "UserName",
        "BlogPost",
        "_user_name",
        "user__name",
        "user_Name",
        "user_name_",
        "USER_NAME",
        "",
    ],
)
def test_is_snake_case_rejects_other_shapes(value: str) -> None:
    assert is_snake_case(value) is False


@pytest.mark.parametrize("value", ["user_name", "this_is_a_test", "created_at", "page_view_count"])
def test_converted_snake_case_has_no_underscores(value: str) -> None:
    assert "_" not in to_camel_case(value)
    pascal = to_pascal_case(value)
    assert "_" not in pascal
    assert pascal[0].isupper()
