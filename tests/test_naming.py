import pytest

from uidl_vue.codegen.core.naming import (
    component_file_stem,
    is_identifier_name,
    is_valid_identifier,
)


@pytest.mark.parametrize(
    "name, valid",
    [
        ("title", True),
        ("$emit", True),
        ("_private", True),
        ("aria-label", False),
        ("1st", False),
        ("", False),
        ("class", False),
        ("has space", False),
    ],
)
def test_is_valid_identifier(name, valid):
    assert is_valid_identifier(name) is valid


@pytest.mark.parametrize(
    "name, valid",
    [("default", True), ("class", True), ("title", True), ("aria-label", False)],
)
def test_reserved_words_are_identifier_names(name, valid):
    assert is_identifier_name(name) is valid


@pytest.mark.parametrize(
    "name, stem",
    [
        ("UserCard", "user-card"),
        ("user card", "user-card"),
        ("user_card", "user-card"),
        ("Card", "card"),
        ("Default", "default"),
        ("Class", "class"),
        ("2Col", "2-col"),
        ("!!!", "component"),
    ],
)
def test_component_file_stem(name, stem):
    assert component_file_stem(name) == stem
