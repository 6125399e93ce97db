"""Unit tests for the example identifier and its case variants."""

from __future__ import annotations

import pytest

from examplegen.errors import ExampleValidationError
from examplegen.example import Example, lower_first, title_case


@pytest.mark.parametrize(
    ("name", "lower", "title", "lower_title"),
    [
        ("redis", "redis", "Redis", "Redis"),
        ("MongoDB", "mongodb", "Mongodb", "Mongodb"),
        ("NGINX", "nginx", "Nginx", "Nginx"),
        ("a", "a", "A", "A"),
    ],
)
def test_variants_without_title_override(
    name: str, lower: str, title: str, lower_title: str
) -> None:
    """Without an override the title forms both title-case the lower-case name."""
    example = Example(name=name, image="img:latest")
    assert example.lower == lower, f"expected lower {lower!r}, got {example.lower!r}"
    assert example.title == title, f"expected title {title!r}, got {example.title!r}"
    assert example.lower_title == lower_title, (
        f"expected lower_title {lower_title!r}, got {example.lower_title!r}"
    )


@pytest.mark.parametrize(
    ("name", "title_name", "lower_title"),
    [
        ("mongodb", "MongoDB", "mongoDB"),
        ("localstack", "LocalStack", "localStack"),
        ("redis", "redis", "redis"),
    ],
)
def test_title_override_is_used_verbatim(
    name: str, title_name: str, lower_title: str
) -> None:
    """The override wins for ``title`` and keeps internal capitals."""
    example = Example(name=name, image="img:latest", title_name=title_name)
    assert example.lower == name.lower()
    assert example.title == title_name, (
        f"expected title override {title_name!r}, got {example.title!r}"
    )
    assert example.lower_title == lower_title, (
        f"expected lower_title {lower_title!r}, got {example.lower_title!r}"
    )


def test_lower_title_matches_title_without_override() -> None:
    """Only an explicit override gives ``lower_title`` a lower-case first letter."""
    example = Example(name="redis", image="redis:latest")
    assert example.lower_title == example.title == "Redis"


def test_title_case_capitalizes_each_word_only() -> None:
    """Only word starts change; existing capitals are left alone."""
    assert title_case("hello world") == "Hello World"
    assert title_case("mongoDB") == "MongoDB"
    assert lower_first("MongoDB") == "mongoDB"
    assert lower_first("") == ""


@pytest.mark.parametrize("name", ["", "redis1", "my-db", "my db", "café", "redis\n"])
def test_validate_rejects_invalid_names(name: str) -> None:
    """Names must consist of ASCII letters only."""
    with pytest.raises(ExampleValidationError, match="invalid name"):
        Example(name=name, image="img:latest").validate()


@pytest.mark.parametrize("title_name", ["Mongo DB", "Mongo2", "Mongo_DB"])
def test_validate_rejects_invalid_titles(title_name: str) -> None:
    """A supplied title override must also be alphabetic."""
    example = Example(name="mongodb", image="img:latest", title_name=title_name)
    with pytest.raises(ExampleValidationError, match="invalid title"):
        example.validate()


def test_validate_accepts_missing_title() -> None:
    """The title override is optional."""
    Example(name="redis", image="redis:latest").validate()
    Example(name="mongodb", image="mongo:6", title_name="MongoDB").validate()


def test_validation_error_is_a_value_error() -> None:
    """Callers catching ``ValueError`` also see validation failures."""
    with pytest.raises(ValueError, match="Only alphabetical characters"):
        Example(name="r3dis", image="img").validate()
