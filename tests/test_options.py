import pytest

from beanschema.options import CommentStyle, ParseOptions, RequiredFieldStrategy, resolve_options


def test_defaults() -> None:
    options = ParseOptions()
    assert options.include_private_fields is True
    assert options.required_field_strategy == RequiredFieldStrategy.ANNOTATION
    assert options.comment_style == CommentStyle.JAVADOC


def test_from_mapping_accepts_camel_and_snake_case() -> None:
    camel = ParseOptions.from_mapping(
        {"includePrivateFields": False, "requiredFieldStrategy": "all", "commentStyle": "inline"}
    )
    snake = ParseOptions.from_mapping(
        {"include_private_fields": False, "required_field_strategy": "all", "comment_style": "inline"}
    )

    assert camel == snake
    assert camel.include_private_fields is False
    assert camel.required_field_strategy == RequiredFieldStrategy.ALL
    assert camel.comment_style == CommentStyle.INLINE


def test_from_mapping_ignores_unknown_keys_and_none() -> None:
    options = ParseOptions.from_mapping({"somethingElse": 1, "requiredFieldStrategy": None})
    assert options == ParseOptions()


@pytest.mark.parametrize(
    "mapping",
    [
        {"requiredFieldStrategy": "sometimes"},
        {"commentStyle": "markdown"},
        {"includePrivateFields": "yes"},
    ],
)
def test_from_mapping_rejects_invalid_values(mapping: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        ParseOptions.from_mapping(mapping)


def test_resolve_options() -> None:
    options = ParseOptions(include_private_fields=False)
    assert resolve_options(options) is options
    assert resolve_options(None) == ParseOptions()
    assert resolve_options({"requiredFieldStrategy": "none"}).required_field_strategy == RequiredFieldStrategy.NONE
