import pytest

from beanschema.ast import AstCompilationUnit
from beanschema.extract import (
    NO_CLASS_WARNING,
    ClassRecord,
    clean_comment,
    extract,
    is_required,
)
from beanschema.options import ParseOptions, RequiredFieldStrategy
from beanschema.parser import parse_text
from tests._shared_cases import ADDRESS_SOURCE, USER_SOURCE


def _extract(source: str, options: ParseOptions | None = None) -> ClassRecord:
    parsed = parse_text(source)
    assert parsed.tree is not None
    record = extract(parsed.tree, options)
    assert record is not None
    return record


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/** Primary key */", "Primary key"),
        ("/**\n * First line\n * second line\n * @author someone\n */", "First line second line"),
        ("/**\n * @deprecated\n */", None),
        ("// contact address", "contact address"),
        ("//", None),
        ("/* block text */", "block text"),
        ("/**/", None),
        (None, None),
    ],
)
def test_clean_comment(raw: str | None, expected: str | None) -> None:
    assert clean_comment(raw) == expected


def test_required_annotation_wins_over_optional_comment() -> None:
    assert is_required(["NotBlank"], "optional", "String") is True


def test_required_keywords_in_comment() -> None:
    assert is_required([], "Login name, required", "String") is True
    assert is_required([], "用户名，必填", "String") is True


def test_optional_keyword_beats_primitive_type() -> None:
    assert is_required([], "optional counter", "int") is False
    assert is_required([], "可选", "long") is False


def test_primitive_types_are_required() -> None:
    assert is_required([], None, "int") is True
    assert is_required([], None, "Integer") is False
    assert is_required([], None, "int[]") is False


@pytest.mark.parametrize(
    ("strategy", "expected"),
    [
        (RequiredFieldStrategy.ANNOTATION, False),
        (RequiredFieldStrategy.ALL, True),
        (RequiredFieldStrategy.NONE, False),
    ],
)
def test_fallback_strategy(strategy: RequiredFieldStrategy, expected: bool) -> None:
    assert is_required(["JsonProperty"], "some text", "String", strategy) is expected


def test_extract_address() -> None:
    record = _extract(ADDRESS_SOURCE)

    assert record.class_name == "Address"
    assert record.class_comment is None
    assert [(f.name, f.type_text, f.is_required) for f in record.fields] == [
        ("province", "String", True),
        ("zipCode", "String", False),
    ]


def test_extract_user_fields_and_comments() -> None:
    record = _extract(USER_SOURCE)
    fields = {field.name: field for field in record.fields}

    assert record.class_name == "User"
    assert record.class_comment == "User account"
    assert [annotation.name for annotation in record.annotations] == ["Data"]

    assert fields["id"].comment == "Primary key"
    assert fields["username"].comment == "Login name, required"
    assert fields["email"].comment == "contact address"
    assert fields["age"].comment is None

    required = {name for name, field in fields.items() if field.is_required}
    assert required == {"serialVersionUID", "id", "username", "loginCount"}

    size = fields["username"].annotation("Size")
    assert size is not None
    assert (size.number("min"), size.number("max")) == (2, 50)
    assert fields["username"].annotation("JsonProperty").text("value") == "user_name"
    assert fields["tags"].default_value == "new ArrayList<>()"


def test_comment_after_semicolon_describes_the_next_field() -> None:
    record = _extract("class A {\n  private String a; // 必填\n  private String b;\n}")
    a, b = record.fields

    assert (a.comment, a.is_required) == (None, False)
    assert (b.comment, b.is_required) == ("必填", True)


def test_extract_field_order_follows_source() -> None:
    record = _extract("class A { int c; int a; int b; }")
    assert [field.name for field in record.fields] == ["c", "a", "b"]


def test_exclude_private_fields() -> None:
    source = "class A { private String hidden; public String shown; String packaged; }"
    record = _extract(source, ParseOptions(include_private_fields=False))

    assert [field.name for field in record.fields] == ["shown", "packaged"]
    assert all(not field.is_private for field in record.fields)


def test_extract_accepts_option_mapping() -> None:
    record = _extract("class A { String name; }", {"requiredFieldStrategy": "all"})  # type: ignore[arg-type]
    assert record.fields[0].is_required is True


def test_extract_uses_first_class_only() -> None:
    record = _extract("class First { int a; } class Second { int b; }")
    assert record.class_name == "First"


def test_extract_without_class_warns() -> None:
    warnings: list[str] = []
    assert extract(AstCompilationUnit(classes=()), warnings=warnings) is None
    assert warnings == [NO_CLASS_WARNING]


def test_class_record_to_dict_uses_camel_case() -> None:
    record = _extract("/** Tiny */ class A { @Size(max = 5) private String code = \"x\"; }")

    assert record.to_dict() == {
        "className": "A",
        "classComment": "Tiny",
        "fields": [
            {
                "name": "code",
                "type": "String",
                "isPrivate": True,
                "isRequired": False,
                "annotations": [{"name": "Size", "parameters": {"max": 5}}],
                "defaultValue": '"x"',
            }
        ],
    }
