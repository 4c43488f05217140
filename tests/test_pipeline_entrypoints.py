import pytest

from beanschema.options import ParseOptions, RequiredFieldStrategy
from beanschema.pipeline import parse, run, validate
from tests._shared_cases import ADDRESS_SOURCE, USER_SOURCE


def test_parse_returns_class_record_and_options() -> None:
    result = parse(ADDRESS_SOURCE, {"requiredFieldStrategy": "all"})

    assert result.class_record is not None
    assert result.class_record.class_name == "Address"
    assert result.options.required_field_strategy == RequiredFieldStrategy.ALL
    assert result.errors == []
    assert result.has_errors is False


def test_parse_never_raises_on_malformed_source() -> None:
    result = parse("public class { private String name; }")

    assert result.class_record is None
    assert result.has_errors
    assert result.to_dict() == {
        "classRecord": None,
        "errors": [{"message": "Expected class name", "line": 1, "column": 14, "type": "syntax"}],
        "warnings": [],
    }


def test_parse_without_class_is_a_warning() -> None:
    result = parse("// nothing to see\n")

    assert result.class_record is None
    assert result.errors == []
    assert result.warnings == ["No class declaration found in the code"]


def test_run_converts_first_class() -> None:
    result = run(USER_SOURCE)

    assert result.succeeded
    assert result.schema is not None
    assert result.schema.description == "User account"
    assert result.errors == []


def test_run_reuses_provided_parse_result() -> None:
    parsed = parse("class A { private String hidden; public String shown; }", ParseOptions(include_private_fields=False))

    result = run("ignored", parsed=parsed)

    assert result.parse is parsed
    assert result.schema is not None
    assert list(result.schema.properties) == ["shown"]


def test_run_rejects_parse_with_options() -> None:
    parsed = parse(ADDRESS_SOURCE)
    with pytest.raises(ValueError, match="either parsed or options"):
        run(ADDRESS_SOURCE, ParseOptions(), parsed=parsed)


def test_run_keeps_warnings_when_members_are_skipped() -> None:
    result = run("class A { private 1 bad; private String good; }")

    assert result.schema is not None
    assert list(result.schema.properties) == ["good"]
    assert len(result.warnings) == 1


def test_run_without_schema_on_errors() -> None:
    result = run("public class A { @Size(min = 1 private String s; }")

    assert not result.succeeded
    assert result.schema is None
    assert result.errors[0].code == "PARSER_UNCLOSED_ANNOTATION_ARGUMENTS"


def test_validate_reports_class_and_field_count() -> None:
    report = validate(USER_SOURCE)

    assert report.valid is True
    assert report.class_name == "User"
    assert report.field_count == 14
    assert report.to_dict()["fieldCount"] == 14


def test_validate_invalid_source() -> None:
    report = validate("public class Broken { private String name")

    assert report.valid is False
    assert report.class_name is None
    assert report.warnings == ["Expected ';' after field 'name', skipping member"]
    assert report.to_dict()["errors"] == [
        {"message": 'Expected "}" after class body', "line": 1, "column": 42, "type": "syntax"}
    ]
