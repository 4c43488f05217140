import pytest

from beanschema.ast import (
    AstAnnotation,
    AstBoolean,
    AstClassDeclaration,
    AstCompilationUnit,
    AstFieldDeclaration,
    AstIdentifier,
    AstMethodDeclaration,
    AstNumber,
    AstParameter,
    AstString,
    children,
    find_first_class,
    parse_number,
    unquote_string,
    value_number,
    value_text,
    walk,
)
from beanschema.parser import parse_text
from tests._debug import debug_dump_ast
from tests._shared_cases import USER_SOURCE


def test_walk_is_pre_order_in_source_order() -> None:
    source = "class A { @NotNull private String name; public void run(@Valid Task task) {} }"
    tree = parse_text(source).tree
    debug_dump_ast("walk_pre_order", tree, source)
    assert tree is not None

    kinds = [type(node).__name__ for node in walk(tree)]
    assert kinds == [
        "AstCompilationUnit",
        "AstClassDeclaration",
        "AstFieldDeclaration",
        "AstAnnotation",
        "AstMethodDeclaration",
        "AstParameter",
        "AstAnnotation",
    ]


def test_children_of_class_lists_annotations_fields_then_methods() -> None:
    annotation = AstAnnotation(name="Data")
    field = AstFieldDeclaration(name="id", type_text="Long")
    method = AstMethodDeclaration(name="getId", return_type="Long")
    class_node = AstClassDeclaration(name="A", annotations=(annotation,), fields=(field,), methods=(method,))

    assert children(class_node) == (annotation, field, method)
    assert children(annotation) == ()
    assert children(AstParameter(name="x", type_text="int")) == ()


def test_find_first_class() -> None:
    tree = parse_text(USER_SOURCE).tree
    assert tree is not None

    first = find_first_class(tree)
    assert first is not None
    assert first.name == "User"
    assert find_first_class(AstCompilationUnit(classes=())) is None


def test_ast_nodes_are_frozen() -> None:
    field = AstFieldDeclaration(name="id", type_text="Long", modifiers=("private",))
    assert field.is_private
    assert not field.is_static
    with pytest.raises(AttributeError):
        field.name = "other"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", 0),
        ("150", 150),
        ("-5", -5),
        ("10L", 10),
        ("1.5f", 1.5),
        ("2.0d", 2.0),
        ("0.01", 0.01),
        ("abc", None),
        ("", None),
        ("L", None),
    ],
)
def test_parse_number(text: str, expected: int | float | None) -> None:
    assert parse_number(text) == expected


def test_parse_number_keeps_integers_as_int() -> None:
    assert isinstance(parse_number("42"), int)
    assert isinstance(parse_number("4.2"), float)


def test_unquote_string_decodes_escapes() -> None:
    assert unquote_string('"plain"') == "plain"
    assert unquote_string(r'"say \"hi\""') == 'say "hi"'
    assert unquote_string(r'"a\nb\\c"') == "a\nb\\c"
    assert unquote_string('""') == ""


def test_value_text_and_number_views() -> None:
    assert value_text(AstString("x")) == "x"
    assert value_text(AstNumber(3)) == "3"
    assert value_text(AstBoolean(False)) == "false"
    assert value_text(AstIdentifier("Foo.class")) == "Foo.class"

    assert value_number(AstNumber(7)) == 7
    assert value_number(AstString("0.01")) == 0.01
    assert value_number(AstString("abc")) is None
    assert value_number(AstBoolean(True)) is None
    assert value_number(AstIdentifier("MAX")) is None
