"""AST data model for class declarations."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class AstString:
    """String literal argument with quotes stripped and escapes decoded."""

    value: str


@dataclass(frozen=True, slots=True)
class AstNumber:
    value: int | float


@dataclass(frozen=True, slots=True)
class AstBoolean:
    value: bool


@dataclass(frozen=True, slots=True)
class AstIdentifier:
    """Identifier argument, e.g. `Foo`, `Foo.BAR` or `Foo.class` kept as one text."""

    text: str


type AstAnnotationValue = AstString | AstNumber | AstBoolean | AstIdentifier


@dataclass(frozen=True, slots=True)
class AstAnnotation:
    """`@Name(...)`; a single positional argument is stored under `value`."""

    name: str
    parameters: dict[str, AstAnnotationValue] = field(default_factory=dict, hash=False)
    line: int = 0
    column: int = 0


@dataclass(frozen=True, slots=True)
class AstParameter:
    name: str
    type_text: str
    annotations: tuple[AstAnnotation, ...] = ()


@dataclass(frozen=True, slots=True)
class AstFieldDeclaration:
    """Field member.

    `comment` is the raw leading comment token text; `trailing_comment` is a `//`
    comment on the same line as the terminating semicolon.
    """

    name: str
    type_text: str
    modifiers: tuple[str, ...] = ()
    annotations: tuple[AstAnnotation, ...] = ()
    comment: str | None = None
    trailing_comment: str | None = None
    default_value: str | None = None
    line: int = 0
    column: int = 0

    @property
    def is_private(self) -> bool:
        return "private" in self.modifiers

    @property
    def is_static(self) -> bool:
        return "static" in self.modifiers


@dataclass(frozen=True, slots=True)
class AstMethodDeclaration:
    """Method or constructor signature; constructors have no return type."""

    name: str
    return_type: str | None
    modifiers: tuple[str, ...] = ()
    annotations: tuple[AstAnnotation, ...] = ()
    parameters: tuple[AstParameter, ...] = ()
    comment: str | None = None
    line: int = 0
    column: int = 0

    @property
    def is_constructor(self) -> bool:
        return self.return_type is None


@dataclass(frozen=True, slots=True)
class AstClassDeclaration:
    name: str
    modifiers: tuple[str, ...] = ()
    annotations: tuple[AstAnnotation, ...] = ()
    fields: tuple[AstFieldDeclaration, ...] = ()
    methods: tuple[AstMethodDeclaration, ...] = ()
    comment: str | None = None
    line: int = 0
    column: int = 0


@dataclass(frozen=True, slots=True)
class AstCompilationUnit:
    classes: tuple[AstClassDeclaration, ...]


type AstNode = (
    AstCompilationUnit
    | AstClassDeclaration
    | AstFieldDeclaration
    | AstMethodDeclaration
    | AstParameter
    | AstAnnotation
)


__all__ = [
    "AstAnnotation",
    "AstAnnotationValue",
    "AstBoolean",
    "AstClassDeclaration",
    "AstCompilationUnit",
    "AstFieldDeclaration",
    "AstIdentifier",
    "AstMethodDeclaration",
    "AstNode",
    "AstNumber",
    "AstParameter",
    "AstString",
]
