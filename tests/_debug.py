"""Shared debug printers for lexer/parser/extract tests."""

from __future__ import annotations

import os

from beanschema.ast import AstCompilationUnit
from beanschema.diagnostics import Diagnostic, format_diagnostic
from beanschema.lexer import Token, format_token

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_AST = os.getenv("PRINT_AST", "0").lower() in {"1", "true", "yes", "on"}
PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in {
    "1",
    "true",
    "yes",
    "on",
}


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_tokens(test_name: str, source: str, tokens: list[Token]) -> None:
    if not PRINT_TOKENS:
        return
    debug_print_source(test_name, source)
    print(f"\n===== {test_name} TOKENS =====")
    for index, tok in enumerate(tokens):
        print(format_token(index, tok))


def debug_dump_ast(test_name: str, ast: AstCompilationUnit | None, source: str | None = None) -> None:
    if not PRINT_AST:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"\n===== {test_name} AST =====")
    print(_dump_ast(ast))


def debug_dump_diagnostics(
    test_name: str,
    diagnostics: list[Diagnostic],
    warnings: list[str] | None = None,
    source: str | None = None,
) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"===== {test_name} DIAGNOSTICS =====")
    if not diagnostics and not warnings:
        print("(none)")
        return
    for diagnostic in diagnostics:
        print(format_diagnostic(diagnostic))
    for warning in warnings or []:
        print(f"warning: {warning}")


def _dump_ast(ast: AstCompilationUnit | None) -> str:
    if ast is None:
        return "(no tree)"
    lines: list[str] = ["AstCompilationUnit"]
    for class_node in ast.classes:
        lines.append(f"  AstClassDeclaration name={class_node.name!r} modifiers={class_node.modifiers}")
        for annotation in class_node.annotations:
            lines.append(f"    @{annotation.name} {annotation.parameters}")
        for field_node in class_node.fields:
            lines.append(
                f"    AstFieldDeclaration {field_node.type_text} {field_node.name} "
                f"default={field_node.default_value!r} comment={field_node.comment!r}"
            )
            for annotation in field_node.annotations:
                lines.append(f"      @{annotation.name} {annotation.parameters}")
        for method in class_node.methods:
            params = ", ".join(f"{p.type_text} {p.name}" for p in method.parameters)
            lines.append(f"    AstMethodDeclaration {method.return_type} {method.name}({params})")
    return "\n".join(lines)
