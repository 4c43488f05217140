"""Pre-order traversal over AST nodes."""

from __future__ import annotations

from collections.abc import Iterator

from beanschema.ast.model import (
    AstAnnotation,
    AstClassDeclaration,
    AstCompilationUnit,
    AstFieldDeclaration,
    AstMethodDeclaration,
    AstNode,
    AstParameter,
)


def children(node: AstNode) -> tuple[AstNode, ...]:
    match node:
        case AstCompilationUnit(classes=classes):
            return classes
        case AstClassDeclaration():
            return (*node.annotations, *node.fields, *node.methods)
        case AstFieldDeclaration(annotations=annotations):
            return annotations
        case AstMethodDeclaration():
            return (*node.annotations, *node.parameters)
        case AstParameter(annotations=annotations):
            return annotations
        case AstAnnotation():
            return ()


def walk(node: AstNode) -> Iterator[AstNode]:
    """Yield `node` and its descendants depth-first, parents before children."""
    stack: list[AstNode] = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(children(current)))


def find_first_class(node: AstNode) -> AstClassDeclaration | None:
    for current in walk(node):
        if isinstance(current, AstClassDeclaration):
            return current
    return None


__all__ = ["children", "find_first_class", "walk"]
