"""Typed AST for class declarations."""

from beanschema.ast.model import (
    AstAnnotation,
    AstAnnotationValue,
    AstBoolean,
    AstClassDeclaration,
    AstCompilationUnit,
    AstFieldDeclaration,
    AstIdentifier,
    AstMethodDeclaration,
    AstNode,
    AstNumber,
    AstParameter,
    AstString,
)
from beanschema.ast.scalar import parse_number, unquote_string, value_number, value_text
from beanschema.ast.walk import children, find_first_class, walk

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
    "children",
    "find_first_class",
    "parse_number",
    "unquote_string",
    "value_number",
    "value_text",
    "walk",
]
