"""Recursive-descent parser over the token stream."""

from beanschema.parser.grammar import (
    DeclarationPrelude,
    parse_annotation,
    parse_class_member,
    parse_compilation_unit,
    parse_type,
    parse_type_declaration,
)
from beanschema.parser.parse import ParsedCompilationUnit, parse, parse_text
from beanschema.parser.parse_recovery import (
    ParseRecoveryTokenSet,
    RecoveryError,
    skip_balanced,
    skip_to_next_member,
    skip_type_declaration,
)
from beanschema.parser.parsed_syntax import ParsedSyntax
from beanschema.parser.parser import Parser, ParserCheckpoint, ParserProgress
from beanschema.parser.token_source import TokenCursor, TokenCursorCheckpoint

__all__ = [
    "DeclarationPrelude",
    "ParseRecoveryTokenSet",
    "ParsedCompilationUnit",
    "ParsedSyntax",
    "Parser",
    "ParserCheckpoint",
    "ParserProgress",
    "RecoveryError",
    "TokenCursor",
    "TokenCursorCheckpoint",
    "parse",
    "parse_annotation",
    "parse_class_member",
    "parse_compilation_unit",
    "parse_text",
    "parse_type",
    "parse_type_declaration",
    "skip_balanced",
    "skip_to_next_member",
    "skip_type_declaration",
]
