"""Lexer tokens."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Final

from beanschema.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia (emitted by `Lexer.lex`, filtered by `tokenize`)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11

    # -------------------------
    # Comments (kept in the public stream)
    # -------------------------
    LINE_COMMENT = 15  # // ...
    BLOCK_COMMENT = 16  # /* ... */
    DOC_COMMENT = 17  # /** ... */

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21
    NUMBER = 22

    # -------------------------
    # Keywords
    # -------------------------
    PUBLIC = 30
    PRIVATE = 31
    PROTECTED = 32
    CLASS = 33
    INTERFACE = 34
    ENUM = 35
    EXTENDS = 36
    IMPLEMENTS = 37
    STATIC = 38
    FINAL = 39

    INT = 40
    LONG = 41
    FLOAT = 42
    DOUBLE = 43
    BOOLEAN = 44
    CHAR = 45
    BYTE = 46
    SHORT = 47

    TRUE = 50
    FALSE = 51

    # -------------------------
    # Punctuation
    # -------------------------
    SEMICOLON = 60  # ;
    COMMA = 61  # ,
    DOT = 62  # .
    LBRACE = 63  # {
    RBRACE = 64  # }
    LPAREN = 65  # (
    RPAREN = 66  # )
    LBRACKET = 67  # [
    RBRACKET = 68  # ]
    LESS_THAN = 69  # <
    GREATER_THAN = 70  # >
    EQUAL = 71  # =
    AT = 72  # @

    @property
    def is_trivia(self) -> bool:
        return self in (TokenKind.WHITESPACE, TokenKind.NEWLINE)

    @property
    def is_comment(self) -> bool:
        return self in COMMENT_KINDS


COMMENT_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT, TokenKind.DOC_COMMENT}
)

VISIBILITY_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.PUBLIC, TokenKind.PRIVATE, TokenKind.PROTECTED}
)

MODIFIER_KINDS: Final[frozenset[TokenKind]] = VISIBILITY_KINDS | {TokenKind.STATIC, TokenKind.FINAL}

PRIMITIVE_TYPE_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.INT,
        TokenKind.LONG,
        TokenKind.FLOAT,
        TokenKind.DOUBLE,
        TokenKind.BOOLEAN,
        TokenKind.CHAR,
        TokenKind.BYTE,
        TokenKind.SHORT,
    }
)

KEYWORDS: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        "public": TokenKind.PUBLIC,
        "private": TokenKind.PRIVATE,
        "protected": TokenKind.PROTECTED,
        "class": TokenKind.CLASS,
        "interface": TokenKind.INTERFACE,
        "enum": TokenKind.ENUM,
        "extends": TokenKind.EXTENDS,
        "implements": TokenKind.IMPLEMENTS,
        "static": TokenKind.STATIC,
        "final": TokenKind.FINAL,
        "int": TokenKind.INT,
        "long": TokenKind.LONG,
        "float": TokenKind.FLOAT,
        "double": TokenKind.DOUBLE,
        "boolean": TokenKind.BOOLEAN,
        "char": TokenKind.CHAR,
        "byte": TokenKind.BYTE,
        "short": TokenKind.SHORT,
        "true": TokenKind.TRUE,
        "false": TokenKind.FALSE,
    }
)
"""Reserved words recognised by the lexer; every other word is an IDENTIFIER."""

PUNCTUATION: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        ";": TokenKind.SEMICOLON,
        ",": TokenKind.COMMA,
        ".": TokenKind.DOT,
        "{": TokenKind.LBRACE,
        "}": TokenKind.RBRACE,
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        "[": TokenKind.LBRACKET,
        "]": TokenKind.RBRACKET,
        "<": TokenKind.LESS_THAN,
        ">": TokenKind.GREATER_THAN,
        "=": TokenKind.EQUAL,
        "@": TokenKind.AT,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token with its 1-based start position."""

    kind: TokenKind
    text: str
    line: int
    column: int
    range: TextRange

    @property
    def is_comment(self) -> bool:
        return self.kind.is_comment
