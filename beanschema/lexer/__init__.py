"""Lexer."""

from beanschema.lexer.lexer import Lexer, dump_tokens, format_token, tokenize
from beanschema.lexer.tokens import (
    COMMENT_KINDS,
    KEYWORDS,
    MODIFIER_KINDS,
    PRIMITIVE_TYPE_KINDS,
    VISIBILITY_KINDS,
    Token,
    TokenKind,
)

__all__ = [
    "COMMENT_KINDS",
    "KEYWORDS",
    "MODIFIER_KINDS",
    "PRIMITIVE_TYPE_KINDS",
    "VISIBILITY_KINDS",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "format_token",
    "tokenize",
]
