"""Skip-and-continue recovery primitives.

Every routine here consumes at least one token per iteration and stops at EOF, so
unbalanced or truncated input cannot stall the parser.
"""

from dataclasses import dataclass
from enum import StrEnum

from beanschema.lexer import TokenKind
from beanschema.parser.parser import Parser

_OPEN_TO_CLOSE: dict[TokenKind, TokenKind] = {
    TokenKind.LBRACE: TokenKind.RBRACE,
    TokenKind.LPAREN: TokenKind.RPAREN,
    TokenKind.LBRACKET: TokenKind.RBRACKET,
    TokenKind.LESS_THAN: TokenKind.GREATER_THAN,
}


class RecoveryError(StrEnum):
    EOF = "eof"
    ALREADY_RECOVERED = "already_recovered"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class ParseRecoveryTokenSet:
    """Scan forward to `target`, giving up at any token in `stop_set`.

    On success the cursor sits on `target` (not consumed).
    """

    target: TokenKind
    stop_set: frozenset[TokenKind]

    def recover(self, parser: Parser) -> RecoveryError | None:
        if parser.at(self.target):
            return RecoveryError.ALREADY_RECOVERED
        while not parser.at_eof():
            if parser.at(self.target):
                return None
            if parser.at_set(self.stop_set):
                return RecoveryError.NOT_FOUND
            parser.bump()
        return RecoveryError.EOF


def skip_balanced(parser: Parser) -> None:
    """Consume a delimited group starting at the current opening token.

    Only the opening token's own kind is counted; stops at EOF when unbalanced.
    """
    open_kind = parser.current
    close_kind = _OPEN_TO_CLOSE.get(open_kind)
    if close_kind is None:
        parser.bump()
        return

    depth = 0
    while not parser.at_eof():
        if parser.at(open_kind):
            depth += 1
        elif parser.at(close_kind):
            depth -= 1
        parser.bump()
        if depth == 0:
            return


def skip_until(parser: Parser, kinds: frozenset[TokenKind]) -> None:
    while not parser.at_eof() and not parser.at_set(kinds):
        parser.bump()


def skip_to_next_member(parser: Parser) -> None:
    """Skip a malformed member.

    Stops after a `;` at depth 0, before a `}` at depth 0, right after a balanced
    `{...}` block, or at EOF.
    """
    while not parser.at_eof():
        if parser.at(TokenKind.SEMICOLON):
            parser.bump()
            return
        if parser.at(TokenKind.RBRACE):
            return
        if parser.at(TokenKind.LBRACE):
            skip_balanced(parser)
            return
        parser.bump()


def skip_type_declaration(parser: Parser) -> None:
    """Skip an interface/enum/nested declaration header and its body."""
    while not parser.at_eof():
        if parser.at(TokenKind.LBRACE):
            skip_balanced(parser)
            return
        if parser.at(TokenKind.SEMICOLON):
            parser.bump()
            return
        if parser.at(TokenKind.RBRACE):
            return
        parser.bump()


__all__ = [
    "ParseRecoveryTokenSet",
    "RecoveryError",
    "skip_balanced",
    "skip_to_next_member",
    "skip_type_declaration",
    "skip_until",
]
