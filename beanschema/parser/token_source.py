"""Cursor over the filtered token stream."""

from dataclasses import dataclass

from beanschema.lexer import Token, TokenKind
from beanschema.text import TextRange


@dataclass(frozen=True, slots=True)
class TokenCursorCheckpoint:
    index: int


class TokenCursor:
    """One-token lookahead over a token list that always ends with EOF.

    Whitespace and newlines were already dropped by `tokenize`; comments are still
    present so grammar routines can attach them to declarations.
    """

    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            end = tokens[-1].range.end if tokens else 0
            line = tokens[-1].line if tokens else 1
            column = tokens[-1].column + len(tokens[-1].text) if tokens else 1
            tokens = [*tokens, Token(TokenKind.EOF, "", line, column, TextRange.empty(end))]
        self._tokens = tokens
        self._index = 0

    @property
    def tokens(self) -> list[Token]:
        return self._tokens

    @property
    def index(self) -> int:
        return self._index

    @property
    def current_token(self) -> Token:
        return self._tokens[self._index]

    @property
    def current(self) -> TokenKind:
        return self.current_token.kind

    @property
    def checkpoint(self) -> TokenCursorCheckpoint:
        return TokenCursorCheckpoint(self._index)

    def nth_token(self, n: int) -> Token:
        index = min(self._index + n, len(self._tokens) - 1)
        return self._tokens[index]

    def nth(self, n: int) -> TokenKind:
        return self.nth_token(n).kind

    def bump(self) -> Token:
        token = self.current_token
        if token.kind != TokenKind.EOF:
            self._index += 1
        return token

    def rewind(self, checkpoint: TokenCursorCheckpoint) -> None:
        self._index = checkpoint.index

    def preceding_comment(self) -> Token | None:
        """Nearest comment token directly before the cursor, without consuming it."""
        index = self._index - 1
        while index >= 0:
            token = self._tokens[index]
            if token.kind.is_trivia:
                index -= 1
                continue
            return token if token.is_comment else None
        return None
