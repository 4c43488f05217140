"""Lexer."""

import logging

from beanschema.lexer.tokens import KEYWORDS, PUNCTUATION, Token, TokenKind
from beanschema.text import TextRange, slice_text_range

logger = logging.getLogger(__name__)

_NUMBER_SUFFIXES = frozenset("lLfFdD")


class Lexer:
    """Lossless lexer that emits whitespace, newline, comment and significant tokens.

    Characters outside the recognised vocabulary are consumed without producing a
    token, and an unterminated string literal produces no token either. Neither
    case is reported.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._line = 1
        self._column = 1
        self._token_start = 0
        self._token_line = 1
        self._token_column = 1
        self._eof_emitted = False

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token | None:
        """Lex the next token.

        Returns ``None`` when the consumed characters produced no token, and the
        EOF token once the input is exhausted.
        """
        self._token_start = self._position
        self._token_line = self._line
        self._token_column = self._column

        if self.is_eof:
            self._eof_emitted = True
            return self._make_token(TokenKind.EOF)

        kind = self._lex_token()
        if kind is None:
            return None
        return self._make_token(kind)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while not self._eof_emitted:
            token = self.next_token()
            if token is not None:
                tokens.append(token)
        return tokens

    def _lex_token(self) -> TokenKind | None:
        ch = self._current_char()

        if ch == "\n" or ch == "\r":
            self._consume_newline()
            return TokenKind.NEWLINE

        if ch == " " or ch == "\t" or ch == "\f":
            self._consume_whitespaces()
            return TokenKind.WHITESPACE

        if ch == "/":
            next_ch = self._peek_char()
            if next_ch == "/":
                return self._lex_line_comment()
            if next_ch == "*":
                return self._lex_block_comment()
            self._advance(1)
            return None

        if ch == '"':
            return self._lex_string()

        if ch.isdigit() or (ch == "-" and self._peek_char().isdigit()):
            return self._lex_number()

        if _is_identifier_start(ch):
            return self._lex_identifier()

        kind = PUNCTUATION.get(ch)
        self._advance(1)
        return kind

    def _lex_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        self._advance(2)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)
        return TokenKind.LINE_COMMENT

    def _lex_block_comment(self) -> TokenKind:
        # `/**/` is an empty plain block comment, not a doc comment.
        is_doc = self._peek_char(2) == "*" and self._peek_char(3) != "/"
        self._advance(2)
        while not self.is_eof:
            if self._current_char() == "*" and self._peek_char() == "/":
                self._advance(2)
                break
            self._advance(1)
        return TokenKind.DOC_COMMENT if is_doc else TokenKind.BLOCK_COMMENT

    def _lex_string(self) -> TokenKind | None:
        # Consume opening quote
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch == '"':
                self._advance(1)
                return TokenKind.STRING
            if ch == "\\":
                self._advance(1)
                if self.is_eof:
                    break
            self._advance(1)
        return None

    def _lex_number(self) -> TokenKind:
        if self._current_char() == "-":
            self._advance(1)
        saw_dot = False
        while not self.is_eof:
            ch = self._current_char()
            if ch.isdigit():
                self._advance(1)
                continue
            if ch == "." and not saw_dot and self._peek_char().isdigit():
                saw_dot = True
                self._advance(1)
                continue
            break
        if self._current_char() in _NUMBER_SUFFIXES and not _is_identifier_part(self._peek_char()):
            self._advance(1)
        return TokenKind.NUMBER

    def _lex_identifier(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof and _is_identifier_part(self._current_char()):
            self._advance(1)
        text = self._source[self._token_start : self._position]
        return KEYWORDS.get(text, TokenKind.IDENTIFIER)

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch == " " or ch == "\t" or ch == "\f":
                self._advance(1)
                continue
            break

    def _consume_newline(self) -> None:
        if self._current_char() == "\r" and self._peek_char() == "\n":
            self._advance(2)
        else:
            self._advance(1)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        for _ in range(steps):
            if self.is_eof:
                return
            ch = self._source[self._position]
            self._position += 1
            # `\r\n` counts once, on the `\n`.
            if ch == "\n" or (ch == "\r" and self._current_char() != "\n"):
                self._line += 1
                self._column = 1
            else:
                self._column += 1

    def _make_token(self, kind: TokenKind) -> Token:
        token_range = TextRange.new(self._token_start, self._position)
        return Token(
            kind=kind,
            text=slice_text_range(self._source, token_range),
            line=self._token_line,
            column=self._token_column,
            range=token_range,
        )


def _is_identifier_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_" or ch == "$"


def _is_identifier_part(ch: str) -> bool:
    return ch.isalnum() or ch == "_" or ch == "$"


def tokenize(source: str) -> list[Token]:
    """Lex `source` into the parser-facing stream.

    Whitespace and newlines are dropped; comments are kept so declarations can pick
    up their documentation. The last token is always EOF.
    """
    tokens = [token for token in Lexer(source).lex() if not token.kind.is_trivia]
    logger.debug("Lexed %d tokens from %d characters", len(tokens), len(source))
    return tokens


def format_token(index: int, token: Token) -> str:
    return f"{index:03d} {token.kind.name:<14} {token.line}:{token.column} range={token.range.as_tuple()} text={token.text!r}"


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with kind, position, range, and text for debugging."""
    for index, token in enumerate(tokens):
        print(format_token(index, token))
