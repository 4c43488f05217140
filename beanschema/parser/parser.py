"""Parser core: cursor, checkpoints and diagnostic sinks."""

from dataclasses import dataclass

from beanschema.diagnostics import Diagnostic, DiagnosticKind, DiagnosticSpec
from beanschema.lexer import Token, TokenKind
from beanschema.parser.token_source import TokenCursor, TokenCursorCheckpoint


@dataclass(frozen=True, slots=True)
class ParserCheckpoint:
    cursor_checkpoint: TokenCursorCheckpoint
    errors_len: int
    warnings_len: int


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: int | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            token = parser.current_token
            raise RuntimeError(f"Parser stopped making progress at {token.kind.name} {token.line}:{token.column}")


class Parser:
    """Recursive-descent parser state.

    Hard errors are collected as `Diagnostic`s; member-level problems are plain
    warning strings.
    """

    def __init__(self, tokens: list[Token], source: str | None = None) -> None:
        self._cursor = TokenCursor(tokens)
        self._source = source
        self._errors: list[Diagnostic] = []
        self._warnings: list[str] = []

    @property
    def cursor(self) -> TokenCursor:
        return self._cursor

    @property
    def errors(self) -> list[Diagnostic]:
        return self._errors

    @property
    def warnings(self) -> list[str]:
        return self._warnings

    @property
    def current(self) -> TokenKind:
        return self._cursor.current

    @property
    def current_token(self) -> Token:
        return self._cursor.current_token

    @property
    def position(self) -> int:
        return self._cursor.index

    @property
    def source_text(self) -> str | None:
        return self._source

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current in kinds

    def at_eof(self) -> bool:
        return self.current == TokenKind.EOF

    def nth(self, n: int) -> TokenKind:
        return self._cursor.nth(n)

    def checkpoint(self) -> ParserCheckpoint:
        return ParserCheckpoint(
            cursor_checkpoint=self._cursor.checkpoint,
            errors_len=len(self._errors),
            warnings_len=len(self._warnings),
        )

    def rewind(self, checkpoint: ParserCheckpoint) -> None:
        self._cursor.rewind(checkpoint.cursor_checkpoint)
        del self._errors[checkpoint.errors_len :]
        del self._warnings[checkpoint.warnings_len :]

    def bump(self) -> Token:
        return self._cursor.bump()

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.bump()
            return True
        return False

    def expect(self, kind: TokenKind, spec: DiagnosticSpec) -> bool:
        if self.eat(kind):
            return True
        self.error(spec)
        return False

    def preceding_comment(self) -> Token | None:
        return self._cursor.preceding_comment()

    def error(self, spec: DiagnosticSpec, *, message: str | None = None, token: Token | None = None) -> None:
        token = token or self.current_token
        diagnostic = Diagnostic(
            code=spec.code,
            message=message or spec.message,
            line=token.line,
            column=token.column,
            kind=spec.kind,
            range=token.range,
            hint=spec.hint,
            category=spec.category,
        )
        if self._errors:
            previous = self._errors[-1]
            if previous.range.start == diagnostic.range.start and previous.code == diagnostic.code:
                return
        self._errors.append(diagnostic)

    def warning(self, message: str) -> None:
        self._warnings.append(message)

    def has_errors(self) -> bool:
        return any(d.kind != DiagnosticKind.WARNING for d in self._errors)

    def finish(self) -> tuple[list[Diagnostic], list[str]]:
        return self._errors, self._warnings
