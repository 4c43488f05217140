"""High-level parse entrypoint over a token stream."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from beanschema.ast import AstCompilationUnit
from beanschema.diagnostics import PARSER_INTERNAL_ERROR, Diagnostic, has_errors
from beanschema.lexer import Token, tokenize
from beanschema.parser.grammar import parse_compilation_unit
from beanschema.parser.parser import Parser

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ParsedCompilationUnit:
    """Tree (absent after any hard error) plus ordered errors and warnings."""

    tree: AstCompilationUnit | None
    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.errors)


def parse(tokens: list[Token], *, source: str | None = None) -> ParsedCompilationUnit:
    """Parse `tokens` into class declarations.

    Never raises: an unexpected internal fault becomes one syntax error at the
    current token. `source`, when given, lets default values keep their exact text.
    """
    parser = Parser(tokens, source=source)
    tree: AstCompilationUnit | None = None
    try:
        parsed = parse_compilation_unit(parser)
        if parsed.is_present() and not parser.has_errors():
            tree = parsed.unwrap()
    except Exception as exc:
        logger.debug("Parser fault at token %s", parser.current_token, exc_info=True)
        parser.error(PARSER_INTERNAL_ERROR, message=str(exc) or PARSER_INTERNAL_ERROR.message)
        tree = None

    errors, warnings = parser.finish()
    logger.debug(
        "Parsed %d class(es) with %d error(s) and %d warning(s)",
        len(tree.classes) if tree is not None else 0,
        len(errors),
        len(warnings),
    )
    return ParsedCompilationUnit(tree=tree, errors=errors, warnings=warnings)


def parse_text(source: str) -> ParsedCompilationUnit:
    return parse(tokenize(source), source=source)
