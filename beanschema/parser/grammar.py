"""Grammar routines for class, member and annotation declarations."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from beanschema.ast import (
    AstAnnotation,
    AstAnnotationValue,
    AstBoolean,
    AstClassDeclaration,
    AstCompilationUnit,
    AstFieldDeclaration,
    AstIdentifier,
    AstMethodDeclaration,
    AstNumber,
    AstParameter,
    AstString,
    parse_number,
    unquote_string,
)
from beanschema.diagnostics.codes import (
    PARSER_EXPECTED_CLASS_BODY,
    PARSER_EXPECTED_CLASS_KEYWORD,
    PARSER_EXPECTED_CLASS_NAME,
    PARSER_UNCLOSED_ANNOTATION_ARGUMENTS,
    PARSER_UNCLOSED_CLASS_BODY,
)
from beanschema.lexer import MODIFIER_KINDS, PRIMITIVE_TYPE_KINDS, VISIBILITY_KINDS, Token, TokenKind
from beanschema.parser.parse_recovery import (
    ParseRecoveryTokenSet,
    skip_balanced,
    skip_to_next_member,
    skip_type_declaration,
    skip_until,
)
from beanschema.parser.parsed_syntax import ParsedSyntax
from beanschema.parser.parser import Parser, ParserCheckpoint, ParserProgress

logger = logging.getLogger(__name__)

DECLARATION_START_KINDS: frozenset[TokenKind] = VISIBILITY_KINDS | {
    TokenKind.CLASS,
    TokenKind.INTERFACE,
    TokenKind.ENUM,
    TokenKind.AT,
}

TYPE_START_KINDS: frozenset[TokenKind] = PRIMITIVE_TYPE_KINDS | {TokenKind.IDENTIFIER}

# Java modifiers the lexer does not reserve.
CONTEXTUAL_MODIFIERS: frozenset[str] = frozenset(
    {"abstract", "transient", "volatile", "synchronized", "native", "strictfp", "default", "sealed"}
)

_WORD_KINDS: frozenset[TokenKind] = TYPE_START_KINDS | MODIFIER_KINDS | {
    TokenKind.NUMBER,
    TokenKind.EXTENDS,
    TokenKind.IMPLEMENTS,
    TokenKind.CLASS,
    TokenKind.TRUE,
    TokenKind.FALSE,
}

_ANNOTATION_ARGUMENTS_RECOVERY = ParseRecoveryTokenSet(
    target=TokenKind.RPAREN,
    stop_set=frozenset({TokenKind.SEMICOLON, TokenKind.LBRACE, TokenKind.RBRACE}),
)

_METHOD_BODY_START: frozenset[TokenKind] = frozenset({TokenKind.LBRACE, TokenKind.SEMICOLON, TokenKind.RBRACE})

_TYPE_ARGUMENTS_STOP: frozenset[TokenKind] = _METHOD_BODY_START

type AstMember = AstFieldDeclaration | AstMethodDeclaration


@dataclass(frozen=True, slots=True)
class DeclarationPrelude:
    """Comments, annotations and modifiers in front of a declaration."""

    comment: Token | None
    annotations: tuple[AstAnnotation, ...]
    modifiers: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.annotations and not self.modifiers


# -------------------------
# Compilation unit / class
# -------------------------


def parse_compilation_unit(parser: Parser) -> ParsedSyntax[AstCompilationUnit]:
    classes: list[AstClassDeclaration] = []
    progress = ParserProgress()

    while True:
        # Package, imports and anything else before a declaration are not modelled.
        skip_until(parser, DECLARATION_START_KINDS)
        if parser.at_eof():
            break
        progress.assert_progressing(parser)

        parsed = parse_type_declaration(parser)
        if parsed.is_absent():
            return ParsedSyntax.absent()
        if parsed.value is not None:
            classes.append(parsed.value)

    return ParsedSyntax.present(AstCompilationUnit(classes=tuple(classes)))


def parse_type_declaration(parser: Parser) -> ParsedSyntax[AstClassDeclaration]:
    """Parse one top-level declaration.

    Present with `None` when an interface, enum or annotation type was skipped;
    absent after a hard error.
    """
    comment = parser.preceding_comment()
    start_token = parser.current_token

    prelude = parse_declaration_prelude(parser)
    if prelude.is_absent():
        if not parser.has_errors():
            parser.error(PARSER_EXPECTED_CLASS_KEYWORD)
        return ParsedSyntax.absent()
    head = prelude.unwrap()

    skipped_kind = _skipped_declaration_kind(parser)
    if skipped_kind is not None:
        logger.debug("Skipping %s declaration at %d:%d", skipped_kind, start_token.line, start_token.column)
        skip_type_declaration(parser)
        return ParsedSyntax.present(None)

    class_token = parser.current_token
    if not parser.expect(TokenKind.CLASS, PARSER_EXPECTED_CLASS_KEYWORD):
        return ParsedSyntax.absent()

    if not parser.at(TokenKind.IDENTIFIER):
        parser.error(PARSER_EXPECTED_CLASS_NAME)
        return ParsedSyntax.absent()
    name_token = parser.bump()

    # Type parameters, `extends` and `implements` clauses are discarded.
    skip_until(parser, frozenset({TokenKind.LBRACE}))
    if not parser.expect(TokenKind.LBRACE, PARSER_EXPECTED_CLASS_BODY):
        return ParsedSyntax.absent()

    body = parse_class_body(parser)
    if body.is_absent():
        return ParsedSyntax.absent()
    fields, methods = body.unwrap()

    if not parser.expect(TokenKind.RBRACE, PARSER_UNCLOSED_CLASS_BODY):
        return ParsedSyntax.absent()

    if comment is None:
        comment = head.comment

    return ParsedSyntax.present(
        AstClassDeclaration(
            name=name_token.text,
            modifiers=head.modifiers,
            annotations=head.annotations,
            fields=tuple(fields),
            methods=tuple(methods),
            comment=comment.text if comment is not None else None,
            line=class_token.line,
            column=class_token.column,
        )
    )


def parse_class_body(
    parser: Parser,
) -> ParsedSyntax[tuple[list[AstFieldDeclaration], list[AstMethodDeclaration]]]:
    fields: list[AstFieldDeclaration] = []
    methods: list[AstMethodDeclaration] = []
    progress = ParserProgress()

    while not parser.at(TokenKind.RBRACE) and not parser.at_eof():
        progress.assert_progressing(parser)
        parsed = parse_class_member(parser)
        if parsed.is_absent():
            return ParsedSyntax.absent()
        for member in parsed.unwrap():
            if isinstance(member, AstFieldDeclaration):
                fields.append(member)
            else:
                methods.append(member)

    return ParsedSyntax.present((fields, methods))


# -------------------------
# Members
# -------------------------


def parse_class_member(parser: Parser) -> ParsedSyntax[tuple[AstMember, ...]]:
    """Parse one class body member.

    Malformed members are reported as warnings and skipped, yielding an empty
    tuple. Absent is returned only for hard errors.
    """
    if parser.eat(TokenKind.SEMICOLON):
        return ParsedSyntax.present(())

    if parser.at(TokenKind.LBRACE):
        # Instance initializer block.
        skip_balanced(parser)
        return ParsedSyntax.present(())

    checkpoint = parser.checkpoint()
    start_token = parser.current_token

    prelude = parse_declaration_prelude(parser)
    if prelude.is_absent():
        if len(parser.errors) > checkpoint.errors_len:
            return ParsedSyntax.absent()
        return _skip_member(
            parser,
            checkpoint,
            f"Failed to parse annotation at line {start_token.line}, skipping member",
        )
    head = prelude.unwrap()

    if head.is_empty and (parser.at(TokenKind.RBRACE) or parser.at_eof()):
        # Dangling comment before the closing brace.
        return ParsedSyntax.present(())

    if parser.at(TokenKind.LBRACE):
        # `static { ... }`
        skip_balanced(parser)
        return ParsedSyntax.present(())

    skipped_kind = _skipped_declaration_kind(parser, nested=True)
    if skipped_kind is not None:
        parser.warning(f"Skipped nested {skipped_kind} declaration")
        skip_type_declaration(parser)
        return ParsedSyntax.present(())

    if parser.at(TokenKind.LESS_THAN):
        # Generic method type parameters, e.g. `public <T> T convert(...)`.
        skip_balanced(parser)

    if parser.at(TokenKind.IDENTIFIER) and parser.nth(1) == TokenKind.LPAREN:
        name_token = parser.bump()
        return _parse_method_rest(parser, checkpoint, head, name_token, return_type=None)

    type_token = parser.current_token
    parsed_type = parse_type(parser)
    if parsed_type.is_absent():
        return _skip_member(
            parser,
            checkpoint,
            f"Failed to parse type at line {type_token.line}:{type_token.column}, skipping member",
        )
    type_text = parsed_type.unwrap()

    if not parser.at(TokenKind.IDENTIFIER):
        got = parser.current_token.text if not parser.at_eof() else "end of input"
        return _skip_member(
            parser,
            checkpoint,
            f"Expected identifier after type '{type_text}', got '{got}', skipping member",
        )
    name_token = parser.bump()

    if parser.at(TokenKind.LPAREN):
        return _parse_method_rest(parser, checkpoint, head, name_token, return_type=type_text)

    return _parse_field_rest(parser, checkpoint, head, type_text, name_token)


def _parse_field_rest(
    parser: Parser,
    checkpoint: ParserCheckpoint,
    head: DeclarationPrelude,
    type_text: str,
    name_token: Token,
) -> ParsedSyntax[tuple[AstMember, ...]]:
    declarators: list[tuple[Token, str, str | None]] = []

    while True:
        declarator_type = type_text
        # C-style array declarator: `int values[];`
        while parser.at(TokenKind.LBRACKET) and parser.nth(1) == TokenKind.RBRACKET:
            parser.bump()
            parser.bump()
            declarator_type += "[]"

        default_value: str | None = None
        if parser.eat(TokenKind.EQUAL):
            parsed_default = parse_default_value(parser)
            if parsed_default.is_absent():
                return _skip_member(
                    parser,
                    checkpoint,
                    f"Expected value after '=' for field '{name_token.text}', skipping member",
                )
            default_value = parsed_default.unwrap()

        declarators.append((name_token, declarator_type, default_value))

        if parser.at(TokenKind.COMMA) and parser.nth(1) == TokenKind.IDENTIFIER:
            parser.bump()
            name_token = parser.bump()
            continue
        break

    # A `//` comment after the `;` is left for the next member as its leading comment.
    trailing_comment: str | None = None
    if parser.at(TokenKind.LINE_COMMENT) and parser.nth(1) == TokenKind.SEMICOLON:
        trailing_comment = parser.bump().text

    if not parser.at(TokenKind.SEMICOLON):
        return _skip_member(
            parser,
            checkpoint,
            f"Expected ';' after field '{name_token.text}', skipping member",
        )
    parser.bump()

    comment = head.comment.text if head.comment is not None else None
    return ParsedSyntax.present(
        tuple(
            AstFieldDeclaration(
                name=token.text,
                type_text=declarator_type,
                modifiers=head.modifiers,
                annotations=head.annotations,
                comment=comment,
                trailing_comment=trailing_comment,
                default_value=default_value,
                line=token.line,
                column=token.column,
            )
            for token, declarator_type, default_value in declarators
        )
    )


def _parse_method_rest(
    parser: Parser,
    checkpoint: ParserCheckpoint,
    head: DeclarationPrelude,
    name_token: Token,
    *,
    return_type: str | None,
) -> ParsedSyntax[tuple[AstMember, ...]]:
    name = name_token.text
    parser.bump()  # (

    parameters: list[AstParameter] = []
    if not parser.at(TokenKind.RPAREN):
        while True:
            parsed_parameter = parse_parameter(parser)
            if parsed_parameter.is_absent():
                return _skip_member(
                    parser,
                    checkpoint,
                    f"Failed to parse parameters of method '{name}', skipping member",
                )
            parameters.append(parsed_parameter.unwrap())
            if not parser.eat(TokenKind.COMMA):
                break

    if not parser.eat(TokenKind.RPAREN):
        return _skip_member(
            parser,
            checkpoint,
            f"Expected ')' after parameters of method '{name}', skipping member",
        )

    # `throws` clauses and array return suffixes are not modelled.
    skip_until(parser, _METHOD_BODY_START)
    if parser.at(TokenKind.LBRACE):
        skip_balanced(parser)
    elif not parser.eat(TokenKind.SEMICOLON):
        return _skip_member(
            parser,
            checkpoint,
            f"Expected method body for '{name}', skipping member",
        )

    comment = head.comment.text if head.comment is not None else None
    return ParsedSyntax.present(
        (
            AstMethodDeclaration(
                name=name,
                return_type=return_type,
                modifiers=head.modifiers,
                annotations=head.annotations,
                parameters=tuple(parameters),
                comment=comment,
                line=name_token.line,
                column=name_token.column,
            ),
        )
    )


def parse_parameter(parser: Parser) -> ParsedSyntax[AstParameter]:
    prelude = parse_declaration_prelude(parser)
    if prelude.is_absent():
        return ParsedSyntax.absent()

    parsed_type = parse_type(parser)
    if parsed_type.is_absent() or not parser.at(TokenKind.IDENTIFIER):
        return ParsedSyntax.absent()
    type_text = parsed_type.unwrap()
    name_token = parser.bump()

    while parser.at(TokenKind.LBRACKET) and parser.nth(1) == TokenKind.RBRACKET:
        parser.bump()
        parser.bump()
        type_text += "[]"

    return ParsedSyntax.present(
        AstParameter(name=name_token.text, type_text=type_text, annotations=prelude.unwrap().annotations)
    )


def _skip_member(
    parser: Parser,
    checkpoint: ParserCheckpoint,
    message: str,
) -> ParsedSyntax[tuple[AstMember, ...]]:
    parser.rewind(checkpoint)
    parser.warning(message)
    skip_to_next_member(parser)
    return ParsedSyntax.present(())


# -------------------------
# Types and values
# -------------------------


def parse_type(parser: Parser) -> ParsedSyntax[str]:
    """Parse a type reference into opaque text.

    Generic arguments are consumed by depth counting and kept verbatim, e.g.
    `Map<String, List<Foo>>`; trailing `[]` pairs and a varargs `...` are kept.
    """
    if not parser.at_set(TYPE_START_KINDS):
        return ParsedSyntax.absent()

    tokens: list[Token] = [parser.bump()]
    while parser.at(TokenKind.DOT) and parser.nth(1) == TokenKind.IDENTIFIER:
        tokens.append(parser.bump())
        tokens.append(parser.bump())

    if parser.at(TokenKind.LESS_THAN):
        depth = 0
        while not parser.at_eof():
            if parser.at(TokenKind.LESS_THAN):
                depth += 1
            elif parser.at(TokenKind.GREATER_THAN):
                depth -= 1
            elif parser.at_set(_TYPE_ARGUMENTS_STOP):
                break
            tokens.append(parser.bump())
            if depth == 0:
                break
        if depth != 0:
            return ParsedSyntax.absent()

    while parser.at(TokenKind.LBRACKET):
        tokens.append(parser.bump())
        if not parser.at(TokenKind.RBRACKET):
            return ParsedSyntax.absent()
        tokens.append(parser.bump())

    if parser.at(TokenKind.DOT) and parser.nth(1) == TokenKind.DOT and parser.nth(2) == TokenKind.DOT:
        for _ in range(3):
            tokens.append(parser.bump())

    return ParsedSyntax.present(join_type_tokens(tokens))


def join_type_tokens(tokens: list[Token]) -> str:
    """Render type tokens compactly: `Map<String, List<Foo>>`, `byte[]`."""
    parts: list[str] = []
    previous: Token | None = None
    for token in tokens:
        if previous is not None:
            if previous.kind == TokenKind.COMMA:
                parts.append(" ")
            elif previous.kind in _WORD_KINDS and token.kind in _WORD_KINDS:
                parts.append(" ")
        parts.append(token.text)
        previous = token
    return "".join(parts)


def parse_default_value(parser: Parser) -> ParsedSyntax[str]:
    """Capture an initializer up to (not including) the terminating `;`.

    Braces, parens and brackets are tracked so commas and blocks inside the
    initializer do not end it early. A depth-0 comma ends the value only when it
    starts another declarator (`int a = 1, b = 2;`).
    """
    start = parser.position
    depth = 0
    while not parser.at_eof():
        kind = parser.current
        if kind in (TokenKind.LBRACE, TokenKind.LPAREN, TokenKind.LBRACKET):
            depth += 1
        elif kind in (TokenKind.RBRACE, TokenKind.RPAREN, TokenKind.RBRACKET):
            if depth == 0:
                break
            depth -= 1
        elif depth == 0 and kind == TokenKind.SEMICOLON:
            break
        elif depth == 0 and kind == TokenKind.LINE_COMMENT and parser.nth(1) == TokenKind.SEMICOLON:
            # Left in place for the trailing-comment check.
            break
        elif depth == 0 and kind == TokenKind.COMMA and _starts_declarator(parser):
            break
        parser.bump()

    tokens = parser.cursor.tokens[start : parser.position]
    while tokens and tokens[-1].is_comment:
        tokens = tokens[:-1]
    if not tokens:
        return ParsedSyntax.absent()
    return ParsedSyntax.present(source_slice(parser, tokens))


def _starts_declarator(parser: Parser) -> bool:
    """True at a `,` that begins a declarator list `, a = ...`, `, a;` or `, a, b;`.

    A run of `, Ident` pairs only counts when it ends at `=` or `;`, so generic
    arguments such as `new Triple<A, B, C>()` stay inside the initializer.
    """
    n = 1
    while parser.nth(n) == TokenKind.IDENTIFIER:
        following = parser.nth(n + 1)
        if following in (TokenKind.EQUAL, TokenKind.SEMICOLON):
            return True
        if following != TokenKind.COMMA:
            return False
        n += 2
    return False


def source_slice(parser: Parser, tokens: list[Token]) -> str:
    """Exact source text covered by `tokens`, or a spaced join without source."""
    if parser.source_text is not None:
        return parser.source_text[tokens[0].range.start : tokens[-1].range.end]
    parts: list[str] = []
    previous: Token | None = None
    for token in tokens:
        if previous is not None and token.range.start > previous.range.end:
            parts.append(" ")
        parts.append(token.text)
        previous = token
    return "".join(parts)


# -------------------------
# Annotations and modifiers
# -------------------------


def parse_declaration_prelude(parser: Parser) -> ParsedSyntax[DeclarationPrelude]:
    """Consume comments, annotations and modifiers in any order.

    The last comment seen is kept as the declaration's leading comment.
    """
    comment: Token | None = None
    annotations: list[AstAnnotation] = []
    modifiers: list[str] = []

    while not parser.at_eof():
        token = parser.current_token
        if token.is_comment:
            comment = parser.bump()
            continue
        if parser.at(TokenKind.AT) and parser.nth(1) != TokenKind.INTERFACE:
            parsed = parse_annotation(parser)
            if parsed.is_absent():
                return ParsedSyntax.absent()
            annotations.append(parsed.unwrap())
            continue
        if parser.at_set(MODIFIER_KINDS) or _at_contextual_modifier(parser):
            modifiers.append(parser.bump().text)
            continue
        break

    return ParsedSyntax.present(
        DeclarationPrelude(comment=comment, annotations=tuple(annotations), modifiers=tuple(modifiers))
    )


def _at_contextual_modifier(parser: Parser) -> bool:
    return (
        parser.at(TokenKind.IDENTIFIER)
        and parser.current_token.text in CONTEXTUAL_MODIFIERS
        and parser.nth(1) != TokenKind.LPAREN
    )


def _skipped_declaration_kind(parser: Parser, *, nested: bool = False) -> str | None:
    if parser.at(TokenKind.INTERFACE):
        return "interface"
    if parser.at(TokenKind.ENUM):
        return "enum"
    if parser.at(TokenKind.AT) and parser.nth(1) == TokenKind.INTERFACE:
        return "annotation type"
    if nested and parser.at(TokenKind.CLASS):
        return "class"
    return None


def parse_annotation(parser: Parser) -> ParsedSyntax[AstAnnotation]:
    """Parse `@Name`, `@Name(value)` or `@Name(key = value, ...)`.

    An argument list that never closes is a hard error.
    """
    at_token = parser.bump()  # @
    if not parser.at(TokenKind.IDENTIFIER):
        return ParsedSyntax.absent()

    # Qualified names keep only the last segment.
    name = parser.bump().text
    while parser.at(TokenKind.DOT) and parser.nth(1) == TokenKind.IDENTIFIER:
        parser.bump()
        name = parser.bump().text

    parameters: dict[str, AstAnnotationValue] = {}
    if parser.at(TokenKind.LPAREN):
        parser.bump()
        parameters = parse_annotation_arguments(parser)
        if not parser.at(TokenKind.RPAREN):
            if _ANNOTATION_ARGUMENTS_RECOVERY.recover(parser) is not None:
                parser.error(PARSER_UNCLOSED_ANNOTATION_ARGUMENTS)
                return ParsedSyntax.absent()
        parser.bump()  # )

    return ParsedSyntax.present(
        AstAnnotation(name=name, parameters=parameters, line=at_token.line, column=at_token.column)
    )


def parse_annotation_arguments(parser: Parser) -> dict[str, AstAnnotationValue]:
    """Parse arguments up to, not including, `)`; stops early on anything unexpected."""
    parameters: dict[str, AstAnnotationValue] = {}
    if parser.at(TokenKind.RPAREN):
        return parameters

    if not (parser.at(TokenKind.IDENTIFIER) and parser.nth(1) == TokenKind.EQUAL):
        parsed = parse_annotation_value(parser)
        if parsed.is_present():
            parameters["value"] = parsed.unwrap()
        return parameters

    while parser.at(TokenKind.IDENTIFIER) and parser.nth(1) == TokenKind.EQUAL:
        key = parser.bump().text
        parser.bump()  # =
        parsed = parse_annotation_value(parser)
        if parsed.is_absent():
            break
        parameters[key] = parsed.unwrap()
        if not parser.eat(TokenKind.COMMA):
            break
    return parameters


def parse_annotation_value(parser: Parser) -> ParsedSyntax[AstAnnotationValue]:
    match parser.current:
        case TokenKind.STRING:
            # `"a" + "b"` lexes as two adjacent strings (`+` is not a token).
            text = unquote_string(parser.bump().text)
            while parser.at(TokenKind.STRING):
                text += unquote_string(parser.bump().text)
            return ParsedSyntax.present(AstString(text))
        case TokenKind.NUMBER:
            number = parse_number(parser.bump().text)
            if number is None:
                return ParsedSyntax.absent()
            return ParsedSyntax.present(AstNumber(number))
        case TokenKind.TRUE | TokenKind.FALSE:
            return ParsedSyntax.present(AstBoolean(parser.bump().kind == TokenKind.TRUE))
        case TokenKind.LBRACE:
            start = parser.position
            skip_balanced(parser)
            tokens = parser.cursor.tokens[start : parser.position]
            return ParsedSyntax.present(AstIdentifier(source_slice(parser, tokens)))
        case kind if kind in TYPE_START_KINDS:
            parts = [parser.bump().text]
            while parser.at(TokenKind.DOT) and parser.nth(1) in (TokenKind.IDENTIFIER, TokenKind.CLASS):
                parser.bump()
                parts.append(parser.bump().text)
            return ParsedSyntax.present(AstIdentifier(".".join(parts)))
        case _:
            return ParsedSyntax.absent()


__all__ = [
    "CONTEXTUAL_MODIFIERS",
    "DECLARATION_START_KINDS",
    "DeclarationPrelude",
    "join_type_tokens",
    "parse_annotation",
    "parse_annotation_arguments",
    "parse_annotation_value",
    "parse_class_body",
    "parse_class_member",
    "parse_compilation_unit",
    "parse_declaration_prelude",
    "parse_default_value",
    "parse_parameter",
    "parse_type",
    "parse_type_declaration",
    "source_slice",
]
