import textwrap

from beanschema.lexer import KEYWORDS, Lexer, TokenKind, tokenize
from tests._debug import debug_dump_tokens


def kinds(source: str) -> list[TokenKind]:
    return [token.kind for token in tokenize(source)]


def test_simple_field_declaration() -> None:
    source = "private String name;"
    tokens = tokenize(source)
    debug_dump_tokens("simple_field_declaration", source, tokens)

    assert [token.kind for token in tokens] == [
        TokenKind.PRIVATE,
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.SEMICOLON,
        TokenKind.EOF,
    ]
    assert [token.text for token in tokens[:-1]] == ["private", "String", "name", ";"]


def test_tokenize_drops_whitespace_but_lex_keeps_it() -> None:
    source = "int a;\n"

    lossless = Lexer(source).lex()
    assert TokenKind.WHITESPACE in [token.kind for token in lossless]
    assert TokenKind.NEWLINE in [token.kind for token in lossless]
    assert "".join(token.text for token in lossless) == source

    assert kinds(source) == [TokenKind.INT, TokenKind.IDENTIFIER, TokenKind.SEMICOLON, TokenKind.EOF]


def test_eof_is_always_last() -> None:
    assert kinds("") == [TokenKind.EOF]
    assert kinds("   \n\t") == [TokenKind.EOF]
    assert tokenize("class A {}")[-1].kind == TokenKind.EOF


def test_keyword_table_is_read_only_and_complete() -> None:
    assert KEYWORDS["class"] == TokenKind.CLASS
    assert KEYWORDS["boolean"] == TokenKind.BOOLEAN
    assert "abstract" not in KEYWORDS
    try:
        KEYWORDS["abstract"] = TokenKind.IDENTIFIER  # type: ignore[index]
    except TypeError:
        pass
    else:
        raise AssertionError("Expected keyword table to be immutable")


def test_non_reserved_java_words_lex_as_identifiers() -> None:
    assert kinds("abstract void transient") == [
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]


def test_punctuation() -> None:
    assert kinds("{}()[];,.<>=@") == [
        TokenKind.LBRACE,
        TokenKind.RBRACE,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.LBRACKET,
        TokenKind.RBRACKET,
        TokenKind.SEMICOLON,
        TokenKind.COMMA,
        TokenKind.DOT,
        TokenKind.LESS_THAN,
        TokenKind.GREATER_THAN,
        TokenKind.EQUAL,
        TokenKind.AT,
        TokenKind.EOF,
    ]


def test_numbers_keep_suffix_and_sign() -> None:
    tokens = tokenize("1 2.5 10L 1.5f -5")
    assert [token.kind for token in tokens[:-1]] == [TokenKind.NUMBER] * 5
    assert [token.text for token in tokens[:-1]] == ["1", "2.5", "10L", "1.5f", "-5"]


def test_string_literal_with_escapes() -> None:
    tokens = tokenize(r'"a \"quoted\" value" x')
    assert tokens[0].kind == TokenKind.STRING
    assert tokens[0].text == r'"a \"quoted\" value"'
    assert tokens[1].kind == TokenKind.IDENTIFIER


def test_unterminated_string_produces_no_token() -> None:
    assert kinds('name = "never closed') == [TokenKind.IDENTIFIER, TokenKind.EQUAL, TokenKind.EOF]


def test_comment_forms() -> None:
    source = "// line\n/* block */\n/** doc */\n/**/"
    tokens = tokenize(source)

    assert [token.kind for token in tokens] == [
        TokenKind.LINE_COMMENT,
        TokenKind.BLOCK_COMMENT,
        TokenKind.DOC_COMMENT,
        TokenKind.BLOCK_COMMENT,
        TokenKind.EOF,
    ]
    assert tokens[0].text == "// line"
    assert tokens[2].text == "/** doc */"


def test_multiline_comment_advances_line_counter() -> None:
    source = textwrap.dedent(
        """\
        /**
         * Doc
         */
        private int x;
        """
    )
    tokens = tokenize(source)

    assert tokens[0].kind == TokenKind.DOC_COMMENT
    assert tokens[0].line == 1
    assert tokens[1].kind == TokenKind.PRIVATE
    assert (tokens[1].line, tokens[1].column) == (4, 1)


def test_unterminated_block_comment_extends_to_end() -> None:
    tokens = tokenize("int a; /* never closed\nint b;")
    assert tokens[-2].kind == TokenKind.BLOCK_COMMENT
    assert tokens[-2].text.endswith("int b;")


def test_unknown_characters_are_skipped() -> None:
    assert kinds("a + b - c * d ? e : f ! g & h | i % j ' k") == [TokenKind.IDENTIFIER] * 11 + [TokenKind.EOF]
    assert kinds("a / b") == [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER, TokenKind.EOF]


def test_positions_are_non_decreasing() -> None:
    source = "public class A {\n  private int x; // note\n  @Size(min = 1)\n  private String y;\n}\n"
    tokens = tokenize(source)

    positions = [(token.line, token.column) for token in tokens]
    assert positions == sorted(positions)
    assert all(token.range.start < token.range.end for token in tokens[:-1])


def test_crlf_counts_as_one_line_break() -> None:
    tokens = tokenize("int a;\r\nint b;")
    assert tokens[3].text == "int"
    assert tokens[3].line == 2
    assert tokens[3].column == 1
