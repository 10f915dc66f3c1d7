import pytest

from jsgettext.lexer import Token, TokenKind
from jsgettext.literal import LiteralError, decode_literal, decode_number, decode_string


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('"Hello"', "Hello"),
        ("'it\\'s'", "it's"),
        ('"say \\"hi\\""', 'say "hi"'),
        (r'"a\nb"', "a\nb"),
        (r'"tab\there"', "tab\there"),
        (r'"\b\f\r\v"', "\b\f\r\v"),
        (r'"\x41B\u{43}"', "ABC"),
        (r'"\101"', "A"),
        (r'"\0"', "\0"),
        (r'"\q"', "q"),
        (r'"back\\slash"', "back\\slash"),
        ('"line\\\ncontinued"', "linecontinued"),
        ('"line\\\r\ncontinued"', "linecontinued"),
        (r'"😀"', "\U0001f600"),
        (r'"\u{1F600}"', "\U0001f600"),
        ('""', ""),
    ],
)
def test_decode_string(text, expected):
    assert decode_string(text) == expected


@pytest.mark.parametrize(
    "text",
    ['"abc', "'abc\"", '"', r'"\x4"', r'"\u12"', r'"\u{110000}"'],
)
def test_decode_string_errors(text):
    with pytest.raises(LiteralError):
        decode_string(text)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", "42"),
        ("0", "0"),
        ("0x1F", "31"),
        ("0o17", "15"),
        ("0b101", "5"),
        ("017", "15"),
        ("1.50", "1.5"),
        (".5", "0.5"),
        ("1e3", "1000"),
        ("1e21", "1e+21"),
        ("1.5e300", "1.5e+300"),
        ("0.000001", "0.000001"),
        ("1e-7", "1e-7"),
        ("1_000", "1000"),
        ("10n", "10"),
    ],
)
def test_decode_number(text, expected):
    assert decode_number(text) == expected


def test_decode_literal_dispatches_on_kind():
    assert decode_literal(Token(TokenKind.STRING, "'x'", 1)) == "x"
    assert decode_literal(Token(TokenKind.NUMERIC, "2", 1)) == "2"


def test_decode_literal_rejects_other_tokens():
    with pytest.raises(LiteralError, match="is not a literal"):
        decode_literal(Token(TokenKind.IDENTIFIER, "name", 1))
