"""JavaScript tokenizer feeding the call recognizer.

Notable in this module are

tokenize - scans a source string into a flat list of :class:`Token`
_pattern - the regex used to find the next token outside of JSX text
_Scanner - tracks position, line, division/regex ambiguity, JSX and template nesting

The token grammar follows :mod:`babel.messages.jslexer`, with two differences
that matter for extraction: every token knows its column, and characters that
no rule accepts raise :class:`ScriptSyntaxError` instead of being skipped, so
that a broken file is reported and left out of the catalog.
"""

import re
from enum import Enum
from typing import NamedTuple

from jsgettext.util import JsGettextError


class TokenKind(Enum):
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMERIC = "numeric"
    PUNCTUATOR = "punctuator"
    OTHER = "other"


class Token(NamedTuple):
    kind: TokenKind
    text: str
    line: int
    column: int = 1


class ScriptSyntaxError(JsGettextError):
    """Source text that cannot be split into tokens."""

    def __init__(self, msg, lineno, colno, filename="<string>"):
        super().__init__(msg)
        self.msg = msg
        self.lineno = lineno
        self.colno = colno
        self.filename = filename

    def __str__(self):
        return f"[{self.filename}:{self.lineno}:{self.colno}] {self.msg}"


_punctuators = sorted(
    [
        "{", "}", "(", ")", "[", "]", ";", ",", ".", "...", "?", "?.", "??", ":",
        "<", ">", "<=", ">=", "==", "!=", "===", "!==", "=>",
        "+", "-", "*", "**", "%", "++", "--", "<<", ">>", ">>>",
        "&", "|", "^", "!", "~", "&&", "||",
        "=", "+=", "-=", "*=", "**=", "%=", "<<=", ">>=", ">>>=",
        "&=", "|=", "^=", "&&=", "||=", "??=", "@",
    ],
    key=len,
    reverse=True,
)

_pattern = r"""
(?P<space>\s+) |
(?P<comment>//[^\n\r\u2028\u2029]* | /\*[\s\S]*?\*/ | <!--[^\n\r]*) |
(?P<template>`(?:[^`\\$]|\\[\s\S]|\$(?!\{))*(?:`|\$\{)) |
(?P<string>
    '(?:[^'\\\n\r]|\\(?:\r\n|[\s\S]))*' |
    "(?:[^"\\\n\r]|\\(?:\r\n|[\s\S]))*"
) |
(?P<number>
    0[xX][0-9a-fA-F](?:_?[0-9a-fA-F])*n? |
    0[oO][0-7](?:_?[0-7])*n? |
    0[bB][01](?:_?[01])*n? |
    (?:[0-9](?:_?[0-9])*(?:\.(?:[0-9](?:_?[0-9])*)?)? | \.[0-9](?:_?[0-9])*)
    (?:[eE][+-]?[0-9](?:_?[0-9])*)?n?
) |
(?P<name>\#?(?:[^\W\d]|\$)(?:\w|\$)*) |
(?P<punctuator>%s)
""" % "|".join(map(re.escape, _punctuators))
_re_pattern = re.compile(_pattern, re.VERBOSE)

_division_re = re.compile(r"/=?")
_regex_re = re.compile(r"/(?:[^/\\\[\n\r]|\\[^\n\r]|\[(?:[^\]\\\n\r]|\\[^\n\r])*\])+/[a-zA-Z]*")
_line_re = re.compile(r"\r\n|[\n\r\u2028\u2029]")
_template_continue_re = re.compile(r"\}(?:[^`\\$]|\\[\s\S]|\$(?!\{))*(?:`|\$\{)")
_jsx_tag_re = re.compile(r"</?[a-zA-Z_$][\w$.:\-]*|</>|<>")
_jsx_text_re = re.compile(r"[^<{]+")

# A regular expression literal may follow these names, a division may not.
_regex_keywords = frozenset(
    [
        "return", "typeof", "instanceof", "in", "of", "new", "delete", "void",
        "throw", "case", "do", "else", "yield", "await",
    ]
)
# After the parenthesized head of these statements, a statement begins.
_statement_keywords = frozenset(["if", "while", "for", "with"])

_kinds = {
    "template": TokenKind.OTHER,
    "string": TokenKind.STRING,
    "number": TokenKind.NUMERIC,
    "name": TokenKind.IDENTIFIER,
    "punctuator": TokenKind.PUNCTUATOR,
}


def tokenize(source, jsx=False, lineno=1):  # noqa: FBT002
    """Split JavaScript *source* into a list of :class:`Token`.

    Whitespace and comments are dropped. *lineno* is the line number of the
    first line of *source*, for scripts embedded in a larger document.
    Template literals are split around their substitutions, whose tokens are
    emitted in between:

    >>> [t.text for t in tokenize('_("Hello" + name)')]
    ['_', '(', '"Hello"', '+', 'name', ')']
    >>> [t.text for t in tokenize('`Hi ${name}!`')]
    ['`Hi ${', 'name', '}!`']
    """
    return list(_Scanner(source, lineno=lineno, jsx=jsx))


class _Scanner:
    def __init__(self, source, lineno=1, jsx=False):  # noqa: FBT002
        self.source = source
        self.lineno = lineno
        self.jsx = jsx
        self.pos = 0
        self.line_start = 0
        self.may_divide = False
        self._previous = None
        # Nesting: "open"/"close" inside a JSX tag, "children" inside element
        # content, "${" inside a template substitution, an int for the brace
        # depth of a JSX expression or of an object within a substitution.
        self._nesting = []
        # One flag per open parenthesis: does it follow if/while/for/with?
        self._parens = []

    def __iter__(self):
        if self.source.startswith("#!"):
            self._skip_hashbang()
        end = len(self.source)
        while self.pos < end:
            kind, text, rule = self._read()
            if kind is not None:
                token = Token(kind, text, self.lineno, self.pos - self.line_start + 1)
                self._track(token, rule)
                yield token
            self._advance(text)

    @property
    def _top(self):
        return self._nesting[-1] if self._nesting else None

    def _read(self):
        """Return ``(kind, text, rule)`` for the text at the current position.

        *kind* is ``None`` for text that produces no token.
        """
        source, pos = self.source, self.pos
        top = self._top
        if top == "children":
            mo = _jsx_text_re.match(source, pos)
            if mo is not None:
                text = mo.group()
                return (TokenKind.OTHER if text.strip() else None), text, "jsx_text"
        if top in ("open", "close"):
            for text in ("/>", ">"):
                if source.startswith(text, pos):
                    return TokenKind.PUNCTUATOR, text, "jsx_tag_end"
        if top == "${" and source.startswith("}", pos):
            mo = _template_continue_re.match(source, pos)
            if mo is None:
                raise self._error("Unterminated template")
            return TokenKind.OTHER, mo.group(), "template"
        if self.jsx and (top == "children" or not self.may_divide):
            mo = _jsx_tag_re.match(source, pos)
            if mo is not None:
                return TokenKind.OTHER, mo.group(), "jsx_tag"
        mo = _re_pattern.match(source, pos)
        if mo is not None:
            rule = mo.lastgroup
            return _kinds.get(rule), mo.group(), rule
        char = source[pos]
        if char == "/":
            if source.startswith("/*", pos):
                raise self._error("Unterminated comment")
            if self.may_divide:
                return TokenKind.PUNCTUATOR, _division_re.match(source, pos).group(), "punctuator"
            mo = _regex_re.match(source, pos)
            if mo is not None:
                return TokenKind.OTHER, mo.group(), "regexp"
            raise self._error("Invalid regular expression: missing /")
        if char in "'\"":
            raise self._error("Unterminated string constant")
        if char == "`":
            raise self._error("Unterminated template")
        raise self._error(f"Unexpected character {char!r}")

    def _track(self, token, rule):
        """Update the division, parenthesis and nesting state after emitting *token*."""
        text = token.text
        previous, self._previous = self._previous, text
        if rule == "jsx_tag":
            if text == "<>":
                self._nesting.append("children")
            elif text == "</>":
                self._pop("children")
            else:
                self._nesting.append("close" if text.startswith("</") else "open")
            self.may_divide = False
            return
        if rule == "jsx_tag_end":
            top = self._nesting.pop()
            if top == "close":
                self._pop("children")
            elif text == ">":
                self._nesting.append("children")
            self.may_divide = False
            return
        if rule == "jsx_text":
            return
        if rule == "template":
            if text.startswith("}"):
                self._pop("${")
            if text.endswith("${"):
                self._nesting.append("${")
                self.may_divide = False
            else:
                self.may_divide = True
            return
        if self._nesting and token.kind is TokenKind.PUNCTUATOR:
            top = self._top
            if text == "{" and top in ("open", "children", "${"):
                self._nesting.append(0)
            elif isinstance(top, int):
                if text == "{":
                    self._nesting[-1] += 1
                elif text == "}":
                    if top:
                        self._nesting[-1] -= 1
                    else:
                        self._nesting.pop()
        if token.kind is TokenKind.PUNCTUATOR:
            self.may_divide = text in (")", "]", "}", "++", "--")
            if text == "(":
                self._parens.append(previous in _statement_keywords)
            elif text == ")" and self._parens and self._parens.pop():
                self.may_divide = False
        elif token.kind is TokenKind.IDENTIFIER:
            self.may_divide = text not in _regex_keywords
        else:
            self.may_divide = True

    def _pop(self, expected):
        if self._top == expected:
            self._nesting.pop()

    def _advance(self, text):
        for mo in _line_re.finditer(text):
            self.lineno += 1
            self.line_start = self.pos + mo.end()
        self.pos += len(text)

    def _skip_hashbang(self):
        mo = _line_re.search(self.source)
        self.pos = mo.start() if mo else len(self.source)

    def _error(self, msg):
        return ScriptSyntaxError(msg, self.lineno, self.pos - self.line_start + 1)
