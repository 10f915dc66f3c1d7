"""Turn the source text of JavaScript literals into the values they denote.

Only the literal grammar is implemented (quotes, escape sequences and numeric
notations); nothing is ever evaluated.
"""

import math
import re

from jsgettext.lexer import TokenKind
from jsgettext.util import JsGettextError


class LiteralError(JsGettextError):
    """Malformed literal text."""


_single_escapes = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\r\n": "",
    "\n": "",
    "\r": "",
    "\u2028": "",
    "\u2029": "",
}

_escape_re = re.compile(
    r"""\\(?:
    u\{(?P<code_point>[0-9a-fA-F]+)\} |
    u(?P<unicode>[0-9a-fA-F]{4}) |
    x(?P<hex>[0-9a-fA-F]{2}) |
    (?P<octal>[0-3][0-7]{0,2}|[4-7][0-7]?) |
    (?P<char>\r\n|[\s\S])
)""",
    re.VERBOSE,
)
_surrogate_pair_re = re.compile("[\ud800-\udbff][\udc00-\udfff]")
_legacy_octal_re = re.compile(r"0[0-7]+")
_float_repr_re = re.compile(r"(\d+)(?:\.(\d+))?(?:e([+-]\d+))?")


def decode_literal(token):
    """Return the string value of a STRING or NUMERIC :class:`~jsgettext.lexer.Token`."""
    if token.kind is TokenKind.STRING:
        return decode_string(token.text)
    if token.kind is TokenKind.NUMERIC:
        return decode_number(token.text)
    msg = f"{token.text!r} is not a literal"
    raise LiteralError(msg)


def decode_string(text):
    r"""Decode a quoted JavaScript string literal.

    >>> decode_string(r"'it\'s \x41\u{1F600}'")
    "it's A😀"
    """
    if len(text) < 2 or text[0] not in "'\"" or text[-1] != text[0]:
        msg = f"String literal is not properly delimited: {text!r}"
        raise LiteralError(msg)
    value = _escape_re.sub(_unescape, text[1:-1])
    return _surrogate_pair_re.sub(_join_surrogates, value)


def _unescape(mo):
    groups = mo.groupdict()
    if groups["code_point"] is not None:
        code_point = int(groups["code_point"], 16)
        if code_point > 0x10FFFF:
            msg = f"Undefined Unicode code-point in {mo.group()!r}"
            raise LiteralError(msg)
        return chr(code_point)
    if groups["unicode"] is not None:
        return chr(int(groups["unicode"], 16))
    if groups["hex"] is not None:
        return chr(int(groups["hex"], 16))
    if groups["octal"] is not None:
        return chr(int(groups["octal"], 8))
    char = groups["char"]
    if char in ("x", "u"):
        msg = f"Invalid {'hexadecimal' if char == 'x' else 'Unicode'} escape sequence"
        raise LiteralError(msg)
    return _single_escapes.get(char, char)


def _join_surrogates(mo):
    high, low = (ord(c) for c in mo.group())
    return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))


def decode_number(text):
    """Render a JavaScript numeric literal the way ``String(number)`` does.

    >>> [decode_number(n) for n in ("0x10", "1.50", "1e21", ".5", "017", "10n")]
    ['16', '1.5', '1e+21', '0.5', '15', '10']
    """
    text = text.replace("_", "")
    try:
        if text.endswith("n"):
            return str(int(text[:-1], 0))
        if text[:2].lower() in ("0x", "0o", "0b"):
            return _format_number(float(int(text, 0)))
        if _legacy_octal_re.fullmatch(text):
            return _format_number(float(int(text, 8)))
        return _format_number(float(text))
    except ValueError as e:
        msg = f"Invalid numeric literal {text!r}"
        raise LiteralError(msg) from e


def _format_number(value):
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + _format_number(-value)
    if value.is_integer() and value < 1e21:
        return str(int(value))
    int_part, frac_part, exponent = _float_repr_re.fullmatch(repr(value)).groups()
    all_digits = int_part + (frac_part or "")
    digits = all_digits.lstrip("0")
    # value == 0.<digits> * 10 ** point
    point = len(int_part) + int(exponent or 0) - (len(all_digits) - len(digits))
    digits = digits.rstrip("0")
    if 0 < point <= 21:
        return digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return "0." + "0" * -point + digits
    exp = point - 1
    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"
