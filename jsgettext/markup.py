"""Extraction from HTML-like documents (HTML, XHTML, XML, Twig templates).

Three sources of messages are recognized:

* the body of ``<script>`` elements holding JavaScript, which goes through
  the call recognizer with line numbers relative to the document;
* elements carrying a ``stonejs`` attribute, whose inner HTML is the msgid;
* ``x-data`` attributes, which may contain translation calls, or string
  values shaped like ``"_(Some text)"``.
"""

import logging
import re
from html.parser import HTMLParser

from jsgettext.lexer import ScriptSyntaxError, TokenKind, tokenize
from jsgettext.literal import LiteralError, decode_literal
from jsgettext.recognizer import ExtractedUnit, FunctionRole, recognize
from jsgettext.util import line_offsets

log = logging.getLogger(__name__)

SCRIPT_TYPES = frozenset(
    [
        "",
        "text/javascript",
        "application/javascript",
        "text/ecmascript",
        "application/ecmascript",
        "module",
    ]
)
JSX_SCRIPT_TYPES = frozenset(["text/babel", "text/jsx"])

_marked_string_re = re.compile(r"\s*([\w$]+)\((.*)\)\s*", re.DOTALL)


def extract_markup(source, names):
    """Return the :class:`~jsgettext.recognizer.ExtractedUnit` list of a document.

    Raises :class:`~jsgettext.lexer.ScriptSyntaxError` if one of its scripts
    cannot be tokenized.
    """
    parser = _MarkupScanner(source, names)
    parser.feed(source)
    parser.close()
    return parser.units


class _MarkupScanner(HTMLParser):
    def __init__(self, source, names):
        self.source = source
        self.names = names
        self.offsets = line_offsets(source)
        super().__init__()

    def reset(self):
        self.units = []
        self._script = None
        # stonejs elements whose end tag is still to come, innermost last
        self._captures = []
        super().reset()

    def _offset(self):
        lineno, col = self.getpos()
        return self.offsets[lineno - 1] + col

    def handle_starttag(self, tag, attrs):
        attrs = dict(attrs)
        lineno = self.getpos()[0]
        for capture in self._captures:
            if capture["tag"] == tag:
                capture["depth"] += 1
        if "x-data" in attrs and attrs["x-data"]:
            self._handle_x_data(attrs["x-data"], lineno)
        if "stonejs" in attrs:
            self._captures.append(
                {
                    "tag": tag,
                    "depth": 0,
                    "start": self._offset() + len(self.get_starttag_text()),
                    "lineno": lineno,
                }
            )
        if tag == "script":
            kind = (attrs.get("type") or "").strip().lower()
            if kind in SCRIPT_TYPES or kind in JSX_SCRIPT_TYPES:
                self._script = {"chunks": [], "lineno": None, "jsx": kind in JSX_SCRIPT_TYPES}

    def handle_startendtag(self, tag, attrs):
        attrs = dict(attrs)
        if "x-data" in attrs and attrs["x-data"]:
            self._handle_x_data(attrs["x-data"], self.getpos()[0])

    def handle_endtag(self, tag):
        if tag == "script" and self._script is not None:
            self._handle_script(self._script)
            self._script = None
        for capture in reversed(self._captures):
            if capture["tag"] != tag:
                continue
            if capture["depth"]:
                capture["depth"] -= 1
                break
            self._captures.remove(capture)
            inner = self.source[capture["start"] : self._offset()]
            if inner:
                self.units.append(ExtractedUnit(inner, line=capture["lineno"]))
            break

    def handle_data(self, data):
        script = self._script
        if script is not None:
            if script["lineno"] is None:
                script["lineno"] = self.getpos()[0]
            script["chunks"].append(data)

    def _handle_script(self, script):
        if script["lineno"] is None:
            return
        tokens = tokenize("".join(script["chunks"]), jsx=script["jsx"], lineno=script["lineno"])
        self.units.extend(recognize(tokens, self.names))

    def _handle_x_data(self, value, lineno):
        try:
            tokens = tokenize(value, lineno=lineno)
        except ScriptSyntaxError as e:
            log.debug("Ignoring x-data attribute on line %d: %s", lineno, e.msg)
            return
        # References point at the line of the element.
        tokens = [token._replace(line=lineno) for token in tokens]
        self.units.extend(recognize(tokens, self.names))
        for token in tokens:
            if token.kind is not TokenKind.STRING:
                continue
            try:
                value = decode_literal(token)
            except LiteralError:
                continue
            mo = _marked_string_re.fullmatch(value)
            if mo is None or self.names.role_of(mo.group(1)) is not FunctionRole.PLAIN:
                continue
            msgid = _unquote(mo.group(2))
            if msgid:
                self.units.append(ExtractedUnit(msgid, line=lineno))


def _unquote(text):
    text = text.strip()
    try:
        tokens = tokenize(text)
        if len(tokens) == 1 and tokens[0].kind is TokenKind.STRING:
            return decode_literal(tokens[0])
    except (ScriptSyntaxError, LiteralError):
        pass
    return text
