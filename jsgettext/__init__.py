"""jsgettext public API."""

from jsgettext.catalog import Catalog, MessageEntry
from jsgettext.extract import (
    ExtractionResult,
    ExtractOptions,
    expand_paths,
    extract_file,
    extract_files,
    extract_source,
    main,
)
from jsgettext.lexer import ScriptSyntaxError, Token, TokenKind, tokenize
from jsgettext.literal import LiteralError, decode_literal
from jsgettext.markup import extract_markup
from jsgettext.pofile import render_pot, write_pot
from jsgettext.recognizer import ExtractedUnit, FunctionNames, FunctionRole, extract_script, recognize
from jsgettext.util import ConfigurationError, JsGettextError
from jsgettext.version import __release__, __version__

__all__ = [
    "Catalog",
    "ConfigurationError",
    "ExtractedUnit",
    "ExtractionResult",
    "ExtractOptions",
    "FunctionNames",
    "FunctionRole",
    "JsGettextError",
    "LiteralError",
    "MessageEntry",
    "ScriptSyntaxError",
    "Token",
    "TokenKind",
    "decode_literal",
    "expand_paths",
    "extract_file",
    "extract_files",
    "extract_markup",
    "extract_script",
    "extract_source",
    "main",
    "recognize",
    "render_pot",
    "tokenize",
    "write_pot",
    "__version__",
    "__release__",
]
