"""Recognition of translation function calls in a token stream.

A call is recognized by a small state machine:

``_Idle``
    waiting for an identifier naming a translation function;
``_AwaitingParen``
    the function name was seen, the next token must be ``(``;
``_CollectingArgs``
    inside the argument list, accumulating literal arguments.

Arguments are made of string or numeric literals, optionally joined with
``+``. Anything that cannot be known statically (an identifier, and thus
also a nested call) abandons the call without reporting it.
"""

from enum import Enum
from typing import NamedTuple, Optional, Tuple

from jsgettext.lexer import TokenKind, tokenize
from jsgettext.literal import LiteralError, decode_literal
from jsgettext.util import ConfigurationError, split_names

DEFAULT_FUNCTIONS = ("_", "gettext", "lazyGettext", "gettext_noop", "N_")
DEFAULT_PLURAL_FUNCTIONS = ("ngettext", "lazyNgettext")
DEFAULT_CONTEXT_FUNCTIONS = ("pgettext", "lazyPgettext")
DEFAULT_PLURAL_CONTEXT_FUNCTIONS = ("npgettext", "lazyNpgettext")


class FunctionRole(Enum):
    """What the literal arguments of a translation function stand for."""

    PLAIN = ("msgid",)
    PLURAL = ("msgid", "msgid_plural")
    CONTEXT = ("msgctxt", "msgid")
    PLURAL_CONTEXT = ("msgctxt", "msgid", "msgid_plural")

    @property
    def arguments(self):
        return self.value


class ExtractedUnit(NamedTuple):
    """A message found in a single recognized call."""

    msgid: str
    msgctxt: str = ""
    msgid_plural: Optional[str] = None
    line: int = 0


class FunctionNames:
    """The names of the translation functions, by role.

    Each argument is a list of names or a comma separated string; ``None``
    selects the default names. A name may only have one role.

    >>> names = FunctionNames(functions="_,t")
    >>> names.role_of("t"), names.role_of("ngettext"), names.role_of("foo")
    (<FunctionRole.PLAIN: ('msgid',)>, <FunctionRole.PLURAL: ('msgid', 'msgid_plural')>, None)
    """

    def __init__(
        self,
        functions=None,
        plural_functions=None,
        context_functions=None,
        plural_context_functions=None,
    ):
        self.functions = split_names(functions, DEFAULT_FUNCTIONS)
        self.plural_functions = split_names(plural_functions, DEFAULT_PLURAL_FUNCTIONS)
        self.context_functions = split_names(context_functions, DEFAULT_CONTEXT_FUNCTIONS)
        self.plural_context_functions = split_names(
            plural_context_functions, DEFAULT_PLURAL_CONTEXT_FUNCTIONS
        )
        self._roles = {}
        for role, names in (
            (FunctionRole.PLAIN, self.functions),
            (FunctionRole.PLURAL, self.plural_functions),
            (FunctionRole.CONTEXT, self.context_functions),
            (FunctionRole.PLURAL_CONTEXT, self.plural_context_functions),
        ):
            for name in names:
                other = self._roles.setdefault(name, role)
                if other is not role:
                    msg = (
                        f"Function {name!r} is configured both as a "
                        f"{_role_label(other)} and a {_role_label(role)} function"
                    )
                    raise ConfigurationError(msg)

    def role_of(self, name):
        return self._roles.get(name)

    def __contains__(self, name):
        return name in self._roles

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(functions={self.functions!r}, "
            f"plural_functions={self.plural_functions!r}, "
            f"context_functions={self.context_functions!r}, "
            f"plural_context_functions={self.plural_context_functions!r})"
        )


def _role_label(role):
    return role.name.lower().replace("_", "+")


class _Idle(NamedTuple):
    pass


class _AwaitingParen(NamedTuple):
    role: FunctionRole


class _CollectingArgs(NamedTuple):
    role: FunctionRole
    args: Tuple[str, ...] = ()
    buffer: str = ""
    line: Optional[int] = None


_IDLE = _Idle()


def recognize(tokens, names):
    """Return the :class:`ExtractedUnit` of every translation call in *tokens*.

    *names* is a :class:`FunctionNames`. Calls that cannot be extracted are
    skipped silently.
    """
    units = []
    state = _IDLE
    for token in tokens:
        if isinstance(state, _Idle):
            if token.kind is TokenKind.IDENTIFIER:
                role = names.role_of(token.text)
                if role is not None:
                    state = _AwaitingParen(role)

        elif isinstance(state, _AwaitingParen):
            if token.kind is TokenKind.PUNCTUATOR and token.text == "(":
                state = _CollectingArgs(state.role)
            else:
                state = _IDLE

        elif token.kind in (TokenKind.STRING, TokenKind.NUMERIC):
            try:
                value = decode_literal(token)
            except LiteralError:
                state = _IDLE
            else:
                state = state._replace(buffer=state.buffer + value)

        elif token.kind is TokenKind.PUNCTUATOR and token.text == "+":
            pass

        elif token.kind is TokenKind.IDENTIFIER:
            state = _IDLE

        else:
            state = _close_argument(state, token, units)
    return units


def _close_argument(state, token, units):
    """Handle an argument boundary; return the next state."""
    args = (*state.args, state.buffer)
    line = token.line if state.line is None else state.line
    if len(args) < len(state.role.arguments):
        return _CollectingArgs(state.role, args, "", line)
    fields = dict(zip(state.role.arguments, args))
    # The empty msgid is reserved for the catalog header.
    if fields["msgid"]:
        units.append(ExtractedUnit(line=line, **fields))
    return _IDLE


def extract_script(source, names, jsx=False, lineno=1):  # noqa: FBT002
    """Tokenize JavaScript *source* and return its :class:`ExtractedUnit` list.

    Raises :class:`~jsgettext.lexer.ScriptSyntaxError` if *source* cannot be
    tokenized.
    """
    return recognize(tokenize(source, jsx=jsx, lineno=lineno), names)
