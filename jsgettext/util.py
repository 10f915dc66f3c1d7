import os.path

MARKUP_EXTENSIONS = ("html", "htm", "xhtml", "xml", "twig")
JSX_EXTENSIONS = ("jsx",)


class JsGettextError(Exception):
    """Base class for all jsgettext errors."""


class ConfigurationError(JsGettextError):
    """Invalid extraction settings, e.g. a function name given several roles."""


def split_names(value, default=()):
    """Normalize a function name setting to a list of names.

    Accepts ``None`` (use *default*), a comma separated string or any
    iterable of strings:

    >>> split_names("_, gettext")
    ['_', 'gettext']
    >>> split_names(None, ["N_"])
    ['N_']
    """
    if value is None:
        return list(default)
    if isinstance(value, str):
        value = value.split(",")
    return [name.strip() for name in value if name and name.strip()]


def source_kind_for(filename):
    """Return ``"markup"``, ``"jsx"`` or ``"js"`` depending on the extension."""
    ext = os.path.splitext(filename)[1].lstrip(".").lower()
    if ext in MARKUP_EXTENSIONS:
        return "markup"
    if ext in JSX_EXTENSIONS:
        return "jsx"
    return "js"


def line_offsets(source):
    """Return the offsets at which each ``\\n`` separated line of *source* starts.

    ``line_offsets(source)[lineno - 1]`` is the offset of line *lineno*.
    """
    offsets = [0]
    pos = source.find("\n")
    while pos != -1:
        offsets.append(pos + 1)
        pos = source.find("\n", pos + 1)
    return offsets
