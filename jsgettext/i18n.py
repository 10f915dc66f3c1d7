from jsgettext.recognizer import FunctionNames, FunctionRole

_funcnames = {
    FunctionRole.PLAIN: "gettext",
    FunctionRole.PLURAL: "ngettext",
    FunctionRole.CONTEXT: "pgettext",
    FunctionRole.PLURAL_CONTEXT: "npgettext",
}


def _flag(value):
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def extract(fileobj, keywords, comment_tags, options):
    """Babel entry point that extracts translation strings from JavaScript and HTML.

    The function names to look for come from the ``functions``,
    ``plural_functions``, ``context_functions`` and
    ``plural_context_functions`` options (comma separated, the usual gettext
    names by default). Each message is reported under the standard name of
    its role (``gettext``, ``ngettext``, ``pgettext`` or ``npgettext``), so
    Babel's default keywords apply. Set the ``jsx`` option for JSX sources and
    the ``markup`` option for HTML-like documents.
    """
    from jsgettext.extract import extract_source

    names = FunctionNames(
        functions=options.get("functions"),
        plural_functions=options.get("plural_functions"),
        context_functions=options.get("context_functions"),
        plural_context_functions=options.get("plural_context_functions"),
    )
    if _flag(options.get("markup", False)):
        kind = "markup"
    elif _flag(options.get("jsx", False)):
        kind = "jsx"
    else:
        kind = "js"

    source = fileobj.read()
    if isinstance(source, bytes):
        source = source.decode(options.get("encoding", "utf-8"))
    for unit in extract_source(source, names, kind=kind):
        if unit.msgctxt:
            role = FunctionRole.PLURAL_CONTEXT if unit.msgid_plural is not None else FunctionRole.CONTEXT
            messages = (unit.msgctxt, unit.msgid)
        else:
            role = FunctionRole.PLURAL if unit.msgid_plural is not None else FunctionRole.PLAIN
            messages = (unit.msgid,)
        if unit.msgid_plural is not None:
            messages += (unit.msgid_plural,)
        yield (unit.line, _funcnames[role], messages if len(messages) > 1 else messages[0], [])
