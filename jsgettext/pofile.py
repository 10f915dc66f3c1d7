"""Writing a :class:`~jsgettext.catalog.Catalog` as a gettext template (``.pot``)."""

from io import BytesIO

from babel.messages.pofile import normalize

# Control characters left raw by Babel's escaping, in their C escape form.
_control_escapes = str.maketrans({"\a": "\\a", "\b": "\\b", "\f": "\\f", "\v": "\\v"})


def write_pot(fileobj, catalog, width=76):
    """Write *catalog* to the binary file object *fileobj*, UTF-8 encoded.

    The header entry comes first, then one entry per message, context by
    context, in the catalog's order. Strings longer than *width* columns, or
    containing newlines, are folded over several lines.
    """
    blocks = [_header_block(catalog, width)]
    blocks.extend(_message_block(entry, width) for entry in catalog)
    fileobj.write("\n\n".join(blocks).encode("utf-8"))
    fileobj.write(b"\n")


def render_pot(catalog, width=76):
    """Return the template text of *catalog* as a string."""
    buf = BytesIO()
    write_pot(buf, catalog, width=width)
    return buf.getvalue().decode("utf-8")


def _quote(string, width):
    return normalize(string, width=width).translate(_control_escapes)


def _header_block(catalog, width):
    headers = "".join(f"{name}: {value}\n" for name, value in catalog.mime_headers)
    return f'msgid ""\nmsgstr {_quote(headers, width)}'


def _message_block(entry, width):
    lines = [f"#: {filename}:{lineno}" for filename, lineno in entry.references]
    if entry.msgctxt:
        lines.append(f"msgctxt {_quote(entry.msgctxt, width)}")
    lines.append(f"msgid {_quote(entry.msgid, width)}")
    if entry.pluralizable:
        lines.append(f"msgid_plural {_quote(entry.msgid_plural, width)}")
        lines.append('msgstr[0] ""')
        lines.append('msgstr[1] ""')
    else:
        lines.append('msgstr ""')
    return "\n".join(lines)
