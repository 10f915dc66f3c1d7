"""The in-memory translation template built during an extraction run."""

from datetime import datetime, timezone

from babel.dates import format_datetime

PLURAL_FORMS = "nplurals=2; plural=(n != 1);"


class MessageEntry:
    """All occurrences of one ``(msgid, msgctxt)`` pair."""

    __slots__ = ("msgid", "msgctxt", "msgid_plural", "references")

    def __init__(self, msgid, msgctxt="", msgid_plural=None):
        self.msgid = msgid
        self.msgctxt = msgctxt
        self.msgid_plural = msgid_plural
        self.references = []

    @property
    def pluralizable(self):
        return self.msgid_plural is not None

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.msgid!r} (context {self.msgctxt!r}, {len(self.references)} references)>"


class Catalog:
    """Messages grouped by context, then by msgid.

    Contexts and messages keep the order in which they were first added, and
    references keep the order in which they were recorded, so rendering a
    catalog twice from the same input gives the same text.

    Catalogs are not thread safe: recognize files concurrently if you like, but
    :meth:`add` their results from a single thread.

    >>> from jsgettext.recognizer import ExtractedUnit
    >>> catalog = Catalog()
    >>> catalog.add("a.js", [ExtractedUnit("Open", line=3), ExtractedUnit("Open", "menu", line=4)])
    >>> catalog.add("b.js", [ExtractedUnit("Open", line=1)])
    >>> [(m.msgctxt, m.msgid, m.references) for m in catalog]
    [('', 'Open', [('a.js', 3), ('b.js', 1)]), ('menu', 'Open', [('a.js', 4)])]
    """

    def __init__(self, creation_date=None):
        if creation_date is None:
            creation_date = datetime.now(timezone.utc).astimezone()
        self.creation_date = creation_date
        self.contexts = {"": {}}

    def add(self, filename, units):
        """Record the :class:`~jsgettext.recognizer.ExtractedUnit` list of one file."""
        for unit in units:
            self.add_message(
                unit.msgid,
                unit.msgctxt,
                filename=filename,
                line=unit.line,
                msgid_plural=unit.msgid_plural,
            )

    def add_message(self, msgid, msgctxt="", filename=None, line=None, msgid_plural=None):
        """Record one occurrence of a message and return its :class:`MessageEntry`."""
        messages = self.contexts.setdefault(msgctxt, {})
        entry = messages.get(msgid)
        if entry is None:
            entry = messages[msgid] = MessageEntry(msgid, msgctxt)
        if entry.msgid_plural is None:
            entry.msgid_plural = msgid_plural
        if filename is not None:
            entry.references.append((filename, line))
        return entry

    def get(self, msgid, msgctxt=""):
        return self.contexts.get(msgctxt, {}).get(msgid)

    def __contains__(self, key):
        msgid, msgctxt = key if isinstance(key, tuple) else (key, "")
        return self.get(msgid, msgctxt) is not None

    def __iter__(self):
        for messages in self.contexts.values():
            yield from messages.values()

    def __len__(self):
        return sum(len(messages) for messages in self.contexts.values())

    @property
    def mime_headers(self):
        """The header fields of the template, in order."""
        date = format_datetime(self.creation_date, "yyyy-MM-dd HH:mmZ", locale="en")
        return [
            ("MIME-Version", "1.0"),
            ("Content-Type", "text/plain; charset=utf-8"),
            ("Content-Transfer-Encoding", "8bit"),
            ("POT-Creation-Date", date),
            ("PO-Revision-Date", date),
            ("Language", "C"),
            ("Plural-Forms", PLURAL_FORMS),
        ]
