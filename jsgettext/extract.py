"""Extraction runs: from a list of files (or glob patterns) to a ``.pot`` file.

Files are read and scanned independently, possibly by several worker
threads; their results are then added to the :class:`~jsgettext.catalog.Catalog`
one file at a time, in the order the files were given, by the calling thread.
"""

import glob
import logging
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path
from typing import NamedTuple, Tuple

from jsgettext.catalog import Catalog
from jsgettext.lexer import ScriptSyntaxError
from jsgettext.markup import extract_markup
from jsgettext.pofile import render_pot
from jsgettext.recognizer import ExtractedUnit, FunctionNames, extract_script
from jsgettext.util import ConfigurationError, source_kind_for

log = logging.getLogger(__name__)


class ExtractOptions:
    """Settings of an extraction run.

    The four function name settings accept a list or a comma separated
    string, and default to the usual gettext names. ``quiet`` silences
    progress messages (warnings are still logged) and ``jobs`` is the number
    of files scanned concurrently.

    Raises :class:`~jsgettext.util.ConfigurationError` if a function name is
    given more than one role.
    """

    def __init__(
        self,
        functions=None,
        plural_functions=None,
        context_functions=None,
        plural_context_functions=None,
        quiet=False,  # noqa: FBT002
        jobs=1,
    ):
        self.names = FunctionNames(
            functions=functions,
            plural_functions=plural_functions,
            context_functions=context_functions,
            plural_context_functions=plural_context_functions,
        )
        if jobs < 1:
            msg = f"jobs must be at least 1, got {jobs}"
            raise ConfigurationError(msg)
        self.quiet = quiet
        self.jobs = jobs

    def info(self, msg, *args):
        if not self.quiet:
            log.info(msg, *args)


class UnitResult(NamedTuple):
    """What scanning one file produced."""

    filename: str
    units: Tuple[ExtractedUnit, ...] = ()
    skipped: bool = False


class ExtractionResult(NamedTuple):
    catalog: Catalog
    skipped: int = 0


def expand_paths(patterns):
    """Expand glob *patterns* (``**`` included) into a list of paths.

    Patterns without wildcards, and patterns that match nothing, are kept
    as they are so that a missing file gets reported. Duplicates are dropped.
    """
    filenames = []
    seen = set()
    for pattern in patterns:
        matches = []
        if glob.escape(pattern) != pattern:
            matches = sorted(glob.glob(pattern, recursive=True))
        for filename in matches or [pattern]:
            if filename not in seen:
                seen.add(filename)
                filenames.append(filename)
    return filenames


def extract_source(source, names, kind="js"):
    """Scan *source* text and return its :class:`~jsgettext.recognizer.ExtractedUnit` list.

    *kind* is ``"js"``, ``"jsx"`` or ``"markup"`` (see
    :func:`jsgettext.util.source_kind_for`).
    """
    if kind == "markup":
        return extract_markup(source, names)
    return extract_script(source, names, jsx=kind == "jsx")


def extract_file(filename, options=None):
    """Scan one file and return a :class:`UnitResult`.

    Missing, unreadable and syntactically broken files are logged and marked
    as skipped; directories are ignored.
    """
    if options is None:
        options = ExtractOptions()
    if not os.path.isfile(filename):
        if os.path.isdir(filename):
            return UnitResult(filename)
        log.warning("File not found: %s", filename)
        return UnitResult(filename, skipped=True)

    options.info("  * Extracting strings from '%s'", filename)
    try:
        source = Path(filename).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.warning("Unable to read %s: %s", filename, e)
        return UnitResult(filename, skipped=True)

    try:
        units = extract_source(source, options.names, kind=source_kind_for(filename))
    except ScriptSyntaxError as e:
        e.filename = filename
        log.warning("Line %d, column %d: %s", e.lineno, e.colno, e.msg)
        log.warning("File skipped due to syntax errors: %s", filename)
        return UnitResult(filename, skipped=True)
    return UnitResult(filename, tuple(units))


def extract_files(filenames, options=None, catalog=None):
    """Scan *filenames* and add their messages to *catalog* (a new one by default).

    Returns an :class:`ExtractionResult` with the catalog and the number of
    skipped files.
    """
    if options is None:
        options = ExtractOptions()
    if catalog is None:
        catalog = Catalog()
    skipped = 0
    with ThreadPoolExecutor(max_workers=options.jobs) as executor:
        for result in executor.map(partial(extract_file, options=options), filenames):
            if result.skipped:
                skipped += 1
            else:
                catalog.add(result.filename, result.units)
    return ExtractionResult(catalog, skipped)


def main(js_files, output=None, options=None):
    """Extract the messages of *js_files* and write the template to *output*.

    *js_files* may contain glob patterns. *output* is a path, or ``None``
    for standard output. Errors while writing are logged and re-raised.
    """
    if options is None:
        options = ExtractOptions()
    result = extract_files(expand_paths(js_files), options)

    # A msgid found under several contexts counts once.
    msgids = {entry.msgid for entry in result.catalog}
    summary = f"{len(msgids)} string(s) extracted"
    if result.skipped:
        summary += f", {result.skipped} file(s) skipped."
    else:
        summary += "."
    options.info("%s", summary)

    text = render_pot(result.catalog)
    if output is None or output == "-":
        sys.stdout.write(text)
        sys.stdout.flush()
        return result
    try:
        Path(output).write_bytes(text.encode("utf-8"))
    except OSError as e:
        log.error("An error occurred: %s", e)  # noqa: TRY400
        raise
    options.info("Translation template written: %s", output)
    return result
