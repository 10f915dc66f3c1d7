"""Command-line interface to jsgettext: extract translatable strings to a .pot file."""

import argparse
import logging
import sys

import jsgettext.extract
from jsgettext.util import ConfigurationError


def _jobs(value):
    """Parse a positive number of worker threads.

    This is intended for usage with the type= argument to argparse.
    """
    try:
        jobs = int(value)
    except ValueError:
        jobs = 0
    if jobs < 1:
        msg = f"Expected a positive number, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return jobs


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "-f",
        "--functions",
        help=(
            "Comma separated names of the translation functions "
            "(default: _,gettext,lazyGettext,gettext_noop,N_)."
        ),
    )
    parser.add_argument(
        "--plural-functions",
        help="Names of the plural translation functions (default: ngettext,lazyNgettext).",
    )
    parser.add_argument(
        "--context-functions",
        help="Names of the context translation functions (default: pgettext,lazyPgettext).",
    )
    parser.add_argument(
        "--plural-context-functions",
        help=(
            "Names of the plural and context translation functions "
            "(default: npgettext,lazyNpgettext)."
        ),
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=_jobs,
        default=1,
        help="Number of files scanned concurrently.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report warnings and errors.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file (.pot).  If unspecified, use stdout.",
    )
    parser.add_argument(
        "files",
        nargs="+",
        metavar="file",
        help="Files to scan, glob patterns are accepted.",
    )

    opts = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if opts.quiet else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        options = jsgettext.extract.ExtractOptions(
            functions=opts.functions,
            plural_functions=opts.plural_functions,
            context_functions=opts.context_functions,
            plural_context_functions=opts.plural_context_functions,
            quiet=opts.quiet,
            jobs=opts.jobs,
        )
    except ConfigurationError as e:
        parser.exit(1, f"{parser.prog}: error: {e}\n")

    try:
        jsgettext.extract.main(opts.files, opts.output, options)
    except OSError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))  # pragma: no cover
