import logging
import re

import pytest

from jsgettext.catalog import Catalog
from jsgettext.extract import (
    ExtractOptions,
    expand_paths,
    extract_file,
    extract_files,
    extract_source,
    main,
)
from jsgettext.recognizer import ExtractedUnit
from jsgettext.util import ConfigurationError

_date_re = re.compile(r"(POT-Creation-Date|PO-Revision-Date): [^\\]*")


def strip_dates(text):
    return _date_re.sub(r"\1: YEAR-MO-DA HO:MI+ZONE", text)


@pytest.fixture
def sources(tmp_path):
    (tmp_path / "a.js").write_text('_("Shared");\n_("Only in a");\n', encoding="utf-8")
    (tmp_path / "b.js").write_text('\n\n_("Shared");\n', encoding="utf-8")
    (tmp_path / "broken.js").write_text('_("ok");\nvar s = "open;\n', encoding="utf-8")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "c.jsx").write_text('const c = <i>{_("Nested")}</i>;\n', encoding="utf-8")
    (sub / "page.html").write_text('<p stonejs>Page</p>\n', encoding="utf-8")
    return tmp_path


class TestExtractOptions:
    def test_defaults(self):
        options = ExtractOptions()
        assert options.names.plural_functions == ["ngettext", "lazyNgettext"]
        assert (options.quiet, options.jobs) == (False, 1)

    def test_invalid_jobs(self):
        with pytest.raises(ConfigurationError, match="jobs must be at least 1"):
            ExtractOptions(jobs=0)

    def test_conflicting_names(self):
        with pytest.raises(ConfigurationError):
            ExtractOptions(functions="t", context_functions="t")


def test_extract_source_kinds(names):
    assert extract_source('_("js")', names) == [ExtractedUnit("js", line=1)]
    assert extract_source('<b>{_("jsx")}</b>', names, kind="jsx") == [ExtractedUnit("jsx", line=1)]
    assert extract_source("<b stonejs>html</b>", names, kind="markup") == [ExtractedUnit("html", line=1)]


def test_expand_paths(sources, monkeypatch):
    monkeypatch.chdir(sources)
    assert expand_paths(["*.js", "a.js", "missing.js", "nothing/*.js"]) == [
        "a.js",
        "b.js",
        "broken.js",
        "missing.js",
        "nothing/*.js",
    ]
    assert expand_paths(["**/*.jsx"]) == ["sub/c.jsx"]


class TestExtractFile:
    def test_units(self, sources):
        result = extract_file(str(sources / "a.js"))
        assert not result.skipped
        assert result.units == (ExtractedUnit("Shared", line=1), ExtractedUnit("Only in a", line=2))

    def test_kind_from_extension(self, sources):
        assert [u.msgid for u in extract_file(str(sources / "sub" / "c.jsx")).units] == ["Nested"]
        assert [u.msgid for u in extract_file(str(sources / "sub" / "page.html")).units] == ["Page"]

    def test_syntax_error(self, sources, caplog):
        filename = str(sources / "broken.js")
        result = extract_file(filename)
        assert result.skipped
        assert result.units == ()
        assert "Line 2, column 9: Unterminated string constant" in caplog.text
        assert f"File skipped due to syntax errors: {filename}" in caplog.text

    def test_missing_file(self, sources, caplog):
        result = extract_file(str(sources / "missing.js"))
        assert result.skipped
        assert "File not found:" in caplog.text

    def test_directory_is_ignored(self, sources, caplog):
        result = extract_file(str(sources / "sub"))
        assert not result.skipped
        assert result.units == ()
        assert caplog.text == ""

    def test_undecodable_file(self, tmp_path, caplog):
        filename = tmp_path / "latin1.js"
        filename.write_bytes('_("caf\xe9")'.encode("latin-1"))
        assert extract_file(str(filename)).skipped
        assert "Unable to read" in caplog.text

    def test_progress_message(self, sources, caplog):
        caplog.set_level(logging.INFO)
        extract_file(str(sources / "a.js"))
        assert "  * Extracting strings from" in caplog.text

    def test_quiet(self, sources, caplog):
        caplog.set_level(logging.INFO)
        extract_file(str(sources / "a.js"), ExtractOptions(quiet=True))
        assert caplog.text == ""


class TestExtractFiles:
    def test_aggregation(self, sources, monkeypatch):
        monkeypatch.chdir(sources)
        result = extract_files(["b.js", "a.js", "broken.js", "missing.js"])
        assert result.skipped == 2
        assert [m.msgid for m in result.catalog] == ["Shared", "Only in a"]
        assert result.catalog.get("Shared").references == [("b.js", 3), ("a.js", 1)]

    def test_existing_catalog(self, sources, monkeypatch):
        monkeypatch.chdir(sources)
        catalog = Catalog()
        catalog.add_message("Earlier")
        result = extract_files(["a.js"], catalog=catalog)
        assert result.catalog is catalog
        assert [m.msgid for m in catalog] == ["Earlier", "Shared", "Only in a"]

    @pytest.mark.parametrize("jobs", [2, 8])
    def test_concurrent_jobs_keep_order(self, sources, monkeypatch, creation_date, jobs):
        monkeypatch.chdir(sources)
        files = ["sub/page.html", "b.js", "a.js", "broken.js", "sub/c.jsx"]
        serial = extract_files(files, ExtractOptions(jobs=1), Catalog(creation_date))
        concurrent = extract_files(files, ExtractOptions(jobs=jobs), Catalog(creation_date))
        assert concurrent.skipped == serial.skipped == 1
        assert [(m.msgid, m.references) for m in concurrent.catalog] == [
            (m.msgid, m.references) for m in serial.catalog
        ]


class TestMain:
    def test_write_output(self, sources, monkeypatch, caplog):
        caplog.set_level(logging.INFO)
        monkeypatch.chdir(sources)
        result = main(["*.js"], "messages.pot")
        text = (sources / "messages.pot").read_text(encoding="utf-8")
        assert '#: a.js:1\n#: b.js:3\nmsgid "Shared"' in text
        assert len(result.catalog) == 2
        assert "2 string(s) extracted, 1 file(s) skipped." in caplog.text
        assert "Translation template written: messages.pot" in caplog.text

    def test_summary_without_skipped_files(self, sources, monkeypatch, caplog):
        caplog.set_level(logging.INFO)
        monkeypatch.chdir(sources)
        main(["a.js"], "messages.pot")
        assert "2 string(s) extracted." in caplog.text

    def test_summary_counts_msgids_once(self, tmp_path, monkeypatch, caplog):
        caplog.set_level(logging.INFO)
        monkeypatch.chdir(tmp_path)
        (tmp_path / "menu.js").write_text(
            '_("Open"); pgettext("menu", "Open"); pgettext("file", "Open"); _("Close");\n',
            encoding="utf-8",
        )
        result = main(["menu.js"], "messages.pot")
        assert len(result.catalog) == 4
        assert "2 string(s) extracted." in caplog.text

    def test_idempotent(self, sources, monkeypatch):
        monkeypatch.chdir(sources)
        main(["*.js", "sub/*"], "first.pot")
        main(["*.js", "sub/*"], "second.pot")
        first = strip_dates((sources / "first.pot").read_text(encoding="utf-8"))
        second = strip_dates((sources / "second.pot").read_text(encoding="utf-8"))
        assert first == second

    def test_stdout(self, sources, monkeypatch, capsys):
        monkeypatch.chdir(sources)
        main(["a.js"], "-")
        out = capsys.readouterr().out
        assert out.startswith('msgid ""\nmsgstr ""\n')
        assert 'msgid "Only in a"' in out

    def test_write_failure(self, sources, monkeypatch, caplog):
        monkeypatch.chdir(sources)
        with pytest.raises(OSError):
            main(["a.js"], "no/such/dir/messages.pot")
        assert "An error occurred:" in caplog.text
