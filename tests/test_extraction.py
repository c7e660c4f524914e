"""Tests for extraction.py: POT template generation.

Sources are written to tmp_path and scanned with Babel's Python extractor.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from getprose.extraction import (
    ExtractionConfig,
    create_pot_file,
    extract_messages,
    write_template,
)

SOURCE = textwrap.dedent(
    '''
    from getprose import Locale, format_int, to_format

    def status(locale: Locale, n: int) -> str:
        # TRANSLATOR: Shown after a sync finished
        title = locale.gettext("Sync complete")
        files = locale.ngettext("one file", "{count} files", n)
        verb = locale.pgettext("verb", "Open")
        tabs = locale.npgettext("browser", "a tab", "{count} tabs", n)
        return to_format(files).arg("count", format_int(n, locale)).format()
    '''
)


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    package = tmp_path / "app"
    package.mkdir()
    (package / "status.py").write_text(SOURCE, encoding="utf-8")
    (package / "other.py").write_text(
        'def f(locale):\n    return locale.gettext("Zebra") + locale.gettext("Apple")\n',
        encoding="utf-8",
    )
    return package


class TestExtractMessages:
    """Message collection from sources."""

    def test_all_call_kinds(self, source_dir: Path) -> None:
        """gettext, ngettext, pgettext and npgettext are recognized."""
        catalog = extract_messages([source_dir])

        assert catalog.get("Sync complete") is not None
        assert catalog.get(("one file", "{count} files")) is not None
        assert catalog.get("Open", context="verb") is not None
        assert catalog.get(("a tab", "{count} tabs"), context="browser") is not None
        assert catalog.get("Open") is None

    def test_translator_comments(self, source_dir: Path) -> None:
        """Tagged comments are attached without the tag."""
        message = extract_messages([source_dir]).get("Sync complete")
        assert message is not None
        assert message.auto_comments == ["Shown after a sync finished"]

    def test_single_file(self, source_dir: Path) -> None:
        """Files are scanned directly."""
        catalog = extract_messages([source_dir / "other.py"])
        assert {message.id for message in catalog if message.id} == {"Apple", "Zebra"}

    def test_missing_path(self, tmp_path: Path) -> None:
        """A path that does not exist is an error."""
        with pytest.raises(FileNotFoundError):
            extract_messages([tmp_path / "nope"])

    def test_empty_keywords_rejected(self) -> None:
        """At least one keyword is required."""
        with pytest.raises(ValueError, match="keywords"):
            ExtractionConfig(keywords={})


class TestWriteTemplate:
    """POT output."""

    def test_contents(self, source_dir: Path, tmp_path: Path) -> None:
        """Contexts, plurals and comments appear in PO syntax."""
        output = create_pot_file(tmp_path / "out" / "source.pot", [source_dir])
        text = output.read_text(encoding="utf-8")

        assert '#. Shown after a sync finished\nmsgid "Sync complete"' in text
        assert 'msgctxt "verb"\nmsgid "Open"' in text
        assert 'msgid "one file"\nmsgid_plural "{count} files"' in text
        assert 'msgctxt "browser"\nmsgid "a tab"\nmsgid_plural "{count} tabs"' in text
        assert text.endswith("\n")

    def test_no_creation_date_by_default(self, source_dir: Path, tmp_path: Path) -> None:
        """The POT-Creation-Date header line is dropped."""
        text = create_pot_file(tmp_path / "a.pot", [source_dir]).read_text(encoding="utf-8")
        assert "POT-Creation-Date" not in text

    def test_keep_creation_date(
        self, source_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The creation date comes from SOURCE_DATE_EPOCH when kept."""
        monkeypatch.setenv("SOURCE_DATE_EPOCH", "1700000000")
        config = ExtractionConfig(no_creation_date=False)

        text = create_pot_file(tmp_path / "a.pot", [source_dir], config).read_text(
            encoding="utf-8"
        )

        assert '"POT-Creation-Date: 2023-11-14' in text

    def test_no_locations_by_default(self, source_dir: Path, tmp_path: Path) -> None:
        """File references are omitted unless requested."""
        text = create_pot_file(tmp_path / "a.pot", [source_dir]).read_text(encoding="utf-8")
        assert "#: " not in text

    def test_with_locations(self, source_dir: Path, tmp_path: Path) -> None:
        """no_location=False writes file:line references."""
        config = ExtractionConfig(no_location=False)
        text = create_pot_file(tmp_path / "a.pot", [source_dir], config).read_text(
            encoding="utf-8"
        )
        assert "#: " in text
        assert "status.py" in text

    def test_sorted(self, source_dir: Path, tmp_path: Path) -> None:
        """Messages are sorted by msgid, not by source order."""
        text = create_pot_file(tmp_path / "a.pot", [source_dir]).read_text(encoding="utf-8")
        assert text.index('msgid "Apple"') < text.index('msgid "Zebra"')

    def test_header_fields(self, source_dir: Path, tmp_path: Path) -> None:
        """Project metadata is written to the header."""
        config = ExtractionConfig(package_name="demo", package_version="2.0")
        text = create_pot_file(tmp_path / "a.pot", [source_dir], config).read_text(
            encoding="utf-8"
        )
        assert "Project-Id-Version: demo 2.0" in text

    def test_omit_header(self, source_dir: Path, tmp_path: Path) -> None:
        """omit_header drops the header entry."""
        config = ExtractionConfig(omit_header=True)
        text = create_pot_file(tmp_path / "a.pot", [source_dir], config).read_text(
            encoding="utf-8"
        )
        assert "Project-Id-Version" not in text
        assert 'msgid "Apple"' in text

    def test_deterministic(
        self, source_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Identical sources give byte-identical templates."""
        monkeypatch.delenv("SOURCE_DATE_EPOCH", raising=False)
        first = create_pot_file(tmp_path / "1.pot", [source_dir]).read_bytes()
        second = create_pot_file(tmp_path / "2.pot", [source_dir]).read_bytes()
        assert first == second

    def test_header_year_from_epoch(
        self, source_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without SOURCE_DATE_EPOCH the header year is 1970."""
        monkeypatch.delenv("SOURCE_DATE_EPOCH", raising=False)
        text = create_pot_file(tmp_path / "a.pot", [source_dir]).read_text(encoding="utf-8")
        assert "Copyright (C) 1970" in text

    def test_invalid_epoch_warns(
        self,
        source_dir: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """A malformed SOURCE_DATE_EPOCH falls back with a warning."""
        monkeypatch.setenv("SOURCE_DATE_EPOCH", "yesterday")
        text = create_pot_file(tmp_path / "a.pot", [source_dir]).read_text(encoding="utf-8")

        assert "Copyright (C) 1970" in text
        assert "SOURCE_DATE_EPOCH" in caplog.text

    def test_write_template_creates_parents(self, source_dir: Path, tmp_path: Path) -> None:
        """Parent directories of the output are created."""
        catalog = extract_messages([source_dir])
        target = write_template(catalog, tmp_path / "deep" / "er" / "t.pot")
        assert target.is_file()
