"""Build-time extraction of translatable strings into a POT template.

Scans Python sources for calls to the gettext-style methods (gettext,
ngettext, pgettext, npgettext) with literal arguments and writes a POT
template for translators. The output is deterministic: messages are sorted,
the header year comes from SOURCE_DATE_EPOCH, and the POT-Creation-Date
line can be dropped, so identical sources give byte-identical files.

Extraction recognizes the Locale methods, whose argument order matches
gettext. Calls through Translator take the locale as first argument and are
not picked up.

Python 3.13+. Uses Babel for extraction and PO writing.
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from babel.messages.catalog import Catalog as MessageCatalog
from babel.messages.extract import extract_from_dir, extract_from_file
from babel.messages.pofile import write_po

from getprose.constants import (
    DEFAULT_COMMENT_TAG,
    DEFAULT_SOURCE_DATE_EPOCH,
    GETTEXT_KEYWORDS,
    POT_CREATION_DATE_PREFIX,
)

__all__ = [
    "ExtractionConfig",
    "create_pot_file",
    "extract_messages",
    "write_template",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractionConfig:
    """Options for POT template generation.

    Attributes:
        package_name: Project name written to the header
        package_version: Project version written to the header
        copyright_holder: Copyright holder written to the header
        comment_tag: Source comments starting with this tag go to translators
        keywords: Babel keywords (function name -> argument positions)
        sort_output: Sort messages by msgid
        no_location: Omit "#: file:line" references
        no_wrap: Do not wrap long lines
        omit_header: Omit the header entry entirely
        no_creation_date: Drop the POT-Creation-Date header line
    """

    package_name: str = "PACKAGE"
    package_version: str = "VERSION"
    copyright_holder: str = "ORGANIZATION"
    comment_tag: str = DEFAULT_COMMENT_TAG
    keywords: dict[str, tuple[int | tuple[int, str], ...] | None] = field(
        default_factory=lambda: dict(GETTEXT_KEYWORDS)
    )
    sort_output: bool = True
    no_location: bool = True
    no_wrap: bool = True
    omit_header: bool = False
    no_creation_date: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If no keywords are configured
        """
        if not self.keywords:
            msg = "keywords must name at least one function"
            raise ValueError(msg)


def _creation_date() -> datetime:
    raw = os.environ.get("SOURCE_DATE_EPOCH", "")
    try:
        epoch = int(raw) if raw else DEFAULT_SOURCE_DATE_EPOCH
    except ValueError:
        logger.warning("Ignoring invalid SOURCE_DATE_EPOCH %r", raw)
        epoch = DEFAULT_SOURCE_DATE_EPOCH
    return datetime.fromtimestamp(epoch, tz=UTC)


def extract_messages(
    paths: Iterable[str | Path], config: ExtractionConfig | None = None
) -> MessageCatalog:
    """Collect translatable strings from Python files and directories.

    Args:
        paths: Files or directories (searched recursively for ``*.py``)
        config: Extraction options (default: ExtractionConfig())

    Returns:
        Babel message catalog holding every extracted message

    Raises:
        FileNotFoundError: If a path does not exist
    """
    cfg = config if config is not None else ExtractionConfig()
    # Babel takes the header comment year from revision_date, or from the
    # wall clock when that is unset.
    build_date = _creation_date()
    catalog = MessageCatalog(
        project=cfg.package_name,
        version=cfg.package_version,
        copyright_holder=cfg.copyright_holder,
        creation_date=build_date,
        revision_date=build_date,
        charset="utf-8",
    )
    comment_tags = (cfg.comment_tag,) if cfg.comment_tag else ()

    for raw_path in sorted(Path(p) for p in paths):
        if raw_path.is_dir():
            for filename, lineno, message, comments, context in extract_from_dir(
                raw_path,
                keywords=cfg.keywords,
                comment_tags=comment_tags,
                strip_comment_tags=True,
            ):
                location = (raw_path / filename).as_posix()
                catalog.add(
                    message,
                    locations=[(location, lineno)],
                    auto_comments=comments,
                    context=context,
                )
        elif raw_path.is_file():
            for lineno, message, comments, context in extract_from_file(
                "python",
                raw_path,
                keywords=cfg.keywords,
                comment_tags=comment_tags,
                strip_comment_tags=True,
            ):
                catalog.add(
                    message,
                    locations=[(raw_path.as_posix(), lineno)],
                    auto_comments=comments,
                    context=context,
                )
        else:
            msg = f"No such file or directory: '{raw_path}'"
            raise FileNotFoundError(msg)

    return catalog


def write_template(
    catalog: MessageCatalog, output: str | Path, config: ExtractionConfig | None = None
) -> Path:
    """Write `catalog` as a POT template.

    Args:
        catalog: Catalog from extract_messages()
        output: Target file; parent directories are created
        config: Extraction options (default: ExtractionConfig())

    Returns:
        Path of the written file
    """
    cfg = config if config is not None else ExtractionConfig()
    buffer = io.BytesIO()
    write_po(
        buffer,
        catalog,
        width=0 if cfg.no_wrap else 76,
        no_location=cfg.no_location,
        omit_header=cfg.omit_header,
        sort_output=cfg.sort_output,
    )

    lines = buffer.getvalue().decode("utf-8").splitlines()
    if cfg.no_creation_date:
        lines = [line for line in lines if not line.startswith(POT_CREATION_DATE_PREFIX)]

    target = Path(output)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text("\n".join(lines) + "\n", encoding="utf-8")

    logger.info("Wrote %d message(s) to %s", len(catalog), target)
    return target


def create_pot_file(
    output: str | Path,
    inputs: Iterable[str | Path],
    config: ExtractionConfig | None = None,
) -> Path:
    """Extract messages from `inputs` and write the POT template to `output`."""
    catalog = extract_messages(inputs, config)
    return write_template(catalog, output, config)
