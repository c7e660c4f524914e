"""Command line entry point for POT template extraction.

Usage:
    getprose-extract -o locales/source.pot src/
    getprose-extract --package-name app --package-version 1.2.0 \\
        --with-location -o locales/source.pot src/app tools/report.py

Exit Codes:
    0: Template written
    1: Extraction failed (missing input, unreadable source, write error)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from tokenize import TokenError

from getprose.constants import DEFAULT_COMMENT_TAG
from getprose.extraction import ExtractionConfig, create_pot_file

__all__ = ["main", "parse_args"]

logger = logging.getLogger(__name__)


def parse_args(args: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="getprose-extract",
        description="Extract translatable strings from Python sources into a POT template.",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        help="Python files or directories to scan",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="locales/source.pot",
        help="POT file to write (default: %(default)s)",
    )
    parser.add_argument("--package-name", default="PACKAGE", help="Project name for the header")
    parser.add_argument(
        "--package-version", default="VERSION", help="Project version for the header"
    )
    parser.add_argument(
        "--copyright-holder", default="ORGANIZATION", help="Copyright holder for the header"
    )
    parser.add_argument(
        "--comment-tag",
        default=DEFAULT_COMMENT_TAG,
        help="Tag marking comments for translators (default: %(default)s)",
    )
    parser.add_argument(
        "--with-location",
        action="store_true",
        help="Include file:line references (breaks byte-stable output on refactors)",
    )
    parser.add_argument(
        "--keep-creation-date",
        action="store_true",
        help="Keep the POT-Creation-Date header line",
    )
    parser.add_argument(
        "--omit-header",
        action="store_true",
        help="Do not write the header entry",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to stderr",
    )
    return parser.parse_args(args)


def main(args: Sequence[str] | None = None) -> int:
    """Run extraction and return the process exit code."""
    options = parse_args(args)
    logging.basicConfig(
        level=logging.INFO if options.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = ExtractionConfig(
        package_name=options.package_name,
        package_version=options.package_version,
        copyright_holder=options.copyright_holder,
        comment_tag=options.comment_tag,
        no_location=not options.with_location,
        no_creation_date=not options.keep_creation_date,
        omit_header=options.omit_header,
    )

    try:
        create_pot_file(options.output, options.inputs, config)
    except (OSError, SyntaxError, UnicodeDecodeError, TokenError) as e:
        logger.error("Extraction failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
