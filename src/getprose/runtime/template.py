"""Template formatting: substitute named placeholders with rendered values.

A template is a resolved message string with ``{name}`` placeholders, e.g.
``"{count} files in {folder}"``. Argument values are plain strings that were
already rendered for the locale (see format_int, format_date); this module
never interprets them.

Rules:
    - Literal text is copied verbatim.
    - ``{`` opens a placeholder that ends at the next ``}``. No matching ``}``
      before the end of the template is a MalformedTemplateError.
    - A ``}`` outside a placeholder is literal text.
    - Names are opaque and case-sensitive.
    - Values are inserted as-is and never rescanned (single pass).
    - The first placeholder without an argument raises MissingArgumentError.
    - Arguments that no placeholder uses are ignored.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from getprose.constants import PLACEHOLDER_END, PLACEHOLDER_START
from getprose.diagnostics import (
    ErrorTemplate,
    MalformedTemplateError,
    MissingArgumentError,
    TemplateError,
)

__all__ = [
    "FormatBuilder",
    "Placeholder",
    "TemplateSegment",
    "TextElement",
    "format_template",
    "parse_template",
    "placeholder_names",
    "to_format",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TextElement:
    """Literal text between placeholders."""

    value: str


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Named placeholder.

    Attributes:
        name: Text between the markers
        position: Offset of the opening marker in the template
    """

    name: str
    position: int


type TemplateSegment = TextElement | Placeholder


def parse_template(template: str) -> tuple[TemplateSegment, ...]:
    """Split a template into literal text and placeholders.

    Args:
        template: Template text

    Returns:
        Segments in template order; adjacent literal text is merged

    Raises:
        MalformedTemplateError: If a placeholder is never closed

    Example:
        >>> parse_template("{count} files")
        (Placeholder(name='count', position=0), TextElement(value=' files'))
    """
    segments: list[TemplateSegment] = []
    pos = 0
    length = len(template)

    while pos < length:
        start = template.find(PLACEHOLDER_START, pos)
        if start == -1:
            segments.append(TextElement(template[pos:]))
            break

        if start > pos:
            segments.append(TextElement(template[pos:start]))

        end = template.find(PLACEHOLDER_END, start + len(PLACEHOLDER_START))
        if end == -1:
            raise MalformedTemplateError(
                ErrorTemplate.unterminated_placeholder(start),
                template=template,
                position=start,
            )

        segments.append(Placeholder(template[start + len(PLACEHOLDER_START) : end], start))
        pos = end + len(PLACEHOLDER_END)

    return tuple(segments)


def placeholder_names(template: str) -> frozenset[str]:
    """Return the names of all placeholders in `template`.

    Useful in tests that check each message's arguments against the
    translations shipped for it.

    Raises:
        MalformedTemplateError: If a placeholder is never closed
    """
    return frozenset(
        segment.name for segment in parse_template(template) if isinstance(segment, Placeholder)
    )


def format_template(template: str, args: Mapping[str, str]) -> str:
    """Substitute placeholders in `template` with `args`.

    Args:
        template: Template text
        args: Rendered value for each placeholder name

    Returns:
        The formatted string

    Raises:
        MalformedTemplateError: If a placeholder is never closed
        MissingArgumentError: For the first placeholder without an argument

    Example:
        >>> format_template("{count} files", {"count": "20"})
        '20 files'
    """
    parts: list[str] = []
    for segment in parse_template(template):
        match segment:
            case TextElement(value=value):
                parts.append(value)
            case Placeholder(name=name):
                try:
                    parts.append(args[name])
                except KeyError:
                    raise MissingArgumentError(
                        ErrorTemplate.missing_argument(name), template=template, name=name
                    ) from None
    return "".join(parts)


class FormatBuilder:
    """Accumulates named arguments for one template, then formats it once.

    Arguments are added one at a time (or in bulk) in any order; adding the
    same name again overwrites the earlier value. format() finalizes the
    builder, after which it cannot be used again.

    Example:
        >>> (
        ...     to_format("{count} strings")
        ...     .arg("count", format_int(20, Locale.DE_DE))
        ...     .format()
        ... )
        '20 strings'
    """

    __slots__ = ("_args", "_finalized", "_template")

    def __init__(self, template: str) -> None:
        """Create a builder for `template`.

        Args:
            template: Template text, typically a Catalog Lookup result
        """
        self._template = template
        self._args: dict[str, str] = {}
        self._finalized = False

    def __repr__(self) -> str:
        return f"FormatBuilder({self._template!r}, args={sorted(self._args)})"

    @property
    def template(self) -> str:
        """The template being formatted."""
        return self._template

    def arg(self, name: str, value: str) -> FormatBuilder:
        """Add one argument.

        Args:
            name: Placeholder name
            value: Rendered value, inserted verbatim

        Returns:
            self, for chaining

        Raises:
            TypeError: If value is not a str (render numbers and dates first)
            RuntimeError: If the builder was already finalized
        """
        self._check_open()
        if not isinstance(value, str):
            msg = (
                f"Argument '{name}' must be a rendered str, not {type(value).__name__}; "
                "use format_int() or format_date() first"
            )
            raise TypeError(msg)
        self._args[name] = value
        return self

    def args(self, values: Mapping[str, str]) -> FormatBuilder:
        """Add every argument in `values`.

        Returns:
            self, for chaining
        """
        for name, value in values.items():
            self.arg(name, value)
        return self

    def format(self) -> str:
        """Format the template and finalize the builder.

        Returns:
            The formatted string

        Raises:
            MalformedTemplateError: If a placeholder is never closed
            MissingArgumentError: For the first placeholder without an argument
            RuntimeError: If the builder was already finalized
        """
        self._check_open()
        self._finalized = True
        return format_template(self._template, self._args)

    def format_or_template(self) -> str:
        """Format the template, falling back to the raw template on error.

        For display paths where broken translation content must not take down
        the caller. The error is logged as a warning.

        Returns:
            The formatted string, or the unmodified template

        Raises:
            RuntimeError: If the builder was already finalized
        """
        try:
            return self.format()
        except TemplateError as e:
            logger.warning("Returning unformatted template %r: %s", self._template, e)
            return self._template

    def _check_open(self) -> None:
        if self._finalized:
            msg = "FormatBuilder was already finalized by format()"
            raise RuntimeError(msg)


def to_format(template: str) -> FormatBuilder:
    """Start formatting `template`.

    Example:
        >>> to_format("Hello, {name}!").arg("name", "Ada").format()
        'Hello, Ada!'
    """
    return FormatBuilder(template)
