"""Runtime formatting: template substitution and locale-aware renderers.

Submodules:
    template - parse_template, format_template, FormatBuilder, to_format
    numbers  - format_int, format_float
    dates    - format_date, format_datetime

Python 3.13+.
"""

from .dates import format_date, format_datetime
from .numbers import format_float, format_int
from .template import (
    FormatBuilder,
    Placeholder,
    TemplateSegment,
    TextElement,
    format_template,
    parse_template,
    placeholder_names,
    to_format,
)

__all__ = [
    "FormatBuilder",
    "Placeholder",
    "TemplateSegment",
    "TextElement",
    "format_date",
    "format_datetime",
    "format_float",
    "format_int",
    "format_template",
    "parse_template",
    "placeholder_names",
    "to_format",
]
