"""
Options-aware argument formatting

format_with_options() joins a console call's arguments into one line the way
a printf-style console does: the first string may carry %-directives that
consume following arguments, every remaining argument is appended after a
space, and non-string values are pretty-printed (and highlighted with pygments
when the "colors" option is on).

Supported directives:
    %s  str() for strings and numbers, inspected otherwise
    %d  number           %i  integer         %f  float
    %j  JSON             %o / %O  inspected value
    %c  consumes a CSS argument and prints nothing
    %%  a literal percent sign
"""

import inspect as pyinspect
import json
import math
import pprint
import re
from typing import Any, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pygments import highlight
from pygments.lexers import PythonLexer
from pygments.formatters import TerminalFormatter

from ..config import appsettings


_DIRECTIVE_PATTERN = re.compile(r"%[sdifjoOc%]")


class InspectOptions(BaseModel):
    """
    Options controlling how non-string values are rendered

    Unknown keys are ignored so option objects written for other consoles
    can be passed through unchanged.

    Attributes:
        colors: Highlight inspected values with ANSI colors
        depth: Nesting levels shown before eliding with "..." (None = all)
        width: Line width before pretty-printing wraps (alias breakLength)
        compact: Pack short sequences onto shared lines
        sort_dicts: Sort mapping keys (alias sorted)
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    colors: bool = False
    depth: Optional[int] = Field(default=2, ge=0)
    width: int = Field(default=80, ge=1, alias="breakLength")
    compact: bool = False
    sort_dicts: bool = Field(default=False, alias="sorted")


def inspect_value(value: Any, options: InspectOptions) -> str:
    """
    Render a value for display.

    Args:
        value: Any object
        options: Validated inspect options

    Returns:
        Pretty-printed text, highlighted when options.colors is set
    """
    if pyinspect.isfunction(value) or pyinspect.ismethod(value) or pyinspect.isbuiltin(value):
        text = f"[Function: {value.__name__}]"
    else:
        # pprint counts the outermost container as a level
        depth = None if options.depth is None else options.depth + 1
        text = pprint.pformat(
            value,
            width=options.width,
            depth=depth,
            compact=options.compact,
            sort_dicts=options.sort_dicts,
        )

    if not options.colors:
        return text

    formatter = TerminalFormatter(bg=appsettings.inspect_background)
    return highlight(text, PythonLexer(), formatter).rstrip("\n")


def _number_format(value: Any) -> str:
    """Render %d and %f: integral numbers without a fraction, NaN when not numeric"""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return "NaN"
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer():
        return str(int(number))
    return str(number)


def _integer_format(value: Any) -> str:
    try:
        return str(int(float(value)))
    except (TypeError, ValueError, OverflowError):
        return "NaN"


def _json_format(value: Any) -> str:
    try:
        return json.dumps(value, separators=(",", ":"), default=repr)
    except ValueError:
        return "[Circular]"


def _directive_apply(directive: str, value: Any, options: InspectOptions) -> str:
    """Render one consumed argument for a directive"""
    if directive == "%s":
        if isinstance(value, (str, int, float)):
            return str(value)
        return inspect_value(value, options)
    if directive == "%d":
        return _number_format(value)
    if directive == "%i":
        return _integer_format(value)
    if directive == "%f":
        return _number_format(value)
    if directive == "%j":
        return _json_format(value)
    if directive == "%c":
        return ""
    # %o and %O
    return inspect_value(value, options)


def format_with_options(options: Optional[Mapping[str, Any]], *args: Any) -> str:
    """
    Format console arguments into a single string.

    Args:
        options: Inspect options mapping (see InspectOptions); None or empty
                 uses plain defaults
        *args: Console arguments; the first may be a format string

    Returns:
        The formatted line (without a trailing newline)

    Raises:
        pydantic.ValidationError: If an option has an invalid value

    Example:
        >>> format_with_options({}, "%s:%s", "foo", "bar", "baz")
        'foo:bar baz'
        >>> format_with_options({}, "%s:%s", "foo")
        'foo:%s'
    """
    inspect_options = InspectOptions.model_validate(dict(options or {}))

    if not args:
        return ""

    remaining: Iterator[Any] = iter(args[1:])
    parts: list[str] = []
    first = args[0]

    if isinstance(first, str):
        if len(args) == 1:
            return first

        exhausted = False

        def directive_replace(match: "re.Match[str]") -> str:
            nonlocal exhausted
            directive = match.group(0)
            if directive == "%%":
                return "%"
            if exhausted:
                return directive
            try:
                value = next(remaining)
            except StopIteration:
                exhausted = True
                return directive
            return _directive_apply(directive, value, inspect_options)

        parts.append(_DIRECTIVE_PATTERN.sub(directive_replace, first))
    else:
        parts.append(inspect_value(first, inspect_options))

    for value in remaining:
        parts.append(value if isinstance(value, str) else inspect_value(value, inspect_options))

    return " ".join(parts)
