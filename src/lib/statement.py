"""
Styled statement builder

A Console collects style tokens, payloads and CSS declarations through
chainable calls, then a terminating call (log, info, group, group_collapsed)
merges them, optionally formats them, prints them through the sink and
resets everything it collected.

Every Console owns its pending state. Build one statement per instance, or
flush before starting the next one on the same instance.

Example:
    >>> console = Console()
    >>> console.fg("red", "Red ").fg("green", "Green ").fg("blue", "Blue").close().log()
    # Prints 'Red Green Blue' in red, green and blue respectively.

    >>> console.bg("black").fg("red", "text").close().log()
    # One fused string: black background, red text, then reset.

    >>> console.fg("red").close().log("same as above")
    # Tokens armed without text wait for the next string.
"""

from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from ..config import appsettings
from ..models.statement import StyleToken, Payload, PendingStatement, FormatOptions
from ..models.styles import StyleKind, Channel
from .ansi import StyleRegistry, styles, RESET
from .colors import hex_to_ansi, declaration_case
from .merge import css_inject, statement_merge
from .log import LOG

Formatter = Callable[..., str]

# Sink methods forwarded untouched: no styling, no pending state involved
PASSTHROUGH_METHODS = frozenset({
    "warn",
    "error",
    "debug",
    "trace",
    "table",
    "dir",
    "dirxml",
    "count",
    "count_reset",
    "time",
    "time_end",
    "time_log",
    "group_end",
    "clear",
    "assert_",
    "profile",
    "profile_end",
    "time_stamp",
})

# Default format options the builder returns to after every flush; shared
# by every builder, so read-only
DEFAULT_FORMAT_OPTIONS: FormatOptions = MappingProxyType(appsettings.formatOptions_default())


class Console:
    """
    Chainable builder for one styled statement at a time

    Attributes:
        sink: Object with log/info/group/group_collapsed (and pass-through) methods
        formatter: Options-aware formatter, or None when the sink has none
        registry: Named style table
        pending: Tokens, payloads and CSS groups collected since the last flush
        format_options: Options used by the next flush
    """

    DEFAULT_FORMAT_OPTIONS = DEFAULT_FORMAT_OPTIONS

    def __init__(
        self,
        sink: Any = None,
        formatter: Optional[Formatter] = None,
        registry: Optional[StyleRegistry] = None,
    ) -> None:
        """
        Initialize a builder

        Args:
            sink: Output sink; defaults to a StreamConsole over stdout/stderr
            formatter: Explicit formatter; when omitted the sink's
                       format_with_options attribute is used if it has one
            registry: Style table; defaults to the shared built-in table
        """
        if sink is None:
            from .sink import StreamConsole
            sink = StreamConsole()
        self.sink = sink
        self.formatter: Optional[Formatter] = (
            formatter if formatter is not None else getattr(sink, "format_with_options", None)
        )
        self.registry: StyleRegistry = registry if registry is not None else styles
        self.pending: PendingStatement = PendingStatement()
        self.format_options: Optional[FormatOptions] = DEFAULT_FORMAT_OPTIONS

    # ------------------------------------------------------------------
    # Builder
    # ------------------------------------------------------------------

    def _prepare(self, token: Optional[str] = None, *values: Any) -> "Console":
        """
        Append an optional style token followed by values.

        Calling with neither is a no-op that still returns the builder.
        """
        items: list = []
        if token:
            items.append(StyleToken(token))
        items.extend(Payload(value) for value in values)
        if not items:
            return self

        self.pending.items_extend(items)
        return self

    def raw(self, *values: Any) -> "Console":
        """Add unstyled values"""
        return self._prepare(None, *values)

    def styled(self, token: str, *values: Any) -> "Console":
        """
        Add a style token followed by values.

        With no values the token is armed: it applies to the next string
        added by any later call before the flush.
        """
        return self._prepare(token, *values)

    def style(self, kind: StyleKind, name: str, *values: Any) -> "Console":
        """
        Add a named style from the style table.

        Raises:
            StyleError: If the name is unknown for the kind, or reserved
        """
        return self.styled(self.registry.token_get(kind, name), *values)

    def fg(self, name: str, *values: Any) -> "Console":
        """Set a named text color"""
        return self.style(StyleKind.FOREGROUND, name, *values)

    def bg(self, name: str, *values: Any) -> "Console":
        """Set a named background color"""
        return self.style(StyleKind.BACKGROUND, name, *values)

    def decoration(self, name: str, *values: Any) -> "Console":
        """Apply a text decoration (bright, dim, underscore, blink, reverse, hidden)"""
        return self.style(StyleKind.DECORATION, name, *values)

    def fg_hex(self, color: str, *values: Any) -> "Console":
        """
        Set a custom text color.

        Raises:
            ColorError: If color is not a valid hex value
        """
        return self.styled(hex_to_ansi(color, Channel.FOREGROUND), *values)

    def bg_hex(self, color: str, *values: Any) -> "Console":
        """
        Set a custom background color.

        Raises:
            ColorError: If color is not a valid hex value
        """
        return self.styled(hex_to_ansi(color, Channel.BACKGROUND), *values)

    def close(self) -> "Console":
        """End the styles applied so far"""
        return self._prepare(RESET)

    apply = close

    def css(self, declarations: Optional[Mapping[str, Any]] = None, **properties: Any) -> "Console":
        """
        Add a group of CSS declarations.

        Property names may be camelCase, PascalCase or snake_case; they are
        converted to declaration case. The group is only placed into the
        statement at flush time, so CSS applies to the whole statement.

        Example:
            >>> Console().css({"fontWeight": "bold"}, color="red").log("Stop!")
            # a sink without a formatter receives:
            #   '%cStop!', 'font-weight: bold; color: red'
        """
        merged = {**dict(declarations or {}), **properties}
        separator = appsettings.declaration_separator
        group = separator.join(
            f"{declaration_case(name)}: {value}" for name, value in merged.items()
        )
        self.pending.css_append(group)
        return self

    def options(self, options: Optional[FormatOptions]) -> "Console":
        """
        Replace the format options for the next flush.

        None disables option-aware formatting for that flush only; after any
        flush the options return to DEFAULT_FORMAT_OPTIONS.
        """
        self.format_options = options
        return self

    # ------------------------------------------------------------------
    # Flush
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self.pending.clear()
        self.format_options = DEFAULT_FORMAT_OPTIONS

    def _flush(self, method: str, *args: Any) -> Any:
        """
        Merge the pending statement, reset state and print through the sink.

        Args:
            method: Sink method name
            *args: Trailing values, appended like a final raw() call

        Returns:
            Whatever the sink method returns
        """
        try:
            if args:
                self._prepare(None, *args)

            css_inject(
                self.pending,
                appsettings.css_placeholder,
                appsettings.declaration_separator,
            )
            merged = statement_merge(self.pending.items)
            format_options = self.format_options
        finally:
            self._reset()

        LOG(
            f"{method}: merged {len(merged)} argument(s), options={format_options}",
            level=3,
        )

        emit = getattr(self.sink, method)
        if format_options and self.formatter is not None:
            return emit(self.formatter(format_options, *merged))
        return emit(*merged)

    def log(self, *args: Any) -> Any:
        """
        Print the statement to stdout with a newline.

        Extra arguments are appended to the statement first, so the first
        string can act as a printf-style format:

            >>> Console().log("count: %d", 5)
            count: 5
        """
        return self._flush("log", *args)

    def info(self, *args: Any) -> Any:
        """Alias of log() routed to the sink's info method"""
        return self._flush("info", *args)

    def group(self, *label: Any) -> Any:
        """Print the statement as a group label and indent what follows"""
        return self._flush("group", *label)

    def group_collapsed(self, *label: Any) -> Any:
        return self._flush("group_collapsed", *label)

    groupCollapsed = group_collapsed

    def __getattr__(self, name: str) -> Any:
        if name in PASSTHROUGH_METHODS:
            return getattr(self.sink, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")


def statement(sink: Any = None, **kwargs: Any) -> Console:
    """Start a new statement on a fresh builder"""
    return Console(sink=sink, **kwargs)
