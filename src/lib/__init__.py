"""
stylog - Chainable ANSI/CSS styling for console output

Collects style tokens and payloads, merges them into styled strings and
prints them through a console-style sink.
"""

__version__ = "1.0.0"

from .statement import Console, statement, DEFAULT_FORMAT_OPTIONS
from .ansi import StyleRegistry, StyleError, styles, RESET
from .colors import ColorError, hex_to_ansi, declaration_case
from .format import format_with_options, InspectOptions
from .sink import StreamConsole
from .log import LOG, state_connectToLogger

__all__ = [
    "Console",
    "statement",
    "DEFAULT_FORMAT_OPTIONS",
    "StyleRegistry",
    "StyleError",
    "styles",
    "RESET",
    "ColorError",
    "hex_to_ansi",
    "declaration_case",
    "format_with_options",
    "InspectOptions",
    "StreamConsole",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
