"""
stylog - Chainable ANSI/CSS styling for console output

Style text with named colors, hex colors, decorations and CSS declarations,
then print it through a console-style sink.
"""

__version__ = "1.0.0"

from .lib import (
    Console,
    statement,
    StreamConsole,
    StyleError,
    ColorError,
    styles,
    LOG,
    state_connectToLogger,
)
from .models import StyleKind

__all__ = [
    "Console",
    "statement",
    "StreamConsole",
    "StyleError",
    "ColorError",
    "StyleKind",
    "styles",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
