"""
Style specification and metadata models

Defines the kinds of ANSI styles and the per-style metadata used by the
style registry for lookup and listing.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Set


class StyleKind(Enum):
    """
    Kinds of named styles

    Each kind has its own namespace of names, so "red" exists both as a
    foreground and as a background style.
    """
    FOREGROUND = "foreground"    # text color
    BACKGROUND = "background"    # cell background color
    DECORATION = "decoration"    # bright, dim, underscore, ...


class Channel:
    """SGR channel selectors for 24-bit true colors"""
    FOREGROUND = 38
    BACKGROUND = 48


@dataclass(frozen=True)
class StyleSpec:
    """
    Specification for a named style

    Attributes:
        name: Style name (e.g., "red", "underscore")
        kind: Namespace the name belongs to
        code: The ANSI escape sequence emitted for the style
        description: Human-readable description
        aliases: Alternative names for the style
    """
    name: str
    kind: StyleKind
    code: str
    description: str = ""
    aliases: List[str] = field(default_factory=list)


# Reserved styles that are never exposed through name lookup
RESERVED_STYLES: Set[str] = {
    'reset',   # produced only by Console.close()
}


def reserved_is(style_name: str) -> bool:
    """Check if a style name is reserved"""
    return style_name in RESERVED_STYLES
