"""
Color and CSS naming helpers

Pure functions with no state:
  - hex_to_ansi: "#5AC981" -> 24-bit SGR sequence for a channel
  - declaration_case: "fontSize" -> "font-size"
"""

import re

from ..models.styles import Channel


class ColorError(ValueError):
    """Raised when a hex color or SGR channel is malformed"""
    pass


_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def hex_to_ansi(hex_color: str, channel: int = Channel.FOREGROUND) -> str:
    """
    Convert a hex color to an ANSI true-color escape sequence.

    Args:
        hex_color: "#RRGGBB", "RRGGBB", "#RGB" or "RGB" (case-insensitive)
        channel: 38 for foreground, 48 for background

    Returns:
        Escape sequence such as "\\x1b[38;2;90;201;129m"

    Raises:
        ColorError: If the color is not a valid hex value or the channel is unknown

    Example:
        >>> hex_to_ansi("#5AC981", 38)
        '\\x1b[38;2;90;201;129m'
    """
    if channel not in (Channel.FOREGROUND, Channel.BACKGROUND):
        raise ColorError(f"Unknown color channel {channel}, expected 38 or 48")

    match = _HEX_PATTERN.match(hex_color.strip()) if isinstance(hex_color, str) else None
    if match is None:
        raise ColorError(f"Invalid hex color: {hex_color!r}")

    digits: str = match.group(1)
    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)

    red, green, blue = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return f"\x1b[{channel};2;{red};{green};{blue}m"


def declaration_case(name: str) -> str:
    """
    Convert a CSS property name to its declaration form.

    camelCase and PascalCase split on capitals (a run of capitals is one
    word, so an acronym stays together), underscores and spaces become
    hyphens. A leading capital yields a leading hyphen, which is how vendor
    prefixes are written in JavaScript style objects.

    Examples:
        >>> declaration_case("fontSize")
        'font-size'
        >>> declaration_case("WebkitTextStroke")
        '-webkit-text-stroke'
        >>> declaration_case("backgroundURL")
        'background-url'
        >>> declaration_case("background_color")
        'background-color'
        >>> declaration_case("border-top")
        'border-top'
    """
    name = re.sub(r"[\s_]+", "-", name.strip())
    return re.sub(r"[A-Z]+(?![a-z])|[A-Z]", lambda m: "-" + m.group(0).lower(), name)
