"""
Named ANSI style table for stylog

Maps (kind, name) pairs to escape sequences. The table is read-only once
built; it holds no statement state and is safe to share.
"""

from typing import Dict, List, Optional, Tuple

from ..models.styles import StyleSpec, StyleKind, reserved_is


ESC = "\x1b["

RESET = f"{ESC}0m"


class StyleError(Exception):
    """Raised when a style name is unknown or reserved"""
    pass


_COLORS: List[Tuple[str, int, int, str]] = [
    # name, foreground SGR, background SGR, description
    ("black", 30, 40, "Black"),
    ("red", 31, 41, "Red"),
    ("green", 32, 42, "Green"),
    ("yellow", 33, 43, "Yellow"),
    ("blue", 34, 44, "Blue"),
    ("magenta", 35, 45, "Magenta"),
    ("cyan", 36, 46, "Cyan"),
    ("white", 37, 47, "White"),
    ("gray", 90, 100, "Bright black"),
]

_DECORATIONS: List[Tuple[str, int, str]] = [
    ("bright", 1, "Bold / increased intensity"),
    ("dim", 2, "Decreased intensity"),
    ("underscore", 4, "Underline"),
    ("blink", 5, "Slow blink"),
    ("reverse", 7, "Swap foreground and background"),
    ("hidden", 8, "Conceal"),
]


class StyleRegistry:
    """
    Registry of named style specifications

    Lookups are scoped by StyleKind. The reserved "reset" decoration is
    registered so it can be listed, but name lookup refuses it.
    """

    def __init__(self) -> None:
        """Initialize the registry and register all built-in styles"""
        self.specs: Dict[Tuple[StyleKind, str], StyleSpec] = {}
        self.colorStyles_register()
        self.decorationStyles_register()

    def register(self, spec: StyleSpec) -> None:
        """Register a style specification under its name and aliases"""
        self.specs[(spec.kind, spec.name)] = spec
        for alias in spec.aliases:
            self.specs[(spec.kind, alias)] = spec

    def spec_get(self, kind: StyleKind, name: str) -> Optional[StyleSpec]:
        """Get full style specification, or None if unknown"""
        return self.specs.get((kind, name))

    def token_get(self, kind: StyleKind, name: str) -> str:
        """
        Get the escape sequence for a named style

        Args:
            kind: Namespace to look the name up in
            name: Style name or alias

        Returns:
            The escape sequence

        Raises:
            StyleError: If the name is reserved or not registered for the kind
        """
        if reserved_is(name):
            raise StyleError(f"Style '{name}' is reserved and cannot be set by name")

        spec = self.spec_get(kind, name)
        if spec is None:
            available = ", ".join(self.styles_listByKind(kind))
            raise StyleError(
                f"Unknown {kind.value} style '{name}'. Available: {available}"
            )
        return spec.code

    def styles_listByKind(self, kind: StyleKind) -> List[str]:
        """List primary names of a kind, reserved styles excluded"""
        names: List[str] = []
        for (spec_kind, name), spec in self.specs.items():
            if spec_kind == kind and name == spec.name and not reserved_is(name):
                names.append(name)
        return names

    def colorStyles_register(self) -> None:
        """Register foreground and background colors"""
        for name, fg, bg, description in _COLORS:
            aliases = ["grey"] if name == "gray" else []
            self.register(StyleSpec(
                name=name,
                kind=StyleKind.FOREGROUND,
                code=f"{ESC}{fg}m",
                description=f"{description} text",
                aliases=aliases,
            ))
            self.register(StyleSpec(
                name=name,
                kind=StyleKind.BACKGROUND,
                code=f"{ESC}{bg}m",
                description=f"{description} background",
                aliases=aliases,
            ))

        # Crimson has no basic SGR code, use its 256-color palette index
        self.register(StyleSpec(
            name="crimson",
            kind=StyleKind.FOREGROUND,
            code=f"{ESC}38;5;161m",
            description="Crimson text",
        ))
        self.register(StyleSpec(
            name="crimson",
            kind=StyleKind.BACKGROUND,
            code=f"{ESC}48;5;161m",
            description="Crimson background",
        ))

    def decorationStyles_register(self) -> None:
        """Register text decorations and the reserved reset"""
        for name, sgr, description in _DECORATIONS:
            self.register(StyleSpec(
                name=name,
                kind=StyleKind.DECORATION,
                code=f"{ESC}{sgr}m",
                description=description,
                aliases=["underline"] if name == "underscore" else [],
            ))

        self.register(StyleSpec(
            name="reset",
            kind=StyleKind.DECORATION,
            code=RESET,
            description="Clear every active style",
        ))


# Shared read-only table
styles = StyleRegistry()
