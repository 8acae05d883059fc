"""
Statement data models

A pending statement is an ordered list of tagged items: style tokens that
describe how text should look, and payloads that carry what gets printed.
Keeping the two apart means a payload string that happens to look like an
escape sequence is still printed as a payload.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Union


@dataclass(frozen=True)
class StyleToken:
    """
    A style instruction (ANSI escape sequence or the CSS placeholder)

    Attributes:
        code: The literal sequence that ends up in the printed string
    """
    code: str


@dataclass(frozen=True, eq=False)
class Payload:
    """
    A value to be printed

    Compared by identity: two payloads are only the same payload if they
    are the same object, the wrapped value is never compared.

    Attributes:
        value: Any object; only ``str`` values absorb pending style tokens
    """
    value: Any

    def text_is(self) -> bool:
        """Check if the payload is textual and can carry a style prefix"""
        return isinstance(self.value, str)


StatementItem = Union[StyleToken, Payload]

# Inspect options understood by stylog.lib.format.format_with_options
FormatOptions = Mapping[str, Any]


@dataclass
class PendingStatement:
    """
    Mutable state collected between two flushes

    Attributes:
        items: Style tokens and payloads in call order (duplicates allowed)
        css: Joined CSS declaration groups; None until the first css() call,
             so "never requested" stays distinguishable from "empty"
    """
    items: List[StatementItem] = field(default_factory=list)
    css: Optional[List[str]] = field(default=None)

    def items_extend(self, items: Iterable[StatementItem]) -> None:
        """Append items in order"""
        self.items.extend(items)

    def css_append(self, group: str) -> None:
        """Append a joined declaration group, initializing the list on first use"""
        if self.css is None:
            self.css = []
        self.css.append(group)

    def css_has(self) -> bool:
        """Check if at least one declaration group is pending"""
        return bool(self.css)

    def clear(self) -> None:
        """Drop everything collected since the last flush"""
        self.items = []
        self.css = None
