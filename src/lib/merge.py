"""
Statement merging

Turns the tagged items of a pending statement into the argument list handed
to a sink. Style tokens with no text between them stack into one prefix, the
prefix is fused onto the next string payload, and a reset left dangling at
the end is folded back onto the last string.

Example:
    >>> from stylog.models import StyleToken, Payload
    >>> statement_merge([
    ...     StyleToken("\\x1b[40m"), StyleToken("\\x1b[31m"),
    ...     Payload("text"), StyleToken("\\x1b[0m"),
    ... ])
    ['\\x1b[40m\\x1b[31mtext\\x1b[0m']
"""

from typing import Any, List, Sequence

from ..models.statement import StyleToken, Payload, PendingStatement, StatementItem
from .ansi import RESET


def css_inject(statement: PendingStatement, placeholder: str, separator: str) -> None:
    """
    Rewrite a statement so its CSS behaves like one more token/payload pair.

    The placeholder token goes to the front of the items and the joined
    declaration groups become the last payload. Statements without pending
    declarations are left untouched.

    Args:
        statement: Pending statement, modified in place
        placeholder: Token that marks where CSS applies (e.g. "%c")
        separator: Joins declaration groups (e.g. "; ")
    """
    if not statement.css_has():
        return

    statement.items.insert(0, StyleToken(placeholder))
    statement.items.append(Payload(separator.join(statement.css or [])))


def statement_merge(items: Sequence[StatementItem]) -> List[Any]:
    """
    Merge style tokens into the payloads they apply to.

    Single pass over the items:
      - a StyleToken is concatenated onto the accumulator
      - a string Payload absorbs the accumulator, which then empties
      - any other Payload is emitted as is and leaves the accumulator alone,
        so pending tokens wait for the next string
    Leftover tokens become a trailing entry of their own, except a lone reset
    following a string, which is appended to that string.

    Args:
        items: Tokens and payloads in call order

    Returns:
        Arguments for the sink; non-string payloads keep their identity
    """
    result: List[Any] = []
    accumulator = ""

    for item in items:
        if isinstance(item, StyleToken):
            accumulator += item.code
        elif item.text_is():
            result.append(accumulator + item.value)
            accumulator = ""
        else:
            result.append(item.value)

    if not accumulator:
        return result

    if accumulator == RESET and result and isinstance(result[-1], str):
        result[-1] = result[-1] + RESET
    else:
        result.append(accumulator)

    return result
