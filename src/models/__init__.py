"""
Models package for stylog

Contains data structures and type definitions for statements, styles and
the command-line pipeline.
"""

from .state import ProgramState, pipeline
from .styles import StyleSpec, StyleKind, Channel, RESERVED_STYLES
from .statement import StyleToken, Payload, PendingStatement, StatementItem, FormatOptions

__all__ = [
    "ProgramState",
    "pipeline",
    "StyleSpec",
    "StyleKind",
    "Channel",
    "RESERVED_STYLES",
    "StyleToken",
    "Payload",
    "PendingStatement",
    "StatementItem",
    "FormatOptions",
]
