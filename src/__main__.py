#!/usr/bin/env python3
"""
stylog - Chainable ANSI/CSS styling for console output

Command-line front end: print text with named or hex colors and decorations,
using the same builder the library exposes.

Usage:
    stylog TEXT... [--fg COLOR] [--bg COLOR] [--decoration NAME]...

    COLOR is a named color (see --list) or a hex value such as '#5AC981'.

Examples:
    # Red text
    stylog Hello there --fg red

    # Hex foreground on a black background, underlined
    stylog Status OK --fg '#5AC981' --bg black --decoration underscore

    # Print as a group label
    stylog Section --fg cyan --method group

    # Show every named style
    stylog --list
"""

import sys
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from .lib import Console, StyleError, ColorError, styles, LOG, state_connectToLogger, __version__
from .models import ProgramState, StyleKind, pipeline


STYLEABLE_METHODS = ["log", "info", "group", "group_collapsed"]

# Define CLI arguments
parser = ArgumentParser(
    description="stylog - print styled text to the terminal",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument("text", nargs="*", help="Text to print (words are joined with spaces)")

parser.add_argument("--fg", default=None, type=str, help="Text color name or hex value")

parser.add_argument("--bg", default=None, type=str, help="Background color name or hex value")

parser.add_argument(
    "--decoration",
    action="append",
    default=None,
    help="Decoration name (can be repeated: --decoration bright --decoration underscore)",
)

parser.add_argument(
    "--method",
    default="log",
    choices=STYLEABLE_METHODS,
    help="Console method used to print the statement",
)

parser.add_argument(
    "--no-format",
    dest="noFormat",
    action="store_true",
    help="Pass the merged arguments to the sink without option-aware formatting",
)

parser.add_argument("--list", dest="listStyles", action="store_true", help="List named styles and exit")

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def color_apply(console: Console, kind: StyleKind, value: str) -> Console:
    """Arm a named or hex color on the console"""
    if value.startswith("#"):
        if kind == StyleKind.BACKGROUND:
            return console.bg_hex(value)
        return console.fg_hex(value)
    return console.style(kind, value)


def styles_arm(console: Console, state: ProgramState) -> Console:
    """Arm decorations, then background, then foreground"""
    for name in state.decoration:
        console.decoration(name)
    if state.bg:
        color_apply(console, StyleKind.BACKGROUND, state.bg)
    if state.fg:
        color_apply(console, StyleKind.FOREGROUND, state.fg)
    return console


def options_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate style options before anything is printed.

    Arms every requested style on a throwaway builder so unknown names and
    malformed hex values are reported up front.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added field:
            - optionsOK: True if all styles resolved

    Exits:
        1 if a style name or hex value is invalid
    """
    state = inputstate.copy()

    LOG("Checking style options...", level=2)

    try:
        styles_arm(Console(sink=object()), state)
    except (StyleError, ColorError) as e:
        print(f"Error: {e}", file=sys.stderr)
        state.optionsOK = False
        sys.exit(1)

    LOG(f"Styles: fg={state.fg} bg={state.bg} decoration={state.decoration}", level=2)
    state.optionsOK = True
    return state


def statement_build(inputstate: ProgramState) -> ProgramState:
    """
    Build the styled statement.

    Args:
        inputstate: Program state with validated options

    Returns:
        ProgramState with added field:
            - console: Builder holding the styled text
    """
    state = inputstate.copy()

    console = styles_arm(Console(), state)
    console.raw(" ".join(state.text))
    if state.fg or state.bg or state.decoration:
        console.close()
    if state.noFormat:
        console.options(None)

    LOG(f"Prepared {len(console.pending.items)} statement items", level=3)
    state.console = console
    return state


def statement_emit(inputstate: ProgramState) -> ProgramState:
    """
    Flush the statement through the chosen console method.

    Exits:
        1 if no statement was built
    """
    state: ProgramState = inputstate.copy()
    if state.console is None:
        print("Error: No statement to print", file=sys.stderr)
        sys.exit(1)

    getattr(state.console, state.method)()
    LOG(f"Printed with {state.method}()", level=2)
    return state


def styles_list(console: Optional[Console] = None) -> None:
    """Print every named style rendered in its own style, with its description"""
    console = console if console is not None else Console()
    for kind in StyleKind:
        console.decoration("bright", f"{kind.value}:").close().log()
        names: List[str] = styles.styles_listByKind(kind)
        for name in names:
            spec = styles.spec_get(kind, name)
            console.raw("  ").style(kind, name, name).close().log(f"- {spec.description}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - print styled text.

    Runs the pipeline:
        1. options_check: Validate style names and hex values
        2. statement_build: Arm styles and add the text
        3. statement_emit: Flush through the chosen console method

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    options: Namespace = parser.parse_args(argv)

    if options.listStyles:
        styles_list()
        return 0

    state: ProgramState = ProgramState.state_createFromNamespace(options=options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, options_check, statement_build, statement_emit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
