"""
Default output sink

StreamConsole is a small console-style sink built on rich consoles. It is
what a Console builder prints through when no other sink is supplied, and it
exposes format_with_options() so the builder can format styled statements
with inspect options before emitting them.

Statements are printed with markup, highlighting and wrapping turned off, so
the escape sequences merged by the builder reach the stream as they are.
"""

import time as _time
import traceback
from typing import Any, Dict, List, Mapping, Optional, TextIO

from rich import box
from rich.console import Console as RichConsole
from rich.padding import Padding
from rich.pretty import Pretty
from rich.table import Table

from ..config import appsettings
from .format import format_with_options, InspectOptions


class StreamConsole:
    """
    Console-style sink over stdout/stderr

    log/info/debug go to stdout; warn/error/trace go to stderr. Every line
    written is indented by the current group depth.
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        group_indentation: Optional[int] = None,
    ) -> None:
        """
        Initialize the sink

        Args:
            stdout: Stream for regular output (default: sys.stdout at write time)
            stderr: Stream for warnings and errors (default: sys.stderr at write time)
            group_indentation: Spaces per open group (default from settings)
        """
        self.out = RichConsole(file=stdout, markup=False, emoji=False, highlight=False, soft_wrap=True)
        self.err = RichConsole(
            file=stderr, stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True
        )
        self.group_indentation: int = (
            appsettings.group_indentation if group_indentation is None else group_indentation
        )
        self.indent: int = 0
        self.counters: Dict[str, int] = {}
        self.timers: Dict[str, float] = {}

    # Options-aware formatter picked up by Console
    format_with_options = staticmethod(format_with_options)

    def _write(self, console: RichConsole, *args: Any) -> None:
        """Format args, indent every line and print them with a newline"""
        text = format_with_options({}, *args)
        prefix = " " * self.indent
        console.print(
            "\n".join(prefix + line for line in text.split("\n")),
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def _render(self, renderable: Any) -> None:
        """Print a rich renderable to stdout at the current group depth"""
        self.out.print(Padding(renderable, (0, 0, 0, self.indent), expand=False), soft_wrap=False)

    def log(self, *args: Any) -> None:
        self._write(self.out, *args)

    def info(self, *args: Any) -> None:
        self._write(self.out, *args)

    def debug(self, *args: Any) -> None:
        self._write(self.out, *args)

    def warn(self, *args: Any) -> None:
        self._write(self.err, *args)

    def error(self, *args: Any) -> None:
        self._write(self.err, *args)

    def trace(self, *args: Any) -> None:
        """Print a "Trace:" message followed by the caller's stack"""
        message = format_with_options({}, *args)
        stack = "".join(traceback.format_stack()[:-1]).rstrip("\n")
        self._write(self.err, f"Trace: {message}".rstrip() + "\n" + stack)

    def group(self, *label: Any) -> None:
        """Print the label (if any) and indent subsequent lines"""
        if label:
            self._write(self.out, *label)
        self.indent += self.group_indentation

    def group_collapsed(self, *label: Any) -> None:
        self.group(*label)

    def group_end(self) -> None:
        self.indent = max(0, self.indent - self.group_indentation)

    def dir(self, value: Any, options: Optional[Mapping[str, Any]] = None) -> None:
        """Pretty-print one value; the `depth` option limits nesting"""
        inspect = InspectOptions.model_validate(dict(options or {}))
        self._render(Pretty(value, max_depth=inspect.depth))

    dirxml = dir

    def table(self, data: Any) -> None:
        """
        Print a mapping or a sequence of mappings as a table

        Columns are the union of the row keys; rows that are not mappings
        fill a trailing "Values" column. Anything else is printed like log().
        """
        if isinstance(data, Mapping):
            rows: List[tuple] = [(key, value) for key, value in data.items()]
        elif isinstance(data, (list, tuple)):
            rows = list(enumerate(data))
        else:
            self.log(data)
            return

        columns: List[str] = []
        for _, row in rows:
            if isinstance(row, Mapping):
                for key in row:
                    if str(key) not in columns:
                        columns.append(str(key))
        has_values = any(not isinstance(row, Mapping) for _, row in rows)

        table = Table(box=box.ROUNDED)
        table.add_column("(index)")
        for column in columns:
            table.add_column(column)
        if has_values:
            table.add_column("Values")

        for index, row in rows:
            cells = [str(index)]
            if isinstance(row, Mapping):
                lookup = {str(key): value for key, value in row.items()}
                cells += [str(lookup[column]) if column in lookup else "" for column in columns]
                if has_values:
                    cells.append("")
            else:
                cells += [""] * len(columns) + [str(row)]
            table.add_row(*cells)
        self._render(table)

    def count(self, label: str = "default") -> None:
        self.counters[label] = self.counters.get(label, 0) + 1
        self._write(self.out, f"{label}: {self.counters[label]}")

    def count_reset(self, label: str = "default") -> None:
        if label not in self.counters:
            self.warn(f"Count for '{label}' does not exist")
            return
        self.counters[label] = 0

    def time(self, label: str = "default") -> None:
        if label in self.timers:
            self.warn(f"Timer '{label}' already exists")
            return
        self.timers[label] = _time.perf_counter()

    def time_log(self, label: str = "default", *args: Any) -> None:
        if label not in self.timers:
            self.warn(f"Timer '{label}' does not exist")
            return
        elapsed = (_time.perf_counter() - self.timers[label]) * 1000
        self._write(self.out, f"{label}: {elapsed:.3f}ms", *args)

    def time_end(self, label: str = "default") -> None:
        if label not in self.timers:
            self.warn(f"Timer '{label}' does not exist")
            return
        self.time_log(label)
        del self.timers[label]

    def assert_(self, condition: Any, *args: Any) -> None:
        if condition:
            return
        if args:
            self.error("Assertion failed:", *args)
        else:
            self.error("Assertion failed")

    def clear(self) -> None:
        """Clear the screen; rich skips this when stdout is not a terminal"""
        self.indent = 0
        self.out.clear()

    # Only meaningful with an attached profiler/inspector
    def profile(self, label: str = "default") -> None:
        pass

    def profile_end(self, label: str = "default") -> None:
        pass

    def time_stamp(self, label: str = "default") -> None:
        pass
