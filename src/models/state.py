"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern used by
the command-line front end, and the pipeline() helper for composing stages.
"""

from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the CLI pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: text, fg, bg, decoration, method, noFormat, verbosity
        - options_check: optionsOK
        - statement_build: console
        - statement_emit: (no additions, terminal stage)

    Attributes:
        text: Words to print, joined by the sink with single spaces
        fg: Foreground color name or hex value
        bg: Background color name or hex value
        decoration: Decoration names, applied in the given order
        method: Terminating console method to flush with
        noFormat: Disable options-aware formatting for this statement
        verbosity: Logging verbosity level (1-3)
        optionsOK: Option validation passed
        console: Builder holding the prepared statement
    """

    # CLI arguments
    text: List[str] = field(default_factory=list)
    fg: Optional[str] = field(default=None)
    bg: Optional[str] = field(default=None)
    decoration: List[str] = field(default_factory=list)
    method: str = field(default="log")
    noFormat: bool = field(default=False)
    verbosity: int = field(default=1)

    # Pipeline state
    optionsOK: bool = field(default=False)
    console: Optional[Any] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace
    ) -> "ProgramState":
        """
        Create ProgramState from an argparse Namespace.

        Args:
            options: Parsed CLI arguments

        Returns:
            ProgramState instance with all matching CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}
        # argparse leaves append-actions as None when never given
        filtered_options = {k: v for k, v in filtered_options.items() if v is not None}

        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            options_check,
            statement_build,
            statement_emit
        )
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
