"""Set of helper function for logging and printing warnings or errors

The data (i.e. the tables) are written to the standard output, while everything else (errors,
warnings and debug messages) goes to the standard error, so the output can be safely piped.
"""
from __future__ import annotations

# Standard Imports
from typing import Iterable, Literal, Optional
import sys
import traceback

# Third-Party Imports
import termcolor

# Alloctop Imports


# Types
ColorChoiceType = Literal[
    "black",
    "grey",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "light_grey",
    "dark_grey",
    "white",
]
AttrChoiceType = Iterable[Literal["bold", "dark", "underline", "blink", "reverse", "concealed"]]

VERBOSITY: int = 0
COLOR_OUTPUT: bool = True

# Enum of verbosity levels
VERBOSE_DEBUG: int = 2
VERBOSE_INFO: int = 1
VERBOSE_RELEASE: int = 0

SUPPRESS_WARNINGS: bool = False


def is_verbose_enough(verbosity_peak: int) -> bool:
    """Tests if the current verbosity of the log is enough

    :param int verbosity_peak: peak of the verbosity we are testing
    :return: true if the verbosity is enough
    """
    return VERBOSITY >= verbosity_peak


def extract_stack_frame_info(frame: traceback.FrameSummary) -> tuple[str, str]:
    """Helper function for returning name and filename from frame.

    :param object frame: frame of the extracted trace
    :return: tuple of filename and function name
    """
    return frame.filename, frame.name


def print_current_stack(
    colour: ColorChoiceType = "red", raised_exception: Optional[BaseException] = None
) -> None:
    """Prints the information about stack track leading to an event

    Be default this is used in error traces, so the colour of the printed trace is red.
    Moreover, we filter out some of the events (in particular those outside of alloctop, or
    those that takes care of the actual trace).

    :param str colour: colour of the printed stack trace
    :param Exception raised_exception: exception that was raised before the error
    """
    reduced_trace = []
    trace = (
        traceback.extract_tb(raised_exception.__traceback__)
        if raised_exception
        else traceback.extract_stack()
    )
    for frame in trace:
        frame_file, frame_name = extract_stack_frame_info(frame)
        filtering_conditions = [
            # We filter frames that are not in alloctop's scope
            "alloctop" not in frame_file,
            # We filter the first load entry of the module
            frame_name == "<module>",
            # We filter these error and stack handlers ;)
            frame_file.endswith("log.py") and frame_name in ("error", "print_current_stack"),
        ]
        if not any(filtering_conditions):
            reduced_trace.append(frame)
    print(in_color("".join(traceback.format_list(reduced_trace)), colour), file=sys.stderr)


def write(msg: str, end: str = "\n") -> None:
    """
    :param str msg: message that is printed to the standard output
    :param str end: ending of the message
    """
    print(f"{msg}", end=end)


def error(
    msg: str,
    recoverable: bool = False,
    raised_exception: Optional[BaseException] = None,
) -> None:
    """
    :param str msg: error message printed to standard error
    :param bool recoverable: whether we can recover from the error
    :param Exception raised_exception: exception that was raised before the error
    """
    print(f"{tag('error', 'red')} {in_color(msg, 'red')}", file=sys.stderr)
    if is_verbose_enough(VERBOSE_DEBUG):
        print_current_stack(raised_exception=raised_exception)

    # If we cannot recover from this error, we end
    if not recoverable:
        sys.exit(1)


def warn(msg: str, end: str = "\n") -> None:
    """
    :param str msg: warn message printed to standard error
    :param str end: ending of the message
    """
    if not SUPPRESS_WARNINGS:
        print(f"{tag('warning', 'yellow')} {msg}", end=end, file=sys.stderr)


def info(msg: str) -> None:
    """
    :param str msg: info message printed to standard error only with at least lvl1 verbosity
    """
    if is_verbose_enough(VERBOSE_INFO):
        print(f"{tag('info', 'blue')} {msg}", file=sys.stderr)


def debug(msg: str) -> None:
    """
    :param str msg: debug message printed to standard error only with at least lvl2 verbosity
    """
    if is_verbose_enough(VERBOSE_DEBUG):
        print(f"{tag('debug', 'dark_grey')} {msg}", file=sys.stderr)


def tag(tag_str: str, colour: ColorChoiceType) -> str:
    """
    :param tag_str: printed tag
    :param colour: colour of the tag
    :return: formatted tag
    """
    return "[" + in_color(tag_str.upper(), colour, attribute_style=["bold"]) + "]"


def in_color(
    output: str, color: ColorChoiceType = "white", attribute_style: Optional[AttrChoiceType] = None
) -> str:
    """Transforms the output to colored version.

    :param str output: the output text that should be colored
    :param str color: the color
    :param str attribute_style: name of the additional style, i.e. bold, italic, etc.

    :return str: the new colored output (if enabled)
    """
    if COLOR_OUTPUT:
        return termcolor.colored(output, color, attrs=attribute_style, force_color=True)
    else:
        return output
