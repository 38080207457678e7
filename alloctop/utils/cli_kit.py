"""Set of helper functions for working with command line.

Contains functions for click api, for processing parameters from command line and the command
class, that unifies the return codes of the usage errors.
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Optional
import signal

# Third-Party Imports
import click

# Alloctop Imports
from alloctop.allocinfo.structs import SortBy
from alloctop.utils import log
import alloctop


USAGE_ERROR_CODE: int = 1


class SingleShotCommand(click.Command):
    """Click command, which ends with the return code 1 for any error in the command line

    By default, click ends the usage errors (unknown option, missing value of the option or
    the invalid value) with return code 2.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as usage_error:
            usage_error.exit_code = USAGE_ERROR_CODE
            raise


def print_version(ctx: click.Context, __: click.Option, value: bool) -> None:
    """Prints current version of Alloctop and ends"""
    if value and not ctx.resilient_parsing:
        log.write(f"Alloctop {alloctop.__version__}")
        ctx.exit(0)


def sort_key_callback(
    _: click.Context, __: click.Option, value: Optional[str]
) -> Optional[SortBy]:
    """Converts the short sort key from the command line to the sort key

    :param click.Context _: called context of the parameter
    :param click.Option __: called option (--sort)
    :param str value: one of 's', 'c', 't' or None if sorting was not requested
    :return: sort key or None
    """
    return SortBy.from_key(value) if value is not None else None


def warn_ignored_in_tree_mode(tree: bool, **options: Any) -> None:
    """Issues warning for options, that have no effect in the tree mode

    The options are ignored silently, unless the verbose output was requested.

    :param bool tree: whether the tree mode is used
    :param dict options: mapping of option names to their values (None if not set)
    """
    if not tree or not log.is_verbose_enough(log.VERBOSE_INFO):
        return
    for option_name, option_value in options.items():
        if option_value is not None:
            log.warn(f"--{option_name} option has no effect in 'tree' mode")


def reset_sigpipe() -> None:
    """Restores the default disposition of SIGPIPE

    Python ignores SIGPIPE and raises BrokenPipeError instead, so the output piped to e.g.
    `head` would end with a trace. With the default disposition the process is quietly terminated.
    """
    if hasattr(signal, "SIGPIPE"):
        signal.signal(signal.SIGPIPE, signal.SIG_DFL)
