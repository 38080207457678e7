"""Alloctop can be run from the command line (if correctly installed) as ``alloctop``.

The Command Line Interface is implemented using the Click_ library, and consists of the single
command, which reads the allocation report, prints its global totals and then either the flat
list of the records or the records aggregated by the components of their tags.

Currently, only the single-shot mode is implemented, hence the ``--once`` flag is mandatory.

.. _Click: https://click.palletsprojects.com/
"""
from __future__ import annotations

# Standard Imports
from typing import Optional

# Third-Party Imports
import click

# Alloctop Imports
from alloctop.allocinfo import aggregate, parsing, query
from alloctop.allocinfo.structs import SortBy
from alloctop.utils import cli_kit, log
from alloctop.utils.exceptions import AllocInfoReadException
from alloctop.view import pretty_output as pretty


@click.command(
    "alloctop",
    cls=cli_kit.SingleShotCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--min",
    "-m",
    "min_size",
    type=click.IntRange(min=0),
    default=0,
    metavar="<size>",
    help="Only display allocations with size greater or equal to <size>.",
)
@click.option(
    "--lines",
    "-n",
    "max_lines",
    type=click.IntRange(min=0),
    default=None,
    metavar="<num>",
    help="Only output the first <num> lines.",
)
@click.option(
    "--once",
    "-o",
    is_flag=True,
    default=False,
    help="Display the output once and then exit.",
)
@click.option(
    "--sort",
    "-s",
    "sort_by",
    type=click.Choice(SortBy.supported()),
    default=None,
    metavar="<s|c|t>",
    callback=cli_kit.sort_key_callback,
    help="Sort the output by size (s), number of calls (c), or tag (t).",
)
@click.option(
    "--tree",
    "-t",
    is_flag=True,
    default=False,
    help=(
        "Aggregate output data by tag components. Only the 'min' option is implemented for this"
        " visualization."
    ),
)
@click.option(
    "--file",
    "-f",
    "allocinfo_file",
    default=parsing.ALLOCINFO_PATH,
    show_default=True,
    metavar="<path>",
    help="Read the allocation report from <path>, e.g. from the saved snapshot.",
)
@click.option("--no-color", is_flag=True, default=False, help="Disables the colored output.")
@click.option(
    "--verbose",
    "-v",
    count=True,
    default=0,
    help=(
        "Increases the verbosity of the standard error. Verbosity is incremental, and each level"
        " increases the extent of output."
    ),
)
@click.option(
    "--version",
    help="Prints the current version of Alloctop.",
    is_eager=True,
    is_flag=True,
    default=False,
    expose_value=False,
    callback=cli_kit.print_version,
)
def cli(
    min_size: int,
    max_lines: Optional[int],
    once: bool,
    sort_by: Optional[SortBy],
    tree: bool,
    allocinfo_file: str,
    no_color: bool,
    verbose: int,
) -> None:
    """Alloctop - A tool for analyzing memory allocations from /proc/allocinfo.

    The global totals of sizes and calls are always printed first. Then, by default, the list
    of all allocation records is printed, optionally filtered by the size (--min), sorted (--sort)
    and truncated (--lines). With --tree, the records are instead aggregated by all of the
    prefixes of their tags, e.g. the record tagged as ``mm/slub.c:123`` contributes to both
    ``mm`` and ``mm/slub.c:123``.
    """
    log.COLOR_OUTPUT = not no_color
    if log.VERBOSITY < verbose:
        log.VERBOSITY = verbose

    if not once:
        log.error('Only "display once" mode currently available, run with "-o".')

    try:
        records = parsing.parse_allocinfo(allocinfo_file)
    except AllocInfoReadException as exc:
        log.error(f"error reading or parsing allocinfo: {exc}", raised_exception=exc)

    pretty.print_global(aggregate.aggregate_global(records))

    if tree:
        cli_kit.warn_ignored_in_tree_mode(tree, sort=sort_by, lines=max_lines)
        aggregated = aggregate.aggregate_tree(records)
        log.info(f"aggregated {len(records)} records into {len(aggregated)} tag prefixes")
        pretty.print_tree(aggregate.sorted_tree_entries(aggregated, min_size))
    else:
        selected = query.select_records(records, min_size, sort_by, max_lines)
        log.info(f"displaying {len(selected)} out of {len(records)} records")
        pretty.print_records(selected)


def launch_cli() -> None:
    """Runs the CLI with the default handling of the closed standard output"""
    cli_kit.reset_sigpipe()
    cli()


if __name__ == "__main__":
    launch_cli()
