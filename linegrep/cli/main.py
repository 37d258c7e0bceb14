"""
linegrep command line interface.

Reads lines from files (or STDIN), prints the ones matching PATTERN and
exits with 0 when something matched, 1 when nothing did and 2 on an invalid
pattern, an unreadable file or an exhausted backtracking budget.
"""

from __future__ import annotations

import sys
from typing import TextIO

import click

from linegrep import __version__
from linegrep.config import load_settings
from linegrep.constants import EXIT_ERROR, EXIT_MATCH, EXIT_NO_MATCH
from linegrep.patterns import BacktrackingMatcher, compile_pattern
from linegrep.types.errors import BacktrackLimitError, InputError, LinegrepError
from linegrep.utils.logger import configure_logging, logger

STDIN_NAME = "-"


def _open_input(path: str) -> TextIO:
    if path == STDIN_NAME:
        return click.get_text_stream("stdin", errors="replace")
    try:
        return open(path, encoding="utf-8", errors="replace", newline="")
    except OSError as e:
        raise InputError(f"cannot open {path}: {e}", file_path=path, original_error=e) from e


def _report(error: LinegrepError) -> None:
    click.echo(f"linegrep: {error}", err=True)
    logger.debug(error.get_formatted_message())


def _scan(
    matcher: BacktrackingMatcher,
    stream: TextIO,
    label: str | None,
    *,
    line_number: bool,
    count: bool,
    quiet: bool,
    only_matching: bool,
) -> int:
    """Print the matching lines of one input, return how many matched."""
    matched = 0
    for number, line, span in matcher.filter_lines(stream):
        matched += 1
        if quiet:
            # One match is enough to decide the exit status.
            break
        if count:
            continue
        text = span.slice(line) if only_matching else line
        if only_matching and not text:
            continue
        prefix = ""
        if label is not None:
            prefix += f"{label}:"
        if line_number:
            prefix += f"{number}:"
        click.echo(f"{prefix}{text}")

    if count and not quiet:
        click.echo(f"{label}:{matched}" if label is not None else str(matched))
    return matched


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="linegrep", message="%(prog)s v%(version)s")
@click.option("-E", "--extended", is_flag=True, help="Accepted for grep compatibility; the dialect is fixed.")
@click.option("-n", "--line-number", is_flag=True, help="Prefix each line with its 1-based line number.")
@click.option("-c", "--count", is_flag=True, help="Print only the number of matching lines.")
@click.option("-q", "--quiet", is_flag=True, help="Print nothing; report through the exit status only.")
@click.option("-o", "--only-matching", is_flag=True, help="Print only the matched part of each line.")
@click.option("--max-steps", type=click.IntRange(min=1), default=None, help="Bound backtracking work per line.")
@click.option("--debug", is_flag=True, help="Log debug output to stderr.")
@click.argument("pattern")
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, allow_dash=True))
def cli(
    extended: bool,
    line_number: bool,
    count: bool,
    quiet: bool,
    only_matching: bool,
    max_steps: int | None,
    debug: bool,
    pattern: str,
    files: tuple[str, ...],
) -> None:
    """linegrep - print lines matching PATTERN.

    PATTERN supports literals, \\d, \\w, [abc], [^abc], ^ and $ anchors and
    the + quantifier. With no FILE, or when FILE is -, read standard input.
    """
    try:
        settings = load_settings()
    except LinegrepError as e:
        configure_logging(debug)
        _report(e)
        sys.exit(EXIT_ERROR)

    configure_logging(settings.debug or debug)

    try:
        compiled = compile_pattern(pattern)
    except LinegrepError as e:
        _report(e)
        sys.exit(EXIT_ERROR)

    matcher = BacktrackingMatcher(
        compiled,
        max_steps=max_steps if max_steps is not None else settings.max_steps,
    )

    sources = files or (STDIN_NAME,)
    show_label = len(sources) > 1
    total = 0
    failed = False

    for source in sources:
        try:
            stream = _open_input(source)
        except InputError as e:
            logger.warning(f"Skipping unreadable input {source}")
            _report(e)
            failed = True
            continue

        label = ("(standard input)" if source == STDIN_NAME else source) if show_label else None
        try:
            total += _scan(
                matcher,
                stream,
                label,
                line_number=line_number,
                count=count,
                quiet=quiet,
                only_matching=only_matching,
            )
        except BacktrackLimitError as e:
            _report(e)
            sys.exit(EXIT_ERROR)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Stopped reading input {source}")
            _report(InputError(f"cannot read {source}: {e}", file_path=source, original_error=e))
            failed = True
        finally:
            if source != STDIN_NAME:
                stream.close()

        if quiet and total:
            sys.exit(EXIT_MATCH)

    if failed:
        sys.exit(EXIT_ERROR)
    sys.exit(EXIT_MATCH if total else EXIT_NO_MATCH)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
