"""
Command-line access to the textseg scanners.
Reads a text file and prints extracted fields, wrapped text, or number strings.
"""

from __future__ import annotations

from pathlib import Path

import click
from .config import ConfigError, SegmentConfig, build_config
from .exceptions import SegmentationError
from .extractor import iter_fields
from .filesystem import get_max_file_size, read_text
from .numbers import extract_numeric_digits
from .wrapper import wrap_at_length

__all__ = ["cli"]


def _decode_escapes(value: str) -> str:
    """Expand backslash escapes such as ``\\t`` and leave other characters intact."""
    return value.encode("latin-1", "backslashreplace").decode("unicode_escape")


def _unescape(values: tuple[str, ...]) -> list[str] | None:
    if not values:
        return None
    return [_decode_escapes(value) for value in values]


def _split_records(content: str) -> list[str]:
    """Split on ``"\\n"`` only, keeping the newline on each record."""
    records = [line + "\n" for line in content.split("\n")]
    records[-1] = records[-1][:-1]
    return [record for record in records if record]


def _load(filepath: str, **overrides: object) -> tuple[SegmentConfig, str]:
    path = Path(filepath)
    try:
        config = build_config(path.resolve().parent, **overrides)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        content = read_text(path, max_file_size)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    return config, content


@click.group()
@click.version_option()
def cli():
    """Extract delimited fields, wrap text, and pull number strings from files."""


@cli.command()
@click.option("--keyword", "keywords", multiple=True, help="Keyword that precedes a field")
@click.option(
    "--separator", "separators", multiple=True, help="Field separator (leading and trailing)"
)
@click.option("--comment", "comments", multiple=True, help="Comment delimiter")
@click.option("--start-index", type=int, default=0, show_default=True, help="Index to scan from")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def fields(
    filepath: str,
    keywords: tuple[str, ...],
    separators: tuple[str, ...],
    comments: tuple[str, ...],
    start_index: int,
):
    """
    Print the data fields found on each line of FILEPATH.

    Fields from one line are joined with a tab. Lines without fields, and
    lines shorter than the start index, produce no output.

    Raises:
        click.BadParameter: If the configuration or overrides are invalid.
        click.ClickException: If the file cannot be read or scanned.

    Examples:
        textseg fields tzdata.txt --keyword Zone: --keyword Link:
    """
    separator_list = _unescape(separators)
    config, content = _load(
        filepath,
        keyword_delimiters=_unescape(keywords),
        leading_separators=separator_list,
        trailing_separators=separator_list,
        comment_delimiters=_unescape(comments),
    )

    for line in _split_records(content):
        if start_index >= len(line):
            continue
        try:
            found = [
                result.field_text
                for result in iter_fields(
                    line,
                    config.keyword_delimiters,
                    config.leading_separators,
                    config.trailing_separators,
                    config.comment_delimiters,
                    config.eol_delimiters,
                    start_index=start_index,
                )
            ]
        except SegmentationError as error:
            raise click.ClickException(str(error)) from error
        if found:
            click.echo("\t".join(found))


@cli.command()
@click.option("--width", type=int, help="Maximum characters per line")
@click.option("--break-char", help="Character inserted after each line")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def wrap(filepath: str, width: int | None = None, break_char: str | None = None):
    """
    Re-flow the text of FILEPATH into lines of at most WIDTH characters.

    Raises:
        click.BadParameter: If the configuration or overrides are invalid.
        click.ClickException: If the file cannot be read or is empty.

    Examples:
        textseg wrap notes.txt --width 40
    """
    if break_char is not None:
        break_char = _decode_escapes(break_char)
    config, content = _load(filepath, line_length=width, break_char=break_char)

    try:
        wrapped = wrap_at_length(content, config.line_length, config.break_char)
    except SegmentationError as error:
        raise click.ClickException(str(error)) from error

    click.echo(wrapped, nl=False)


@cli.command()
@click.option("--keep-leading", default="", help="Characters kept before the digits")
@click.option("--keep-interior", default="", help="Characters kept between digits")
@click.option("--keep-trailing", default="", help="Characters kept after the digits")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def numbers(filepath: str, keep_leading: str, keep_interior: str, keep_trailing: str):
    """
    Print every number string found on each line of FILEPATH.

    Examples:
        textseg numbers ledger.txt --keep-leading '$-' --keep-interior ',.'
    """
    _, content = _load(filepath)

    for line in _split_records(content):
        index: int | None = 0
        found: list[str] = []
        while index is not None and index < len(line):
            result = extract_numeric_digits(
                line, index, keep_leading, keep_interior, keep_trailing
            )
            if not result.found:
                break
            found.append(result.number_text)
            index = result.next_index
        if found:
            click.echo("\t".join(found))


if __name__ == "__main__":
    cli()
