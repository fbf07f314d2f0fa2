"""Command line interface for rendering board files."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
import yaml  # type: ignore
from dotenv import load_dotenv

from stackboard.board import Board
from stackboard.loader import BoardFormatError, load_board
from stackboard.render import (
    HtmlRenderer,
    TextRenderer,
    content_text,
    layout_to_data,
)
from stackboard.serialize import dumps
from stackboard.style import Style, StyleError, load_style

try:
    __version__ = version("stackboard")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="STACKBOARD_LOG_FILE",
)
@click.version_option(__version__, prog_name="stackboard")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


def _load_board(board_file: str) -> Board:
    """Load a board file, reporting format problems as usage errors."""

    try:
        return load_board(Path(board_file))
    except BoardFormatError as exc:
        raise click.ClickException(str(exc)) from exc


def _load_style(style_path: Optional[str]) -> Style:
    """Load the optional style file, reporting problems as usage errors."""

    try:
        return load_style(Path(style_path) if style_path else None)
    except StyleError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument(
    "board_file", type=click.Path(exists=True, dir_okay=False)
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "html", "json", "yaml"]),
    default="text",
    help="Output format.",
)
@click.option(
    "--style",
    "style_path",
    type=click.Path(exists=True, dir_okay=False),
    envvar="STACKBOARD_STYLE",
    default=None,
    help="YAML file overriding the HTML styling.",
)
def render(
    board_file: str,
    output_path: Optional[str] = None,
    output_format: str = "text",
    style_path: Optional[str] = None,
) -> None:
    """Render a board file.

    Args:
        board_file: JSON or YAML document describing the board.
        output_path: Optional file or directory path for the result. If a
            directory is provided, the file name is derived from
            ``board_file``.
        output_format: Format of the result.
        style_path: Optional YAML style used by the HTML output.
    """

    source = Path(board_file)
    board = _load_board(board_file)

    if output_format == "text":
        content = TextRenderer().render(board)
    elif output_format == "html":
        style = _load_style(style_path)
        content = HtmlRenderer(style, title=source.stem).render(board)
    elif output_format == "json":
        content = dumps(layout_to_data(board), pretty=True)
    else:
        content = yaml.safe_dump(
            layout_to_data(board), allow_unicode=True, sort_keys=False
        )

    if not output_path:
        click.echo(content)
        return

    # Mapping from format names to file extensions.
    extensions = {"text": ".txt", "html": ".html", "json": ".json"}
    final_path = Path(output_path)

    # If the provided path is a directory, build the file path inside it.
    if final_path.is_dir():
        ext = extensions.get(output_format, ".yaml")
        final_path = final_path / f"{source.stem}{ext}"

    final_path.write_text(content, encoding="utf-8")
    logging.debug("Wrote %s output to %s", output_format, final_path)


@cli.command()
@click.argument(
    "board_file", type=click.Path(exists=True, dir_okay=False)
)
def leaves(board_file: str) -> None:
    """Print every leaf of a board file in display order."""

    board = _load_board(board_file)
    for block in board.leaves():
        click.echo(content_text(block.content) or "")


@cli.command("style")
@click.option(
    "--style",
    "style_path",
    type=click.Path(exists=True, dir_okay=False),
    envvar="STACKBOARD_STYLE",
    default=None,
    help="YAML file overriding the HTML styling.",
)
def show_style(style_path: Optional[str] = None) -> None:
    """Print the effective HTML style as JSON.

    Args:
        style_path: Optional YAML style merged over the defaults.
    """

    click.echo(dumps(_load_style(style_path), pretty=True))
