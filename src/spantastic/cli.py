import logging
from importlib.metadata import version
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from .annotated.query import dispatch_click
from .config import Config, MatchMode
from .pipeline import process_file

logger = logging.getLogger(__name__)

console = Console()


@click.command()
@click.argument("text_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("spans_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the annotated text to a .html or .json file instead of the console.",
)
@click.option(
    "--all-occurrences",
    is_flag=True,
    default=False,
    help="Style every occurrence of a span string, not only the first.",
)
@click.option(
    "--warn-unmatched",
    is_flag=True,
    default=False,
    help="Warn about span strings that do not occur in the text.",
)
@click.option(
    "--at",
    "offsets",
    type=int,
    multiple=True,
    help="Character offset to hit-test; may be repeated.",
)
@click.option("--no-table", is_flag=True, default=False, help="Do not print the resolved span table.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose logging.")
@click.version_option(version=version("spantastic"))
def main(
    text_path: Path,
    spans_path: Path,
    output_path: Path | None,
    all_occurrences: bool,
    warn_unmatched: bool,
    offsets: tuple[int, ...],
    no_table: bool,
    verbose: bool,
) -> None:
    """Style a text with span descriptors and hit-test character offsets.

    TEXT_PATH is a plain text file. SPANS_PATH is a JSON file holding a
    "spans" list and an optional "default_style" object.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
    )

    config = Config(
        output_path=output_path,
        match_mode=MatchMode.ALL if all_occurrences else MatchMode.FIRST,
        warn_unmatched=warn_unmatched,
        show_table=not no_table,
    )

    try:
        result = process_file(text_path, spans_path, config, console=console)
    except (OSError, ValueError) as exc:
        console.print(f"[red]Error processing {text_path.name}: {escape(str(exc))}[/red]", highlight=False)
        logger.debug("Failed to process %s", text_path.name, exc_info=True)
        raise SystemExit(1) from exc

    for offset in offsets:
        identity = dispatch_click(result.annotated, offset, lambda key: logger.debug("Clicked on: %s", key))
        console.print(f"offset {offset} -> {identity if identity is not None else 'none'}", highlight=False)

    # Summary
    console.print()
    console.print(
        f"[bold green]Done.[/bold green] {len(result.resolved)} span(s) resolved, {len(result.unmatched)} unmatched."
    )
    if result.output_path is not None:
        console.print(f"Annotated text saved to {result.output_path}")
