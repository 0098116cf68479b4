import logging
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .annotated.builder import build_annotated_text
from .annotated.text import AnnotatedText
from .config import Config
from .readers.spans_reader import load_span_file
from .readers.txt_reader import read_text
from .spans.base import DefaultStyle, ResolvedSpan, SpanDescriptor
from .spans.resolver import resolve_with_report
from .writers.html_writer import write_html
from .writers.json_writer import write_json
from .writers.rich_writer import to_rich_text

logger = logging.getLogger(__name__)

WRITERS = {
    ".html": write_html,
    ".htm": write_html,
    ".json": write_json,
}


@dataclass
class PipelineResult:
    annotated: AnnotatedText
    resolved: list[ResolvedSpan] = field(default_factory=list)
    unmatched: list[SpanDescriptor] = field(default_factory=list)
    default_style: DefaultStyle = field(default_factory=DefaultStyle)
    # Set when the annotated text was written to a file
    output_path: Path | None = None


def _write_output(annotated: AnnotatedText, output_path: Path, default_style: DefaultStyle) -> bool:
    """Write the annotated text using the writer matching the file suffix."""
    ext = output_path.suffix.lower()
    writer = WRITERS.get(ext)
    if writer is None:
        logger.warning("No writer for format: %s", ext)
        return False
    writer(annotated, output_path, default_style)
    return True


def _display_spans(file_name: str, spans: list[ResolvedSpan], console: Console) -> None:
    """Display resolved spans in a rich table."""
    if not spans:
        console.print(f"  [dim]{file_name}: no spans resolved[/dim]")
        return

    table = Table(title=f"{file_name}", show_lines=False, padding=(0, 1))
    table.add_column("Range", style="cyan", width=12)
    table.add_column("Text", style="yellow")
    table.add_column("Click", style="green")
    table.add_column("Decoration", style="dim")

    for span in spans:
        # Truncate long texts for display
        display_text = span.text if len(span.text) <= 60 else span.text[:57] + "..."
        table.add_row(
            f"{span.start}-{span.end}",
            display_text,
            span.click_identity,
            ", ".join(span.style.decoration.names) or "-",
        )

    console.print(table)


def process_file(
    text_path: Path,
    spans_path: Path,
    config: Config,
    *,
    console: Console | None = None,
) -> PipelineResult:
    """Run a text file and a span file through the full pipeline.

    Reader errors (``OSError``, ``ValueError``) propagate to the caller.
    """
    if console is None:
        console = Console()

    logger.info("Reading: %s", text_path.name)

    # 1. Read
    text = read_text(text_path)
    span_file = load_span_file(spans_path)

    # 2. Resolve
    report = resolve_with_report(
        text,
        span_file.descriptors,
        span_file.default_style,
        match_mode=config.match_mode,
    )
    level = logging.WARNING if config.warn_unmatched else logging.DEBUG
    for descriptor in report.unmatched:
        logger.log(level, "  %s: span string %r not found", text_path.name, descriptor.span_string)

    # 3. Build
    annotated = build_annotated_text(text, report.resolved)

    # 4. Display
    if config.show_table:
        _display_spans(text_path.name, report.resolved, console)

    # 5. Render or write
    output_path = None
    if config.output_path is None:
        console.print(to_rich_text(annotated, span_file.default_style))
    elif _write_output(annotated, config.output_path, span_file.default_style):
        output_path = config.output_path
        logger.info("  Written: %s", output_path)

    return PipelineResult(
        annotated=annotated,
        resolved=report.resolved,
        unmatched=report.unmatched,
        default_style=span_file.default_style,
        output_path=output_path,
    )
