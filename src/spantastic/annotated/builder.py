import logging
from collections.abc import Iterable

from ..config import MatchMode
from ..spans.base import DefaultStyle, ResolvedSpan, SpanDescriptor
from ..spans.resolver import resolve_spans
from .text import AnnotatedText, ClickRange, StyleRange

logger = logging.getLogger(__name__)


def build_annotated_text(text: str, resolved_spans: Iterable[ResolvedSpan]) -> AnnotatedText:
    """Fold resolved spans over *text*, one style range and one click range each.

    Order is preserved and nothing is merged. Spans outside
    ``0 <= start < end <= len(text)`` are dropped.
    """
    style_ranges: list[StyleRange] = []
    click_ranges: list[ClickRange] = []

    for span in resolved_spans:
        if not 0 <= span.start < span.end <= len(text):
            logger.debug("Dropping out-of-range span %s for text of length %d", span.span, len(text))
            continue
        style_ranges.append(StyleRange(start=span.start, end=span.end, style=span.style))
        click_ranges.append(ClickRange(start=span.start, end=span.end, identity=span.click_identity))

    return AnnotatedText(text=text, style_ranges=tuple(style_ranges), click_ranges=tuple(click_ranges))


def annotate(
    text: str,
    descriptors: Iterable[SpanDescriptor],
    default_style: DefaultStyle | None = None,
    *,
    match_mode: MatchMode = MatchMode.FIRST,
) -> AnnotatedText:
    """Resolve *descriptors* against *text* and build the annotated text."""
    resolved = resolve_spans(text, descriptors, default_style, match_mode=match_mode)
    return build_annotated_text(text, resolved)
