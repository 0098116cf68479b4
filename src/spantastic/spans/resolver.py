import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..config import MatchMode
from .base import Decoration, DefaultStyle, ResolvedSpan, SpanDescriptor, StyleAttributes

logger = logging.getLogger(__name__)

_NO_DEFAULTS = DefaultStyle()


@dataclass
class ResolutionReport:
    """Resolved spans plus the descriptors that matched nothing."""

    resolved: list[ResolvedSpan] = field(default_factory=list)
    unmatched: list[SpanDescriptor] = field(default_factory=list)


def find_occurrences(text: str, needle: str, match_mode: MatchMode = MatchMode.FIRST) -> list[tuple[int, int]]:
    """Locate *needle* in *text* with a literal, case-sensitive search.

    An empty needle never matches. ``MatchMode.ALL`` returns every
    non-overlapping occurrence, scanning left to right.
    """
    if not needle:
        return []

    ranges = []
    start = 0
    while True:
        idx = text.find(needle, start)
        if idx == -1:
            break
        ranges.append((idx, idx + len(needle)))
        if match_mode is MatchMode.FIRST:
            break
        start = idx + len(needle)
    return ranges


def decoration_for(descriptor: SpanDescriptor) -> Decoration:
    return Decoration.combine(descriptor.show_underline, descriptor.show_strike_through)


def click_identity(descriptor: SpanDescriptor) -> str:
    """The callback key when one is given, else the span string itself."""
    return descriptor.callback_key or descriptor.span_string


def merge_style(descriptor: SpanDescriptor, default_style: DefaultStyle | None = None) -> StyleAttributes:
    """Build the effective style of a span.

    Each of color, size, weight and family comes from the descriptor when
    set and from *default_style* otherwise. Decoration is driven only by the
    descriptor's flags, and the background color is never inherited.
    """
    default = default_style or _NO_DEFAULTS

    def _pick(value, fallback):
        return fallback if value is None else value

    return StyleAttributes(
        color=_pick(descriptor.color, default.color),
        font_size=_pick(descriptor.font_size, default.font_size),
        font_weight=_pick(descriptor.font_weight, default.font_weight),
        font_family=_pick(descriptor.font_family, default.font_family),
        decoration=decoration_for(descriptor),
        background_color=descriptor.background_color,
    )


def resolve_with_report(
    text: str,
    descriptors: Iterable[SpanDescriptor],
    default_style: DefaultStyle | None = None,
    *,
    match_mode: MatchMode = MatchMode.FIRST,
) -> ResolutionReport:
    """Resolve descriptors in input order, keeping track of the ones that missed."""
    report = ResolutionReport()

    for descriptor in descriptors:
        ranges = find_occurrences(text, descriptor.span_string, match_mode)
        if not ranges:
            logger.debug("No match for span string %r", descriptor.span_string)
            report.unmatched.append(descriptor)
            continue

        style = merge_style(descriptor, default_style)
        identity = click_identity(descriptor)
        for start, end in ranges:
            report.resolved.append(
                ResolvedSpan(
                    start=start,
                    end=end,
                    style=style,
                    click_identity=identity,
                    text=descriptor.span_string,
                )
            )

    return report


def resolve_spans(
    text: str,
    descriptors: Iterable[SpanDescriptor],
    default_style: DefaultStyle | None = None,
    *,
    match_mode: MatchMode = MatchMode.FIRST,
) -> list[ResolvedSpan]:
    """Resolve descriptors against *text*; unmatched ones are silently dropped."""
    return resolve_with_report(text, descriptors, default_style, match_mode=match_mode).resolved
