"""Read-only queries over a built :class:`AnnotatedText`.

None of these mutate the artifact, so they are safe to call any number of
times against the same instance.
"""

from collections.abc import Callable

from ..spans.base import StyleAttributes
from .text import AnnotatedText

ClickHandler = Callable[[str | None], None]


def click_identity_at(annotated: AnnotatedText, offset: int) -> str | None:
    """Return the identity of the first click range containing *offset*.

    Ranges are scanned in stored order, so on overlap the span that came
    first in the descriptor list wins, whatever its size or position.
    """
    if offset < 0 or offset > len(annotated.text):
        return None
    for click_range in annotated.click_ranges:
        if click_range.contains(offset):
            return click_range.identity
    return None


def style_at(annotated: AnnotatedText, offset: int) -> StyleAttributes | None:
    """Fold every style range containing *offset*, later ranges winning per attribute.

    Returns None when no range covers the offset.
    """
    style: StyleAttributes | None = None
    for style_range in annotated.style_ranges:
        if style_range.start <= offset < style_range.end:
            style = style_range.style if style is None else style.merge(style_range.style)
    return style


def segments(annotated: AnnotatedText) -> list[tuple[int, int]]:
    """Split the text at every range boundary.

    Returns contiguous ``(start, end)`` pieces covering the whole text, so
    each piece has a single folded style and a single click identity.
    """
    length = len(annotated.text)
    if length == 0:
        return []

    boundaries = {0, length}
    for style_range in annotated.style_ranges:
        boundaries.update((style_range.start, style_range.end))
    for click_range in annotated.click_ranges:
        boundaries.update((click_range.start, click_range.end))

    points = sorted(b for b in boundaries if 0 <= b <= length)
    return list(zip(points, points[1:]))  # noqa: B905


def dispatch_click(annotated: AnnotatedText, offset: int, on_click: ClickHandler) -> str | None:
    """Hit-test *offset* and call *on_click* only when a span is there."""
    identity = click_identity_at(annotated, offset)
    if identity is not None:
        on_click(identity)
    return identity
