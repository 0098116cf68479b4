"""Style substrings of a text and resolve character offsets to click identities."""

from .annotated.builder import annotate, build_annotated_text
from .annotated.query import click_identity_at, dispatch_click, segments, style_at
from .annotated.text import AnnotatedText, ClickRange, StyleRange
from .config import Config, MatchMode
from .spans.base import Decoration, DefaultStyle, ResolvedSpan, SpanDescriptor, StyleAttributes, TextAlign
from .spans.resolver import ResolutionReport, resolve_spans, resolve_with_report

__all__ = [
    "AnnotatedText",
    "ClickRange",
    "Config",
    "Decoration",
    "DefaultStyle",
    "MatchMode",
    "ResolutionReport",
    "ResolvedSpan",
    "SpanDescriptor",
    "StyleAttributes",
    "StyleRange",
    "TextAlign",
    "annotate",
    "build_annotated_text",
    "click_identity_at",
    "dispatch_click",
    "resolve_spans",
    "resolve_with_report",
    "segments",
    "style_at",
]
