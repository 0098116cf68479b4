import logging

from rich.color import Color, ColorParseError
from rich.style import Style
from rich.text import Text

from ..annotated.text import AnnotatedText
from ..spans.base import Decoration, DefaultStyle, StyleAttributes, TextAlign

logger = logging.getLogger(__name__)

_BOLD_WEIGHTS = {"bold", "semibold", "semi-bold", "extrabold", "extra-bold", "black", "heavy"}

_JUSTIFY = {
    TextAlign.LEFT: "left",
    TextAlign.START: "left",
    TextAlign.RIGHT: "right",
    TextAlign.END: "right",
    TextAlign.CENTER: "center",
    TextAlign.JUSTIFY: "full",
}


def _parse_color(value) -> Color | None:
    if value is None:
        return None
    try:
        return Color.parse(str(value))
    except ColorParseError:
        logger.warning("Unsupported color %r, ignoring", value)
        return None


def _is_bold(weight) -> bool | None:
    """Map a font weight onto the terminal's bold attribute (None = unset)."""
    if weight is None:
        return None
    if isinstance(weight, (int, float)):
        return weight >= 600
    name = str(weight).strip().lower()
    if name.isdigit():
        return int(name) >= 600
    return name in _BOLD_WEIGHTS


def to_rich_style(style: StyleAttributes) -> Style:
    """Convert span attributes to a rich Style.

    Font size and family have no terminal equivalent and are dropped.
    """
    return Style(
        color=_parse_color(style.color),
        bgcolor=_parse_color(style.background_color),
        bold=_is_bold(style.font_weight),
        underline=True if Decoration.UNDERLINE in style.decoration else None,
        strike=True if Decoration.LINE_THROUGH in style.decoration else None,
    )


def to_rich_text(annotated: AnnotatedText, default_style: DefaultStyle | None = None) -> Text:
    """Render an annotated text as a rich Text.

    The default style becomes the base style; style ranges are applied with
    ``stylize`` in stored order so later ranges override the attributes they set.
    """
    default = default_style or DefaultStyle()
    base = to_rich_style(default.as_attributes())
    if default.font_style == "italic":
        base += Style(italic=True)

    text = Text(annotated.text, style=base, justify=_JUSTIFY.get(default.text_align))
    for style_range in annotated.style_ranges:
        text.stylize(to_rich_style(style_range.style), style_range.start, style_range.end)
    return text
