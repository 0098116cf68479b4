import html
from pathlib import Path

from ..annotated.query import click_identity_at, segments, style_at
from ..annotated.text import AnnotatedText
from ..spans.base import DefaultStyle, StyleAttributes

_CSS_DECORATION = {"underline": "underline", "line_through": "line-through"}


def _css_length(value) -> str:
    return f"{value}px" if isinstance(value, (int, float)) else str(value)


def _style_declarations(style: StyleAttributes) -> list[str]:
    declarations = []
    if style.color is not None:
        declarations.append(f"color: {style.color}")
    if style.background_color is not None:
        declarations.append(f"background-color: {style.background_color}")
    if style.font_size is not None:
        declarations.append(f"font-size: {_css_length(style.font_size)}")
    if style.font_weight is not None:
        declarations.append(f"font-weight: {style.font_weight}")
    if style.font_family is not None:
        declarations.append(f"font-family: {style.font_family}")
    if style.decoration:
        values = " ".join(_CSS_DECORATION[name] for name in style.decoration.names)
        declarations.append(f"text-decoration: {values}")
    return declarations


def _root_declarations(default: DefaultStyle) -> list[str]:
    declarations = _style_declarations(default.as_attributes())
    if default.font_style is not None:
        declarations.append(f"font-style: {default.font_style}")
    if default.letter_spacing is not None:
        declarations.append(f"letter-spacing: {_css_length(default.letter_spacing)}")
    if default.line_height is not None:
        declarations.append(f"line-height: {default.line_height}")
    if default.text_align is not None:
        declarations.append(f"text-align: {default.text_align.value}")
    return declarations


def _style_attr(declarations: list[str]) -> str:
    return f'style="{html.escape("; ".join(declarations))}"'


def render_html(annotated: AnnotatedText, default_style: DefaultStyle | None = None) -> str:
    """Render an annotated text as a ``<p>`` fragment.

    HTML cannot express overlapping ranges, so the text is cut into segments
    at every range boundary and each segment carries its folded style and the
    identity a click on it would resolve to (``data-click``).
    """
    parts = []
    for start, end in segments(annotated):
        chunk = html.escape(annotated.text[start:end])
        attrs = []

        style = style_at(annotated, start)
        if style is not None:
            declarations = _style_declarations(style)
            if declarations:
                attrs.append(_style_attr(declarations))

        identity = click_identity_at(annotated, start)
        if identity is not None:
            attrs.append(f'data-click="{html.escape(identity)}"')

        parts.append(f"<span {' '.join(attrs)}>{chunk}</span>" if attrs else chunk)

    root = _root_declarations(default_style or DefaultStyle())
    open_tag = f"<p {_style_attr(root)}>" if root else "<p>"
    return open_tag + "".join(parts) + "</p>"


def write_html(annotated: AnnotatedText, output_path: Path, default_style: DefaultStyle | None = None) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_html(annotated, default_style) + "\n", encoding="utf-8")
