from dataclasses import dataclass, fields, replace
from enum import Enum, Flag
from typing import Any


class Decoration(Flag):
    NONE = 0
    UNDERLINE = 1
    LINE_THROUGH = 2

    @classmethod
    def combine(cls, underline: bool, line_through: bool) -> "Decoration":
        decoration = cls.NONE
        if underline:
            decoration |= cls.UNDERLINE
        if line_through:
            decoration |= cls.LINE_THROUGH
        return decoration

    @classmethod
    def from_names(cls, names: str | list[str] | None) -> "Decoration":
        """Parse ``"underline"`` or ``["underline", "line_through"]``."""
        if not names:
            return cls.NONE
        if isinstance(names, str):
            names = [names]
        if not isinstance(names, list):
            raise ValueError(f"decoration must be a name or a list of names, got {type(names).__name__}")
        decoration = cls.NONE
        for name in names:
            if not isinstance(name, str):
                raise ValueError(f"decoration names must be strings, got {type(name).__name__}")
            decoration |= cls[name.strip().upper().replace("-", "_")]
        return decoration

    @property
    def names(self) -> list[str]:
        return [d.name.lower() for d in (Decoration.UNDERLINE, Decoration.LINE_THROUGH) if d in self]


class TextAlign(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"
    START = "start"
    END = "end"


@dataclass(frozen=True)
class StyleAttributes:
    """Span-level style. ``None`` (or ``Decoration.NONE``) means unset."""

    color: str | None = None
    font_size: float | None = None
    font_weight: str | None = None
    font_family: str | None = None
    decoration: Decoration = Decoration.NONE
    background_color: str | None = None

    def merge(self, other: "StyleAttributes | None") -> "StyleAttributes":
        """Return a copy where every attribute set on *other* wins."""
        if other is None:
            return self
        overrides = {f.name: getattr(other, f.name) for f in fields(other) if getattr(other, f.name)}
        # font_size 0 is still an explicit value
        if other.font_size is not None:
            overrides["font_size"] = other.font_size
        return replace(self, **overrides)

    def to_dict(self) -> dict[str, Any]:
        return {
            "color": self.color,
            "font_size": self.font_size,
            "font_weight": self.font_weight,
            "font_family": self.font_family,
            "decoration": self.decoration.names,
            "background_color": self.background_color,
        }


@dataclass(frozen=True)
class DefaultStyle:
    """Text-wide style.

    ``color``, ``font_size``, ``font_weight`` and ``font_family`` fill the
    attributes a span descriptor leaves unset. The remaining fields only
    apply to the text as a whole and are consumed by the writers.
    """

    color: str | None = None
    font_size: float | None = None
    font_weight: str | None = None
    font_family: str | None = None
    font_style: str | None = None
    letter_spacing: float | None = None
    line_height: float | None = None
    decoration: Decoration = Decoration.NONE
    text_align: TextAlign | None = None

    def as_attributes(self) -> StyleAttributes:
        return StyleAttributes(
            color=self.color,
            font_size=self.font_size,
            font_weight=self.font_weight,
            font_family=self.font_family,
            decoration=self.decoration,
        )


@dataclass(frozen=True)
class SpanDescriptor:
    """A substring to find in the base text, with the style to apply there."""

    span_string: str
    color: str | None = None
    font_size: float | None = None
    font_weight: str | None = None
    font_family: str | None = None
    show_underline: bool = False
    show_strike_through: bool = False
    background_color: str | None = None
    callback_key: str | None = None


@dataclass(frozen=True)
class ResolvedSpan:
    """A span descriptor matched to a concrete range of the base text."""

    start: int
    end: int  # exclusive
    style: StyleAttributes
    click_identity: str
    text: str = ""

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)
