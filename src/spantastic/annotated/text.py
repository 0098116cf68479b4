from dataclasses import dataclass

from ..spans.base import StyleAttributes


@dataclass(frozen=True)
class StyleRange:
    start: int
    end: int  # exclusive
    style: StyleAttributes


@dataclass(frozen=True)
class ClickRange:
    start: int
    end: int  # exclusive
    identity: str

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end


@dataclass(frozen=True)
class AnnotatedText:
    """Base text with its style ranges and click ranges, in input order.

    Ranges may overlap. Style ranges are meant to be re-applied in order so
    later ranges override the attributes they set; click ranges are looked
    up first-match-wins. Nothing is flattened at build time.
    """

    text: str
    style_ranges: tuple[StyleRange, ...] = ()
    click_ranges: tuple[ClickRange, ...] = ()
