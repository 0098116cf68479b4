from spantastic.annotated.builder import annotate, build_annotated_text
from spantastic.annotated.text import ClickRange, StyleRange
from spantastic.config import MatchMode
from spantastic.spans.base import DefaultStyle, ResolvedSpan, SpanDescriptor, StyleAttributes


def _span(start, end, identity="k", color=None):
    return ResolvedSpan(start=start, end=end, style=StyleAttributes(color=color), click_identity=identity)


# --- build_annotated_text ---


def test_build_empty():
    annotated = build_annotated_text("plain text", [])
    assert annotated.text == "plain text"
    assert annotated.style_ranges == ()
    assert annotated.click_ranges == ()


def test_build_one_entry_per_span():
    spans = [_span(0, 5, "a", "red"), _span(2, 8, "b", "blue")]
    annotated = build_annotated_text("overlapping", spans)

    assert annotated.style_ranges == (
        StyleRange(0, 5, StyleAttributes(color="red")),
        StyleRange(2, 8, StyleAttributes(color="blue")),
    )
    assert annotated.click_ranges == (ClickRange(0, 5, "a"), ClickRange(2, 8, "b"))


def test_build_does_not_coalesce_identical_ranges():
    annotated = build_annotated_text("abc", [_span(0, 3, "x"), _span(0, 3, "y")])
    assert len(annotated.style_ranges) == 2
    assert [r.identity for r in annotated.click_ranges] == ["x", "y"]


def test_build_drops_out_of_range_spans():
    spans = [_span(-1, 2), _span(2, 2), _span(3, 10), _span(0, 3, "ok")]
    annotated = build_annotated_text("abcd", spans)
    assert annotated.click_ranges == (ClickRange(0, 3, "ok"),)


def test_build_ranges_within_text():
    annotated = annotate(
        "Learn Jetpack Compose with SpantasticText!",
        [SpanDescriptor(span_string=s) for s in ("Learn", "Jetpack Compose", "SpantasticText", "!")],
    )
    for r in annotated.style_ranges + annotated.click_ranges:
        assert 0 <= r.start < r.end <= len(annotated.text)


# --- annotate ---


def test_annotate_three_disjoint_spans():
    text = "Learn Jetpack Compose with SpantasticText!"
    annotated = annotate(
        text,
        [
            SpanDescriptor(span_string="Learn", color="green"),
            SpanDescriptor(span_string="Jetpack Compose", color="blue"),
            SpanDescriptor(span_string="SpantasticText", color="magenta"),
        ],
    )

    ranges = [(r.start, r.end) for r in annotated.style_ranges]
    assert len(ranges) == 3
    assert ranges == [(0, 5), (6, 21), (27, 41)]
    for (s1, e1), (s2, e2) in zip(ranges, ranges[1:]):  # noqa: B905
        assert e1 <= s2 or e2 <= s1


def test_annotate_unmatched_contributes_nothing():
    annotated = annotate("hello", [SpanDescriptor(span_string="bye"), SpanDescriptor(span_string="")])
    assert annotated.style_ranges == ()
    assert annotated.click_ranges == ()


def test_annotate_with_default_style():
    annotated = annotate(
        "hello world",
        [SpanDescriptor(span_string="world", color="C1")],
        DefaultStyle(color="C0", font_size=14.0),
    )
    style = annotated.style_ranges[0].style
    assert style.color == "C1"
    assert style.font_size == 14.0


def test_annotate_all_occurrences():
    annotated = annotate("ababab", [SpanDescriptor(span_string="ab")], match_mode=MatchMode.ALL)
    assert [(r.start, r.end) for r in annotated.click_ranges] == [(0, 2), (2, 4), (4, 6)]
