import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from ..spans.base import Decoration, DefaultStyle, SpanDescriptor, TextAlign

logger = logging.getLogger(__name__)

_DESCRIPTOR_KEYS = {f.name for f in fields(SpanDescriptor)}
_DEFAULT_STYLE_KEYS = {f.name for f in fields(DefaultStyle)}


@dataclass
class SpanFile:
    """Contents of a span file: descriptors plus an optional default style."""

    descriptors: list[SpanDescriptor] = field(default_factory=list)
    default_style: DefaultStyle = field(default_factory=DefaultStyle)


def _parse_descriptor(index: int, data: Any) -> SpanDescriptor:
    if not isinstance(data, dict):
        raise ValueError(f"span #{index}: expected an object, got {type(data).__name__}")

    span_string = data.get("span_string")
    if not isinstance(span_string, str):
        raise ValueError(f"span #{index}: 'span_string' must be a string")

    # callback_key becomes the click identity; only style values are opaque
    callback_key = data.get("callback_key")
    if callback_key is not None and not isinstance(callback_key, str):
        raise ValueError(f"span #{index}: 'callback_key' must be a string")

    unknown = set(data) - _DESCRIPTOR_KEYS
    if unknown:
        logger.debug("span #%d: ignoring unknown keys %s", index, sorted(unknown))

    # Style values are opaque here; pass them through as given
    kwargs = {k: v for k, v in data.items() if k in _DESCRIPTOR_KEYS}
    return SpanDescriptor(**kwargs)


def _parse_default_style(data: Any) -> DefaultStyle:
    if data is None:
        return DefaultStyle()
    if not isinstance(data, dict):
        raise ValueError(f"default_style: expected an object, got {type(data).__name__}")

    unknown = set(data) - _DEFAULT_STYLE_KEYS
    if unknown:
        logger.debug("default_style: ignoring unknown keys %s", sorted(unknown))

    kwargs = {k: v for k, v in data.items() if k in _DEFAULT_STYLE_KEYS}
    try:
        kwargs["decoration"] = Decoration.from_names(kwargs.get("decoration"))
    except KeyError as exc:
        raise ValueError(f"default_style: unknown decoration {exc}") from exc
    except ValueError as exc:
        raise ValueError(f"default_style: {exc}") from exc
    if kwargs.get("text_align") is not None:
        kwargs["text_align"] = TextAlign(kwargs["text_align"])
    return DefaultStyle(**kwargs)


def parse_span_data(data: Any) -> SpanFile:
    """Build a :class:`SpanFile` from decoded JSON.

    Accepts either ``{"default_style": {...}, "spans": [...]}`` or a bare list
    of span objects.
    """
    if isinstance(data, list):
        raw_spans, raw_default = data, None
    elif isinstance(data, dict):
        raw_spans, raw_default = data.get("spans", []), data.get("default_style")
    else:
        raise ValueError(f"span file must hold an object or a list, got {type(data).__name__}")

    if not isinstance(raw_spans, list):
        raise ValueError("'spans' must be a list")

    return SpanFile(
        descriptors=[_parse_descriptor(i, item) for i, item in enumerate(raw_spans)],
        default_style=_parse_default_style(raw_default),
    )


def load_span_file(path: Path) -> SpanFile:
    """Load span descriptors and the default style from a JSON file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    span_file = parse_span_data(data)
    logger.debug("%s: loaded %d span descriptor(s)", path.name, len(span_file.descriptors))
    return span_file
