import json
from pathlib import Path
from typing import Any

from ..annotated.text import AnnotatedText
from ..spans.base import DefaultStyle


def annotated_to_dict(annotated: AnnotatedText) -> dict[str, Any]:
    """Serialize an annotated text, keeping ranges in stored order."""
    return {
        "text": annotated.text,
        "style_ranges": [{"start": r.start, "end": r.end, "style": r.style.to_dict()} for r in annotated.style_ranges],
        "click_ranges": [{"start": r.start, "end": r.end, "identity": r.identity} for r in annotated.click_ranges],
    }


def write_json(annotated: AnnotatedText, output_path: Path, default_style: DefaultStyle | None = None) -> None:
    """Write the annotated text to a JSON file (the default style is not part of it)."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(annotated_to_dict(annotated), f, ensure_ascii=False, indent=2)
