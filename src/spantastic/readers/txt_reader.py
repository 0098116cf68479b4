import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read the base text, trying UTF-8 first then latin-1.

    The text is returned exactly as stored; offsets are computed against it.
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.warning("%s: not valid UTF-8, falling back to latin-1 encoding", path.name)
        return path.read_text(encoding="latin-1")
