from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class MatchMode(Enum):
    FIRST = "first"  # only the first occurrence of each span string
    ALL = "all"  # every non-overlapping occurrence


@dataclass
class Config:
    output_path: Path | None = None
    match_mode: MatchMode = MatchMode.FIRST
    # Log descriptors that matched nothing at WARNING instead of DEBUG
    warn_unmatched: bool = False
    show_table: bool = True
