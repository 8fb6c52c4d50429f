# newsreader/settings.py

from __future__ import annotations

import yaml
from dataclasses import dataclass
from typing import List, Optional

from newsreader.annotate import MODES


@dataclass
class AnnotatorSettings:
    mode: str = "first_occurrence"
    strict: bool = False
    types: Optional[List[str]] = None

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValueError(f"Unknown annotation mode {self.mode!r}; expected one of {MODES}")


def load_settings(path: str) -> AnnotatorSettings:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    replacement_cfg = cfg.get("replacement", {})
    validation_cfg = cfg.get("validation", {})
    types = cfg.get("types")

    return AnnotatorSettings(
        mode=replacement_cfg.get("mode", "first_occurrence"),
        strict=bool(validation_cfg.get("strict", False)),
        types=list(types) if types is not None else None,
    )
