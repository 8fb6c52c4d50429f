# newsreader/pipeline.py

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .annotate import SpanLike, annotate, as_descriptor
from .models import SpanDescriptor
from .settings import AnnotatorSettings, load_settings

logger = logging.getLogger(__name__)


def annotate_text(
    text: str,
    spans: Iterable[SpanLike],
    settings_path: Optional[str] = None,
    mode: Optional[str] = None,
    strict: Optional[bool] = None,
    allowed_types: Optional[Iterable[str]] = None,
) -> Tuple[str, List[SpanDescriptor]]:
    """
    Annotate text using the settings file (or defaults) and return the
    result together with the descriptors, each carrying the markup it
    was rendered to (None when it was skipped).

    mode / strict override the settings when given.

    allowed_types:
      - If None: use the types allowed by the settings (all when unset).
      - If iterable: only spans of these types are annotated.
    """
    settings = load_settings(settings_path) if settings_path else AnnotatorSettings()
    if mode is not None:
        settings.mode = mode
    if strict is not None:
        settings.strict = strict
    if allowed_types is None:
        allowed_types = settings.types

    # converted here so the returned spans carry `rendered`
    descriptors = [as_descriptor(s) for s in spans]
    annotated = annotate(
        text,
        descriptors,
        mode=settings.mode,
        strict=settings.strict,
        allowed_types=allowed_types,
    )

    applied = sum(1 for s in descriptors if s.rendered is not None)
    logger.info("Annotated %d of %d spans (mode=%s)", applied, len(descriptors), settings.mode)
    return annotated, descriptors
