# newsreader/annotate.py

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional, Union

from newsreader.formatters import lookup
from newsreader.models import InvalidSpanError, SpanDescriptor
from newsreader.resolve import drop_overlaps

logger = logging.getLogger(__name__)

MODES = ("first_occurrence", "offset")

SpanLike = Union[SpanDescriptor, Mapping]


def annotate(
    source: str,
    spans: Iterable[SpanLike],
    mode: str = "first_occurrence",
    strict: bool = False,
    allowed_types: Optional[Iterable[str]] = None,
) -> str:
    """
    Rewrite the spans of source into markup, according to their type.

    mode:
      - "first_occurrence": process spans in the given order; each span's
        raw text is taken from the original source and its first
        occurrence in the current output is replaced by the markup.
        Duplicate substrings, or markup containing a later span's text,
        can make the wrong occurrence change. Offsets are clamped to the
        source and swapped when reversed.
      - "offset": render every span in its original position. Overlapping
        and out-of-range spans are dropped (earlier start wins).

    Spans whose type has no formatter, or is not in allowed_types when
    given, are skipped. With strict=True, offsets of the remaining spans
    that do not fit the source raise InvalidSpanError. Every span's
    `rendered` attribute is reset, then set for the applied ones.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown annotation mode {mode!r}; expected one of {MODES}")

    allowed_set = set(allowed_types) if allowed_types is not None else None

    active: List[SpanDescriptor] = []
    for span in (as_descriptor(s) for s in spans):
        span.rendered = None
        if lookup(span.type) is None or (allowed_set is not None and span.type not in allowed_set):
            logger.debug("Skipping span [%d, %d) of type %r", span.start, span.end, span.type)
            continue
        if strict:
            _check_bounds(span, len(source))
        active.append(span)

    if mode == "offset":
        return _annotate_by_offset(source, active)
    return _annotate_first_occurrence(source, active)


def _annotate_first_occurrence(source: str, spans: List[SpanDescriptor]) -> str:
    output = source

    for span in spans:
        raw = _extract(source, span.start, span.end)
        # an empty match would insert markup at position 0
        if not raw or raw not in output:
            logger.debug("Span [%d, %d) text %r not found in output", span.start, span.end, raw)
            continue

        rendered = lookup(span.type)(raw)
        output = output.replace(raw, rendered, 1)
        span.rendered = rendered

    return output


def _annotate_by_offset(source: str, spans: List[SpanDescriptor]) -> str:
    in_range = []
    for span in spans:
        if span.start < 0 or span.end > len(source) or span.start >= span.end:
            logger.debug("Dropping out-of-range span [%d, %d)", span.start, span.end)
            continue
        in_range.append(span)

    out_parts = []
    cursor = 0

    for span in drop_overlaps(in_range):
        if span.start > cursor:
            out_parts.append(source[cursor:span.start])

        rendered = lookup(span.type)(source[span.start:span.end])
        span.rendered = rendered
        out_parts.append(rendered)
        cursor = span.end

    if cursor < len(source):
        out_parts.append(source[cursor:])

    return "".join(out_parts)


def _extract(source: str, start: int, end: int) -> str:
    """Substring with offsets clamped to [0, len(source)], swapped if reversed."""
    start = min(max(start, 0), len(source))
    end = min(max(end, 0), len(source))
    if start > end:
        start, end = end, start
    return source[start:end]


def as_descriptor(span: SpanLike) -> SpanDescriptor:
    if isinstance(span, SpanDescriptor):
        return span
    return SpanDescriptor.from_dict(span)


def _check_bounds(span: SpanDescriptor, text_length: int) -> None:
    if span.start < 0 or span.end <= span.start or span.end > text_length:
        raise InvalidSpanError(span, text_length)
