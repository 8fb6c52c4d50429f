# newsreader/resolve.py

from __future__ import annotations

from typing import List
from newsreader.models import SpanDescriptor


def drop_overlaps(spans: List[SpanDescriptor]) -> List[SpanDescriptor]:
    """
    Order spans by position and drop the ones that overlap an
    already accepted span:
    - the earlier start wins
    - on equal start, the longer span wins
    """
    if not spans:
        return []

    ordered = sorted(spans, key=lambda s: (s.start, -s.end))

    result: List[SpanDescriptor] = []
    for span in ordered:
        if result and result[-1].overlaps(span):
            continue
        result.append(span)

    return result
