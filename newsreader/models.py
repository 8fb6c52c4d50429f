# newsreader/models.py

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class SpanDescriptor:
    start: int
    end: int
    type: str
    rendered: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpanDescriptor":
        """
        Build a descriptor from either the wire form
        {startIndex, endIndex, type} or {start, end, type}.
        """
        start = data["startIndex"] if "startIndex" in data else data["start"]
        end = data["endIndex"] if "endIndex" in data else data["end"]
        return cls(start=int(start), end=int(end), type=str(data["type"]))

    def overlaps(self, other: "SpanDescriptor") -> bool:
        return not (self.end <= other.start or other.end <= self.start)


class InvalidSpanError(ValueError):
    """Raised in strict mode for offsets that do not fit the source text."""

    def __init__(self, span: SpanDescriptor, text_length: int):
        self.span = span
        super().__init__(
            f"Invalid span [{span.start}, {span.end}) of type {span.type!r} "
            f"for text of length {text_length}"
        )
