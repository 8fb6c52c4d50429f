# api/schemas.py

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class SpanInSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    startIndex: int
    endIndex: int
    type: str


class SpanSchema(BaseModel):
    startIndex: int
    endIndex: int
    type: str
    rendered: Optional[str] = None


class AnnotateRequest(BaseModel):
    text: str
    spans: List[SpanInSchema] = Field(default_factory=list)
    mode: Optional[str] = None  # "first_occurrence" or "offset"
    strict: Optional[bool] = None


class AnnotateResponse(BaseModel):
    annotated_text: str
    spans: List[SpanSchema]


class TypesResponse(BaseModel):
    types: List[str]
