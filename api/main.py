import os
import logging
import logging.config

import yaml
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from api.schemas import AnnotateRequest, AnnotateResponse, SpanSchema, TypesResponse
from newsreader.formatters import known_types
from newsreader.models import SpanDescriptor
from newsreader.pipeline import annotate_text

SETTINGS_PATH = os.path.join("configs", "annotate.yaml")


def setup_logging():
    cfg_path = os.path.join("configs", "logging.yaml")
    if os.path.exists(cfg_path):
        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            os.makedirs("logs", exist_ok=True)
            logging.config.dictConfig(config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logging.basicConfig(level=logging.INFO)
            logging.getLogger("api").warning("Failed to load logging.yaml: %s", e)
    else:
        logging.basicConfig(level=logging.INFO)


setup_logging()
logger = logging.getLogger("api")

app = FastAPI(
    title="News Reader Markup",
    version="0.1.0",
    description="Rewrites typed text spans into HTML markup.",
)

origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/annotate", response_model=AnnotateResponse)
def annotate(req: AnnotateRequest) -> AnnotateResponse:
    logger.info("Received /annotate request with %d spans", len(req.spans))
    descriptors = [
        SpanDescriptor(start=s.startIndex, end=s.endIndex, type=s.type)
        for s in req.spans
    ]
    try:
        annotated, spans = annotate_text(
            text=req.text,
            spans=descriptors,
            settings_path=SETTINGS_PATH if os.path.exists(SETTINGS_PATH) else None,
            mode=req.mode,
            strict=req.strict,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    span_schemas = [
        SpanSchema(
            startIndex=s.start,
            endIndex=s.end,
            type=s.type,
            rendered=s.rendered,
        )
        for s in spans
    ]
    return AnnotateResponse(annotated_text=annotated, spans=span_schemas)


@app.get("/types", response_model=TypesResponse)
def types() -> TypesResponse:
    return TypesResponse(types=known_types())
