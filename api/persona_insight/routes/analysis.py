from typing import Any

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool

from ..corpus import REFERENCE_CORPUS
from ..http_helpers import read_text_upload
from ..schemas import AnalyzeRequest, CorpusProfileOut, PersonalityResultResponse
from ..services.analyzer import analyze
from ..services.rate_limit import enforce_analyze_limit
from ..services.scoring import SCORERS

router = APIRouter()

RL_ANALYZE = Depends(enforce_analyze_limit)


# analyze() sleeps; both handlers keep it off the event loop.
@router.post("/analyze", response_model=PersonalityResultResponse, dependencies=[RL_ANALYZE])
def analyze_text(payload: AnalyzeRequest) -> dict[str, Any]:
    return analyze(payload.text, strategy=payload.strategy).as_dict()


@router.post("/analyze/upload", response_model=PersonalityResultResponse, dependencies=[RL_ANALYZE])
async def analyze_upload(file: UploadFile = File(...), strategy: str | None = Form(default=None)) -> dict[str, Any]:
    if strategy is not None and strategy not in SCORERS:
        raise HTTPException(status_code=422, detail=f"strategy must be one of: {', '.join(sorted(SCORERS))}")
    text = await read_text_upload(file)
    result = await run_in_threadpool(analyze, text, strategy=strategy)
    return result.as_dict()


@router.get("/corpus/profiles", response_model=list[CorpusProfileOut])
def list_corpus_profiles() -> list[dict[str, Any]]:
    return [
        {
            "category": entry.category,
            "description": entry.description,
            "traits": {trait.value: float(value) for trait, value in entry.traits.items()},
        }
        for entry in REFERENCE_CORPUS
    ]
