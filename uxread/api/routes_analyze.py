from fastapi import APIRouter
from uxread.models.report import AnalyzeRequest, BatchAnalyzeRequest
from uxread.services.analyze import analyze_text, summarize

router = APIRouter(tags=["analyze"])


@router.post("/analyze")
def analyze(body: AnalyzeRequest):
    report = analyze_text(body.text)
    return report.model_dump(by_alias=True)


@router.post("/analyze/batch")
def analyze_batch(body: BatchAnalyzeRequest):
    reports = [analyze_text(t) for t in body.texts]
    return {
        "summary": summarize(reports).model_dump(by_alias=True),
        "results": [r.model_dump(by_alias=True) for r in reports],
    }
