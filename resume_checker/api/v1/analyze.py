from fastapi import APIRouter, Request

from resume_checker.analysis.engine import evaluate
from resume_checker.core.rate_limit import rate_limit
from resume_checker.schemas.analysis import AnalysisResult, AnalyzeRequest

router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    summary="Analyze Resume",
    description="Score a resume against a job description and return missing keywords and suggestions.",
)
@rate_limit()
async def analyze(request: Request, payload: AnalyzeRequest):
    _ = request
    return evaluate(payload.resume, payload.job_description)
