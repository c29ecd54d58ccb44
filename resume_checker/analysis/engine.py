from __future__ import annotations

from resume_checker.analysis.feedback import ats_tips, build_suggestions
from resume_checker.analysis.scorer import score_match
from resume_checker.schemas.analysis import AnalysisResult


def evaluate(resume_text: str | None, job_description_text: str | None) -> AnalysisResult:
    """Score a resume against a job description.

    This is the only implementation of the evaluation: the HTTP handler and the
    pipeline's local fallback both call it, so identical inputs always produce
    identical results wherever they run. Never raises; ``None`` counts as "".
    """
    resume = resume_text or ""
    job_description = job_description_text or ""

    match = score_match(resume, job_description)
    return AnalysisResult(
        score=match.score,
        skills_match=match.skills_match,
        missing=match.missing,
        suggestions=tuple(build_suggestions(resume, match.missing)),
        ats_tips=tuple(ats_tips()),
    )
