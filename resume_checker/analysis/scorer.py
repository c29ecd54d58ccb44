from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from resume_checker.analysis.detectors import COMPLETENESS_DETECTORS
from resume_checker.analysis.text import extract_keywords, normalize
from resume_checker.core.scoring import get_scoring_value


class MatchScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    skills_match: int = Field(ge=0, le=100)
    matched: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()
    completeness: float = 0.0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def partition_keywords(keywords: list[str], resume_text: str | None) -> tuple[list[str], list[str]]:
    """Split keywords into (matched, missing) by substring presence in the normalized resume.

    Containment is not token-bounded: "java" counts as present in "javascript".
    """
    normalized_resume = normalize(resume_text)
    matched: list[str] = []
    missing: list[str] = []
    for keyword in keywords:
        if keyword in normalized_resume:
            matched.append(keyword)
        else:
            missing.append(keyword)
    return matched, missing


def skills_match_percent(matched_count: int, total: int) -> int:
    if total <= 0:
        return 0
    return round_half_up(100 * matched_count / total)


def completeness_score(resume_text: str | None) -> float:
    completeness = 0.0
    for detector in COMPLETENESS_DETECTORS:
        if detector(resume_text):
            completeness += float(get_scoring_value(f"completeness.weights.{detector.name}", 0.0))
    return completeness


def blend_score(skills_match: int, completeness: float) -> int:
    skills_weight = float(get_scoring_value("score.skills_weight", 0.7))
    completeness_weight = float(get_scoring_value("score.completeness_weight", 0.3))
    blended = round_half_up(skills_match * skills_weight + completeness * 100 * completeness_weight)
    return max(0, min(100, blended))


def score_match(resume_text: str | None, job_description_text: str | None) -> MatchScore:
    jd_keywords = extract_keywords(job_description_text)
    matched, missing = partition_keywords(jd_keywords, resume_text)
    skills_match = skills_match_percent(len(matched), len(jd_keywords))
    completeness = completeness_score(resume_text)

    return MatchScore(
        score=blend_score(skills_match, completeness),
        skills_match=skills_match,
        matched=tuple(matched),
        missing=tuple(missing),
        completeness=completeness,
    )
