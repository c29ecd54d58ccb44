from __future__ import annotations

from typing import Sequence

from resume_checker.analysis.detectors import has_contact_info, has_quantified_achievement

TAILOR_KEYWORDS_MESSAGE = "Tailor your resume by including keywords from the job description."
ADD_CONTACT_MESSAGE = "Add contact information (email, phone)."
ADD_METRICS_MESSAGE = "Add measurable achievements (metrics, % improvements)."
LOOKS_GOOD_MESSAGE = "Looks good. Consider quantifying achievements for stronger impact."

ATS_TIPS: tuple[str, ...] = (
    "Use standard headings (Experience, Education, Skills).",
    "Avoid images and complex tables; prefer plain text or simple layouts.",
    "Include important keywords from the job description.",
)


def build_suggestions(resume_text: str | None, missing: Sequence[str]) -> list[str]:
    suggestions: list[str] = []
    if missing:
        suggestions.append(TAILOR_KEYWORDS_MESSAGE)
    if not has_contact_info(resume_text):
        suggestions.append(ADD_CONTACT_MESSAGE)
    if not has_quantified_achievement(resume_text):
        suggestions.append(ADD_METRICS_MESSAGE)
    if not suggestions:
        suggestions.append(LOOKS_GOOD_MESSAGE)
    return suggestions


def ats_tips() -> list[str]:
    return list(ATS_TIPS)
