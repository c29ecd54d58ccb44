from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume: str | None = Field(default="", max_length=100000)
    job_description: str | None = Field(default="", alias="jobDescription", max_length=100000)


class AnalysisResult(BaseModel):
    """Outcome of one resume/job-description evaluation.

    Serialized with the camelCase names used on the wire (``skillsMatch``,
    ``atsTips``); either spelling is accepted when validating.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: int = Field(ge=0, le=100)
    skills_match: int = Field(alias="skillsMatch", ge=0, le=100)
    missing: tuple[str, ...]
    suggestions: tuple[str, ...] = Field(min_length=1)
    ats_tips: tuple[str, ...] = Field(alias="atsTips", min_length=1)


class ParseFileResponse(BaseModel):
    text: str = ""
    scanned: bool | None = None
    message: str | None = None
