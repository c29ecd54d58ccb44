from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
import sys

from resume_checker.core.config import settings
from resume_checker.pipeline.orchestrator import PipelineOutcome, ResumeCheckPipeline, Upload
from resume_checker.pipeline.samples import SAMPLE_JOB_DESCRIPTION, SAMPLE_RESUME


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-checker",
        description="Score a resume against a job description.",
    )
    resume_group = parser.add_mutually_exclusive_group()
    resume_group.add_argument("--resume-file", help="Resume file (.txt, .pdf, .docx, .png, .jpg)")
    resume_group.add_argument("--resume-text", help="Resume text pasted on the command line")

    job_group = parser.add_mutually_exclusive_group()
    job_group.add_argument("--job-file", help="Plain-text file holding the job description")
    job_group.add_argument("--job-text", help="Job description text")

    parser.add_argument("--sample", action="store_true", help="Use the built-in sample resume and job description.")
    parser.add_argument(
        "--api-url",
        default=None,
        help="Base URL of the resume checker API (defaults to RESUME_CHECKER_API_URL).",
    )
    parser.add_argument("--local", action="store_true", help="Skip the remote API and analyze locally.")
    parser.add_argument("--no-delay", action="store_true", help="Disable the pacing delays around the analysis.")
    parser.add_argument("--json", action="store_true", help="Print the outcome as JSON.")
    return parser


def _read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8", errors="replace")


def _render(outcome: PipelineOutcome) -> str:
    lines: list[str] = []
    for notice in outcome.notices:
        lines.append(f"Note: {notice}")
    if outcome.error:
        lines.append(f"Error: {outcome.error}")
        return "\n".join(lines)

    result = outcome.result
    if result is None:
        return "\n".join(lines)

    lines.append(f"Score: {result.score}/100")
    lines.append(f"Skills match: {result.skills_match}%")
    lines.append("Missing keywords:")
    if result.missing:
        lines.extend(f"  - {keyword}" for keyword in result.missing)
    else:
        lines.append("  No missing keywords, great match!")
    lines.append("Suggestions:")
    lines.extend(f"  - {item}" for item in result.suggestions)
    lines.append("ATS tips:")
    lines.extend(f"  - {tip}" for tip in result.ats_tips)
    return "\n".join(lines)


async def _run(args: argparse.Namespace) -> PipelineOutcome:
    resume_text = args.resume_text or ""
    job_description = args.job_text or ""
    upload: Upload | None = None

    if args.sample:
        if not args.resume_file:
            resume_text = resume_text or SAMPLE_RESUME
        job_description = job_description or SAMPLE_JOB_DESCRIPTION
    if args.resume_file:
        path = Path(args.resume_file)
        upload = Upload(filename=path.name, content=path.read_bytes())
    if args.job_file:
        job_description = _read_text(args.job_file)

    api_url = "" if args.local else args.api_url
    delays = {"pre_delay": 0.0, "post_delay": 0.0} if args.no_delay else {}
    pipeline = ResumeCheckPipeline.from_settings(api_url, **delays)
    return await pipeline.run(resume_text=resume_text, job_description=job_description, upload=upload)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(message)s")

    try:
        outcome = asyncio.run(_run(args))
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(outcome.model_dump_json(by_alias=True, indent=2))
    else:
        print(_render(outcome))
    return 0 if outcome.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
