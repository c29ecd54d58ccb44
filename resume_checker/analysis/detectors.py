from __future__ import annotations

from dataclasses import dataclass
import re

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}", re.IGNORECASE | re.ASCII)
PHONE_RE = re.compile(r"\d{3}[-.\s]?\d{3}[-.\s]?\d{4}", re.ASCII)
EXPERIENCE_RE = re.compile(
    r"\b(\d{1,2}\+?\s*years|\d+\s+years|experienced|senior)\b",
    re.IGNORECASE | re.ASCII,
)
ACTION_VERB_RE = re.compile(
    r"\b(responsible|led|managed|developed|designed|implemented)\b",
    re.IGNORECASE | re.ASCII,
)
QUANTIFIED_RE = re.compile(r"\d+%|\b(improved|reduced|increased)\b", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class Detector:
    """Named pattern that answers whether a resume shows a given signal."""

    name: str
    pattern: re.Pattern[str]

    def __call__(self, text: str | None) -> bool:
        return bool(self.pattern.search(text or ""))


has_email = Detector("email", EMAIL_RE)
has_phone = Detector("phone", PHONE_RE)
has_experience_cue = Detector("experience", EXPERIENCE_RE)
has_action_verb = Detector("action_verbs", ACTION_VERB_RE)
has_quantified_achievement = Detector("quantified_achievement", QUANTIFIED_RE)

# Names match the keys under completeness.weights in scoring.yaml.
COMPLETENESS_DETECTORS: tuple[Detector, ...] = (
    has_email,
    has_experience_cue,
    has_action_verb,
)


def has_contact_info(text: str | None) -> bool:
    return has_phone(text) or has_email(text)
