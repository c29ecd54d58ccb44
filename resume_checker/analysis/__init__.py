from .engine import evaluate
from .feedback import ATS_TIPS, ats_tips, build_suggestions
from .scorer import MatchScore, score_match
from .text import STOPWORDS, extract_keywords, normalize

__all__ = [
    "evaluate",
    "normalize",
    "extract_keywords",
    "STOPWORDS",
    "MatchScore",
    "score_match",
    "build_suggestions",
    "ats_tips",
    "ATS_TIPS",
]
