from .analysis import AnalysisResult, AnalyzeRequest, ParseFileResponse

__all__ = [
    "AnalyzeRequest",
    "AnalysisResult",
    "ParseFileResponse",
]
