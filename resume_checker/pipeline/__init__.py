from .clients import RemoteServiceError, ResumeCheckerClient
from .fallback import with_timeout_fallback
from .orchestrator import PipelineOutcome, ResumeCheckPipeline, Upload
from .samples import SAMPLE_JOB_DESCRIPTION, SAMPLE_RESUME, placeholder_resume

__all__ = [
    "ResumeCheckerClient",
    "RemoteServiceError",
    "with_timeout_fallback",
    "ResumeCheckPipeline",
    "PipelineOutcome",
    "Upload",
    "SAMPLE_RESUME",
    "SAMPLE_JOB_DESCRIPTION",
    "placeholder_resume",
]
