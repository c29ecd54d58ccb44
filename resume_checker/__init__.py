"""Resume checker: lexical resume/job-description matching with a resilient evaluation pipeline."""

__version__ = "0.1.0"
