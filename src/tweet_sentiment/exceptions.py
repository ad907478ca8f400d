"""
Exception classes for the tweet sentiment pipeline.
"""


class SentimentPipelineError(Exception):
    """Base exception for pipeline errors."""
    pass


class InvalidInputError(SentimentPipelineError, ValueError):
    """Raised when the input dataset is unusable (missing columns, too few rows)."""
    pass


class UnknownLabelError(SentimentPipelineError, ValueError):
    """Raised when a raw tag does not canonicalize to a known sentiment label."""
    pass


class InvalidArgumentError(SentimentPipelineError, ValueError):
    """Raised when a pipeline parameter is out of range."""
    pass


class DatasetWriteError(SentimentPipelineError, OSError):
    """Raised when a serialized dataset file cannot be created or written."""
    pass
