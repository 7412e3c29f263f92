from .correction import (
    CorrectionLevel,
    CorrectionRequest,
    CorrectionResult,
    CorrectionSettings,
    IdiomExplanation,
    ToneAnalysis,
    VocabularyItem,
)
from .result import ErrorKind, FieldError, FlowResult, PipelineError, UpstreamCause
from .summary import SummaryRequest, SummaryResult
from .translation import TranslationRequest, TranslationResult

__all__ = [
    "CorrectionLevel",
    "CorrectionRequest",
    "CorrectionResult",
    "CorrectionSettings",
    "ErrorKind",
    "FieldError",
    "FlowResult",
    "IdiomExplanation",
    "PipelineError",
    "SummaryRequest",
    "SummaryResult",
    "ToneAnalysis",
    "TranslationRequest",
    "TranslationResult",
    "UpstreamCause",
    "VocabularyItem",
]
