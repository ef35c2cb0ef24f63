"""Domain layer - Tokens, verdicts and analysis results."""

from .tokens import (
    CommandTokenKind,
    CommandToken,
    CodeTokenKind,
    CodeToken,
    DISPLAY_KINDS,
)
from .results import (
    Status,
    ErrorCategory,
    Verdict,
    AnalysisResult,
    CodeAnalysisResult,
)

__all__ = [
    "CommandTokenKind",
    "CommandToken",
    "CodeTokenKind",
    "CodeToken",
    "DISPLAY_KINDS",
    "Status",
    "ErrorCategory",
    "Verdict",
    "AnalysisResult",
    "CodeAnalysisResult",
]
