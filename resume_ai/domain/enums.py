"""Enums shared across the domain layer."""

from enum import Enum


class AIOperation(str, Enum):
    EXTRACT_RESUME = "extract_resume"
    ANALYZE_FIT = "analyze_fit"
    SUGGEST_BULLETS = "suggest_bullets"


class FailureKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    EXTRACTION_ERROR = "extraction_error"
    ANALYSIS_ERROR = "analysis_error"
    SUGGESTION_ERROR = "suggestion_error"


class FitBand(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"
