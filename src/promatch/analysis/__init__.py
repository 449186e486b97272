"""Metrics, suggestions and the analysis pipeline."""

from .metrics import MetricsProvider, RandomMetricsProvider
from .service import AnalysisResult, AnalysisService, parse_attributes
from .suggestions import FALLBACK_SUGGESTION, SUGGESTION_RULES, suggestions_from_metrics

__all__ = [
    "AnalysisResult",
    "AnalysisService",
    "FALLBACK_SUGGESTION",
    "MetricsProvider",
    "RandomMetricsProvider",
    "SUGGESTION_RULES",
    "parse_attributes",
    "suggestions_from_metrics",
]
