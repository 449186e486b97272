"""Pydantic models for API I/O."""

from .analysis import AnalyzeResponse, MetricsResponse, SimilarPlayerResponse
from .session import SessionResponse

__all__ = [
    "AnalyzeResponse",
    "MetricsResponse",
    "SessionResponse",
    "SimilarPlayerResponse",
]
