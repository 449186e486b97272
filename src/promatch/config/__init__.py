"""Configuration helpers for scaling constants and runtime settings."""

from .scaling import (
    AGE_RANGE_YEARS,
    DEFAULT_SKILL_SCORE,
    FEATURE_VECTOR_LENGTH,
    FOOT_OPTIONS,
    HEIGHT_RANGE_CM,
    METRIC_FIELDS,
    METRIC_RANGES,
    METRIC_SCALES,
    PLAYER_VECTOR_LENGTH,
    POSITION_OPTIONS,
    SIMILARITY_EPSILON,
    SKILL_FIELDS,
    SUGGESTION_THRESHOLDS,
    TOP_K_DEFAULT,
    MetricRange,
)
from .settings import Settings

__all__ = [
    "AGE_RANGE_YEARS",
    "DEFAULT_SKILL_SCORE",
    "FEATURE_VECTOR_LENGTH",
    "FOOT_OPTIONS",
    "HEIGHT_RANGE_CM",
    "METRIC_FIELDS",
    "METRIC_RANGES",
    "METRIC_SCALES",
    "PLAYER_VECTOR_LENGTH",
    "POSITION_OPTIONS",
    "SIMILARITY_EPSILON",
    "SKILL_FIELDS",
    "SUGGESTION_THRESHOLDS",
    "TOP_K_DEFAULT",
    "MetricRange",
    "Settings",
]
