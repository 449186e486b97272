"""Scaling constants and vocabularies shared by the encoder, composer and ranker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple


@dataclass(frozen=True)
class MetricRange:
    low: int
    high: int

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, (int, float)):
            return False
        return self.low <= value <= self.high


HEIGHT_RANGE_CM: Tuple[float, float] = (150.0, 200.0)
AGE_RANGE_YEARS: Tuple[float, float] = (12.0, 32.0)

DEFAULT_SKILL_SCORE = 0.6
SKILL_FIELDS: Tuple[str, ...] = ("pace", "dribbling", "passing", "shooting")

FOOT_OPTIONS: Tuple[str, ...] = ("right", "left", "two-footed")
POSITION_OPTIONS: Tuple[str, ...] = ("winger", "striker", "midfielder", "defender", "goalkeeper")

# Order matters: it is the tail layout of every player and roster vector.
METRIC_FIELDS: Tuple[str, ...] = ("knee_flex", "body_lean", "sprint_tempo", "touches")

METRIC_RANGES: Mapping[str, MetricRange] = {
    "knee_flex": MetricRange(30, 90),
    "body_lean": MetricRange(5, 30),
    "sprint_tempo": MetricRange(140, 200),
    "touches": MetricRange(10, 35),
}

METRIC_SCALES: Mapping[str, float] = {
    "knee_flex": 120.0,
    "body_lean": 45.0,
    "sprint_tempo": 220.0,
    "touches": 60.0,
}

# height, age, skills, foot flags, position flags
FEATURE_VECTOR_LENGTH = 2 + len(SKILL_FIELDS) + len(FOOT_OPTIONS) + len(POSITION_OPTIONS)
PLAYER_VECTOR_LENGTH = FEATURE_VECTOR_LENGTH + len(METRIC_FIELDS)

SIMILARITY_EPSILON = 1e-9
TOP_K_DEFAULT = 5

# A suggestion fires when the metric falls below its threshold.
SUGGESTION_THRESHOLDS: Mapping[str, int] = {
    "knee_flex": 50,
    "body_lean": 10,
    "sprint_tempo": 160,
    "touches": 15,
}
