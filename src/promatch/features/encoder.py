"""Encode player attributes into a fixed-length feature vector."""

from __future__ import annotations

from typing import Any, List, Sequence

from promatch.config import AGE_RANGE_YEARS, HEIGHT_RANGE_CM, FOOT_OPTIONS, POSITION_OPTIONS, SKILL_FIELDS
from promatch.models import PlayerAttributes


def scale_to_unit(value: float, low: float, high: float) -> float:
    """Map ``value`` linearly from [low, high] onto [0, 1], saturating outside."""

    scaled = (value - low) / (high - low)
    return min(max(scaled, 0.0), 1.0)


def one_hot(value: Any, options: Sequence[str]) -> List[float]:
    return [1.0 if value == option else 0.0 for option in options]


def encode_attributes(attrs: PlayerAttributes) -> List[float]:
    """Return ``[height, age, *skills, *foot_flags, *position_flags]``."""

    features = [
        scale_to_unit(attrs.height_cm, *HEIGHT_RANGE_CM),
        scale_to_unit(attrs.age, *AGE_RANGE_YEARS),
    ]
    features.extend(float(getattr(attrs, name)) for name in SKILL_FIELDS)
    features.extend(one_hot(attrs.dominant_foot, FOOT_OPTIONS))
    features.extend(one_hot(attrs.position, POSITION_OPTIONS))
    return features
