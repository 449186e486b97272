"""Combine encoded attributes with normalised metrics."""

from __future__ import annotations

from typing import List, Sequence

from promatch.config import FEATURE_VECTOR_LENGTH, METRIC_FIELDS, METRIC_SCALES
from promatch.models import Metrics


def normalize_metrics(metrics: Metrics) -> List[float]:
    return [min(getattr(metrics, name) / METRIC_SCALES[name], 1.0) for name in METRIC_FIELDS]


def compose_player_vector(features: Sequence[float], metrics: Metrics) -> List[float]:
    """Append the normalised metrics to ``features``.

    The layout must match the roster vectors exactly, so a feature vector of
    the wrong length is rejected rather than padded.
    """

    if len(features) != FEATURE_VECTOR_LENGTH:
        raise ValueError(
            f"feature vector must have {FEATURE_VECTOR_LENGTH} values, got {len(features)}"
        )
    return [float(value) for value in features] + normalize_metrics(metrics)
