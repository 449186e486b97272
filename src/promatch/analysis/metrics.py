"""Metrics providers.

Only a random placeholder ships today; a real pose pipeline can slot in behind
the same ``measure`` signature.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Optional, Protocol

from promatch.config import METRIC_FIELDS, METRIC_RANGES
from promatch.models import Metrics, PlayerAttributes


class MetricsProvider(Protocol):
    def measure(self, attributes: PlayerAttributes, video_path: Optional[Path] = None) -> Metrics:
        ...


class RandomMetricsProvider:
    """Draw every metric uniformly from its documented range."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def measure(self, attributes: PlayerAttributes, video_path: Optional[Path] = None) -> Metrics:
        values = {}
        for name in METRIC_FIELDS:
            bounds = METRIC_RANGES[name]
            values[name] = int(round(self._rng.uniform(bounds.low, bounds.high)))
        return Metrics(**values)
