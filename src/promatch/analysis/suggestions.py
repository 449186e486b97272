"""Threshold rules that turn metrics into coaching suggestions."""

from __future__ import annotations

from typing import List, Tuple

from promatch.config import SUGGESTION_THRESHOLDS
from promatch.models import Metrics


SUGGESTION_RULES: Tuple[Tuple[str, str], ...] = (
    (
        "knee_flex",
        "Increase knee flexion during acceleration to improve power (add wall-sit holds and mini-hurdles).",
    ),
    (
        "body_lean",
        "Add forward body-lean on the first 2-3 steps; try 'lean & go' resisted sprints.",
    ),
    (
        "sprint_tempo",
        "Improve step cadence with 10m fast-feet ladders and 5x10m accelerations.",
    ),
    (
        "touches",
        "Raise ball-contact frequency; 3x2min tight touches and V-pulls.",
    ),
)

FALLBACK_SUGGESTION = (
    "Great base mechanics; progress to position-specific drills and resisted sprints."
)


def suggestions_from_metrics(metrics: Metrics) -> List[str]:
    suggestions = [
        text
        for field_name, text in SUGGESTION_RULES
        if getattr(metrics, field_name) < SUGGESTION_THRESHOLDS[field_name]
    ]
    return suggestions or [FALLBACK_SUGGESTION]
