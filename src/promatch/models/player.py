"""Player, metric and roster models."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from promatch.config import DEFAULT_SKILL_SCORE


class PlayerAttributes(BaseModel):
    """Attributes posted alongside a clip.

    Skill scores are expected in [0, 1] but are not range-checked. Categorical
    fields accept any JSON value; anything outside the known vocabularies
    encodes to all-zero flags.
    """

    height_cm: float
    age: float
    dominant_foot: Optional[Any] = None
    position: Optional[Any] = None
    pace: float = DEFAULT_SKILL_SCORE
    dribbling: float = DEFAULT_SKILL_SCORE
    passing: float = DEFAULT_SKILL_SCORE
    shooting: float = DEFAULT_SKILL_SCORE

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class Metrics(BaseModel):
    knee_flex: int = Field(..., ge=0)
    body_lean: int = Field(..., ge=0)
    sprint_tempo: int = Field(..., ge=0)
    touches: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class ProReference(BaseModel):
    """Roster entry with a precomputed player vector."""

    name: str = Field(..., min_length=1)
    position: str
    club: str
    features: Tuple[float, ...]

    model_config = ConfigDict(frozen=True)


class RankedMatch(BaseModel):
    name: str
    position: str
    club: str
    similarity: float

    model_config = ConfigDict(frozen=True)
