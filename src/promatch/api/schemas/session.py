from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field

from .analysis import MetricsResponse, SimilarPlayerResponse


class SessionResponse(BaseModel):
    id: str
    created_at: str
    attrs: dict[str, Any] = Field(default_factory=dict)
    metrics: MetricsResponse
    similar_players: List[SimilarPlayerResponse]
