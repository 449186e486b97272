from __future__ import annotations

from typing import List

from pydantic import BaseModel


class MetricsResponse(BaseModel):
    knee_flex: int
    body_lean: int
    sprint_tempo: int
    touches: int


class SimilarPlayerResponse(BaseModel):
    name: str
    position: str
    club: str
    similarity: float


class AnalyzeResponse(BaseModel):
    session_id: str
    metrics: MetricsResponse
    suggestions: List[str]
    similar_players: List[SimilarPlayerResponse]
