"""End-to-end analysis pipeline: encode, measure, rank, suggest, persist."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import ValidationError

from promatch.config import TOP_K_DEFAULT
from promatch.errors import InvalidAttributesError
from promatch.features import compose_player_vector, encode_attributes
from promatch.models import Metrics, PlayerAttributes, RankedMatch
from promatch.persistence import SessionStore
from promatch.roster import Roster
from promatch.similarity import rank_similar

from .metrics import MetricsProvider
from .suggestions import suggestions_from_metrics


logger = logging.getLogger("uvicorn.error")


@dataclass
class AnalysisResult:
    session_id: str
    metrics: Metrics
    suggestions: List[str]
    similar_players: List[RankedMatch]


def _reject_constant(token: str) -> float:
    raise InvalidAttributesError(f"Invalid attributes JSON: {token} is not a JSON value")


def parse_attributes(raw: Optional[str]) -> Tuple[dict, PlayerAttributes]:
    """Decode the JSON ``attributes`` form field.

    Returns the decoded object as posted (for the session record) together
    with the validated model.
    """

    if raw is None or not raw.strip():
        raise InvalidAttributesError("Missing attributes")
    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise InvalidAttributesError(f"Invalid attributes JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise InvalidAttributesError("attributes must be a JSON object")
    try:
        attributes = PlayerAttributes.model_validate(payload)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())
        raise InvalidAttributesError(f"Invalid attributes: {fields}") from exc
    return payload, attributes


class AnalysisService:
    def __init__(
        self,
        roster: Roster,
        store: SessionStore,
        metrics_provider: MetricsProvider,
        *,
        top_k: int = TOP_K_DEFAULT,
    ):
        self.roster = roster
        self.store = store
        self.metrics_provider = metrics_provider
        self.top_k = top_k

    def analyze(
        self,
        raw_attrs: dict,
        attributes: PlayerAttributes,
        video_path: Optional[Path] = None,
    ) -> AnalysisResult:
        features = encode_attributes(attributes)
        metrics = self.metrics_provider.measure(attributes, video_path)
        player_vector = compose_player_vector(features, metrics)
        similar = rank_similar(player_vector, self.roster, top_k=self.top_k)
        suggestions = suggestions_from_metrics(metrics)

        # Persist last so a failure earlier never leaves a record behind.
        record = self.store.create(attrs=raw_attrs, metrics=metrics, similar_players=similar)
        logger.info(
            "Analyzed session %s: top match %s",
            record.session_id,
            similar[0].name if similar else "none",
        )
        return AnalysisResult(
            session_id=record.session_id,
            metrics=metrics,
            suggestions=suggestions,
            similar_players=similar,
        )
