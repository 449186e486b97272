import json
from pathlib import Path

import pytest

from promatch.analysis import AnalysisService, parse_attributes
from promatch.errors import InvalidAttributesError
from promatch.models import Metrics, PlayerAttributes
from promatch.persistence import JsonSessionStore
from promatch.roster import load_roster


class FixedMetrics:
    def __init__(self, metrics: Metrics):
        self.metrics = metrics
        self.calls = 0

    def measure(self, attributes, video_path=None):
        self.calls += 1
        return self.metrics


class BrokenMetrics:
    def measure(self, attributes, video_path=None):
        raise RuntimeError("pose model unavailable")


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "   ",
        "{not json",
        "[1, 2]",
        '{"height_cm": NaN, "age": 20}',
        '{"height_cm": 180, "age": 20, "note": -Infinity}',
        json.dumps({"age": 20}),
        json.dumps({"height_cm": "tall", "age": 20}),
    ],
)
def test_parse_attributes_rejects_bad_payloads(raw):
    with pytest.raises(InvalidAttributesError):
        parse_attributes(raw)


def test_parse_attributes_keeps_raw_payload():
    payload = {"height_cm": 172.5, "age": 15, "dominant_foot": "left", "position": "winger", "club": "Youth FC"}
    raw, attrs = parse_attributes(json.dumps(payload))
    assert raw == payload
    assert attrs.height_cm == 172.5
    assert attrs.pace == 0.6


def test_analyze_returns_ranked_matches_and_persists(tmp_path: Path):
    store = JsonSessionStore(tmp_path)
    metrics = Metrics(knee_flex=40, body_lean=20, sprint_tempo=180, touches=25)
    service = AnalysisService(load_roster(), store, FixedMetrics(metrics))
    raw = {"height_cm": 180, "dominant_foot": "right", "position": "striker", "age": 22}

    result = service.analyze(raw, PlayerAttributes(**raw))

    assert result.metrics == metrics
    assert len(result.similar_players) == 5
    sims = [match.similarity for match in result.similar_players]
    assert sims == sorted(sims, reverse=True)
    assert len(result.suggestions) == 1
    assert "knee flexion" in result.suggestions[0]
    stored = store.get(result.session_id)
    assert stored.attrs == raw
    assert stored.similar_players == result.similar_players


def test_failed_analysis_writes_no_session(tmp_path: Path):
    store = JsonSessionStore(tmp_path / "sessions")
    service = AnalysisService(load_roster(), store, BrokenMetrics())
    raw = {"height_cm": 180, "age": 22}

    with pytest.raises(RuntimeError):
        service.analyze(raw, PlayerAttributes(**raw))
    assert not (tmp_path / "sessions").exists()
