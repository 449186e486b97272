"""REST API for player analysis and session lookup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from promatch.analysis import AnalysisService, MetricsProvider, RandomMetricsProvider, parse_attributes
from promatch.api.schemas import (
    AnalyzeResponse,
    MetricsResponse,
    SessionResponse,
    SimilarPlayerResponse,
)
from promatch.config import Settings
from promatch.errors import InvalidAttributesError, SessionNotFoundError
from promatch.persistence import JsonSessionStore, SessionStore, save_upload
from promatch.roster import Roster, load_roster


logger = logging.getLogger("uvicorn.error")


async def _store_video(upload: UploadFile | None, upload_dir: Path) -> Optional[Path]:
    if upload is None:
        return None
    contents = await upload.read()
    return save_upload(upload_dir, upload.filename, contents)


def create_app(
    settings: Settings | None = None,
    *,
    roster: Roster | None = None,
    store: SessionStore | None = None,
    metrics_provider: MetricsProvider | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    roster = roster if roster is not None else load_roster(settings.roster_path)
    store = store if store is not None else JsonSessionStore(settings.session_dir)
    service = AnalysisService(
        roster,
        store,
        metrics_provider or RandomMetricsProvider(),
        top_k=settings.top_k,
    )

    app = FastAPI(title="promatch")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = settings
    app.state.roster = roster
    app.state.session_store = store
    app.state.analysis_service = service

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/analyze", response_model=AnalyzeResponse)
    async def analyze(
        video: UploadFile | None = File(None),
        attributes: str | None = Form(None),
    ) -> AnalyzeResponse:
        try:
            raw_attrs, parsed = parse_attributes(attributes)
        except InvalidAttributesError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        video_path: Optional[Path] = None
        try:
            video_path = await _store_video(video, settings.upload_dir)
            result = service.analyze(raw_attrs, parsed, video_path)
        except Exception as exc:
            logger.exception("Analysis failed")
            if video_path is not None:
                video_path.unlink(missing_ok=True)
            raise HTTPException(status_code=500, detail="Failed to analyze") from exc

        return AnalyzeResponse(
            session_id=result.session_id,
            metrics=MetricsResponse(**result.metrics.model_dump()),
            suggestions=result.suggestions,
            similar_players=[SimilarPlayerResponse(**match.model_dump()) for match in result.similar_players],
        )

    @app.get("/sessions/{session_id}", response_model=SessionResponse)
    async def get_session(session_id: str) -> Any:
        try:
            return store.get(session_id).to_dict()
        except SessionNotFoundError as exc:
            raise HTTPException(status_code=404, detail="Session not found") from exc

    return app


__all__ = ["create_app"]
