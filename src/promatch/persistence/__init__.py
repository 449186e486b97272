"""Persistence for session records and uploaded clips."""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, List, Optional, Protocol
from uuid import uuid4

from promatch.errors import SessionNotFoundError, SessionPersistError
from promatch.models import Metrics, RankedMatch


logger = logging.getLogger(__name__)

_SESSION_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")
_SESSION_ID_LENGTH = 8
_MAX_ID_ATTEMPTS = 16
_DEFAULT_VIDEO_SUFFIX = ".mp4"


@dataclass(frozen=True)
class SessionRecord:
    session_id: str
    created_at: datetime
    attrs: dict
    metrics: Metrics
    similar_players: List[RankedMatch] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.session_id,
            "created_at": self.created_at.isoformat(),
            "attrs": self.attrs,
            "metrics": self.metrics.model_dump(),
            "similar_players": [match.model_dump() for match in self.similar_players],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SessionRecord":
        return cls(
            session_id=data["id"],
            created_at=datetime.fromisoformat(data["created_at"]),
            attrs=data.get("attrs", {}),
            metrics=Metrics.model_validate(data["metrics"]),
            similar_players=[RankedMatch.model_validate(item) for item in data.get("similar_players", [])],
        )


class SessionStore(Protocol):
    def create(
        self,
        *,
        attrs: dict,
        metrics: Metrics,
        similar_players: Iterable[RankedMatch],
    ) -> SessionRecord:
        ...

    def get(self, session_id: str) -> SessionRecord:
        ...


class JsonSessionStore:
    """One write-once JSON file per session, named ``<session_id>.json``."""

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def _path_for(self, session_id: str) -> Path:
        if not _SESSION_ID_PATTERN.match(session_id):
            raise SessionNotFoundError(session_id)
        return self.directory / f"{session_id}.json"

    def _claim(self, target: Path, text: str) -> bool:
        """Write ``text`` to ``target`` only if it does not exist yet.

        Returns False when another record already owns the name.
        """

        tmp_path: Optional[Path] = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.directory,
                prefix=f".{target.stem}-",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(text)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.link(tmp_path, target)
        except FileExistsError:
            return False
        except OSError as exc:
            raise SessionPersistError(f"Failed to write session {target.stem}: {exc}") from exc
        finally:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
        return True

    def create(
        self,
        *,
        attrs: dict,
        metrics: Metrics,
        similar_players: Iterable[RankedMatch],
        created_at: Optional[datetime] = None,
    ) -> SessionRecord:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SessionPersistError(f"Unable to create session directory {self.directory}: {exc}") from exc
        created_at = created_at or datetime.now(timezone.utc)
        attrs = dict(attrs)
        similar_players = list(similar_players)
        for _ in range(_MAX_ID_ATTEMPTS):
            record = SessionRecord(
                session_id=uuid4().hex[:_SESSION_ID_LENGTH],
                created_at=created_at,
                attrs=attrs,
                metrics=metrics,
                similar_players=similar_players,
            )
            try:
                text = json.dumps(record.to_dict(), indent=2, ensure_ascii=False, allow_nan=False)
            except ValueError as exc:
                raise SessionPersistError(f"Session {record.session_id} is not serialisable: {exc}") from exc
            if self._claim(self._path_for(record.session_id), text):
                logger.info("Stored session %s", record.session_id)
                return record
        raise SessionPersistError("Unable to allocate a unique session id")

    def get_raw(self, session_id: str) -> dict[str, Any]:
        path = self._path_for(session_id)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise SessionNotFoundError(session_id) from exc
        return json.loads(text)

    def get(self, session_id: str) -> SessionRecord:
        return SessionRecord.from_dict(self.get_raw(session_id))


def save_upload(upload_dir: Path | str, filename: Optional[str], contents: bytes) -> Optional[Path]:
    """Store an uploaded clip as ``<epoch-ms>_<id><ext>``; empty uploads are skipped."""

    if not contents:
        return None
    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)
    suffix = Path(filename).suffix if filename else ""
    name = f"{int(time.time() * 1000)}_{uuid4().hex[:8]}{suffix or _DEFAULT_VIDEO_SUFFIX}"
    path = directory / name
    path.write_bytes(contents)
    return path


__all__ = [
    "JsonSessionStore",
    "SessionRecord",
    "SessionStore",
    "save_upload",
]
