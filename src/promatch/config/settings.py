"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

from .scaling import TOP_K_DEFAULT


logger = logging.getLogger(__name__)

_SESSION_DIR_ENV = "PROMATCH_SESSION_DIR"
_UPLOAD_DIR_ENV = "PROMATCH_UPLOAD_DIR"
_ROSTER_PATH_ENV = "PROMATCH_ROSTER_PATH"
_TOP_K_ENV = "PROMATCH_TOP_K"
_CORS_ORIGINS_ENV = "PROMATCH_CORS_ORIGINS"
_HOST_ENV = "PROMATCH_HOST"
_PORT_ENV = "PORT"

_PORT_DEFAULT = 3000
_HOST_DEFAULT = "0.0.0.0"


def _env_int(
    env: Mapping[str, str],
    name: str,
    default: int,
    *,
    min_value: int | None = None,
) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_path(env: Mapping[str, str], name: str, default: Optional[Path]) -> Optional[Path]:
    raw = env.get(name)
    if not raw:
        return default
    return Path(raw).expanduser()


def _env_origins(env: Mapping[str, str], name: str) -> Tuple[str, ...]:
    raw = env.get(name)
    if not raw:
        return ("*",)
    origins = tuple(part.strip() for part in raw.split(",") if part.strip())
    return origins or ("*",)


@dataclass(frozen=True)
class Settings:
    session_dir: Path = field(default_factory=lambda: Path("sessions"))
    upload_dir: Path = field(default_factory=lambda: Path("uploads"))
    roster_path: Optional[Path] = None
    top_k: int = TOP_K_DEFAULT
    cors_origins: Tuple[str, ...] = ("*",)
    host: str = _HOST_DEFAULT
    port: int = _PORT_DEFAULT

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``env`` (defaults to ``os.environ``).

        A ``roster_path`` of ``None`` means the roster bundled with the package.
        """

        env = os.environ if env is None else env
        return cls(
            session_dir=_env_path(env, _SESSION_DIR_ENV, Path("sessions")),
            upload_dir=_env_path(env, _UPLOAD_DIR_ENV, Path("uploads")),
            roster_path=_env_path(env, _ROSTER_PATH_ENV, None),
            top_k=_env_int(env, _TOP_K_ENV, TOP_K_DEFAULT, min_value=1),
            cors_origins=_env_origins(env, _CORS_ORIGINS_ENV),
            host=env.get(_HOST_ENV) or _HOST_DEFAULT,
            port=_env_int(env, _PORT_ENV, _PORT_DEFAULT, min_value=1),
        )
