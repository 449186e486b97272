"""Load and validate the roster dataset."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np
from pydantic import ValidationError

from promatch.config import PLAYER_VECTOR_LENGTH
from promatch.errors import RosterConfigError
from promatch.models import ProReference


logger = logging.getLogger(__name__)

_BUNDLED_ROSTER = "pros.json"


class Roster:
    """Immutable set of reference players sharing one vector length."""

    def __init__(self, entries: Iterable[ProReference], *, vector_length: int = PLAYER_VECTOR_LENGTH):
        self._entries: Tuple[ProReference, ...] = tuple(entries)
        self.vector_length = vector_length
        for index, entry in enumerate(self._entries):
            if len(entry.features) != vector_length:
                raise RosterConfigError(
                    f"Roster entry {index} ({entry.name!r}) has {len(entry.features)} features; "
                    f"expected {vector_length}"
                )
        matrix = np.array([entry.features for entry in self._entries], dtype=float)
        matrix = matrix.reshape(len(self._entries), vector_length)
        matrix.setflags(write=False)
        self._matrix = matrix

    @property
    def entries(self) -> Tuple[ProReference, ...]:
        return self._entries

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ProReference]:
        return iter(self._entries)


def _read_roster_text(path: Optional[Path]) -> Tuple[str, str]:
    if path is None:
        source = resources.files("promatch.data").joinpath(_BUNDLED_ROSTER)
        return source.read_text(encoding="utf-8"), f"bundled {_BUNDLED_ROSTER}"
    try:
        return Path(path).read_text(encoding="utf-8"), str(path)
    except OSError as exc:
        raise RosterConfigError(f"Unable to read roster file {path}: {exc}") from exc


def parse_roster(payload: object, *, expected_length: int = PLAYER_VECTOR_LENGTH) -> Roster:
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        raise RosterConfigError("Roster document must be a JSON array of players")
    entries = []
    for index, item in enumerate(payload):
        try:
            entries.append(ProReference.model_validate(item))
        except ValidationError as exc:
            raise RosterConfigError(f"Invalid roster entry {index}: {exc}") from exc
    return Roster(entries, vector_length=expected_length)


def load_roster(path: Optional[Path] = None, *, expected_length: int = PLAYER_VECTOR_LENGTH) -> Roster:
    """Load a roster from ``path``, or the bundled dataset when ``path`` is None."""

    text, source = _read_roster_text(path)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RosterConfigError(f"Roster file {source} is not valid JSON: {exc}") from exc
    roster = parse_roster(payload, expected_length=expected_length)
    if len(roster) == 0:
        logger.warning("Roster %s is empty; similarity rankings will be empty", source)
    else:
        logger.info("Loaded %d roster players from %s", len(roster), source)
    return roster
