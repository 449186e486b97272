"""Rank roster players by cosine similarity to a player vector."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from promatch.config import SIMILARITY_EPSILON, TOP_K_DEFAULT
from promatch.models import RankedMatch
from promatch.roster import Roster


def cosine_similarity(a: Sequence[float], b: Sequence[float], *, epsilon: float = SIMILARITY_EPSILON) -> float:
    va = np.asarray(a, dtype=float)
    vb = np.asarray(b, dtype=float)
    if va.shape != vb.shape:
        raise ValueError(f"vector lengths differ: {va.shape[0]} != {vb.shape[0]}")
    denom = np.linalg.norm(va) * np.linalg.norm(vb) + epsilon
    return float(np.dot(va, vb) / denom)


def rank_similar(
    vector: Sequence[float],
    roster: Roster,
    *,
    top_k: int = TOP_K_DEFAULT,
    epsilon: float = SIMILARITY_EPSILON,
) -> List[RankedMatch]:
    """Return the ``top_k`` most similar roster players, best first.

    Ties keep roster order.
    """

    player = np.asarray(vector, dtype=float)
    if player.shape != (roster.vector_length,):
        raise ValueError(
            f"player vector has {player.size} values; roster vectors have {roster.vector_length}"
        )
    if len(roster) == 0 or top_k <= 0:
        return []

    matrix = roster.matrix
    denoms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(player) + epsilon
    sims = (matrix @ player) / denoms
    order = np.argsort(-sims, kind="stable")[:top_k]

    entries = roster.entries
    return [
        RankedMatch(
            name=entries[idx].name,
            position=entries[idx].position,
            club=entries[idx].club,
            similarity=float(sims[idx]),
        )
        for idx in order
    ]
