"""Canonical models shared by the encoder, ranker and API layers."""

from .player import Metrics, PlayerAttributes, ProReference, RankedMatch

__all__ = ["Metrics", "PlayerAttributes", "ProReference", "RankedMatch"]
