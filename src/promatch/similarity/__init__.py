"""Cosine-similarity ranking against the roster."""

from .ranker import cosine_similarity, rank_similar

__all__ = ["cosine_similarity", "rank_similar"]
