"""Feature encoding and player-vector composition."""

from .composer import compose_player_vector, normalize_metrics
from .encoder import encode_attributes, one_hot, scale_to_unit

__all__ = [
    "compose_player_vector",
    "encode_attributes",
    "normalize_metrics",
    "one_hot",
    "scale_to_unit",
]
