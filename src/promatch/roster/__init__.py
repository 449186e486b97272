"""Static professional-player roster used for similarity ranking."""

from .loader import Roster, load_roster

__all__ = ["Roster", "load_roster"]
