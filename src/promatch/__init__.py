"""Player-to-pro similarity matching and coaching suggestions."""

__version__ = "0.1.0"
