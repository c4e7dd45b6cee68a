"""Relic Bar: a turn-based roguelite driven by a timing action bar."""

__version__ = "0.1.0"
