"""Roster contracts, IO, and synthetic generators."""

from .contract import Person, Roster, RosterBundle

__all__ = ["Person", "Roster", "RosterBundle"]
