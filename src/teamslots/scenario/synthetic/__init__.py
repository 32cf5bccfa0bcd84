"""Synthetic roster generation."""

from .generator import SyntheticRosterSpec, generate_roster

__all__ = ["SyntheticRosterSpec", "generate_roster"]
