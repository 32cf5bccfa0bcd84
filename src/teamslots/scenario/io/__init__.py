"""Roster IO helpers."""

from .loaders import load_roster, open_roster, read_csv, roster_records

__all__ = ["load_roster", "open_roster", "read_csv", "roster_records"]
