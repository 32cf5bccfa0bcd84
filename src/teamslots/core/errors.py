"""Common teamslots-specific exceptions."""


class TeamSlotsValueError(ValueError):
    """Raised when teamslots detects invalid user-provided data."""


class ScheduleParseError(TeamSlotsValueError):
    """Raised when a clock-time token cannot be converted to minutes."""


class QueryRangeError(TeamSlotsValueError):
    """Raised when a point query window does not start before it ends."""


class RosterShapeError(TeamSlotsValueError):
    """Raised when a roster table is missing required columns or usable rows."""


__all__ = [
    "TeamSlotsValueError",
    "ScheduleParseError",
    "QueryRangeError",
    "RosterShapeError",
]
