"""Domain errors."""


class ScheduleParseError(ValueError):
    """Raised when a schedule document is structurally invalid or holds a bad time."""
