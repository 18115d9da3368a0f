from enum import IntEnum


class Status(IntEnum):
    """Check states as understood by Nagios/Icinga; the value is the exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3
