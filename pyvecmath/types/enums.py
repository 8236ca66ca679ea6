from enum import Enum, IntEnum


class LogLevel(IntEnum): NONE = 0; DEBUG = 1; INFO = 2; WARNING = 3; ERROR = 4


class ZeroVectorPolicy(Enum):
    """What direction-dependent operations do when they meet a zero-length vector."""
    KEEP_ZERO = "keep_zero" # Leave the result zero and log at DEBUG level
    RAISE = "raise"         # Raise DegenerateVectorError
