"""
Library-wide runtime settings.
"""
import logging

from pyvecmath.exceptions import DegenerateVectorError
from pyvecmath.types.enums import LogLevel, ZeroVectorPolicy

logger = logging.getLogger(__name__)

_LOGGING_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class Settings:
    """
    Process-wide settings for the vector types. Values are read at call time,
    so changing a class attribute takes effect immediately for every vector.
    """

    PACKAGE_LOGGER: str = "pyvecmath"
    """Name of the logger that all pyvecmath modules log under."""

    LOG_LEVEL: LogLevel = LogLevel.WARNING
    """Level applied to the package logger by apply_log_level()."""

    ZERO_VECTOR_POLICY: ZeroVectorPolicy = ZeroVectorPolicy.KEEP_ZERO
    """
    How normalize, set_magnitude, look_at, project, clamp and limit_min treat
    a zero-length vector. KEEP_ZERO leaves it zero, RAISE raises
    DegenerateVectorError. angle_between always raises regardless.
    """

    @classmethod
    def apply_log_level(cls) -> None:
        """Pushes LOG_LEVEL onto the package logger. LogLevel.NONE silences it."""
        package_logger = logging.getLogger(cls.PACKAGE_LOGGER)
        if cls.LOG_LEVEL == LogLevel.NONE:
            package_logger.disabled = True
            return
        package_logger.disabled = False
        package_logger.setLevel(_LOGGING_LEVELS[cls.LOG_LEVEL])

    @classmethod
    def check_zero_vector(cls, operation: str, vector) -> None:
        """
        Applies ZERO_VECTOR_POLICY to a degenerate case. Returns normally when the
        caller should leave the vector zero.

        Raises:
            DegenerateVectorError: If the policy is RAISE.
        """
        if cls.ZERO_VECTOR_POLICY is ZeroVectorPolicy.RAISE:
            raise DegenerateVectorError(operation, vector)
        logger.debug(f"{operation}: {vector!r} has zero length.")
