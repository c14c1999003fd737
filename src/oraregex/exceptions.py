"""Exception types raised by the OraRegex emulation layer."""

__all__ = ["InvalidArgumentError"]


class InvalidArgumentError(ValueError):
    """
    Raised when a caller passes a numeric argument outside its contract.

    This mirrors the ``RAISE EXCEPTION`` branches of the Oracle-compatible
    routines: a non-positive position or occurrence, a negative group, or a
    return option other than 0 or 1. It is never raised for a pattern that
    simply does not match.
    """
