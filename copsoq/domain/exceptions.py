"""
Domain errors raised at the edges of the laudo engine.

The scoring math itself never raises; these cover configuration and
workflow preconditions.
"""


class CopsoqError(ValueError):
    """Base class for laudo engine errors"""


class GuidanceConfigError(CopsoqError):
    """Guidance configuration is missing or incomplete"""


class LaudoNotReadyError(CopsoqError):
    """Batch still has evaluations that are not complete"""


class InvalidLaudoTransitionError(CopsoqError):
    """Requested laudo status change is not allowed"""


class ObservationsLockedError(CopsoqError):
    """Observations can no longer change once the laudo left draft"""
