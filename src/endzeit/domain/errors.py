"""Domain exceptions.

Each error carries a stable ``code`` that services copy into
:class:`~endzeit.services.result.ServiceError` so the CLI can map
failures without inspecting exception types.
"""

from __future__ import annotations


class EndzeitError(Exception):
    """Base class for all user-facing endzeit errors."""

    code = "ENDZEIT_ERROR"


class DateFormatError(EndzeitError):
    """The ``--date`` value matched none of the accepted formats."""

    code = "INVALID_DATE"


class TimeFormatError(EndzeitError):
    """The ``--time`` value matched none of the accepted formats."""

    code = "INVALID_TIME"


class PastTargetError(EndzeitError):
    """The computed target is not strictly in the future."""

    code = "PAST_TARGET"


class CommandLaunchError(EndzeitError):
    """The completion command could not be started or did not finish."""

    code = "COMMAND_LAUNCH_FAILED"


class TargetRangeError(EndzeitError):
    """The computed target falls outside the representable calendar."""

    code = "TARGET_OUT_OF_RANGE"
