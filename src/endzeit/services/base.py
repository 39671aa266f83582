"""BaseService — abstract foundation for all endzeit services.

Every service receives the frozen :class:`EndzeitSettings` at
construction time and reads its own config section from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from endzeit.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from endzeit.config.settings import EndzeitSettings
    from endzeit.domain.errors import EndzeitError


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class CountdownService(BaseService):
            def run(self, request: CountdownRequest) -> ServiceResult:
                interval = self._settings.countdown.tick_interval_ms
                ...
    """

    def __init__(self, settings: EndzeitSettings) -> None:
        self._settings = settings

    @staticmethod
    def _failure(op: str, exc: EndzeitError, **detail: Any) -> ServiceResult:
        """Wrap a domain error in a failed ServiceResult."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=detail),
        )
