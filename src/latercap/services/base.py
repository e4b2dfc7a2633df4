"""BaseService: abstract foundation for all latercap services.

Every service receives the resolved :class:`LatercapSettings` at
construction time and derives its keyword tables from them once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from latercap.config.settings import LatercapSettings
    from latercap.domain.vocabulary import Vocabulary


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class CaptureService(BaseService):
            def detect(self, text: str) -> ServiceResult:
                ...
    """

    def __init__(self, settings: LatercapSettings | None = None) -> None:
        if settings is None:
            from latercap.config.settings import LatercapSettings

            settings = LatercapSettings()
        self._settings = settings
        self._vocabulary: Vocabulary = settings.build_vocabulary()

    @property
    def settings(self) -> LatercapSettings:
        return self._settings
