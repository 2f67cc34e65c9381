"""Domain repositories: FeeParamsSettingsRepository."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .entities import FeeParamSetting


class FeeParamsSettingsRepository(ABC):
    """Source of the fee settings configured for each token."""

    @abstractmethod
    async def get_fee_params_settings(self, token: str) -> list[FeeParamSetting]:
        pass

    @abstractmethod
    async def set_fee_params_settings(
        self, token: str, settings: list[FeeParamSetting]
    ) -> None:
        """Replace every setting stored for ``token``."""
        pass
