"""Fee settings repository implemented over a storage abstraction."""

from __future__ import annotations

import json

from pydantic import TypeAdapter

from ..domain.entities import FeeParamSetting
from ..domain.repositories import FeeParamsSettingsRepository
from .storage import KeyValueStore

_settings_adapter = TypeAdapter(list[FeeParamSetting])


class FeeParamsSettingsRepositoryImpl(FeeParamsSettingsRepository):
    """Fee settings stored as one JSON list per token."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    @staticmethod
    def _token_key(token: str) -> str:
        return f"fee_params_settings:{token}"

    async def get_fee_params_settings(self, token: str) -> list[FeeParamSetting]:
        data = await self.store.get(self._token_key(token))
        if not data:
            return []
        return _settings_adapter.validate_json(data)

    async def set_fee_params_settings(
        self, token: str, settings: list[FeeParamSetting]
    ) -> None:
        if not settings:
            await self.store.delete(self._token_key(token))
            return
        payload = [setting.model_dump() for setting in settings]
        await self.store.set(self._token_key(token), json.dumps(payload))
