"""Dependencies for the fee params API."""

from __future__ import annotations

from functools import lru_cache

from ..envs.service_env import Settings, get_settings
from ..infrastructure.database import DatabaseClient, get_database_client
from ..infrastructure.repositories import FeeParamsSettingsRepositoryImpl
from ..infrastructure.storage import RedisKeyValueStore
from ..application.use_cases.opening import OpeningService


@lru_cache()
def get_settings_dependency() -> Settings:
    return get_settings()


@lru_cache()
def get_database_client_dependency() -> DatabaseClient:
    settings = get_settings_dependency()
    return get_database_client(settings)


@lru_cache()
def get_store_dependency() -> RedisKeyValueStore:
    db_client = get_database_client_dependency()
    return RedisKeyValueStore(db_client)


def get_fee_params_settings_repository() -> FeeParamsSettingsRepositoryImpl:
    store = get_store_dependency()
    return FeeParamsSettingsRepositoryImpl(store)


def get_opening_service() -> OpeningService:
    return OpeningService(get_fee_params_settings_repository())
