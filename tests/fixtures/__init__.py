"""Test fixtures for in-memory implementations."""

from .in_memory_storage import InMemoryKeyValueStore
from .in_memory_repositories import (
    FailingFeeParamsSettingsRepository,
    InMemoryFeeParamsSettingsRepository,
)
from .settings import make_setting

__all__ = [
    "FailingFeeParamsSettingsRepository",
    "InMemoryFeeParamsSettingsRepository",
    "InMemoryKeyValueStore",
    "make_setting",
]
