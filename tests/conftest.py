"""Shared pytest fixtures for fee params tests."""

from __future__ import annotations

import os
from typing import AsyncGenerator

import coincurve
import pytest
import pytest_asyncio
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from lspfees.application.use_cases.opening import OpeningService
from lspfees.infrastructure.database import DatabaseClient
from lspfees.infrastructure.storage import RedisKeyValueStore
from tests.fixtures import InMemoryFeeParamsSettingsRepository


@pytest.fixture
def lsp_private_key() -> coincurve.PrivateKey:
    """Generate a service signing key for testing."""
    return coincurve.PrivateKey()


@pytest.fixture
def lsp_public_key(lsp_private_key: coincurve.PrivateKey) -> coincurve.PublicKey:
    return lsp_private_key.public_key


@pytest.fixture
def lsp_private_key_pem() -> str:
    """A secp256k1 private key as PKCS8 PEM string."""
    private_key = ec.generate_private_key(ec.SECP256K1())
    pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return pem.decode("utf-8")


@pytest.fixture
async def settings_repository() -> AsyncGenerator[
    InMemoryFeeParamsSettingsRepository, None
]:
    """Create an in-memory fee settings repository."""
    repo = InMemoryFeeParamsSettingsRepository()
    yield repo
    repo.clear()


@pytest.fixture
def opening_service(
    settings_repository: InMemoryFeeParamsSettingsRepository,
) -> OpeningService:
    return OpeningService(settings_repository)


class TestDatabaseSettings:
    """Test settings for Redis connection."""

    __test__ = False

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url


@pytest_asyncio.fixture
async def redis_db_client() -> AsyncGenerator[DatabaseClient, None]:
    """Create a Redis database client for testing.

    Uses TEST_REDIS_URL if set, otherwise localhost:6379/15. Tests are
    skipped when Redis is not reachable.
    """
    test_redis_url = os.getenv("TEST_REDIS_URL", "redis://localhost:6379/15")
    client = DatabaseClient(TestDatabaseSettings(database_url=test_redis_url))
    client.initialize_database()

    try:
        async with client.get_connection() as conn:
            await conn.ping()
    except Exception as e:
        await client.close()
        pytest.skip(f"Redis not available at {test_redis_url}: {e}")

    yield client

    async with client.get_connection() as conn:
        await conn.flushdb()
    await client.close()


@pytest_asyncio.fixture
async def redis_store(redis_db_client: DatabaseClient) -> RedisKeyValueStore:
    """Create a Redis-backed key-value store for testing."""
    return RedisKeyValueStore(redis_db_client)
