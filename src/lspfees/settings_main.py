"""Load the fee settings of one token into the store from a JSON file.

Usage: lspfees-load-settings <token> <settings.json>

The file holds a list of objects with min_msat, proportional, max_idle_time,
max_client_to_self_delay and validity (seconds). An empty list removes the
token's settings.
"""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

from pydantic import TypeAdapter

from .domain.entities import FeeParamSetting
from .infrastructure.database import DatabaseClient
from .infrastructure.repositories import FeeParamsSettingsRepositoryImpl
from .infrastructure.storage import RedisKeyValueStore


class _StoreSettings:
    def __init__(self, database_url: str) -> None:
        self.database_url = database_url


async def load_settings(database_url: str, token: str, path: Path) -> int:
    settings = TypeAdapter(list[FeeParamSetting]).validate_json(path.read_text())
    db_client = DatabaseClient(_StoreSettings(database_url))
    try:
        repo = FeeParamsSettingsRepositoryImpl(RedisKeyValueStore(db_client))
        await repo.set_fee_params_settings(token, settings)
    finally:
        await db_client.close()
    return len(settings)


def main() -> None:
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(2)
    token, path = sys.argv[1], Path(sys.argv[2])
    database_url = os.environ.get("LSPFEES_DATABASE_URL", "redis://localhost:6379/0")

    count = asyncio.run(load_settings(database_url, token, path))
    print(f"Stored {count} fee params settings for token {token!r}")


if __name__ == "__main__":
    main()
