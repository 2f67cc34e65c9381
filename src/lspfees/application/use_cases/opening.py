"""Use cases for issuing and re-validating signed opening fee params."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

import coincurve

from ...crypto.promise import create_promise, verify_promise
from ...domain.entities import OpeningFeeParams
from ...domain.errors import FeeMenuUnavailableError, InvalidPromiseError
from ...domain.repositories import FeeParamsSettingsRepository
from ...domain.timestamps import format_timestamp, parse_timestamp

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OpeningService:
    """Builds fee menus and checks fee params clients hand back.

    Nothing about issued params is kept: a promise carries everything needed
    to validate it later against the service public key.
    """

    def __init__(
        self,
        settings_repo: FeeParamsSettingsRepository,
        now: Callable[[], datetime] = _utc_now,
    ):
        self.settings_repo = settings_repo
        self._now = now

    async def get_fee_params_menu(
        self, token: str, private_key: coincurve.PrivateKey
    ) -> list[OpeningFeeParams]:
        try:
            settings = await self.settings_repo.get_fee_params_settings(token)
        except Exception as e:
            logger.exception("Failed to fetch fee params settings: %s", e)
            raise FeeMenuUnavailableError("failed to get opening_fee_params") from e

        if not settings:
            logger.warning("No fee params settings found [token=%s]", token)
            return []

        menu: list[OpeningFeeParams] = []
        for setting in settings:
            valid_until = self._now() + setting.validity
            unsigned = OpeningFeeParams(
                min_fee_msat=setting.min_msat,
                proportional=setting.proportional,
                valid_until=format_timestamp(valid_until),
                min_lifetime=setting.max_idle_time,
                max_client_to_self_delay=setting.max_client_to_self_delay,
            )
            # PromiseSigningError aborts the whole menu.
            promise = create_promise(private_key, unsigned)
            menu.append(unsigned.model_copy(update={"promise": promise}))

        menu.sort(key=lambda params: (params.min_fee_msat, params.proportional))
        return menu

    def validate_opening_fee_params(
        self,
        params: Optional[OpeningFeeParams],
        public_key: coincurve.PublicKey,
    ) -> bool:
        if params is None:
            return False

        try:
            verify_promise(public_key, params)
        except InvalidPromiseError:
            return False
        except Exception as e:
            logger.error("validate_opening_fee_params: verify error: %s", e)
            return False

        try:
            valid_until = parse_timestamp(params.valid_until)
        except ValueError as e:
            logger.warning(
                "validate_opening_fee_params: cannot parse valid_until %r: %s",
                params.valid_until,
                e,
            )
            return False

        if self._now() > valid_until:
            logger.warning(
                "validate_opening_fee_params: promise not valid anymore: %s",
                params.valid_until,
            )
            return False

        return True
