"""Opening fee params API routes."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, status
from prometheus_client import Counter, Histogram

from ...application.dtos import (
    FeeParamsMenuRequestDTO,
    FeeParamsMenuResponseDTO,
    FeeParamsValidationResponseDTO,
)
from ...application.use_cases.opening import OpeningService
from ...domain.entities import OpeningFeeParams
from ...domain.errors import FeeMenuUnavailableError, PromiseSigningError
from ...envs.service_env import Settings
from ..dependencies import get_opening_service, get_settings_dependency

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/opening_fee_params", tags=["opening_fee_params"])

fee_params_menu_requests_total = Counter(
    "fee_params_menu_requests_total",
    "Total fee params menu requests processed",
    ["status"],
)
fee_params_menu_request_duration_milliseconds = Histogram(
    "fee_params_menu_request_duration_milliseconds",
    "Wall time to build and sign a fee params menu (ms)",
    ["status"],
)
fee_params_validations_total = Counter(
    "fee_params_validations_total",
    "Total opening fee params validations",
    ["result"],
)


def _observe_menu(status_label: str, start_time: float) -> None:
    fee_params_menu_requests_total.labels(status=status_label).inc()
    elapsed = (time.perf_counter() - start_time) * 1000
    fee_params_menu_request_duration_milliseconds.labels(
        status=status_label
    ).observe(elapsed)


@router.post(
    "/menu",
    response_model=FeeParamsMenuResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_fee_params_menu(
    payload: FeeParamsMenuRequestDTO,
    service: OpeningService = Depends(get_opening_service),
    settings: Settings = Depends(get_settings_dependency),
) -> FeeParamsMenuResponseDTO:
    """Return the signed fee menu for a token, cheapest offer first."""
    start_time = time.perf_counter()
    try:
        menu = await service.get_fee_params_menu(payload.token, settings.private_key)
    except FeeMenuUnavailableError as e:
        _observe_menu("server_error", start_time)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)
        )
    except PromiseSigningError:
        logger.exception("Failed to sign fee params menu")
        _observe_menu("server_error", start_time)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error while building fee params menu",
        )
    _observe_menu("success", start_time)
    return FeeParamsMenuResponseDTO(opening_fee_params_menu=menu)


@router.post(
    "/validation",
    response_model=FeeParamsValidationResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def validate_fee_params(
    params: OpeningFeeParams,
    service: OpeningService = Depends(get_opening_service),
    settings: Settings = Depends(get_settings_dependency),
) -> FeeParamsValidationResponseDTO:
    valid = service.validate_opening_fee_params(params, settings.public_key)
    fee_params_validations_total.labels(result="valid" if valid else "invalid").inc()
    return FeeParamsValidationResponseDTO(valid=valid)
