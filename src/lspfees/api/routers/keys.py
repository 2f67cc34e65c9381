from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...application.dtos import ServicePublicKeyDTO
from ...crypto.promise import public_key_hex
from ...envs.service_env import Settings
from ..dependencies import get_settings_dependency

router = APIRouter(tags=["keys"])


@router.get(
    "/keys/public",
    response_model=ServicePublicKeyDTO,
    status_code=status.HTTP_200_OK,
)
async def get_public_key(
    settings: Settings = Depends(get_settings_dependency),
) -> ServicePublicKeyDTO:
    """Key that verifies every promise this service issues."""
    return ServicePublicKeyDTO(pubkey=public_key_hex(settings.public_key))
