"""Data Transfer Objects for the fee params API."""

from __future__ import annotations

from pydantic import BaseModel

from ..domain.entities import OpeningFeeParams


class FeeParamsMenuRequestDTO(BaseModel):
    """Client asks for the fee menu configured for its token."""

    token: str


class FeeParamsMenuResponseDTO(BaseModel):
    """Signed fee offers, cheapest first."""

    opening_fee_params_menu: list[OpeningFeeParams]


class FeeParamsValidationResponseDTO(BaseModel):
    valid: bool


class ServicePublicKeyDTO(BaseModel):
    """Compressed secp256k1 public key of the service, hex-encoded."""

    pubkey: str
