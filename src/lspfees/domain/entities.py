"""Domain entities: FeeParamSetting and OpeningFeeParams."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1

MAX_VALIDITY = timedelta(days=365)


class FeeParamSetting(BaseModel):
    """Fee configuration template stored per token."""

    min_msat: int = Field(ge=0, le=UINT64_MAX)
    proportional: int = Field(ge=0, le=UINT32_MAX)
    max_idle_time: int = Field(ge=0, le=UINT32_MAX)
    max_client_to_self_delay: int = Field(ge=0, le=UINT32_MAX)
    validity: timedelta

    @field_validator("validity")
    @classmethod
    def validate_validity(cls, v: timedelta) -> timedelta:
        if v <= timedelta(0):
            raise ValueError("Validity must be positive")
        if v % timedelta(seconds=1):
            raise ValueError("Validity must be a whole number of seconds")
        if v > MAX_VALIDITY:
            raise ValueError(f"Validity must not exceed {MAX_VALIDITY.days} days")
        return v

    @field_serializer("validity")
    def serialize_validity(self, value: timedelta) -> int:
        return int(value.total_seconds())


class OpeningFeeParams(BaseModel):
    """Fee offer handed to a client, bound to its expiry by ``promise``.

    ``min_fee_msat`` travels as a decimal string because it can exceed the
    safe integer range of some client runtimes.
    """

    model_config = ConfigDict(frozen=True)

    min_fee_msat: int = Field(ge=0, le=UINT64_MAX)
    proportional: int = Field(ge=0, le=UINT32_MAX)
    valid_until: str
    min_lifetime: int = Field(ge=0, le=UINT32_MAX)
    max_client_to_self_delay: int = Field(ge=0, le=UINT32_MAX)
    promise: str = ""

    @field_serializer("min_fee_msat", when_used="json")
    def serialize_min_fee_msat(self, value: int) -> str:
        return str(value)
