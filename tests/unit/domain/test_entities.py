"""Unit tests for fee params entities and their wire encoding."""

import json
from datetime import timedelta

import pytest
from pydantic import ValidationError

from lspfees.domain.entities import MAX_VALIDITY, FeeParamSetting, OpeningFeeParams


WIRE = {
    "min_fee_msat": "18446744073709551615",
    "proportional": 1000,
    "valid_until": "2024-05-01T12:00:00.5Z",
    "min_lifetime": 4320,
    "max_client_to_self_delay": 432,
    "promise": "ab" * 65,
}


class TestOpeningFeeParams:
    def test_decode_wire_object(self) -> None:
        params = OpeningFeeParams.model_validate(WIRE)
        assert params.min_fee_msat == 2**64 - 1
        assert params.promise == "ab" * 65

    def test_encode_min_fee_as_decimal_string(self) -> None:
        params = OpeningFeeParams.model_validate(WIRE)
        encoded = json.loads(params.model_dump_json())
        assert encoded == WIRE

    def test_min_fee_accepts_integer(self) -> None:
        params = OpeningFeeParams.model_validate({**WIRE, "min_fee_msat": 100})
        assert params.min_fee_msat == 100

    def test_missing_promise_is_unsigned(self) -> None:
        data = {k: v for k, v in WIRE.items() if k != "promise"}
        assert OpeningFeeParams.model_validate(data).promise == ""

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("min_fee_msat", "-1"),
            ("min_fee_msat", str(2**64)),
            ("proportional", 2**32),
            ("min_lifetime", -1),
            ("max_client_to_self_delay", "many"),
        ],
    )
    def test_out_of_range_values_rejected(self, field: str, value: object) -> None:
        with pytest.raises(ValidationError):
            OpeningFeeParams.model_validate({**WIRE, field: value})

    def test_params_are_immutable(self) -> None:
        params = OpeningFeeParams.model_validate(WIRE)
        with pytest.raises(ValidationError):
            params.proportional = 1  # type: ignore[misc]


class TestFeeParamSetting:
    def test_validity_serialized_as_seconds(self) -> None:
        setting = FeeParamSetting(
            min_msat=2000,
            proportional=1000,
            max_idle_time=4320,
            max_client_to_self_delay=432,
            validity=timedelta(hours=1),
        )
        assert setting.model_dump()["validity"] == 3600
        assert FeeParamSetting.model_validate_json(setting.model_dump_json()) == setting

    def test_non_positive_validity_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Validity must be positive"):
            FeeParamSetting(
                min_msat=2000,
                proportional=1000,
                max_idle_time=4320,
                max_client_to_self_delay=432,
                validity=timedelta(0),
            )

    @pytest.mark.parametrize(
        ("validity", "message"),
        [
            (timedelta(milliseconds=500), "whole number of seconds"),
            (timedelta(seconds=90, microseconds=1), "whole number of seconds"),
            (timedelta(days=366), "must not exceed 365 days"),
            (timedelta(days=999999999), "must not exceed 365 days"),
        ],
    )
    def test_unstorable_validity_rejected(
        self, validity: timedelta, message: str
    ) -> None:
        with pytest.raises(ValidationError, match=message):
            FeeParamSetting(
                min_msat=2000,
                proportional=1000,
                max_idle_time=4320,
                max_client_to_self_delay=432,
                validity=validity,
            )

    def test_longest_validity_fits_in_timestamp(self) -> None:
        setting = FeeParamSetting(
            min_msat=2000,
            proportional=1000,
            max_idle_time=4320,
            max_client_to_self_delay=432,
            validity=MAX_VALIDITY,
        )
        assert FeeParamSetting.model_validate_json(setting.model_dump_json()) == setting
