"""Tests for the pydantic message and position models."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from radarintent._constants import SHOW_RADAR_ACTION
from radarintent.models import DecodedPosition, Float32, Float64, IncomingMessage

# ------------------------------------------------------------------
# Float32 / Float64
# ------------------------------------------------------------------


class TestFloatExtras:
    def test_float32_rounds_to_single_precision(self) -> None:
        assert Float32(value=20.3).value == 20.299999237060547
        assert Float32(value=20.3).widen() == 20.299999237060547

    def test_float32_keeps_exact_values(self) -> None:
        assert Float32(value=-82.25).widen() == -82.25

    def test_float64_is_unchanged(self) -> None:
        assert Float64(value=20.3).widen() == 20.3

    def test_kinds(self) -> None:
        assert Float32(value=1.0).kind == "float"
        assert Float64(value=1.0).kind == "double"

    def test_float32_nan(self) -> None:
        assert math.isnan(Float32(value=math.nan).widen())

    def test_float32_overflow_becomes_infinity(self) -> None:
        assert Float32(value=1e39).widen() == math.inf
        assert Float32(value=-1e39).widen() == -math.inf

    def test_frozen(self) -> None:
        value = Float64(value=1.0)
        with pytest.raises(ValidationError):
            value.value = 2.0  # type: ignore[misc]

    def test_wrong_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Float32.model_validate({"kind": "double", "value": 1.0})


# ------------------------------------------------------------------
# IncomingMessage
# ------------------------------------------------------------------


class TestIncomingMessage:
    def test_defaults(self) -> None:
        message = IncomingMessage()
        assert message.action is None
        assert message.extras == {}

    def test_bare_float_becomes_double(self) -> None:
        message = IncomingMessage(action=SHOW_RADAR_ACTION, extras={"latitude": 28.5})
        assert message.get_extra("latitude") == Float64(value=28.5)

    def test_other_values_pass_through(self) -> None:
        message = IncomingMessage(extras={"count": 3, "name": "bench", "flag": True})
        assert message.get_extra("count") == 3
        assert message.get_extra("name") == "bench"
        assert message.get_extra("flag") is True

    def test_has_and_get_extra(self) -> None:
        message = IncomingMessage(extras={"altitude": Float32(value=1.5)})
        assert message.has_extra("altitude")
        assert not message.has_extra("latitude")
        assert message.get_extra("latitude") is None
        assert message.get_extra("latitude", "x") == "x"

    def test_tagged_dicts_are_parsed(self) -> None:
        message = IncomingMessage.model_validate(
            {
                "action": SHOW_RADAR_ACTION,
                "extras": {
                    "latitude": {"kind": "double", "value": 28.0527222},
                    "altitude": {"kind": "float", "value": 20.3},
                    "meta": {"source": "bench"},
                },
            }
        )

        assert message.get_extra("latitude") == Float64(value=28.0527222)
        assert message.get_extra("altitude") == Float32(value=20.3)
        assert message.get_extra("meta") == {"source": "bench"}

    def test_json_wire_form(self) -> None:
        text = (
            '{"action": "com.google.android.radar.SHOW_RADAR",'
            ' "extras": {"latitude": {"kind": "float", "value": 28.0527222},'
            ' "longitude": {"kind": "double", "value": -82.4331001}}}'
        )

        message = IncomingMessage.model_validate_json(text)

        assert message.action == SHOW_RADAR_ACTION
        assert isinstance(message.get_extra("latitude"), Float32)
        assert message.get_extra("longitude") == Float64(value=-82.4331001)

    def test_json_dump_round_trip(self) -> None:
        message = IncomingMessage(
            action=SHOW_RADAR_ACTION,
            extras={"latitude": Float32(value=28.0527222), "longitude": Float64(value=-82.4331001)},
        )

        assert IncomingMessage.model_validate_json(message.model_dump_json()) == message

    @pytest.mark.parametrize("extra", [Float64(value=math.inf), Float64(value=-math.inf), Float32(value=math.inf)])
    def test_json_dump_round_trip_infinite(self, extra: Float32 | Float64) -> None:
        message = IncomingMessage(action=SHOW_RADAR_ACTION, extras={"altitude": extra})

        assert IncomingMessage.model_validate_json(message.model_dump_json()) == message

    @pytest.mark.parametrize("extra", [Float64(value=math.nan), Float32(value=math.nan)])
    def test_json_dump_round_trip_nan(self, extra: Float32 | Float64) -> None:
        message = IncomingMessage(action=SHOW_RADAR_ACTION, extras={"altitude": extra})

        restored = IncomingMessage.model_validate_json(message.model_dump_json()).get_extra("altitude")

        assert restored.kind == extra.kind
        assert math.isnan(restored.value)

    def test_tagged_dict_with_bad_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            IncomingMessage.model_validate({"extras": {"latitude": {"kind": "float", "value": "north"}}})


# ------------------------------------------------------------------
# DecodedPosition
# ------------------------------------------------------------------


class TestDecodedPosition:
    def test_altitude_defaults_to_absent(self) -> None:
        position = DecodedPosition(latitude=1.0, longitude=2.0)
        assert position.altitude is None
        assert position.has_altitude is False

    def test_nan_altitude_collapses_to_absent(self) -> None:
        position = DecodedPosition(latitude=1.0, longitude=2.0, altitude=math.nan)
        assert position.altitude is None
        assert position.has_altitude is False

    def test_zero_altitude_is_present(self) -> None:
        position = DecodedPosition(latitude=1.0, longitude=2.0, altitude=0.0)
        assert position.has_altitude is True

    def test_equality(self) -> None:
        assert DecodedPosition(latitude=1.0, longitude=2.0, altitude=3.0) == DecodedPosition(
            latitude=1.0, longitude=2.0, altitude=3.0
        )
        assert DecodedPosition(latitude=1.0, longitude=2.0) != DecodedPosition(latitude=1.0, longitude=2.0, altitude=0.0)

    def test_frozen(self) -> None:
        position = DecodedPosition(latitude=1.0, longitude=2.0)
        with pytest.raises(ValidationError):
            position.latitude = 5.0  # type: ignore[misc]
