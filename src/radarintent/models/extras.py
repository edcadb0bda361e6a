"""Tagged numeric values carried in message extras.

Senders put latitude, longitude and altitude into the extras bag either
as single-precision (``float``) or double-precision (``double``) numbers.
The width is only known when the extra is looked up, so each value
records it explicitly through the ``kind`` discriminator.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from radarintent.normalize import round_to_float32


class Float32(BaseModel):
    """A 32-bit floating point extra.

    ``value`` is rounded to the nearest binary32 number on construction,
    so ``Float32(value=20.3).value`` is ``20.299999237060547``.
    """

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    kind: Literal["float"] = "float"
    value: float

    @field_validator("value")
    @classmethod
    def _round_to_single(cls, value: float) -> float:
        return round_to_float32(value)

    def widen(self) -> float:
        """Return the value promoted to double precision (exact)."""
        return self.value


class Float64(BaseModel):
    """A 64-bit floating point extra."""

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    kind: Literal["double"] = "double"
    value: float

    def widen(self) -> float:
        return self.value


FloatExtra = Annotated[Float32 | Float64, Field(discriminator="kind")]
"""Either width of floating point extra, discriminated by ``kind``."""

FLOAT_EXTRA_ADAPTER: TypeAdapter[Float32 | Float64] = TypeAdapter(FloatExtra)
