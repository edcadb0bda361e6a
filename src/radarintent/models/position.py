"""Decoded position model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from radarintent.normalize import nan_to_none


class DecodedPosition(BaseModel):
    """A location decoded from a SHOW_RADAR message.

    No range validation is applied; out-of-range coordinates are kept
    as received.

    Parameters
    ----------
    latitude : float
        Latitude in degrees.
    longitude : float
        Longitude in degrees.
    altitude : float or None
        Altitude in meters, ``None`` when the sender supplied none. A NaN
        altitude is stored as ``None``.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    altitude: float | None = None

    @field_validator("altitude")
    @classmethod
    def _drop_nan_altitude(cls, value: float | None) -> float | None:
        return nan_to_none(value)

    @property
    def has_altitude(self) -> bool:
        return self.altitude is not None
