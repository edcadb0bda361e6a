"""Recognize SHOW_RADAR messages and decode the position they carry.

GPS test tools broadcast ``com.google.android.radar.SHOW_RADAR`` to inject
a simulated location. Latitude, longitude and altitude may each arrive as
a 32-bit or a 64-bit float, and an altitude of NaN means "no altitude".
"""

from __future__ import annotations

import logging
from typing import Any

from radarintent.config import DEFAULT_CONFIG, RadarIntentConfig
from radarintent.exceptions import MissingFieldError, UnsupportedValueError
from radarintent.models.extras import Float32, Float64
from radarintent.models.message import IncomingMessage
from radarintent.models.position import DecodedPosition

_logger = logging.getLogger(__name__)


def is_radar_message(message: IncomingMessage | None, config: RadarIntentConfig | None = None) -> bool:
    """Return ``True`` if *message* is a SHOW_RADAR message.

    A missing message is not an error and yields ``False``. The action is
    compared exactly, without trimming or case folding.
    """
    if message is None:
        return False
    cfg = config or DEFAULT_CONFIG
    return message.action == cfg.action


def _widen(field: str, value: Any) -> float:
    if isinstance(value, (Float32, Float64)):
        return value.widen()
    raise UnsupportedValueError(
        f"extra {field!r} must be a 32-bit or 64-bit float, got {type(value).__name__}",
        field=field,
        value=value,
    )


def _required(message: IncomingMessage, field: str) -> float:
    if not message.has_extra(field):
        raise MissingFieldError(f"SHOW_RADAR message has no {field!r} extra", field=field)
    return _widen(field, message.get_extra(field))


def decode_position(message: IncomingMessage, config: RadarIntentConfig | None = None) -> DecodedPosition:
    """Decode the position carried by a SHOW_RADAR message.

    The caller must have confirmed the message with :func:`is_radar_message`;
    the action is not checked again here.

    Single-precision extras are promoted to double precision, double
    values are used as is. Coordinates are not range checked.

    Parameters
    ----------
    message : IncomingMessage
        A message recognized as SHOW_RADAR.
    config : RadarIntentConfig or None
        Extra names to read. Defaults to ``latitude``, ``longitude`` and
        ``altitude``.

    Returns
    -------
    DecodedPosition
        The position. ``altitude`` is ``None`` when the extra is absent,
        null or NaN.

    Raises
    ------
    MissingFieldError
        If latitude or longitude is absent.
    UnsupportedValueError
        If an extra holds something other than a 32-bit or 64-bit float.
    """
    cfg = config or DEFAULT_CONFIG

    latitude = _required(message, cfg.latitude_key)
    longitude = _required(message, cfg.longitude_key)
    altitude: float | None = None
    raw_altitude = message.get_extra(cfg.altitude_key)
    if raw_altitude is not None:
        altitude = _widen(cfg.altitude_key, raw_altitude)

    position = DecodedPosition(latitude=latitude, longitude=longitude, altitude=altitude)
    _logger.debug(
        "Decoded SHOW_RADAR position lat=%s lon=%s alt=%s",
        position.latitude,
        position.longitude,
        position.altitude,
    )
    return position
