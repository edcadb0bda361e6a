"""Build SHOW_RADAR messages and share positions as geo URIs."""

from __future__ import annotations

import logging

from radarintent._constants import GEO_URI_SCHEME
from radarintent.config import DEFAULT_CONFIG, RadarIntentConfig
from radarintent.models.extras import Float64
from radarintent.models.message import IncomingMessage
from radarintent.models.position import DecodedPosition
from radarintent.normalize import nan_to_none

_logger = logging.getLogger(__name__)


def create_show_radar_message(
    latitude: float,
    longitude: float,
    altitude: float | None = None,
    config: RadarIntentConfig | None = None,
) -> IncomingMessage:
    """Create a SHOW_RADAR message carrying the given position.

    All values are stored as 64-bit floats. The altitude extra is left
    out when *altitude* is ``None`` or NaN.
    """
    cfg = config or DEFAULT_CONFIG
    extras = {
        cfg.latitude_key: Float64(value=latitude),
        cfg.longitude_key: Float64(value=longitude),
    }
    alt = nan_to_none(altitude)
    if alt is not None:
        extras[cfg.altitude_key] = Float64(value=alt)
    _logger.debug("Created SHOW_RADAR message with extras %s", sorted(extras))
    return IncomingMessage(action=cfg.action, extras=extras)


def create_geo_uri(position: DecodedPosition, include_altitude: bool = False) -> str:
    """Format *position* as a ``geo:`` URI.

    Returns ``geo:<lat>,<lon>``, or ``geo:<lat>,<lon>,<alt>`` when
    *include_altitude* is set and the position has an altitude.
    """
    coords = [repr(position.latitude), repr(position.longitude)]
    if include_altitude and position.altitude is not None:
        coords.append(repr(position.altitude))
    return f"{GEO_URI_SCHEME}:{','.join(coords)}"
