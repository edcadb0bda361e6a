"""radarintent - Decode simulated locations from SHOW_RADAR broadcast messages."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyradarintent")
except PackageNotFoundError:
    __version__ = "0+local"
from radarintent._constants import ALTITUDE_KEY, LATITUDE_KEY, LONGITUDE_KEY, SHOW_RADAR_ACTION
from radarintent.builder import create_geo_uri, create_show_radar_message
from radarintent.config import RadarIntentConfig
from radarintent.exceptions import (
    MissingFieldError,
    RadarIntentConfigError,
    RadarIntentDecodeError,
    RadarIntentError,
    UnsupportedValueError,
)
from radarintent.models import DecodedPosition, Float32, Float64, IncomingMessage
from radarintent.parser import decode_position, is_radar_message

__all__ = [
    "__version__",
    "ALTITUDE_KEY",
    "DecodedPosition",
    "Float32",
    "Float64",
    "IncomingMessage",
    "LATITUDE_KEY",
    "LONGITUDE_KEY",
    "MissingFieldError",
    "RadarIntentConfig",
    "RadarIntentConfigError",
    "RadarIntentDecodeError",
    "RadarIntentError",
    "SHOW_RADAR_ACTION",
    "UnsupportedValueError",
    "create_geo_uri",
    "create_show_radar_message",
    "decode_position",
    "is_radar_message",
]
