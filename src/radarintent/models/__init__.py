"""Data models for SHOW_RADAR messages and decoded positions."""

from radarintent.models.extras import Float32, Float64, FloatExtra
from radarintent.models.message import IncomingMessage
from radarintent.models.position import DecodedPosition

__all__ = [
    "DecodedPosition",
    "Float32",
    "Float64",
    "FloatExtra",
    "IncomingMessage",
]
