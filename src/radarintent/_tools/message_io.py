from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from radarintent.builder import create_geo_uri
from radarintent.config import RadarIntentConfig
from radarintent.exceptions import RadarIntentDecodeError
from radarintent.models.message import IncomingMessage
from radarintent.models.position import DecodedPosition
from radarintent.parser import decode_position, is_radar_message

_logger = logging.getLogger(__name__)


def load_message(text: str) -> IncomingMessage:
    """Parse a message from its JSON wire form.

    Raises :class:`RadarIntentDecodeError` when *text* is not a valid message.
    """
    try:
        return IncomingMessage.model_validate_json(text)
    except ValidationError as exc:
        raise RadarIntentDecodeError(f"invalid message JSON: {exc.error_count()} error(s)") from exc


def decode_text(text: str, config: RadarIntentConfig | None = None) -> DecodedPosition | None:
    """Decode the position in a JSON message, or ``None`` if it is not SHOW_RADAR."""
    message = load_message(text)
    if not is_radar_message(message, config):
        _logger.debug("Ignoring message with action %r", message.action)
        return None
    return decode_position(message, config)


def render_position(position: DecodedPosition, *, geo: bool = False, include_altitude: bool = False) -> str:
    if geo:
        return create_geo_uri(position, include_altitude=include_altitude)
    return json.dumps(position.model_dump(), indent=2)
