"""Parser configuration for radarintent."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from radarintent._constants import ALTITUDE_KEY, LATITUDE_KEY, LONGITUDE_KEY, SHOW_RADAR_ACTION
from radarintent.exceptions import RadarIntentConfigError


@dataclasses.dataclass(frozen=True)
class RadarIntentConfig:
    """Names used to recognize and decode SHOW_RADAR messages.

    The defaults match what GPS test tools broadcast; override them only
    when talking to a sender that uses different keys.

    Parameters
    ----------
    action : str
        Action string that identifies a SHOW_RADAR message. Compared
        exactly (case-sensitive, no trimming).
    latitude_key : str
        Extra holding the latitude in degrees.
    longitude_key : str
        Extra holding the longitude in degrees.
    altitude_key : str
        Extra holding the optional altitude in meters.
    """

    action: str = SHOW_RADAR_ACTION
    latitude_key: str = LATITUDE_KEY
    longitude_key: str = LONGITUDE_KEY
    altitude_key: str = ALTITUDE_KEY

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, str) or not value:
                raise RadarIntentConfigError(f"{field.name} must be a non-empty string, got {value!r}")

    @classmethod
    def from_env(cls, **overrides: Any) -> RadarIntentConfig:
        """Create configuration from environment variables.

        Reads the optional ``RADAR_INTENT_ACTION``,
        ``RADAR_INTENT_LATITUDE_KEY``, ``RADAR_INTENT_LONGITUDE_KEY`` and
        ``RADAR_INTENT_ALTITUDE_KEY`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        RadarIntentConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "RADAR_INTENT_ACTION": "action",
            "RADAR_INTENT_LATITUDE_KEY": "latitude_key",
            "RADAR_INTENT_LONGITUDE_KEY": "longitude_key",
            "RADAR_INTENT_ALTITUDE_KEY": "altitude_key",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        config_kwargs.update(overrides)

        return cls(**config_kwargs)


DEFAULT_CONFIG = RadarIntentConfig()
