"""Incoming broadcast message model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from radarintent.models.extras import FLOAT_EXTRA_ADAPTER, Float64

_FLOAT_KINDS = frozenset({"float", "double"})


class IncomingMessage(BaseModel):
    """A named action plus an untyped bag of extras.

    Parameters
    ----------
    action : str or None
        Identifies the purpose of the message.
    extras : dict
        Field name to value. Numeric extras are :class:`Float32` or
        :class:`Float64`; a bare Python ``float`` is stored as
        :class:`Float64`. Objects of the form
        ``{"kind": "float" | "double", "value": ...}`` (the JSON wire
        form) are parsed to the matching tagged value. Anything else is
        kept as is.
    """

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    action: str | None = None
    extras: dict[str, Any] = Field(default_factory=dict)

    @field_validator("extras", mode="before")
    @classmethod
    def _parse_tagged_floats(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        parsed: dict[str, Any] = {}
        for key, value in values.items():
            if isinstance(value, float):
                parsed[key] = Float64(value=value)
            elif isinstance(value, dict) and value.get("kind") in _FLOAT_KINDS:
                parsed[key] = FLOAT_EXTRA_ADAPTER.validate_python(value)
            else:
                parsed[key] = value
        return parsed

    def has_extra(self, key: str) -> bool:
        """Return ``True`` when *key* is present in the extras bag."""
        return key in self.extras

    def get_extra(self, key: str, default: Any = None) -> Any:
        """Return the extra stored under *key*, or *default*."""
        return self.extras.get(key, default)
