#!/usr/bin/env python3
"""Decode a captured SHOW_RADAR message.

Reads a message in its JSON wire form and prints the decoded position.

Usage
-----
::

    python scripts/decode_intent.py message.json
    cat message.json | python scripts/decode_intent.py --geo

Example message::

    {
      "action": "com.google.android.radar.SHOW_RADAR",
      "extras": {
        "latitude": {"kind": "double", "value": 28.0527222},
        "longitude": {"kind": "double", "value": -82.4331001},
        "altitude": {"kind": "float", "value": 20.3}
      }
    }

Options::

    --geo                Print a geo: URI instead of JSON
    --include-altitude   Include the altitude in the geo: URI
    -v, --verbose        Enable debug logging

The extra names and action can be overridden with the
``RADAR_INTENT_*`` environment variables.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from radarintent import RadarIntentConfig, RadarIntentError  # noqa: E402
from radarintent._tools.message_io import decode_text, render_position  # noqa: E402

_logger = logging.getLogger("decode_intent")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Decode a SHOW_RADAR message")
    parser.add_argument("file", nargs="?", help="JSON message file (default: stdin)")
    parser.add_argument("--geo", action="store_true", help="Print a geo: URI")
    parser.add_argument("--include-altitude", action="store_true", help="Include altitude in the geo: URI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        text = Path(args.file).read_text(encoding="utf-8") if args.file else sys.stdin.read()
    except OSError as exc:
        _logger.error("Could not read message: %s", exc)
        return 1

    try:
        position = decode_text(text, RadarIntentConfig.from_env())
    except RadarIntentError as exc:
        _logger.error("Could not decode message: %s", exc)
        return 1

    if position is None:
        _logger.error("Not a SHOW_RADAR message")
        return 1

    print(render_position(position, geo=args.geo, include_altitude=args.include_altitude))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
