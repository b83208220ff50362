"""Clock readings and the local time zone name."""

from __future__ import annotations

import os
import time
from pathlib import Path

_LOCALTIME = Path("/etc/localtime")
_TIMEZONE_FILE = Path("/etc/timezone")


def time_in_nanoseconds() -> int:
    """Nanoseconds since the epoch."""
    return time.time_ns()


def time_in_millis() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def get_timezone_name() -> str:
    """Return the name of the current time zone, such as 'Europe/Paris'."""
    env = os.environ.get("TZ")
    if env:
        return env.lstrip(":")
    try:
        parts = _LOCALTIME.resolve().parts
        if "zoneinfo" in parts:
            zone = "/".join(parts[parts.index("zoneinfo") + 1 :])
            if zone:
                return zone
    except OSError:
        pass
    try:
        zone = _TIMEZONE_FILE.read_text(encoding="utf-8").strip()
        if zone:
            return zone
    except OSError:
        pass
    return time.tzname[0]