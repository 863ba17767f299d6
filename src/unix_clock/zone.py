"""Timezone label source — a short display name for the local timezone."""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Protocol

logger = logging.getLogger("unix_clock.zone")

FALLBACK_ZONE_LABEL = "Local"


class ZoneLabelSource(Protocol):
    """Protocol for naming the local timezone at a given instant."""

    def short_zone_name(self, seconds: int) -> str: ...


class SystemZoneLabel:
    """Asks :mod:`datetime` for the abbreviation (``"CET"``, ``"PDT"`` …).

    Parameters:
        tz: Fixed zone to name instead of the host's local zone.
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz = tz

    def short_zone_name(self, seconds: int) -> str:
        if self._tz is None:
            instant = datetime.fromtimestamp(seconds).astimezone()
        else:
            instant = datetime.fromtimestamp(seconds, self._tz)
        return instant.tzname() or ""


def zone_label(source: ZoneLabelSource, seconds: int) -> str:
    """Return the zone name for *seconds*, or ``"Local"`` when unavailable."""
    try:
        name = source.short_zone_name(seconds)
    except Exception:
        logger.debug("zone label lookup failed for %d", seconds, exc_info=True)
        return FALLBACK_ZONE_LABEL
    return name or FALLBACK_ZONE_LABEL
