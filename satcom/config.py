"""Runtime settings read from the environment (a .env file is loaded by the entry point)."""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from satcom.ground_station import DEFAULT_STATION_ID
from satcom.observability import get_logger

DEFAULT_SATELLITE_IDS = [327, 519, 412, 865, 12, 327]
DEFAULT_MESSAGES = ["Hello!", "How is going?"]

logger = get_logger("satcom.config")


def parse_satellite_ids(raw: Optional[str]) -> List[int]:
    """Parse "327, 519,12" into [327, 519, 12]. Duplicates are kept; falls back to defaults if malformed."""
    if raw is None or not raw.strip():
        return list(DEFAULT_SATELLITE_IDS)
    try:
        ids = [int(part) for part in raw.split(",") if part.strip()]
    except (ValueError, TypeError):
        logger.warning("invalid_satellite_ids", extra={"value": raw})
        return list(DEFAULT_SATELLITE_IDS)
    if not ids or any(i < 0 for i in ids):
        logger.warning("invalid_satellite_ids", extra={"value": raw})
        return list(DEFAULT_SATELLITE_IDS)
    return ids


def parse_messages(raw: Optional[str]) -> List[str]:
    """Split a "|"-separated list of messages; empty entries are dropped."""
    if raw is None:
        return list(DEFAULT_MESSAGES)
    messages = [m.strip() for m in raw.split("|") if m.strip()]
    return messages or list(DEFAULT_MESSAGES)


@dataclass
class Settings:
    """Settings for the demo mission."""
    station_id: str = DEFAULT_STATION_ID
    satellite_ids: List[int] = field(default_factory=lambda: list(DEFAULT_SATELLITE_IDS))
    messages: List[str] = field(default_factory=lambda: list(DEFAULT_MESSAGES))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            station_id=(env.get("SATCOM_STATION_ID") or "").strip() or DEFAULT_STATION_ID,
            satellite_ids=parse_satellite_ids(env.get("SATCOM_SATELLITE_IDS")),
            messages=parse_messages(env.get("SATCOM_MESSAGES")),
        )
