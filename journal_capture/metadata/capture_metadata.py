"""Default metadata collaborator: derives capture context from a clock and a user agent."""

import re
from datetime import datetime, timezone

from journal_capture.metadata.models import CaptureLocation, CaptureMetadata, DeviceClass

_TABLET_AGENTS = re.compile(r"ipad|tablet|playbook|silk")
_MOBILE_AGENTS = re.compile(r"mobile|iphone|ipod|android|blackberry|opera mini|iemobile")

# label -> [start hour, end hour); a range with start > end wraps past midnight
DEFAULT_TIME_OF_DAY: dict[str, tuple[int, int]] = {
    "morning": (5, 12),
    "afternoon": (12, 17),
    "evening": (17, 21),
    "night": (21, 5),
}


def device_class(user_agent: str | None) -> DeviceClass:
    agent = (user_agent or "").lower()
    if _TABLET_AGENTS.search(agent):
        return DeviceClass.TABLET
    if _MOBILE_AGENTS.search(agent):
        return DeviceClass.MOBILE
    return DeviceClass.DESKTOP


def time_of_day(hour: int, labels: dict[str, tuple[int, int]] | None = None) -> str:
    for label, (start, end) in (labels or DEFAULT_TIME_OF_DAY).items():
        if start < end:
            if start <= hour < end:
                return label
        elif hour >= start or hour < end:
            return label
    return "afternoon"


def capture_metadata(
    now: datetime | None = None,
    user_agent: str | None = None,
    location: CaptureLocation | None = None,
    time_labels: dict[str, tuple[int, int]] | None = None,
) -> CaptureMetadata:
    """Build CaptureMetadata for an entry captured at ``now`` (defaults to current UTC time)."""
    moment = now or datetime.now(timezone.utc)
    return CaptureMetadata(
        captured_at=moment.isoformat(),
        day_of_week=moment.strftime("%A"),
        time_of_day=time_of_day(moment.hour, time_labels),
        device=device_class(user_agent),
        location=location,
    )
