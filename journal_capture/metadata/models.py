from dataclasses import dataclass
from enum import Enum


class DeviceClass(str, Enum):
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


@dataclass(frozen=True)
class CaptureLocation:
    lat: float
    lng: float
    raw_name: str
    display_name: str
    label: str | None = None


@dataclass(frozen=True)
class CaptureMetadata:
    """Auto-captured context of an entry, passed through the pipeline unchanged."""

    captured_at: str
    day_of_week: str
    time_of_day: str
    device: DeviceClass
    location: CaptureLocation | None = None
