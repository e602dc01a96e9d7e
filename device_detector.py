"""
User-Agent based device detection.

Maps a raw User-Agent header to a coarse device type (tablet, mobile,
desktop) and platform (IOS, ANDROID, WINDOWS, MAC, LINUX).
"""
from dataclasses import dataclass, asdict
from typing import Dict, Optional
from logger_config import get_logger

logger = get_logger(__name__)

UNKNOWN = "unknown"
TABLET = "tablet"
MOBILE = "mobile"
DESKTOP = "desktop"

# Checked before mobile markers since many tablets also send "mobile"
TABLET_MARKERS = ("ipad", "tablet", "kindle")
MOBILE_MARKERS = (
    "mobile",
    "iphone",
    "ipod",
    "android",
    "blackberry",
    "windows phone",
    "opera mini",
    "webos",
)

# Order matters: first match wins
PLATFORM_MARKERS = (
    (("iphone", "ipad", "ipod"), "IOS"),
    (("android",), "ANDROID"),
    (("windows",), "WINDOWS"),
    (("mac os",), "MAC"),
    (("linux",), "LINUX"),
)
UNKNOWN_PLATFORM = "UNKNOWN"


@dataclass(frozen=True)
class DeviceInfo:
    """Device type and platform detected from a User-Agent."""

    device_type: str
    platform: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _contains_any(value: str, markers) -> bool:
    return any(marker in value for marker in markers)


def detect_device_type(user_agent: str) -> str:
    lowered = user_agent.lower()

    if _contains_any(lowered, TABLET_MARKERS) or (
        "android" in lowered and "mobile" not in lowered
    ):
        return TABLET

    if _contains_any(lowered, MOBILE_MARKERS):
        return MOBILE

    return DESKTOP


def detect_platform(user_agent: str) -> str:
    lowered = user_agent.lower()

    for markers, platform in PLATFORM_MARKERS:
        if _contains_any(lowered, markers):
            return platform

    return UNKNOWN_PLATFORM


def classify(user_agent: Optional[str]) -> DeviceInfo:
    """
    Classify a User-Agent header.

    Args:
        user_agent: Raw User-Agent header value, may be None or empty

    Returns:
        DeviceInfo, ("unknown", "unknown") when no header was sent
    """
    if not user_agent:
        logger.debug('Empty user agent, returning unknown device')
        return DeviceInfo(UNKNOWN, UNKNOWN)

    device_info = DeviceInfo(
        device_type=detect_device_type(user_agent),
        platform=detect_platform(user_agent),
    )
    logger.debug(
        f'Detected device - type: {device_info.device_type}, '
        f'platform: {device_info.platform}'
    )
    return device_info


class DeviceDetector:
    """Stateless detector shared by the web layer."""

    def detect_device(self, user_agent: Optional[str]) -> DeviceInfo:
        return classify(user_agent)
