"""System info collectors for gridfetch."""

from .models import BatteryInfo, DiskInfo, InfoSection, PriorSample, ProcessorInfo, SystemInfo
from .sections import SECTION_KEYS, battery_section, disk_section, os_icon, processor_section, system_section

try:  # pragma: no cover - optional at import time for minimal test environments
    from .provider import InfoProvider, cpu_usage_percent
except Exception:  # pragma: no cover
    InfoProvider = None  # type: ignore[assignment]
    cpu_usage_percent = None  # type: ignore[assignment]

__all__ = [
    "BatteryInfo",
    "DiskInfo",
    "InfoSection",
    "PriorSample",
    "ProcessorInfo",
    "SECTION_KEYS",
    "SystemInfo",
    "battery_section",
    "disk_section",
    "os_icon",
    "processor_section",
    "system_section",
]

if InfoProvider is not None:
    __all__.extend(["InfoProvider", "cpu_usage_percent"])
