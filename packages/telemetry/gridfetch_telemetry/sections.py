"""Label/value row builders for each info section."""

from __future__ import annotations

import time

from .models import BatteryInfo, DiskInfo, InfoSection, ProcessorInfo, SystemInfo

SECTION_KEYS = ("system", "battery", "processor", "disk")

# Nerd Font private-use glyphs.
ICON_BATTERY = "\uf240"
ICON_CHARGING = "\uf0e7"
ICON_PROCESSOR = "\uf4bc"
ICON_DISK = "\uf0a0"
ICON_SYSTEM = "\uf108"
_OS_ICONS = {
    "Windows": "\ue62a",
    "Darwin": "\uf179",
    "Linux": "\uf17c",
}


def os_icon(system: str) -> str | None:
    return _OS_ICONS.get(system)


def format_hhmm(seconds: int) -> str:
    minutes = max(0, seconds) // 60
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_uptime(seconds: float) -> str:
    total = max(0, int(seconds))
    days, rem = divmod(total, 86400)
    hours, rem = divmod(rem, 3600)
    minutes = rem // 60
    if days:
        return f"{days}d {hours}h {minutes}m"
    if hours:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def battery_state(battery: BatteryInfo) -> str:
    if battery.plugged is None:
        return "Unknown"
    if battery.plugged:
        return "Charging" if battery.charging else "Full"
    return "Discharging"


def battery_section(battery: BatteryInfo) -> InfoSection:
    percent = f"{battery.percent:.1f}%"
    if battery.charging:
        percent = f"{percent} {ICON_CHARGING}"
    rows = [
        ("Percentage:", percent),
        ("State:", battery_state(battery)),
    ]
    if battery.secs_left is not None and not battery.plugged:
        rows.append(("Time to Empty:", format_hhmm(battery.secs_left)))
    return InfoSection(key="battery", title="Battery", rows=tuple(rows), icon=ICON_BATTERY)


def processor_section(cpu: ProcessorInfo) -> InfoSection:
    rows = [("Model:", cpu.model)]
    if cpu.frequency_mhz is not None:
        rows.append(("Frequency:", f"{cpu.frequency_mhz / 1000.0:.2f}GHz"))
    rows.append(("Vendor:", cpu.vendor))
    rows.append(("Usage:", f"{cpu.usage_percent:.1f}%"))
    rows.append(("Cores:", str(cpu.cores_logical)))
    if cpu.cores_physical is not None and cpu.cores_physical != cpu.cores_logical:
        rows.append(("Physical Cores:", str(cpu.cores_physical)))
    return InfoSection(key="processor", title="Processor", rows=tuple(rows), icon=ICON_PROCESSOR)


def disk_section(disks: list[DiskInfo]) -> InfoSection:
    rows = tuple(
        (f"{d.mountpoint}:", f"{d.used_gb:.1f}/{d.total_gb:.1f} GB ({d.percent:.0f}%)")
        for d in disks
    )
    return InfoSection(key="disk", title="Disk", rows=rows, icon=ICON_DISK)


def system_section(info: SystemInfo, now: float | None = None) -> InfoSection:
    rows = [
        ("OS:", info.os_label),
        ("Kernel:", info.kernel),
        ("Host:", info.hostname),
        ("User:", info.username),
    ]
    if info.boot_time is not None:
        current = time.time() if now is None else now
        rows.append(("Uptime:", format_uptime(current - info.boot_time)))
    return InfoSection(key="system", title="System", rows=tuple(rows), icon=ICON_SYSTEM)
