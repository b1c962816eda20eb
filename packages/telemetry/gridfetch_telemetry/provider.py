"""Cross-platform info provider with graceful fallbacks."""

from __future__ import annotations

import getpass
import logging
import os
import platform
import time
from pathlib import Path

import psutil

from .models import BatteryInfo, DiskInfo, InfoSection, PriorSample, ProcessorInfo, SystemInfo
from .sections import SECTION_KEYS, battery_section, disk_section, processor_section, system_section

logger = logging.getLogger("gridfetch.telemetry")

UNKNOWN = "Unknown"
_PSEUDO_FSTYPES = {"squashfs", "tmpfs", "devtmpfs", "overlay", "proc", "sysfs"}


def _take_sample() -> PriorSample:
    times = psutil.cpu_times()
    total = float(sum(times))
    # Linux folds guest time into user already.
    total -= float(getattr(times, "guest", 0.0)) + float(getattr(times, "guest_nice", 0.0))
    idle = float(times.idle) + float(getattr(times, "iowait", 0.0))
    return PriorSample(captured_at=time.monotonic(), busy=total - idle, total=total)


def cpu_usage_percent(prior: PriorSample, current: PriorSample) -> float:
    delta_total = current.total - prior.total
    if delta_total <= 0:
        return 0.0
    pct = (current.busy - prior.busy) / delta_total * 100.0
    return max(0.0, min(100.0, pct))


def _read_cpuinfo(path: Path = Path("/proc/cpuinfo")) -> dict[str, str]:
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return {}
    out: dict[str, str] = {}
    for line in text.splitlines():
        if not line.strip():
            # First processor block only.
            if out:
                break
            continue
        key, sep, value = line.partition(":")
        if sep:
            out.setdefault(key.strip(), value.strip())
    return out


def _read_os_release(path: Path = Path("/etc/os-release")) -> dict[str, str]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        return {}
    out: dict[str, str] = {}
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        if sep:
            out[key.strip()] = value.strip().strip('"')
    return out


def _windows_os_version() -> tuple[str, str]:
    import winreg  # type: ignore

    key_path = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion"
    with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, key_path) as key:
        values = []
        for name in ("ProductName", "DisplayVersion"):
            try:
                values.append(str(winreg.QueryValueEx(key, name)[0]))
            except FileNotFoundError:
                values.append(UNKNOWN)
    return values[0], values[1]


def _os_name_version() -> tuple[str, str]:
    system = platform.system()
    if system == "Windows":
        try:
            return _windows_os_version()
        except OSError:
            return "Windows", platform.release()
    if system == "Darwin":
        return "macOS", platform.mac_ver()[0]
    release = _read_os_release()
    if release.get("PRETTY_NAME"):
        return release["PRETTY_NAME"], ""
    return system or UNKNOWN, release.get("VERSION_ID", "")


def _username() -> str:
    for var in ("USER", "USERNAME", "LOGNAME"):
        value = os.environ.get(var)
        if value:
            return value
    try:
        return getpass.getuser()
    except Exception:
        return UNKNOWN


class InfoProvider:
    """Collects the values shown in each dashboard section.

    The CPU baseline is an explicit :class:`PriorSample` captured on
    construction. Each :meth:`processor` call measures usage against it and
    then moves the baseline forward. ``settle_s`` is the shortest interval a
    usage reading may span; a call arriving sooner waits out the difference.
    """

    def __init__(self, settle_s: float = 0.1) -> None:
        self.settle_s = settle_s
        self._prior = _take_sample()

    @property
    def prior(self) -> PriorSample:
        return self._prior

    def system(self) -> SystemInfo:
        os_name, os_version = _os_name_version()
        try:
            boot_time: float | None = float(psutil.boot_time())
        except Exception:
            boot_time = None
        return SystemInfo(
            username=_username(),
            hostname=platform.node() or UNKNOWN,
            os_name=os_name,
            os_version=os_version,
            kernel=platform.release() or UNKNOWN,
            boot_time=boot_time,
        )

    def battery(self) -> BatteryInfo | None:
        try:
            batt = psutil.sensors_battery()
        except Exception:
            logger.debug("battery sensor unavailable", exc_info=True)
            return None
        if batt is None:
            return None

        plugged = batt.power_plugged
        secs = batt.secsleft
        if secs in (psutil.POWER_TIME_UNLIMITED, psutil.POWER_TIME_UNKNOWN) or secs is None or secs < 0:
            secs_left = None
        else:
            secs_left = int(secs)
        return BatteryInfo(
            percent=float(batt.percent),
            charging=bool(plugged) and batt.percent < 100,
            plugged=plugged,
            secs_left=secs_left,
        )

    def processor(self) -> ProcessorInfo:
        elapsed = time.monotonic() - self._prior.captured_at
        if elapsed < self.settle_s:
            time.sleep(self.settle_s - elapsed)
        current = _take_sample()
        usage = cpu_usage_percent(self._prior, current)
        self._prior = current

        info = _read_cpuinfo()
        model = info.get("model name") or info.get("Hardware") or platform.processor() or UNKNOWN
        vendor = info.get("vendor_id") or info.get("CPU implementer") or UNKNOWN

        try:
            freq = psutil.cpu_freq()
        except Exception:
            freq = None

        return ProcessorInfo(
            model=model.strip(),
            vendor=vendor.strip(),
            frequency_mhz=(float(freq.current) if freq and freq.current else None),
            usage_percent=usage,
            cores_logical=psutil.cpu_count(logical=True) or 1,
            cores_physical=psutil.cpu_count(logical=False),
        )

    def disks(self) -> list[DiskInfo]:
        out: list[DiskInfo] = []
        seen: set[str] = set()
        for part in psutil.disk_partitions(all=False):
            if part.fstype in _PSEUDO_FSTYPES or part.device in seen:
                continue
            try:
                usage = psutil.disk_usage(part.mountpoint)
            except (PermissionError, OSError):
                continue
            seen.add(part.device)
            out.append(
                DiskInfo(
                    mountpoint=part.mountpoint,
                    used_gb=usage.used / (1024**3),
                    total_gb=usage.total / (1024**3),
                    percent=float(usage.percent),
                )
            )
        return out

    def sections(self, enabled: list[str] | tuple[str, ...]) -> list[InfoSection]:
        out: list[InfoSection] = []
        for key in enabled:
            if key not in SECTION_KEYS:
                logger.warning("unknown section %s", key, extra={"event": "unknown_section"})
                continue
            if key == "system":
                out.append(system_section(self.system()))
            elif key == "battery":
                battery = self.battery()
                if battery is not None:
                    out.append(battery_section(battery))
            elif key == "processor":
                out.append(processor_section(self.processor()))
            elif key == "disk":
                disks = self.disks()
                if disks:
                    out.append(disk_section(disks))
        return out
