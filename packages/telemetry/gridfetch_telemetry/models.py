"""Typed telemetry models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    username: str
    hostname: str
    os_name: str
    os_version: str
    kernel: str
    boot_time: float | None = None

    @property
    def identity(self) -> str:
        return f"{self.username}@{self.hostname}"

    @property
    def os_label(self) -> str:
        return " ".join(part for part in (self.os_name, self.os_version) if part)


@dataclass(frozen=True)
class BatteryInfo:
    percent: float
    charging: bool
    plugged: bool | None
    secs_left: int | None


@dataclass(frozen=True)
class ProcessorInfo:
    model: str
    vendor: str
    frequency_mhz: float | None
    usage_percent: float
    cores_logical: int
    cores_physical: int | None


@dataclass(frozen=True)
class DiskInfo:
    mountpoint: str
    used_gb: float
    total_gb: float
    percent: float


@dataclass(frozen=True)
class PriorSample:
    """CPU time totals taken at one instant, the baseline for the next usage reading."""

    captured_at: float
    busy: float
    total: float


@dataclass(frozen=True)
class InfoSection:
    key: str
    title: str
    rows: tuple[tuple[str, str], ...]
    icon: str | None = None
