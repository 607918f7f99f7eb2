"""
Detection of the host platform and translation of its raw CPU and OS
identifiers into the names used by distribution sites.
"""

import platform as _platform
import struct
import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

CPU_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "x86_64": "amd64",
        "x64": "amd64",
        "x86": "386",
        "arm": "arm",
        "arm64": "arm64",
    }
)

OS_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "darwin": "darwin",
        "linux": "linux",
        "mswin32": "windows",
        "mswin64": "windows",
    }
)

# Raw machine identifiers reported by Python mapped onto the CPU keys above.
_MACHINE_ALIASES = {
    "amd64": "x86_64",
    "x86_64": "x86_64",
    "x64": "x64",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "x86": "x86",
    "aarch64": "arm64",
    "arm64": "arm64",
    "arm": "arm",
}


@dataclass(frozen=True)
class HostPlatform:
    """
    Raw CPU and OS identifiers of a machine, e.g. ``x86_64`` and ``linux``.
    """

    cpu: str
    os: str

    def __str__(self) -> str:
        return f"{self.cpu}-{self.os}"

    @classmethod
    def parse(cls, raw: str) -> "HostPlatform":
        """
        Build a HostPlatform from a ``cpu-os`` or ``cpu-vendor-os`` string.
        """
        parts = raw.strip().lower().split("-")
        if len(parts) < 2 or not parts[0] or not parts[-1]:
            raise ValueError(f"Cannot parse platform string: {raw!r}")
        return cls(cpu=parts[0], os=parts[-1])

    @classmethod
    def local(cls) -> "HostPlatform":
        """
        Detect the platform of the running interpreter.
        """
        return cls(cpu=_normalize_machine(_platform.machine()), os=_normalize_os(sys.platform))


def _normalize_machine(machine: str) -> str:
    machine = machine.lower()
    if machine in _MACHINE_ALIASES:
        return _MACHINE_ALIASES[machine]
    if machine.startswith("armv"):
        return "arm"
    return machine


def _normalize_os(system: str) -> str:
    system = system.lower()
    if system.startswith("linux"):
        return "linux"
    if system == "darwin":
        return "darwin"
    if system in ("win32", "cygwin", "msys"):
        return "mswin64" if struct.calcsize("P") == 8 else "mswin32"
    return system


def resolve_name_tables(
    cpu_names: Optional[Mapping[str, str]] = None,
    os_names: Optional[Mapping[str, str]] = None,
) -> Tuple[Mapping[str, str], Mapping[str, str]]:
    """
    Combine caller supplied name tables with the defaults.

    A supplied table replaces the corresponding default entirely; entries are
    never merged. The returned tables are read-only.
    """
    resolved_cpu = CPU_NAMES if cpu_names is None else MappingProxyType(dict(cpu_names))
    resolved_os = OS_NAMES if os_names is None else MappingProxyType(dict(os_names))
    return resolved_cpu, resolved_os


def resolve_platform_names(
    host: HostPlatform,
    cpu_names: Optional[Mapping[str, str]] = None,
    os_names: Optional[Mapping[str, str]] = None,
) -> Tuple[Optional[str], Optional[str]]:
    """
    Returns the ``(platform_os_name, platform_cpu_name)`` pair for ``host``.

    Raw identifiers missing from the tables resolve to None.
    """
    resolved_cpu, resolved_os = resolve_name_tables(cpu_names, os_names)
    return resolved_os.get(host.os), resolved_cpu.get(host.cpu)
