from __future__ import annotations

from typing import Dict, List, Protocol

from ..context import ConfigContext
from .routine_10_sudo import SudoRoutine
from .routine_20_zsh import ZshRoutine
from .routine_30_code import CodeRoutine
from .routine_40_shadowsocks import ShadowsocksRoutine
from .routine_50_packages import GvfsGoogleRoutine, VirtManagerRoutine
from .routine_60_services import ServiceRoutine


class Routine(Protocol):
    """Fixed configuration steps for one trigger package."""

    package: str

    def run(self, ctx: ConfigContext) -> None:
        ...


# Dispatch order. Packages not listed here are ignored.
ROUTINES: tuple[Routine, ...] = (
    SudoRoutine(),
    ZshRoutine(),
    CodeRoutine(),
    ShadowsocksRoutine(),
    GvfsGoogleRoutine(),
    VirtManagerRoutine(),
    ServiceRoutine("dhcpcd", "dhcpcd.service"),
    ServiceRoutine("gdm", "gdm.service"),
    ServiceRoutine("networkmanager", "NetworkManager.service"),
)


def routine_table() -> Dict[str, Routine]:
    return {r.package: r for r in ROUTINES}


def supported_packages() -> List[str]:
    return [r.package for r in ROUTINES]


__all__ = [
    "Routine",
    "ROUTINES",
    "routine_table",
    "supported_packages",
    "SudoRoutine",
    "ZshRoutine",
    "CodeRoutine",
    "ShadowsocksRoutine",
    "GvfsGoogleRoutine",
    "VirtManagerRoutine",
    "ServiceRoutine",
]
