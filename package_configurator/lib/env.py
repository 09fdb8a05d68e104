from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping


@dataclass(frozen=True)
class Paths:
    installer_dir: str = "/root/installer"
    home_root: str = "/home"
    root_home: str = "/root"
    sudoers: str = "/etc/sudoers"
    systemd_unit_dir: str = "/etc/systemd/system"
    shadowsocks_dir: str = "/etc/shadowsocks-libev"

    def staged(self, name: str) -> Path:
        """Location of a file an earlier installer stage left for us."""
        return Path(self.installer_dir) / name

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Paths":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"Unknown paths keys: {', '.join(unknown)}")
        return cls(**{k: str(v) for k, v in raw.items()})


PATHS = Paths()
DEFAULT_CONFIG_PATH = str(PATHS.staged("config.yaml"))
