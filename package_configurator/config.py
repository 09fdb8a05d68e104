from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .lib.env import PATHS, Paths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShadowsocksConfig:
    server: str
    password: str
    server_port: Optional[int] = None


@dataclass(frozen=True)
class Configuration:
    """Finalized description of the target system, read-only from here on."""

    username: str
    pacman_packages: Tuple[str, ...] = ()
    vscode_extensions: Tuple[str, ...] = ()
    shadowsocks: Optional[ShadowsocksConfig] = None
    paths: Paths = field(default=PATHS)
    dry_run: bool = False

    def has_package(self, package: str) -> bool:
        return package in self.pacman_packages


def _detect_format(path: Path) -> str:
    ext = path.suffix.lower().lstrip(".")
    if ext in {"json", "yaml", "yml"}:
        return ext
    # Default to JSON for unknown extensions.
    return "json"


def _read_raw(p: Path) -> Dict[str, Any]:
    fmt = _detect_format(p)
    if fmt in {"yaml", "yml"}:
        try:
            import yaml  # type: ignore
        except Exception as e:  # pragma: no cover
            raise RuntimeError(
                "YAML configuration requested but PyYAML is not available. "
                "Use a JSON configuration or add PyYAML to the live environment."
            ) from e
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    else:
        data = json.loads(p.read_text(encoding="utf-8"))

    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must be an object/dict, got {type(data)}")
    return data


def _string_list(raw: Any, key: str) -> Tuple[str, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list) or not all(isinstance(p, str) for p in raw):
        raise ValueError(f"packages.{key} must be a list of strings")
    return tuple(raw)


def _shadowsocks(raw: Any) -> Optional[ShadowsocksConfig]:
    if not raw:
        return None
    if not isinstance(raw, dict):
        raise ValueError("shadowsocks must be a mapping")
    port = raw.get("server_port")
    return ShadowsocksConfig(
        server=str(raw.get("server") or ""),
        password=str(raw.get("password") or ""),
        server_port=int(port) if port is not None else None,
    )


def configuration_from_dict(raw: Dict[str, Any]) -> Configuration:
    system = raw.get("system") or {}
    packages = raw.get("packages") or {}
    if not isinstance(system, dict) or not isinstance(packages, dict):
        raise ValueError("system and packages must be mappings")

    username = str(system.get("username") or "").strip()
    if not username:
        raise ValueError("system.username is required")

    paths_raw = raw.get("paths") or {}
    if not isinstance(paths_raw, dict):
        raise ValueError("paths must be a mapping")

    return Configuration(
        username=username,
        pacman_packages=_string_list(packages.get("pacman"), "pacman"),
        vscode_extensions=_string_list(packages.get("vscode"), "vscode"),
        shadowsocks=_shadowsocks(raw.get("shadowsocks")),
        paths=Paths.from_mapping(paths_raw),
        dry_run=bool(raw.get("dry_run", False)),
    )


def load_configuration(path: str) -> Configuration:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    config = configuration_from_dict(_read_raw(p))
    logger.info(
        "Loaded configuration %s (user=%s, %d packages, %d extensions)",
        str(p),
        config.username,
        len(config.pacman_packages),
        len(config.vscode_extensions),
    )
    return config
