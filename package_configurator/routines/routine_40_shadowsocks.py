from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict

from ..config import ShadowsocksConfig
from ..context import ConfigContext
from ..errors import ConfigurationError
from ..lib.files import make_dirs, move_file, read_text, write_text

logger = logging.getLogger(__name__)

UNIT = "ss-local.service"
REQUIRED_FIELDS = ("server", "password")

# A top-level scalar value: string, number, true, false or null.
_SCALAR = r'"(?:[^"\\]|\\.)*"|-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?|true|false|null'


def _splice(text: str, key: str, value: Any) -> str:
    """Replace the value of `key` in place, leaving all other bytes untouched."""

    pattern = re.compile(r'("' + re.escape(key) + r'"\s*:\s*)(?:' + _SCALAR + r")")
    encoded = json.dumps(value)
    out, n = pattern.subn(lambda m: m.group(1) + encoded, text)
    if n != 1:
        raise ConfigurationError(f"shadowsocks config template: expected one scalar {key!r} field, found {n}")
    return out


def render_config(template: str, creds: ShadowsocksConfig) -> str:
    """Fill the credentials into the staged JSON template."""

    try:
        data: Dict[str, Any] = json.loads(template)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"shadowsocks config template is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError("shadowsocks config template must be a JSON object")

    fields = list(REQUIRED_FIELDS)
    if creds.server_port is not None:
        fields.append("server_port")
    missing = [k for k in fields if k not in data]
    if missing:
        raise ConfigurationError(f"shadowsocks config template lacks fields: {', '.join(missing)}")

    out = _splice(template, "server", creds.server)
    out = _splice(out, "password", creds.password)
    if creds.server_port is not None:
        out = _splice(out, "server_port", creds.server_port)
    return out


class ShadowsocksRoutine:
    package = "shadowsocks-libev"

    def run(self, ctx: ConfigContext) -> None:
        creds = ctx.config.shadowsocks
        if creds is None or not creds.server or not creds.password:
            raise ConfigurationError("shadowsocks-libev selected but shadowsocks.server/password not configured")

        move_file(ctx.paths.staged(UNIT), Path(ctx.paths.systemd_unit_dir) / UNIT, dry_run=ctx.dry_run)

        config_dir = Path(ctx.paths.shadowsocks_dir)
        make_dirs(config_dir, dry_run=ctx.dry_run)
        config_path = config_dir / "config.json"
        move_file(ctx.paths.staged("ss-config.json"), config_path, dry_run=ctx.dry_run)

        if ctx.dry_run:
            logger.info("Would fill server and password into %s", str(config_path))
        else:
            write_text(config_path, render_config(read_text(config_path), creds))

        ctx.enable_service(UNIT)
        logger.info("shadowsocks-libev configured for server %s", creds.server)
